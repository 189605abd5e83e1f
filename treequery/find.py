"""Depth-first search for the first node in a tree that satisfies a predicate."""

from __future__ import annotations

import dataclasses
from collections.abc import Iterator, Mapping, Sequence
from typing import Any

from treequery.filters import (
    NilTreeError,
    NotFoundError,
    Predicate,
    filter_bool,
    filter_float,
    filter_int,
    filter_string,
    filter_uint,
)
from treequery.node import Node, UInt, root_node

_LEAF_SEQUENCES = (str, bytes, bytearray, memoryview)


def _is_branch(value: Any) -> bool:
    """Tell whether ``value`` is walked into rather than tested as a leaf."""
    if isinstance(value, Mapping):
        return True
    if isinstance(value, Sequence) and not isinstance(value, _LEAF_SEQUENCES):
        return True
    return dataclasses.is_dataclass(value) and not isinstance(value, type)


def _matches(node: Node, predicate: Predicate) -> Iterator[Node]:
    """Yield matching nodes depth first, not descending into matched nodes.

    A branch is never tested itself; its children are. A leaf given as the
    starting node is tested on its own.
    """
    if not _is_branch(node.value):
        if predicate(node):
            yield node
        return
    for child in node.children():
        if predicate(child):
            yield child
        elif _is_branch(child.value):
            yield from _matches(child, predicate)


def find_node(tree: Any, predicate: Predicate) -> Node:
    """Return the first node of ``tree`` that satisfies ``predicate``.

    Raises NilTreeError if ``tree`` is None and NotFoundError if no node matches.
    """
    if tree is None:
        raise NilTreeError()
    for node in _matches(root_node(tree), predicate):
        return node
    raise NotFoundError()


def find(tree: Any, predicate: Predicate) -> Any:
    """Return the value of the first node that satisfies ``predicate``."""
    return find_node(tree, predicate).value


def find_string(tree: Any, predicate: Predicate) -> str:
    """Return the first string value whose node satisfies ``predicate``."""
    return str(find_node(tree, filter_string(predicate)).value)


def find_bool(tree: Any, predicate: Predicate) -> bool:
    """Return the first bool value whose node satisfies ``predicate``."""
    return bool(find_node(tree, filter_bool(predicate)).value)


def find_int(tree: Any, predicate: Predicate) -> int:
    """Return the first signed integer value whose node satisfies ``predicate``."""
    return int(find_node(tree, filter_int(predicate)).value)


def find_uint(tree: Any, predicate: Predicate) -> UInt:
    """Return the first unsigned integer value whose node satisfies ``predicate``."""
    return UInt(find_node(tree, filter_uint(predicate)).value)


def find_float(tree: Any, predicate: Predicate) -> float:
    """Return the first float value whose node satisfies ``predicate``."""
    return float(find_node(tree, filter_float(predicate)).value)