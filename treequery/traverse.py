"""Collect every node in a tree that satisfies a predicate."""

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
    """Tell whether ``value`` has children to walk into."""
    if isinstance(value, Mapping):
        return True
    if isinstance(value, Sequence) and not isinstance(value, _LEAF_SEQUENCES):
        return True
    return dataclasses.is_dataclass(value) and not isinstance(value, type)


def _walk(node: Node, predicate: Predicate) -> Iterator[Node]:
    """Yield matching nodes depth first; a matched node is not descended into."""
    if not _is_branch(node.value):
        if predicate(node):
            yield node
        return
    for child in node.children():
        if predicate(child):
            yield child
        elif _is_branch(child.value):
            yield from _walk(child, predicate)


def iter_nodes(tree: Any, predicate: Predicate) -> Iterator[Node]:
    """Return an iterator over every node of ``tree`` that satisfies ``predicate``.

    Nodes come in depth-first order. Once a node matches, its own children are
    not visited. Raises NilTreeError at once if ``tree`` is None.
    """
    if tree is None:
        raise NilTreeError()
    return _walk(root_node(tree), predicate)


def _collect(tree: Any, predicate: Predicate) -> list[Node]:
    nodes = list(iter_nodes(tree, predicate))
    if not nodes:
        raise NotFoundError()
    return nodes


def traverse(tree: Any, predicate: Predicate) -> list[Any]:
    """Return the values of all nodes that satisfy ``predicate``.

    Raises NilTreeError if ``tree`` is None and NotFoundError if nothing matches.
    """
    return [node.value for node in _collect(tree, predicate)]


def traverse_string(tree: Any, predicate: Predicate) -> list[str]:
    """Return every string value whose node satisfies ``predicate``."""
    return [str(node.value) for node in _collect(tree, filter_string(predicate))]


def traverse_bool(tree: Any, predicate: Predicate) -> list[bool]:
    """Return every bool value whose node satisfies ``predicate``."""
    return [bool(node.value) for node in _collect(tree, filter_bool(predicate))]


def traverse_int(tree: Any, predicate: Predicate) -> list[int]:
    """Return every signed integer value whose node satisfies ``predicate``."""
    return [int(node.value) for node in _collect(tree, filter_int(predicate))]


def traverse_uint(tree: Any, predicate: Predicate) -> list[UInt]:
    """Return every unsigned integer value whose node satisfies ``predicate``."""
    return [UInt(node.value) for node in _collect(tree, filter_uint(predicate))]


def traverse_float(tree: Any, predicate: Predicate) -> list[float]:
    """Return every float value whose node satisfies ``predicate``."""
    return [float(node.value) for node in _collect(tree, filter_float(predicate))]