"""Errors and predicates for selecting nodes in a tree."""

from __future__ import annotations

from collections.abc import Callable

from treequery.node import Node, UInt

Predicate = Callable[[Node], bool]


class TreeError(Exception):
    """Base class for errors raised while querying a tree."""


class NilTreeError(TreeError, ValueError):
    """The tree to query is None."""

    def __init__(self, message: str = "tree is nil") -> None:
        super().__init__(message)


class NotFoundError(TreeError, LookupError):
    """No node in the tree satisfied the predicate."""

    def __init__(self, message: str = "No item found") -> None:
        super().__init__(message)


def _is_int(value: object) -> bool:
    return isinstance(value, int) and not isinstance(value, (bool, UInt))


def none_filter(node: Node) -> bool:
    """Accept every node visited during a walk."""
    return isinstance(node, Node)


def key_filter(key: str) -> Predicate:
    """Return a predicate that accepts nodes whose key equals ``key``."""
    return lambda node: node.key == key


def full_key_filter(full_key: str) -> Predicate:
    """Return a predicate that accepts nodes whose full key equals ``full_key``."""
    return lambda node: node.full_key == full_key


def filter_string(predicate: Predicate) -> Predicate:
    """Accept string nodes that also satisfy ``predicate``."""
    return lambda node: isinstance(node.value, str) and predicate(node)


def filter_bool(predicate: Predicate) -> Predicate:
    """Accept bool nodes that also satisfy ``predicate``."""
    return lambda node: isinstance(node.value, bool) and predicate(node)


def filter_int(predicate: Predicate) -> Predicate:
    """Accept signed integer nodes (not bool, not UInt) that satisfy ``predicate``."""
    return lambda node: _is_int(node.value) and predicate(node)


def filter_uint(predicate: Predicate) -> Predicate:
    """Accept UInt nodes that also satisfy ``predicate``."""
    return lambda node: isinstance(node.value, UInt) and predicate(node)


def filter_float(predicate: Predicate) -> Predicate:
    """Accept float nodes that also satisfy ``predicate``."""
    return lambda node: isinstance(node.value, float) and predicate(node)