"""Checks for whether any node in a tree satisfies a predicate."""

from __future__ import annotations

from typing import Any

from treequery.filters import (
    NotFoundError,
    Predicate,
    filter_bool,
    filter_float,
    filter_int,
    filter_string,
    filter_uint,
)
from treequery.find import find_node


def has(tree: Any, predicate: Predicate) -> bool:
    """Return True if any node of ``tree`` satisfies ``predicate``.

    A tree of None holds nothing, so the answer is False.
    """
    if tree is None:
        return False
    try:
        find_node(tree, predicate)
    except NotFoundError:
        return False
    return True


def has_string(tree: Any, predicate: Predicate) -> bool:
    """Return True if any string node satisfies ``predicate``."""
    return has(tree, filter_string(predicate))


def has_bool(tree: Any, predicate: Predicate) -> bool:
    """Return True if any bool node satisfies ``predicate``."""
    return has(tree, filter_bool(predicate))


def has_int(tree: Any, predicate: Predicate) -> bool:
    """Return True if any signed integer node satisfies ``predicate``."""
    return has(tree, filter_int(predicate))


def has_uint(tree: Any, predicate: Predicate) -> bool:
    """Return True if any unsigned integer node satisfies ``predicate``."""
    return has(tree, filter_uint(predicate))


def has_float(tree: Any, predicate: Predicate) -> bool:
    """Return True if any float node satisfies ``predicate``."""
    return has(tree, filter_float(predicate))