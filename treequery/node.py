"""Tree nodes and the rules for walking nested Python data."""

from __future__ import annotations

import dataclasses
from collections.abc import Iterator, Mapping, Sequence
from typing import Any

_UINT_MAX = 2**64 - 1
_LEAF_SEQUENCES = (str, bytes, bytearray, memoryview)


class UInt(int):
    """An unsigned 64-bit integer, told apart from signed ints by the typed filters."""

    def __new__(cls, value: Any = 0) -> UInt:
        number = super().__new__(cls, value)
        if not 0 <= number <= _UINT_MAX:
            raise ValueError(f"unsigned integer out of range: {int(number)}")
        return number

    def __repr__(self) -> str:
        return f"UInt({int(self)})"

    def __str__(self) -> str:
        return str(int(self))


def _format_key(key: Any) -> str:
    if isinstance(key, bool):
        return "true" if key else "false"
    if key is None:
        return "<nil>"
    return str(key)


def _join(parent: str, key: str, separator: str) -> str:
    return f"{parent}{separator}{key}" if parent else key


@dataclasses.dataclass(frozen=True)
class Node:
    """A value in a tree together with its key and its path from the root.

    ``full_key`` joins mapping keys and dataclass field names with dots and
    appends sequence positions as ``[i]``; ``key`` is the last step alone.
    """

    full_key: str
    key: str
    value: Any

    def children(self) -> Iterator[Node]:
        """Yield the direct children of this node; leaves yield nothing.

        Mappings yield one child per entry, lists and tuples one per item,
        and dataclass instances one per public field. Strings, bytes and all
        other values are leaves.
        """
        value = self.value
        if isinstance(value, Mapping):
            for raw_key, item in value.items():
                key = _format_key(raw_key)
                yield Node(_join(self.full_key, key, "."), key, item)
        elif isinstance(value, Sequence) and not isinstance(value, _LEAF_SEQUENCES):
            for position, item in enumerate(value):
                key = f"[{position}]"
                yield Node(_join(self.full_key, key, ""), key, item)
        elif dataclasses.is_dataclass(value) and not isinstance(value, type):
            for field in dataclasses.fields(value):
                if field.name.startswith("_"):
                    continue
                yield Node(
                    _join(self.full_key, field.name, "."),
                    field.name,
                    getattr(value, field.name),
                )


def root_node(tree: Any) -> Node:
    """Return the node that stands for the whole tree, with empty keys."""
    return Node("", "", tree)