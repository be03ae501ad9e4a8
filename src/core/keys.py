# src/core/keys.py - v1
"""Map keys used while indexing cache entries.

``ReaderField`` pairs a reader key with a field name, ``ValueId`` stands for
one cached value object. Both compare reader keys and values by identity, never
by ``==``: two equal arrays are still two copies in memory.
"""

from __future__ import annotations

from typing import Any


class ReaderField:
    """(reader key, field name) pair usable as a dict key."""

    __slots__ = ("reader_key", "field_name")

    def __init__(self, reader_key: Any, field_name: str) -> None:
        self.reader_key = reader_key
        self.field_name = field_name

    def __hash__(self) -> int:
        return hash((id(self.reader_key), self.field_name))

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ReaderField):
            return NotImplemented
        return (
            self.reader_key is other.reader_key
            and self.field_name == other.field_name
        )

    def __str__(self) -> str:
        return f"{self.reader_key}+{self.field_name}"

    def __repr__(self) -> str:
        return f"ReaderField({self.reader_key!r}, {self.field_name!r})"


class ValueId:
    """Identity token for a cached value.

    Holds a reference to the value so its ``id()`` cannot be reused while the
    token is alive.
    """

    __slots__ = ("value",)

    def __init__(self, value: Any) -> None:
        self.value = value

    def __hash__(self) -> int:
        return id(self.value)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ValueId):
            return NotImplemented
        return self.value is other.value

    def __repr__(self) -> str:
        return f"ValueId({type(self.value).__name__}#{id(self.value)})"
