# src/core/models.py - v1
"""Field cache domain models: CacheEntry, CreationPlaceholder, FieldCacheLike.

Entries are compared and hashed by identity. Two entries recording the same
reader, field and value are still two distinct records.
"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass, field
from typing import Any, Protocol, runtime_checkable

from cachesanity.core.ram_usage import estimate_size, human_readable_units


class CreationPlaceholder:
    """Stored by a cache while the real value for a key is being computed."""

    __slots__ = ("value",)

    def __init__(self) -> None:
        self.value: Any = None

    def __repr__(self) -> str:
        return "CreationPlaceholder()"


@dataclass(eq=False)
class CacheEntry:
    """A single cached value: (reader key, field, type, custom) => value."""

    reader_key: Any
    field_name: str
    cache_type: str
    custom: Any
    value: Any
    estimated_size_bytes: int | None = field(default=None)

    def estimate_size(self) -> int:
        """Compute and remember the RAM used by ``value``.

        Errors raised while sizing the value are not caught.
        """
        self.estimated_size_bytes = estimate_size(self.value)
        return self.estimated_size_bytes

    @property
    def estimated_size(self) -> str | None:
        """Human readable size, or None until estimate_size() ran."""
        if self.estimated_size_bytes is None:
            return None
        return human_readable_units(self.estimated_size_bytes)

    def __str__(self) -> str:
        parts = [
            f"'{self.reader_key}'=>'{self.field_name}',",
            f"{self.cache_type},{self.custom}",
            f"=>{type(self.value).__module__}.{type(self.value).__qualname__}",
            f"#{id(self.value)}",
        ]
        size = self.estimated_size
        if size is not None:
            parts.append(f" (size =~ {size})")
        return "".join(parts)


@runtime_checkable
class FieldCacheLike(Protocol):
    """Anything that can hand out a snapshot of its entries."""

    def get_cache_entries(self) -> Sequence[CacheEntry]: ...
