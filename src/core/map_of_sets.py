# src/core/map_of_sets.py - v1
"""One-to-many index from a key to a set of values.

Values for a key keep their first-insertion order so reports built from the
index are reproducible.
"""

from __future__ import annotations

from collections.abc import Hashable, Iterable, Iterator, KeysView, Mapping
from typing import Generic, TypeVar

K = TypeVar("K", bound=Hashable)
V = TypeVar("V", bound=Hashable)


class SetsView(Mapping[K, KeysView[V]], Generic[K, V]):
    """Read-only view over a MapOfSets backing map."""

    def __init__(self, backing: dict[K, dict[V, None]]) -> None:
        self._backing = backing

    def __getitem__(self, key: K) -> KeysView[V]:
        return self._backing[key].keys()

    def __iter__(self) -> Iterator[K]:
        return iter(self._backing)

    def __len__(self) -> int:
        return len(self._backing)

    def __contains__(self, key: object) -> bool:
        return key in self._backing


class MapOfSets(Generic[K, V]):
    """Map of keys to insertion-ordered sets of values."""

    def __init__(self) -> None:
        self._map: dict[K, dict[V, None]] = {}
        self._view: SetsView[K, V] = SetsView(self._map)

    @property
    def map(self) -> SetsView[K, V]:
        return self._view

    def put(self, key: K, value: V) -> int:
        """Add ``value`` to the set for ``key``.

        Returns:
            Size of the set for ``key`` after insertion.
        """
        values = self._map.setdefault(key, {})
        values[value] = None
        return len(values)

    def put_all(self, key: K, values: Iterable[V]) -> int:
        """Add every value to the set for ``key``; returns the resulting size."""
        bucket = self._map.setdefault(key, {})
        for value in values:
            bucket[value] = None
        return len(bucket)

    def remove(self, key: K) -> None:
        """Drop ``key`` and its whole set."""
        del self._map[key]

    def __contains__(self, key: object) -> bool:
        return key in self._map

    def __len__(self) -> int:
        return len(self._map)
