# src/readers/memory.py - v1
"""In-memory readers for callers that model a reader hierarchy themselves.

A ``LeafReader`` is its own cache key. A ``CompositeReader`` wraps sub-readers
and is also its own cache key, so walking from a composite reaches every
nested reader. Closing a reader makes ``context`` raise AlreadyClosedError.
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any

from cachesanity.readers.base import AlreadyClosedError, IndexReader, ReaderContext


class _Context(ReaderContext):
    def __init__(
        self, reader: IndexReader, children: Sequence[ReaderContext] | None
    ) -> None:
        self._reader = reader
        self._children = children

    @property
    def reader(self) -> IndexReader:
        return self._reader

    @property
    def children(self) -> Sequence[ReaderContext] | None:
        return self._children


class _MemoryReader(IndexReader):
    def __init__(self, name: str) -> None:
        self.name = name
        self._closed = False

    @property
    def core_cache_key(self) -> Any:
        return self

    @property
    def closed(self) -> bool:
        return self._closed

    def close(self) -> None:
        self._closed = True

    def _ensure_open(self) -> None:
        if self._closed:
            raise AlreadyClosedError(f"{self.name} is closed")

    def __str__(self) -> str:
        return self.name

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.name!r})"


class LeafReader(_MemoryReader):
    """Reader without sub-readers."""

    @property
    def context(self) -> ReaderContext:
        self._ensure_open()
        return _Context(self, None)


class CompositeReader(_MemoryReader):
    """Reader made of ordered sub-readers."""

    def __init__(self, name: str, children: Sequence[IndexReader]) -> None:
        super().__init__(name)
        self.sub_readers: list[IndexReader] = list(children)

    @property
    def context(self) -> ReaderContext:
        self._ensure_open()
        children = [_Context(sub, None) for sub in self.sub_readers]
        return _Context(self, children)
