# src/readers/base.py - v1
"""Reader hierarchy interface consumed by the sanity checker.

A reader exposes a ``context``. Composite readers report their sub-reader
contexts through ``context.children``; leaf readers report ``None``. Every
reader exposes ``core_cache_key``, the identity field caches are keyed by.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Sequence
from typing import Any


class AlreadyClosedError(Exception):
    """Raised when a closed reader is asked for its context."""


class ReaderContext(ABC):
    """Position of a reader inside its hierarchy."""

    @property
    @abstractmethod
    def reader(self) -> IndexReader:
        """The reader this context belongs to."""

    @property
    @abstractmethod
    def children(self) -> Sequence[ReaderContext] | None:
        """Child contexts for a composite reader, None for a leaf."""


class IndexReader(ABC):
    """A reader over some data that field caches are keyed by."""

    @property
    @abstractmethod
    def context(self) -> ReaderContext:
        """Hierarchy context.

        Raises:
            AlreadyClosedError: If the reader was closed.
        """

    @property
    @abstractmethod
    def core_cache_key(self) -> Any:
        """Identity used as the reader key of cache entries."""
