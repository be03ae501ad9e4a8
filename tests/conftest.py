# tests/conftest.py - v1
"""Shared test fixtures: reader hierarchies and cache entry factories.

No external dependencies; everything lives in memory.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import Any

import numpy as np
import pytest

from cachesanity.core.models import CacheEntry
from cachesanity.readers.memory import CompositeReader, LeafReader

EntryFactory = Callable[..., CacheEntry]


def make_entry(
    reader_key: Any,
    field_name: str,
    value: Any,
    cache_type: str = "float32",
    custom: Any = None,
) -> CacheEntry:
    return CacheEntry(
        reader_key=reader_key,
        field_name=field_name,
        cache_type=cache_type,
        custom=custom,
        value=value,
    )


@pytest.fixture
def entry() -> EntryFactory:
    """Factory building a CacheEntry with default type and custom."""
    return make_entry


@pytest.fixture
def values() -> Callable[[], np.ndarray]:
    """Factory returning a fresh float array on each call."""
    return lambda: np.arange(8, dtype=np.float32)


# === FIXTURES: Reader hierarchies ===


@pytest.fixture
def leaf() -> LeafReader:
    return LeafReader("seg0")


@pytest.fixture
def three_levels() -> tuple[CompositeReader, CompositeReader, LeafReader]:
    """top -> mid -> seg, one reader per level."""
    seg = LeafReader("seg")
    mid = CompositeReader("mid", [seg])
    top = CompositeReader("top", [mid])
    return top, mid, seg


@pytest.fixture
def siblings() -> tuple[CompositeReader, LeafReader, LeafReader]:
    """top with two leaf sub-readers."""
    seg1 = LeafReader("seg1")
    seg2 = LeafReader("seg2")
    return CompositeReader("top", [seg1, seg2]), seg1, seg2
