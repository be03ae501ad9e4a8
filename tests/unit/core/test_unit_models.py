# tests/unit/core/test_unit_models.py - v1
"""Tests for core/models.py."""

from __future__ import annotations

import numpy as np
import pytest

from cachesanity.core.models import CacheEntry, CreationPlaceholder, FieldCacheLike


class _Unsizable:
    def __sizeof__(self):
        raise RuntimeError("cannot size")


class TestCacheEntry:
    def test_str_without_size(self, entry, leaf):
        arr = np.zeros(4, dtype=np.float32)
        e = entry(leaf, "price", arr, cache_type="float32", custom="DEFAULT")
        text = str(e)
        assert text.startswith("'seg0'=>'price',float32,DEFAULT=>numpy.ndarray#")
        assert text.endswith(str(id(arr)))
        assert "size =~" not in text

    def test_str_with_size(self, entry, leaf):
        e = entry(leaf, "price", np.zeros(1024, dtype=np.float64))
        e.estimate_size()
        assert e.estimated_size_bytes is not None
        assert e.estimated_size is not None
        assert str(e).endswith(f" (size =~ {e.estimated_size})")

    def test_identity_equality(self, entry, leaf):
        arr = np.zeros(2)
        a = entry(leaf, "f", arr)
        b = entry(leaf, "f", arr)
        assert a != b
        assert len({a, b}) == 2

    def test_estimate_failure_propagates(self, entry, leaf):
        e = entry(leaf, "f", _Unsizable())
        with pytest.raises(RuntimeError, match="cannot size"):
            e.estimate_size()


class TestFieldCacheLike:
    def test_duck_typed_cache(self):
        class Cache:
            def get_cache_entries(self):
                return []

        assert isinstance(Cache(), FieldCacheLike)
        assert not isinstance([], FieldCacheLike)


def test_creation_placeholder_repr():
    assert repr(CreationPlaceholder()) == "CreationPlaceholder()"
