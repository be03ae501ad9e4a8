# tests/unit/core/test_unit_bits.py - v1
"""Tests for core/bits.py."""

from __future__ import annotations

import numpy as np
import pytest

from cachesanity.core.bits import FixedBits, MatchAllBits, MatchNoBits


class TestFixedBits:
    def test_of_length_all_clear(self):
        bits = FixedBits.of_length(5)
        assert len(bits) == 5
        assert bits.cardinality() == 0

    def test_set_get(self):
        bits = FixedBits.of_length(4)
        bits.set(2)
        assert bits.get(2) is True
        assert bits.get(1) is False
        assert bits.cardinality() == 1

    def test_from_iterable(self):
        bits = FixedBits([True, False, True])
        assert bits.array.dtype == np.bool_
        assert bits.cardinality() == 2

    def test_rejects_2d(self):
        with pytest.raises(ValueError, match="1-d"):
            FixedBits(np.zeros((2, 2), dtype=bool))


class TestConstantBits:
    def test_match_all(self):
        bits = MatchAllBits(3)
        assert len(bits) == 3
        assert bits.get(0) is True

    def test_match_none(self):
        bits = MatchNoBits(3)
        assert bits.get(2) is False
