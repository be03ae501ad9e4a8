# tests/unit/sanity/test_unit_value_mismatch.py - v1
"""Tests for sanity/value_mismatch.py."""

from __future__ import annotations

from cachesanity.readers.memory import LeafReader
from cachesanity.sanity.indexing import build_index
from cachesanity.sanity.models import InsanityType
from cachesanity.sanity.value_mismatch import check_value_mismatch


class TestCheckValueMismatch:
    def test_no_mismatch(self, entry, leaf, values):
        arr = values()
        index = build_index([entry(leaf, "f", arr), entry(leaf, "f", arr)])
        assert check_value_mismatch(index) == []

    def test_equal_but_distinct_values(self, entry, leaf, values):
        e1 = entry(leaf, "price", values())
        e2 = entry(leaf, "price", values())
        found = check_value_mismatch(build_index([e1, e2]))
        assert len(found) == 1
        assert found[0].kind is InsanityType.VALUE_MISMATCH
        assert found[0].msg == "Multiple distinct value objects for seg0+price"
        assert found[0].entries == (e1, e2)

    def test_grouped_by_value(self, entry, leaf, values):
        a, b = values(), values()
        e1 = entry(leaf, "f", a, cache_type="int32")
        e2 = entry(leaf, "f", b)
        e3 = entry(leaf, "f", a, cache_type="int64")
        found = check_value_mismatch(build_index([e1, e2, e3]))
        assert found[0].entries == (e1, e3, e2)

    def test_one_finding_per_key(self, entry, values):
        r1, r2 = LeafReader("r1"), LeafReader("r2")
        entries = [
            entry(r1, "f", values()),
            entry(r1, "f", values()),
            entry(r1, "f", values()),
            entry(r2, "f", values()),
            entry(r2, "f", values()),
            entry(r2, "g", values()),
        ]
        found = check_value_mismatch(build_index(entries))
        assert sorted(i.msg for i in found) == [
            "Multiple distinct value objects for r1+f",
            "Multiple distinct value objects for r2+f",
        ]
        assert len(found[0].entries) == 3
