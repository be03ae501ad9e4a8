# src/sanity/indexing.py - v1
"""Single pass over cache entries building the indexes both detectors use."""

from __future__ import annotations

import logging
from collections.abc import Iterable
from dataclasses import dataclass, field

from cachesanity.core.bits import Bits
from cachesanity.core.keys import ReaderField, ValueId
from cachesanity.core.map_of_sets import MapOfSets
from cachesanity.core.models import CacheEntry, CreationPlaceholder

logger = logging.getLogger(__name__)


@dataclass
class EntryIndex:
    """Indexes over one snapshot of cache entries."""

    # value identity -> entries caching that exact object
    val_id_to_items: MapOfSets[ValueId, CacheEntry] = field(default_factory=MapOfSets)
    # reader+field -> identities of the values cached for it
    reader_field_to_val_ids: MapOfSets[ReaderField, ValueId] = field(
        default_factory=MapOfSets
    )
    # reader+field keys known to map to more than one value
    val_mismatch_keys: dict[ReaderField, None] = field(default_factory=dict)
    skipped: int = 0

    def entries_for(self, rf: ReaderField) -> list[CacheEntry]:
        """All entries recorded for ``rf``, grouped by value identity."""
        items = self.val_id_to_items.map
        found: list[CacheEntry] = []
        for val_id in self.reader_field_to_val_ids.map[rf]:
            found.extend(items[val_id])
        return found


def is_ignorable(value: object) -> bool:
    """Values that never take part in a finding.

    A Bits value is the expected companion of a real array cached for the
    same field (docs-with-field), and placeholders are half-built entries.
    """
    return isinstance(value, (Bits, CreationPlaceholder))


def build_index(entries: Iterable[CacheEntry]) -> EntryIndex:
    """Index ``entries`` by value identity and by reader+field."""
    index = EntryIndex()

    for item in entries:
        val = item.value
        if is_ignorable(val):
            index.skipped += 1
            continue

        rf = ReaderField(item.reader_key, item.field_name)
        val_id = ValueId(val)

        # the indirect mapping dedups identical values for us
        index.val_id_to_items.put(val_id, item)
        if index.reader_field_to_val_ids.put(rf, val_id) > 1:
            index.val_mismatch_keys[rf] = None

    logger.debug(
        "Indexed %d reader+field keys, %d distinct values (%d entries skipped)",
        len(index.reader_field_to_val_ids), len(index.val_id_to_items), index.skipped,
    )
    return index
