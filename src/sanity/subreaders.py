# src/sanity/subreaders.py - v1
"""Detect fields cached at more than one level of a reader hierarchy.

For each cached reader+field key, the sub-readers of its reader are walked and
every sub-reader that also cached the same field becomes a "bad child" of the
key. When a walk reaches a key that already owns bad children, that key and
its children are folded into the current parent, so a duplication spanning
three levels is reported once, rooted at the topmost ancestor found.
"""

from __future__ import annotations

import logging

from cachesanity.core.keys import ReaderField
from cachesanity.core.map_of_sets import MapOfSets
from cachesanity.core.models import CacheEntry
from cachesanity.sanity.hierarchy import get_all_descendant_reader_keys
from cachesanity.sanity.indexing import EntryIndex
from cachesanity.sanity.models import Insanity, InsanityType

logger = logging.getLogger(__name__)


def find_bad_children(index: EntryIndex) -> MapOfSets[ReaderField, ReaderField]:
    """Map each topmost parent key to the descendant keys also cached."""
    rf_to_val_ids = index.reader_field_to_val_ids.map
    bad_kids: MapOfSets[ReaderField, ReaderField] = MapOfSets()
    seen: set[ReaderField] = set()

    for rf in rf_to_val_ids:
        if rf in seen:
            continue

        for kid_key in get_all_descendant_reader_keys(rf.reader_key):
            kid = ReaderField(kid_key, rf.field_name)

            if kid in bad_kids:
                # kid was processed as a parent already: take over its children
                bad_kids.put(rf, kid)
                bad_kids.put_all(rf, list(bad_kids.map[kid]))
                bad_kids.remove(kid)
            elif kid in rf_to_val_ids:
                bad_kids.put(rf, kid)
            seen.add(kid)

        seen.add(rf)

    return bad_kids


def check_subreaders(index: EntryIndex) -> list[Insanity]:
    """One SUBREADER finding per topmost parent with cached descendants.

    Evidence lists the parent's entries first, then each child's entries.
    """
    insanity: list[Insanity] = []
    bad_kids = find_bad_children(index)

    for parent, kids in bad_kids.map.items():
        bad_entries: list[CacheEntry] = index.entries_for(parent)
        for kid in kids:
            bad_entries.extend(index.entries_for(kid))

        insanity.append(Insanity(
            InsanityType.SUBREADER,
            f"Found caches for decendents of {parent}",
            tuple(bad_entries),
        ))

    if insanity:
        logger.debug("%d reader hierarchies cache a field more than once", len(insanity))
    return insanity
