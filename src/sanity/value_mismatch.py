# src/sanity/value_mismatch.py - v1
"""Detect reader+field keys cached with more than one distinct value object."""

from __future__ import annotations

import logging

from cachesanity.sanity.indexing import EntryIndex
from cachesanity.sanity.models import Insanity, InsanityType

logger = logging.getLogger(__name__)


def check_value_mismatch(index: EntryIndex) -> list[Insanity]:
    """One VALUEMISMATCH finding per ambiguous reader+field key.

    Evidence is every entry of every value cached for the key, grouped by
    value in the order the values were first seen.
    """
    insanity: list[Insanity] = []

    for rf in index.val_mismatch_keys:
        bad_entries = index.entries_for(rf)
        insanity.append(Insanity(
            InsanityType.VALUE_MISMATCH,
            f"Multiple distinct value objects for {rf}",
            tuple(bad_entries),
        ))

    if insanity:
        logger.debug("%d reader+field keys hold distinct values", len(insanity))
    return insanity
