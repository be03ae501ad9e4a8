# src/sanity/checker.py - v1
"""Field cache sanity checker.

Checks a snapshot of field cache entries for "insane" usage: the same field
cached for a composite reader and for its sub-readers (wasted RAM), or the
same reader+field cached as several distinct value objects. The checker never
touches the cache; it only reports.

Usage:
    findings = check_sanity(field_cache)
    for insanity in findings:
        print(insanity)

Entries whose value is a Bits vector or a CreationPlaceholder are ignored.
"""

from __future__ import annotations

import logging
import uuid
from collections import Counter
from collections.abc import Iterable, Sequence

from cachesanity.config.settings import Settings
from cachesanity.core.models import CacheEntry, FieldCacheLike
from cachesanity.logging.context import (
    clear_context,
    set_check_context,
    set_detector_context,
)
from cachesanity.sanity.indexing import build_index
from cachesanity.sanity.models import Insanity
from cachesanity.sanity.subreaders import check_subreaders
from cachesanity.sanity.value_mismatch import check_value_mismatch

logger = logging.getLogger(__name__)


class FieldCacheSanityChecker:
    """Runs both detectors over an array of cache entries."""

    def __init__(self) -> None:
        self._estimate_ram = False

    @classmethod
    def from_settings(cls, settings: Settings) -> FieldCacheSanityChecker:
        checker = cls()
        checker.set_ram_usage_estimator(settings.estimate_ram)
        return checker

    @property
    def estimate_ram(self) -> bool:
        return self._estimate_ram

    def set_ram_usage_estimator(self, flag: bool) -> None:
        """If set, every entry gets its size estimated before checking.

        Set it before calling check(), not while a check runs.
        """
        self._estimate_ram = flag

    def check(self, cache_entries: Sequence[CacheEntry] | None) -> list[Insanity]:
        """Test cache entries for insane usage.

        Args:
            cache_entries: Snapshot of the cache. None or empty means no findings.

        Returns:
            VALUEMISMATCH findings followed by SUBREADER findings.
        """
        if not cache_entries:
            return []

        set_check_context(uuid.uuid4().hex[:12])
        try:
            if self._estimate_ram:
                for entry in cache_entries:
                    entry.estimate_size()

            index = build_index(cache_entries)

            set_detector_context("value_mismatch")
            insanity = check_value_mismatch(index)
            set_detector_context("subreaders")
            insanity.extend(check_subreaders(index))
            set_detector_context(None)

            _log_outcome(len(cache_entries), insanity)
            return insanity
        finally:
            clear_context()


def check_sanity(
    cache: FieldCacheLike | Iterable[CacheEntry] | None,
) -> list[Insanity]:
    """Quick convenience check with size estimation enabled.

    Args:
        cache: A field cache exposing get_cache_entries(), or the entries.
    """
    if cache is None:
        entries: list[CacheEntry] = []
    elif isinstance(cache, FieldCacheLike):
        entries = list(cache.get_cache_entries())
    else:
        entries = list(cache)

    checker = FieldCacheSanityChecker()
    checker.set_ram_usage_estimator(True)
    return checker.check(entries)


def _log_outcome(entry_count: int, insanity: list[Insanity]) -> None:
    if not insanity:
        logger.info("Field cache is sane (%d entries checked)", entry_count)
        return
    by_kind = Counter(str(i.kind) for i in insanity)
    logger.warning(
        "Detected %d insane field cache usages in %d entries: %s",
        len(insanity), entry_count,
        ", ".join(f"{kind}={count}" for kind, count in sorted(by_kind.items())),
    )
