# src/sanity/assertions.py - v1
"""Test-suite helper failing when a field cache is used insanely."""

from __future__ import annotations

import logging
from collections.abc import Callable, Sequence

from cachesanity.config.settings import Settings
from cachesanity.core.models import CacheEntry
from cachesanity.sanity.checker import FieldCacheSanityChecker
from cachesanity.sanity.models import ExpectedInsanity, Insanity

logger = logging.getLogger(__name__)


class InsaneCacheError(AssertionError):
    """Raised when unexpected insane cache usage is found."""

    def __init__(self, insanity: Sequence[Insanity]):
        self.insanity = list(insanity)
        body = "".join(str(i) for i in self.insanity)
        super().__init__(
            f"Found {len(self.insanity)} insane field cache usage(s):\n{body}"
        )


def assert_sane(
    entries: Sequence[CacheEntry] | None,
    expected: Callable[[Insanity], bool] | None = None,
    settings: Settings | None = None,
) -> list[Insanity | ExpectedInsanity]:
    """Check ``entries`` and fail on findings not marked expected.

    Args:
        entries: Cache snapshot to check.
        expected: Predicate selecting findings that are intentional; those are
            re-tagged EXPECTED and only logged.
        settings: Defaults to size estimation on and failing on insanity.

    Returns:
        All findings, expected ones re-tagged.

    Raises:
        InsaneCacheError: If unexpected findings remain and
            ``settings.fail_on_insanity`` is set.
    """
    if settings is None:
        settings = Settings(_env_file=None, estimate_ram=True)  # type: ignore[call-arg]

    checker = FieldCacheSanityChecker.from_settings(settings)
    results: list[Insanity | ExpectedInsanity] = []
    unexpected: list[Insanity] = []

    for insanity in checker.check(entries):
        if expected is not None and expected(insanity):
            logger.info("Expected insanity: %s", insanity.msg)
            results.append(insanity.as_expected())
        else:
            unexpected.append(insanity)
            results.append(insanity)

    if unexpected:
        if settings.fail_on_insanity:
            raise InsaneCacheError(unexpected)
        for insanity in unexpected:
            logger.warning("Insane field cache usage:\n%s", insanity)

    return results
