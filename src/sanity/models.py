# src/sanity/models.py - v1
"""Findings reported by the field cache sanity checker.

An ``Insanity`` groups the cache entries that, taken together, show a wasteful
or inconsistent use of the cache. The checker only ever produces SUBREADER and
VALUEMISMATCH findings; callers re-tag findings they consider intentional with
``Insanity.as_expected()``.
"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass, field
from enum import Enum

from cachesanity.core.models import CacheEntry


class InsanityType(Enum):
    """Kinds of insane cache usage."""

    # Same field cached at more than one level of a reader hierarchy.
    SUBREADER = "SUBREADER"
    # Same reader+field cached with distinct value objects. Only identity of
    # the cached value counts: different parsers or types that end up caching
    # the very same object are not flagged.
    VALUE_MISMATCH = "VALUEMISMATCH"
    # Set by callers on findings they consider intentional.
    EXPECTED = "EXPECTED"

    def __str__(self) -> str:
        return self.value


def _render(kind: InsanityType, msg: str | None, entries: Sequence[CacheEntry]) -> str:
    lines = [f"{kind}: {msg or ''}"]
    lines.extend(f"\t{entry}" for entry in entries)
    return "\n".join(lines) + "\n"


@dataclass(frozen=True)
class Insanity:
    """Related cache entries that together suggest a problem."""

    kind: InsanityType
    msg: str
    entries: tuple[CacheEntry, ...] = field(default_factory=tuple)

    def __post_init__(self) -> None:
        if self.kind is None:
            raise ValueError("Insanity requires non-null InsanityType")
        if not isinstance(self.kind, InsanityType):
            raise ValueError(f"Insanity kind must be an InsanityType, got {self.kind!r}")
        object.__setattr__(self, "entries", tuple(self.entries or ()))
        if not self.entries:
            raise ValueError("Insanity requires non-null/non-empty CacheEntry list")

    def as_expected(self, reason: str = "") -> ExpectedInsanity:
        """Re-tag this finding as intentional."""
        return ExpectedInsanity(original=self, reason=reason)

    def __str__(self) -> str:
        return _render(self.kind, self.msg, self.entries)


@dataclass(frozen=True)
class ExpectedInsanity:
    """A finding the caller judged intentional, kept for logging."""

    original: Insanity
    reason: str = ""

    @property
    def kind(self) -> InsanityType:
        return InsanityType.EXPECTED

    @property
    def original_kind(self) -> InsanityType:
        return self.original.kind

    @property
    def msg(self) -> str:
        if self.reason:
            return f"{self.original.msg} ({self.reason})"
        return self.original.msg

    @property
    def entries(self) -> tuple[CacheEntry, ...]:
        return self.original.entries

    def __str__(self) -> str:
        return _render(self.kind, self.msg, self.entries)
