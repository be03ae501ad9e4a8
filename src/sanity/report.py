# src/sanity/report.py - v1
"""Serializable report of a sanity check, for logs and CI artifacts."""

from __future__ import annotations

from collections.abc import Sequence

from pydantic import BaseModel, Field

from cachesanity.sanity.models import ExpectedInsanity, Insanity


class InsanityRecord(BaseModel):
    """Flattened view of one finding."""

    kind: str
    message: str
    entries: list[str]
    original_kind: str | None = None


class SanityReport(BaseModel):
    """All findings of one check plus counters."""

    findings: list[InsanityRecord] = Field(default_factory=list)
    stats: dict[str, int] = Field(default_factory=dict)

    @property
    def is_sane(self) -> bool:
        """True when nothing but EXPECTED findings were reported."""
        return all(f.kind == "EXPECTED" for f in self.findings)

    @classmethod
    def from_findings(
        cls, findings: Sequence[Insanity | ExpectedInsanity],
    ) -> SanityReport:
        records = [
            InsanityRecord(
                kind=str(f.kind),
                message=f.msg,
                entries=[str(e) for e in f.entries],
                original_kind=(
                    str(f.original_kind) if isinstance(f, ExpectedInsanity) else None
                ),
            )
            for f in findings
        ]
        stats: dict[str, int] = {
            "total": len(records),
            "entries_referenced": len({id(e) for f in findings for e in f.entries}),
        }
        for record in records:
            stats[record.kind] = stats.get(record.kind, 0) + 1
        return cls(findings=records, stats=stats)

    def to_json(self, indent: int = 2) -> str:
        return self.model_dump_json(indent=indent)
