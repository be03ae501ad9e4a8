# src/logging/context.py - v1
"""Contextual logging support: attach check_id and detector to log records."""

from __future__ import annotations

import contextvars
from dataclasses import dataclass
from typing import Any

# Set once per check() call, cleared when it returns.
_check_id: contextvars.ContextVar[str | None] = contextvars.ContextVar(
    "check_id", default=None
)
_detector: contextvars.ContextVar[str | None] = contextvars.ContextVar(
    "detector", default=None
)


@dataclass
class LogContext:
    """Snapshot of current logging context."""

    check_id: str | None = None
    detector: str | None = None

    def as_dict(self) -> dict[str, Any]:
        """Return non-None fields as dict for JSON log injection."""
        return {k: v for k, v in self.__dict__.items() if v is not None}


def get_context() -> LogContext:
    """Snapshot current context variables."""
    return LogContext(check_id=_check_id.get(), detector=_detector.get())


def set_check_context(check_id: str) -> None:
    """Set check-level context (called once per check)."""
    _check_id.set(check_id)
    _detector.set(None)


def set_detector_context(detector: str | None) -> None:
    """Set the detector currently running inside a check."""
    _detector.set(detector)


def clear_context() -> None:
    """Reset all context variables."""
    _check_id.set(None)
    _detector.set(None)
