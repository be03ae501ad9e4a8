# src/logging/handlers.py - v1
"""Rotating file output for check logs."""

from __future__ import annotations

import logging
from logging.handlers import RotatingFileHandler
from pathlib import Path

from cachesanity.core.ram_usage import parse_human_units


def create_rotating_handler(
    log_file: str,
    rotation: str = "10MB",
    retention: int = 30,
) -> logging.Handler:
    """File handler rolling over once the log reaches ``rotation``.

    ``rotation`` uses the same units findings report sizes in ("10MB",
    "512 KB"). Missing parent directories are created; ``retention`` backups
    are kept.
    """
    path = Path(log_file).expanduser()
    path.parent.mkdir(parents=True, exist_ok=True)
    return RotatingFileHandler(
        path,
        maxBytes=parse_human_units(rotation),
        backupCount=retention,
        encoding="utf-8",
    )
