# src/core/ram_usage.py - v1
"""Approximate RAM usage of cached values.

Arrays report their buffer size, containers are walked recursively (each
object counted once), anything else falls back to ``sys.getsizeof``.
"""

from __future__ import annotations

import re
import sys
from typing import Any

import numpy as np

from cachesanity.core.bits import Bits, FixedBits

_ONE_KB = 1024
_ONE_MB = _ONE_KB * 1024
_ONE_GB = _ONE_MB * 1024

# largest unit first
_UNITS: tuple[tuple[str, int], ...] = (("GB", _ONE_GB), ("MB", _ONE_MB), ("KB", _ONE_KB))
_SIZE_RE = re.compile(r"^(\d+(?:\.\d+)?)\s*(GB|MB|KB|B|BYTES)?$", re.IGNORECASE)


def estimate_size(obj: Any) -> int:
    """Estimated number of bytes retained by ``obj``."""
    return _estimate(obj, set())


def _estimate(obj: Any, seen: set[int]) -> int:
    if id(obj) in seen:
        return 0
    seen.add(id(obj))

    if isinstance(obj, np.ndarray):
        return sys.getsizeof(obj) if obj.base is None else obj.nbytes
    if isinstance(obj, FixedBits):
        return sys.getsizeof(obj) + _estimate(obj.array, seen)
    if isinstance(obj, Bits):
        return sys.getsizeof(obj)

    size = sys.getsizeof(obj)
    if isinstance(obj, dict):
        for k, v in obj.items():
            size += _estimate(k, seen) + _estimate(v, seen)
    elif isinstance(obj, (list, tuple, set, frozenset)):
        for item in obj:
            size += _estimate(item, seen)
    return size


def human_readable_units(num_bytes: int) -> str:
    """Render a byte count as e.g. '12 bytes', '1 KB', '1.5 MB'."""
    for unit, scale in _UNITS:
        if num_bytes >= scale:
            return f"{_fmt(num_bytes / scale)} {unit}"
    return f"{num_bytes} bytes"


def parse_human_units(text: str) -> int:
    """Inverse of human_readable_units: '1.5 MB' -> 1572864.

    A bare number is a byte count. Units are case-insensitive.
    """
    match = _SIZE_RE.match(text.strip())
    if not match:
        raise ValueError(f"Invalid size format: {text!r}. Use e.g. '10MB'.")
    amount, unit = float(match.group(1)), (match.group(2) or "B").upper()
    scale = dict(_UNITS).get(unit, 1)
    return int(amount * scale)


def _fmt(value: float) -> str:
    return f"{value:.1f}".rstrip("0").rstrip(".")
