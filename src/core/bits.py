# src/core/bits.py - v1
"""Boolean-vector values a field cache stores next to real cached arrays.

A cache answering "does this document have a value for this field" records a
``Bits`` instance under the same reader+field as the value array itself. The
sanity checker treats any ``Bits`` value as a benign companion and ignores it.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Iterable

import numpy as np


class Bits(ABC):
    """Read-only, fixed-length vector of booleans."""

    @abstractmethod
    def get(self, index: int) -> bool:
        """Return the bit at ``index``."""

    @abstractmethod
    def __len__(self) -> int:
        """Number of bits."""


class FixedBits(Bits):
    """Bits backed by a numpy bool array."""

    def __init__(self, bits: np.ndarray | Iterable[bool]) -> None:
        self._bits = np.asarray(bits, dtype=np.bool_)
        if self._bits.ndim != 1:
            raise ValueError(f"FixedBits requires a 1-d array, got {self._bits.ndim}-d")

    @classmethod
    def of_length(cls, length: int) -> FixedBits:
        """All-clear vector of ``length`` bits."""
        return cls(np.zeros(length, dtype=np.bool_))

    def set(self, index: int) -> None:
        self._bits[index] = True

    def get(self, index: int) -> bool:
        return bool(self._bits[index])

    def __len__(self) -> int:
        return int(self._bits.shape[0])

    def cardinality(self) -> int:
        """Number of set bits."""
        return int(np.count_nonzero(self._bits))

    @property
    def array(self) -> np.ndarray:
        return self._bits


class MatchAllBits(Bits):
    """Every bit set; used when all documents have a value."""

    def __init__(self, length: int) -> None:
        self._length = length

    def get(self, index: int) -> bool:
        return True

    def __len__(self) -> int:
        return self._length


class MatchNoBits(Bits):
    """No bit set; used when no document has a value."""

    def __init__(self, length: int) -> None:
        self._length = length

    def get(self, index: int) -> bool:
        return False

    def __len__(self) -> int:
        return self._length
