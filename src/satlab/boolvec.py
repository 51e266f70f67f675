"""
Fixed-length boolean vector used to hold variable assignments.

The vector is backed by a NumPy ``bool_`` array. Reads outside the vector
return ``None``; writes outside the vector raise ``VariableIndexError``.
"""

from typing import Iterable, Iterator, Optional

import numpy as np

from satlab.exceptions import VariableIndexError


class BoolVec:
    """A fixed-length vector of booleans indexed from zero."""

    __slots__ = ("_bits",)

    def __init__(self, length: int = 0, default: bool = False):
        """
        Create a vector of ``length`` copies of ``default``.

        Args:
            length: Number of entries
            default: Initial value of every entry
        """
        if length < 0:
            raise ValueError(f"BoolVec length must be non-negative, got {length}")
        self._bits = np.full(length, bool(default), dtype=np.bool_)

    @classmethod
    def from_iterable(cls, values: Iterable[bool]) -> "BoolVec":
        """Build a vector from any finite iterable of truthy/falsy values."""
        vec = cls.__new__(cls)
        vec._bits = np.fromiter((bool(v) for v in values), dtype=np.bool_)
        return vec

    @classmethod
    def from_numpy(cls, array: np.ndarray) -> "BoolVec":
        """Build a vector from a one-dimensional array, copying it."""
        array = np.asarray(array)
        if array.ndim != 1:
            raise ValueError(f"Expected a one-dimensional array, got shape {array.shape}")
        vec = cls.__new__(cls)
        vec._bits = array.astype(np.bool_, copy=True)
        return vec

    def _in_range(self, index: int) -> bool:
        return 0 <= index < self._bits.shape[0]

    def get(self, index: int) -> Optional[bool]:
        """Return the value at ``index``, or ``None`` if out of range."""
        if not self._in_range(index):
            return None
        return bool(self._bits[index])

    def set(self, index: int, value: bool) -> None:
        if not self._in_range(index):
            raise VariableIndexError(index=index, size=len(self))
        self._bits[index] = bool(value)

    def negate(self, index: int) -> None:
        """Flip the value at ``index``."""
        if not self._in_range(index):
            raise VariableIndexError(index=index, size=len(self))
        self._bits[index] = not self._bits[index]

    def count_true(self) -> int:
        return int(np.count_nonzero(self._bits))

    def copy(self) -> "BoolVec":
        return BoolVec.from_numpy(self._bits)

    def to_numpy(self) -> np.ndarray:
        """Return a copy of the underlying array."""
        return self._bits.copy()

    def to_list(self) -> list[bool]:
        return [bool(b) for b in self._bits]

    def __len__(self) -> int:
        return int(self._bits.shape[0])

    def __iter__(self) -> Iterator[bool]:
        return (bool(b) for b in self._bits)

    def __eq__(self, other) -> bool:
        if not isinstance(other, BoolVec):
            return NotImplemented
        return bool(np.array_equal(self._bits, other._bits))

    __hash__ = None

    def __repr__(self) -> str:
        return f"BoolVec({self.to_list()!r})"
