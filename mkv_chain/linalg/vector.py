# =============================================================================
# mkv_chain/linalg/vector.py
# Vector -- fixed-length double-precision vector, generic over dimension N.
# =============================================================================
#
# SCOPE
# -----
# One public type: Vector. A single class serves every dimension; N is fixed
# at construction and never changes afterwards.
#
# DETERMINISM
# -----------
# dot() accumulates left to right starting from 0.0. The builtin sum() is not
# used: on recent interpreters it applies compensated summation, which would
# change the last bit of results compared with plain IEEE 754 accumulation.
#
# SCALING POLICY
# --------------
# scale() returns a new Vector. The receiver is never mutated.
# =============================================================================

from __future__ import annotations

import operator
from typing import Iterable, Iterator, List, Tuple

import numpy as np

from mkv_chain.linalg.exceptions import DimensionMismatchError, IndexOutOfBoundsError


def _check_index(index: object, bound: int, field_name: str) -> int:
    """
    Normalise index to a plain int and bounds-check it against 0..bound-1.

    Raises TypeError for non-integer indices and IndexOutOfBoundsError for
    anything outside the range, negative values included.
    """
    idx = operator.index(index)
    if idx < 0 or idx >= bound:
        raise IndexOutOfBoundsError(field_name, idx, bound)
    return idx


class Vector:
    """
    Ordered, fixed-length sequence of N floats.

    Components are coerced to float on construction. Equality is
    component-wise; ordering is lexicographic over the components.
    """

    __slots__ = ("_data",)

    def __init__(self, data: Iterable[float]) -> None:
        self._data: List[float] = [float(x) for x in data]

    # ------------------------------------------------------------------
    # Construction helpers
    # ------------------------------------------------------------------

    @classmethod
    def zeros(cls, n: int) -> Vector:
        """Return an n-component vector of 0.0."""
        n = operator.index(n)
        if n < 0:
            raise ValueError("Vector.zeros: n must be >= 0, got " + str(n))
        return cls([0.0] * n)

    @classmethod
    def from_numpy(cls, array: np.ndarray) -> Vector:
        """Build a vector from a 1-D array-like."""
        arr = np.asarray(array, dtype=np.float64)
        if arr.ndim != 1:
            raise DimensionMismatchError("array.ndim", 1, arr.ndim)
        return cls(float(x) for x in arr)

    def copy(self) -> Vector:
        return Vector(self._data)

    # ------------------------------------------------------------------
    # Sequence protocol
    # ------------------------------------------------------------------

    def __len__(self) -> int:
        return len(self._data)

    def __getitem__(self, index: int) -> float:
        return self._data[_check_index(index, len(self._data), "vector")]

    def __setitem__(self, index: int, value: float) -> None:
        self._data[_check_index(index, len(self._data), "vector")] = float(value)

    def __iter__(self) -> Iterator[float]:
        return iter(tuple(self._data))

    def as_tuple(self) -> Tuple[float, ...]:
        return tuple(self._data)

    def to_list(self) -> List[float]:
        return list(self._data)

    def to_numpy(self) -> np.ndarray:
        return np.array(self._data, dtype=np.float64)

    # ------------------------------------------------------------------
    # Algebra
    # ------------------------------------------------------------------

    def dot(self, other: Vector) -> float:
        """
        Dot product: sum of self[i] * other[i] for i in 0..N-1.

        Raises DimensionMismatchError if the lengths differ.
        """
        if len(other) != len(self._data):
            raise DimensionMismatchError("other", len(self._data), len(other))
        total = 0.0
        for x, y in zip(self._data, other.as_tuple()):
            total += x * y
        return total

    def scale(self, factor: float) -> Vector:
        """Return a new vector with every component multiplied by factor."""
        f = float(factor)
        return Vector([x * f for x in self._data])

    # ------------------------------------------------------------------
    # Comparison / display
    # ------------------------------------------------------------------

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Vector):
            return NotImplemented
        return self._data == other._data

    def __lt__(self, other: Vector) -> bool:
        if not isinstance(other, Vector):
            return NotImplemented
        return self._data < other._data

    def __le__(self, other: Vector) -> bool:
        if not isinstance(other, Vector):
            return NotImplemented
        return self._data <= other._data

    def __gt__(self, other: Vector) -> bool:
        if not isinstance(other, Vector):
            return NotImplemented
        return self._data > other._data

    def __ge__(self, other: Vector) -> bool:
        if not isinstance(other, Vector):
            return NotImplemented
        return self._data >= other._data

    # Mutable via __setitem__, so not hashable.
    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return "Vector(" + repr(self._data) + ")"
