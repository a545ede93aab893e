# =============================================================================
# mkv_chain/linalg/matrix.py
# SquareMatrix -- N x N double-precision matrix stored column-major.
# =============================================================================
#
# STORAGE INVARIANT
# -----------------
# The matrix is always held as N column Vectors. Logical element (row, col)
# lives at columns[col][row]. The constructor accepts row-major input and
# transposes it; no other representation is ever stored.
#
# MATRIX x VECTOR CONVENTION
# --------------------------
# apply(v)[i] = dot(stored column i, v)
#
# In terms of the row-major literal passed to the constructor this is
#     apply(v)[i] = sum_k rows[k][i] * v[k]          (v^T P)
# so a row-stochastic literal (rows summing to 1) propagates a probability
# vector one step forward. It is NOT the textbook P v product. The chain
# stepping in mkv_chain.core.markov_chain depends on this convention and the
# reference 3-node result is only reproduced with it.
#
# MATRIX x MATRIX
# ---------------
# matmul() is the standard product: C[(r, c)] = sum_k A[(r, k)] * B[(k, c)].
# Rows of A are walked as the stored columns of A.to_row_major().
# =============================================================================

from __future__ import annotations

import operator
from typing import Iterable, Iterator, List, Sequence, Tuple, Union

import numpy as np

from mkv_chain.linalg.exceptions import DimensionMismatchError
from mkv_chain.linalg.vector import Vector, _check_index


Index = Union[int, Tuple[int, int]]


class SquareMatrix:
    """
    Square matrix of dimension N, column-major.

    ``m[(row, col)]`` addresses a logical element; ``m[col]`` returns a copy
    of the stored column vector.
    """

    __slots__ = ("_columns",)

    def __init__(self, rows: Sequence[Sequence[float]]) -> None:
        n = len(rows)
        columns = [[0.0] * n for _ in range(n)]
        for r, row in enumerate(rows):
            if len(row) != n:
                raise DimensionMismatchError("rows[" + str(r) + "]", n, len(row))
            for c, value in enumerate(row):
                columns[c][r] = float(value)
        self._columns: List[Vector] = [Vector(col) for col in columns]

    # ------------------------------------------------------------------
    # Construction helpers
    # ------------------------------------------------------------------

    @classmethod
    def zeros(cls, n: int) -> SquareMatrix:
        n = operator.index(n)
        if n < 0:
            raise ValueError("SquareMatrix.zeros: n must be >= 0, got " + str(n))
        return cls([[0.0] * n for _ in range(n)])

    @classmethod
    def identity(cls, n: int) -> SquareMatrix:
        result = cls.zeros(n)
        for i in range(n):
            result[(i, i)] = 1.0
        return result

    @classmethod
    def from_columns(cls, columns: Iterable[Iterable[float]]) -> SquareMatrix:
        """
        Build a matrix directly from its stored columns (no transpose).

        Raises DimensionMismatchError if any column length differs from the
        number of columns.
        """
        cols = [Vector(col) for col in columns]
        n = len(cols)
        for c, col in enumerate(cols):
            if len(col) != n:
                raise DimensionMismatchError("columns[" + str(c) + "]", n, len(col))
        result = cls.zeros(n)
        result._columns = cols
        return result

    @classmethod
    def from_numpy(cls, array: np.ndarray) -> SquareMatrix:
        """Build a matrix from a 2-D array-like in logical (row-major) order."""
        arr = np.asarray(array, dtype=np.float64)
        if arr.ndim != 2:
            raise DimensionMismatchError("array.ndim", 2, arr.ndim)
        if arr.shape[0] != arr.shape[1]:
            raise DimensionMismatchError("array.shape[1]", arr.shape[0], arr.shape[1])
        return cls([[float(x) for x in row] for row in arr])

    def copy(self) -> SquareMatrix:
        return SquareMatrix.from_columns(self._columns)

    # ------------------------------------------------------------------
    # Shape / indexing
    # ------------------------------------------------------------------

    @property
    def shape(self) -> Tuple[int, int]:
        n = len(self._columns)
        return (n, n)

    def __len__(self) -> int:
        return len(self._columns)

    def __getitem__(self, index: Index) -> Union[float, Vector]:
        n = len(self._columns)
        if isinstance(index, tuple):
            row, col = index
            r = _check_index(row, n, "row")
            c = _check_index(col, n, "column")
            return self._columns[c][r]
        return self._columns[_check_index(index, n, "column")].copy()

    def __setitem__(self, index: Index, value: Union[float, Vector]) -> None:
        n = len(self._columns)
        if isinstance(index, tuple):
            row, col = index
            r = _check_index(row, n, "row")
            c = _check_index(col, n, "column")
            self._columns[c][r] = value
            return
        c = _check_index(index, n, "column")
        column = Vector(value)
        if len(column) != n:
            raise DimensionMismatchError("column", n, len(column))
        self._columns[c] = column

    def __iter__(self) -> Iterator[Vector]:
        """Yield copies of the stored columns in order."""
        return iter([col.copy() for col in self._columns])

    def columns(self) -> List[Vector]:
        return [col.copy() for col in self._columns]

    def rows(self) -> List[List[float]]:
        """Logical row-major view as nested lists."""
        n = len(self._columns)
        return [[self._columns[c][r] for c in range(n)] for r in range(n)]

    def to_numpy(self) -> np.ndarray:
        return np.array(self.rows(), dtype=np.float64).reshape(self.shape)

    # ------------------------------------------------------------------
    # Algebra
    # ------------------------------------------------------------------

    def to_row_major(self) -> SquareMatrix:
        """
        Return a new matrix whose stored columns are this matrix's logical
        rows, i.e. the transpose of the stored representation.
        """
        n = len(self._columns)
        result = SquareMatrix.zeros(n)
        for i in range(n):
            for o in range(n):
                result[(i, o)] = self[(o, i)]
        return result

    def apply(self, vector: Vector) -> Vector:
        """
        Matrix x vector using the column-dot convention (see module header).

        result[i] = dot(stored column i, vector)
        """
        n = len(self._columns)
        if len(vector) != n:
            raise DimensionMismatchError("vector", n, len(vector))
        result = Vector.zeros(n)
        for i, col in enumerate(self._columns):
            result[i] = vector.dot(col)
        return result

    def matmul(self, other: SquareMatrix) -> SquareMatrix:
        """Standard matrix product self x other."""
        n = len(self._columns)
        if len(other) != n:
            raise DimensionMismatchError("other", n, len(other))
        left_rows = self.to_row_major()._columns
        result = SquareMatrix.zeros(n)
        for c, col in enumerate(other._columns):
            for r, row in enumerate(left_rows):
                result[(r, c)] = row.dot(col)
        return result

    # ------------------------------------------------------------------
    # Comparison / display
    # ------------------------------------------------------------------

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, SquareMatrix):
            return NotImplemented
        return self._columns == other._columns

    def __lt__(self, other: SquareMatrix) -> bool:
        if not isinstance(other, SquareMatrix):
            return NotImplemented
        return self._columns < other._columns

    def __le__(self, other: SquareMatrix) -> bool:
        if not isinstance(other, SquareMatrix):
            return NotImplemented
        return self._columns <= other._columns

    def __gt__(self, other: SquareMatrix) -> bool:
        if not isinstance(other, SquareMatrix):
            return NotImplemented
        return self._columns > other._columns

    def __ge__(self, other: SquareMatrix) -> bool:
        if not isinstance(other, SquareMatrix):
            return NotImplemented
        return self._columns >= other._columns

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return "SquareMatrix(" + repr(self.rows()) + ")"
