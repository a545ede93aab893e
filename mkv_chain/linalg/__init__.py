# mkv_chain/linalg/__init__.py
# Algebra layer: fixed-dimension vectors and column-major square matrices.
#
# Canonical import:
#   from mkv_chain.linalg import Vector, SquareMatrix

from mkv_chain.linalg.exceptions import (
    DimensionMismatchError,
    IndexOutOfBoundsError,
    LinalgError,
)
from mkv_chain.linalg.matrix import SquareMatrix
from mkv_chain.linalg.vector import Vector

__all__ = [
    "Vector",
    "SquareMatrix",
    "LinalgError",
    "IndexOutOfBoundsError",
    "DimensionMismatchError",
]
