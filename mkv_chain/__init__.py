# mkv_chain/__init__.py
# Fixed-dimension linear algebra and discrete-time Markov chains.
#
# Canonical import:
#   from mkv_chain import MarkovChain, SquareMatrix, Vector

from mkv_chain.core import ChainError, EventLogger, MarkovChain
from mkv_chain.linalg import (
    DimensionMismatchError,
    IndexOutOfBoundsError,
    LinalgError,
    SquareMatrix,
    Vector,
)
from mkv_chain.utils.constants import PACKAGE_VERSION as __version__

__all__ = [
    "Vector",
    "SquareMatrix",
    "MarkovChain",
    "EventLogger",
    "LinalgError",
    "IndexOutOfBoundsError",
    "DimensionMismatchError",
    "ChainError",
]
