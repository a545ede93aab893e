# mkv_chain/utils/constants.py
# Package-wide constants. Single authoritative definition.
#
# Standard import pattern:
#   from mkv_chain.utils.constants import (
#       PACKAGE_VERSION,
#       STORAGE_FORMAT_VERSION,
#       REFERENCE_DIMENSIONS,
#       ABSORBING_VALUE,
#       REFERENCE_TRANSITION_ROWS,
#       REFERENCE_INITIAL_STATE,
#       REFERENCE_STEPS,
#       REFERENCE_RESULT,
#   )

from typing import Tuple


# ---------------------------------------------------------------------------
# VERSIONS
# ---------------------------------------------------------------------------

PACKAGE_VERSION: str = "0.3.0"

# Stamped into every serialized payload. Loading a payload with a different
# value is a hard failure.
STORAGE_FORMAT_VERSION: str = "1.0.0"


# ---------------------------------------------------------------------------
# DIMENSIONS
# ---------------------------------------------------------------------------

# Sizes the package is exercised against. The types accept any N >= 0.
REFERENCE_DIMENSIONS: Tuple[int, ...] = (2, 3, 4, 5, 6)


# ---------------------------------------------------------------------------
# ABSORBING STATE HEURISTIC
# ---------------------------------------------------------------------------

# Exact self-transition weight that marks a candidate absorbing column.
ABSORBING_VALUE: float = 1.0


# ---------------------------------------------------------------------------
# REFERENCE 3-NODE CHAIN (golden regression value)
# ---------------------------------------------------------------------------
# Row-major literal. take_to(REFERENCE_STEPS) must be bit-identical to
# REFERENCE_RESULT under the column-dot matrix x vector convention.

REFERENCE_TRANSITION_ROWS: Tuple[Tuple[float, ...], ...] = (
    (0.9, 0.0, 0.1),
    (0.1, 0.3, 0.6),
    (0.0, 0.1, 0.9),
)
REFERENCE_INITIAL_STATE: Tuple[float, ...] = (0.1, 0.3, 0.6)
REFERENCE_STEPS: int = 3
REFERENCE_RESULT: Tuple[float, ...] = (
    0.12250000000000001,
    0.11130000000000001,
    0.7662,
)
