# =============================================================================
# mkv_chain/core/markov_chain.py
# MarkovChain -- discrete-time chain over a fixed number of nodes.
# =============================================================================
#
# SCOPE
# -----
# One transition matrix (trans) and one state vector (init). Forward
# iteration only: no decomposition, no convergence detection, no early exit.
#
# VALUE SEMANTICS
# ---------------
# The chain stores private copies of trans and init. Mutating the objects
# passed in afterwards has no effect on the chain, and the trans / init
# properties hand out copies. Replacement is wholesale via set_trans() /
# set_init(); there is no partial-update path.
#
# NO STOCHASTIC VALIDATION
# ------------------------
# Rows or columns of trans are not required to sum to 1. Callers are
# responsible for supplying a meaningful transition matrix.
#
# STEPPING
# --------
# One step is trans.apply(state), the column-dot convention documented in
# mkv_chain.linalg.matrix. With a row-stochastic row-major literal this moves
# probability mass from state k to state i with weight rows[k][i].
#
# ABSORBING STATE HEURISTIC
# -------------------------
# A stored column is flagged when exactly one component equals 1.0 and at
# least one other component is non-zero. This is a structural check over the
# matrix as given. It does not prove the modelled chain ever reaches that
# state.
# =============================================================================

from __future__ import annotations

import operator
from typing import Iterator, List, Optional

from mkv_chain.core.logging_layer import (
    EVENT_CHAIN_CREATED,
    EVENT_INIT_REPLACED,
    EVENT_TAKE_TO,
    EVENT_TRANS_REPLACED,
    EventLogger,
)
from mkv_chain.linalg import DimensionMismatchError, SquareMatrix, Vector
from mkv_chain.utils.constants import ABSORBING_VALUE


# ---------------------------------------------------------------------------
# Exceptions
# ---------------------------------------------------------------------------

class ChainError(ValueError):
    """
    Raised for invalid chain arguments (negative or non-integer step count,
    wrong argument types).
    """


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------

def _could_absorb(column: Vector) -> bool:
    """
    True iff exactly one component equals ABSORBING_VALUE and at least one
    other component is non-zero.
    """
    ones = 0
    has_nz = False
    for el in column:
        if el == ABSORBING_VALUE:
            ones += 1
        elif el != 0.0:
            has_nz = True
    return ones == 1 and has_nz


def _check_steps(steps: object) -> int:
    if isinstance(steps, bool):
        raise ChainError("steps must be an int, got bool")
    try:
        n = operator.index(steps)
    except TypeError:
        raise ChainError(
            "steps must be an int, got " + type(steps).__name__
        ) from None
    if n < 0:
        raise ChainError("steps must be >= 0, got " + str(n))
    return n


# ---------------------------------------------------------------------------
# MarkovChain
# ---------------------------------------------------------------------------

class MarkovChain:
    """
    Markov chain built from a transition matrix and an initial state.

    Example::

        chain = MarkovChain(
            SquareMatrix([[0.9, 0.0, 0.1],
                          [0.1, 0.3, 0.6],
                          [0.0, 0.1, 0.9]]),
            Vector([0.1, 0.3, 0.6]),
        )
        chain.take_to(3)
        # Vector([0.12250000000000001, 0.11130000000000001, 0.7662])

    An optional EventLogger records construction, replacement and stepping.
    """

    __slots__ = ("_trans", "_init", "_logger")

    def __init__(
        self,
        trans: SquareMatrix,
        init: Vector,
        logger: Optional[EventLogger] = None,
    ) -> None:
        if not isinstance(trans, SquareMatrix):
            raise ChainError("trans must be a SquareMatrix, got " + type(trans).__name__)
        if not isinstance(init, Vector):
            raise ChainError("init must be a Vector, got " + type(init).__name__)
        if len(init) != len(trans):
            raise DimensionMismatchError("init", len(trans), len(init))
        self._trans: SquareMatrix = trans.copy()
        self._init: Vector = init.copy()
        self._logger: Optional[EventLogger] = logger
        self._log(EVENT_CHAIN_CREATED, {
            "dimension": len(trans),
            "init": init.to_list(),
        })

    @classmethod
    def from_parts(cls, trans: SquareMatrix, init: Vector) -> MarkovChain:
        """Construct a chain from a transition matrix and an initial state."""
        return cls(trans, init)

    # ------------------------------------------------------------------
    # Accessors
    # ------------------------------------------------------------------

    @property
    def trans(self) -> SquareMatrix:
        return self._trans.copy()

    @property
    def init(self) -> Vector:
        return self._init.copy()

    @property
    def dimension(self) -> int:
        return len(self._trans)

    def set_trans(self, new_trans: SquareMatrix) -> None:
        """Replace the transition matrix."""
        if not isinstance(new_trans, SquareMatrix):
            raise ChainError("trans must be a SquareMatrix, got " + type(new_trans).__name__)
        if len(new_trans) != len(self._init):
            raise DimensionMismatchError("trans", len(self._init), len(new_trans))
        self._trans = new_trans.copy()
        self._log(EVENT_TRANS_REPLACED, {"dimension": len(new_trans)})

    def set_init(self, new_init: Vector) -> None:
        """Replace the initial state."""
        if not isinstance(new_init, Vector):
            raise ChainError("init must be a Vector, got " + type(new_init).__name__)
        if len(new_init) != len(self._trans):
            raise DimensionMismatchError("init", len(self._trans), len(new_init))
        self._init = new_init.copy()
        self._log(EVENT_INIT_REPLACED, {"init": new_init.to_list()})

    # ------------------------------------------------------------------
    # Stepping
    # ------------------------------------------------------------------

    def iter_states(self, steps: int) -> Iterator[Vector]:
        """
        Yield the state after 0, 1, ..., steps applications of trans.

        The first value is a copy of init. Each later value is computed from
        the previous one. init itself is never mutated.
        """
        n = _check_steps(steps)
        result = self._init.copy()
        yield result.copy()
        for _ in range(n):
            result = self._trans.apply(result)
            yield result.copy()

    def take_to(self, steps: int) -> Vector:
        """
        Run the chain forward and return the state after `steps` steps.

        take_to(0) returns a copy of init.
        """
        n = _check_steps(steps)
        result = self._init.copy()
        for _ in range(n):
            result = self._trans.apply(result)
        self._log(EVENT_TAKE_TO, {"steps": n, "result": result.to_list()})
        return result

    # ------------------------------------------------------------------
    # Structure
    # ------------------------------------------------------------------

    def absorbing_states(self) -> List[int]:
        """Indices of stored columns that pass the absorbing heuristic."""
        return [i for i, col in enumerate(self._trans) if _could_absorb(col)]

    def has_absorbing_state(self) -> bool:
        """
        True if any column of trans holds exactly one 1.0 entry and at least
        one other non-zero entry.
        False for an empty matrix.
        """
        return len(self.absorbing_states()) > 0

    # ------------------------------------------------------------------
    # Internals
    # ------------------------------------------------------------------

    def _log(self, event_type: str, data: dict) -> None:
        if self._logger is not None:
            self._logger.log_event(event_type, data)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, MarkovChain):
            return NotImplemented
        return self._trans == other._trans and self._init == other._init

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return (
            "MarkovChain(trans=" + repr(self._trans)
            + ", init=" + repr(self._init) + ")"
        )
