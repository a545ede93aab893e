# =============================================================================
# mkv_chain/linalg/exceptions.py
# Exception hierarchy for the algebra layer.
# =============================================================================
#
# EXCEPTION HIERARCHY
# -------------------
#   LinalgError(Exception)                              -- base; never raised directly
#     IndexOutOfBoundsError(LinalgError, IndexError)    -- element / column access
#     DimensionMismatchError(LinalgError, ValueError)   -- operands of different N
#
# All exceptions are pure value objects: no side effects, no I/O.
#
# MESSAGE CONTRACT
# ----------------
# Every message is deterministic and names the offending index or dimension
# together with the valid range.
# =============================================================================

from __future__ import annotations

from typing import Any


# =============================================================================
# BASE EXCEPTION
# =============================================================================

class LinalgError(Exception):
    """
    Base class for all algebra layer exceptions.

    Never raised directly. Use a concrete subclass.

    Attributes:
        field_name:  Name of the offending argument, or empty string.
        value:       The offending value, or None if not applicable.
        message:     Human-readable description. Always non-empty.
    """

    def __init__(
        self,
        message:    str,
        field_name: str = "",
        value:      Any = None,
    ) -> None:
        if not isinstance(message, str) or not message:
            raise ValueError(
                "LinalgError: message must be a non-empty string"
            )
        if not isinstance(field_name, str):
            raise ValueError(
                "LinalgError: field_name must be a string"
            )
        super().__init__(message)
        self.field_name: str = field_name
        self.value:      Any = value
        self.message:    str = message

    def __repr__(self) -> str:
        return (
            self.__class__.__name__
            + "(field_name=" + repr(self.field_name)
            + ", value=" + repr(self.value)
            + ", message=" + repr(self.message)
            + ")"
        )

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, LinalgError):
            return NotImplemented
        return (
            type(self) is type(other)
            and self.field_name == other.field_name
            and self.value == other.value
            and self.message == other.message
        )

    __hash__ = Exception.__hash__


# =============================================================================
# CONCRETE EXCEPTIONS
# =============================================================================

class IndexOutOfBoundsError(LinalgError, IndexError):
    """
    Raised when an index falls outside 0..bound-1.

    Negative indices are out of bounds; they are never wrapped.

    Message format:
        "IndexOutOfBoundsError: <field_name> index <index> out of range
         for dimension <bound> (valid: 0..<bound - 1>)"
    """

    def __init__(self, field_name: str, index: int, bound: int) -> None:
        if bound > 0:
            valid = "0.." + str(bound - 1)
        else:
            valid = "none"
        message = (
            "IndexOutOfBoundsError: "
            + field_name
            + " index "
            + repr(index)
            + " out of range for dimension "
            + str(bound)
            + " (valid: "
            + valid
            + ")"
        )
        super().__init__(message=message, field_name=field_name, value=index)
        self.index: int = index
        self.bound: int = bound


class DimensionMismatchError(LinalgError, ValueError):
    """
    Raised when two operands (or a row and its matrix) disagree on N.

    Message format:
        "DimensionMismatchError: <field_name> has dimension <actual>,
         expected <expected>"
    """

    def __init__(self, field_name: str, expected: int, actual: int) -> None:
        message = (
            "DimensionMismatchError: "
            + field_name
            + " has dimension "
            + str(actual)
            + ", expected "
            + str(expected)
        )
        super().__init__(message=message, field_name=field_name, value=actual)
        self.expected: int = expected
        self.actual:   int = actual
