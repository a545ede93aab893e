# mkv_chain/verification/bit_comparator.py
# Exact IEEE 754 bit-pattern comparison of vectors and matrices.
#
# BIC-01: Float comparisons use struct.pack big-endian double byte sequences.
# BIC-02: math.isclose(), numpy.allclose() and other tolerance-based checks
#         are not used here. The == operator is not applied to floats either,
#         because it considers +0.0 equal to -0.0 and NaN unequal to itself.
# BIC-03: A dimension mismatch fails the comparison without inspecting
#         components.

import struct
from typing import List

from mkv_chain.linalg import SquareMatrix, Vector
from mkv_chain.verification.comparison_report import ComparisonReport, FieldMismatch


def float_bits(value: float) -> bytes:
    """Return the 8-byte big-endian IEEE 754 representation (BIC-01)."""
    return struct.pack(">d", value)


def floats_identical(a: float, b: float) -> bool:
    """Bit-pattern equality. +0.0 and -0.0 differ; equal NaN payloads match."""
    return float_bits(a) == float_bits(b)


def _dimension_failure(expected: int, actual: int) -> ComparisonReport:
    return ComparisonReport(
        passed=False,
        dimension=expected,
        mismatches=(),
        notes=(f"DIMENSION_MISMATCH: expected {expected}, actual {actual}",),
    )


def compare_vectors(expected: Vector, actual: Vector) -> ComparisonReport:
    """Compare two vectors component by component (BIC-01)."""
    if len(expected) != len(actual):
        return _dimension_failure(len(expected), len(actual))

    mismatches: List[FieldMismatch] = []
    for i, (e, a) in enumerate(zip(expected, actual)):
        if not floats_identical(e, a):
            mismatches.append(FieldMismatch(
                field_name=f"vector[{i}]",
                expected_value_hex=float_bits(e).hex(),
                actual_value_hex=float_bits(a).hex(),
            ))
    return ComparisonReport(
        passed=not mismatches,
        dimension=len(expected),
        mismatches=tuple(mismatches),
        notes=(),
    )


def compare_matrices(expected: SquareMatrix, actual: SquareMatrix) -> ComparisonReport:
    """Compare two matrices element by element in logical (row, col) order."""
    n = len(expected)
    if len(actual) != n:
        return _dimension_failure(n, len(actual))

    mismatches: List[FieldMismatch] = []
    for r in range(n):
        for c in range(n):
            e = expected[(r, c)]
            a = actual[(r, c)]
            if not floats_identical(e, a):
                mismatches.append(FieldMismatch(
                    field_name=f"matrix[({r}, {c})]",
                    expected_value_hex=float_bits(e).hex(),
                    actual_value_hex=float_bits(a).hex(),
                ))
    return ComparisonReport(
        passed=not mismatches,
        dimension=n,
        mismatches=tuple(mismatches),
        notes=(),
    )
