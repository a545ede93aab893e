# mkv_chain/verification/comparison_report.py
# ComparisonReport data classes produced by the bit comparator.

from dataclasses import dataclass


@dataclass(frozen=True)
class FieldMismatch:
    """
    One component whose IEEE 754 bit pattern differs between the two sides.
    """
    field_name:         str    # e.g. "vector[2]" or "matrix[(0, 1)]"
    expected_value_hex: str    # big-endian 8-byte hex of the expected value
    actual_value_hex:   str    # big-endian 8-byte hex of the actual value


@dataclass(frozen=True)
class ComparisonReport:
    """
    Result of a bit-exact comparison.

    Fields:
      passed         -- True iff no mismatches and dimensions agree.
      dimension      -- Dimension of the expected value.
      mismatches     -- tuple of FieldMismatch, empty on pass.
      notes          -- informational strings (dimension mismatch detail).
    """
    passed:     bool
    dimension:  int
    mismatches: tuple
    notes:      tuple
