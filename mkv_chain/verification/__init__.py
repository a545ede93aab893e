# mkv_chain/verification/__init__.py
# Bit-exact comparison of numeric values.

from mkv_chain.verification.bit_comparator import (
    compare_matrices,
    compare_vectors,
    float_bits,
    floats_identical,
)
from mkv_chain.verification.comparison_report import ComparisonReport, FieldMismatch
