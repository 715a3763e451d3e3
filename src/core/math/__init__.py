"""
Core math modules для numeric-drills

Чистые числовые примитивы без побочных эффектов.
"""

# Numerical Safeguards
from src.core.math.numerical_safeguards import (
    Number,
    ieee_divide,
    is_real_number,
    is_valid_float,
    validate_non_negative_int,
    validate_number,
    validate_same_length,
)

# Sequences
from src.core.math.sequences import multiply_list, pairwise

# Digits
from src.core.math.digits import RADIX, digit_list

__all__ = [
    # Numerical Safeguards — Types
    "Number",
    # Numerical Safeguards — Division
    "ieee_divide",
    # Numerical Safeguards — Checks
    "is_real_number",
    "is_valid_float",
    # Numerical Safeguards — Validation
    "validate_non_negative_int",
    "validate_number",
    "validate_same_length",
    # Sequences
    "multiply_list",
    "pairwise",
    # Digits
    "RADIX",
    "digit_list",
]
