"""
Core math modules

Целочисленные и float примитивы с гарантией корректности в диапазоне int64.
"""

# Numerical Safeguards
from src.core.math.numerical_safeguards import (
    # Int64 limits
    INT64_MAX,
    INT64_MIN,
    # Exceptions
    Int64OverflowError,
    # Integer arithmetic
    ensure_int64,
    gcd,
    is_int64,
    # Float validation
    is_valid_float,
    validate_non_negative,
    validate_positive,
    # Tolerance band
    compare_with_band,
    tolerance_band,
)

__all__ = [
    # Numerical Safeguards — Int64 limits
    "INT64_MAX",
    "INT64_MIN",
    # Numerical Safeguards — Exceptions
    "Int64OverflowError",
    # Numerical Safeguards — Integer arithmetic
    "ensure_int64",
    "gcd",
    "is_int64",
    # Numerical Safeguards — Float validation
    "is_valid_float",
    "validate_non_negative",
    "validate_positive",
    # Numerical Safeguards — Tolerance band
    "compare_with_band",
    "tolerance_band",
]
