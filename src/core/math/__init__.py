"""
Core math modules

Примитивы коэрции и округления для fluent-обёрток.
"""

from src.core.math.numerical_safeguards import (
    # Constants
    EPS_FLOAT_COMPARE_ABS,
    EPS_FLOAT_COMPARE_REL,
    FIXED_NOTATION_LIMIT,
    MAX_FRACTION_DIGITS,
    MAX_PRECISION,
    # Coercion
    is_valid_float,
    parse_leading_float,
    to_decimal,
    to_number,
    # Division
    ieee_divide,
    # Rounding
    round_half_up,
    round_to_fixed,
    round_to_significant,
    # Comparisons & utilities
    clamp,
    is_close,
)

__all__ = [
    # Constants
    "EPS_FLOAT_COMPARE_ABS",
    "EPS_FLOAT_COMPARE_REL",
    "FIXED_NOTATION_LIMIT",
    "MAX_FRACTION_DIGITS",
    "MAX_PRECISION",
    # Coercion
    "is_valid_float",
    "parse_leading_float",
    "to_decimal",
    "to_number",
    # Division
    "ieee_divide",
    # Rounding
    "round_half_up",
    "round_to_fixed",
    "round_to_significant",
    # Comparisons & utilities
    "clamp",
    "is_close",
]
