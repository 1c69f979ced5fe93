"""
Core math modules для sciengine

Математические примитивы и специальные функции с гарантией стабильности.
"""

# Numerical Safeguards
from sciengine.core.math.numerical_safeguards import (
    EPS_FLOAT_COMPARE_ABS,
    EPS_FLOAT_COMPARE_REL,
    INT64_MAX,
    INT64_MIN,
    is_close,
    is_integral,
    is_valid_float,
    require_finite,
    validate_int64,
    validate_whole_number,
)

# Special Functions
from sciengine.core.math.special_functions import (
    FACTORIAL_MAX_ARG,
    LANCZOS_COEFFICIENTS,
    LANCZOS_SERIES_BASE,
    combination,
    factorial,
    gamma,
    permutation,
)

# Number Theory
from sciengine.core.math.number_theory import (
    BASE_MAX,
    BASE_MIN,
    from_base,
    gcd,
    lcm,
    to_base,
)

__all__ = [
    # Numerical Safeguards — Epsilon constants
    "EPS_FLOAT_COMPARE_ABS",
    "EPS_FLOAT_COMPARE_REL",
    "INT64_MAX",
    "INT64_MIN",
    # Numerical Safeguards — Functions
    "is_close",
    "is_integral",
    "is_valid_float",
    "require_finite",
    "validate_int64",
    "validate_whole_number",
    # Special Functions — Constants
    "FACTORIAL_MAX_ARG",
    "LANCZOS_COEFFICIENTS",
    "LANCZOS_SERIES_BASE",
    # Special Functions — Functions
    "combination",
    "factorial",
    "gamma",
    "permutation",
    # Number Theory — Constants
    "BASE_MAX",
    "BASE_MIN",
    # Number Theory — Functions
    "from_base",
    "gcd",
    "lcm",
    "to_base",
]
