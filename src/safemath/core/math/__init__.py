"""
Core math modules для safemath

Десятично-безопасная арифметика над слабо типизированными входами.
"""

# Numerical Safeguards
from safemath.core.math.numerical_safeguards import (
    ieee_divide,
    ieee_power,
    is_integral,
    is_not_a_number,
    is_valid_float,
)

# Numeric Coercion
from safemath.core.math.coercion import (
    SERIES_CONTAINER_TYPES,
    THOUSANDS_SEPARATOR,
    VOID_LITERALS,
    Series,
    as_series,
    classify,
    clean_text,
    coerce,
    get_values,
    is_numeric,
    to_number,
)

# Decimal Normalizer
from safemath.core.math.expansion import (
    ScaledPair,
    expand,
    fraction_digits,
)

# Arithmetic Core
from safemath.core.math.arithmetic import (
    PRODUCT_IDENTITY,
    SUM_IDENTITY,
    add,
    add_pair,
    difference_series,
    divide,
    divide_pair,
    minus,
    multiply,
    multiply_pair,
    product_series,
    quotient_series,
    safe_difference,
    safe_product,
    safe_quotient,
    safe_sum,
    subtract_pair,
    sum_series,
)

# Series Statistics
from safemath.core.math.series import (
    mean,
    mean_series,
    median,
    median_series,
    mode,
    mode_series,
    value_range,
    value_range_series,
)

# Conversion Helpers
from safemath.core.math.conversions import (
    PERCENT_BASE,
    POWER_EXACT_MAX_EXPONENT,
    percent,
    power,
    reciprocal,
    sqrt,
    sqrt_outcome,
    square,
)

__all__ = [
    # Numerical Safeguards
    "ieee_divide",
    "ieee_power",
    "is_integral",
    "is_not_a_number",
    "is_valid_float",
    # Numeric Coercion — Constants
    "SERIES_CONTAINER_TYPES",
    "THOUSANDS_SEPARATOR",
    "VOID_LITERALS",
    # Numeric Coercion — Types
    "Series",
    # Numeric Coercion — Functions
    "as_series",
    "classify",
    "clean_text",
    "coerce",
    "get_values",
    "is_numeric",
    "to_number",
    # Decimal Normalizer
    "ScaledPair",
    "expand",
    "fraction_digits",
    # Arithmetic Core — Constants
    "PRODUCT_IDENTITY",
    "SUM_IDENTITY",
    # Arithmetic Core — Pairwise steps
    "add_pair",
    "divide_pair",
    "multiply_pair",
    "subtract_pair",
    # Arithmetic Core — Series folds
    "difference_series",
    "product_series",
    "quotient_series",
    "sum_series",
    # Arithmetic Core — Call boundary
    "add",
    "divide",
    "minus",
    "multiply",
    "safe_difference",
    "safe_product",
    "safe_quotient",
    "safe_sum",
    # Series Statistics
    "mean",
    "mean_series",
    "median",
    "median_series",
    "mode",
    "mode_series",
    "value_range",
    "value_range_series",
    # Conversion Helpers
    "PERCENT_BASE",
    "POWER_EXACT_MAX_EXPONENT",
    "percent",
    "power",
    "reciprocal",
    "sqrt",
    "sqrt_outcome",
    "square",
]
