"""
safemath — decimal-safe arithmetic on loosely-typed numeric inputs.

    >>> from safemath import safe_sum, safe_product
    >>> safe_sum(0.1, 0.2)
    0.3
    >>> safe_product(0.1, 0.1)
    0.01
"""

import logging

from safemath.core.domain import (
    POWER_DEFAULT_EXPONENT,
    DomainError,
    DomainErrorKind,
    NumericKind,
    Outcome,
    OutcomeTag,
    PowerRequest,
)
from safemath.core.math import *  # noqa: F401,F403
from safemath.core.math import __all__ as _math_all

logging.getLogger(__name__).addHandler(logging.NullHandler())

__version__ = "1.0.0"

__all__ = [
    # Domain
    "POWER_DEFAULT_EXPONENT",
    "DomainError",
    "DomainErrorKind",
    "NumericKind",
    "Outcome",
    "OutcomeTag",
    "PowerRequest",
    *_math_all,
]
