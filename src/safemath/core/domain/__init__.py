"""
Domain value objects.

Contains the tagged input kinds, explicit result types and the power request model.
"""

from safemath.core.domain.power import POWER_DEFAULT_EXPONENT, PowerRequest
from safemath.core.domain.values import (
    DomainError,
    DomainErrorKind,
    NumericKind,
    Outcome,
    OutcomeTag,
)

__all__ = [
    # Values
    "NumericKind",
    "OutcomeTag",
    "Outcome",
    "DomainErrorKind",
    "DomainError",
    # Power
    "POWER_DEFAULT_EXPONENT",
    "PowerRequest",
]
