"""
Conversion Helpers — унарные преобразования

- percent:    value / 100 через safe_quotient
- reciprocal: value ** -1 (нативная степень, без expand)
- square:     safe_product(value, value)
- sqrt:       нативный корень; DomainError возвращается, а не бросается
- power:      обобщение square на произвольную степень

Нечисловой вход percent / reciprocal / square / power возвращается без
изменений. power — единственная операция, которая бросает исключение:
отсутствие value в запросе является нарушением контракта.
"""

import logging
import math
from collections.abc import Mapping
from typing import Any, Final

from pydantic import ValidationError

from safemath.core.domain.power import PowerRequest
from safemath.core.domain.values import DomainError, DomainErrorKind, Outcome
from safemath.core.math.arithmetic import safe_product, safe_quotient
from safemath.core.math.coercion import is_numeric, to_number
from safemath.core.math.expansion import expand
from safemath.core.math.numerical_safeguards import (
    ieee_divide,
    ieee_power,
    is_integral,
    is_valid_float,
)

logger = logging.getLogger(__name__)

# =============================================================================
# ПАРАМЕТРЫ
# =============================================================================

# Делитель для percent
PERCENT_BASE: Final[int] = 100

# Максимальный |exponent|, при котором целая степень считается точно
# на масштабированном целом; выше используется нативная степень
POWER_EXACT_MAX_EXPONENT: Final[int] = 64


# =============================================================================
# PERCENT / RECIPROCAL / SQUARE
# =============================================================================


def percent(value: Any) -> Any:
    """
    Процент: value / 100.

    Нечисловое значение и ноль возвращаются без изменений.

    Examples:
        >>> percent("-10")
        -0.1
        >>> percent(None) is None
        True
    """
    if not is_numeric(value):
        return value

    number = to_number(value)
    if number == 0:
        return value

    return safe_quotient(number, PERCENT_BASE)


def reciprocal(value: Any) -> Any:
    """
    Обратное значение: value ** -1.

    Examples:
        >>> reciprocal(5)
        0.2
        >>> reciprocal(0)
        inf
    """
    if not is_numeric(value):
        return value
    return ieee_power(to_number(value), -1)


def square(value: Any) -> Any:
    """
    Квадрат через десятично-безопасное произведение.

    Examples:
        >>> square(1.1)
        1.21
    """
    if not is_numeric(value):
        return value

    number = to_number(value)
    return safe_product(number, number)


# =============================================================================
# SQRT
# =============================================================================


def sqrt_outcome(value: Any) -> Outcome:
    """
    Квадратный корень с явным результатом.

    Returns:
        Outcome.of(root) или Outcome.failed(DomainError) для нечислового
        или отрицательного входа
    """
    number = to_number(value) if is_numeric(value) else math.nan

    if math.isnan(number):
        error = DomainError(DomainErrorKind.NON_NUMERIC, value)
    elif number < 0:
        error = DomainError(DomainErrorKind.NEGATIVE, value)
    else:
        return Outcome.of(math.sqrt(number))

    logger.debug("sqrt domain error: %s", error)
    return Outcome.failed(error)


def sqrt(value: Any) -> float | DomainError:
    """
    Квадратный корень.

    ВНИМАНИЕ: при ошибке домена возвращается экземпляр DomainError,
    вызывающий код проверяет isinstance(result, DomainError).

    Examples:
        >>> sqrt("4")
        2.0
        >>> isinstance(sqrt(-1), DomainError)
        True
    """
    return sqrt_outcome(value).unwrap()


# =============================================================================
# POWER
# =============================================================================


def _exact_integral_power(base: float, exponent: int) -> float:
    """base ** exponent на масштабированном целом: (left / scale) ** n."""
    left, _, scale = expand(base)

    if exponent >= 0:
        return ieee_divide(left ** exponent, scale ** exponent)
    return ieee_divide(scale ** -exponent, left ** -exponent)


def power(request: PowerRequest | Mapping[str, Any]) -> Any:
    """
    Возведение в степень: {value, exponent}.

    Args:
        request: PowerRequest или mapping с ключами value и exponent
            (exponent по умолчанию 1)

    Returns:
        value ** exponent или исходное value, если value или exponent
        не числовые

    Raises:
        ValidationError: если value отсутствует

    Examples:
        >>> power({"value": 1.1, "exponent": 2})
        1.21
        >>> power({"value": 4, "exponent": -0.5})
        0.5
    """
    if not isinstance(request, PowerRequest):
        try:
            request = PowerRequest.model_validate(request)
        except ValidationError as exc:
            logger.debug("power contract violation: %s", exc)
            raise

    value = request.value
    if not is_numeric(value) or not is_numeric(request.exponent):
        return value

    base = to_number(value)
    exponent = to_number(request.exponent)

    if (
        is_valid_float(base)
        and is_integral(exponent)
        and abs(exponent) <= POWER_EXACT_MAX_EXPONENT
    ):
        return _exact_integral_power(base, int(exponent))

    return ieee_power(base, exponent)
