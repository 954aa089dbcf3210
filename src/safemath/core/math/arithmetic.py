"""
Arithmetic Core — десятично-безопасные свёртки рядов

Четыре свёртки слева направо; каждый шаг проходит через expand:
    sum:        seed = 0;  acc' = (left + right) / exponent
    product:    seed = 1;  acc' = (left * right) / (exponent * exponent)
    difference: seed = первый член; acc' = (left - right) / exponent
    quotient:   seed = первый член; acc' = left / right  (множители сокращаются)

Для каждой операции есть две формы:
- *_series(series) — ядро с одним явным параметром ряда
- safe_*(*values) — граница вызова: позиционные аргументы или один массив

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Нечисловые члены исключаются до свёртки, без сигнала
2. Порядок свёртки строго слева направо (difference(1, 2, 3) == -4)
3. NaN/Inf пропагируют без перехвата (1 / 0 → inf, inf - inf → nan)
"""

from functools import reduce
from typing import Any, Final

from safemath.core.math.coercion import Series, as_series, get_values
from safemath.core.math.expansion import expand
from safemath.core.math.numerical_safeguards import ieee_divide

# =============================================================================
# ИДЕНТИЧНОСТИ СВЁРТОК
# =============================================================================

SUM_IDENTITY: Final[float] = 0.0
PRODUCT_IDENTITY: Final[float] = 1.0


# =============================================================================
# ПОПАРНЫЕ ШАГИ
# =============================================================================


def add_pair(current: float, next_value: float) -> float:
    left, right, exponent = expand(current, next_value)
    return ieee_divide(left + right, exponent)


def subtract_pair(current: float, next_value: float) -> float:
    left, right, exponent = expand(current, next_value)
    return ieee_divide(left - right, exponent)


def multiply_pair(current: float, next_value: float) -> float:
    left, right, exponent = expand(current, next_value)
    return ieee_divide(left * right, exponent * exponent)


def divide_pair(current: float, next_value: float) -> float:
    left, right, _ = expand(current, next_value)
    return ieee_divide(left, right)


# =============================================================================
# СВЁРТКИ (ядро, один параметр ряда)
# =============================================================================


def sum_series(series: Series) -> float:
    """
    Десятично-безопасная сумма ряда.

    Examples:
        >>> sum_series([0.1, 0.2])
        0.3
        >>> sum_series([])
        0.0
    """
    return reduce(add_pair, get_values(series), SUM_IDENTITY)


def product_series(series: Series) -> float:
    """
    Десятично-безопасное произведение ряда.

    Examples:
        >>> product_series([0.1, 0.1])
        0.01
    """
    return reduce(multiply_pair, get_values(series), PRODUCT_IDENTITY)


def difference_series(series: Series) -> float:
    """
    Последовательная разность: первый член минус остальные, слева направо.

    Для пустого ряда возвращается SUM_IDENTITY, для одного члена — сам член.

    Examples:
        >>> difference_series([1, 2, 3])
        -4.0
    """
    values = get_values(series)
    if not values:
        return SUM_IDENTITY
    return reduce(subtract_pair, values[1:], values[0])


def quotient_series(series: Series) -> float:
    """
    Последовательное частное: первый член делится на остальные, слева направо.

    Деление на ноль даёт ±inf (или nan для 0 / 0), а не исключение.

    Examples:
        >>> quotient_series([0.15, 10])
        0.015
        >>> quotient_series([1, 0])
        inf
    """
    values = get_values(series)
    if not values:
        return PRODUCT_IDENTITY
    return reduce(divide_pair, values[1:], values[0])


# =============================================================================
# ГРАНИЦА ВЫЗОВА (позиционные аргументы или один массив)
# =============================================================================


def safe_sum(*values: Any) -> float:
    """sum: safe_sum(0.1, 0.2) или safe_sum([0.1, 0.2])."""
    return sum_series(as_series(values))


def safe_difference(*values: Any) -> float:
    """difference: safe_difference(1, 2, 3) == -4."""
    return difference_series(as_series(values))


def safe_product(*values: Any) -> float:
    """product: safe_product(0.1, 0.1) == 0.01."""
    return product_series(as_series(values))


def safe_quotient(*values: Any) -> float:
    """quotient: safe_quotient(0.15, 10) == 0.015."""
    return quotient_series(as_series(values))


# Короткие имена операторов
add = safe_sum
minus = safe_difference
multiply = safe_product
divide = safe_quotient
