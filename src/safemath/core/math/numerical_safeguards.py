"""
Numerical Safeguards — IEEE-754 примитивы

Модуль восстанавливает нативную семантику float там, где Python вместо
IEEE-754 результата бросает исключение:
- Деление на ноль (x / 0 → ±inf, 0 / 0 → nan)
- Переполнение int / int (→ ±inf)
- Возведение в степень вне домена (0.0 ** -1 → inf, (-8) ** 0.5 → nan)

И даёт явные предикаты вместо сравнений-трюков:
- is_not_a_number (вместо проверки x != x)
- is_valid_float (finite)
- is_integral

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. NaN/Inf не перехватываются и не заменяются fallback-значениями:
   они являются валидным результатом и пропагируют дальше
2. Ни одна функция модуля не бросает ZeroDivisionError/OverflowError
3. Все операции детерминированы и воспроизводимы
"""

import math
from numbers import Real


# =============================================================================
# ПРЕДИКАТЫ
# =============================================================================


def is_not_a_number(value: Real) -> bool:
    """
    Явная проверка на NaN для нормализованного числового значения.

    int никогда не является NaN (и может не помещаться в float),
    поэтому проверяется без конверсии.

    Examples:
        >>> is_not_a_number(float('nan'))
        True
        >>> is_not_a_number(10 ** 400)
        False
    """
    if isinstance(value, int):
        return False
    return math.isnan(value)


def is_valid_float(value: float) -> bool:
    """
    Проверка, является ли float валидным (не NaN, не Inf).

    Args:
        value: Проверяемое значение

    Returns:
        True если значение валидное (finite), False если NaN или Inf
    """
    return math.isfinite(value)


def is_integral(value: Real) -> bool:
    """
    Проверка, что значение конечно и не имеет дробной части.

    Examples:
        >>> is_integral(2.0)
        True
        >>> is_integral(2.5)
        False
        >>> is_integral(float('inf'))
        False
    """
    if isinstance(value, int):
        return True
    return is_valid_float(value) and float(value).is_integer()


def _sign(value: Real) -> float:
    """Знак значения как ±1.0 (с учётом -0.0 для float)."""
    if isinstance(value, float):
        return math.copysign(1.0, value)
    return -1.0 if value < 0 else 1.0


# =============================================================================
# IEEE-754 ДЕЛЕНИЕ И СТЕПЕНЬ
# =============================================================================


def ieee_divide(numerator: Real, denominator: Real) -> float:
    """
    Деление с нативной IEEE-754 семантикой.

    Для int / int Python выполняет корректно округлённое деление,
    поэтому точные целые операнды дают ближайший double к точному частному.

    Args:
        numerator: Числитель (int или float)
        denominator: Знаменатель (int или float)

    Returns:
        numerator / denominator; ±inf при делении ненулевого числа на ноль
        или при переполнении; nan для 0 / 0 и nan / 0

    Examples:
        >>> ieee_divide(3, 10)
        0.3
        >>> ieee_divide(1, 0)
        inf
        >>> ieee_divide(-1, 0)
        -inf
        >>> ieee_divide(0, 0)
        nan
    """
    try:
        return numerator / denominator
    except ZeroDivisionError:
        if is_not_a_number(numerator) or numerator == 0:
            return math.nan
        return math.inf * _sign(numerator) * _sign(denominator)
    except OverflowError:
        return math.inf * _sign(numerator) * _sign(denominator)


def ieee_power(base: Real, exponent: Real) -> float:
    """
    Возведение в степень с нативной IEEE-754 семантикой.

    math.pow бросает ValueError для 0 ** (отрицательная степень) и для
    отрицательного основания с дробной степенью; встроенный ** в последнем
    случае возвращает complex. Здесь оба случая дают float.

    Examples:
        >>> ieee_power(2, -1)
        0.5
        >>> ieee_power(0, -1)
        inf
        >>> ieee_power(-8, 0.5)
        nan
    """
    odd = is_integral(exponent) and int(exponent) % 2 == 1

    try:
        return math.pow(base, exponent)
    except OverflowError:
        if base < 0 and odd:
            return -math.inf
        return math.inf
    except ValueError:
        # math domain error
        if base == 0:
            return math.inf * (_sign(base) if odd else 1.0)
        return math.nan
