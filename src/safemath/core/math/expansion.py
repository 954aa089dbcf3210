"""
Decimal Normalizer — expand

Двоичный float не представляет точно большинство десятичных дробей
(0.1 + 0.2 = 0.30000000000000004). expand масштабирует пару операндов
степенью десяти до точных целых, чтобы одна конкретная операция над ними
была точной; результат затем делится обратно на тот же множитель.

АЛГОРИТМ:
    digits(v) = число знаков после точки в кратчайшей десятичной форме v
    exponent  = 10 ** max(digits(x), digits(y))
    left      = x * exponent   (точный int)
    right     = y * exponent   (точный int)

Десятичная форма берётся из repr (кратчайшая round-trip запись) через
decimal.Decimal, поэтому масштабирование выполняется без двоичной ошибки,
а 1e-07 корректно имеет 7 знаков.

ОГРАНИЧЕНИЯ:
- Исправляется ошибка одной попарной операции, а не накопленная ошибка
  длинной свёртки
- NaN/Inf имеют 0 знаков и остаются float, далее действует IEEE-754
"""

import math
from decimal import Decimal
from typing import Any, Final, NamedTuple

from safemath.core.math.coercion import to_number
from safemath.core.math.numerical_safeguards import is_valid_float

# Маркер отсутствующего второго операнда (None является допустимым операндом)
_ABSENT: Final[Any] = object()


class ScaledPair(NamedTuple):
    """
    Пара масштабированных операндов и множитель.

    right равен None, если expand вызван с одним операндом.
    """
    left: int | float  # x * exponent
    right: int | float | None  # y * exponent
    exponent: int  # 10 ** max(digits(x), digits(y)), всегда >= 1


def fraction_digits(number: float) -> int:
    """
    Длина десятичной дроби: число знаков после точки.

    Examples:
        >>> fraction_digits(0.125)
        3
        >>> fraction_digits(1000.0)
        0
        >>> fraction_digits(1e-07)
        7
        >>> fraction_digits(float('inf'))
        0
    """
    if not is_valid_float(number):
        return 0

    exponent = Decimal(repr(number)).normalize().as_tuple().exponent
    return max(0, -exponent)


def _scale(number: float, digits: int) -> int | float:
    """Точное масштабирование конечного float до int; NaN/Inf и -0.0 без изменений."""
    if not is_valid_float(number) or (number == 0 and math.copysign(1.0, number) < 0):
        return number
    return int(Decimal(repr(number)).scaleb(digits))


def expand(x: Any, y: Any = _ABSENT) -> ScaledPair:
    """
    Масштабирование пары операндов до точных целых.

    Args:
        x: Левый операнд (любое функционально числовое значение)
        y: Правый операнд (опционально)

    Returns:
        ScaledPair(left, right, exponent)

    Examples:
        >>> expand(0.1, 0.2)
        ScaledPair(left=1, right=2, exponent=10)
        >>> expand("1,000", 0.25)
        ScaledPair(left=100000, right=25, exponent=100)
        >>> expand(7)
        ScaledPair(left=7, right=None, exponent=1)
    """
    left = to_number(x)
    digits = fraction_digits(left)

    if y is _ABSENT:
        return ScaledPair(_scale(left, digits), None, 10 ** digits)

    right = to_number(y)
    digits = max(digits, fraction_digits(right))

    return ScaledPair(_scale(left, digits), _scale(right, digits), 10 ** digits)
