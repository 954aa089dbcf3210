"""
Series Statistics — mean, median, mode, range

Тонкие потребители Arithmetic Core и слоя коэрсии:
- mean:   сумма шагами add_pair, деление на число членов; 0 для пустого ряда
- median: элемент с индексом floor(n / 2) отсортированного ряда; для чётного
          n это верхний из двух средних (без интерполяции)
- mode:   все значения с максимальной частотой (порядок не гарантирован,
          результат следует трактовать как множество)
- range:  sum(max, -min) через decimal-нормализацию; 0 при n < 2
"""

import logging
import math
from collections import Counter
from typing import Any

from safemath.core.math.arithmetic import SUM_IDENTITY, add_pair
from safemath.core.math.coercion import Series, as_series, get_values
from safemath.core.math.expansion import expand
from safemath.core.math.numerical_safeguards import is_not_a_number

logger = logging.getLogger(__name__)


# =============================================================================
# MEAN
# =============================================================================


def mean_series(series: Series) -> float:
    """
    Среднее арифметическое ряда.

    Каждый член повторно проверяется на NaN в момент накопления: строки,
    которые прошли is_numeric, но коэрсятся в NaN ("abc"), не учитываются.

    Returns:
        Среднее или 0.0, если в ряду нет числовых членов
    """
    size = 0
    total = SUM_IDENTITY

    for value in get_values(series):
        if is_not_a_number(expand(value).left):
            continue
        size += 1
        total = add_pair(total, value)

    if size == 0:
        return 0.0

    return total / size


# =============================================================================
# MEDIAN
# =============================================================================


def median_series(series: Series) -> float:
    """
    Медиана ряда без интерполяции.

    Examples:
        >>> median_series([9, 7, 1, 3, 4])
        4.0
        >>> median_series([9, 1, 6, 3, 7, 4])  # [1, 3, 4, 6, 7, 9] → индекс 3
        6.0
    """
    values = sorted(get_values(series))

    if not values:
        return 0.0

    return values[len(values) // 2]


# =============================================================================
# MODE
# =============================================================================


def mode_series(series: Series) -> list[float]:
    """
    Наиболее часто встречающиеся значения ряда.

    Returns:
        Список значений с максимальной частотой; пустой список для пустого ряда
    """
    tally: Counter[float] = Counter(
        value for value in get_values(series) if not is_not_a_number(value)
    )
    most = max(tally.values(), default=0)

    return [value for value, count in tally.items() if count == most]


# =============================================================================
# RANGE
# =============================================================================


def value_range_series(series: Series) -> float:
    """
    Разность между наибольшим и наименьшим членом ряда.

    Разность считается как sum(high, -low), чтобы пройти через expand.

    Examples:
        >>> value_range_series([0.2, 0.3])
        0.1
        >>> value_range_series([13])
        0.0
    """
    values = get_values(series)

    if len(values) < 2:
        return 0.0

    low = math.inf
    high = -math.inf

    for value in values:
        if value > high:
            high = value
        if value < low:
            low = value

    logger.debug("Range bounds: low=%r high=%r", low, high)
    return add_pair(high, -low)


# =============================================================================
# ГРАНИЦА ВЫЗОВА
# =============================================================================


def mean(*values: Any) -> float:
    """mean(1, 2, 3, 4) == mean([1, 2, 3, 4]) == 2.5"""
    return mean_series(as_series(values))


def median(*values: Any) -> float:
    return median_series(as_series(values))


def mode(*values: Any) -> list[float]:
    return mode_series(as_series(values))


def value_range(*values: Any) -> float:
    return value_range_series(as_series(values))
