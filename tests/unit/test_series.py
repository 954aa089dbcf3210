"""
Тесты для Series Statistics

Проверяет:
1. mean: защита от деления на ноль, повторная проверка NaN при накоплении
2. median: верхний из двух средних для чётной длины, без интерполяции
3. mode: результат как множество
4. range: 0 для рядов короче двух, десятичная точность через sum
"""

import math

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


class Valued:
    """Объект с __float__ ("функционально числовой")"""

    def __init__(self, value: float):
        self._value = value

    def __float__(self) -> float:
        return float(self._value)


NOISY = [float("nan"), 1, None, 2, None, 3, "", 4]


# =============================================================================
# ТЕСТЫ: mean
# =============================================================================


class TestMean:
    """Тесты mean"""

    def test_empty_series_returns_zero(self) -> None:
        """Пустой ряд → 0, а не NaN"""
        assert mean() == 0
        assert mean_series([]) == 0
        assert mean(None, "") == 0

    def test_single_value(self) -> None:
        assert mean(999) == 999

    def test_average(self) -> None:
        assert mean([1, 2, 3, 4]) == 2.5

    def test_ignores_non_numeric_values(self) -> None:
        assert mean(*NOISY) == 2.5

    def test_functionally_numeric_values(self) -> None:
        # (11 + 9 + 1) / 3
        assert mean([Valued(11), "9", True]) == 7

    def test_infinities(self) -> None:
        assert mean(math.inf, math.inf) == math.inf
        assert mean(-math.inf, -math.inf) == -math.inf
        assert math.isnan(mean(-math.inf, math.inf))

    def test_decimal_values(self) -> None:
        assert mean([0.1, 0.2, 0.3, 0.4]) == 0.25

    def test_nan_text_rejected_at_accumulation(self) -> None:
        """"abc" проходит фильтр ряда, но не учитывается в mean"""
        assert mean("abc", 2, 4) == 3
        assert mean(["abc"]) == 0


# =============================================================================
# ТЕСТЫ: median
# =============================================================================


class TestMedian:
    """Тесты median"""

    def test_empty_series_returns_zero(self) -> None:
        assert median() == 0

    def test_single_value(self) -> None:
        assert median(13) == 13

    def test_odd_length(self) -> None:
        assert median([9, 7, 1, 3, 4]) == 4

    def test_even_length_returns_upper_middle(self) -> None:
        """[1, 3, 4, 6, 7, 9]: индекс 6 // 2 = 3 → 6, а не (4 + 6) / 2"""
        assert median([9, 1, 6, 3, 7, 4]) == 6

    def test_ignores_non_numeric_values(self) -> None:
        assert median(*NOISY) == 3

    def test_functionally_numeric_values(self) -> None:
        assert median([Valued(10), "9", True]) == 9
        assert median([Valued(10), "12", True]) == 10

    def test_returns_number(self) -> None:
        assert isinstance(median_series(["9", "1", "5"]), float)

    def test_infinities(self) -> None:
        assert median(math.inf, 1, math.inf) == math.inf
        assert median(-math.inf, -1, -math.inf) == -math.inf
        assert median(-math.inf, 0, math.inf) == 0

    def test_decimal_values(self) -> None:
        assert median([0.1, 0.2, 0.25, 0.4]) == 0.25


# =============================================================================
# ТЕСТЫ: mode
# =============================================================================


class TestMode:
    """Тесты mode (порядок результата не гарантирован)"""

    def test_empty_series_returns_empty_list(self) -> None:
        assert mode() == []

    def test_single_value(self) -> None:
        assert mode(13) == [13]

    def test_single_mode(self) -> None:
        assert mode([1, 1, 1, 2, 2, 3]) == [1]

    def test_multiple_modes(self) -> None:
        assert set(mode([1, 1, 1, 2, 2, 3, 4, 4, 4])) == {1, 4}

    def test_ignores_non_numeric_values(self) -> None:
        assert set(mode(float("nan"), 1, None, 2, None, 3, "", 4, 5, 2, 5)) == {2, 5}
        assert mode_series(["abc", "abc", 1]) == [1]

    def test_functionally_numeric_values(self) -> None:
        assert mode([Valued(10), "10", True]) == [10]

    def test_infinities(self) -> None:
        assert mode(math.inf, 1, math.inf) == [math.inf]
        assert mode(-math.inf, -1, -math.inf) == [-math.inf]
        assert set(mode([-math.inf, 0, math.inf])) == {-math.inf, 0, math.inf}

    def test_decimal_values(self) -> None:
        assert set(mode([0.1, 0.2, 0.25, 0.4])) == {0.1, 0.2, 0.25, 0.4}


# =============================================================================
# ТЕСТЫ: range
# =============================================================================


class TestValueRange:
    """Тесты value_range"""

    def test_empty_series_returns_zero(self) -> None:
        assert value_range() == 0

    def test_single_value_returns_zero(self) -> None:
        assert value_range(13) == 0
        assert value_range_series([13, None]) == 0

    def test_difference_between_extremes(self) -> None:
        assert value_range(1, 1, 2, 5, 100, 100) == 99

    def test_ignores_non_numeric_values(self) -> None:
        assert value_range(float("nan"), 1, None, 2, None, 3, "", 4, 5, 2, 5) == 4

    def test_infinities(self) -> None:
        assert value_range(math.inf, 1, math.inf) == math.inf

    def test_decimal_values(self) -> None:
        """0.3 - 0.2 в float даёт 0.09999999999999998"""
        assert value_range([0.2, 0.3]) == 0.1
        assert value_range(1.1, 0.9) == 0.2
