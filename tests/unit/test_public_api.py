"""
Тесты публичного API пакета safemath

Ключевые свойства, проверяемые через корневой пакет.
"""

import math

import safemath


class TestPublicApi:
    """Сквозные свойства через from safemath import ..."""

    def test_decimal_exactness(self) -> None:
        assert safemath.safe_sum(0.1, 0.2) == 0.3
        assert safemath.safe_product(0.1, 0.1) == 0.01
        assert safemath.safe_quotient(0.15, 10) == 0.015

    def test_non_numeric_exclusion(self) -> None:
        assert safemath.safe_sum(float("nan"), 1, None, 2, None, 3, "", 4) == 10

    def test_guards(self) -> None:
        assert safemath.mean() == 0
        assert safemath.value_range(13) == 0
        assert safemath.value_range() == 0

    def test_series_statistics(self) -> None:
        assert safemath.median([9, 1, 6, 3, 7, 4]) == 6
        assert set(safemath.mode([1, 1, 1, 2, 2, 3, 4, 4, 4])) == {1, 4}
        assert safemath.safe_difference(1, 2, 3) == -4

    def test_sqrt_domain(self) -> None:
        assert isinstance(safemath.sqrt(-1), safemath.DomainError)
        assert safemath.sqrt(0) == 0

    def test_native_float_propagation(self) -> None:
        assert math.isnan(safemath.minus(math.inf, math.inf))
        assert safemath.reciprocal(0) == math.inf

    def test_all_exports_resolve(self) -> None:
        for name in safemath.__all__:
            assert hasattr(safemath, name), name

    def test_builtins_not_shadowed(self) -> None:
        assert not hasattr(safemath, "sum")
        assert not hasattr(safemath, "range")
