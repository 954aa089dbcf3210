"""
Numeric Coercion — классификация и нормализация входов

Модуль принимает "функционально числовые" значения любого вида и приводит
их к единой форме float:
- int / float (NUMBER)
- строки, в том числе с разделителями тысяч и пробелами (NUMERIC_STRING)
- bool: True → 1.0, False → 0.0 (BOOLEAN)
- Decimal, Fraction, numpy scalars и любые объекты с __float__ / __index__
  (BOXED_NUMERIC)

Всё остальное (None, контейнеры, произвольные объекты) не классифицируется
и из ряда исключается без сигнала.

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Коэрсия идемпотентна: to_number(to_number(x)) == to_number(x)
2. get_values сохраняет относительный порядок членов ряда
3. Нечисловая строка, не входящая в VOID_LITERALS, считается числовой
   и коэрсится в NaN (NaN пропагирует дальше без перехвата)
"""

import logging
import math
import operator
from numbers import Number
from typing import Any, Callable, Final, Sequence

from safemath.core.domain.values import NumericKind, Outcome
from safemath.core.math.numerical_safeguards import is_not_a_number

logger = logging.getLogger(__name__)

# =============================================================================
# ПАРАМЕТРЫ КОЭРСИИ
# =============================================================================

# Разделитель тысяч, удаляемый из строк перед разбором ("1,000" → 1000)
THOUSANDS_SEPARATOR: Final[str] = ","

# Текстовые формы "пустых" значений: строка из этого множества не числовая
# ("nan" и "None": текстовые формы NaN и None в Python)
VOID_LITERALS: Final[frozenset[str]] = frozenset(
    {"", "NaN", "nan", "null", "None", "undefined"}
)

# Первый позиционный аргумент одного из этих типов считается всем рядом
SERIES_CONTAINER_TYPES: Final[tuple[type, ...]] = (list, tuple)

Series = Sequence[Any]


# =============================================================================
# КЛАССИФИКАЦИЯ
# =============================================================================


def classify(value: Any) -> NumericKind | None:
    """
    Определение варианта tagged union для входного значения.

    Порядок проверок важен: bool является подклассом int.

    Returns:
        NumericKind или None, если значение не функционально числовое
    """
    if isinstance(value, bool):
        return NumericKind.BOOLEAN

    if isinstance(value, (int, float)):
        return NumericKind.NUMBER

    if isinstance(value, str):
        return NumericKind.NUMERIC_STRING

    if isinstance(value, complex):
        return None

    kind = type(value)
    if isinstance(value, Number) or hasattr(kind, "__float__") or hasattr(kind, "__index__"):
        return NumericKind.BOXED_NUMERIC

    return None


def clean_text(text: str) -> str:
    """Удаление разделителей тысяч и окружающих пробелов."""
    return text.replace(THOUSANDS_SEPARATOR, "").strip()


# =============================================================================
# КОНВЕРТЕРЫ (по одному на вариант)
# =============================================================================


def _number_to_float(value: int | float) -> float:
    try:
        return float(value)
    except OverflowError:
        # int вне диапазона double
        return math.inf if value > 0 else -math.inf


def _string_to_float(value: str) -> float:
    try:
        return float(clean_text(value))
    except ValueError:
        return math.nan


def _boolean_to_float(value: bool) -> float:
    return 1.0 if value else 0.0


def _boxed_to_float(value: Any) -> float:
    try:
        if not hasattr(type(value), "__float__"):
            return _number_to_float(operator.index(value))
        return float(value)
    except (TypeError, ValueError):
        # Объект объявил конверсию, но не смог её выполнить (например, numpy-массив)
        return math.nan


_CONVERTERS: Final[dict[NumericKind, Callable[[Any], float]]] = {
    NumericKind.NUMBER: _number_to_float,
    NumericKind.NUMERIC_STRING: _string_to_float,
    NumericKind.BOOLEAN: _boolean_to_float,
    NumericKind.BOXED_NUMERIC: _boxed_to_float,
}


def to_number(value: Any) -> float:
    """
    Приведение значения к float.

    Не функционально числовое значение даёт NaN (а не 0).

    Examples:
        >>> to_number("1,000.5")
        1000.5
        >>> to_number(True)
        1.0
        >>> to_number(None)
        nan
    """
    kind = classify(value)
    if kind is None:
        return math.nan
    return _CONVERTERS[kind](value)


# =============================================================================
# ПРЕДИКАТ И РЕЗУЛЬТАТ
# =============================================================================


def is_numeric(value: Any) -> bool:
    """
    Проверка, является ли значение "функционально числовым".

    Правила (по порядку):
    1. Строка: удаляются разделители тысяч и пробелы; числовая, если
       результат не входит в VOID_LITERALS
    2. Остальные классифицированные значения: числовые, если конверсия
       не даёт NaN
    3. Неклассифицированные значения (None, контейнеры) не числовые

    Examples:
        >>> is_numeric(" 1,000 ")
        True
        >>> is_numeric("")
        False
        >>> is_numeric(float('nan'))
        False
        >>> is_numeric([1])
        False
    """
    kind = classify(value)

    if kind is None:
        return False

    if kind is NumericKind.NUMERIC_STRING:
        return clean_text(value) not in VOID_LITERALS

    return not is_not_a_number(_CONVERTERS[kind](value))


def coerce(value: Any) -> Outcome:
    """
    Коэрсия с явным результатом.

    Returns:
        Outcome.of(float) для числовых значений, Outcome.excluded() иначе
    """
    if is_numeric(value):
        return Outcome.of(to_number(value))
    return Outcome.excluded()


# =============================================================================
# РЯДЫ
# =============================================================================


def as_series(values: tuple[Any, ...]) -> list[Any]:
    """
    Адаптер вызова: позиционные аргументы или один массив → ряд.

    Если первый аргумент — list/tuple, он считается всем рядом,
    остальные аргументы игнорируются.

    Examples:
        >>> as_series(([1, 2], 3))
        [1, 2]
        >>> as_series((1, 2, 3))
        [1, 2, 3]
    """
    if values and isinstance(values[0], SERIES_CONTAINER_TYPES):
        return list(values[0])
    return list(values)


def get_values(series: Series) -> list[float]:
    """
    Извлечение числовых членов ряда.

    Нечисловые члены исключаются без сигнала, порядок сохраняется.

    Args:
        series: Ряд произвольных значений

    Returns:
        Список коэрсированных float
    """
    members = list(series)
    values = [to_number(member) for member in members if is_numeric(member)]

    if len(values) < len(members):
        logger.debug(
            "Excluded %d non-numeric member(s) from series of %d",
            len(members) - len(values),
            len(members),
        )

    return values
