"""
Values — Классификация входов и явные типы результатов

Модуль заменяет неявную диспетчеризацию "функционально числовых" значений
явным tagged union (NumericKind) и вводит явный тип результата (Outcome),
по тегу которого вызывающий код различает значение, исключение из ряда
и доменную ошибку.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Any


# =============================================================================
# ENUMS
# =============================================================================


class NumericKind(str, Enum):
    """Вариант "функционально числового" входа"""

    NUMBER = "number"
    NUMERIC_STRING = "numeric_string"
    BOOLEAN = "boolean"
    BOXED_NUMERIC = "boxed_numeric"


class OutcomeTag(str, Enum):
    """Тег результата операции"""

    VALUE = "value"
    EXCLUDED = "excluded"
    ERROR = "error"


class DomainErrorKind(str, Enum):
    """Причина доменной ошибки"""

    NEGATIVE = "negative"
    NON_NUMERIC = "non_numeric"


# =============================================================================
# EXCEPTIONS
# =============================================================================


class DomainError(ValueError):
    """
    Значение вне домена операции (например, sqrt от отрицательного числа).

    ВНИМАНИЕ: экземпляр возвращается как результат, а не бросается.
    Вызывающий код проверяет isinstance(result, DomainError).
    """

    def __init__(self, kind: DomainErrorKind, value: Any):
        self.kind = kind
        self.value = value
        super().__init__(f"{kind.value} input outside operation domain: {value!r}")


# =============================================================================
# OUTCOME
# =============================================================================


@dataclass(frozen=True)
class Outcome:
    """
    Явный результат: Value(number) | Excluded | Error(kind).

    Immutable (frozen=True). Создаётся только через фабричные методы.
    """

    tag: OutcomeTag
    value: float | None = None
    error: DomainError | None = None

    @classmethod
    def of(cls, value: float) -> "Outcome":
        return cls(OutcomeTag.VALUE, value=value)

    @classmethod
    def excluded(cls) -> "Outcome":
        return cls(OutcomeTag.EXCLUDED)

    @classmethod
    def failed(cls, error: DomainError) -> "Outcome":
        return cls(OutcomeTag.ERROR, error=error)

    @property
    def is_value(self) -> bool:
        return self.tag is OutcomeTag.VALUE

    def unwrap(self) -> float | DomainError | None:
        """
        Плоское представление результата.

        Returns:
            число для VALUE, экземпляр DomainError для ERROR, None для EXCLUDED
        """
        if self.tag is OutcomeTag.VALUE:
            return self.value
        if self.tag is OutcomeTag.ERROR:
            return self.error
        return None
