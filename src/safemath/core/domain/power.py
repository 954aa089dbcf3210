"""
PowerRequest — Аргумент операции power

Immutable Pydantic модель {value, exponent}. Отсутствие value является
нарушением контракта вызывающей стороны: валидация бросает ValidationError.
Это единственный случай в библиотеке, когда некорректный вход прерывает
выполнение вместо деградации результата.
"""

from typing import Any, Final

from pydantic import BaseModel, Field

# Степень по умолчанию: value ** 1
POWER_DEFAULT_EXPONENT: Final[int] = 1


class PowerRequest(BaseModel):
    """
    Аргумент power: основание и показатель степени.

    Поля намеренно не типизированы числом: оба значения проходят через
    слой коэрсии, а нечисловое основание возвращается без изменений.
    """

    value: Any = Field(..., description="Основание (любое функционально числовое значение)")
    exponent: Any = Field(
        default=POWER_DEFAULT_EXPONENT,
        description="Показатель степени (может быть отрицательным или дробным)",
    )

    model_config = {"frozen": True}  # Immutable
