"""
Calculation — Модели запроса и результата калькулятора

Immutable Pydantic модели. Операнды уже сконвертированы из текста
(конверсия выполняется в src.calculator.session). Результат может быть
±inf или nan при делении на ноль в IEEE-режиме.
"""

import math

from pydantic import BaseModel, Field, computed_field, field_validator

from .operation import OperationSelector


class CalculationRequest(BaseModel):
    """Два операнда и выбранная операция."""

    operand1: float = Field(..., description="Первый операнд")
    operand2: float = Field(..., description="Второй операнд")
    operation: OperationSelector = Field(..., description="Операция (токен 1..4)")

    model_config = {"frozen": True}

    @field_validator("operation", mode="before")
    @classmethod
    def strip_operation_token(cls, v):
        """Токен из консоли может прийти с пробелами."""
        if isinstance(v, str):
            return v.strip()
        return v

    def describe(self) -> str:
        """Человекочитаемое выражение: '6.0 / 2.0'."""
        return f"{self.operand1} {self.operation.symbol} {self.operand2}"


class CalculationResult(BaseModel):
    """
    Результат применения операции к операндам.

    Содержит исходный запрос для диагностики.
    """

    request: CalculationRequest = Field(..., description="Исходный запрос")
    result: float = Field(..., description="Результат (может быть inf/nan)")

    model_config = {"frozen": True}

    @computed_field  # type: ignore[prop-decorator]
    @property
    def is_finite(self) -> bool:
        """False если результат ±inf или nan."""
        return math.isfinite(self.result)
