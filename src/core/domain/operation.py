"""
Operation — Селектор арифметической операции калькулятора

Токены "1".."4" совпадают с пунктами меню интерактивного калькулятора:
    1) Add 2) Subtract 3) Multiply 4) Divide
"""

from enum import Enum
from typing import Any

from src.core.errors import InvalidArgument


# =============================================================================
# ENUMS
# =============================================================================


class OperationSelector(str, Enum):
    """Бинарная арифметическая операция, закодированная токеном меню."""

    ADD = "1"
    SUBTRACT = "2"
    MULTIPLY = "3"
    DIVIDE = "4"

    @property
    def symbol(self) -> str:
        """Математический символ операции."""
        return _SYMBOLS[self]

    @property
    def label(self) -> str:
        """Название пункта меню (Add, Subtract, ...)."""
        return self.name.capitalize()

    @classmethod
    def from_token(cls, token: Any) -> "OperationSelector":
        """
        Конверсия токена (или готового селектора) в OperationSelector.

        Пробелы вокруг строкового токена игнорируются.

        Raises:
            InvalidArgument: Если токен не соответствует ни одной операции
        """
        if isinstance(token, cls):
            return token

        if isinstance(token, str):
            try:
                return cls(token.strip())
            except ValueError:
                pass

        raise InvalidArgument(
            f"unrecognized operation selector {token!r}, "
            f"expected one of {[member.value for member in cls]}"
        )


_SYMBOLS = {
    OperationSelector.ADD: "+",
    OperationSelector.SUBTRACT: "-",
    OperationSelector.MULTIPLY: "*",
    OperationSelector.DIVIDE: "/",
}


def operation_menu() -> str:
    """Строка меню операций: '1) Add 2) Subtract 3) Multiply 4) Divide'."""
    return " ".join(f"{member.value}) {member.label}" for member in OperationSelector)
