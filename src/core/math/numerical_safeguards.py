"""
Numerical Safeguards — Проверки аргументов и IEEE-деление

Модуль содержит общие примитивы для всех числовых операций:
- Проверка типов операндов (real numbers, не bool)
- Проверка целых неотрицательных значений
- Проверка одинаковой длины последовательностей
- Деление с семантикой IEEE 754 (±inf / nan вместо ZeroDivisionError)

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Невалидный аргумент всегда даёт InvalidArgument, никогда не молчаливый fallback
2. ieee_divide никогда не поднимает ZeroDivisionError
3. Все операции детерминированы и не имеют побочных эффектов
"""

import math
import numbers
from typing import Any, Sequence, Union

from src.core.errors import InvalidArgument

Number = Union[int, float]


# =============================================================================
# ПРОВЕРКИ ЗНАЧЕНИЙ
# =============================================================================


def is_valid_float(value: float) -> bool:
    """
    Проверка, является ли значение конечным (не NaN, не Inf).

    Args:
        value: Проверяемое значение

    Returns:
        True если значение конечное, False если NaN или Inf
    """
    return math.isfinite(value)


def is_real_number(value: Any) -> bool:
    """
    Проверка, является ли значение вещественным числом.

    bool не считается числом.

    Examples:
        >>> is_real_number(3)
        True
        >>> is_real_number(2.5)
        True
        >>> is_real_number(True)
        False
        >>> is_real_number("3")
        False
    """
    return isinstance(value, numbers.Real) and not isinstance(value, bool)


# =============================================================================
# ВАЛИДАЦИЯ
# =============================================================================


def validate_number(value: Any, name: str) -> None:
    """
    Валидация, что значение является вещественным числом.

    NaN и Inf допустимы: это валидные IEEE-значения.

    Raises:
        InvalidArgument: Если value не int/float или bool
    """
    if not is_real_number(value):
        raise InvalidArgument(
            f"{name} must be a real number, got {type(value).__name__}: {value!r}"
        )


def validate_non_negative_int(value: Any, name: str) -> None:
    """
    Валидация, что значение является целым неотрицательным числом.

    Args:
        value: Проверяемое значение
        name: Имя параметра (для сообщения об ошибке)

    Raises:
        InvalidArgument: Если value не int, bool или value < 0
    """
    if isinstance(value, bool) or not isinstance(value, numbers.Integral):
        raise InvalidArgument(
            f"{name} must be an integer, got {type(value).__name__}: {value!r}"
        )

    if value < 0:
        raise InvalidArgument(f"{name} must be non-negative, got {value}")


def validate_same_length(
    left: Sequence[Any],
    right: Sequence[Any],
    left_name: str = "left",
    right_name: str = "right",
) -> int:
    """
    Валидация, что две последовательности одинаковой длины.

    Returns:
        Общая длина последовательностей

    Raises:
        InvalidArgument: Если длины различаются
    """
    if len(left) != len(right):
        raise InvalidArgument(
            f"sequence length mismatch: len({left_name})={len(left)} "
            f"!= len({right_name})={len(right)}"
        )
    return len(left)


# =============================================================================
# IEEE-ДЕЛЕНИЕ
# =============================================================================


def ieee_divide(numerator: Number, denominator: Number) -> float:
    """
    Деление с семантикой IEEE 754.

    Python поднимает ZeroDivisionError при делении на ноль, а IEEE 754
    определяет результат:
    - x / ±0 для x != 0 → ±inf, знак = sign(x) * sign(denominator)
    - 0 / 0 → nan
    - nan / 0 → nan

    Знак нуля учитывается: -0.0 инвертирует знак бесконечности.
    Целый 0 считается +0.

    Args:
        numerator: Делимое
        denominator: Делитель

    Returns:
        Частное (float)

    Examples:
        >>> ieee_divide(6, 2)
        3.0
        >>> ieee_divide(6, 0)
        inf
        >>> ieee_divide(-6, 0)
        -inf
        >>> ieee_divide(6, -0.0)
        -inf
        >>> ieee_divide(0, 0)
        nan
    """
    if denominator != 0:
        return numerator / denominator

    # nan != nan; сравнение не конвертирует большие int во float
    if numerator == 0 or numerator != numerator:
        return math.nan

    sign = _sign(numerator) * _sign(denominator)
    return math.copysign(math.inf, sign)


def _sign(value: Number) -> float:
    if isinstance(value, float):
        return math.copysign(1.0, value)
    return -1.0 if value < 0 else 1.0
