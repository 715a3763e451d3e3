"""
Sequences — Поэлементные операции над числовыми последовательностями

Модуль поднимает скалярную бинарную операцию на пару последовательностей:
- Пары формируются по позиции (не по значению)
- Длины должны совпадать, иначе InvalidArgument (без усечения)
- Результат: новый list той же длины, входы не изменяются

ИНВАРИАНТ:
    len(multiply_list(a, b)) == len(a) == len(b)
    multiply_list(a, b)[i] == a[i] * b[i]
"""

import operator
from typing import Any, Callable, List, Sequence

from src.core.errors import InvalidArgument
from src.core.math.numerical_safeguards import validate_same_length

ScalarBinaryOp = Callable[[Any, Any], Any]


def pairwise(
    name: str,
    left: Sequence[Any],
    right: Sequence[Any],
    op: ScalarBinaryOp,
) -> List[Any]:
    """
    Применение скалярной операции к парам элементов на одинаковых позициях.

    Args:
        name: Имя операции (для сообщений об ошибках)
        left: Первая последовательность
        right: Вторая последовательность (той же длины)
        op: Скалярная бинарная операция

    Returns:
        Новый список [op(left[i], right[i]) for i]

    Raises:
        InvalidArgument: Если длины различаются или op упала на элементе
    """
    validate_same_length(left, right)

    result: List[Any] = []
    for index, (left_value, right_value) in enumerate(zip(left, right)):
        try:
            result.append(op(left_value, right_value))
        except (TypeError, ArithmeticError) as exc:
            raise InvalidArgument(f"{name} failed at index {index}: {exc}") from exc
    return result


def multiply_list(left: Sequence[Any], right: Sequence[Any]) -> List[Any]:
    """
    Поэлементное произведение двух последовательностей одинаковой длины.

    Examples:
        >>> multiply_list([3, 5, 7], [9, 10, 11])
        [27, 50, 77]
        >>> multiply_list([], [])
        []
    """
    return pairwise("multiply_list", left, right, operator.mul)
