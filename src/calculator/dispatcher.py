"""
Arithmetic Dispatcher — применение операции по OperationSelector

Таблица диспетчеризации покрывает каждый член OperationSelector.
Неизвестный селектор → InvalidArgument, никогда не молчаливый no-op.

Деление на ноль:
- по умолчанию IEEE 754: x/0 → ±inf, 0/0 → nan
- strict_division=True → DivisionByZero
"""

import logging
import math
import operator
from typing import Any, Callable, Dict, Union

from src.core.domain.calculation import CalculationRequest, CalculationResult
from src.core.domain.operation import OperationSelector
from src.core.errors import DivisionByZero, InvalidArgument
from src.core.math.numerical_safeguards import Number, ieee_divide, validate_number

logger = logging.getLogger(__name__)

BinaryOp = Callable[[Number, Number], Number]

_DISPATCH: Dict[OperationSelector, BinaryOp] = {
    OperationSelector.ADD: operator.add,
    OperationSelector.SUBTRACT: operator.sub,
    OperationSelector.MULTIPLY: operator.mul,
    OperationSelector.DIVIDE: ieee_divide,
}


def resolve_operation(op: Union[OperationSelector, str]) -> BinaryOp:
    """
    Скалярная функция для селектора (или его токена).

    Raises:
        InvalidArgument: Если селектор не распознан
    """
    return _DISPATCH[OperationSelector.from_token(op)]


def apply(
    x: Number,
    y: Number,
    op: Union[OperationSelector, str],
    *,
    strict_division: bool = False,
) -> Number:
    """
    Применение бинарной арифметической операции.

    Args:
        x: Первый операнд
        y: Второй операнд
        op: OperationSelector или токен "1".."4"
        strict_division: Поднимать DivisionByZero вместо ±inf/nan

    Returns:
        x + y, x - y, x * y или x / y

    Raises:
        InvalidArgument: Нечисловой операнд, неизвестный селектор или
            результат вне диапазона float
        DivisionByZero: Деление на ноль при strict_division=True

    Examples:
        >>> apply(6, 2, OperationSelector.DIVIDE)
        3.0
        >>> apply(6, 0, "4")
        inf
    """
    validate_number(x, "x")
    validate_number(y, "y")
    selector = OperationSelector.from_token(op)
    func = resolve_operation(selector)

    if selector is OperationSelector.DIVIDE and y == 0 and strict_division:
        raise DivisionByZero(f"division by zero: {x} / {y}")

    try:
        result = func(x, y)
    except OverflowError as exc:
        raise InvalidArgument(f"{selector.name.lower()} failed: {exc}") from exc

    logger.debug("%s %s %s = %s", x, selector.symbol, y, result)

    if selector is OperationSelector.DIVIDE and not _is_finite(result):
        logger.warning(
            "division produced non-finite result",
            extra={"operation": selector.name, "operand1": x, "operand2": y},
        )

    return result


def calculate(request: CalculationRequest, *, strict_division: bool = False) -> CalculationResult:
    """Применение apply к pydantic-запросу."""
    result = apply(
        request.operand1,
        request.operand2,
        request.operation,
        strict_division=strict_division,
    )
    return CalculationResult(request=request, result=result)


def _is_finite(value: Any) -> bool:
    try:
        return math.isfinite(value)
    except (TypeError, OverflowError):
        return True
