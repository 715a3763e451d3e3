"""
Calculator Session — диалог интерактивного калькулятора

Ввод и вывод выполняет внешний коллаборатор:
- ask(prompt) -> str: задаёт вопрос и возвращает ответ пользователя
- say(text): печатает строку

Сессия:
1. Приветствие
2. Первое число, второе число, токен операции (1..4)
3. Проверка сырых ответов по контракту calculator_input
4. Конверсия текста в числа и OperationSelector
5. "The result is: <value>"
"""

import math
from decimal import Decimal
from typing import Callable, Final, Tuple

from jsonschema import ValidationError

from src.calculator.dispatcher import calculate
from src.core.contracts import validate_calculator_input
from src.core.domain.calculation import CalculationRequest, CalculationResult
from src.core.domain.operation import OperationSelector, operation_menu
from src.core.errors import InvalidArgument

Ask = Callable[[str], str]
Say = Callable[[str], None]

WELCOME = "Welcome to Calculator!"
FIRST_NUMBER_PROMPT = "What's the first number?"
SECOND_NUMBER_PROMPT = "What's the second number?"
OPERATION_PROMPT = f"What operation would you like to perform?\n{operation_menu()}"

# Порог позиционной записи: 10^21 и выше печатается в экспоненте
EXPONENT_THRESHOLD: Final[int] = 21


# =============================================================================
# КОНВЕРСИЯ ВВОДА
# =============================================================================


def parse_operand(text: str) -> float:
    """
    Конверсия текста операнда в число.

    Принимает всё, что принимает float(): '3', ' -2.5 ', '1e3', 'inf', 'nan'.

    Raises:
        InvalidArgument: Если текст не является числом
    """
    try:
        return float(text.strip())
    except (AttributeError, ValueError) as exc:
        raise InvalidArgument(f"not a number: {text!r}") from exc


def parse_operation(text: str) -> OperationSelector:
    """
    Конверсия токена меню в OperationSelector.

    Raises:
        InvalidArgument: Если токен не из 1..4
    """
    return OperationSelector.from_token(text)


def build_request(operand1: str, operand2: str, operation: str) -> CalculationRequest:
    """
    Проверка сырых ответов по контракту и построение запроса.

    Raises:
        InvalidArgument: Нарушение контракта или нечисловой операнд
    """
    raw = {"operand1": operand1, "operand2": operand2, "operation": operation}
    try:
        validate_calculator_input(raw)
    except ValidationError as exc:
        raise InvalidArgument(f"invalid calculator input: {exc.message}") from exc

    return CalculationRequest(
        operand1=parse_operand(operand1),
        operand2=parse_operand(operand2),
        operation=parse_operation(operation),
    )


def read_request(ask: Ask) -> CalculationRequest:
    """Три вопроса в фиксированном порядке: первое число, второе, операция."""
    operand1 = ask(FIRST_NUMBER_PROMPT)
    operand2 = ask(SECOND_NUMBER_PROMPT)
    operation = ask(OPERATION_PROMPT)
    return build_request(operand1, operand2, operation)


# =============================================================================
# ФОРМАТИРОВАНИЕ ВЫВОДА
# =============================================================================


def format_number(value: float) -> str:
    """
    Число в формате вывода калькулятора: Infinity, NaN, целые без ".0".

    Examples:
        >>> format_number(3.0)
        '3'
        >>> format_number(2.5)
        '2.5'
        >>> format_number(float("inf"))
        'Infinity'
        >>> format_number(float("nan"))
        'NaN'
        >>> format_number(1e21)
        '1e+21'
        >>> format_number(1.5e-7)
        '1.5e-7'
    """
    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "Infinity" if value > 0 else "-Infinity"
    if value == 0:
        return "0"

    sign = "-" if value < 0 else ""
    digits, point = _shortest_digits(abs(float(value)))
    k = len(digits)

    # Позиционная запись для 1e-6 <= |value| < 1e21, иначе экспонента
    if k <= point <= EXPONENT_THRESHOLD:
        return sign + digits + "0" * (point - k)
    if 0 < point <= EXPONENT_THRESHOLD:
        return sign + digits[:point] + "." + digits[point:]
    if -6 < point <= 0:
        return sign + "0." + "0" * (-point) + digits

    exponent = point - 1
    mantissa = digits if k == 1 else digits[0] + "." + digits[1:]
    return f"{sign}{mantissa}e{'+' if exponent >= 0 else '-'}{abs(exponent)}"


def _shortest_digits(value: float) -> Tuple[str, int]:
    """
    Кратчайшие значащие цифры и позиция десятичной точки.

    value == 0.d1d2...dk × 10^point, цифры без хвостовых нулей.
    """
    _, digit_tuple, exponent = Decimal(repr(value)).as_tuple()
    coefficient = "".join(str(d) for d in digit_tuple)
    return coefficient.rstrip("0"), len(coefficient) + exponent


def format_result(result: CalculationResult) -> str:
    return f"The result is: {format_number(result.result)}"


# =============================================================================
# СЕССИЯ
# =============================================================================


def run_session(ask: Ask, say: Say, *, strict_division: bool = False) -> CalculationResult:
    """
    Полный диалог калькулятора.

    Returns:
        Результат вычисления (уже выведенный через say)

    Raises:
        InvalidArgument: Невалидный ввод
        DivisionByZero: Деление на ноль при strict_division=True
    """
    say(WELCOME)
    request = read_request(ask)
    result = calculate(request, strict_division=strict_division)
    say(format_result(result))
    return result
