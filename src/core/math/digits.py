"""
Digits — Разложение целого числа на десятичные цифры

Явный числовой алгоритм (divmod по основанию 10), без опоры на
строковое представление чисел.

ИНВАРИАНТЫ:
1. digit_list(0) == [0] (не пустой список)
2. "".join(map(str, digit_list(n))) == str(n) для любого n >= 0
3. Каждая цифра в диапазоне [0, 9], старший разряд первым
"""

from typing import Final, List

from src.core.math.numerical_safeguards import validate_non_negative_int

RADIX: Final[int] = 10


def digit_list(n: int) -> List[int]:
    """
    Десятичные цифры неотрицательного целого числа, старший разряд первым.

    Args:
        n: Неотрицательное целое

    Returns:
        Список цифр в диапазоне [0, 9]

    Raises:
        InvalidArgument: Если n отрицательное, не int или bool

    Examples:
        >>> digit_list(12345)
        [1, 2, 3, 4, 5]
        >>> digit_list(375290)
        [3, 7, 5, 2, 9, 0]
        >>> digit_list(0)
        [0]
    """
    validate_non_negative_int(n, "n")

    if n == 0:
        return [0]

    # Накопление от младшего разряда к старшему
    reversed_digits: List[int] = []
    remaining = int(n)
    while remaining > 0:
        remaining, digit = divmod(remaining, RADIX)
        reversed_digits.append(digit)

    reversed_digits.reverse()
    return reversed_digits
