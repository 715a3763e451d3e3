"""
Errors — Таксономия ошибок numeric-drills

Все ошибки локальны для одного вызова: функции чистые, частичного
состояния не бывает, повторы не нужны.

- InvalidArgument: невалидный аргумент (разная длина последовательностей,
  отрицательное число для разложения на цифры, неизвестный оператор,
  нечисловой операнд)
- DivisionByZero: деление на ноль в strict-режиме калькулятора
"""


class InvalidArgument(ValueError):
    """
    Аргумент вне допустимого домена операции (подкласс ValueError).
    """

    pass


class DivisionByZero(ZeroDivisionError):
    """
    Деление на ноль при strict_division=True.

    По умолчанию деление на ноль возвращает ±inf / nan (IEEE 754),
    эта ошибка поднимается только если вызывающий явно запросил strict-режим.
    """

    pass
