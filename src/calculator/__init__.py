"""
Calculator — интерактивный калькулятор на четыре операции.

Диспетчер операций, диалог сессии и Typer CLI.
"""

from src.calculator.dispatcher import apply, calculate, resolve_operation

__all__ = [
    "apply",
    "calculate",
    "resolve_operation",
]
