"""
numeric-drills CLI

Команды:
- calculate: интерактивный калькулятор
- multiply: поэлементное произведение двух списков
- digits: цифры неотрицательного целого
"""

import logging
from typing import List, Optional

import typer

from src.calculator.session import run_session
from src.core.config import get_settings
from src.core.errors import DivisionByZero, InvalidArgument
from src.core.logging_setup import setup_logging
from src.core.math.digits import digit_list
from src.core.math.sequences import multiply_list

logger = logging.getLogger(__name__)

app = typer.Typer(
    name="numeric-drills",
    help="Array/number drills and an interactive four-function calculator",
    add_completion=False,
)


@app.callback()
def main(
    log_level: Optional[str] = typer.Option(None, "--log-level", help="Override configured log level"),
) -> None:
    """Logging настраивается один раз перед любой командой."""
    settings = get_settings()
    setup_logging(level=log_level or settings.log_level, fmt=settings.log_format)


def _parse_number_list(text: str, name: str) -> List[float]:
    if not text.strip():
        return []
    values: List[float] = []
    for item in text.split(","):
        try:
            number = float(item.strip())
        except ValueError as exc:
            raise InvalidArgument(f"{name}: not a number: {item.strip()!r}") from exc
        values.append(int(number) if number.is_integer() and "." not in item else number)
    return values


def _fail(exc: Exception) -> None:
    logger.debug("command failed", exc_info=exc)
    typer.echo(f"Error: {exc}", err=True)
    raise typer.Exit(code=1)


@app.command()
def calculate(
    first: Optional[str] = typer.Option(None, "--first", help="First number (skip prompt)"),
    second: Optional[str] = typer.Option(None, "--second", help="Second number (skip prompt)"),
    operation: Optional[str] = typer.Option(
        None, "--operation", help="1) Add 2) Subtract 3) Multiply 4) Divide (skip prompt)"
    ),
    strict_division: Optional[bool] = typer.Option(
        None,
        "--strict-division/--ieee-division",
        help="Fail on division by zero instead of printing Infinity/NaN",
    ),
) -> None:
    """Интерактивный калькулятор: два числа и операция."""
    if strict_division is None:
        strict_division = get_settings().strict_division

    preset = [first, second, operation]

    def ask(prompt: str) -> str:
        value = preset.pop(0) if preset else None
        if value is not None:
            return value
        return typer.prompt(prompt, prompt_suffix="\n")

    try:
        run_session(ask, typer.echo, strict_division=strict_division)
    except (InvalidArgument, DivisionByZero) as exc:
        _fail(exc)


@app.command()
def multiply(
    left: str = typer.Argument(..., help="Comma-separated numbers, e.g. 3,5,7"),
    right: str = typer.Argument(..., help="Comma-separated numbers, e.g. 9,10,11"),
) -> None:
    """Поэлементное произведение двух списков одинаковой длины."""
    try:
        result = multiply_list(
            _parse_number_list(left, "left"),
            _parse_number_list(right, "right"),
        )
    except InvalidArgument as exc:
        _fail(exc)
    else:
        typer.echo(result)


@app.command()
def digits(
    number: int = typer.Argument(..., help="Non-negative integer"),
) -> None:
    """Цифры числа, старший разряд первым."""
    try:
        result = digit_list(number)
    except InvalidArgument as exc:
        _fail(exc)
    else:
        typer.echo(result)


if __name__ == "__main__":
    app()
