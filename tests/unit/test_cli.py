"""
Тесты для Typer CLI

Проверяет:
1. calculate: интерактивный ввод и ввод через опции
2. Политику деления на ноль (флаг и переменная окружения)
3. multiply и digits
4. Код выхода 1 при невалидном вводе
"""

import logging

import pytest
from typer.testing import CliRunner

from src.calculator.cli import app
from src.core.config import get_settings

runner = CliRunner()


@pytest.fixture(autouse=True)
def isolate_cli(monkeypatch):
    """Свежие настройки и чистый root logger для каждого запуска CLI."""
    monkeypatch.delenv("NUMERIC_DRILLS_DIVISION_BY_ZERO", raising=False)
    get_settings.cache_clear()
    root_level = logging.root.level
    yield
    for handler in list(logging.root.handlers):
        if handler.get_name() == "numeric-drills":
            logging.root.removeHandler(handler)
    logging.root.setLevel(root_level)
    get_settings.cache_clear()


class TestCalculateCommand:
    """Тесты команды calculate"""

    def test_interactive_session(self):
        result = runner.invoke(app, ["calculate"], input="6\n2\n4\n")

        assert result.exit_code == 0
        assert "Welcome to Calculator!" in result.output
        assert "What's the first number?" in result.output
        assert "What's the second number?" in result.output
        assert "1) Add 2) Subtract 3) Multiply 4) Divide" in result.output
        assert "The result is: 3" in result.output

    def test_options_skip_prompts(self):
        result = runner.invoke(
            app, ["calculate", "--first", "2", "--second", "3", "--operation", "3"]
        )

        assert result.exit_code == 0
        assert "What's the first number?" not in result.output
        assert "The result is: 6" in result.output

    def test_partial_options(self):
        result = runner.invoke(app, ["calculate", "--first", "10"], input="4\n2\n")

        assert result.exit_code == 0
        assert "What's the first number?" not in result.output
        assert "The result is: 6" in result.output

    def test_division_by_zero_prints_infinity(self):
        result = runner.invoke(
            app, ["calculate", "--first", "6", "--second", "0", "--operation", "4"]
        )

        assert result.exit_code == 0
        assert "The result is: Infinity" in result.output

    def test_strict_division_flag(self):
        result = runner.invoke(
            app,
            ["calculate", "--strict-division", "--first", "6", "--second", "0", "--operation", "4"],
        )

        assert result.exit_code == 1
        assert "division by zero" in result.output

    def test_strict_division_from_environment(self, monkeypatch):
        monkeypatch.setenv("NUMERIC_DRILLS_DIVISION_BY_ZERO", "raise")

        result = runner.invoke(
            app, ["calculate", "--first", "6", "--second", "0", "--operation", "4"]
        )

        assert result.exit_code == 1

    def test_ieee_flag_overrides_environment(self, monkeypatch):
        monkeypatch.setenv("NUMERIC_DRILLS_DIVISION_BY_ZERO", "raise")

        result = runner.invoke(
            app,
            ["calculate", "--ieee-division", "--first", "6", "--second", "0", "--operation", "4"],
        )

        assert result.exit_code == 0
        assert "The result is: Infinity" in result.output

    def test_invalid_operation_exits_1(self):
        result = runner.invoke(
            app, ["calculate", "--first", "6", "--second", "2", "--operation", "7"]
        )

        assert result.exit_code == 1
        assert "invalid calculator input" in result.output

    def test_non_numeric_operand_exits_1(self):
        result = runner.invoke(
            app, ["calculate", "--first", "six", "--second", "2", "--operation", "1"]
        )

        assert result.exit_code == 1
        assert "not a number" in result.output


class TestMultiplyCommand:
    """Тесты команды multiply"""

    def test_reference_example(self):
        result = runner.invoke(app, ["multiply", "3,5,7", "9,10,11"])

        assert result.exit_code == 0
        assert "[27, 50, 77]" in result.output

    def test_decimals(self):
        result = runner.invoke(app, ["multiply", "1.5,2", "2,0.25"])

        assert result.exit_code == 0
        assert "[3.0, 0.5]" in result.output

    def test_length_mismatch_exits_1(self):
        result = runner.invoke(app, ["multiply", "1,2", "3"])

        assert result.exit_code == 1
        assert "sequence length mismatch" in result.output

    def test_non_numeric_exits_1(self):
        result = runner.invoke(app, ["multiply", "1,x", "3,4"])

        assert result.exit_code == 1
        assert "left: not a number" in result.output


class TestDigitsCommand:
    """Тесты команды digits"""

    def test_reference_example(self):
        result = runner.invoke(app, ["digits", "375290"])

        assert result.exit_code == 0
        assert "[3, 7, 5, 2, 9, 0]" in result.output

    def test_zero(self):
        result = runner.invoke(app, ["digits", "0"])

        assert result.exit_code == 0
        assert "[0]" in result.output

    def test_negative_exits_1(self):
        result = runner.invoke(app, ["digits", "--", "-5"])

        assert result.exit_code == 1
        assert "non-negative" in result.output
