"""
Тесты для модуля Numerical Safeguards

Проверяет:
1. Проверки типов операндов
2. Валидацию целых неотрицательных значений
3. Валидацию длины последовательностей
4. Деление с семантикой IEEE 754
"""

import math

import pytest

from src.core.errors import InvalidArgument
from src.core.math.numerical_safeguards import (
    ieee_divide,
    is_real_number,
    is_valid_float,
    validate_non_negative_int,
    validate_number,
    validate_same_length,
)

# =============================================================================
# ТЕСТЫ ПРОВЕРОК ЗНАЧЕНИЙ
# =============================================================================


class TestIsValidFloat:
    """Тесты для is_valid_float"""

    def test_finite_values(self) -> None:
        assert is_valid_float(0.0)
        assert is_valid_float(-1.5)
        assert is_valid_float(1e308)

    def test_non_finite_values(self) -> None:
        assert not is_valid_float(float("nan"))
        assert not is_valid_float(float("inf"))
        assert not is_valid_float(float("-inf"))


class TestIsRealNumber:
    """Тесты для is_real_number"""

    def test_int_and_float_accepted(self) -> None:
        assert is_real_number(3)
        assert is_real_number(-2.5)
        assert is_real_number(float("nan"))

    def test_bool_rejected(self) -> None:
        """bool — подкласс int, но не операнд"""
        assert not is_real_number(True)
        assert not is_real_number(False)

    def test_non_numbers_rejected(self) -> None:
        assert not is_real_number("3")
        assert not is_real_number(None)
        assert not is_real_number([1])
        assert not is_real_number(1 + 2j)


# =============================================================================
# ТЕСТЫ ВАЛИДАЦИИ
# =============================================================================


class TestValidateNumber:
    """Тесты для validate_number"""

    def test_valid_numbers_pass(self) -> None:
        validate_number(0, "x")
        validate_number(1.5, "x")
        validate_number(float("inf"), "x")

    def test_string_raises(self) -> None:
        with pytest.raises(InvalidArgument, match="x must be a real number"):
            validate_number("6", "x")

    def test_bool_raises(self) -> None:
        with pytest.raises(InvalidArgument, match="y must be a real number"):
            validate_number(True, "y")


class TestValidateNonNegativeInt:
    """Тесты для validate_non_negative_int"""

    def test_valid_values_pass(self) -> None:
        validate_non_negative_int(0, "n")
        validate_non_negative_int(12345, "n")
        validate_non_negative_int(10**50, "n")

    def test_negative_raises(self) -> None:
        with pytest.raises(InvalidArgument, match="n must be non-negative, got -1"):
            validate_non_negative_int(-1, "n")

    def test_float_raises(self) -> None:
        """Дробные значения вне домена, даже если целочисленные"""
        with pytest.raises(InvalidArgument, match="must be an integer"):
            validate_non_negative_int(7.0, "n")

        with pytest.raises(InvalidArgument, match="must be an integer"):
            validate_non_negative_int(7.5, "n")

    def test_bool_and_string_raise(self) -> None:
        with pytest.raises(InvalidArgument, match="must be an integer"):
            validate_non_negative_int(True, "n")

        with pytest.raises(InvalidArgument, match="must be an integer"):
            validate_non_negative_int("12", "n")

    def test_invalid_argument_is_value_error(self) -> None:
        """InvalidArgument ловится как ValueError"""
        with pytest.raises(ValueError):
            validate_non_negative_int(-5, "n")


class TestValidateSameLength:
    """Тесты для validate_same_length"""

    def test_equal_lengths_return_length(self) -> None:
        assert validate_same_length([1, 2, 3], (4, 5, 6)) == 3
        assert validate_same_length([], []) == 0

    def test_mismatch_raises_with_both_lengths(self) -> None:
        with pytest.raises(InvalidArgument, match=r"len\(a\)=2 != len\(b\)=3"):
            validate_same_length([1, 2], [1, 2, 3], "a", "b")


# =============================================================================
# ТЕСТЫ IEEE-ДЕЛЕНИЯ
# =============================================================================


class TestIeeeDivide:
    """Тесты для ieee_divide"""

    def test_regular_division(self) -> None:
        assert ieee_divide(6, 2) == 3.0
        assert ieee_divide(7, 2) == 3.5
        assert ieee_divide(-6, 3) == -2.0

    def test_positive_over_zero_is_inf(self) -> None:
        assert ieee_divide(6, 0) == math.inf
        assert ieee_divide(6.0, 0.0) == math.inf

    def test_negative_over_zero_is_minus_inf(self) -> None:
        assert ieee_divide(-6, 0) == -math.inf

    def test_negative_zero_flips_sign(self) -> None:
        assert ieee_divide(6, -0.0) == -math.inf
        assert ieee_divide(-6, -0.0) == math.inf

    def test_zero_over_zero_is_nan(self) -> None:
        assert math.isnan(ieee_divide(0, 0))
        assert math.isnan(ieee_divide(-0.0, 0.0))

    def test_nan_over_zero_is_nan(self) -> None:
        assert math.isnan(ieee_divide(float("nan"), 0))

    def test_inf_over_zero_is_inf(self) -> None:
        assert ieee_divide(float("inf"), 0) == math.inf
        assert ieee_divide(float("-inf"), 0) == -math.inf

    def test_huge_int_over_zero(self) -> None:
        """Большие int не конвертируются во float"""
        assert ieee_divide(10**400, 0) == math.inf
        assert ieee_divide(-(10**400), 0) == -math.inf

    def test_never_raises_zero_division(self) -> None:
        for numerator in (1, -1, 0, 0.5, float("nan"), float("inf")):
            for denominator in (0, 0.0, -0.0):
                ieee_divide(numerator, denominator)
