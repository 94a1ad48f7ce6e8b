"""
Тесты для Arithmetic Core

Проверяет:
1. Scale результатов add/subtract/multiply
2. Одно округление при сведении к precision
3. divide: точное рациональное частное, DivisionByZero
4. modulus: a - b × floor(a / b), знак делителя
5. integer_power и square_root
"""

import pytest

from src.core.math.arithmetic import (
    add,
    divide,
    integer_power,
    modulus,
    multiply,
    square_root,
    subtract,
)
from src.core.math.decimal_number import parse_decimal as d
from src.core.math.exceptions import DivisionByZero, InvalidNumber
from src.core.math.rounding import RoundingMode


# =============================================================================
# ADD / SUBTRACT / MULTIPLY
# =============================================================================


class TestAddSubtract:
    """Тесты add и subtract"""

    def test_add_common_scale(self) -> None:
        assert str(add(d("1.5"), d("2.25"))) == "3.75"
        assert str(add(d("0.1"), d("0.2"))) == "0.3"

    def test_add_keeps_scale_on_zero_result(self) -> None:
        assert str(add(d("-1.5"), d("1.5"))) == "0.0"

    def test_add_rounded_to_precision(self) -> None:
        assert str(add(d("1.25"), d("0"), 1)) == "1.3"
        assert str(add(d("1.25"), d("0"), 1, RoundingMode.HALF_EVEN)) == "1.2"

    def test_subtract(self) -> None:
        assert str(subtract(d("5"), d("7.5"))) == "-2.5"
        assert str(subtract(d("10"), d("0.001"), 2)) == "10.00"


class TestMultiply:
    """Тесты multiply"""

    def test_scale_is_sum_of_scales(self) -> None:
        assert str(multiply(d("1.5"), d("1.5"))) == "2.25"
        assert str(multiply(d("0.10"), d("0.2"))) == "0.020"

    def test_rounded_to_precision(self) -> None:
        assert str(multiply(d("1.5"), d("1.5"), 1)) == "2.3"
        assert str(multiply(d("1.5"), d("1.5"), 1, RoundingMode.HALF_EVEN)) == "2.2"

    def test_sign(self) -> None:
        assert str(multiply(d("-2"), d("3"))) == "-6"
        assert str(multiply(d("-2"), d("-3"))) == "6"


# =============================================================================
# DIVIDE / MODULUS
# =============================================================================


class TestDivide:
    """Тесты divide"""

    def test_repeating_fraction(self) -> None:
        assert str(divide(d("1"), d("3"), 5)) == "0.33333"
        assert str(divide(d("2"), d("3"), 5)) == "0.66667"
        assert str(divide(d("-2"), d("3"), 5)) == "-0.66667"

    def test_exact_half_uses_mode(self) -> None:
        assert str(divide(d("10"), d("4"), 0)) == "3"
        assert str(divide(d("10"), d("4"), 0, RoundingMode.HALF_EVEN)) == "2"

    def test_decimal_operands(self) -> None:
        assert str(divide(d("1.5"), d("0.5"), 2)) == "3.00"
        assert str(divide(d("0.003"), d("1.5"), 4)) == "0.0020"

    def test_division_by_zero(self) -> None:
        with pytest.raises(DivisionByZero):
            divide(d("1"), d("0.0"), 2)


class TestModulus:
    """Тесты modulus"""

    def test_dividend_smaller_than_divisor(self) -> None:
        """modulus(5.5, 10, 1) = 5.5, т.к. 5.5 < 10"""
        assert str(modulus(d("5.5"), d("10"), 1)) == "5.5"

    def test_integer_modulus(self) -> None:
        assert str(modulus(d("10"), d("3"))) == "1"

    def test_decimal_modulus(self) -> None:
        assert str(modulus(d("5.5"), d("2"))) == "1.5"

    def test_sign_follows_divisor(self) -> None:
        """a - b × floor(a / b)"""
        assert str(modulus(d("-7"), d("3"))) == "2"
        assert str(modulus(d("7"), d("-3"))) == "-2"

    def test_modulus_by_zero(self) -> None:
        with pytest.raises(DivisionByZero):
            modulus(d("1"), d("0"))


# =============================================================================
# POWER / SQUARE ROOT
# =============================================================================


class TestIntegerPower:
    """Тесты integer_power"""

    def test_exact_positive_exponent(self) -> None:
        assert str(integer_power(d("1.5"), 2)) == "2.25"
        assert str(integer_power(d("2"), 10)) == "1024"
        assert str(integer_power(d("-2"), 3)) == "-8"

    def test_zero_exponent(self) -> None:
        assert str(integer_power(d("5"), 0)) == "1"

    def test_negative_exponent(self) -> None:
        assert str(integer_power(d("2"), -2, 4)) == "0.2500"

    def test_negative_exponent_uses_division_scale(self) -> None:
        assert str(integer_power(d("3"), -1, division_scale=3)) == "0.333"

    def test_zero_to_negative_power(self) -> None:
        with pytest.raises(DivisionByZero):
            integer_power(d("0"), -1)


class TestSquareRoot:
    """Тесты square_root"""

    def test_irrational_root_correctly_rounded(self) -> None:
        assert str(square_root(d("2"), 10)) == "1.4142135624"

    def test_exact_roots(self) -> None:
        assert str(square_root(d("4"), 2)) == "2.00"
        assert str(square_root(d("6.25"), 1)) == "2.5"
        assert str(square_root(d("0.04"), 1)) == "0.2"

    def test_exact_half_uses_mode(self) -> None:
        """sqrt(6.25) = 2.5 — ровно половина"""
        assert str(square_root(d("6.25"), 0, RoundingMode.HALF_UP)) == "3"
        assert str(square_root(d("6.25"), 0, RoundingMode.HALF_EVEN)) == "2"

    def test_inexact_root_directed_modes(self) -> None:
        assert str(square_root(d("2"), 0, RoundingMode.DOWN)) == "1"
        assert str(square_root(d("2"), 0, RoundingMode.UP)) == "2"

    def test_negative_operand(self) -> None:
        with pytest.raises(InvalidNumber, match="non-negative"):
            square_root(d("-4"), 2)
