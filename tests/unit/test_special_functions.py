"""
Тесты для Special-Function Module

Проверяемые инварианты:
1. Γ(x) на трёх интервалах: (0, 0.001), [0.001, 12), [12, 171.624]
2. InvalidNumber при x <= 0, Overflow при x > 171.624
3. lnΓ(x) не переполняется для больших x
4. factorial: точное произведение для целых, Γ(n + 1) для дробных
5. Форматирование float-результатов
6. Положительные операнды за пределами double: Overflow или конечный lnΓ
"""

import math

import pytest

from src.core.math.decimal_number import parse_decimal as d
from src.core.math.exceptions import InvalidNumber, Overflow
from src.core.math.special_functions import (
    GAMMA_OVERFLOW_ARGUMENT,
    factorial,
    factorial_integer,
    format_float,
    gamma,
    gamma_decimal,
    log_gamma,
    log_gamma_decimal,
)


# =============================================================================
# ТЕСТЫ: GAMMA
# =============================================================================


class TestGamma:
    """Тесты gamma"""

    def test_integer_arguments(self) -> None:
        """Γ(n) = (n - 1)!"""
        assert gamma(1.0) == pytest.approx(1.0, rel=1e-14)
        assert gamma(5.0) == 24.0
        assert gamma(11.0) == pytest.approx(3628800.0, rel=1e-13)

    def test_half(self) -> None:
        """Γ(1/2) = √π"""
        assert gamma(0.5) == pytest.approx(math.sqrt(math.pi), rel=1e-13)

    def test_small_argument(self) -> None:
        """Γ(x) ≈ 1 / (x (1 + γx)) при x < 0.001"""
        assert gamma(1e-6) == pytest.approx(999999.42278467, rel=1e-13)

    def test_asymptotic_region(self) -> None:
        assert gamma(15.5) == pytest.approx(math.gamma(15.5), rel=1e-12)
        assert gamma(100.0) == pytest.approx(math.gamma(100.0), rel=1e-12)

    def test_non_positive_raises(self) -> None:
        with pytest.raises(InvalidNumber, match="Operand must be a positive number."):
            gamma(0.0)
        with pytest.raises(InvalidNumber):
            gamma(-1.5)

    def test_overflow(self) -> None:
        with pytest.raises(Overflow, match="Number too large."):
            gamma(172.0)
        with pytest.raises(Overflow):
            gamma(math.inf)

    def test_overflow_boundary(self) -> None:
        assert math.isfinite(gamma(GAMMA_OVERFLOW_ARGUMENT))


class TestLogGamma:
    """Тесты log_gamma"""

    def test_matches_reference(self) -> None:
        assert log_gamma(4.4) == pytest.approx(math.lgamma(4.4), rel=1e-13)
        assert log_gamma(15.5) == pytest.approx(math.lgamma(15.5), rel=1e-13)

    def test_large_argument_does_not_overflow(self) -> None:
        """lnΓ(1000) конечен, хотя Γ(1000) > DBL_MAX"""
        assert log_gamma(1000.0) == pytest.approx(math.lgamma(1000.0), rel=1e-13)

    def test_non_positive_raises(self) -> None:
        with pytest.raises(InvalidNumber, match="Operand must be a positive number."):
            log_gamma(0.0)

    def test_infinite_argument(self) -> None:
        with pytest.raises(Overflow):
            log_gamma(math.inf)

    def test_small_argument_subnormal(self) -> None:
        """lnΓ конечен там, где 1 / x переполняется"""
        assert log_gamma(1e-311) == pytest.approx(311 * math.log(10), rel=1e-12)
        assert log_gamma(1e-6) == pytest.approx(math.lgamma(1e-6), rel=1e-10)

    def test_result_overflow(self) -> None:
        with pytest.raises(Overflow):
            log_gamma(1e307)


# =============================================================================
# ТЕСТЫ: ДЕСЯТИЧНЫЕ ОПЕРАНДЫ
# =============================================================================

# 10^-311: субнормальный double
SUBNORMAL = "0." + "0" * 310 + "1"
# 10^-401: в double становится 0.0
BELOW_DOUBLE = "0." + "0" * 400 + "1"


class TestDecimalGamma:
    """Тесты gamma_decimal / log_gamma_decimal"""

    def test_matches_float_functions(self) -> None:
        assert gamma_decimal(d(".5")) == "1.7724538509055"
        assert log_gamma_decimal(d("4.4")) == "2.3161034914248"

    def test_non_positive_rejected(self) -> None:
        for text in ("0", "0.000", "-1.5"):
            with pytest.raises(InvalidNumber, match="Operand must be a positive number."):
                gamma_decimal(d(text))
            with pytest.raises(InvalidNumber):
                log_gamma_decimal(d(text))

    @pytest.mark.parametrize("text", [SUBNORMAL, BELOW_DOUBLE])
    def test_tiny_positive_gamma_overflows(self, text: str) -> None:
        with pytest.raises(Overflow, match="Number too large."):
            gamma_decimal(d(text))

    def test_tiny_positive_log_gamma_finite(self) -> None:
        assert float(log_gamma_decimal(d(SUBNORMAL))) == pytest.approx(
            311 * math.log(10), rel=1e-12
        )
        assert float(log_gamma_decimal(d(BELOW_DOUBLE))) == pytest.approx(
            401 * math.log(10), rel=1e-12
        )

    def test_beyond_double_range(self) -> None:
        huge = d("1" + "0" * 400)
        with pytest.raises(Overflow):
            gamma_decimal(huge)
        with pytest.raises(Overflow):
            log_gamma_decimal(huge)


# =============================================================================
# ТЕСТЫ: FACTORIAL
# =============================================================================


class TestFactorial:
    """Тесты factorial"""

    def test_factorial_integer(self) -> None:
        assert factorial_integer(0) == 1
        assert factorial_integer(1) == 1
        assert factorial_integer(10) == 3628800

    def test_integer_value_keeps_scale(self) -> None:
        assert factorial(d("4.0")) == "24.0"
        assert factorial(d("5")) == "120"
        assert factorial(d("0")) == "1"

    def test_exact_beyond_float_range(self) -> None:
        """Целый факториал точен и за пределами double"""
        assert factorial(d("25")) == "15511210043330985984000000"

    def test_fractional_value_uses_gamma(self) -> None:
        assert factorial(d("2.5")) == "3.3233509704478"
        assert factorial(d("2.5")) == format_float(gamma(3.5))

    def test_negative_raises(self) -> None:
        with pytest.raises(InvalidNumber, match="non-negative"):
            factorial(d("-1"))
        with pytest.raises(InvalidNumber):
            factorial_integer(-1)

    def test_fractional_overflow(self) -> None:
        with pytest.raises(Overflow):
            factorial(d("171.5"))


# =============================================================================
# ТЕСТЫ: ФОРМАТИРОВАНИЕ
# =============================================================================


class TestFormatFloat:
    """Тесты format_float"""

    def test_significant_digits(self) -> None:
        assert format_float(1.772453850905516) == "1.7724538509055"

    def test_trailing_zeros_dropped(self) -> None:
        assert format_float(24.0) == "24"
        assert format_float(100.0) == "100"
        assert format_float(0.5) == "0.5"

    def test_exponent_form(self) -> None:
        assert format_float(5.562092414534105e305) == "5.5620924145341E+305"
        assert format_float(1e15) == "1.0E+15"
        assert format_float(1e-5) == "1.0E-5"

    def test_custom_digits(self) -> None:
        assert format_float(math.pi, 5) == "3.1416"
