"""
PortableMathLibrary — backend без внешней арифметики произвольной точности

Точная десятичная арифметика на целых представлениях, trial division для
простоты, float-приближения для Gamma/LogGamma.

Capability gaps:
- root(x, n)               → UnsupportedOperation
- power с дробной степенью → UnsupportedOperation
"""

import logging

from src.core.math import arithmetic, number_theory, special_functions
from src.core.math.comparison import ComparisonResult, compare
from src.core.math.decimal_number import DecimalNumber, as_decimal
from src.core.math.exceptions import Overflow, UnsupportedOperation
from src.library.config import MathLibraryConfig
from src.library.contract import MathLibrary

logger = logging.getLogger(__name__)


class PortableMathLibrary(MathLibrary):
    """Portable backend Math Library."""

    def __init__(self, config: MathLibraryConfig | None = None):
        super().__init__(config)
        logger.debug(
            "%s initialized: rounding_mode=%s default_precision=%s",
            type(self).__name__,
            self.rounding_mode.value,
            self.config.default_precision,
        )

    # -------------------------------------------------------------------------
    # Арифметика
    # -------------------------------------------------------------------------

    def add(self, left: str, right: str, precision: int | None = None) -> str:
        return str(
            arithmetic.add(
                as_decimal(left),
                as_decimal(right),
                self._resolve_precision(precision),
                self.rounding_mode,
            )
        )

    def subtract(self, left: str, right: str, precision: int | None = None) -> str:
        return str(
            arithmetic.subtract(
                as_decimal(left),
                as_decimal(right),
                self._resolve_precision(precision),
                self.rounding_mode,
            )
        )

    def multiply(self, left: str, right: str, precision: int | None = None) -> str:
        return str(
            arithmetic.multiply(
                as_decimal(left),
                as_decimal(right),
                self._resolve_precision(precision),
                self.rounding_mode,
            )
        )

    def divide(self, left: str, right: str, precision: int | None = None) -> str:
        return str(
            arithmetic.divide(
                as_decimal(left),
                as_decimal(right),
                self._resolve_division_precision(precision),
                self.rounding_mode,
            )
        )

    def modulus(self, operand: str, modulus: str, precision: int | None = None) -> str:
        return str(
            arithmetic.modulus(
                as_decimal(operand),
                as_decimal(modulus),
                self._resolve_precision(precision),
                self.rounding_mode,
            )
        )

    def power(self, base: str, exponent: str, precision: int | None = None) -> str:
        base_value = as_decimal(base)
        exponent_value = as_decimal(exponent)
        resolved = self._resolve_precision(precision)

        if not exponent_value.is_integer:
            return self._fractional_power(base_value, exponent_value, resolved)

        return str(
            arithmetic.integer_power(
                base_value,
                exponent_value.integer_part,
                resolved,
                self.rounding_mode,
                self.config.division_scale,
            )
        )

    def _fractional_power(
        self, base: DecimalNumber, exponent: DecimalNumber, precision: int | None
    ) -> str:
        logger.debug("power(%s, %s) refused: fractional exponent", base, exponent)
        raise UnsupportedOperation("Not a valid library for fractional powers.")

    def square_root(self, operand: str, precision: int | None = None) -> str:
        return str(
            arithmetic.square_root(
                as_decimal(operand),
                self._resolve_division_precision(precision),
                self.rounding_mode,
            )
        )

    def root(self, operand: str, nth: int, precision: int | None = None) -> str:
        logger.debug("root(%s, %s) refused: not supported by %s", operand, nth, type(self).__name__)
        raise UnsupportedOperation("Not a valid library for root^n.")

    def absolute(self, operand: str) -> str:
        return str(as_decimal(operand).absolute())

    def negate(self, operand: str) -> str:
        return str(as_decimal(operand).negated())

    def compare(self, left: str, right: str, precision: int | None = None) -> ComparisonResult:
        return compare(
            left,
            right,
            self._resolve_precision(precision),
            self.rounding_mode,
            self.config.segment_tie_break,
        )

    # -------------------------------------------------------------------------
    # Теория чисел
    # -------------------------------------------------------------------------

    def gcd(self, left: str, right: str) -> str:
        return str(number_theory.gcd(as_decimal(left), as_decimal(right)))

    def is_prime(self, operand: str) -> bool:
        return number_theory.is_prime(as_decimal(operand))

    def next_prime(self, operand: str) -> str:
        return str(number_theory.next_prime(as_decimal(operand), self.rounding_mode))

    def is_perfect_square(self, operand: str) -> bool:
        return number_theory.is_perfect_square(as_decimal(operand))

    # -------------------------------------------------------------------------
    # Специальные функции
    # -------------------------------------------------------------------------

    def factorial(self, operand: str) -> str:
        try:
            return special_functions.factorial(as_decimal(operand))
        except Overflow:
            logger.debug("factorial(%s) overflow", operand)
            raise

    def gamma(self, operand: str) -> str:
        try:
            return special_functions.gamma_decimal(as_decimal(operand))
        except Overflow:
            logger.debug("gamma(%s) overflow", operand)
            raise

    def log_gamma(self, operand: str) -> str:
        try:
            return special_functions.log_gamma_decimal(as_decimal(operand))
        except Overflow:
            logger.debug("log_gamma(%s) overflow", operand)
            raise
