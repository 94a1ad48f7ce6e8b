"""
DecimalContextMathLibrary — backend на десятичной арифметике хоста

Использует decimal.Decimal (произвольная точность) для операций, которые
portable backend отдаёт как capability gap:
- root(x, n)               → exp(ln|x| / n), нечётные корни из отрицательных
- power с дробной степенью → Decimal ** Decimal для положительного основания

Остальной контракт наследуется от PortableMathLibrary.

Вычисления идут с GUARD_DIGITS запасных разрядов, затем результат
округляется до precision по режиму экземпляра.
"""

import decimal
import logging
from decimal import ROUND_HALF_EVEN, Decimal, localcontext
from typing import Callable, Final

from src.core.math.decimal_number import DecimalNumber, as_decimal, parse_decimal
from src.core.math.exceptions import DivisionByZero, InvalidNumber, Overflow
from src.library.portable import PortableMathLibrary

logger = logging.getLogger(__name__)

# Запасные разряды для промежуточных вычислений
GUARD_DIGITS: Final[int] = 10


class DecimalContextMathLibrary(PortableMathLibrary):
    """Backend Math Library с root и дробными степенями."""

    def _evaluate(self, compute: Callable[[], Decimal], precision: int) -> DecimalNumber:
        """
        Вычисление compute() с достаточной точностью контекста.

        Точность контекста увеличивается, пока в неё не помещаются все целые
        разряды результата плюс precision + GUARD_DIGITS дробных.
        """
        context_precision = precision + 2 * GUARD_DIGITS
        while True:
            with localcontext() as ctx:
                ctx.prec = context_precision
                try:
                    result = compute()
                except decimal.Overflow as e:
                    raise Overflow("Number too large.") from e

                required = max(result.adjusted() + 1, 1) + precision + GUARD_DIGITS
                if required <= ctx.prec:
                    quantized = result.quantize(
                        Decimal(1).scaleb(-(precision + GUARD_DIGITS)),
                        rounding=ROUND_HALF_EVEN,
                    )
                    break
            context_precision = required

        return parse_decimal(format(quantized, "f")).with_scale(precision, self.rounding_mode)

    def root(self, operand: str, nth: int, precision: int | None = None) -> str:
        """
        Корень степени nth.

        Raises:
            InvalidNumber: Если nth не положительное целое или корень чётной
                степени из отрицательного числа
        """
        value = as_decimal(operand)
        if isinstance(nth, bool) or not isinstance(nth, int) or nth < 1:
            raise InvalidNumber(f"Root degree must be a positive integer, got {nth!r}.")
        if value.negative and nth % 2 == 0:
            raise InvalidNumber("Even root of a negative number.")

        resolved = self._resolve_division_precision(precision)
        if value.is_zero or nth == 1:
            return str(value.with_scale(resolved, self.rounding_mode))

        magnitude = Decimal(str(value.absolute()))
        result = self._evaluate(lambda: (magnitude.ln() / nth).exp(), resolved)
        return str(result.negated() if value.negative else result)

    def _fractional_power(
        self, base: DecimalNumber, exponent: DecimalNumber, precision: int | None
    ) -> str:
        resolved = self.config.division_scale if precision is None else precision

        if base.negative:
            raise InvalidNumber("Fractional power of a negative number.")
        if base.is_zero:
            if exponent.negative:
                raise DivisionByZero("Zero cannot be raised to a negative power.")
            return str(DecimalNumber(0, resolved))

        logger.debug("power(%s, %s) evaluated in decimal context", base, exponent)
        base_value = Decimal(str(base))
        exponent_value = Decimal(str(exponent))
        return str(self._evaluate(lambda: base_value**exponent_value, resolved))
