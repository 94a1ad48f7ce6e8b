"""
Decimal Model — разбор, нормализация и форматирование decimal-строк

Decimal-строка — единственный "wire format" на границе Math Library:
    [+-]? digits ( "." digits )?
Целая часть может быть опущена, если есть дробная (".5").

DecimalNumber хранит число как (coefficient, scale, negative):
    value = (-1)^negative × coefficient / 10^scale

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. coefficient >= 0, scale >= 0
2. Отрицательный ноль нормализуется в ноль
3. Экземпляры immutable — операции возвращают новые объекты
4. Scale сохраняется: "4.0" имеет scale=1 и форматируется как "4.0"
"""

import re
from dataclasses import dataclass

from src.core.math.exceptions import InvalidNumber
from src.core.math.rounding import RoundingMode, rescale

_DECIMAL_PATTERN = re.compile(
    r"(?P<sign>[+-])?(?P<integer>[0-9]*)(?:\.(?P<fraction>[0-9]+))?"
)


# =============================================================================
# DECIMAL NUMBER
# =============================================================================


@dataclass(frozen=True)
class DecimalNumber:
    """Знаковое десятичное число фиксированного scale."""

    coefficient: int
    scale: int = 0
    negative: bool = False

    def __post_init__(self) -> None:
        if self.coefficient < 0:
            raise ValueError(f"coefficient must be non-negative, got {self.coefficient}")
        if self.scale < 0:
            raise ValueError(f"scale must be non-negative, got {self.scale}")
        if self.coefficient == 0 and self.negative:
            object.__setattr__(self, "negative", False)

    @classmethod
    def from_unscaled(cls, unscaled: int, scale: int = 0) -> "DecimalNumber":
        """Построение из знакового целого представления unscaled / 10^scale."""
        return cls(coefficient=abs(unscaled), scale=scale, negative=unscaled < 0)

    @property
    def unscaled(self) -> int:
        """Знаковое целое представление (value × 10^scale)."""
        return -self.coefficient if self.negative else self.coefficient

    @property
    def is_zero(self) -> bool:
        return self.coefficient == 0

    @property
    def is_integer(self) -> bool:
        """True если дробная часть равна нулю ("4.0" — целое)."""
        return self.coefficient % 10**self.scale == 0

    @property
    def integer_part(self) -> int:
        """Целая часть с усечением к нулю."""
        truncated = self.coefficient // 10**self.scale
        return -truncated if self.negative else truncated

    def with_scale(self, scale: int, mode: RoundingMode) -> "DecimalNumber":
        """Округление (или дополнение нулями) до заданного scale."""
        return DecimalNumber.from_unscaled(
            rescale(self.unscaled, self.scale, scale, mode), scale
        )

    def shift(self, places: int) -> "DecimalNumber":
        """Умножение на 10^places (places >= 0) без потери точности."""
        if places <= self.scale:
            return DecimalNumber(self.coefficient, self.scale - places, self.negative)
        return DecimalNumber(
            self.coefficient * 10 ** (places - self.scale), 0, self.negative
        )

    def negated(self) -> "DecimalNumber":
        return DecimalNumber(self.coefficient, self.scale, not self.negative)

    def absolute(self) -> "DecimalNumber":
        return DecimalNumber(self.coefficient, self.scale, False)

    def to_float(self) -> float:
        """Приближение IEEE double (inf при переполнении)."""
        return float(str(self))

    def __str__(self) -> str:
        digits = str(self.coefficient)
        if self.scale:
            digits = digits.rjust(self.scale + 1, "0")
            digits = f"{digits[:-self.scale]}.{digits[-self.scale:]}"
        return f"-{digits}" if self.negative else digits


# =============================================================================
# РАЗБОР И ВЫРАВНИВАНИЕ
# =============================================================================


def parse_decimal(text: str) -> DecimalNumber:
    """
    Разбор decimal-строки.

    Args:
        text: Строка вида "[+-]?digits(.digits)?"

    Returns:
        Нормализованный DecimalNumber

    Raises:
        InvalidNumber: Если строка не соответствует грамматике

    Examples:
        >>> str(parse_decimal("007.50"))
        '7.50'
        >>> str(parse_decimal(".5"))
        '0.5'
        >>> str(parse_decimal("-0.0"))
        '0.0'
    """
    if not isinstance(text, str):
        raise InvalidNumber(f"Operand must be a decimal string, got {type(text).__name__}.")

    match = _DECIMAL_PATTERN.fullmatch(text)
    if match is None:
        raise InvalidNumber(f"Not a valid decimal number: {text!r}.")

    integer = match.group("integer")
    fraction = match.group("fraction") or ""
    if not integer and not fraction:
        raise InvalidNumber(f"Not a valid decimal number: {text!r}.")

    return DecimalNumber(
        coefficient=int(integer + fraction or "0"),
        scale=len(fraction),
        negative=match.group("sign") == "-",
    )


def as_decimal(value: str | DecimalNumber) -> DecimalNumber:
    """Приведение операнда к DecimalNumber (строки разбираются)."""
    if isinstance(value, DecimalNumber):
        return value
    return parse_decimal(value)


def align(left: DecimalNumber, right: DecimalNumber) -> tuple[int, int, int]:
    """
    Выравнивание двух чисел к общему scale = max(scale_left, scale_right).

    Returns:
        (unscaled_left, unscaled_right, common_scale)

    Examples:
        >>> align(parse_decimal("1.5"), parse_decimal("2.25"))
        (150, 225, 2)
    """
    common_scale = max(left.scale, right.scale)
    return (
        left.unscaled * 10 ** (common_scale - left.scale),
        right.unscaled * 10 ** (common_scale - right.scale),
        common_scale,
    )


def round_decimal(
    value: DecimalNumber,
    precision: int,
    mode: RoundingMode = RoundingMode.HALF_UP,
) -> DecimalNumber:
    """
    Округление до precision дробных разрядов.

    Raises:
        ValueError: Если precision < 0

    Examples:
        >>> str(round_decimal(parse_decimal("2.5"), 0))
        '3'
        >>> str(round_decimal(parse_decimal("-2.5"), 0))
        '-3'
    """
    if precision < 0:
        raise ValueError(f"precision must be non-negative, got {precision}")
    return value.with_scale(precision, mode)
