"""
Arithmetic Core — точная десятичная арифметика над выровненными операндами

Все операции выполняются над целыми представлениями (unscaled) и
округляются ровно один раз — при сведении к запрошенному precision.

Scale результата (до округления):
    add / subtract  → max(scale_a, scale_b)
    multiply        → scale_a + scale_b
    modulus         → max(scale_a, scale_b)
    divide          → precision (точное рациональное частное, одно округление)

precision=None означает "точный естественный scale" (без округления).
"""

import math
from typing import Final

from src.core.math.decimal_number import DecimalNumber, align, round_decimal
from src.core.math.exceptions import DivisionByZero, InvalidNumber
from src.core.math.rounding import RoundingMode, divide_rounded, rescale

# Scale деления по умолчанию, когда precision не задан
DIVISION_SCALE_DEFAULT: Final[int] = 20

_ONE: Final[DecimalNumber] = DecimalNumber(1)


def _finish(
    unscaled: int,
    scale: int,
    precision: int | None,
    mode: RoundingMode,
) -> DecimalNumber:
    result = DecimalNumber.from_unscaled(unscaled, scale)
    if precision is None:
        return result
    return round_decimal(result, precision, mode)


# =============================================================================
# СЛОЖЕНИЕ / ВЫЧИТАНИЕ / УМНОЖЕНИЕ
# =============================================================================


def add(
    left: DecimalNumber,
    right: DecimalNumber,
    precision: int | None = None,
    mode: RoundingMode = RoundingMode.HALF_UP,
) -> DecimalNumber:
    """Сумма left + right."""
    a, b, scale = align(left, right)
    return _finish(a + b, scale, precision, mode)


def subtract(
    left: DecimalNumber,
    right: DecimalNumber,
    precision: int | None = None,
    mode: RoundingMode = RoundingMode.HALF_UP,
) -> DecimalNumber:
    """Разность left - right."""
    a, b, scale = align(left, right)
    return _finish(a - b, scale, precision, mode)


def multiply(
    left: DecimalNumber,
    right: DecimalNumber,
    precision: int | None = None,
    mode: RoundingMode = RoundingMode.HALF_UP,
) -> DecimalNumber:
    """Произведение left × right (scale = scale_a + scale_b до округления)."""
    return _finish(
        left.unscaled * right.unscaled, left.scale + right.scale, precision, mode
    )


# =============================================================================
# ДЕЛЕНИЕ / ОСТАТОК
# =============================================================================


def divide(
    left: DecimalNumber,
    right: DecimalNumber,
    precision: int = DIVISION_SCALE_DEFAULT,
    mode: RoundingMode = RoundingMode.HALF_UP,
) -> DecimalNumber:
    """
    Частное left / right, округлённое до precision разрядов.

    (a / 10^sa) / (b / 10^sb) × 10^p = a × 10^(p + sb) / (b × 10^sa)

    Raises:
        DivisionByZero: Если right == 0
    """
    if right.is_zero:
        raise DivisionByZero("Division by zero.")
    if precision < 0:
        raise ValueError(f"precision must be non-negative, got {precision}")

    numerator = left.unscaled * 10 ** (precision + right.scale)
    denominator = right.unscaled * 10**left.scale
    return DecimalNumber.from_unscaled(
        divide_rounded(numerator, denominator, mode), precision
    )


def modulus(
    left: DecimalNumber,
    right: DecimalNumber,
    precision: int | None = None,
    mode: RoundingMode = RoundingMode.HALF_UP,
) -> DecimalNumber:
    """
    Остаток left - right × floor(left / right).

    Знак результата совпадает со знаком делителя.

    Raises:
        DivisionByZero: Если right == 0

    Examples:
        modulus(5.5, 10, 1) = 5.5
        modulus(-7, 3) = 2
    """
    if right.is_zero:
        raise DivisionByZero("Modulus by zero.")

    a, b, scale = align(left, right)
    # Python % — floored modulo: a - b * floor(a / b)
    return _finish(a % b, scale, precision, mode)


# =============================================================================
# СТЕПЕНЬ / КОРЕНЬ
# =============================================================================


def integer_power(
    base: DecimalNumber,
    exponent: int,
    precision: int | None = None,
    mode: RoundingMode = RoundingMode.HALF_UP,
    division_scale: int = DIVISION_SCALE_DEFAULT,
) -> DecimalNumber:
    """
    Возведение в целую степень.

    Неотрицательная степень вычисляется точно (scale = scale_base × exponent).
    Отрицательная — как 1 / base^|exponent| с одним округлением.

    Raises:
        DivisionByZero: Если base == 0 и exponent < 0
    """
    if exponent >= 0:
        return _finish(base.unscaled**exponent, base.scale * exponent, precision, mode)

    if base.is_zero:
        raise DivisionByZero("Zero cannot be raised to a negative power.")

    denominator = DecimalNumber.from_unscaled(
        base.unscaled ** (-exponent), base.scale * (-exponent)
    )
    return divide(
        _ONE,
        denominator,
        division_scale if precision is None else precision,
        mode,
    )


def square_root(
    value: DecimalNumber,
    precision: int = DIVISION_SCALE_DEFAULT,
    mode: RoundingMode = RoundingMode.HALF_UP,
) -> DecimalNumber:
    """
    Квадратный корень, корректно округлённый до precision разрядов.

    Корень вычисляется через math.isqrt на guard-разрядах. Если корень
    не точный, истинное значение лежит строго внутри (r, r + 1), поэтому
    округляется середина r + 1/2: она не совпадает ни с одной границей
    округления и лежит с истинным значением по одну сторону от неё.

    Raises:
        InvalidNumber: Если value < 0
    """
    if value.negative:
        raise InvalidNumber("Operand must be a non-negative number.")
    if precision < 0:
        raise ValueError(f"precision must be non-negative, got {precision}")

    guard = max(precision, (value.scale + 1) // 2) + 1
    radicand = value.coefficient * 10 ** (2 * guard - value.scale)
    root = math.isqrt(radicand)

    if root * root == radicand:
        unscaled = rescale(root, guard, precision, mode)
    else:
        unscaled = divide_rounded(2 * root + 1, 2 * 10 ** (guard - precision), mode)

    return DecimalNumber.from_unscaled(unscaled, precision)
