"""
Rounding Policy — стратегии округления при сжатии дробных разрядов

Закрытое перечисление RoundingMode и единственный примитив округления
divide_rounded(), через который проходят rescale, деление и квадратный корень.

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Округление выполняется ровно один раз над точным рациональным значением
2. Все режимы обрабатываются явно (неизвестный режим → ValueError)
3. Режимы HALF_* сравнивают остаток с половиной делителя в целых числах
"""

from enum import Enum

from src.core.math.exceptions import DivisionByZero


# =============================================================================
# ENUMS
# =============================================================================


class RoundingMode(str, Enum):
    """
    Стратегия округления.

    HALF_UP     — половина от нуля (1.5 → 2, -1.5 → -2)
    HALF_DOWN   — половина к нулю (1.5 → 1, -1.5 → -1)
    HALF_EVEN   — половина к чётному (banker's rounding)
    HALF_ODD    — половина к нечётному
    UP          — всегда от нуля
    DOWN        — всегда к нулю (truncation)
    CEILING     — к +∞
    FLOOR       — к -∞
    """

    HALF_UP = "HALF_UP"
    HALF_DOWN = "HALF_DOWN"
    HALF_EVEN = "HALF_EVEN"
    HALF_ODD = "HALF_ODD"
    UP = "UP"
    DOWN = "DOWN"
    CEILING = "CEILING"
    FLOOR = "FLOOR"


_HALF_MODES = frozenset(
    {
        RoundingMode.HALF_UP,
        RoundingMode.HALF_DOWN,
        RoundingMode.HALF_EVEN,
        RoundingMode.HALF_ODD,
    }
)


# =============================================================================
# ОКРУГЛЕНИЕ
# =============================================================================


def _increments_magnitude(
    quotient: int,
    remainder: int,
    denominator: int,
    negative: bool,
    mode: RoundingMode,
) -> bool:
    """Нужно ли увеличить модуль усечённого частного (remainder > 0)."""
    if mode is RoundingMode.DOWN:
        return False
    if mode is RoundingMode.UP:
        return True
    if mode is RoundingMode.CEILING:
        return not negative
    if mode is RoundingMode.FLOOR:
        return negative

    if mode not in _HALF_MODES:
        raise ValueError(f"Unknown rounding mode: {mode!r}")

    twice_remainder = remainder * 2
    if twice_remainder != denominator:
        return twice_remainder > denominator

    # Ровно половина
    if mode is RoundingMode.HALF_UP:
        return True
    if mode is RoundingMode.HALF_DOWN:
        return False
    if mode is RoundingMode.HALF_EVEN:
        return quotient % 2 == 1
    return quotient % 2 == 0


def divide_rounded(numerator: int, denominator: int, mode: RoundingMode) -> int:
    """
    Целочисленное деление с округлением по заданному режиму.

    Args:
        numerator: Делимое (любой знак)
        denominator: Делитель (любой знак, не ноль)
        mode: Режим округления

    Returns:
        numerator / denominator, округлённое до целого

    Raises:
        DivisionByZero: Если denominator == 0

    Examples:
        >>> divide_rounded(15, 10, RoundingMode.HALF_UP)
        2
        >>> divide_rounded(-15, 10, RoundingMode.HALF_UP)
        -2
        >>> divide_rounded(25, 10, RoundingMode.HALF_EVEN)
        2
        >>> divide_rounded(-11, 10, RoundingMode.FLOOR)
        -2
    """
    if denominator == 0:
        raise DivisionByZero("Division by zero.")

    if denominator < 0:
        numerator, denominator = -numerator, -denominator

    negative = numerator < 0
    quotient, remainder = divmod(abs(numerator), denominator)

    if remainder and _increments_magnitude(quotient, remainder, denominator, negative, mode):
        quotient += 1

    return -quotient if negative else quotient


def rescale(unscaled: int, scale: int, target_scale: int, mode: RoundingMode) -> int:
    """
    Перевод целого представления числа (unscaled / 10^scale) в другой scale.

    При увеличении scale число дополняется нулями (точно), при уменьшении —
    округляется по mode.

    Examples:
        >>> rescale(55, 1, 0, RoundingMode.HALF_UP)  # 5.5 → 6
        6
        >>> rescale(55, 1, 3, RoundingMode.HALF_UP)  # 5.5 → 5.500
        5500
    """
    if target_scale < 0:
        raise ValueError(f"target_scale must be non-negative, got {target_scale}")

    if target_scale >= scale:
        return unscaled * 10 ** (target_scale - scale)

    return divide_rounded(unscaled, 10 ** (scale - target_scale), mode)
