"""
Number-Theoretic Module — GCD, простота, следующее простое

GCD над десятичными числами:
    common = min(scale_a, scale_b)
    a', b' = trunc(|a| × 10^common), trunc(|b| × 10^common)
    g = euclid(a', b')
    gcd = g / 10^common

Правило выравнивания по минимальному scale (с усечением разрядов сверх него)
воспроизводит эталонные значения:
    gcd("4.4", "6.66")  = "2.2"
    gcd("6.6", "4.44")  = "2.2"
    gcd("6.666", "4.4") = "2.2"
    gcd("6.66", "4.44") = "2.22"

Простота — детерминированный trial division до isqrt(n) по 2, 3 и 6k ± 1.
"""

import math

from src.core.math.decimal_number import DecimalNumber
from src.core.math.rounding import RoundingMode, rescale


# =============================================================================
# GCD
# =============================================================================


def euclid(a: int, b: int) -> int:
    """Алгоритм Евклида (повторяющийся остаток) над неотрицательными целыми."""
    a, b = abs(a), abs(b)
    while b:
        a, b = b, a % b
    return a


def gcd(left: DecimalNumber, right: DecimalNumber) -> DecimalNumber:
    """
    Наибольший общий делитель двух десятичных чисел.

    gcd(a, 0) = |a| без усечения; результат всегда неотрицательный;
    операция коммутативна.
    """
    if right.is_zero:
        return left.absolute()
    if left.is_zero:
        return right.absolute()

    common_scale = min(left.scale, right.scale)
    a = left.shift(common_scale).absolute().integer_part
    b = right.shift(common_scale).absolute().integer_part

    return DecimalNumber(euclid(a, b), common_scale)


# =============================================================================
# ПРОСТЫЕ ЧИСЛА
# =============================================================================


def is_prime_integer(n: int) -> bool:
    """
    Детерминированная проверка простоты trial division.

    Examples:
        >>> [k for k in range(20) if is_prime_integer(k)]
        [2, 3, 5, 7, 11, 13, 17, 19]
    """
    if n < 2:
        return False
    if n < 4:
        return True
    if n % 2 == 0 or n % 3 == 0:
        return False

    limit = math.isqrt(n)
    divisor = 5
    while divisor <= limit:
        if n % divisor == 0 or n % (divisor + 2) == 0:
            return False
        divisor += 6
    return True


def is_prime(value: DecimalNumber) -> bool:
    """Простое ли число (дробные значения — не простые)."""
    if not value.is_integer:
        return False
    return is_prime_integer(value.integer_part)


def next_prime(value: DecimalNumber, mode: RoundingMode = RoundingMode.HALF_UP) -> DecimalNumber:
    """
    Наименьшее простое, строго большее round(value).

    value округляется до целого по mode, поиск начинается с round(value) + 1
    (но не ниже 2).

    Examples:
        next_prime(5.5) = 7   (5.5 → 6, следующее простое после 6 — 7)
    """
    candidate = max(rescale(value.unscaled, value.scale, 0, mode) + 1, 2)
    while not is_prime_integer(candidate):
        candidate += 1
    return DecimalNumber(candidate)


def is_perfect_square(value: DecimalNumber) -> bool:
    """Является ли value неотрицательным целым точным квадратом."""
    if value.negative or not value.is_integer:
        return False
    n = value.integer_part
    root = math.isqrt(n)
    return root * root == n
