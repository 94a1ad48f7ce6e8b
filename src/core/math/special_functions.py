"""
Special-Function Module — factorial, Gamma, LogGamma

Gamma и LogGamma вычисляются в IEEE double, область разбита на три интервала:
    (0, 0.001)      Γ(x) ≈ 1 / (x (1 + γx)),  γ — постоянная Эйлера
    [0.001, 12)     рациональное приближение на (1, 2) + рекуррентные сдвиги
    [12, 171.624]   Γ(x) = exp(lnΓ(x)), lnΓ — асимптотический ряд Стирлинга
                    (Abramowitz & Stegun 6.1.41)

LogGamma для x >= 12 вычисляется рядом напрямую (без exp/log), поэтому не
переполняется для больших x. Для x < 0.001 берётся -ln(x) - ln(1 + γx), для
[0.001, 12) — log рационального приближения, там Γ(x) ограничена.

gamma_decimal / log_gamma_decimal проверяют положительность по DecimalNumber,
до приведения к double.

Результаты форматируются с FLOAT_SIGNIFICANT_DIGITS значащими цифрами.
"""

import math
from typing import Final

from src.core.math.decimal_number import DecimalNumber
from src.core.math.exceptions import InvalidNumber, Overflow

# =============================================================================
# КОНСТАНТЫ
# =============================================================================

# Постоянная Эйлера–Маскерони
EULER_GAMMA: Final[float] = 0.577215664901532860606512090

# ln(2π) / 2
HALF_LOG_TWO_PI: Final[float] = 0.91893853320467274178032973640562

# Границы интервалов
GAMMA_SMALL_ARGUMENT: Final[float] = 0.001
GAMMA_ASYMPTOTIC_ARGUMENT: Final[float] = 12.0

# Γ(x) > DBL_MAX при x > 171.624
GAMMA_OVERFLOW_ARGUMENT: Final[float] = 171.624

# Значащие цифры при форматировании float-результатов
FLOAT_SIGNIFICANT_DIGITS: Final[int] = 14

# Коэффициенты числителя приближения Γ на (1, 2)
_GAMMA_P: Final[tuple[float, ...]] = (
    -1.71618513886549492533811e0,
    2.47656508055759199108314e1,
    -3.79804256470945635097577e2,
    6.29331155312818442661052e2,
    8.66966202790413211295064e2,
    -3.14512729688483675254357e4,
    -3.61444134186911729807069e4,
    6.64561438202405440627855e4,
)

# Коэффициенты знаменателя приближения Γ на (1, 2)
_GAMMA_Q: Final[tuple[float, ...]] = (
    -3.08402300119738975254353e1,
    3.15350626979604161529144e2,
    -1.01515636749021914166146e3,
    -3.10777167157231109440444e3,
    2.25381184209801510330112e4,
    4.75584627752788110767815e3,
    -1.34659959864969306392456e5,
    -1.15132259675553483497211e5,
)

# Коэффициенты асимптотического ряда Стирлинга (B_2k / (2k (2k - 1)))
_STIRLING_C: Final[tuple[float, ...]] = (
    1.0 / 12.0,
    -1.0 / 360.0,
    1.0 / 1260.0,
    -1.0 / 1680.0,
    1.0 / 1188.0,
    -691.0 / 360360.0,
    1.0 / 156.0,
    -3617.0 / 122400.0,
)


# =============================================================================
# ВАЛИДАЦИЯ / ФОРМАТИРОВАНИЕ
# =============================================================================


def _require_positive(x: float) -> None:
    if not x > 0.0:
        raise InvalidNumber("Operand must be a positive number.")


def format_float(value: float, significant_digits: int = FLOAT_SIGNIFICANT_DIGITS) -> str:
    """
    Форматирование float с заданным числом значащих цифр.

    Хвостовые нули отбрасываются; экспоненциальная форма используется,
    когда порядок >= significant_digits или < -4.

    Examples:
        >>> format_float(1.772453850905516)
        '1.7724538509055'
        >>> format_float(5.562092414534105e305)
        '5.5620924145341E+305'
        >>> format_float(1e-5)
        '1.0E-5'
    """
    text = f"{value:.{significant_digits}G}"
    if "E" not in text:
        return text

    mantissa, exponent = text.split("E")
    if "." not in mantissa:
        mantissa += ".0"
    return f"{mantissa}E{int(exponent):+d}"


# =============================================================================
# GAMMA / LOG GAMMA
# =============================================================================


def _gamma_rational(x: float) -> float:
    """Γ(x) для 0 < x < 12 через приближение на (1, 2)."""
    if x < GAMMA_SMALL_ARGUMENT:
        return 1.0 / (x * (1.0 + EULER_GAMMA * x))

    y = x
    shifts = 0
    arg_was_less_than_one = y < 1.0

    # Сдвиг y в интервал (1, 2)
    if arg_was_less_than_one:
        y += 1.0
    else:
        shifts = int(math.floor(y)) - 1
        y -= shifts

    numerator = 0.0
    denominator = 1.0
    z = y - 1
    for p, q in zip(_GAMMA_P, _GAMMA_Q):
        numerator = (numerator + p) * z
        denominator = denominator * z + q

    result = numerator / denominator + 1.0

    if arg_was_less_than_one:
        # Γ(x) = Γ(x + 1) / x
        result /= y - 1.0
    else:
        # Γ(x + n) = x (x + 1) ... (x + n - 1) Γ(x)
        for _ in range(shifts):
            result *= y
            y += 1

    return result


def _log_gamma_asymptotic(x: float) -> float:
    """lnΓ(x) для x >= 12, ряд Стирлинга."""
    z = 1.0 / (x * x)
    total = _STIRLING_C[-1]
    for coefficient in reversed(_STIRLING_C[:-1]):
        total *= z
        total += coefficient
    series = total / x

    return (x - 0.5) * math.log(x) - x + HALF_LOG_TWO_PI + series


def gamma(x: float) -> float:
    """
    Гамма-функция Γ(x) для x > 0.

    Raises:
        InvalidNumber: Если x <= 0
        Overflow: Если результат > DBL_MAX (x > GAMMA_OVERFLOW_ARGUMENT или
            субнормальный x)
    """
    _require_positive(x)

    if x > GAMMA_OVERFLOW_ARGUMENT:
        raise Overflow("Number too large.")

    if x < GAMMA_ASYMPTOTIC_ARGUMENT:
        result = _gamma_rational(x)
    else:
        result = math.exp(_log_gamma_asymptotic(x))

    # Субнормальный x: 1 / (x (1 + γx)) > DBL_MAX
    if not math.isfinite(result):
        raise Overflow("Number too large.")
    return result


def log_gamma(x: float) -> float:
    """
    Натуральный логарифм гамма-функции lnΓ(x) для x > 0.

    Raises:
        InvalidNumber: Если x <= 0
        Overflow: Если x или результат не представимы как конечный float
    """
    _require_positive(x)

    if x < GAMMA_SMALL_ARGUMENT:
        # ln(1 / (x (1 + γx))) без промежуточного 1 / x
        return -math.log(x) - math.log1p(EULER_GAMMA * x)

    if x < GAMMA_ASYMPTOTIC_ARGUMENT:
        return math.log(abs(_gamma_rational(x)))

    if math.isinf(x):
        raise Overflow("Number too large.")

    result = _log_gamma_asymptotic(x)
    if not math.isfinite(result):
        raise Overflow("Number too large.")
    return result


def _require_positive_decimal(value: DecimalNumber) -> None:
    if value.negative or value.is_zero:
        raise InvalidNumber("Operand must be a positive number.")


def gamma_decimal(value: DecimalNumber) -> str:
    """
    Γ(value) для десятичного операнда.

    Положительность проверяется по DecimalNumber: положительный операнд,
    который в double становится 0.0, даёт Overflow, а не InvalidNumber.

    Raises:
        InvalidNumber: Если value <= 0
        Overflow: Если Γ(value) > DBL_MAX
    """
    _require_positive_decimal(value)

    x = value.to_float()
    if x == 0.0:
        raise Overflow("Number too large.")
    return format_float(gamma(x))


def log_gamma_decimal(value: DecimalNumber) -> str:
    """
    lnΓ(value) для десятичного операнда.

    Для положительного операнда ниже диапазона double lnΓ(x) = -ln(x) с
    точностью double, ln(x) берётся из coefficient и scale.

    Raises:
        InvalidNumber: Если value <= 0
        Overflow: Если lnΓ(value) не представим как конечный float
    """
    _require_positive_decimal(value)

    x = value.to_float()
    if x == 0.0:
        return format_float(value.scale * math.log(10) - math.log(value.coefficient))
    return format_float(log_gamma(x))


# =============================================================================
# FACTORIAL
# =============================================================================


def factorial_integer(n: int) -> int:
    """Итеративное произведение 1 × 2 × ... × n."""
    if n < 0:
        raise InvalidNumber("Operand must be a non-negative number.")
    result = 1
    for k in range(2, n + 1):
        result *= k
    return result


def factorial(value: DecimalNumber) -> str:
    """
    Факториал десятичного числа.

    Целое значение → точное произведение в scale операнда ("4.0" → "24.0").
    Дробное значение → Γ(value + 1).

    Raises:
        InvalidNumber: Если value < 0
        Overflow: Если Γ(value + 1) не представима
    """
    if value.negative:
        raise InvalidNumber("Operand must be a non-negative number.")

    if value.is_integer:
        product = factorial_integer(value.integer_part)
        return str(DecimalNumber(product * 10**value.scale, value.scale))

    return format_float(gamma(value.to_float() + 1.0))
