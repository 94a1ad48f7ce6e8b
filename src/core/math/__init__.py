"""
Core math modules для Math Library

Десятичная модель, политика округления и алгоритмы portable backend'а:
точная арифметика, сравнение, теория чисел и специальные функции.
"""

# Exceptions
from src.core.math.exceptions import (
    DivisionByZero,
    InvalidNumber,
    MathLibraryError,
    Overflow,
    UnsupportedOperation,
)

# Rounding Policy
from src.core.math.rounding import (
    RoundingMode,
    divide_rounded,
    rescale,
)

# Decimal Model
from src.core.math.decimal_number import (
    DecimalNumber,
    align,
    as_decimal,
    parse_decimal,
    round_decimal,
)

# Arithmetic Core
from src.core.math.arithmetic import (
    DIVISION_SCALE_DEFAULT,
    add,
    divide,
    integer_power,
    modulus,
    multiply,
    square_root,
    subtract,
)

# Comparison
from src.core.math.comparison import (
    ComparisonResult,
    ComparisonStrategy,
    SegmentTieBreak,
    compare,
    compare_plain,
    compare_segmented,
    parse_segments,
    select_strategy,
)

# Number Theory
from src.core.math.number_theory import (
    euclid,
    gcd,
    is_perfect_square,
    is_prime,
    is_prime_integer,
    next_prime,
)

# Special Functions
from src.core.math.special_functions import (
    EULER_GAMMA,
    FLOAT_SIGNIFICANT_DIGITS,
    GAMMA_OVERFLOW_ARGUMENT,
    factorial,
    factorial_integer,
    format_float,
    gamma,
    gamma_decimal,
    log_gamma,
    log_gamma_decimal,
)

__all__ = [
    # Exceptions
    "MathLibraryError",
    "InvalidNumber",
    "DivisionByZero",
    "UnsupportedOperation",
    "Overflow",
    # Rounding Policy
    "RoundingMode",
    "divide_rounded",
    "rescale",
    # Decimal Model
    "DecimalNumber",
    "align",
    "as_decimal",
    "parse_decimal",
    "round_decimal",
    # Arithmetic Core
    "DIVISION_SCALE_DEFAULT",
    "add",
    "subtract",
    "multiply",
    "divide",
    "modulus",
    "integer_power",
    "square_root",
    # Comparison
    "ComparisonResult",
    "ComparisonStrategy",
    "SegmentTieBreak",
    "compare",
    "compare_plain",
    "compare_segmented",
    "parse_segments",
    "select_strategy",
    # Number Theory
    "euclid",
    "gcd",
    "is_perfect_square",
    "is_prime",
    "is_prime_integer",
    "next_prime",
    # Special Functions
    "EULER_GAMMA",
    "FLOAT_SIGNIFICANT_DIGITS",
    "GAMMA_OVERFLOW_ARGUMENT",
    "factorial",
    "factorial_integer",
    "format_float",
    "gamma",
    "gamma_decimal",
    "log_gamma",
    "log_gamma_decimal",
]
