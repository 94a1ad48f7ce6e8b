"""
Comparison — две стратегии сравнения, выбираемые по форме операндов

PLAIN      — оба операнда содержат не более одной точки: обычное сравнение
             десятичных чисел после округления до precision.
SEGMENTED  — хотя бы один операнд содержит больше одной точки
             (идентификаторы версий "1.30.5"): посегментное сравнение
             беззнаковых целых слева направо.

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Антисимметрия: compare(a, b) == -compare(b, a), compare(a, a) == EQUAL
2. В SEGMENTED ведущие нули сегмента незначимы ("049" == "49")
3. Если общие сегменты равны, а длины разные — решает SegmentTieBreak
"""

from enum import Enum

from src.core.math.decimal_number import align, parse_decimal, round_decimal
from src.core.math.exceptions import InvalidNumber
from src.core.math.rounding import RoundingMode


# =============================================================================
# ENUMS
# =============================================================================


class ComparisonResult(int, Enum):
    """Результат сравнения, внешне кодируется как -1 / 0 / 1."""

    LESS = -1
    EQUAL = 0
    GREATER = 1

    @classmethod
    def of(cls, left: int, right: int) -> "ComparisonResult":
        return cls((left > right) - (left < right))


class SegmentTieBreak(str, Enum):
    """
    Правило для SEGMENTED сравнения, когда один операнд — префикс другого.

    LONGER_IS_GREATER — больше сегментов → больше ("1.2.0" > "1.2")
    EQUAL             — операнды считаются равными
    """

    LONGER_IS_GREATER = "LONGER_IS_GREATER"
    EQUAL = "EQUAL"


class ComparisonStrategy(str, Enum):
    """Стратегия сравнения, выбранная по форме операндов."""

    PLAIN = "PLAIN"
    SEGMENTED = "SEGMENTED"


def select_strategy(left: str, right: str) -> ComparisonStrategy:
    """SEGMENTED, если хотя бы в одном операнде больше одной точки."""
    if left.count(".") > 1 or right.count(".") > 1:
        return ComparisonStrategy.SEGMENTED
    return ComparisonStrategy.PLAIN


# =============================================================================
# PLAIN
# =============================================================================


def compare_plain(
    left: str,
    right: str,
    precision: int | None = None,
    mode: RoundingMode = RoundingMode.HALF_UP,
) -> ComparisonResult:
    """
    Сравнение десятичных чисел.

    Оба операнда округляются до precision (если задан), затем выравниваются
    и сравниваются как знаковые целые.

    Raises:
        InvalidNumber: Если операнд не является decimal-строкой
    """
    left_value = parse_decimal(left)
    right_value = parse_decimal(right)

    if precision is not None:
        left_value = round_decimal(left_value, precision, mode)
        right_value = round_decimal(right_value, precision, mode)

    a, b, _ = align(left_value, right_value)
    return ComparisonResult.of(a, b)


# =============================================================================
# SEGMENTED
# =============================================================================


def parse_segments(text: str) -> tuple[int, ...]:
    """
    Разбор версии-подобного идентификатора на числовые сегменты.

    Raises:
        InvalidNumber: Если сегмент пустой или содержит не только цифры

    Examples:
        >>> parse_segments("1.049.9")
        (1, 49, 9)
    """
    segments = text.split(".")
    for segment in segments:
        if not segment or not segment.isascii() or not segment.isdigit():
            raise InvalidNumber(f"Not a valid segmented number: {text!r}.")
    return tuple(int(segment) for segment in segments)


def compare_segmented(
    left: str,
    right: str,
    tie_break: SegmentTieBreak = SegmentTieBreak.LONGER_IS_GREATER,
) -> ComparisonResult:
    """
    Посегментное сравнение идентификаторов версий.

    Examples:
        >>> compare_segmented("1.30.5", "1.29.99")
        <ComparisonResult.GREATER: 1>
        >>> compare_segmented("1.105.02", "1.049.9")
        <ComparisonResult.GREATER: 1>
    """
    left_segments = parse_segments(left)
    right_segments = parse_segments(right)

    for a, b in zip(left_segments, right_segments):
        if a != b:
            return ComparisonResult.of(a, b)

    if tie_break is SegmentTieBreak.EQUAL:
        return ComparisonResult.EQUAL
    if tie_break is SegmentTieBreak.LONGER_IS_GREATER:
        return ComparisonResult.of(len(left_segments), len(right_segments))
    raise ValueError(f"Unknown segment tie-break: {tie_break!r}")


# =============================================================================
# DISPATCH
# =============================================================================


def compare(
    left: str,
    right: str,
    precision: int | None = None,
    mode: RoundingMode = RoundingMode.HALF_UP,
    tie_break: SegmentTieBreak = SegmentTieBreak.LONGER_IS_GREATER,
) -> ComparisonResult:
    """Сравнение с выбором стратегии по форме операндов."""
    if not isinstance(left, str) or not isinstance(right, str):
        raise InvalidNumber("Operands must be decimal strings.")

    if select_strategy(left, right) is ComparisonStrategy.SEGMENTED:
        return compare_segmented(left, right, tie_break)
    return compare_plain(left, right, precision, mode)
