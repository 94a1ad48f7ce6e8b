"""
MathLibrary — общий контракт backend'ов Math Library

Каждый backend (portable или использующий арифметику произвольной точности
хоста) реализует один и тот же набор операций. Операнды и результаты —
decimal-строки; отказы — типизированные исключения из src.core.math.exceptions.

Операция, которую backend не умеет выполнять, выбрасывает
UnsupportedOperation (capability gap), а не возвращает приближение.
"""

from abc import ABC, abstractmethod

from src.core.math.comparison import ComparisonResult
from src.core.math.exceptions import InvalidNumber
from src.core.math.rounding import RoundingMode
from src.library.config import MathLibraryConfig


class MathLibrary(ABC):
    """Абстрактный backend Math Library."""

    def __init__(self, config: MathLibraryConfig | None = None):
        """
        Args:
            config: конфигурация backend'а (опционально, используется default)
        """
        self.config = config or MathLibraryConfig()

    @property
    def rounding_mode(self) -> RoundingMode:
        return self.config.rounding_mode

    def _resolve_precision(self, precision: int | None) -> int | None:
        """Явный precision или default_precision конфигурации."""
        if precision is None:
            return self.config.default_precision
        if isinstance(precision, bool) or not isinstance(precision, int) or precision < 0:
            raise InvalidNumber(f"Precision must be a non-negative integer, got {precision!r}.")
        return precision

    def _resolve_division_precision(self, precision: int | None) -> int:
        """Precision для деления и корней: без default — division_scale."""
        resolved = self._resolve_precision(precision)
        return self.config.division_scale if resolved is None else resolved

    # -------------------------------------------------------------------------
    # Арифметика
    # -------------------------------------------------------------------------

    @abstractmethod
    def add(self, left: str, right: str, precision: int | None = None) -> str: ...

    @abstractmethod
    def subtract(self, left: str, right: str, precision: int | None = None) -> str: ...

    @abstractmethod
    def multiply(self, left: str, right: str, precision: int | None = None) -> str: ...

    @abstractmethod
    def divide(self, left: str, right: str, precision: int | None = None) -> str: ...

    @abstractmethod
    def modulus(self, operand: str, modulus: str, precision: int | None = None) -> str: ...

    @abstractmethod
    def power(self, base: str, exponent: str, precision: int | None = None) -> str: ...

    @abstractmethod
    def square_root(self, operand: str, precision: int | None = None) -> str: ...

    @abstractmethod
    def root(self, operand: str, nth: int, precision: int | None = None) -> str: ...

    @abstractmethod
    def absolute(self, operand: str) -> str: ...

    @abstractmethod
    def negate(self, operand: str) -> str: ...

    @abstractmethod
    def compare(
        self, left: str, right: str, precision: int | None = None
    ) -> ComparisonResult: ...

    # -------------------------------------------------------------------------
    # Теория чисел
    # -------------------------------------------------------------------------

    @abstractmethod
    def gcd(self, left: str, right: str) -> str: ...

    @abstractmethod
    def is_prime(self, operand: str) -> bool: ...

    @abstractmethod
    def next_prime(self, operand: str) -> str: ...

    @abstractmethod
    def is_perfect_square(self, operand: str) -> bool: ...

    # -------------------------------------------------------------------------
    # Специальные функции
    # -------------------------------------------------------------------------

    @abstractmethod
    def factorial(self, operand: str) -> str: ...

    @abstractmethod
    def gamma(self, operand: str) -> str: ...

    @abstractmethod
    def log_gamma(self, operand: str) -> str: ...
