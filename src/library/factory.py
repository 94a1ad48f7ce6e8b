"""
Выбор backend'а Math Library по конфигурации.
"""

from src.library.config import BackendKind, MathLibraryConfig
from src.library.contract import MathLibrary
from src.library.decimal_context import DecimalContextMathLibrary
from src.library.portable import PortableMathLibrary

_BACKENDS: dict[BackendKind, type[MathLibrary]] = {
    BackendKind.PORTABLE: PortableMathLibrary,
    BackendKind.DECIMAL_CONTEXT: DecimalContextMathLibrary,
}


def create_math_library(config: MathLibraryConfig | None = None) -> MathLibrary:
    """
    Создание backend'а, указанного в config.backend.

    Examples:
        >>> create_math_library().root("8", 3)  # doctest: +SKIP
        Traceback (most recent call last):
            ...
        UnsupportedOperation: Not a valid library for root^n.
    """
    config = config or MathLibraryConfig()
    return _BACKENDS[config.backend](config)
