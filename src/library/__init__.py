"""
Math Library backends.

Общий контракт MathLibrary, его реализации и выбор backend'а по конфигурации.
"""

from src.library.config import BackendKind, MathLibraryConfig, load_math_library_config
from src.library.contract import MathLibrary
from src.library.decimal_context import DecimalContextMathLibrary
from src.library.factory import create_math_library
from src.library.portable import PortableMathLibrary

__all__ = [
    # Config
    "BackendKind",
    "MathLibraryConfig",
    "load_math_library_config",
    # Contract
    "MathLibrary",
    # Backends
    "PortableMathLibrary",
    "DecimalContextMathLibrary",
    # Factory
    "create_math_library",
]
