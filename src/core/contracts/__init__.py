"""
Contract Validation Module

Модуль для валидации JSON контрактов Math Library.
"""

from .validators import (
    ContractValidator,
    MathLibraryConfigValidator,
    SchemaLoader,
    validate_math_library_config,
)

__all__ = [
    # Classes
    "SchemaLoader",
    "ContractValidator",
    "MathLibraryConfigValidator",
    # Functions
    "validate_math_library_config",
]
