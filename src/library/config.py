"""
MathLibraryConfig — конфигурация backend'а Math Library

Immutable Pydantic модель. Соответствует JSON Schema
contracts/schema/math_library_config.json.

Конфигурация фиксируется при создании backend'а и не меняется в течение
его жизни (RoundingMode принадлежит экземпляру).
"""

import json
from enum import Enum
from pathlib import Path

from pydantic import BaseModel, Field

from src.core.contracts import validate_math_library_config
from src.core.math.arithmetic import DIVISION_SCALE_DEFAULT
from src.core.math.comparison import SegmentTieBreak
from src.core.math.rounding import RoundingMode


# =============================================================================
# ENUMS
# =============================================================================


class BackendKind(str, Enum):
    """Вариант backend'а, выбираемый при конфигурации."""

    PORTABLE = "PORTABLE"
    DECIMAL_CONTEXT = "DECIMAL_CONTEXT"


# =============================================================================
# CONFIG MODEL
# =============================================================================


class MathLibraryConfig(BaseModel):
    """Конфигурация backend'а."""

    backend: BackendKind = Field(
        BackendKind.PORTABLE, description="Вариант backend'а"
    )
    rounding_mode: RoundingMode = Field(
        RoundingMode.HALF_UP, description="Режим округления экземпляра"
    )
    default_precision: int | None = Field(
        None,
        ge=0,
        description="Precision по умолчанию (None — естественный точный scale)",
    )
    division_scale: int = Field(
        DIVISION_SCALE_DEFAULT,
        ge=0,
        description="Scale деления и корней, когда precision не задан",
    )
    segment_tie_break: SegmentTieBreak = Field(
        SegmentTieBreak.LONGER_IS_GREATER,
        description="Правило SEGMENTED сравнения для операндов разной длины",
    )

    model_config = {"frozen": True}


def load_math_library_config(path: str | Path) -> MathLibraryConfig:
    """
    Загрузка конфигурации из JSON файла.

    Данные сначала проверяются JSON Schema контрактом, затем строится модель.

    Raises:
        FileNotFoundError: Если файл не найден
        json.JSONDecodeError: Если файл не является валидным JSON
        jsonschema.ValidationError: Если данные не соответствуют схеме
    """
    with open(path, "r", encoding="utf-8") as f:
        data = json.load(f)

    validate_math_library_config(data)
    return MathLibraryConfig.model_validate(data)
