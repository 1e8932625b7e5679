"""Schema-driven numeral system conversion and puzzle engine."""

from .conversion import to_system
from .errors import AthenaError, CatalogError, InvalidInputError, SchemaDefectError, SystemNotFoundError
from .explorer import NumeralExplorer
from .models import (
    AnswerFeedback,
    ConversionResult,
    NumeralLogic,
    NumeralSystem,
    Puzzle,
    PuzzleKind,
    SystemSummary,
    ZeroRepresentation,
)
from .registry import SystemRegistry, build_registry

__all__ = [
    "AnswerFeedback",
    "AthenaError",
    "CatalogError",
    "ConversionResult",
    "InvalidInputError",
    "NumeralExplorer",
    "NumeralLogic",
    "NumeralSystem",
    "Puzzle",
    "PuzzleKind",
    "SchemaDefectError",
    "SystemNotFoundError",
    "SystemRegistry",
    "SystemSummary",
    "ZeroRepresentation",
    "build_registry",
    "to_system",
]
