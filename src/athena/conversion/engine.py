"""Dispatch a conversion to the routine matching the schema's logic tag."""

from __future__ import annotations

from collections.abc import Callable

from athena.errors import InvalidInputError
from athena.models import ConversionResult, NumeralLogic, NumeralSystem

from .additive import convert_additive
from .positional import convert_positional
from .zero import zero_result

_CONVERTERS: dict[NumeralLogic, Callable[[int, NumeralSystem], ConversionResult]] = {
    NumeralLogic.ADDITIVE: convert_additive,
    NumeralLogic.POSITIONAL: convert_positional,
}


def ensure_non_negative_int(number: object) -> int:
    if isinstance(number, bool) or not isinstance(number, int):
        raise InvalidInputError(f"Expected a non-negative integer, got {number!r}")
    if number < 0:
        raise InvalidInputError(f"Numbers must be non-negative, got {number}")
    return number


def to_system(number: int, system: NumeralSystem) -> ConversionResult:
    """Convert ``number`` into ``system``, answering zero from the schema first."""
    number = ensure_non_negative_int(number)
    if number == 0:
        return zero_result(system)
    return _CONVERTERS[system.logic](number, system)
