"""Greedy largest-symbol-first conversion for additive numeral systems."""

from __future__ import annotations

from athena.errors import InvalidInputError, SchemaDefectError
from athena.models import ConversionResult, NumeralLogic, NumeralSystem

from .zero import zero_result


def convert_additive(number: int, system: NumeralSystem) -> ConversionResult:
    """Reduce ``number`` by repeatedly emitting the largest symbol that fits.

    Raises ``SchemaDefectError`` when the symbol table leaves a nonzero
    remainder, which means the table lacks coverage for some value.
    """
    if system.logic is not NumeralLogic.ADDITIVE:
        raise ValueError(f"System '{system.id}' is not additive")
    if not system.symbol_table:
        raise SchemaDefectError(system.id, number, number)
    if number < 0:
        raise InvalidInputError(f"Numbers must be non-negative, got {number}")
    if number == 0:
        return zero_result(system)

    remainder = number
    emitted: list[str] = []
    trace: list[str] = []
    for value, symbol in system.symbols_descending():
        while remainder >= value:
            emitted.append(symbol)
            remainder -= value
            trace.append(f"Add {symbol} ({value}). Remaining: {remainder}")

    if remainder:
        raise SchemaDefectError(system.id, number, remainder)

    return ConversionResult(
        system_id=system.id,
        value=number,
        kind=NumeralLogic.ADDITIVE,
        symbols="".join(emitted),
        trace=tuple(trace),
    )
