"""Zero handling shared by every conversion path."""

from __future__ import annotations

from athena.models import ConversionResult, NumeralLogic, NumeralSystem, ZeroRepresentation

UNREPRESENTABLE_TEXT = "N/A"


def zero_result(system: NumeralSystem) -> ConversionResult:
    """Answer a conversion of 0 from the system's zero-symbol contract."""
    if system.has_zero:
        return ConversionResult(
            system_id=system.id,
            value=0,
            kind=system.logic,
            symbols=system.zero_symbol,
            digits=(0,) if system.logic is NumeralLogic.POSITIONAL else (),
            trace=("Value is 0, returning zero symbol.",),
            zero=ZeroRepresentation.SYMBOL,
            digit_renderer=system.digit_renderer,
        )
    return ConversionResult(
        system_id=system.id,
        value=0,
        kind=system.logic,
        symbols=UNREPRESENTABLE_TEXT,
        trace=("This system does not have a concept of Zero.",),
        zero=ZeroRepresentation.UNREPRESENTABLE,
        digit_renderer=system.digit_renderer,
    )
