"""CLI-side payload builders for rich output."""

from __future__ import annotations

from athena.display import place_values, render_text
from athena.models import ConversionResult, NumeralLogic, NumeralSystem, Puzzle, SystemSummary


def summary_payload(summary: SystemSummary) -> dict:
    return {"id": summary.id, "name": summary.name, "base": summary.base}


def system_payload(system: NumeralSystem) -> dict:
    payload = {
        "id": system.id,
        "name": system.name,
        "region": system.region,
        "base": system.base,
        "logic": system.logic.value,
        "description": system.description,
        "zero_symbol": system.zero_symbol,
    }
    if system.logic is NumeralLogic.ADDITIVE:
        payload["symbols"] = {symbol: value for value, symbol in system.symbols_descending()}
    else:
        payload["digit_renderer"] = system.digit_renderer
        payload["layout"] = system.layout.value
    return payload


def conversion_payload(result: ConversionResult, system: NumeralSystem, *, with_trace: bool = True) -> dict:
    """Flatten a conversion into the dict printed by ``athena convert``."""
    payload: dict = {
        "system": system.name,
        "input": result.value,
        "result": render_text(result),
    }
    if result.kind is NumeralLogic.POSITIONAL and result.zero is None:
        payload["digits"] = list(result.digits)
        payload["places"] = place_values(result, system.base)
        payload["digit_renderer"] = result.digit_renderer
    if with_trace:
        payload["trace"] = [f"{index:02d} {step}" for index, step in enumerate(result.trace, start=1)]
    return payload


def puzzle_payload(puzzle: Puzzle, *, reveal: bool = False) -> dict:
    payload = {"type": puzzle.kind.value, "question": puzzle.question_text}
    if reveal:
        payload["target"] = puzzle.target
        payload["answer_display"] = puzzle.answer_display
        payload["hint"] = puzzle.hint
    return payload
