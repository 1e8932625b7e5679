"""CLI startup entrypoint for Athena."""

from __future__ import annotations

from typing import NoReturn

import typer
from rich import print

from athena.cli import conversion_payload, puzzle_payload, summary_payload, system_payload
from athena.config import LogLevel, settings
from athena.errors import AthenaError
from athena.explorer import NumeralExplorer
from athena.registry import build_registry
from athena.telemetry import configure_logging

app = typer.Typer(help="Athena numeral system explorer")


def _build_explorer(seed: int | None = None) -> NumeralExplorer:
    registry = build_registry(settings.catalog_path, probe_limit=settings.validation_probe_limit)
    return NumeralExplorer.with_seed(
        registry,
        seed if seed is not None else settings.puzzle_seed,
        conversion_max=settings.conversion_max,
        sequence_start_max=settings.sequence_start_max,
        sequence_step_max=settings.sequence_step_max,
    )


def _fail(exc: AthenaError) -> NoReturn:
    print({"error": str(exc)})
    raise typer.Exit(code=1)


@app.callback()
def main(
    log_level: LogLevel = typer.Option(None, case_sensitive=False, help="Override ATHENA_LOG_LEVEL"),
) -> None:
    configure_logging((log_level or settings.log_level).value)


@app.command()
def start() -> None:
    """Show runtime configuration."""
    print(
        {
            "app_name": settings.app_name,
            "catalog_path": settings.catalog_path,
            "validation_probe_limit": settings.validation_probe_limit,
            "puzzle_seed": settings.puzzle_seed,
        }
    )


@app.command()
def systems() -> None:
    """List the available numeral systems."""
    try:
        explorer = _build_explorer()
    except AthenaError as exc:
        _fail(exc)
    print({"systems": [summary_payload(summary) for summary in explorer.list_systems()]})


@app.command()
def describe(system: str = typer.Argument(..., help="System id, e.g. roman")) -> None:
    """Show the schema of one numeral system."""
    try:
        info = _build_explorer().describe(system)
    except AthenaError as exc:
        _fail(exc)
    print(system_payload(info))


@app.command(context_settings={"ignore_unknown_options": True})
def convert(
    number: int = typer.Argument(..., help="Arabic (decimal) number to convert"),
    system: str = typer.Option("roman", "--system", "-s", help="Target system id"),
    trace: bool = typer.Option(True, help="Include the step-by-step derivation"),
) -> None:
    """Convert a decimal number into a numeral system."""
    try:
        explorer = _build_explorer()
        result = explorer.convert(number, system)
    except AthenaError as exc:
        _fail(exc)
    print(conversion_payload(result, explorer.describe(system), with_trace=trace))


@app.command()
def puzzle(
    system: str = typer.Option("roman", "--system", "-s", help="System id"),
    seed: int = typer.Option(None, help="Seed for a reproducible puzzle"),
    reveal: bool = typer.Option(False, help="Also print the answer and hint"),
) -> None:
    """Generate one puzzle."""
    try:
        generated = _build_explorer(seed=seed).generate_puzzle(system)
    except AthenaError as exc:
        _fail(exc)
    print(puzzle_payload(generated, reveal=reveal))


@app.command()
def practice(
    system: str = typer.Option("roman", "--system", "-s", help="System id"),
    rounds: int = typer.Option(1, min=1, help="Number of puzzles to play"),
    attempts: int = typer.Option(3, min=1, help="Attempts allowed per puzzle"),
    seed: int = typer.Option(None, help="Seed for reproducible puzzles"),
) -> None:
    """Play puzzles interactively; answers are decimal numbers."""
    try:
        explorer = _build_explorer(seed=seed)
        puzzles = [explorer.generate_puzzle(system) for _ in range(rounds)]
    except AthenaError as exc:
        _fail(exc)

    solved = 0
    for current in puzzles:
        print(puzzle_payload(current))
        for _ in range(attempts):
            feedback = explorer.check_answer(current, typer.prompt("Answer"))
            if feedback.correct:
                solved += 1
                print({"result": feedback.message, "answer_display": feedback.answer_display})
                break
            print({"result": feedback.message, "hint": feedback.hint})
        else:
            print({"answer": current.target, "answer_display": current.answer_display})

    print({"solved": solved, "rounds": rounds})


if __name__ == "__main__":
    app()
