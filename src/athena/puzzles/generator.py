"""Procedural puzzles built from numeral system conversions."""

from __future__ import annotations

import logging
import random

from athena.conversion import to_system
from athena.display import render_text
from athena.models import NumeralSystem, Puzzle, PuzzleKind
from athena.registry import SystemRegistry


class PuzzleGenerator:
    """Builds conversion and sequence puzzles for one registry.

    The answer of every puzzle is the integer it was built from; rendered
    numerals only appear in the question and the confirmation text.
    """

    def __init__(
        self,
        registry: SystemRegistry,
        *,
        rng: random.Random | None = None,
        conversion_max: int = 50,
        sequence_start_max: int = 20,
        sequence_step_max: int = 3,
        logger: logging.Logger | None = None,
    ) -> None:
        if conversion_max < 1 or sequence_start_max < 1 or sequence_step_max < 1:
            raise ValueError("Puzzle ranges must have a positive upper bound")
        self._registry = registry
        self._rng = rng or random.Random()
        self._conversion_max = conversion_max
        self._sequence_start_max = sequence_start_max
        self._sequence_step_max = sequence_step_max
        self._logger = logger or logging.getLogger("athena.puzzles")

    def generate(self, system_id: str, kind: PuzzleKind | None = None) -> Puzzle:
        """Return a puzzle for ``system_id``; the kind is random unless given."""
        system = self._registry.lookup(system_id)
        kind = kind or self._rng.choice(list(PuzzleKind))
        if kind is PuzzleKind.CONVERSION:
            puzzle = self.conversion_puzzle(system)
        else:
            puzzle = self.sequence_puzzle(system)
        self._logger.info(
            "puzzle_generated",
            extra={"system_id": system.id, "kind": puzzle.kind.value, "target": puzzle.target},
        )
        return puzzle

    def conversion_puzzle(self, system: NumeralSystem) -> Puzzle:
        target = self._rng.randint(1, self._conversion_max)
        return Puzzle(
            kind=PuzzleKind.CONVERSION,
            system_id=system.id,
            question_text=f"Convert the number {target} into {system.name}.",
            target=target,
            answer_display=self._render(target, system),
            hint=f"Remember, this is a Base-{system.base} system.",
        )

    def sequence_puzzle(self, system: NumeralSystem) -> Puzzle:
        start = self._rng.randint(1, self._sequence_start_max)
        step = self._rng.randint(1, self._sequence_step_max)
        terms = (start, start + step, start + 2 * step)
        target = start + 3 * step
        rendered = ", ".join(self._render(term, system) for term in terms)
        return Puzzle(
            kind=PuzzleKind.SEQUENCE,
            system_id=system.id,
            question_text=f"Find the next number: {rendered}, ...",
            target=target,
            answer_display=self._render(target, system),
            hint=f"Identify the gap between the numbers. It seems to be increasing by {step}.",
            terms=terms,
        )

    @staticmethod
    def _render(number: int, system: NumeralSystem) -> str:
        return render_text(to_system(number, system))
