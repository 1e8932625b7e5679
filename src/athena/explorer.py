from __future__ import annotations

import random

from .conversion import to_system
from .models import AnswerFeedback, ConversionResult, NumeralSystem, Puzzle, SystemSummary
from .puzzles import PuzzleGenerator, check_answer
from .registry import SystemRegistry


class NumeralExplorer:
    def __init__(self, registry: SystemRegistry, puzzles: PuzzleGenerator | None = None):
        self.registry = registry
        self.puzzles = puzzles or PuzzleGenerator(registry)

    @classmethod
    def with_seed(cls, registry: SystemRegistry, seed: int | None, **puzzle_options) -> NumeralExplorer:
        return cls(registry, PuzzleGenerator(registry, rng=random.Random(seed), **puzzle_options))

    def list_systems(self) -> list[SystemSummary]:
        return self.registry.list_systems()

    def describe(self, system_id: str) -> NumeralSystem:
        return self.registry.lookup(system_id)

    def convert(self, number: int, system_id: str) -> ConversionResult:
        return to_system(number, self.registry.lookup(system_id))

    def generate_puzzle(self, system_id: str) -> Puzzle:
        return self.puzzles.generate(system_id)

    def check_answer(self, puzzle: Puzzle, raw: str) -> AnswerFeedback:
        system = self.registry.lookup(puzzle.system_id)
        return check_answer(puzzle, raw, system_name=system.name)
