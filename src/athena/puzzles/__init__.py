"""Puzzle generation and answer checking."""

from .generator import PuzzleGenerator
from .grading import check_answer, parse_answer

__all__ = ["PuzzleGenerator", "check_answer", "parse_answer"]
