"""Checks a typed answer against a puzzle's integer target."""

from __future__ import annotations

import re

from athena.models import AnswerFeedback, Puzzle

_INTEGER_ANSWER = re.compile(r"-?\d+", re.ASCII)


def parse_answer(raw: str) -> int | None:
    """Plain ASCII decimal integers only; anything else is not an answer."""
    text = raw.strip()
    if not _INTEGER_ANSWER.fullmatch(text):
        return None
    return int(text)


def check_answer(puzzle: Puzzle, raw: str, system_name: str | None = None) -> AnswerFeedback:
    """Compare ``raw`` with ``puzzle.target``; non-numeric text is just wrong."""
    answer = parse_answer(raw)
    if answer is not None and answer == puzzle.target:
        message = "Correct!"
        if system_name:
            message = f"Correct! You successfully analyzed the {system_name} pattern."
        return AnswerFeedback(correct=True, message=message, answer_display=puzzle.answer_display)
    return AnswerFeedback(correct=False, message="Try Again.", hint=puzzle.hint)
