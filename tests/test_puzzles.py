from __future__ import annotations

import random

import pytest

from athena.conversion import to_system
from athena.display import place_values, render_text
from athena.errors import SystemNotFoundError
from athena.explorer import NumeralExplorer
from athena.models import PuzzleKind
from athena.puzzles import PuzzleGenerator, check_answer, parse_answer
from athena.registry import build_registry


@pytest.fixture(scope="module")
def registry():
    return build_registry(probe_limit=100)


def test_render_text_per_renderer(registry) -> None:
    assert render_text(to_system(65, registry.lookup("babylonian"))) == "1-5"
    assert render_text(to_system(45, registry.lookup("mayan"))) == "[2,5]"
    assert render_text(to_system(10, registry.lookup("binary"))) == "1-0-1-0"
    assert render_text(to_system(14, registry.lookup("roman"))) == "XIV"
    assert render_text(to_system(0, registry.lookup("mayan"))) == "Θ"
    assert render_text(to_system(0, registry.lookup("roman"))) == "N/A"


def test_place_values(registry) -> None:
    mayan = registry.lookup("mayan")

    assert place_values(to_system(401, mayan), mayan.base) == [400, 20, 1]
    assert place_values(to_system(7, registry.lookup("roman")), 10) == []


def test_seeded_generators_agree(registry) -> None:
    first = PuzzleGenerator(registry, rng=random.Random(7))
    second = PuzzleGenerator(registry, rng=random.Random(7))

    assert [first.generate("roman") for _ in range(5)] == [second.generate("roman") for _ in range(5)]


@pytest.mark.parametrize("system_id", ["roman", "mayan", "babylonian", "binary"])
def test_answer_display_matches_conversion_of_target(registry, system_id: str) -> None:
    generator = PuzzleGenerator(registry, rng=random.Random(1234))
    system = registry.lookup(system_id)

    for _ in range(40):
        puzzle = generator.generate(system_id)
        assert puzzle.answer_display == render_text(to_system(puzzle.target, system))
        assert puzzle.system_id == system_id


def test_conversion_puzzle(registry) -> None:
    generator = PuzzleGenerator(registry, rng=random.Random(3))

    for _ in range(30):
        puzzle = generator.generate("binary", kind=PuzzleKind.CONVERSION)
        assert 1 <= puzzle.target <= 50
        assert puzzle.question_text == f"Convert the number {puzzle.target} into Digital Binary."
        assert puzzle.hint == "Remember, this is a Base-2 system."


def test_sequence_puzzle_targets_next_term(registry) -> None:
    generator = PuzzleGenerator(registry, rng=random.Random(11))
    roman = registry.lookup("roman")

    for _ in range(30):
        puzzle = generator.generate("roman", kind=PuzzleKind.SEQUENCE)
        start, second, third = puzzle.terms
        step = second - start
        assert 1 <= start <= 20
        assert 1 <= step <= 3
        assert third - second == step
        assert puzzle.target == start + 3 * step
        rendered = ", ".join(to_system(term, roman).symbols for term in puzzle.terms)
        assert puzzle.question_text == f"Find the next number: {rendered}, ..."
        assert puzzle.hint.endswith(f"increasing by {step}.")


def test_generator_honours_custom_ranges(registry) -> None:
    generator = PuzzleGenerator(
        registry,
        rng=random.Random(5),
        conversion_max=1,
        sequence_start_max=1,
        sequence_step_max=1,
    )

    assert generator.generate("mayan", kind=PuzzleKind.CONVERSION).target == 1
    assert generator.generate("mayan", kind=PuzzleKind.SEQUENCE).target == 4


def test_both_kinds_are_generated(registry) -> None:
    generator = PuzzleGenerator(registry, rng=random.Random(99))

    kinds = {generator.generate("babylonian").kind for _ in range(50)}

    assert kinds == {PuzzleKind.CONVERSION, PuzzleKind.SEQUENCE}


def test_unknown_system_propagates(registry) -> None:
    with pytest.raises(SystemNotFoundError):
        PuzzleGenerator(registry).generate("klingon")


def test_parse_answer() -> None:
    assert parse_answer(" 42 ") == 42
    assert parse_answer("XLII") is None
    assert parse_answer("") is None
    assert parse_answer("4.2") is None
    assert parse_answer("-3") == -3
    assert parse_answer("1_0") is None
    assert parse_answer("+7") is None
    assert parse_answer("\u0661\u0660") is None


def test_check_answer_uses_integer_target(registry) -> None:
    puzzle = PuzzleGenerator(registry, rng=random.Random(2)).generate("roman", kind=PuzzleKind.CONVERSION)

    right = check_answer(puzzle, str(puzzle.target), system_name="Roman Numerals")
    wrong = check_answer(puzzle, puzzle.answer_display)

    assert right.correct
    assert right.message == "Correct! You successfully analyzed the Roman Numerals pattern."
    assert right.answer_display == puzzle.answer_display
    assert not wrong.correct
    assert wrong.message == "Try Again."
    assert wrong.hint == puzzle.hint


def test_explorer_facade(registry) -> None:
    explorer = NumeralExplorer.with_seed(registry, 21)

    assert [summary.id for summary in explorer.list_systems()] == ["roman", "mayan", "babylonian", "binary"]
    assert explorer.convert(944, "roman").symbols == "CMXLIV"
    puzzle = explorer.generate_puzzle("mayan")
    assert explorer.check_answer(puzzle, str(puzzle.target)).correct
    assert not explorer.check_answer(puzzle, "not a number").correct
    with pytest.raises(SystemNotFoundError):
        explorer.convert(5, "klingon")


def test_underscored_digits_are_graded_wrong(registry) -> None:
    puzzle = PuzzleGenerator(registry, rng=random.Random(4), conversion_max=1).generate(
        "roman", kind=PuzzleKind.CONVERSION
    )

    assert puzzle.target == 1
    assert not check_answer(puzzle, "0_1").correct
    assert check_answer(puzzle, " 1 ").correct
