from __future__ import annotations

import pytest

typer_testing = pytest.importorskip("typer.testing")

from athena.main import app  # noqa: E402

runner = typer_testing.CliRunner()


def test_systems_lists_builtin_ids() -> None:
    result = runner.invoke(app, ["systems"], catch_exceptions=False)

    assert result.exit_code == 0
    for system_id in ("roman", "mayan", "babylonian", "binary"):
        assert system_id in result.stdout


def test_convert_prints_result_and_trace() -> None:
    result = runner.invoke(app, ["convert", "944", "--system", "roman"], catch_exceptions=False)

    assert result.exit_code == 0
    assert "CMXLIV" in result.stdout
    assert "Remaining: 0" in result.stdout


def test_convert_unknown_system_exits_with_error() -> None:
    result = runner.invoke(app, ["convert", "5", "--system", "klingon"], catch_exceptions=False)

    assert result.exit_code == 1
    assert "klingon" in result.stdout


def test_describe_shows_symbol_map() -> None:
    result = runner.invoke(app, ["describe", "roman"], catch_exceptions=False)

    assert result.exit_code == 0
    assert "CM" in result.stdout


def test_practice_accepts_correct_answer(monkeypatch) -> None:
    from athena import main

    class StubExplorer:
        def __init__(self) -> None:
            from athena.models import Puzzle, PuzzleKind

            self.puzzle = Puzzle(
                kind=PuzzleKind.CONVERSION,
                system_id="roman",
                question_text="Convert the number 7 into Roman Numerals.",
                target=7,
                answer_display="VII",
                hint="Remember, this is a Base-10 system.",
            )

        def generate_puzzle(self, system_id: str):
            return self.puzzle

        def check_answer(self, puzzle, raw: str):
            from athena.puzzles import check_answer

            return check_answer(puzzle, raw, system_name="Roman Numerals")

    monkeypatch.setattr(main, "_build_explorer", lambda seed=None: StubExplorer())

    result = runner.invoke(app, ["practice", "--system", "roman"], input="VII\n7\n", catch_exceptions=False)

    assert result.exit_code == 0
    assert "Try Again." in result.stdout
    assert "'solved': 1" in result.stdout


def test_convert_negative_number_reports_invalid_input() -> None:
    result = runner.invoke(app, ["convert", "-5", "--system", "roman"], catch_exceptions=False)

    assert result.exit_code == 1
    assert "non-negative" in result.stdout


def test_unknown_log_level_is_a_usage_error() -> None:
    result = runner.invoke(app, ["--log-level", "chatty", "systems"])

    assert result.exit_code == 2
    assert result.exception is None or isinstance(result.exception, SystemExit)


def test_log_level_option_is_case_insensitive() -> None:
    result = runner.invoke(app, ["--log-level", "debug", "systems"], catch_exceptions=False)

    assert result.exit_code == 0
