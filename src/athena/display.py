"""Single-line text rendering of conversion results."""

from __future__ import annotations

from athena.models import ConversionResult, NumeralLogic, ZeroRepresentation

_DEFAULT_SEPARATOR = "-"


def _bracketed(digits: tuple[int, ...]) -> str:
    return f"[{','.join(str(digit) for digit in digits)}]"


def _joined(digits: tuple[int, ...]) -> str:
    return _DEFAULT_SEPARATOR.join(str(digit) for digit in digits)


# Renderer tags whose digit groups read better in a bracketed stack.
_DIGIT_FORMATTERS = {
    "mayan": _bracketed,
}


def render_text(result: ConversionResult) -> str:
    """Text form used in puzzle questions and answer confirmations."""
    if result.zero is not None or result.kind is NumeralLogic.ADDITIVE:
        return result.symbols
    formatter = _DIGIT_FORMATTERS.get(result.digit_renderer or "", _joined)
    return formatter(result.digits)


def place_values(result: ConversionResult, base: int) -> list[int]:
    """Place value of each digit of a positional result, most significant first."""
    if result.kind is not NumeralLogic.POSITIONAL or result.zero is ZeroRepresentation.UNREPRESENTABLE:
        return []
    width = len(result.digits)
    return [base ** (width - 1 - index) for index in range(width)]
