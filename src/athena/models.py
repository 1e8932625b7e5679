"""Domain types for numeral systems, conversions and puzzles."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from enum import Enum


class NumeralLogic(str, Enum):
    """How a numeral system composes a value from its symbols."""

    ADDITIVE = "additive"
    POSITIONAL = "positional"


class GlyphLayout(str, Enum):
    """Display direction for positional digit groups."""

    HORIZONTAL = "horizontal"
    VERTICAL = "vertical"


class ZeroRepresentation(str, Enum):
    """How a conversion of the value 0 was answered."""

    SYMBOL = "symbol"
    UNREPRESENTABLE = "unrepresentable"


class PuzzleKind(str, Enum):
    CONVERSION = "conversion"
    SEQUENCE = "sequence"


@dataclass(frozen=True, slots=True)
class NumeralSystem:
    """Declarative schema of one numeral system.

    ``symbol_table`` holds ``(value, symbol)`` pairs and is only meaningful for
    additive systems. ``digit_renderer`` and ``layout`` are presentation hints
    and never influence conversion arithmetic.
    """

    id: str
    name: str
    base: int
    logic: NumeralLogic
    region: str = ""
    description: str = ""
    symbol_table: tuple[tuple[int, str], ...] = ()
    zero_symbol: str | None = None
    digit_renderer: str | None = None
    layout: GlyphLayout = GlyphLayout.HORIZONTAL

    @classmethod
    def additive(
        cls, id: str, name: str, symbols: Mapping[int, str], base: int = 10, **metadata
    ) -> NumeralSystem:
        """Build an additive system from a value -> symbol mapping."""
        table = tuple(sorted(((int(value), symbol) for value, symbol in symbols.items()), reverse=True))
        return cls(id=id, name=name, base=base, logic=NumeralLogic.ADDITIVE, symbol_table=table, **metadata)

    @classmethod
    def positional(cls, id: str, name: str, base: int, **metadata) -> NumeralSystem:
        return cls(id=id, name=name, base=base, logic=NumeralLogic.POSITIONAL, **metadata)

    @property
    def has_zero(self) -> bool:
        return self.zero_symbol is not None

    def symbols_descending(self) -> list[tuple[int, str]]:
        """Symbol table ordered by strictly descending value."""
        return sorted(self.symbol_table, key=lambda pair: pair[0], reverse=True)


@dataclass(frozen=True, slots=True)
class SystemSummary:
    """Read-only projection of a system used to populate selectors."""

    id: str
    name: str
    base: int


@dataclass(frozen=True, slots=True)
class ConversionResult:
    """Outcome of converting one integer into one numeral system."""

    system_id: str
    value: int
    kind: NumeralLogic
    symbols: str = ""
    digits: tuple[int, ...] = ()
    trace: tuple[str, ...] = ()
    zero: ZeroRepresentation | None = None
    digit_renderer: str | None = None

    @property
    def is_representable(self) -> bool:
        return self.zero is not ZeroRepresentation.UNREPRESENTABLE


@dataclass(frozen=True, slots=True)
class Puzzle:
    """A generated problem whose answer is always the integer ``target``."""

    kind: PuzzleKind
    system_id: str
    question_text: str
    target: int
    answer_display: str
    hint: str
    terms: tuple[int, ...] = field(default=())


@dataclass(frozen=True, slots=True)
class AnswerFeedback:
    correct: bool
    message: str
    hint: str | None = None
    answer_display: str | None = None
