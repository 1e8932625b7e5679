"""Built-in numeral system definitions and the JSON catalog loader."""

from __future__ import annotations

import json
import re
from pathlib import Path

from pydantic import BaseModel, Field, ValidationError, field_validator, model_validator

from athena.errors import CatalogError
from athena.models import GlyphLayout, NumeralLogic, NumeralSystem

_SYMBOL_KEY = re.compile(r"\d+", re.ASCII)

ROMAN_SYMBOLS: dict[int, str] = {
    1000: "M",
    900: "CM",
    500: "D",
    400: "CD",
    100: "C",
    90: "XC",
    50: "L",
    40: "XL",
    10: "X",
    9: "IX",
    5: "V",
    4: "IV",
    1: "I",
}

BUILTIN_SYSTEMS: tuple[NumeralSystem, ...] = (
    NumeralSystem.additive(
        "roman",
        "Roman Numerals",
        ROMAN_SYMBOLS,
        region="Ancient Rome",
        description="A system based on additive and subtractive principles using letters from the Latin alphabet.",
    ),
    NumeralSystem.positional(
        "mayan",
        "Mayan Numerals",
        20,
        region="Mesoamerica",
        description=(
            "A vigesimal (base-20) positional notation used by the Maya civilization, employing a shell for zero."
        ),
        zero_symbol="Θ",
        digit_renderer="mayan",
        layout=GlyphLayout.VERTICAL,
    ),
    NumeralSystem.positional(
        "babylonian",
        "Babylonian Cuneiform",
        60,
        region="Mesopotamia",
        description=(
            "A sexagesimal (base-60) system. The first known positional numeral system, "
            "using a stylus to press wedges into clay."
        ),
        zero_symbol="Empty Space",
        digit_renderer="cuneiform",
    ),
    NumeralSystem.positional(
        "binary",
        "Digital Binary",
        2,
        region="Modern Computing",
        description="The base-2 system that underpins all modern digital computing.",
        zero_symbol="0",
    ),
)


class SystemDefinition(BaseModel):
    """One numeral system entry of a JSON catalog file."""

    model_config = {"frozen": True, "extra": "forbid"}

    id: str = Field(..., min_length=1)
    name: str = Field(..., min_length=1)
    base: int = Field(10, ge=1)
    logic: NumeralLogic
    region: str = ""
    description: str = ""
    symbols: dict[str, str] = Field(default_factory=dict, description="Additive value -> symbol table")
    zero_symbol: str | None = None
    digit_renderer: str | None = None
    layout: GlyphLayout = GlyphLayout.HORIZONTAL

    @field_validator("symbols")
    @classmethod
    def _distinct_positive_values(cls, symbols: dict[str, str]) -> dict[str, str]:
        seen: dict[int, str] = {}
        for key, symbol in symbols.items():
            if not _SYMBOL_KEY.fullmatch(key.strip()):
                raise ValueError(f"symbol value {key!r} is not a decimal integer")
            value = int(key)
            if value <= 0:
                raise ValueError(f"symbol values must be positive, got {key!r}")
            if value in seen:
                raise ValueError(f"symbol keys {seen[value]!r} and {key!r} both give value {value}")
            if not symbol:
                raise ValueError(f"symbol for value {key!r} is empty")
            seen[value] = key
        return symbols

    def symbol_values(self) -> dict[int, str]:
        return {int(key): symbol for key, symbol in self.symbols.items()}

    @model_validator(mode="after")
    def _logic_requirements(self) -> SystemDefinition:
        if self.logic is NumeralLogic.ADDITIVE and not self.symbols:
            raise ValueError("additive systems need a non-empty symbols table")
        if self.logic is NumeralLogic.POSITIONAL and self.base < 2:
            raise ValueError("positional systems need base >= 2")
        return self

    def to_system(self) -> NumeralSystem:
        metadata = {
            "region": self.region,
            "description": self.description,
            "zero_symbol": self.zero_symbol,
            "digit_renderer": self.digit_renderer,
            "layout": self.layout,
        }
        if self.logic is NumeralLogic.ADDITIVE:
            return NumeralSystem.additive(self.id, self.name, self.symbol_values(), base=self.base, **metadata)
        return NumeralSystem.positional(self.id, self.name, self.base, **metadata)


class CatalogDocument(BaseModel):
    systems: list[SystemDefinition] = Field(default_factory=list)


def parse_catalog(payload: dict) -> list[NumeralSystem]:
    """Validate a decoded catalog document and build its systems."""
    try:
        document = CatalogDocument.model_validate(payload)
    except ValidationError as exc:
        raise CatalogError(f"Invalid numeral system catalog: {exc}") from exc
    return [definition.to_system() for definition in document.systems]


def load_catalog_file(path: str | Path) -> list[NumeralSystem]:
    catalog_path = Path(path).expanduser()
    try:
        payload = json.loads(catalog_path.read_text(encoding="utf-8"))
    except FileNotFoundError as exc:
        raise CatalogError(f"Catalog not found: {catalog_path}") from exc
    except (json.JSONDecodeError, UnicodeDecodeError) as exc:
        raise CatalogError(f"Catalog {catalog_path} is not valid JSON: {exc}") from exc
    except OSError as exc:
        raise CatalogError(f"Catalog {catalog_path} cannot be read: {exc}") from exc
    if not isinstance(payload, dict):
        raise CatalogError(f"Catalog {catalog_path} must be a JSON object with a 'systems' list")
    return parse_catalog(payload)
