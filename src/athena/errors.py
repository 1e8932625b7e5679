"""Exception types raised by the numeral engine."""

from __future__ import annotations


class AthenaError(Exception):
    """Base class for every engine failure surfaced to callers."""


class SystemNotFoundError(AthenaError, KeyError):
    """Raised when a system id is not present in the registry."""

    def __init__(self, system_id: str) -> None:
        super().__init__(f"Unknown numeral system: {system_id}")
        self.system_id = system_id

    def __str__(self) -> str:
        return str(self.args[0])


class SchemaDefectError(AthenaError, ValueError):
    """An additive symbol table could not reduce a value to zero."""

    def __init__(self, system_id: str, value: int, remainder: int) -> None:
        super().__init__(
            f"Symbol table of '{system_id}' cannot represent {value}: remainder {remainder} left after reduction"
        )
        self.system_id = system_id
        self.value = value
        self.remainder = remainder


class InvalidInputError(AthenaError, ValueError):
    """Input outside the non-negative integer domain."""


class CatalogError(AthenaError, ValueError):
    """A numeral system catalog is malformed or cannot be read."""
