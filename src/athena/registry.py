"""Read-only catalog of numeral systems, validated once at construction."""

from __future__ import annotations

import logging
from collections.abc import Iterable
from pathlib import Path

from athena.catalog import BUILTIN_SYSTEMS, load_catalog_file
from athena.conversion import convert_additive
from athena.errors import CatalogError, SchemaDefectError, SystemNotFoundError
from athena.models import NumeralLogic, NumeralSystem, SystemSummary

DEFAULT_PROBE_LIMIT = 3999


def validate_system(system: NumeralSystem, *, probe_limit: int = DEFAULT_PROBE_LIMIT) -> None:
    """Reject schemas the conversion routines cannot serve.

    Additive tables are probed by reducing every value in ``1..probe_limit``;
    the first value that leaves a remainder raises ``SchemaDefectError``.
    """
    if system.logic is NumeralLogic.POSITIONAL:
        if system.base < 2:
            raise CatalogError(f"Positional system '{system.id}' needs base >= 2, got {system.base}")
        return

    if not system.symbol_table:
        raise CatalogError(f"Additive system '{system.id}' has an empty symbol table")
    values = [value for value, _ in system.symbol_table]
    if len(values) != len(set(values)):
        raise CatalogError(f"Additive system '{system.id}' has duplicate symbol values")
    if min(values) <= 0:
        raise CatalogError(f"Additive system '{system.id}' has non-positive symbol values")

    for number in range(1, probe_limit + 1):
        convert_additive(number, system)


class SystemRegistry:
    """Immutable lookup of numeral systems keyed by id, in insertion order."""

    def __init__(
        self,
        systems: Iterable[NumeralSystem],
        *,
        probe_limit: int = DEFAULT_PROBE_LIMIT,
        logger: logging.Logger | None = None,
    ) -> None:
        self._logger = logger or logging.getLogger("athena.registry")
        entries: dict[str, NumeralSystem] = {}
        for system in systems:
            if system.id in entries:
                raise CatalogError(f"Duplicate numeral system id: {system.id}")
            try:
                validate_system(system, probe_limit=probe_limit)
            except SchemaDefectError:
                self._logger.error("system_rejected", extra={"system_id": system.id, "probe_limit": probe_limit})
                raise
            entries[system.id] = system
        self._systems = entries
        self._logger.info("registry_loaded", extra={"system_ids": list(entries), "probe_limit": probe_limit})

    def lookup(self, system_id: str) -> NumeralSystem:
        """Return the system for ``system_id`` or raise ``SystemNotFoundError``."""
        try:
            return self._systems[system_id]
        except KeyError:
            raise SystemNotFoundError(system_id) from None

    def list_systems(self) -> list[SystemSummary]:
        return [SystemSummary(id=system.id, name=system.name, base=system.base) for system in self._systems.values()]

    def __contains__(self, system_id: object) -> bool:
        return system_id in self._systems

    def __len__(self) -> int:
        return len(self._systems)


def build_registry(
    catalog_path: str | Path | None = None,
    *,
    probe_limit: int = DEFAULT_PROBE_LIMIT,
    logger: logging.Logger | None = None,
) -> SystemRegistry:
    """Built-in systems followed by any systems from a JSON catalog file."""
    systems = list(BUILTIN_SYSTEMS)
    if catalog_path:
        systems.extend(load_catalog_file(catalog_path))
    return SystemRegistry(systems, probe_limit=probe_limit, logger=logger)
