"""Test fixtures: result-target slots and sample DDL."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Any

_FIXTURES_DIR = Path(__file__).parent


@dataclass(eq=False)
class Slot:
    """A destination a caller reads one result column into.

    Identity comparison only, so two slots with the same name are distinct
    targets.
    """

    name: str
    value: Any = None


def make_slots(*names: str) -> list[Slot]:
    """Return one :class:`Slot` per name, in order."""
    return [Slot(name) for name in names]


def load_ddl() -> str:
    """Return the sample SQLite DDL used by the integration tests."""
    return (_FIXTURES_DIR / "ddl_sqlite.sql").read_text()
