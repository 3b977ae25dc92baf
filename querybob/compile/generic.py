"""Generic dialect compiler (used when no dialect is set)."""
from __future__ import annotations

from querybob.compile.base import SQLCompiler


class GenericCompiler(SQLCompiler):
    """Renders ``?`` placeholders and rejects RETURNING.

    Parameter style: ``qmark`` – accepted by most DB-API drivers.
    """

    @property
    def dialect_name(self) -> str:
        return "generic"

    def placeholder(self, position: int) -> str:
        return "?"
