"""Oracle dialect compiler."""

from __future__ import annotations

from querybob.compile.base import SQLCompiler


class OracleCompiler(SQLCompiler):
    """Compiles statements to Oracle-flavoured parameterized SQL.

    Parameter style: ``:n`` – numeric bind variables accepted by
    ``oracledb`` positional execution.
    """

    @property
    def dialect_name(self) -> str:
        return "oracle"

    @property
    def supports_returning(self) -> bool:
        return True

    def placeholder(self, position: int) -> str:
        return f":{position}"
