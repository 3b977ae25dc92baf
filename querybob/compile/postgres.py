"""PostgreSQL dialect compiler."""

from __future__ import annotations

from querybob.compile.base import SQLCompiler


class PostgresCompiler(SQLCompiler):
    """Compiles statements to PostgreSQL-flavoured parameterized SQL.

    Parameter style: ``$n`` – numbered positional parameters as used by
    ``asyncpg`` and server-side prepared statements.
    """

    @property
    def dialect_name(self) -> str:
        return "postgres"

    @property
    def supports_returning(self) -> bool:
        return True

    def placeholder(self, position: int) -> str:
        return f"${position}"
