"""SQLite dialect compiler."""
from __future__ import annotations

from querybob.compile.generic import GenericCompiler


class SQLiteCompiler(GenericCompiler):
    """Compiles statements to SQLite-flavoured parameterized SQL.

    Parameter style: ``?`` – compatible with Python's built-in ``sqlite3``
    positional execution (``cursor.execute(sql, params)``).
    """

    @property
    def dialect_name(self) -> str:
        return "sqlite"
