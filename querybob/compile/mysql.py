"""MySQL dialect compiler."""

from __future__ import annotations

from querybob.compile.generic import GenericCompiler


class MySQLCompiler(GenericCompiler):
    """Compiles statements to MySQL-flavoured parameterized SQL.

    Parameter style: ``?`` – the position is not embedded in the token.

    Note: MySQL has no RETURNING clause; requesting one raises
    :class:`~querybob.errors.UnsupportedReturningError`.
    """

    @property
    def dialect_name(self) -> str:
        return "mysql"
