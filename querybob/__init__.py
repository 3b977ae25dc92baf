"""querybob – a fluent SQL statement assembler.

Describe a statement with chained calls, get back SQL text with positional
placeholders and the values to bind, in order.  querybob never executes
anything.

Public API
----------
``new_select`` / ``new_insert`` / ``new_update`` / ``new_delete``
    Start a :class:`StatementBuilder` for one statement kind.

``StatementBuilder.build``
    Generate a :class:`CompiledStatement` (raises on invalid state).

``StatementBuilder.try_generate``
    Generate ``(sql, error)`` without raising.

Example::

    qb = (
        querybob.new_insert("accounts")
        .for_postgres()
        .set("email", "name")
        .to("a@example.com", "Ann")
        .returning("id")
        .returning_into(holder)
    )
    compiled = qb.build()
    # INSERT INTO accounts (email,name) VALUES ($1,$2) RETURNING accounts.id

Extensibility
-------------
New dialect compilers can be registered via::

    from querybob.compile.registry import CompilerFactory

    @CompilerFactory.register("mariadb")
    class MariaDBCompiler(MySQLCompiler):
        ...
"""

from __future__ import annotations

from querybob.builder import (
    StatementBuilder,
    new_delete,
    new_insert,
    new_select,
    new_update,
)
from querybob.compile.base import CompiledStatement, SQLCompiler
from querybob.compile.generic import GenericCompiler
from querybob.compile.mysql import MySQLCompiler
from querybob.compile.oracle import OracleCompiler
from querybob.compile.postgres import PostgresCompiler
from querybob.compile.registry import CompilerFactory
from querybob.compile.sqlite import SQLiteCompiler
from querybob.config import GenerationOptions
from querybob.errors import (
    ColumnValueArityError,
    FirstCriterionIsOrError,
    GenerationError,
    InvalidOperatorError,
    InvalidPaginationError,
    OperandCountError,
    QueryBobError,
    UnknownDialectError,
    UnsupportedReturningError,
)
from querybob.schema.operators import VALID_OPERATORS
from querybob.schema.statement import (
    Combinator,
    Dialect,
    FilterCriterion,
    JoinSpec,
    OrderSpec,
    SortDirection,
    StatementKind,
    StatementState,
)

# ---------------------------------------------------------------------------
# Register built-in compilers with CompilerFactory
# ---------------------------------------------------------------------------

CompilerFactory.register_class(Dialect.GENERIC, GenericCompiler)
CompilerFactory.register_class(Dialect.MYSQL, MySQLCompiler)
CompilerFactory.register_class(Dialect.SQLITE, SQLiteCompiler)
CompilerFactory.register_class(Dialect.POSTGRES, PostgresCompiler)
CompilerFactory.register_class(Dialect.ORACLE, OracleCompiler)

__all__ = [
    # Constructors
    "new_select",
    "new_insert",
    "new_update",
    "new_delete",
    "StatementBuilder",
    # Configuration
    "GenerationOptions",
    # Schema types
    "StatementKind",
    "Dialect",
    "SortDirection",
    "Combinator",
    "JoinSpec",
    "FilterCriterion",
    "OrderSpec",
    "StatementState",
    "VALID_OPERATORS",
    # Compilation
    "CompiledStatement",
    "CompilerFactory",
    "SQLCompiler",
    "GenericCompiler",
    "MySQLCompiler",
    "SQLiteCompiler",
    "PostgresCompiler",
    "OracleCompiler",
    # Errors
    "QueryBobError",
    "UnknownDialectError",
    "GenerationError",
    "ColumnValueArityError",
    "InvalidOperatorError",
    "FirstCriterionIsOrError",
    "UnsupportedReturningError",
    "InvalidPaginationError",
    "OperandCountError",
]
