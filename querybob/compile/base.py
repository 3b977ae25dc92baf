"""Compiler abstractions: CompiledStatement and the SQLCompiler ABC.

The Strategy pattern is used:
- ``SQLCompiler`` declares the dialect-specific steps (placeholder token,
  RETURNING support).
- ``GenericCompiler``, ``MySQLCompiler``, ``SQLiteCompiler``,
  ``PostgresCompiler`` and ``OracleCompiler`` implement them.
"""
from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Any

from querybob.schema.statement import StatementKind


@dataclass
class CompiledStatement:
    """The output of a successful generation.

    Attributes:
        sql: The generated SQL text with positional placeholders.
        kind: The statement kind that was generated.
        dialect: The dialect name the placeholders were rendered for.
        values: Statement values in append order.  For INSERT / UPDATE
            these are the mutation values; for SELECT they are the result
            targets the caller reads rows into.
        criteria: Filter values flattened in criterion order.
        returning_values: RETURNING result targets.
        placeholder_count: Builder counter value after generation.
    """

    sql: str
    kind: StatementKind
    dialect: str
    values: list[Any] = field(default_factory=list)
    criteria: list[Any] = field(default_factory=list)
    returning_values: list[Any] = field(default_factory=list)
    placeholder_count: int = 0

    @property
    def params(self) -> list[Any]:
        """Return bound parameters in placeholder order.

        Mutation values come first (INSERT / UPDATE), then filter values.
        SELECT targets are not parameters and are never included.

        Returns:
            A new list ready to pass to ``cursor.execute(sql, params)``.
        """
        if self.kind in (StatementKind.INSERT, StatementKind.UPDATE):
            return [*self.values, *self.criteria]
        return list(self.criteria)


class SQLCompiler(ABC):
    """Abstract base for dialect-specific compilers.

    Subclasses implement the dialect-specific methods; the clause builders
    use this interface and never branch on the dialect themselves.
    """

    @abstractmethod
    def placeholder(self, position: int) -> str:
        """Return the SQL placeholder token for a positional parameter.

        Args:
            position: 1-based position of the parameter in the statement.

        Returns:
            Dialect-specific placeholder string.
        """

    @property
    @abstractmethod
    def dialect_name(self) -> str:
        """Return the canonical dialect name (e.g. ``'postgres'``)."""

    @property
    def supports_returning(self) -> bool:
        """Whether INSERT / UPDATE / DELETE may carry a RETURNING clause."""
        return False
