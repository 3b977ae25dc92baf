"""Statement assembly: builder state → SQL text.

``StatementGenerator`` is the top-level orchestrator.  It wires together
the clause-level sub-builders for one run and concatenates their output in
a fixed order per statement kind.  All dialect-specific behaviour is
delegated to the injected ``SQLCompiler``.

Per-kind clause order
---------------------
SELECT   projection, FROM + JOIN, WHERE, ORDER BY, LIMIT
INSERT   INSERT, RETURNING
UPDATE   UPDATE, WHERE, RETURNING
DELETE   DELETE, FROM + JOIN, WHERE, RETURNING

Generation is fail-fast: the first clause that raises aborts the run and
no SQL text is returned.
"""

from __future__ import annotations

import logging

from querybob.compile.base import CompiledStatement, SQLCompiler
from querybob.compile.clause_builders import (
    DeleteClauseBuilder,
    FromClauseBuilder,
    InsertClauseBuilder,
    LimitClauseBuilder,
    OrderByClauseBuilder,
    ReturningClauseBuilder,
    SelectClauseBuilder,
    UpdateClauseBuilder,
    WhereClauseBuilder,
)
from querybob.compile.context import CompilationContext, PlaceholderAllocator
from querybob.config import GenerationOptions
from querybob.schema.statement import StatementKind, StatementState

logger = logging.getLogger("querybob")


class StatementGenerator:
    """Generates parameterized SQL from a :class:`StatementState`.

    Args:
        compiler: Dialect-specific compiler instance.
        options: Generation options; defaults to ``GenerationOptions()``.
    """

    def __init__(
        self,
        compiler: SQLCompiler,
        options: GenerationOptions | None = None,
    ) -> None:
        self._ctx = CompilationContext(
            compiler=compiler, options=options or GenerationOptions()
        )

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    def build(
        self,
        state: StatementState,
        allocator: PlaceholderAllocator | None = None,
    ) -> CompiledStatement:
        """Generate SQL for ``state``.

        Args:
            state: Snapshot of the builder being compiled.
            allocator: Placeholder allocator to advance.  A fresh one
                starting at 0 is created when omitted.

        Returns:
            :class:`~querybob.compile.base.CompiledStatement` with the SQL
            text and the ordered value sequences.

        Raises:
            GenerationError: (or subclass) from the first failing clause.
        """
        if allocator is None:
            allocator = PlaceholderAllocator(self._ctx.compiler)
        sub_builders = self._make_sub_builders(allocator)
        assemble = {
            StatementKind.SELECT: self._build_select,
            StatementKind.INSERT: self._build_insert,
            StatementKind.UPDATE: self._build_update,
            StatementKind.DELETE: self._build_delete,
        }[state.kind]
        sql = assemble(state, sub_builders)

        logger.debug(
            "generated %s statement for %s (%d placeholders)",
            state.kind.value,
            self._ctx.compiler.dialect_name,
            allocator.count,
        )
        return CompiledStatement(
            sql=sql,
            kind=state.kind,
            dialect=self._ctx.compiler.dialect_name,
            values=list(state.values),
            criteria=[value for c in state.criteria for value in c.values],
            returning_values=list(state.return_values),
            placeholder_count=allocator.count,
        )

    # ------------------------------------------------------------------
    # Per-kind assembly
    # ------------------------------------------------------------------

    @staticmethod
    def _build_select(state: StatementState, sub_builders: dict) -> str:
        parts = [
            sub_builders["select"].build(state),
            sub_builders["from"].build(state),
            sub_builders["where"].build(state),
            sub_builders["order_by"].build(state),
            sub_builders["limit"].build(state),
        ]
        return "".join(parts)

    @staticmethod
    def _build_insert(state: StatementState, sub_builders: dict) -> str:
        parts = [
            sub_builders["insert"].build(state),
            sub_builders["returning"].build(state),
        ]
        return "".join(parts)

    @staticmethod
    def _build_update(state: StatementState, sub_builders: dict) -> str:
        parts = [
            sub_builders["update"].build(state),
            sub_builders["where"].build(state),
            sub_builders["returning"].build(state),
        ]
        return "".join(parts)

    @staticmethod
    def _build_delete(state: StatementState, sub_builders: dict) -> str:
        parts = [
            sub_builders["delete"].build(state),
            sub_builders["from"].build(state),
            sub_builders["where"].build(state),
            sub_builders["returning"].build(state),
        ]
        return "".join(parts)

    # ------------------------------------------------------------------
    # Sub-builder wiring
    # ------------------------------------------------------------------

    def _make_sub_builders(self, allocator: PlaceholderAllocator) -> dict:
        """Construct the sub-builders for one run, sharing ``allocator``."""
        return {
            "select": SelectClauseBuilder(),
            "from": FromClauseBuilder(),
            "where": WhereClauseBuilder(self._ctx, allocator),
            "order_by": OrderByClauseBuilder(),
            "limit": LimitClauseBuilder(),
            "insert": InsertClauseBuilder(allocator),
            "update": UpdateClauseBuilder(allocator),
            "delete": DeleteClauseBuilder(),
            "returning": ReturningClauseBuilder(self._ctx),
        }
