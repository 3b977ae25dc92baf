"""Clause-level SQL builders.

Each class handles exactly one SQL clause and returns its text, including
the leading space that separates it from the previous clause.  Builders
that emit placeholders share the run's
:class:`~querybob.compile.context.PlaceholderAllocator`, so numbering
follows clause emission order.  Every builder validates before appending
anything.

Classes
-------
SelectClauseBuilder     — ``SELECT <cols>``
FromClauseBuilder       — `` FROM <table> [<type> JOIN … ON …]``
WhereClauseBuilder      — `` WHERE <criterion> [AND|OR <criterion>]``
OrderByClauseBuilder    — `` ORDER BY <col> ASC|DESC,…``
LimitClauseBuilder      — `` LIMIT <limit>[,<offset>]``
InsertClauseBuilder     — ``INSERT INTO <table> (<cols>) VALUES (<phs>)``
UpdateClauseBuilder     — ``UPDATE <table> SET <col>=<ph>,…``
DeleteClauseBuilder     — ``DELETE``
ReturningClauseBuilder  — `` RETURNING <cols>``
"""
from __future__ import annotations

from querybob.compile.context import CompilationContext, PlaceholderAllocator
from querybob.schema.operators import MembershipOp, PatternOp, RangeOp
from querybob.schema.statement import FilterCriterion, StatementState
from querybob.validate.validator import (
    check_arity,
    check_first_criterion,
    check_operand_count,
    check_operator,
    check_pagination,
    check_returning_supported,
)


class SelectClauseBuilder:
    """Builds the ``SELECT <cols>`` projection.

    Columns are paired with result targets, so their counts must match.
    """

    def build(self, state: StatementState) -> str:
        check_arity(state.columns, state.values)
        return f"SELECT {','.join(state.columns)}"


class FromClauseBuilder:
    """Builds `` FROM <table>`` followed by every JOIN in order."""

    def build(self, state: StatementState) -> str:
        parts = [f" FROM {state.table}"]
        for join in state.joins:
            parts.append(
                f" {join.join_type} JOIN {join.table}"
                f" ON {join.local_column}={join.foreign_column}"
            )
        return "".join(parts)


class WhereClauseBuilder:
    """Builds the WHERE clause, one placeholder per bound value."""

    def __init__(self, ctx: CompilationContext, allocator: PlaceholderAllocator) -> None:
        self._ctx = ctx
        self._allocator = allocator

    def build(self, state: StatementState) -> str:
        if not state.criteria:
            return ""
        check_first_criterion(state.criteria)

        parts: list[str] = []
        for index, criterion in enumerate(state.criteria):
            check_operator(criterion.operator)
            if self._ctx.options.strict_operand_counts:
                check_operand_count(criterion)
            if index > 0:
                parts.append(f" {criterion.combinator.value} ")
            parts.append(self._build_criterion(criterion))
        return f" WHERE {''.join(parts)}"

    def _build_criterion(self, criterion: FilterCriterion) -> str:
        column, op = criterion.column, criterion.operator
        ph = self._allocator.next

        if op == PatternOp.LIKE:
            return f"{column} LIKE {ph()}"

        if op == RangeOp.BETWEEN:
            low = ph()
            high = ph()
            return f"{column} BETWEEN {low} AND {high}"

        if op == MembershipOp.IN:
            placeholders = ",".join(ph() for _ in criterion.values)
            return f"{column} IN ({placeholders})"

        return f"{column}{op}{ph()}"


class OrderByClauseBuilder:
    """Builds `` ORDER BY …`` or nothing when no order is set."""

    def build(self, state: StatementState) -> str:
        if not state.order_by:
            return ""
        items = [f"{order.column} {order.direction.value}" for order in state.order_by]
        return f" ORDER BY {','.join(items)}"


class LimitClauseBuilder:
    """Builds `` LIMIT <limit>[,<offset>]``.

    A zero limit disables the clause even when an offset is set.
    """

    def build(self, state: StatementState) -> str:
        check_pagination(state.limit, state.offset)
        if state.limit == 0:
            return ""
        sql = f" LIMIT {state.limit}"
        if state.offset > 0:
            sql += f",{state.offset}"
        return sql


class InsertClauseBuilder:
    """Builds ``INSERT INTO <table> (<cols>) VALUES (<phs>)``."""

    def __init__(self, allocator: PlaceholderAllocator) -> None:
        self._allocator = allocator

    def build(self, state: StatementState) -> str:
        check_arity(state.columns, state.values)
        columns = ",".join(state.columns)
        placeholders = ",".join(self._allocator.next() for _ in state.values)
        return f"INSERT INTO {state.table} ({columns}) VALUES ({placeholders})"


class UpdateClauseBuilder:
    """Builds ``UPDATE <table> SET <col>=<ph>,…``."""

    def __init__(self, allocator: PlaceholderAllocator) -> None:
        self._allocator = allocator

    def build(self, state: StatementState) -> str:
        check_arity(state.columns, state.values)
        assignments = ",".join(
            f"{column}={self._allocator.next()}" for column in state.columns
        )
        return f"UPDATE {state.table} SET {assignments}"


class DeleteClauseBuilder:
    """Builds the bare ``DELETE`` keyword; FROM is appended separately."""

    def build(self, state: StatementState) -> str:
        return "DELETE"


class ReturningClauseBuilder:
    """Builds `` RETURNING <cols>`` for dialects that support it."""

    def __init__(self, ctx: CompilationContext) -> None:
        self._ctx = ctx

    def build(self, state: StatementState) -> str:
        if not state.returning_columns:
            return ""
        check_returning_supported(self._ctx.compiler)
        check_arity(state.returning_columns, state.return_values)
        return f" RETURNING {','.join(state.returning_columns)}"
