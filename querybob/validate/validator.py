"""Inline generation checks.

Each function is total and side-effect free: it returns ``None`` or raises
the matching :class:`~querybob.errors.GenerationError` subclass.  Clause
builders call them before appending any text of the clause they guard, so
a failure never leaves partial SQL behind.
"""
from __future__ import annotations

from collections.abc import Sequence
from typing import Any

from querybob.compile.base import SQLCompiler
from querybob.errors import (
    ColumnValueArityError,
    FirstCriterionIsOrError,
    InvalidOperatorError,
    InvalidPaginationError,
    OperandCountError,
    UnsupportedReturningError,
)
from querybob.schema.operators import MembershipOp, RangeOp, is_valid_operator
from querybob.schema.statement import Combinator, FilterCriterion


def check_arity(columns: Sequence[str], values: Sequence[Any]) -> None:
    """Raise :class:`ColumnValueArityError` unless both sequences have equal length."""
    if len(columns) != len(values):
        raise ColumnValueArityError(len(columns), len(values))


def check_operator(operator: str) -> None:
    """Raise :class:`InvalidOperatorError` for an operator outside the whitelist."""
    if not is_valid_operator(operator):
        raise InvalidOperatorError(operator)


def check_first_criterion(criteria: Sequence[FilterCriterion]) -> None:
    """Raise :class:`FirstCriterionIsOrError` if the first criterion is an OR."""
    if criteria and criteria[0].combinator is Combinator.OR:
        raise FirstCriterionIsOrError()


def check_returning_supported(compiler: SQLCompiler) -> None:
    """Raise :class:`UnsupportedReturningError` if the dialect lacks RETURNING."""
    if not compiler.supports_returning:
        raise UnsupportedReturningError(compiler.dialect_name)


def check_pagination(limit: int, offset: int) -> None:
    """Raise :class:`InvalidPaginationError` for a negative limit or offset."""
    if limit < 0 or offset < 0:
        raise InvalidPaginationError(limit, offset)


def check_operand_count(criterion: FilterCriterion) -> None:
    """Raise :class:`OperandCountError` for a malformed BETWEEN or IN.

    Only called when ``GenerationOptions.strict_operand_counts`` is set.
    """
    actual = len(criterion.values)
    if criterion.operator == RangeOp.BETWEEN and actual != 2:
        raise OperandCountError(criterion.operator, "2", actual)
    if criterion.operator == MembershipOp.IN and actual < 1:
        raise OperandCountError(criterion.operator, ">= 1", actual)
