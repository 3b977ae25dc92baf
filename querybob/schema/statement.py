"""Enums and pydantic records describing accumulated statement intent.

Joins, filter criteria and order specs are plain product types held in
ordered lists on the :class:`~querybob.builder.StatementBuilder`.  Values
attached to a criterion are opaque: they are never inspected, only counted
and handed back to the caller in order.
"""
from __future__ import annotations

from enum import Enum
from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class StatementKind(str, Enum):
    """The four DML statement kinds."""

    SELECT = "SELECT"
    INSERT = "INSERT"
    UPDATE = "UPDATE"
    DELETE = "DELETE"


class Dialect(str, Enum):
    """Target database engine family.

    ``GENERIC`` is the default and behaves like MySQL and SQLite: ``?``
    placeholders and no RETURNING support.
    """

    GENERIC = "generic"
    MYSQL = "mysql"
    SQLITE = "sqlite"
    POSTGRES = "postgres"
    ORACLE = "oracle"


class SortDirection(str, Enum):
    """ORDER BY direction."""

    ASC = "ASC"
    DESC = "DESC"


class Combinator(str, Enum):
    """Logical connective joining a criterion to the ones before it."""

    AND = "AND"
    OR = "OR"


class JoinSpec(BaseModel):
    """A single JOIN entry.

    Attributes:
        join_type: Join keyword placed before ``JOIN`` (e.g. ``LEFT``).
            Not validated.
        table: The joined table.
        local_column: Left-hand side of the ON condition.
        foreign_column: Right-hand side of the ON condition.
    """

    model_config = ConfigDict(extra="forbid", frozen=True)

    join_type: str
    table: str
    local_column: str
    foreign_column: str


class FilterCriterion(BaseModel):
    """One WHERE condition.

    Attributes:
        column: Column reference, rendered verbatim.
        operator: Upper-cased operator string.  Legality is checked at
            generation time, not here.
        values: Bound values, one placeholder each (BETWEEN always renders
            two placeholders).
        combinator: How this criterion joins the previous ones.
    """

    model_config = ConfigDict(extra="forbid", frozen=True, arbitrary_types_allowed=True)

    column: str
    operator: str
    values: tuple[Any, ...] = ()
    combinator: Combinator = Combinator.AND


class OrderSpec(BaseModel):
    """A single ORDER BY item."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    column: str
    direction: SortDirection = SortDirection.ASC


class StatementState(BaseModel):
    """Snapshot of everything a builder has accumulated.

    Produced by :meth:`~querybob.builder.StatementBuilder.state` and consumed
    by the generator.  Cross-field consistency (arity, operators, RETURNING
    support) is NOT validated here; that happens clause by clause during
    generation.

    Attributes:
        kind: Statement kind, fixed at construction.
        table: Primary table.
        joins: JOIN entries in emission order.
        columns: Projection (SELECT) or mutation (INSERT / UPDATE) columns.
        values: SELECT result targets or mutation values, paired with
            ``columns`` by position.
        returning_columns: RETURNING columns.
        return_values: RETURNING result targets.
        criteria: WHERE criteria in emission order.
        order_by: ORDER BY items in emission order.
        limit: Row limit; 0 disables the LIMIT clause.
        offset: Row offset; only rendered when ``limit`` is non-zero.
    """

    model_config = ConfigDict(extra="forbid", arbitrary_types_allowed=True)

    kind: StatementKind
    table: str
    joins: list[JoinSpec] = Field(default_factory=list)
    columns: list[str] = Field(default_factory=list)
    values: list[Any] = Field(default_factory=list)
    returning_columns: list[str] = Field(default_factory=list)
    return_values: list[Any] = Field(default_factory=list)
    criteria: list[FilterCriterion] = Field(default_factory=list)
    order_by: list[OrderSpec] = Field(default_factory=list)
    limit: int = 0
    offset: int = 0
