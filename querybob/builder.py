"""Fluent statement builder.

A builder is created once per statement through a kind-specific
constructor, configured through chained calls, and consumed by
:meth:`StatementBuilder.build`.  Configuration never fails: arity, operator
legality and RETURNING support are checked at generation time::

    qb = (
        querybob.new_select("users")
        .select("id", "email")
        .into(row.id, row.email)
        .where("users.active", "=", True)
        .order_by_descending("users.created_at")
        .limit(20)
    )
    compiled = qb.build()
    cursor.execute(compiled.sql, compiled.params)

Builders are single-owner and not safe for concurrent use.
"""
from __future__ import annotations

from typing import Any

from querybob.compile.base import CompiledStatement
from querybob.compile.context import PlaceholderAllocator
from querybob.compile.generator import StatementGenerator
from querybob.compile.registry import CompilerFactory, dialect_key
from querybob.config import GenerationOptions
from querybob.errors import InvalidPaginationError, QueryBobError
from querybob.schema.column_reference import qualify_column
from querybob.schema.operators import normalize_operator
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


class StatementBuilder:
    """Accumulates the intent of one SQL statement.

    Normally obtained via :func:`new_select`, :func:`new_insert`,
    :func:`new_update` or :func:`new_delete`.

    Args:
        kind: Statement kind; never changes afterwards.
        table: Primary table name.
        options: Generation options; defaults to ``GenerationOptions()``.
    """

    def __init__(
        self,
        kind: StatementKind,
        table: str,
        options: GenerationOptions | None = None,
    ) -> None:
        self._kind = kind
        self._table = table
        self._options = options or GenerationOptions()
        self._dialect: str = Dialect.GENERIC.value
        self._placeholder_count: int = 0
        self._joins: list[JoinSpec] = []
        self._columns: list[str] = []
        self._values: list[Any] = []
        self._returning_columns: list[str] = []
        self._return_values: list[Any] = []
        self._criteria: list[FilterCriterion] = []
        self._order_by: list[OrderSpec] = []
        self._limit: int = 0
        self._offset: int = 0

    # ------------------------------------------------------------------
    # Dialect and options
    # ------------------------------------------------------------------

    def for_database(self, dialect: Dialect | str) -> StatementBuilder:
        """Set the target dialect.  The last call wins.

        Unregistered names are accepted here and rejected by :meth:`build`
        with :class:`~querybob.errors.UnknownDialectError`.
        """
        self._dialect = dialect_key(dialect)
        return self

    def for_mysql(self) -> StatementBuilder:
        return self.for_database(Dialect.MYSQL)

    def for_sqlite(self) -> StatementBuilder:
        return self.for_database(Dialect.SQLITE)

    def for_postgres(self) -> StatementBuilder:
        return self.for_database(Dialect.POSTGRES)

    def for_oracle(self) -> StatementBuilder:
        return self.for_database(Dialect.ORACLE)

    def with_options(self, options: GenerationOptions) -> StatementBuilder:
        """Replace the generation options."""
        self._options = options
        return self

    # ------------------------------------------------------------------
    # Columns and values
    # ------------------------------------------------------------------

    def select(self, *columns: str) -> StatementBuilder:
        """Add projection columns.

        Bare names are prefixed with the primary table, so
        ``new_select("t1").select("c1", "t2.c5")`` stores ``t1.c1`` and
        ``t2.c5``.  Names containing a ``.`` are stored as given.
        """
        self._columns.extend(qualify_column(c, self._table) for c in columns)
        return self

    def returning(self, *columns: str) -> StatementBuilder:
        """Add RETURNING columns, qualified the same way as :meth:`select`."""
        self._returning_columns.extend(qualify_column(c, self._table) for c in columns)
        return self

    def set(self, *columns: str) -> StatementBuilder:
        """Add INSERT / UPDATE columns, stored verbatim."""
        self._columns.extend(columns)
        return self

    def to(self, *values: Any) -> StatementBuilder:
        """Add INSERT / UPDATE values, paired with :meth:`set` columns by position."""
        self._values.extend(values)
        return self

    def into(self, *targets: Any) -> StatementBuilder:
        """Add SELECT result targets, paired with :meth:`select` columns by position."""
        self._values.extend(targets)
        return self

    def returning_into(self, *targets: Any) -> StatementBuilder:
        """Add RETURNING result targets, paired with :meth:`returning` columns."""
        self._return_values.extend(targets)
        return self

    # ------------------------------------------------------------------
    # Joins, filters, ordering, pagination
    # ------------------------------------------------------------------

    def join(
        self,
        join_type: str,
        table: str,
        local_column: str,
        foreign_column: str,
    ) -> StatementBuilder:
        """Add ``<join_type> JOIN <table> ON <local_column>=<foreign_column>``."""
        self._joins.append(
            JoinSpec(
                join_type=join_type,
                table=table,
                local_column=local_column,
                foreign_column=foreign_column,
            )
        )
        return self

    def where(self, column: str, operator: str, *values: Any) -> StatementBuilder:
        """Add a criterion joined to the previous ones with AND."""
        return self._add_criterion(column, operator, values, Combinator.AND)

    def or_where(self, column: str, operator: str, *values: Any) -> StatementBuilder:
        """Add a criterion joined to the previous ones with OR.

        The first criterion of a statement must not be an OR.
        """
        return self._add_criterion(column, operator, values, Combinator.OR)

    def order_by(self, column: str) -> StatementBuilder:
        self._order_by.append(OrderSpec(column=column, direction=SortDirection.ASC))
        return self

    def order_by_descending(self, column: str) -> StatementBuilder:
        self._order_by.append(OrderSpec(column=column, direction=SortDirection.DESC))
        return self

    def limit(self, limit: int, offset: int = 0) -> StatementBuilder:
        """Set LIMIT and OFFSET.  A zero limit emits no LIMIT clause at all."""
        self._limit = limit
        self._offset = offset
        return self

    def _add_criterion(
        self,
        column: str,
        operator: str,
        values: tuple[Any, ...],
        combinator: Combinator,
    ) -> StatementBuilder:
        self._criteria.append(
            FilterCriterion(
                column=column,
                operator=normalize_operator(operator),
                values=tuple(values),
                combinator=combinator,
            )
        )
        return self

    # ------------------------------------------------------------------
    # Accessors
    # ------------------------------------------------------------------

    @property
    def kind(self) -> StatementKind:
        return self._kind

    @property
    def table(self) -> str:
        return self._table

    @property
    def dialect(self) -> str:
        """The dialect name (compares equal to the matching ``Dialect`` member)."""
        return self._dialect

    @property
    def options(self) -> GenerationOptions:
        return self._options

    @property
    def placeholder_count(self) -> int:
        """Placeholders allocated by the most recent generation."""
        return self._placeholder_count

    def values(self) -> list[Any]:
        """Return SELECT result targets or INSERT / UPDATE values."""
        return list(self._values)

    def returning_values(self) -> list[Any]:
        """Return RETURNING result targets."""
        return list(self._return_values)

    def criteria(self) -> list[Any]:
        """Return filter values flattened in criterion order."""
        return [value for criterion in self._criteria for value in criterion.values]

    def state(self) -> StatementState:
        """Return a snapshot of the accumulated intent.

        Raises:
            InvalidPaginationError: If the limit or offset is not an integer.
        """
        if not isinstance(self._limit, int) or not isinstance(self._offset, int):
            raise InvalidPaginationError(self._limit, self._offset)
        return StatementState(
            kind=self._kind,
            table=self._table,
            joins=list(self._joins),
            columns=list(self._columns),
            values=list(self._values),
            returning_columns=list(self._returning_columns),
            return_values=list(self._return_values),
            criteria=list(self._criteria),
            order_by=list(self._order_by),
            limit=self._limit,
            offset=self._offset,
        )

    # ------------------------------------------------------------------
    # Generation
    # ------------------------------------------------------------------

    def build(self) -> CompiledStatement:
        """Generate the statement.

        Returns:
            :class:`~querybob.compile.base.CompiledStatement` with ``sql``
            and the ordered value sequences.

        Raises:
            UnknownDialectError: If the dialect has no registered compiler.
            GenerationError: (or subclass) from the first failing clause.
        """
        compiler = CompilerFactory.create(self._dialect)
        start = 0 if self._options.reset_placeholders else self._placeholder_count
        allocator = PlaceholderAllocator(compiler, count=start)
        try:
            return StatementGenerator(compiler, self._options).build(self.state(), allocator)
        finally:
            self._placeholder_count = allocator.count

    def generate(self) -> str:
        """Generate the statement and return only its SQL text."""
        return self.build().sql

    def try_generate(self) -> tuple[str, QueryBobError | None]:
        """Generate the statement without raising.

        Returns:
            ``(sql, None)`` on success, ``("", error)`` on failure.
        """
        try:
            return self.generate(), None
        except QueryBobError as exc:
            return "", exc


# ---------------------------------------------------------------------------
# Kind-specific constructors
# ---------------------------------------------------------------------------


def new_select(table: str, options: GenerationOptions | None = None) -> StatementBuilder:
    """Start a SELECT on ``table``."""
    return StatementBuilder(StatementKind.SELECT, table, options)


def new_insert(table: str, options: GenerationOptions | None = None) -> StatementBuilder:
    """Start an INSERT into ``table``."""
    return StatementBuilder(StatementKind.INSERT, table, options)


def new_update(table: str, options: GenerationOptions | None = None) -> StatementBuilder:
    """Start an UPDATE of ``table``."""
    return StatementBuilder(StatementKind.UPDATE, table, options)


def new_delete(table: str, options: GenerationOptions | None = None) -> StatementBuilder:
    """Start a DELETE from ``table``."""
    return StatementBuilder(StatementKind.DELETE, table, options)
