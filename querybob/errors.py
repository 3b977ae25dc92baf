"""Custom exception hierarchy for querybob.

All public errors inherit from QueryBobError so callers can catch the base
class for any querybob-specific failure.  Errors raised while generating a
statement derive from :class:`GenerationError`; no partial SQL is ever
returned alongside one of them.
"""
from __future__ import annotations

from typing import Any


class QueryBobError(Exception):
    """Base exception for all querybob errors."""


class UnknownDialectError(QueryBobError):
    """Raised when a dialect name has no registered compiler.

    Args:
        name: The dialect name that was requested.
        registered: Names that are currently registered.
    """

    def __init__(self, name: str, registered: list[str]) -> None:
        super().__init__(
            f"Unsupported dialect: '{name}'. Registered dialects: {registered}."
        )
        self.name = name
        self.registered = registered


class GenerationError(QueryBobError):
    """Raised when a statement cannot be generated from builder state.

    Args:
        message: Human-readable description.
        code: Machine-readable error code (e.g. COLUMN_VALUE_ARITY).
        details: Extra diagnostic context.
    """

    def __init__(
        self,
        message: str,
        code: str,
        details: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(message)
        self.code = code
        self.details: dict[str, Any] = details or {}

    def to_error_response(self) -> dict[str, Any]:
        """Returns a structured error response for the embedding application."""
        return {
            "error": self.code,
            "message": str(self),
            "details": self.details,
        }


class ColumnValueArityError(GenerationError):
    """Raised when the number of columns differs from the number of values."""

    def __init__(self, column_count: int, value_count: int) -> None:
        super().__init__(
            f"columns count ({column_count}) must be equal to values count ({value_count})",
            code="COLUMN_VALUE_ARITY",
            details={"column_count": column_count, "value_count": value_count},
        )
        self.column_count = column_count
        self.value_count = value_count


class InvalidOperatorError(GenerationError):
    """Raised when a filter uses an operator outside the whitelist."""

    def __init__(self, operator: str) -> None:
        super().__init__(
            f"operator '{operator}' is an invalid SQL operator",
            code="INVALID_OPERATOR",
            details={"operator": operator},
        )
        self.operator = operator


class FirstCriterionIsOrError(GenerationError):
    """Raised when the first filter criterion was added with ``or_where``."""

    def __init__(self) -> None:
        super().__init__("the first criterion is an OR", code="FIRST_CRITERION_IS_OR")


class UnsupportedReturningError(GenerationError):
    """Raised when RETURNING is requested on a dialect that lacks it."""

    def __init__(self, dialect: str) -> None:
        super().__init__(
            f"database engine '{dialect}' does not support RETURNING clause",
            code="UNSUPPORTED_RETURNING",
            details={"dialect": dialect},
        )
        self.dialect = dialect


class InvalidPaginationError(GenerationError):
    """Raised when LIMIT or OFFSET is negative or not an integer."""

    def __init__(self, limit: int, offset: int) -> None:
        super().__init__(
            f"limit ({limit}) and offset ({offset}) must be non-negative integers",
            code="INVALID_PAGINATION",
            details={"limit": limit, "offset": offset},
        )
        self.limit = limit
        self.offset = offset


class OperandCountError(GenerationError):
    """Raised in strict mode when BETWEEN or IN receive the wrong number of values.

    Args:
        operator: ``BETWEEN`` or ``IN``.
        expected: Human-readable expectation (``"2"`` or ``">= 1"``).
        actual: Number of values supplied.
    """

    def __init__(self, operator: str, expected: str, actual: int) -> None:
        super().__init__(
            f"operator '{operator}' expects {expected} value(s), got {actual}",
            code="OPERAND_COUNT",
            details={"operator": operator, "expected": expected, "actual": actual},
        )
        self.operator = operator
        self.expected = expected
        self.actual = actual
