"""Constants and helpers for filter operators.

Filter operators are stored as upper-cased strings on each
:class:`~querybob.schema.statement.FilterCriterion`.  This module defines the
whitelist and the operator groups used by both the validator and the
WHERE clause builder.
"""

from __future__ import annotations

from enum import Enum

# ---------------------------------------------------------------------------
# Operator enums
# ---------------------------------------------------------------------------


class ComparisonOp(str, Enum):
    """Symbolic comparison operators, rendered without surrounding spaces."""

    EQ = "="
    GT = ">"
    LT = "<"
    GTE = ">="
    LTE = "<="
    NE = "<>"


class PatternOp(str, Enum):
    """Pattern-match operator (one value)."""

    LIKE = "LIKE"


class RangeOp(str, Enum):
    """Range operator (two values: low, high)."""

    BETWEEN = "BETWEEN"


class MembershipOp(str, Enum):
    """Membership operator (one or more values)."""

    IN = "IN"


# ---------------------------------------------------------------------------
# Operator groups
# ---------------------------------------------------------------------------

#: Symbolic operators: ``<column><op><placeholder>``.
COMPARISON_OPS: frozenset[str] = frozenset(op.value for op in ComparisonOp)

#: Keyword operators: rendered with a space between column and keyword.
KEYWORD_OPS: frozenset[str] = frozenset(
    {PatternOp.LIKE.value, RangeOp.BETWEEN.value, MembershipOp.IN.value}
)

#: Complete whitelist of filter operators.
VALID_OPERATORS: frozenset[str] = COMPARISON_OPS | KEYWORD_OPS


def normalize_operator(operator: str) -> str:
    """Return ``operator`` upper-cased, the form stored on a criterion."""
    return operator.upper()


def is_valid_operator(operator: str) -> bool:
    """True when ``operator`` belongs to the whitelist (exact match)."""
    return operator in VALID_OPERATORS
