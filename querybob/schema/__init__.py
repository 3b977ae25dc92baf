"""querybob schema layer: statement records, enums and operator constants."""
from querybob.schema.column_reference import ColumnReference, qualify_column
from querybob.schema.operators import VALID_OPERATORS
from querybob.schema.statement import (
    Combinator,
    Dialect,
    FilterCriterion,
    JoinSpec,
    OrderSpec,
    SortDirection,
    StatementKind,
)

__all__ = [
    "ColumnReference",
    "qualify_column",
    "VALID_OPERATORS",
    "Combinator",
    "Dialect",
    "FilterCriterion",
    "JoinSpec",
    "OrderSpec",
    "SortDirection",
    "StatementKind",
]
