"""Typed column-reference class.

Owns the table-qualification rule used by ``select()`` and ``returning()``
so the builder does not pattern-match on ``"."`` itself.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class ColumnReference:
    """A parsed ``table.column`` or bare ``column`` reference.

    Attributes:
        table: Table qualifier, or ``None`` for unqualified references.
        column: Column name (everything after the first ``.``).
    """

    table: str | None
    column: str

    # ------------------------------------------------------------------
    # Construction
    # ------------------------------------------------------------------

    @classmethod
    def parse(cls, ref: str) -> ColumnReference:
        """Parse a ``"table.column"`` or bare ``"column"`` string.

        References with more than one ``.`` (``schema.table.column``) keep
        everything after the first dot as the column part, so ``str()``
        returns the input unchanged.
        """
        if "." in ref:
            table, column = ref.split(".", 1)
            return cls(table=table, column=column)
        return cls(table=None, column=ref)

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------

    @property
    def qualified(self) -> bool:
        """True when the reference includes a table qualifier."""
        return self.table is not None

    def qualify(self, default_table: str) -> ColumnReference:
        """Return this reference, qualified with ``default_table`` if bare."""
        if self.qualified:
            return self
        return ColumnReference(table=default_table, column=self.column)

    def __str__(self) -> str:
        if self.table is not None:
            return f"{self.table}.{self.column}"
        return self.column


def qualify_column(ref: str, default_table: str) -> str:
    """Qualify a bare column name with ``default_table``; pass others through."""
    return str(ColumnReference.parse(ref).qualify(default_table))
