"""Runtime generation options.

Example: reproduce legacy numbering, where placeholders keep counting
across repeated ``build()`` calls on the same builder::

    qb = querybob.new_update("accounts", GenerationOptions(reset_placeholders=False))
"""
from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class GenerationOptions:
    """Options applied to every ``build()`` call of a builder.

    Attributes:
        reset_placeholders: If ``True`` (default), placeholder numbering
            restarts at 1 on every ``build()``.  If ``False``, the counter
            carries over from the previous call, so a second build on a
            Postgres or Oracle builder yields ``$5`` where the first
            yielded ``$1``.
        strict_operand_counts: If ``True``, ``BETWEEN`` must receive exactly
            two values and ``IN`` at least one, otherwise
            :class:`~querybob.errors.OperandCountError` is raised.  Off by
            default: BETWEEN then always renders two placeholders and IN one
            per supplied value.
    """

    reset_placeholders: bool = True
    strict_operand_counts: bool = False
