"""querybob validation layer: checks run inline during generation."""
from querybob.validate.validator import (
    check_arity,
    check_first_criterion,
    check_operand_count,
    check_operator,
    check_pagination,
    check_returning_supported,
)

__all__ = [
    "check_arity",
    "check_first_criterion",
    "check_operand_count",
    "check_operator",
    "check_pagination",
    "check_returning_supported",
]
