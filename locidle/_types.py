from __future__ import annotations

import operator
from decimal import Decimal
from typing import Callable

Number = Decimal | int | float | str

_OPS: dict[str, Callable[[Decimal, Decimal], bool]] = {
    ">=": operator.ge,
    "<=": operator.le,
    ">": operator.gt,
    "<": operator.lt,
    "==": operator.eq,
    "!=": operator.ne,
}


def to_decimal(value: Number) -> Decimal:
    """Convert a literal to Decimal, going through str() for floats."""
    if isinstance(value, Decimal):
        return value
    if isinstance(value, float):
        return Decimal(str(value))
    return Decimal(value)


def compare(left: Decimal, op: str, right: Decimal) -> bool:
    """Compare two values using a string operator."""
    fn = _OPS.get(op)
    if fn is None:
        raise ValueError(f"Unknown operator: {op!r}. Expected one of {list(_OPS)}")
    return fn(left, right)


def is_operator(op: str) -> bool:
    return op in _OPS
