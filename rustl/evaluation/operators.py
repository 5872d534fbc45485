"""Binary operator engine for Rustl.

`apply_operator` is pure: it never touches an Environment. Arithmetic and
ordering are defined for Int and Float operands (mixed pairs promote to Float);
equality is defined for every pair. Unsupported pairings return
`NotImplemented`, and the caller decides which error to raise.
"""

from __future__ import annotations

import math

from rustl import Value
from rustl.syntax.ast import Operator
from rustl.types import INT_MAX, INT_MIN, values_equal
from rustl.types.errors import RustlArithmeticError


def _check_int(result: int) -> int:
    if result < INT_MIN or result > INT_MAX:
        raise RustlArithmeticError("Integer overflow")
    return result


def _int_div(a: int, b: int) -> int:
    """Integer division truncating toward zero."""
    if b == 0:
        raise RustlArithmeticError("Division by zero")
    q = abs(a) // abs(b)
    return _check_int(q if (a < 0) == (b < 0) else -q)


def _float_div(a: float, b: float) -> float:
    if b == 0.0:
        if a == 0.0 or math.isnan(a):
            return math.nan
        return math.copysign(math.inf, a) * math.copysign(1.0, b)
    return a / b


_INT_OPS = {
    Operator.ADD: lambda a, b: _check_int(a + b),
    Operator.SUB: lambda a, b: _check_int(a - b),
    Operator.MUL: lambda a, b: _check_int(a * b),
    Operator.DIV: _int_div,
    Operator.LESS_THAN: lambda a, b: a < b,
    Operator.GREATER_THAN: lambda a, b: a > b,
}

_FLOAT_OPS = {
    Operator.ADD: lambda a, b: a + b,
    Operator.SUB: lambda a, b: a - b,
    Operator.MUL: lambda a, b: a * b,
    Operator.DIV: _float_div,
    Operator.LESS_THAN: lambda a, b: a < b,
    Operator.GREATER_THAN: lambda a, b: a > b,
}

_NUMERIC = (int, float)


def apply_operator(operator: Operator, lhs: Value, rhs: Value) -> Value:
    """Apply `operator` to two evaluated operands.

    Returns NotImplemented when the operand types do not support the operator.
    """
    if operator is Operator.EQUAL:
        return values_equal(lhs, rhs)
    if operator is Operator.NOT_EQUAL:
        return not values_equal(lhs, rhs)

    lt, rt = type(lhs), type(rhs)
    if lt not in _NUMERIC or rt not in _NUMERIC:
        return NotImplemented
    if lt is int and rt is int:
        return _INT_OPS[operator](lhs, rhs)
    return _FLOAT_OPS[operator](float(lhs), float(rhs))
