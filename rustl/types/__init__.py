"""Runtime value helpers shared by the evaluator, operators and built-ins."""

from __future__ import annotations

from rustl import Value
from rustl.types.nil import Null, NullType
from rustl.types.char import Char
from rustl.types.function import NativeFunction, UserFunction
from rustl.types.environment import Environment

# Tolerance used when comparing two Floats for equality
FLOAT_EPSILON = 1e-9

INT_MIN = -(2 ** 31)
INT_MAX = 2 ** 31 - 1

_TYPE_NAMES = {
    NullType: "Null",
    int: "Int",
    float: "Float",
    bool: "Bool",
    Char: "Char",
    str: "Str",
    list: "List",
    NativeFunction: "Function",
    UserFunction: "Function",
}


def type_name(value: Value) -> str:
    """Name of the value's variant, as used in error messages."""
    return _TYPE_NAMES.get(type(value), type(value).__name__)


def values_equal(a: Value, b: Value) -> bool:
    """Structural equality; Floats compare within FLOAT_EPSILON, also inside Lists."""
    if type(a) is not type(b):
        return False
    if type(a) is float:
        return a == b or abs(a - b) < FLOAT_EPSILON
    if type(a) is list:
        if len(a) != len(b):
            return False
        return all(values_equal(x, y) for x, y in zip(a, b))
    return a == b


__all__ = [
    "Char",
    "Environment",
    "FLOAT_EPSILON",
    "INT_MAX",
    "INT_MIN",
    "NativeFunction",
    "Null",
    "NullType",
    "UserFunction",
    "type_name",
    "values_equal",
]
