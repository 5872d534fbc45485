"""Built-in functions for the Rustl runtime environment.

This module defines the native function table (output, conversions, list
helpers) and the `register` helper that installs it into a frame. The table is
closed: built-ins are fixed when the frame is created.

Every built-in takes the evaluated argument list and returns a Value. None of
them mutate their arguments.
"""
from __future__ import annotations

import sys
from typing import Callable

from rustl import Value
from rustl.types import Char, Null, NullType, INT_MAX, INT_MIN, type_name
from rustl.types.environment import Environment
from rustl.types.errors import RustlArityError, RustlTypeError
from rustl.types.function import NativeFunction, UserFunction


# -------------------------------
# Display
# -------------------------------
def display(value: Value, nested: bool = False) -> str:
    """Render a value the way print/println show it.

    Str and Char are shown raw at the top level and quoted inside Lists.
    """
    if isinstance(value, NullType):
        return "null"
    if type(value) is bool:
        return "true" if value else "false"
    if type(value) is str:
        return f'"{value}"' if nested else value
    if type(value) is Char:
        return f"'{value.c}'" if nested else value.c
    if type(value) is list:
        return "[" + ", ".join(display(v, nested=True) for v in value) + "]"
    if isinstance(value, (NativeFunction, UserFunction)):
        return repr(value)
    return str(value)


def _expect_arity(name: str, args: list[Value], *counts: int) -> None:
    if len(args) not in counts:
        expected = " or ".join(str(c) for c in counts)
        raise RustlArityError(f"{name} expects {expected} arguments, got {len(args)}")


# -------------------------------
# Output
# -------------------------------
def print_builtin(args: list[Value]) -> Value:
    """Write the arguments space-separated, without a trailing newline."""
    sys.stdout.write(" ".join(display(a) for a in args))
    sys.stdout.flush()
    return Null


def println_builtin(args: list[Value]) -> Value:
    """Write the arguments space-separated, followed by a newline."""
    sys.stdout.write(" ".join(display(a) for a in args) + "\n")
    sys.stdout.flush()
    return Null


# -------------------------------
# Conversions and inspection
# -------------------------------
def len_builtin(args: list[Value]) -> Value:
    _expect_arity("len", args, 1)
    (v,) = args
    if type(v) not in (list, str):
        raise RustlTypeError(f"len expects a List or Str, got {type_name(v)}")
    return len(v)


def str_builtin(args: list[Value]) -> Value:
    _expect_arity("str", args, 1)
    return display(args[0])


def int_builtin(args: list[Value]) -> Value:
    """Convert an Int, Float, Bool or numeric Str to an Int (floats truncate)."""
    _expect_arity("int", args, 1)
    (v,) = args
    if type(v) is int:
        return v
    if type(v) is bool:
        return int(v)
    if type(v) is float:
        try:
            result = int(v)
        except (ValueError, OverflowError):
            raise RustlTypeError(f"Cannot convert {v} to Int")
    elif type(v) is str:
        try:
            result = int(v.strip())
        except ValueError:
            raise RustlTypeError(f"Cannot convert {v!r} to Int")
    else:
        raise RustlTypeError(f"Cannot convert {type_name(v)} to Int")
    if result < INT_MIN or result > INT_MAX:
        raise RustlTypeError(f"{v} is out of Int range")
    return result


def float_builtin(args: list[Value]) -> Value:
    _expect_arity("float", args, 1)
    (v,) = args
    if type(v) in (int, float):
        return float(v)
    if type(v) is str:
        try:
            return float(v.strip())
        except ValueError:
            raise RustlTypeError(f"Cannot convert {v!r} to Float")
    raise RustlTypeError(f"Cannot convert {type_name(v)} to Float")


def type_builtin(args: list[Value]) -> Value:
    _expect_arity("type", args, 1)
    return type_name(args[0])


# -------------------------------
# Lists
# -------------------------------
def range_builtin(args: list[Value]) -> Value:
    """range(n) -> [0, ..., n-1];  range(a, b) -> [a, ..., b-1]."""
    _expect_arity("range", args, 1, 2)
    if any(type(a) is not int for a in args):
        raise RustlTypeError("range expects Int arguments")
    return list(range(*args))


def push_builtin(args: list[Value]) -> Value:
    """Return a new List with the value appended."""
    _expect_arity("push", args, 2)
    lst, v = args
    if type(lst) is not list:
        raise RustlTypeError(f"push expects a List, got {type_name(lst)}")
    return [*lst, v]


BUILTINS: dict[str, Callable[[list[Value]], Value]] = {
    "print": print_builtin,
    "println": println_builtin,
    "len": len_builtin,
    "str": str_builtin,
    "int": int_builtin,
    "float": float_builtin,
    "type": type_builtin,
    "range": range_builtin,
    "push": push_builtin,
}


def register(env: Environment) -> None:
    """Register all builtin functions into the given environment."""
    env.update({name: NativeFunction(name, fn) for name, fn in BUILTINS.items()})
