"""Core expression evaluator for the Rustl interpreter.

Reduces an Expression node to a Value against a single frame. The `importing`
flag is threaded through every call unchanged so that output built-ins stay
silent for the whole of a module import, including nested ones.
"""

from __future__ import annotations

from rustl import Value
from rustl.syntax.ast import (
    BinaryOperation,
    BoolLiteral,
    Call,
    CharLiteral,
    Comprehension,
    CompoundOperation,
    Expression,
    FloatLiteral,
    Identifier,
    Index,
    IntLiteral,
    ListLiteral,
    Operator,
    StringLiteral,
)
from rustl.types import Char, type_name
from rustl.types.environment import Environment
from rustl.types.errors import (
    RustlIndexError,
    RustlNotIterableError,
    RustlTypeError,
)
from rustl.evaluation.apply import apply
from rustl.evaluation.operators import apply_operator


def evaluate(expr: Expression, env: Environment, importing: bool = False) -> Value:
    """Evaluate `expr` in `env` and return its value."""
    match expr:
        case IntLiteral(value=v) | FloatLiteral(value=v) | StringLiteral(value=v) | BoolLiteral(value=v):
            return v
        case CharLiteral(value=c):
            return Char(c)
        case Identifier(name=name):
            return env.lookup(name)
        case Call(function=name, arguments=arguments):
            args = evaluate_all(arguments, env, importing)
            head = env.lookup(name)
            return apply(name, head, args, env, importing)
        case BinaryOperation(lhs=lhs, operator=op, rhs=rhs):
            left = evaluate(lhs, env, importing)
            right = evaluate(rhs, env, importing)
            return operate(op, left, right)
        case CompoundOperation(name=name, operator=op, rhs=rhs):
            return compound_operate(name, op, rhs, env, importing)
        case ListLiteral(items=items):
            values: list[Value] = []
            for item in items:
                v = evaluate(item.expression, env, importing)
                if not item.is_spread:
                    values.append(v)
                    continue
                if type(v) is not list:
                    raise RustlTypeError("only lists can be spread!")
                values.extend(v)
            return values
        case Index(name=name, index=index_expr):
            target = env.lookup(name)
            idx = evaluate_index(index_expr, env, importing)
            if type(target) is not list:
                raise RustlTypeError(f"Cannot index {type_name(target)}")
            return target[resolve_index(idx, len(target))]
        case Comprehension(result=result, var=var, source=source):
            return comprehend(result, var, source, env, importing)

    raise RustlTypeError(f"Cannot evaluate {expr!r}")


def evaluate_all(exprs, env: Environment, importing: bool = False) -> list[Value]:
    """Evaluate expressions left to right."""
    return [evaluate(e, env, importing) for e in exprs]


def operate(op: Operator, lhs: Value, rhs: Value) -> Value:
    """Apply a binary operator, turning an unsupported pairing into an error."""
    result = apply_operator(op, lhs, rhs)
    if result is NotImplemented:
        raise RustlTypeError(
            f"Invalid operation: cannot apply '{op}' to {type_name(lhs)} and {type_name(rhs)}"
        )
    return result


def compound_operate(
    name: str, op: Operator, rhs: Expression, env: Environment, importing: bool
) -> Value:
    """Rebind `name` to `name op rhs` and return the new value."""
    current = env.lookup(name)
    value = evaluate(rhs, env, importing)
    result = apply_operator(op, current, value)
    if result is NotImplemented:
        raise RustlTypeError(f"Cannot operate on {name}")
    env.define(name, result)
    return result


def evaluate_index(index_expr: Expression, env: Environment, importing: bool) -> int:
    """Evaluate an index expression in a throwaway frame; it must yield an Int."""
    idx = evaluate(index_expr, env.duplicate(), importing)
    if type(idx) is not int:
        raise RustlTypeError("Index must be of type int")
    return idx


def resolve_index(idx: int, length: int) -> int:
    """Map a possibly negative index onto a position in a list of `length`.

    Valid indices are -length <= idx < length; a negative index counts back
    from the end, so -1 is the last element.
    """
    if idx >= length or -idx > length:
        raise RustlIndexError(f"Index {idx} is out of bounds")
    if idx < 0:
        return length + idx
    return idx


def comprehend(
    result: Expression, var: str, source: Expression, env: Environment, importing: bool
) -> list[Value]:
    """Evaluate a list comprehension in its own throwaway frame."""
    local_env = env.duplicate()
    source_value = evaluate(source, local_env, importing)
    if type(source_value) is list:
        elements = source_value
    elif type(source_value) is str:
        elements = [Char(c) for c in source_value]
    else:
        raise RustlNotIterableError(f"{type_name(source_value)} is not iterable")

    output: list[Value] = []
    for element in elements:
        local_env.define(var, element)
        output.append(evaluate(result, local_env, importing))
    return output
