"""Assignment and list destructuring for Rustl.

`assign` binds an already-evaluated value to an assignment target:
- an Identifier binds directly (`_` discards),
- a ListLiteral destructures a List value item by item,
- an Index replaces one element of a List and rebinds the whole List.

Any other expression shape is not a valid target.
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
    ListItem,
    ListLiteral,
    StringLiteral,
)
from rustl.types import type_name
from rustl.types.environment import Environment
from rustl.types.errors import (
    RustlArityError,
    RustlShapeError,
    RustlTypeError,
)
from rustl.evaluation.evaluator import evaluate_index, resolve_index

_INVALID_TARGETS = {
    IntLiteral: "Cannot assign to an Integer literal",
    StringLiteral: "Cannot assign to a String literal",
    BoolLiteral: "Cannot assign to a Boolean literal",
    FloatLiteral: "Cannot assign to a Float literal",
    CharLiteral: "Cannot assign to a Character literal",
    Call: "Cannot assign to a Function call",
    BinaryOperation: "Cannot assign to an Operation",
    CompoundOperation: "Cannot assign to a Compound operation",
    Comprehension: "Cannot assign to a Comprehension",
}


def assign(target: Expression, value: Value, env: Environment, importing: bool = False) -> None:
    """Bind `value` to the assignment target `target` in `env`."""
    match target:
        case Identifier(name=name):
            env.define(name, value)
        case ListLiteral(items=items):
            if type(value) is not list:
                raise RustlTypeError("cannot destructure non-list into list")
            assign_list(items, value, env, importing)
        case Index(name=name, index=index_expr):
            assign_index(name, index_expr, value, env, importing)
        case _:
            message = _INVALID_TARGETS.get(type(target), f"Cannot assign to {target!r}")
            raise RustlShapeError(message)


def assign_index(
    name: str, index_expr: Expression, value: Value, env: Environment, importing: bool
) -> None:
    """`name[index] = value`: copy the List, replace one element, rebind."""
    current = env.lookup(name)
    idx = evaluate_index(index_expr, env, importing)

    if type(current) is str:
        raise RustlTypeError("Cannot assign to String Index")
    if type(current) is not list:
        raise RustlTypeError(f"Cannot index {type_name(current)}")

    updated = list(current)
    updated[resolve_index(idx, len(updated))] = value
    env.define(name, updated)


def assign_list(
    patterns: tuple[ListItem, ...] | list[ListItem],
    values: list[Value],
    env: Environment,
    importing: bool = False,
) -> None:
    """Destructure `values` into `patterns`.

    The last pattern may be a pack pattern, which takes every remaining value
    as a List when there are more values than patterns. Spread items are not
    valid targets. Each (pattern, value) pair goes back through `assign`, so
    patterns may nest.
    """
    if len(patterns) > len(values) or (not patterns and values):
        raise RustlArityError(f"Cannot assign {len(values)} values to {len(patterns)} items")

    pairs: list[tuple[Expression, Value]] = []
    last = len(patterns) - 1
    for i, value in enumerate(values):
        pattern = patterns[i]
        if i == last and len(patterns) != len(values):
            if not pattern.is_pack:
                raise RustlArityError(
                    f"Cannot assign {len(values)} values to {len(patterns)} items"
                )
            pairs.append((pattern.expression, list(values[i:])))
            break
        if pattern.is_spread:
            raise RustlShapeError("Cannot use spread in list assignment")
        pairs.append((pattern.expression, value))

    for target, value in pairs:
        assign(target, value, env, importing)
