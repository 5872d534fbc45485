"""Looping statement forms for Rustl: while and for.

Neither loop opens a scope: the loop variable and anything bound in the body
live on in the enclosing frame after the loop ends.
"""

from __future__ import annotations

from rustl import ExecuteFn
from rustl.syntax.ast import (
    BinaryOperation,
    BoolLiteral,
    Call,
    CharLiteral,
    Comprehension,
    CompoundOperation,
    FloatLiteral,
    For,
    Identifier,
    Index,
    IntLiteral,
    ListLiteral,
    StringLiteral,
    While,
)
from rustl.types import type_name
from rustl.types.environment import Environment
from rustl.types.errors import RustlNotIterableError
from rustl.evaluation.evaluator import evaluate
from rustl.evaluation.statement_forms.if_form import evaluate_condition

# Only these expression kinds may appear after `in`
ITERABLE_EXPRESSIONS = (ListLiteral, Identifier, Call)

_NOT_ITERABLE = {
    IntLiteral: "Integer literals are not iterable",
    StringLiteral: "String literals are not iterable",
    BoolLiteral: "Boolean literals are not iterable",
    FloatLiteral: "Float literals are not iterable",
    CharLiteral: "Character literals are not iterable",
    BinaryOperation: "Operations are not iterable",
    CompoundOperation: "Compound operations are not iterable",
    Index: "Indexes are not iterable",
    Comprehension: "Comprehensions are not iterable",
}


def while_form(
    statement: While,
    env: Environment,
    importing: bool,
    execute_fn: ExecuteFn,
) -> None:
    """Run the body until the condition is false; it is checked before every pass."""
    while evaluate_condition(statement.condition, env, importing):
        execute_fn(statement.body, env, importing)


def for_form(
    statement: For,
    env: Environment,
    importing: bool,
    execute_fn: ExecuteFn,
) -> None:
    """Run the body once per List element, rebinding the loop variable each time."""
    iterable = statement.iterable
    if not isinstance(iterable, ITERABLE_EXPRESSIONS):
        raise RustlNotIterableError(
            _NOT_ITERABLE.get(type(iterable), f"{iterable!r} is not iterable")
        )

    items = evaluate(iterable, env, importing)
    if type(items) is not list:
        raise RustlNotIterableError(f"{type_name(items)} is not iterable")

    for item in items:
        env.define(statement.var, item)
        execute_fn(statement.body, env, importing)
