from rustl.syntax.ast import Assignment, CompoundAssignment
from rustl.types.environment import Environment
from rustl.evaluation.assignment import assign
from rustl.evaluation.evaluator import compound_operate, evaluate
from rustl import ExecuteFn


def assign_form(
    statement: Assignment,
    env: Environment,
    importing: bool,
    execute_fn: ExecuteFn,
) -> None:
    """
    lhs = rhs;
    The right-hand side is evaluated before the target is inspected.
    """
    value = evaluate(statement.rhs, env, importing)
    assign(statement.lhs, value, env, importing)


def compound_assign_form(
    statement: CompoundAssignment,
    env: Environment,
    importing: bool,
    execute_fn: ExecuteFn,
) -> None:
    """
    name += rhs;  (also -=, *=, /=)
    """
    compound_operate(statement.name, statement.operator, statement.rhs, env, importing)
