from rustl.syntax.ast import Expression, If
from rustl.types.environment import Environment
from rustl.types.errors import RustlTypeError
from rustl.evaluation.evaluator import evaluate
from rustl import ExecuteFn


def evaluate_condition(condition: Expression, env: Environment, importing: bool) -> bool:
    """Evaluate a branch or loop condition, which must be a Bool."""
    value = evaluate(condition, env, importing)
    if type(value) is not bool:
        raise RustlTypeError("Condition must be of type 'bool'")
    return value


def if_form(
    statement: If,
    env: Environment,
    importing: bool,
    execute_fn: ExecuteFn,
) -> None:
    if evaluate_condition(statement.condition, env, importing):
        execute_fn(statement.body, env, importing)
        return

    # elif branches are tried in order; the first true one wins
    for branch in statement.elif_branches:
        if evaluate_condition(branch.condition, env, importing):
            execute_fn(branch.body, env, importing)
            return

    if statement.else_body is not None:
        execute_fn(statement.else_body, env, importing)
