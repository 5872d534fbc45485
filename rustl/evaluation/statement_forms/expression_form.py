from rustl.syntax.ast import ExpressionStatement
from rustl.types.environment import Environment
from rustl.evaluation.evaluator import evaluate
from rustl import ExecuteFn


def expression_form(
    statement: ExpressionStatement,
    env: Environment,
    importing: bool,
    execute_fn: ExecuteFn,
) -> None:
    # Value is dropped; only side effects matter.
    evaluate(statement.expression, env, importing)
