from rustl.syntax.ast import FunctionDefinition
from rustl.types.environment import Environment
from rustl.types.errors import RustlRedefinitionError
from rustl.types.function import UserFunction
from rustl import ExecuteFn


def define_form(
    statement: FunctionDefinition,
    env: Environment,
    importing: bool,
    execute_fn: ExecuteFn,
) -> None:
    """
    fn name(params) { body  return expr; }
    Any existing binding of `name` in this frame blocks the definition.
    """
    name = statement.name
    if name in env:
        raise RustlRedefinitionError(f"Function '{name}' is already defined!")

    env.define(
        name,
        UserFunction(
            name,
            statement.params,
            statement.body,
            statement.return_expression,
        ),
    )
