"""Application engine for Rustl.

Centralizes call semantics for the evaluator:
- Native functions are invoked with the evaluated argument list, except that
  output built-ins are skipped while a module is being imported.
- User functions run in a duplicate of the caller's frame, so nothing the body
  does is visible to the caller except the returned value.
"""

from __future__ import annotations

from rustl import Value
from rustl.types import Null
from rustl.types.environment import Environment
from rustl.types.function import NativeFunction, UserFunction
from rustl.types.errors import RustlArityError, RustlRecursionError, RustlTypeError

# Built-ins that are suppressed while importing a module for its definitions
OUTPUT_BUILTINS = frozenset({"print", "println"})


def apply_user_function(
    fn: UserFunction,
    args: list[Value],
    env: Environment,
    importing: bool,
) -> Value:
    """Call a user-defined function.

    Parameters are bound positionally into a duplicate of `env`; the body and
    then the return expression are evaluated in that frame. Without a return
    expression the call yields Null.
    """
    # Deferred to avoid a cycle: statement forms evaluate expressions too.
    from rustl.evaluation.evaluator import evaluate
    from rustl.evaluation.executor import execute_statements

    if len(args) != len(fn.params):
        raise RustlArityError(f"Expected {len(fn.params)} arguments, got {len(args)}")

    local_env = env.duplicate()
    for name, value in zip(fn.params, args):
        local_env.define(name, value)

    try:
        execute_statements(fn.body, local_env, importing)
        if fn.return_expression is None:
            return Null
        return evaluate(fn.return_expression, local_env, importing)
    except RecursionError:
        raise RustlRecursionError(
            f"Maximum recursion depth exceeded in fn {fn.name}"
        ) from None


def apply(
    name: str,
    head: Value,
    args: list[Value],
    env: Environment,
    importing: bool = False,
) -> Value:
    """Apply either a native or a user-defined function bound to `name`."""
    if isinstance(head, NativeFunction):
        if importing and name in OUTPUT_BUILTINS:
            return Null
        return head(args)
    elif isinstance(head, UserFunction):
        return apply_user_function(head, args, env, importing)
    else:
        raise RustlTypeError(f"'{name}' is not a function")
