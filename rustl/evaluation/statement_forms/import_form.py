from __future__ import annotations

from rustl.syntax.ast import Import
from rustl.types.environment import Environment
from rustl.modules.module_loader import load_module
from rustl import ExecuteFn


def import_form(
    statement: Import,
    env: Environment,
    importing: bool,
    execute_fn: ExecuteFn,
) -> None:
    """
    Usage:
        import "path/to/module.rl";

    The module runs in the importing frame with output suppressed, so only its
    definitions remain.
    """
    program = load_module(statement.path)
    execute_fn(program.statements, env, True)
