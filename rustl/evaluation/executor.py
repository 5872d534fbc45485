"""Statement executor for Rustl.

Runs statements in order against one frame. The first error stops the whole
sequence and propagates; bindings made before it are kept.
"""

from __future__ import annotations

from typing import Iterable

from rustl.syntax.ast import Program, Statement
from rustl.types.environment import Environment
from rustl.types.errors import RustlTypeError
from rustl.evaluation.statement_forms import STATEMENT_FORMS


def execute(statement: Statement, env: Environment, importing: bool = False) -> None:
    """Execute a single statement in `env`."""
    form = STATEMENT_FORMS.get(type(statement))
    if form is None:
        raise RustlTypeError(f"Cannot execute {statement!r}")
    form(statement, env, importing, execute_statements)


def execute_statements(
    statements: Iterable[Statement], env: Environment, importing: bool = False
) -> None:
    """Execute statements in order, stopping at the first error."""
    for statement in statements:
        execute(statement, env, importing)


def run(program: Program, env: Environment, importing: bool = False) -> None:
    """Run a whole program against `env`."""
    execute_statements(program.statements, env, importing)
