import pytest

from rustl.types.environment import Environment
from rustl.builtin.env_builtin import register
from rustl.interpreter import Interpreter
from rustl.runtime_context import set_entry_file


@pytest.fixture(autouse=True)
def _reset_entry_file(monkeypatch):
    # Entry file and library path are process-global; start every test clean.
    monkeypatch.delenv("RUSTL_LIB", raising=False)
    set_entry_file(None)
    yield
    set_entry_file(None)


@pytest.fixture
def env():
    """Fresh frame with builtins loaded."""
    e = Environment()
    register(e)
    return e


@pytest.fixture
def itp():
    return Interpreter()
