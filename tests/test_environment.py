import pytest

from rustl.types.environment import Environment
from rustl.types.errors import RustlUndefinedVariable


def test_define_and_lookup():
    env = Environment()
    env.define("x", 1)
    assert env.lookup("x") == 1
    env.define("x", 2)
    assert env.lookup("x") == 2


def test_lookup_of_unbound_name_names_it():
    with pytest.raises(RustlUndefinedVariable, match="'missing' is not defined"):
        Environment().lookup("missing")


def test_get_is_optional_lookup():
    env = Environment({"a": 1})
    assert env.get("a") == 1
    assert env.get("b") is None


def test_underscore_is_write_only():
    env = Environment()
    env.define("_", 42)
    assert "_" not in env
    assert env.get("_") is None
    with pytest.raises(RustlUndefinedVariable):
        env.lookup("_")


def test_duplicate_is_independent():
    env = Environment({"x": 1, "xs": [1, 2]})
    copy = env.duplicate()
    copy.define("x", 99)
    copy.define("y", 5)
    assert env.lookup("x") == 1
    assert "y" not in env
    env.define("z", 3)
    assert "z" not in copy


def test_update_and_len():
    env = Environment()
    env.update({"a": 1, "b": 2, "_": 3})
    assert len(env) == 2
    assert sorted(env) == ["a", "b"]
