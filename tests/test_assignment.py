import pytest

from rustl.syntax.ast import Identifier, IntLiteral, ListItem, ListLiteral
from rustl.types.errors import (
    RustlArityError,
    RustlShapeError,
    RustlTypeError,
)
from rustl.evaluation.assignment import assign, assign_list


def names(*raw):
    """Patterns from names; a trailing '*' marks a pack, a leading '...' a spread."""
    items = []
    for s in raw:
        if s.endswith("*"):
            items.append(ListItem(Identifier(s[:-1]), is_pack=True))
        elif s.startswith("..."):
            items.append(ListItem(Identifier(s[3:]), is_spread=True))
        else:
            items.append(ListItem(Identifier(s)))
    return tuple(items)


def test_assign_identifier(env):
    assign(Identifier("x"), 5, env)
    assert env.lookup("x") == 5


def test_assign_to_underscore_discards(env):
    assign(Identifier("_"), 5, env)
    assert "_" not in env


def test_destructure_exact(env):
    assign_list(names("a", "b"), [1, 2], env)
    assert (env.lookup("a"), env.lookup("b")) == (1, 2)


def test_pack_takes_remaining_values(env):
    assign_list(names("a", "b*"), [1, 2, 3, 4], env)
    assert env.lookup("a") == 1
    assert env.lookup("b") == [2, 3, 4]


def test_pack_with_equal_counts_binds_single_value(env):
    assign_list(names("a", "b*"), [1, 2], env)
    assert env.lookup("b") == 2


def test_too_many_values_without_pack(env):
    with pytest.raises(RustlArityError, match="Cannot assign 3 values to 2 items"):
        assign_list(names("a", "b"), [1, 2, 3], env)


def test_too_many_patterns(env):
    with pytest.raises(RustlArityError, match="Cannot assign 1 values to 2 items"):
        assign_list(names("a", "b*"), [1], env)


def test_empty_pattern_against_values(env):
    with pytest.raises(RustlArityError):
        assign_list((), [1], env)
    assign_list((), [], env)


def test_spread_is_not_a_target(env):
    with pytest.raises(RustlShapeError, match="Cannot use spread in list assignment"):
        assign_list(names("...a", "b"), [1, 2], env)


def test_discard_inside_pattern(env):
    assign_list(names("_", "b"), [1, 2], env)
    assert env.lookup("b") == 2
    assert "_" not in env


def test_nested_patterns(env):
    inner = ListLiteral(names("b", "c"))
    pattern = (ListItem(Identifier("a")), ListItem(inner))
    assign(ListLiteral(pattern), [1, [2, 3]], env)
    assert [env.lookup(n) for n in "abc"] == [1, 2, 3]


def test_destructuring_a_non_list(env):
    with pytest.raises(RustlTypeError, match="cannot destructure non-list into list"):
        assign(ListLiteral(names("a")), 5, env)


def test_destructuring_failure_keeps_earlier_bindings_absent(env):
    # Patterns are resolved before anything is bound.
    with pytest.raises(RustlShapeError):
        assign_list(names("a", "...b"), [1, 2], env)
    assert "a" not in env


def test_invalid_target_shapes(env):
    with pytest.raises(RustlShapeError, match="Cannot assign to an Integer literal"):
        assign(IntLiteral(1), 2, env)
