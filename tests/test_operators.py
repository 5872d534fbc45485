import math

import pytest
from hypothesis import given, strategies as st

from rustl.syntax.ast import Operator
from rustl.types import Char, Null, INT_MAX, INT_MIN
from rustl.types.errors import RustlArithmeticError
from rustl.evaluation.operators import apply_operator

i32 = st.integers(min_value=INT_MIN, max_value=INT_MAX)


@pytest.mark.parametrize(
    "op,lhs,rhs,expected",
    [
        (Operator.ADD, 2, 3, 5),
        (Operator.SUB, 2, 3, -1),
        (Operator.MUL, 4, 3, 12),
        (Operator.DIV, 7, 2, 3),
        (Operator.DIV, -7, 2, -3),
        (Operator.DIV, 7, -2, -3),
        (Operator.DIV, -7, -2, 3),
        (Operator.ADD, 1.5, 2.25, 3.75),
        (Operator.ADD, 1, 0.5, 1.5),
        (Operator.MUL, 0.5, 4, 2.0),
        (Operator.DIV, 7.0, 2, 3.5),
        (Operator.LESS_THAN, 1, 2, True),
        (Operator.LESS_THAN, 2, 1, False),
        (Operator.GREATER_THAN, 2.5, 2, True),
        (Operator.GREATER_THAN, 1, 1.5, False),
    ],
)
def test_numeric_operators(op, lhs, rhs, expected):
    result = apply_operator(op, lhs, rhs)
    assert result == expected
    assert type(result) is type(expected)


def test_float_equality_uses_epsilon():
    assert apply_operator(Operator.EQUAL, 1.0000000001, 1.0) is True
    assert apply_operator(Operator.EQUAL, 1.0, 2.0) is False
    assert apply_operator(Operator.NOT_EQUAL, 1.0000000001, 1.0) is False
    assert apply_operator(Operator.NOT_EQUAL, 1.0, 2.0) is True


def test_float_epsilon_applies_inside_lists():
    assert apply_operator(Operator.EQUAL, [1.0, [2.0]], [1.0000000001, [2.0]]) is True


@pytest.mark.parametrize(
    "lhs,rhs,expected",
    [
        ("ab", "ab", True),
        ("ab", "ba", False),
        (Char("a"), Char("a"), True),
        (Char("a"), "a", False),
        ([1, [2, 3]], [1, [2, 3]], True),
        ([1, 2], [1, 2, 3], False),
        (True, True, True),
        (True, 1, False),
        (1, 1.0, False),
        (Null, Null, True),
        (Null, 0, False),
    ],
)
def test_structural_equality(lhs, rhs, expected):
    assert apply_operator(Operator.EQUAL, lhs, rhs) is expected
    assert apply_operator(Operator.NOT_EQUAL, lhs, rhs) is (not expected)


@pytest.mark.parametrize(
    "op,lhs,rhs",
    [
        (Operator.ADD, "a", "b"),
        (Operator.ADD, 1, "b"),
        (Operator.SUB, [1], [1]),
        (Operator.MUL, True, 2),
        (Operator.LESS_THAN, Char("a"), Char("b")),
        (Operator.GREATER_THAN, Null, 1),
    ],
)
def test_unsupported_pairs_have_no_result(op, lhs, rhs):
    assert apply_operator(op, lhs, rhs) is NotImplemented


def test_integer_division_by_zero():
    with pytest.raises(RustlArithmeticError, match="Division by zero"):
        apply_operator(Operator.DIV, 1, 0)


def test_float_division_by_zero_follows_ieee():
    assert apply_operator(Operator.DIV, 1.0, 0.0) == math.inf
    assert apply_operator(Operator.DIV, -1.0, 0) == -math.inf
    assert math.isnan(apply_operator(Operator.DIV, 0.0, 0.0))


def test_integer_overflow_is_an_error():
    with pytest.raises(RustlArithmeticError, match="Integer overflow"):
        apply_operator(Operator.ADD, INT_MAX, 1)
    with pytest.raises(RustlArithmeticError):
        apply_operator(Operator.DIV, INT_MIN, -1)


@given(i32, i32)
def test_add_matches_python_within_range(a, b):
    if INT_MIN <= a + b <= INT_MAX:
        assert apply_operator(Operator.ADD, a, b) == a + b
    else:
        with pytest.raises(RustlArithmeticError):
            apply_operator(Operator.ADD, a, b)


@given(i32, i32.filter(lambda b: b != 0))
def test_division_truncates_toward_zero(a, b):
    if a == INT_MIN and b == -1:
        return
    q = apply_operator(Operator.DIV, a, b)
    assert abs(q) == abs(a) // abs(b)
    assert q == 0 or (q < 0) == ((a < 0) != (b < 0))
