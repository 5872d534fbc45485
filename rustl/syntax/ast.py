"""Abstract syntax tree for Rustl programs.

Nodes are frozen dataclasses and every sequence is a tuple, so a function body
captured at definition time can never be changed afterwards.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Optional, Union


class Operator(Enum):
    ADD = "+"
    SUB = "-"
    MUL = "*"
    DIV = "/"
    LESS_THAN = "<"
    GREATER_THAN = ">"
    EQUAL = "=="
    NOT_EQUAL = "!="

    def __str__(self):
        return self.value


# --- Expressions ---

@dataclass(frozen=True, slots=True)
class IntLiteral:
    value: int


@dataclass(frozen=True, slots=True)
class FloatLiteral:
    value: float


@dataclass(frozen=True, slots=True)
class StringLiteral:
    value: str


@dataclass(frozen=True, slots=True)
class BoolLiteral:
    value: bool


@dataclass(frozen=True, slots=True)
class CharLiteral:
    value: str


@dataclass(frozen=True, slots=True)
class Identifier:
    name: str


@dataclass(frozen=True, slots=True)
class Call:
    function: str
    arguments: tuple[Expression, ...] = ()


@dataclass(frozen=True, slots=True)
class BinaryOperation:
    lhs: Expression
    operator: Operator
    rhs: Expression


@dataclass(frozen=True, slots=True)
class CompoundOperation:
    """`name op= rhs` used as an expression: rebinds `name` and yields the result."""
    name: str
    operator: Operator
    rhs: Expression


@dataclass(frozen=True, slots=True)
class ListItem:
    expression: Expression
    is_spread: bool = False
    is_pack: bool = False


@dataclass(frozen=True, slots=True)
class ListLiteral:
    items: tuple[ListItem, ...] = ()


@dataclass(frozen=True, slots=True)
class Index:
    name: str
    index: Expression


@dataclass(frozen=True, slots=True)
class Comprehension:
    result: Expression
    var: str
    source: Expression


Expression = Union[
    IntLiteral,
    FloatLiteral,
    StringLiteral,
    BoolLiteral,
    CharLiteral,
    Identifier,
    Call,
    BinaryOperation,
    CompoundOperation,
    ListLiteral,
    Index,
    Comprehension,
]


# --- Statements ---

@dataclass(frozen=True, slots=True)
class ExpressionStatement:
    expression: Expression


@dataclass(frozen=True, slots=True)
class Assignment:
    lhs: Expression
    rhs: Expression


@dataclass(frozen=True, slots=True)
class CompoundAssignment:
    name: str
    operator: Operator
    rhs: Expression


@dataclass(frozen=True, slots=True)
class ElifBranch:
    condition: Expression
    body: tuple[Statement, ...]


@dataclass(frozen=True, slots=True)
class If:
    condition: Expression
    body: tuple[Statement, ...]
    elif_branches: tuple[ElifBranch, ...] = ()
    else_body: Optional[tuple[Statement, ...]] = None


@dataclass(frozen=True, slots=True)
class While:
    condition: Expression
    body: tuple[Statement, ...]


@dataclass(frozen=True, slots=True)
class For:
    var: str
    iterable: Expression
    body: tuple[Statement, ...]


@dataclass(frozen=True, slots=True)
class FunctionDefinition:
    name: str
    params: tuple[str, ...]
    body: tuple[Statement, ...]
    return_expression: Optional[Expression] = None


@dataclass(frozen=True, slots=True)
class Import:
    path: str


Statement = Union[
    ExpressionStatement,
    Assignment,
    CompoundAssignment,
    If,
    While,
    For,
    FunctionDefinition,
    Import,
]


@dataclass(frozen=True, slots=True)
class Program:
    statements: tuple[Statement, ...] = ()
