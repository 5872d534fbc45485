"""Function values for Rustl: host-provided natives and user definitions."""

from __future__ import annotations

from io import StringIO
from typing import Callable, Optional

from rustl import Value
from rustl.syntax.ast import Expression, Statement


class NativeFunction:
    """A built-in implemented in Python: `fn(args) -> Value`."""

    __slots__ = ("name", "fn")

    def __init__(self, name: str, fn: Callable[[list[Value]], Value]):
        self.name: str = name
        self.fn: Callable[[list[Value]], Value] = fn

    def __call__(self, args: list[Value]) -> Value:
        return self.fn(args)

    def __repr__(self) -> str:
        return f"<builtin {self.name}>"


class UserFunction:
    """A function defined in Rustl source.

    Name, parameters, body and return expression are captured by value when the
    definition runs. There is no closure environment: each call starts from a
    duplicate of the caller's frame.
    """

    __slots__ = ("name", "params", "body", "return_expression")

    def __init__(
        self,
        name: str,
        params: tuple[str, ...],
        body: tuple[Statement, ...],
        return_expression: Optional[Expression] = None,
    ):
        self.name: str = name
        self.params: tuple[str, ...] = tuple(params)
        self.body: tuple[Statement, ...] = tuple(body)
        self.return_expression: Optional[Expression] = return_expression

    def __eq__(self, other: object) -> bool:
        return (
            isinstance(other, UserFunction)
            and self.name == other.name
            and self.params == other.params
            and self.body == other.body
            and self.return_expression == other.return_expression
        )

    def __hash__(self) -> int:
        return hash((self.name, self.params))

    def __repr__(self) -> str:
        with StringIO() as buffer:
            buffer.write("<fn ")
            buffer.write(self.name)
            buffer.write("(")
            buffer.write(", ".join(self.params))
            buffer.write(")>")
            return buffer.getvalue()
