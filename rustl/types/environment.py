"""Runtime environment for Rustl.

An Environment is one flat frame mapping identifier text to evaluated values.
There is no `outer` chain: blocks share their enclosing frame, and a function
call runs in a duplicate of the caller's frame instead of a nested scope.

Values stored here are never mutated in place (index assignment rebinds a
fresh list), so a shallow copy of the mapping is a fully independent frame.
"""

from __future__ import annotations

from io import StringIO
from typing import Iterator, Optional

from rustl import Value
from rustl.types.errors import RustlUndefinedVariable

# Assigning to this name discards the value; it can never be read back.
DISCARD = "_"


class Environment:
    """Flat mapping from names to Rustl values for a single call frame."""

    __slots__ = ("vars",)

    def __init__(self, bindings: Optional[dict[str, Value]] = None):
        self.vars: dict[str, Value] = dict(bindings) if bindings else {}

    def define(self, name: str, value: Value) -> None:
        """Bind `name` to `value`, replacing any existing binding."""
        if name == DISCARD:
            return
        self.vars[name] = value

    def get(self, name: str) -> Optional[Value]:
        """Return the value bound to `name`, or None when unbound."""
        if name == DISCARD:
            return None
        return self.vars.get(name)

    def lookup(self, name: str) -> Value:
        """Look up the value bound to `name`.

        Raises RustlUndefinedVariable if not found.
        """
        if name == DISCARD or name not in self.vars:
            raise RustlUndefinedVariable(f"'{name}' is not defined")
        return self.vars[name]

    def duplicate(self) -> Environment:
        """Independent copy of this frame; changes to either never reach the other."""
        return Environment(self.vars)

    def update(self, mapping: dict[str, Value]) -> None:
        """Bulk-define a mapping of name -> value in this frame."""
        for k, v in mapping.items():
            self.define(k, v)

    def __contains__(self, name: object) -> bool:
        return name != DISCARD and name in self.vars

    def __iter__(self) -> Iterator[str]:
        return iter(self.vars)

    def __len__(self) -> int:
        return len(self.vars)

    def __str__(self) -> str:
        with StringIO() as buffer:
            buffer.write("{")
            first = True
            for k, v in self.vars.items():
                if not first:
                    buffer.write(", ")
                buffer.write(f"{k}: {v!r}")
                first = False
            buffer.write("}")
            return buffer.getvalue()

    def __repr__(self) -> str:
        return f"<Environment {self}>"
