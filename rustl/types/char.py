from __future__ import annotations


class Char:
    """A single unicode scalar value, kept distinct from one-character strings."""

    __slots__ = ("c",)

    def __init__(self, c: str):
        if len(c) != 1:
            raise ValueError(f"Char requires exactly one character, got {c!r}")
        self.c = c

    def __eq__(self, other: object) -> bool:
        return isinstance(other, Char) and self.c == other.c

    def __hash__(self) -> int:
        return hash(("char", self.c))

    def __repr__(self):
        return f"Char({self.c!r})"

    def __str__(self):
        return self.c
