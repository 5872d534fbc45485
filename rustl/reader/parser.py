"""
  Rustl Reader, Lexer and Parser

- Streaming lexer: `lex` yields tokens lazily, tracking line numbers
- Recursive-descent parser over a buffered TokenStream
- Emits the frozen dataclass nodes from rustl.syntax.ast

    - 1, -2          -> IntLiteral (32-bit range checked)
    - 1.5            -> FloatLiteral
    - "text"         -> StringLiteral
    - 'c'            -> CharLiteral
    - true / false   -> BoolLiteral
    - [a, ...b, c*]  -> ListLiteral of ListItem (spread / pack markers)
    - [e for x in s] -> Comprehension
    - f(a, b)        -> Call,   xs[i] -> Index
    - x += e         -> CompoundOperation (CompoundAssignment as a statement)
"""

from __future__ import annotations

import re
from typing import Iterator, NamedTuple, Optional, Iterable

from rustl.syntax.ast import (
    Assignment,
    BinaryOperation,
    BoolLiteral,
    Call,
    CharLiteral,
    Comprehension,
    CompoundAssignment,
    CompoundOperation,
    ElifBranch,
    Expression,
    ExpressionStatement,
    FloatLiteral,
    For,
    FunctionDefinition,
    Identifier,
    If,
    Import,
    Index,
    IntLiteral,
    ListItem,
    ListLiteral,
    Operator,
    Program,
    Statement,
    StringLiteral,
    While,
)
from rustl.types import INT_MAX, INT_MIN
from rustl.types.errors import RustlSyntaxError


TOKEN_RE = re.compile(
    r"(?P<comment>//[^\n]*)"  # single-line comment
    r"|(?P<float>\d+\.\d+)"  # 1.5
    r"|(?P<int>\d+)"  # 42
    r'|(?P<string>"(?:\\.|[^\\"])*")'  # double-quoted strings
    r"|(?P<char>'(?:\\.|[^\\'])')"  # character literals
    r"|(?P<ellipsis>\.\.\.)"  # spread marker
    r"|(?P<op>==|!=|\+=|-=|\*=|/=|[-+*/<>=])"  # operators
    r"|(?P<punct>[()\[\]{},;])"  # punctuation
    r"|(?P<name>[A-Za-z_][A-Za-z0-9_]*)",  # identifiers and keywords
    re.DOTALL,
)

WHITESPACE_RE = re.compile(r"\s+")

KEYWORDS = frozenset(
    {"let", "fn", "return", "if", "elif", "else", "while", "for", "in", "import", "true", "false"}
)

ESCAPES: dict[str, str] = {
    "n": "\n",
    "t": "\t",
    "r": "\r",
    "0": "\0",
    "\\": "\\",
    '"': '"',
    "'": "'",
}

BINARY_OPERATORS: dict[str, Operator] = {op.value: op for op in Operator}

COMPOUND_OPERATORS: dict[str, Operator] = {
    "+=": Operator.ADD,
    "-=": Operator.SUB,
    "*=": Operator.MUL,
    "/=": Operator.DIV,
}

COMPARISON = (Operator.LESS_THAN, Operator.GREATER_THAN, Operator.EQUAL, Operator.NOT_EQUAL)
ADDITIVE = (Operator.ADD, Operator.SUB)
MULTIPLICATIVE = (Operator.MUL, Operator.DIV)


class Token(NamedTuple):
    type: str
    value: str
    line: int


def unescape(text: str) -> str:
    return re.sub(r"\\(.)", lambda m: ESCAPES.get(m.group(1), m.group(1)), text, flags=re.DOTALL)


def lex(source: str) -> Iterator[Token]:
    """Token generator: yields Token(type, value, line) tuples, comments dropped."""
    pos = 0
    line = 1
    n = len(source)

    while pos < n:
        ws = WHITESPACE_RE.match(source, pos)
        if ws:
            line += ws.group().count("\n")
            pos = ws.end()
            continue

        m = TOKEN_RE.match(source, pos)
        if not m:
            raise RustlSyntaxError(f"Line {line}: unexpected character {source[pos]!r}")
        kind = m.lastgroup
        value = m.group()
        pos = m.end()

        if kind == "comment":
            continue
        if kind == "name" and value in KEYWORDS:
            kind = "keyword"
        yield Token(kind, value, line)
        line += value.count("\n")


class TokenStream:
    def __init__(self, token_iter: Iterable[Token]):
        self.tokens = iter(token_iter)
        self.buffer: list[Token] = []
        self.last_line = 1

    def peek(self, offset: int = 0) -> Token:
        while len(self.buffer) <= offset:
            try:
                tok = next(self.tokens)
            except StopIteration:
                return Token("eof", "", self.last_line)
            self.last_line = tok.line
            self.buffer.append(tok)
        return self.buffer[offset]

    def advance(self) -> Token:
        tok = self.peek()
        if self.buffer:
            self.buffer.pop(0)
        return tok

    def check(self, tok_type: str, value: Optional[str] = None, offset: int = 0) -> bool:
        tok = self.peek(offset)
        return tok.type == tok_type and (value is None or tok.value == value)

    def match(self, tok_type: str, value: Optional[str] = None) -> bool:
        """Consume the next token if it matches."""
        if self.check(tok_type, value):
            self.advance()
            return True
        return False

    def expect(self, tok_type: str, value: Optional[str] = None) -> Token:
        tok = self.peek()
        if not self.check(tok_type, value):
            wanted = repr(value) if value is not None else tok_type
            got = repr(tok.value) if tok.type != "eof" else "end of input"
            raise RustlSyntaxError(f"Line {tok.line}: expected {wanted}, got {got}")
        return self.advance()

    # ------------------------
    # Statements
    # ------------------------

    def parse_program(self) -> Program:
        statements = []
        while not self.check("eof"):
            statements.append(self.parse_statement())
        return Program(tuple(statements))

    def parse_statement(self) -> Statement:
        tok = self.peek()

        if tok.type == "keyword":
            if tok.value == "let":
                self.advance()
                target = self.parse_expr()
                self.expect("op", "=")
                rhs = self.parse_expr()
                self.expect("punct", ";")
                return Assignment(target, rhs)
            if tok.value == "fn":
                return self.parse_function()
            if tok.value == "if":
                return self.parse_if()
            if tok.value == "while":
                self.advance()
                condition = self.parse_expr()
                return While(condition, self.parse_block())
            if tok.value == "for":
                self.advance()
                var = self.expect("name").value
                self.expect("keyword", "in")
                iterable = self.parse_expr()
                return For(var, iterable, self.parse_block())
            if tok.value == "import":
                self.advance()
                path = unescape(self.expect("string").value[1:-1])
                self.expect("punct", ";")
                return Import(path)
            if tok.value == "return":
                raise RustlSyntaxError(
                    f"Line {tok.line}: 'return' is only allowed at the end of a function body"
                )

        # name op= rhs;
        if tok.type == "name" and self.peek(1).type == "op" and self.peek(1).value in COMPOUND_OPERATORS:
            self.advance()
            op = COMPOUND_OPERATORS[self.advance().value]
            rhs = self.parse_expr()
            self.expect("punct", ";")
            return CompoundAssignment(tok.value, op, rhs)

        expr = self.parse_expr()
        if self.match("op", "="):
            rhs = self.parse_expr()
            self.expect("punct", ";")
            return Assignment(expr, rhs)
        self.expect("punct", ";")
        return ExpressionStatement(expr)

    def parse_block(self) -> tuple[Statement, ...]:
        self.expect("punct", "{")
        statements = []
        while not self.check("punct", "}"):
            if self.check("eof"):
                raise RustlSyntaxError(f"Line {self.peek().line}: unmatched '{{'")
            statements.append(self.parse_statement())
        self.advance()
        return tuple(statements)

    def parse_if(self) -> If:
        self.expect("keyword", "if")
        condition = self.parse_expr()
        body = self.parse_block()
        branches = []
        while self.match("keyword", "elif"):
            elif_condition = self.parse_expr()
            branches.append(ElifBranch(elif_condition, self.parse_block()))
        else_body = None
        if self.match("keyword", "else"):
            else_body = self.parse_block()
        return If(condition, body, tuple(branches), else_body)

    def parse_function(self) -> FunctionDefinition:
        self.expect("keyword", "fn")
        name = self.expect("name").value
        self.expect("punct", "(")
        params = []
        if not self.check("punct", ")"):
            params.append(self.expect("name").value)
            while self.match("punct", ","):
                params.append(self.expect("name").value)
        self.expect("punct", ")")

        self.expect("punct", "{")
        body = []
        return_expression = None
        while not self.match("punct", "}"):
            if self.check("eof"):
                raise RustlSyntaxError(f"Line {self.peek().line}: unmatched '{{' in fn {name}")
            if self.match("keyword", "return"):
                return_expression = self.parse_expr()
                self.expect("punct", ";")
                if not self.check("punct", "}"):
                    raise RustlSyntaxError(
                        f"Line {self.peek().line}: 'return' must be the last statement of fn {name}"
                    )
                continue
            body.append(self.parse_statement())
        return FunctionDefinition(name, tuple(params), tuple(body), return_expression)

    # ------------------------
    # Expressions
    # ------------------------

    def parse_expr(self) -> Expression:
        return self._parse_binary(COMPARISON, self._parse_additive)

    def _parse_additive(self) -> Expression:
        return self._parse_binary(ADDITIVE, self._parse_multiplicative)

    def _parse_multiplicative(self) -> Expression:
        return self._parse_binary(MULTIPLICATIVE, self.parse_unary)

    def _parse_binary(self, operators, operand) -> Expression:
        left = operand()
        while True:
            tok = self.peek()
            if tok.type != "op" or BINARY_OPERATORS.get(tok.value) not in operators:
                return left
            # `x*` right before `,` or `]` is a pack marker, not a multiplication
            if tok.value == "*" and (self.check("punct", ",", 1) or self.check("punct", "]", 1)):
                return left
            self.advance()
            left = BinaryOperation(left, BINARY_OPERATORS[tok.value], operand())

    def parse_unary(self) -> Expression:
        if self.match("op", "-"):
            tok = self.peek()
            if tok.type == "int":
                self.advance()
                return IntLiteral(self._int_value(-int(tok.value), tok))
            if tok.type == "float":
                self.advance()
                return FloatLiteral(-float(tok.value))
            return BinaryOperation(IntLiteral(0), Operator.SUB, self.parse_unary())
        return self.parse_primary()

    def parse_primary(self) -> Expression:
        tok = self.peek()

        if tok.type == "int":
            self.advance()
            return IntLiteral(self._int_value(int(tok.value), tok))
        if tok.type == "float":
            self.advance()
            return FloatLiteral(float(tok.value))
        if tok.type == "string":
            self.advance()
            return StringLiteral(unescape(tok.value[1:-1]))
        if tok.type == "char":
            self.advance()
            return CharLiteral(unescape(tok.value[1:-1]))
        if tok.type == "keyword" and tok.value in ("true", "false"):
            self.advance()
            return BoolLiteral(tok.value == "true")

        if tok.type == "name":
            self.advance()
            name = tok.value
            if self.match("punct", "("):
                args = []
                if not self.check("punct", ")"):
                    args.append(self.parse_expr())
                    while self.match("punct", ","):
                        args.append(self.parse_expr())
                self.expect("punct", ")")
                return Call(name, tuple(args))
            if self.match("punct", "["):
                index = self.parse_expr()
                self.expect("punct", "]")
                return Index(name, index)
            nxt = self.peek()
            if nxt.type == "op" and nxt.value in COMPOUND_OPERATORS:
                self.advance()
                return CompoundOperation(name, COMPOUND_OPERATORS[nxt.value], self.parse_expr())
            return Identifier(name)

        if self.match("punct", "("):
            expr = self.parse_expr()
            self.expect("punct", ")")
            return expr

        if tok.type == "punct" and tok.value == "[":
            return self.parse_list()

        got = repr(tok.value) if tok.type != "eof" else "end of input"
        raise RustlSyntaxError(f"Line {tok.line}: unexpected {got}")

    def parse_list(self) -> Expression:
        self.expect("punct", "[")
        if self.match("punct", "]"):
            return ListLiteral(())

        first = self._parse_list_item()
        if self.check("keyword", "for") and not (first.is_spread or first.is_pack):
            self.advance()
            var = self.expect("name").value
            self.expect("keyword", "in")
            source = self.parse_expr()
            self.expect("punct", "]")
            return Comprehension(first.expression, var, source)

        items = [first]
        while self.match("punct", ","):
            if self.check("punct", "]"):
                break  # trailing comma
            items.append(self._parse_list_item())
        self.expect("punct", "]")
        return ListLiteral(tuple(items))

    def _parse_list_item(self) -> ListItem:
        is_spread = self.match("ellipsis")
        expr = self.parse_expr()
        is_pack = False
        if self.check("op", "*") and (self.check("punct", ",", 1) or self.check("punct", "]", 1)):
            self.advance()
            is_pack = True
        return ListItem(expr, is_spread, is_pack)

    @staticmethod
    def _int_value(value: int, tok: Token) -> int:
        if value < INT_MIN or value > INT_MAX:
            raise RustlSyntaxError(f"Line {tok.line}: integer literal {value} out of range")
        return value


def parse(source: str) -> Program:
    """Parse Rustl source text into a Program."""
    return TokenStream(lex(source)).parse_program()
