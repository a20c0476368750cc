"""
  AAQZ text reader

Turns program text into the surface tree data accepted by aaqz.reader.parser:

    - integers        -> int
    - "strings"       -> str (backslash escapes decoded)
    - other atoms     -> Symbol
    - ( ), [ ], { }   -> list (any bracket pair, closer must match opener)
    - ; comment       -> skipped to end of line

The reader knows nothing about `if` or `=>`; those are recognised by the parser.
"""

from __future__ import annotations

import ast
import re
from typing import Iterator, Optional

from aaqz import SExpression
from aaqz.types.errors import AAQZSyntaxError
from aaqz.types.symbol import Symbol


TOKEN_RE = re.compile(
    r"\s*(?:"
    r"(?P<comment>;[^\n]*)"  # single-line comment
    r"|(?P<lparen>[(\[{])"  # ( [ {
    r"|(?P<rparen>[)\]}])"  # ) ] }
    r'|(?P<string>"(?:\\.|[^\\"])*")'  # double-quoted strings
    r'|(?P<unterminated>")'  # an opening quote with no closing one
    r'|(?P<symbol>[^\s()\[\]{}";]+)'  # fallback: numbers and symbols
    r")",
    re.DOTALL,
)

INT_RE = re.compile(r"[+-]?\d+")

CLOSERS: dict[str, str] = {"(": ")", "[": "]", "{": "}"}


def lex(source: str) -> Iterator[tuple[str, str]]:
    """Token generator: yields (token_type, token_value) tuples."""
    pos = 0
    n = len(source)
    while pos < n:
        m = TOKEN_RE.match(source, pos)
        if m is None or m.end() == pos:
            # only trailing whitespace left
            if source[pos:].strip() == "":
                return
            raise AAQZSyntaxError(f"unexpected character at {pos}: {source[pos]!r}")
        pos = m.end()
        kind = m.lastgroup
        if kind == "comment":
            continue
        if kind == "unterminated":
            raise AAQZSyntaxError(f"unterminated string at {m.start(kind)}")
        yield kind, m.group(kind)


class TokenStream:
    def __init__(self, token_iter: Iterator[tuple[str, str]]):
        self.tokens = iter(token_iter)
        self.buffer: list[tuple[str, str]] = []

    def peek(self) -> tuple[Optional[str], Optional[str]]:
        if not self.buffer:
            try:
                self.buffer.append(next(self.tokens))
            except StopIteration:
                return None, None
        return self.buffer[0]

    def advance(self) -> tuple[Optional[str], Optional[str]]:
        if self.buffer:
            return self.buffer.pop(0)
        return next(self.tokens, (None, None))

    def parse_expr(self) -> SExpression:
        """Read one datum, or return None at end of input."""
        tok_type, tok_val = self.advance()
        if tok_type is None:
            return None

        if tok_type == "symbol":
            if INT_RE.fullmatch(tok_val):
                return int(tok_val)
            return Symbol(tok_val)

        if tok_type == "string":
            try:
                # literal_eval rejects raw line breaks inside a string literal
                return ast.literal_eval(tok_val.replace("\n", "\\n").replace("\r", "\\r"))
            except (SyntaxError, ValueError) as e:
                raise AAQZSyntaxError(f"invalid string literal {tok_val}: {e}") from e

        if tok_type == "lparen":
            closer = CLOSERS[tok_val]
            items = []
            while True:
                next_type, next_val = self.peek()
                if next_type is None:
                    raise AAQZSyntaxError(f"unmatched '{tok_val}'")
                if next_type == "rparen":
                    self.advance()
                    if next_val != closer:
                        raise AAQZSyntaxError(
                            f"expected '{closer}' to close '{tok_val}' but found '{next_val}'"
                        )
                    return items
                items.append(self.parse_expr())

        if tok_type == "rparen":
            raise AAQZSyntaxError(f"unexpected '{tok_val}'")

        raise AAQZSyntaxError(f"unknown token: {tok_type} {tok_val}")

    def parse_all(self) -> Iterator[SExpression]:
        while True:
            tok_type, _ = self.peek()
            if tok_type is None:
                break
            yield self.parse_expr()


def read(source: str) -> list[SExpression]:
    """Read every top-level datum in `source`."""
    return list(TokenStream(lex(source)).parse_all())
