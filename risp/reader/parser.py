"""
  Risp reader

Consumes the token stream from `lex` and builds one expression per top-level
form. Expressions use plain Python values where possible:

    - lists -> Python list
    - integers -> int, floats -> float
    - true / false -> bool
    - strings -> str
    - :name -> Keyword
    - everything else -> Symbol
"""

from __future__ import annotations

import re
from typing import Iterator, Optional

from risp import SExpression
from risp.errors import RispParseError
from risp.reader.lexer import Token, lex
from risp.types.symbol import Keyword, Symbol

INTEGER_RE = re.compile(r"-?\d+")
FLOAT_RE = re.compile(r"-?\d+\.\d+")

BOOLEANS = {"true": True, "false": False}


def parse_atom(text: str) -> SExpression:
    if text in BOOLEANS:
        return BOOLEANS[text]
    if INTEGER_RE.fullmatch(text):
        return int(text)
    if FLOAT_RE.fullmatch(text):
        return float(text)
    if text.startswith(":"):
        return Keyword(text)
    return Symbol(text)


class TokenStream:
    def __init__(self, token_iter: Iterator[Token]):
        self.tokens = iter(token_iter)
        self.buffer: list[Token] = []

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
        tok_type, tok_val = self.advance()
        if tok_type is None:
            raise RispParseError("unexpected end of input")

        if tok_type == "lparen":
            items = []
            while True:
                next_type, _ = self.peek()
                if next_type is None:
                    raise RispParseError("unbalanced parentheses")
                if next_type == "rparen":
                    self.advance()
                    return items
                items.append(self.parse_expr())

        if tok_type == "rparen":
            raise RispParseError("unexpected close")

        if tok_type == "string":
            return tok_val

        return parse_atom(tok_val)

    def parse_all(self) -> Iterator[SExpression]:
        while True:
            tok_type, _ = self.peek()
            if tok_type is None:
                break
            yield self.parse_expr()


def read(source: str) -> list[SExpression]:
    """Read every top-level form in one line of source."""
    return list(TokenStream(lex(source)).parse_all())
