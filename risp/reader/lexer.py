"""
  Risp tokenizer

- Lazy: `lex` is a generator over (token_type, token_value) tuples.
- Token types: lparen, rparen, atom, string.
- `;` or `#` outside a string drops the rest of the line (any repetition).
- Strings are captured verbatim between double quotes; no escapes, and a
  string may not cross a line break.
"""

from __future__ import annotations

import re
from typing import Iterator

from risp.errors import RispLexError

Token = tuple[str, str]

TOKEN_RE = re.compile(
    r"(?P<comment>[;#][^\n]*)"  # comment to end of line
    r"|(?P<lparen>\()"  # (
    r"|(?P<rparen>\))"  # )
    r'|(?P<string>"[^"\n]*")'  # double-quoted string, verbatim
    r'|(?P<unterminated>"[^"\n]*)'  # opening quote with no close on this line
    r'|(?P<atom>[^\s()";#]+)'  # everything else up to a delimiter
)

WHITESPACE_RE = re.compile(r"\s+")


def lex(source: str) -> Iterator[Token]:
    """Token generator: yields (token_type, token_value) tuples."""
    pos = 0
    n = len(source)
    while pos < n:
        ws = WHITESPACE_RE.match(source, pos)
        if ws:
            pos = ws.end()
            continue

        m = TOKEN_RE.match(source, pos)
        if not m:
            raise RispLexError(f"Unexpected char at {pos}: {source[pos]!r}", source, pos)

        kind = m.lastgroup
        pos = m.end()
        if kind == "comment":
            continue
        if kind == "unterminated":
            raise RispLexError(
                f"Unterminated string literal starting at {m.start()}", source, m.start()
            )
        if kind == "string":
            yield "string", m.group()[1:-1]
        else:
            yield kind, m.group()
