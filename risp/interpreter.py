from __future__ import annotations

from typing import Optional

import httpx
from loguru import logger

from risp import LispValue
from risp.errors import RispRecursionError
from risp.builtins import register
from risp.evaluation.evaluator import evaluate
from risp.printer import to_source
from risp.reader.lexer import lex
from risp.reader.parser import TokenStream
from risp.types.environment import Environment


class Interpreter:
    """
    Line-oriented interpreter for Risp source.
    Owns one root environment with every primitive registered. Each line is
    read on its own, so a form may not span lines and a malformed line does
    not affect the lines fed after it. Nesting is bounded by Python's
    recursion limit; exceeding it raises RispRecursionError.
    """

    def __init__(self, transport: Optional[httpx.BaseTransport] = None):
        self.env = Environment()
        register(self.env, transport=transport)

    def eval_all(self, source: str) -> list[LispValue]:
        """Evaluate every form in `source`, returning all of their values."""
        results = []
        # only \n ends a line; other Unicode line breaks may sit inside strings
        for line in source.split("\n"):
            line = line.removesuffix("\r")
            stream = TokenStream(lex(line))
            for expr in stream.parse_all():
                logger.opt(lazy=True).debug("eval {}", lambda: to_source(expr))
                try:
                    results.append(evaluate(expr, self.env))
                except RecursionError:
                    raise RispRecursionError(to_source(expr)) from None
        return results

    def eval(self, source: str) -> Optional[LispValue]:
        """Evaluate `source` and return the value of its last form (None if empty)."""
        results = self.eval_all(source)
        if not results:
            return None
        return results[-1]
