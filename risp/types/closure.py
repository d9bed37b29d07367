"""Closure representation and argument binding for Risp."""

from __future__ import annotations

from io import StringIO

from risp import SExpression, LispValue
from risp.errors import RispArityError
from risp.types.environment import Environment
from risp.types.symbol import Symbol


class Closure:
    """A first-class function with formal parameters, one body form, and the
    environment captured where `fn` was evaluated."""

    __slots__ = ("formals", "body", "env")

    def __init__(self, formals: list[Symbol], body: SExpression, env: Environment):
        self.formals: list[Symbol] = formals
        self.body: SExpression = body
        self.env: Environment = env

    @property
    def name(self) -> str:
        return f"fn ({' '.join(str(f) for f in self.formals)})"

    def __str__(self) -> str:
        from risp.printer import to_source

        with StringIO() as buffer:
            buffer.write("(fn (")
            buffer.write(" ".join(str(f) for f in self.formals))
            buffer.write(") ")
            buffer.write(to_source(self.body))
            buffer.write(")")
            return buffer.getvalue()

    def __repr__(self) -> str:
        return str(self)

    def extend_env(self, args: list[LispValue]) -> Environment:
        """Bind argument values to the formals in a child of the captured env."""
        if len(args) != len(self.formals):
            raise RispArityError(self.name, str(len(self.formals)), len(args))
        new_env = self.env.child()
        for formal, value in zip(self.formals, args):
            new_env.define(formal, value)
        return new_env
