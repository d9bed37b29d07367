from __future__ import annotations

from typing import Callable, Optional

from risp import LispValue
from risp.errors import RispArityError
from risp.types.environment import Environment

PrimitiveFn = Callable[[Environment, list[LispValue]], LispValue]


class Primitive:
    """A named builtin implemented in Python.

    `fn` is called as fn(env, args) with already-evaluated arguments.
    `max_args=None` means variadic.
    """

    __slots__ = ("name", "fn", "min_args", "max_args")

    def __init__(
        self,
        name: str,
        fn: PrimitiveFn,
        min_args: int = 0,
        max_args: Optional[int] = None,
    ):
        self.name = name
        self.fn = fn
        self.min_args = min_args
        self.max_args = max_args

    def _expected(self) -> str:
        if self.max_args is None:
            return f"at least {self.min_args}"
        if self.min_args == self.max_args:
            return str(self.min_args)
        return f"{self.min_args} to {self.max_args}"

    def check_arity(self, count: int) -> None:
        if count < self.min_args or (self.max_args is not None and count > self.max_args):
            raise RispArityError(self.name, self._expected(), count)

    def __call__(self, env: Environment, args: list[LispValue]) -> LispValue:
        self.check_arity(len(args))
        return self.fn(env, args)

    def __repr__(self) -> str:
        return f"<primitive {self.name}>"

    def __str__(self) -> str:
        return repr(self)
