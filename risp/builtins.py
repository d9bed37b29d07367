from __future__ import annotations

import operator
from functools import reduce, wraps
from typing import Any, Callable, Optional

import httpx

from risp.errors import RispArithmeticError, RispTypeError
from risp.evaluation.apply import apply, is_function
from risp.evaluation.evaluator import evaluate
from risp.http import make_httpget
from risp.types import Environment, Primitive, Symbol


def is_number(value: Any) -> bool:
    # bool subclasses int but is not a number here
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def is_integer(value: Any) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


def _numbers(name: str, args: list[Any]) -> list[Any]:
    for arg in args:
        if not is_number(arg):
            raise RispTypeError(name, "a number", arg)
    return args


def _float_safe(name: str):
    """Turn OverflowError (int too large for a float) into RispArithmeticError."""

    def decorator(fn):
        @wraps(fn)
        def wrapper(env: Environment, args: list[Any]) -> Any:
            try:
                return fn(env, args)
            except OverflowError:
                raise RispArithmeticError(name, "integer too large to convert to float") from None

        return wrapper

    return decorator


# -------------------------------
# Arithmetic
# -------------------------------
@_float_safe("+")
def add(env: Environment, args: list[Any]) -> Any:
    return sum(_numbers("+", args))


@_float_safe("-")
def sub(env: Environment, args: list[Any]) -> Any:
    # first operand minus the sum of the rest, so (- x) is x
    first, *rest = _numbers("-", args)
    return first - sum(rest)


@_float_safe("*")
def mul(env: Environment, args: list[Any]) -> Any:
    return reduce(operator.mul, _numbers("*", args), 1)


@_float_safe("/")
def div(env: Environment, args: list[Any]) -> float:
    nums = _numbers("/", args)
    if len(nums) == 1:
        nums = [1, *nums]
    result = float(nums[0])
    try:
        for x in nums[1:]:
            result /= x
    except ZeroDivisionError:
        raise RispArithmeticError("/") from None
    return result


# -------------------------------
# Comparison
# -------------------------------
def _chain(name: str, check: Callable[[Any, Any], bool]) -> Callable[[Environment, list[Any]], bool]:
    @_float_safe(name)
    def compare(env: Environment, args: list[Any]) -> bool:
        nums = _numbers(name, args)
        return all(check(a, b) for a, b in zip(nums, nums[1:]))

    compare.__name__ = f"compare_{name}"
    return compare


def is_equal(a: Any, b: Any) -> bool:
    if is_number(a) or is_number(b):
        return is_number(a) and is_number(b) and a == b
    if isinstance(a, list) and isinstance(b, list):
        return len(a) == len(b) and all(is_equal(x, y) for x, y in zip(a, b))
    return type(a) is type(b) and a == b


def equals(env: Environment, args: list[Any]) -> bool:
    first = args[0]
    return all(is_equal(first, other) for other in args[1:])


# -------------------------------
# Iteration and sequences
# -------------------------------
def repeat(env: Environment, args: list[Any]) -> list[Any]:
    fn, items = args
    if not is_function(fn):
        raise RispTypeError("repeat", "a function", fn)
    if not isinstance(items, list):
        raise RispTypeError("repeat", "a list", items)
    return [apply(fn, [item], env, evaluate) for item in items]


def num(env: Environment, args: list[Any]) -> list[int]:
    for arg in args:
        if not is_integer(arg):
            raise RispTypeError("num", "an integer", arg)
    stop = args[0]
    start = args[1] if len(args) == 2 else 0
    return list(range(start, stop))


def list_builtin(env: Environment, args: list[Any]) -> list[Any]:
    return list(args)


def _non_empty_list(name: str, value: Any) -> list[Any]:
    if not isinstance(value, list):
        raise RispTypeError(name, "a list", value)
    if not value:
        raise RispTypeError(name, "a non-empty list", value)
    return value


def car(env: Environment, args: list[Any]) -> Any:
    return _non_empty_list("car", args[0])[0]


def cdr(env: Environment, args: list[Any]) -> list[Any]:
    return _non_empty_list("cdr", args[0])[1:]


# -------------------------------
# Registration
# -------------------------------
def register(env: Environment, transport: Optional[httpx.BaseTransport] = None) -> None:
    primitives = [
        Primitive("+", add),
        Primitive("-", sub, 1),
        Primitive("*", mul),
        Primitive("/", div, 1),
        Primitive("=", equals, 1),
        Primitive("<", _chain("<", operator.lt), 1),
        Primitive("<=", _chain("<=", operator.le), 1),
        Primitive(">", _chain(">", operator.gt), 1),
        Primitive(">=", _chain(">=", operator.ge), 1),
        Primitive("repeat", repeat, 2, 2),
        Primitive("num", num, 1, 2),
        Primitive("list", list_builtin),
        Primitive("car", car, 1, 1),
        Primitive("cdr", cdr, 1, 1),
        make_httpget(transport),
    ]
    env.update({Symbol(p.name): p for p in primitives})
