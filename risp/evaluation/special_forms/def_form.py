from loguru import logger

from risp import EvaluatorFn, LispValue, SExpression
from risp.errors import RispArityError, RispTypeError
from risp.printer import to_lisp_string
from risp.types.environment import Environment
from risp.types.symbol import Symbol


def def_form(
    tail: list[SExpression],
    env: Environment,
    evaluate_fn: EvaluatorFn,
) -> LispValue:
    """
    (def name value)
    Binds in the current frame, overwriting an existing binding there.
    Returns the bound value.
    """
    if len(tail) != 2:
        raise RispArityError("def", "2", len(tail))

    name, val_expr = tail
    if not isinstance(name, Symbol):
        raise RispTypeError("def", "a symbol", name)

    value = evaluate_fn(val_expr, env)
    env.define(name, value)
    logger.opt(lazy=True).debug("def {} = {}", lambda: name, lambda: to_lisp_string(value))
    return value
