from risp import EvaluatorFn, LispValue, SExpression
from risp.errors import RispArityError, RispTypeError
from risp.types.closure import Closure
from risp.types.environment import Environment
from risp.types.symbol import Symbol


def fn_form(
    tail: list[SExpression],
    env: Environment,
    evaluate_fn: EvaluatorFn,
) -> LispValue:
    # (fn (params...) body) -- exactly one body form, no implicit sequencing
    if len(tail) != 2:
        raise RispArityError("fn", "2", len(tail))

    params, body = tail
    if not isinstance(params, list):
        raise RispTypeError("fn", "a parameter list", params)
    for param in params:
        if not isinstance(param, Symbol):
            raise RispTypeError("fn", "a symbol in the parameter list", param)

    return Closure(list(params), body, env)
