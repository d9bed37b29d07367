from risp import EvaluatorFn, LispValue, SExpression
from risp.errors import RispArityError
from risp.types.environment import Environment


def is_truthy(value: LispValue) -> bool:
    """false, zero, "" and () are falsy; every other value is truthy."""
    match value:
        case bool():
            return value
        case int() | float():
            return value != 0
        case str() | list():
            return len(value) > 0
        case _:
            return True


def if_form(
    tail: list[SExpression],
    env: Environment,
    evaluate_fn: EvaluatorFn,
) -> LispValue:
    if len(tail) != 3:
        raise RispArityError("if", "3", len(tail))

    cond, then_expr, else_expr = tail
    if is_truthy(evaluate_fn(cond, env)):
        return evaluate_fn(then_expr, env)
    return evaluate_fn(else_expr, env)
