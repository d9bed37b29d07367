"""Application engine for Risp.

Centralizes function application so the evaluator and builtins that take
functions as arguments (e.g. repeat) share one set of rules:
- Primitive: check arity, then call with the runtime env and argument list.
- Closure: bind arguments in a child of the captured environment and
  evaluate the body there.
- Anything else is not callable.
"""

from risp import EvaluatorFn, LispValue, SExpression
from risp.errors import RispNotCallable
from risp.types.closure import Closure
from risp.types.environment import Environment
from risp.types.primitive import Primitive


def is_function(value: LispValue) -> bool:
    return isinstance(value, (Primitive, Closure))


def apply(
    head: LispValue,
    args: list[LispValue],
    env: Environment,
    evaluate_fn: EvaluatorFn,
    form: SExpression = None,
) -> LispValue:
    match head:
        case Primitive():
            return head(env, args)
        case Closure():
            new_env = head.extend_env(args)
            return evaluate_fn(head.body, new_env)
        case _:
            raise RispNotCallable(head, form)
