"""Core evaluator for the Risp interpreter.

Literals evaluate to themselves, symbols are looked up, lists either dispatch
to a special form or are applied as function calls.
"""

from __future__ import annotations

from risp import LispValue, SExpression
from risp.errors import RispNotCallable, RispTypeError
from risp.evaluation.apply import apply, is_function
from risp.evaluation.special_forms import SPECIAL_FORMS
from risp.types.closure import Closure
from risp.types.environment import Environment
from risp.types.primitive import Primitive
from risp.types.structured import Structured
from risp.types.symbol import Keyword, Symbol


def evaluate(expr: SExpression, env: Environment) -> LispValue:
    match expr:
        # bool is an int subclass; both are literals either way
        case bool() | int() | float() | str() | Keyword() | Structured():
            return expr

        case Closure() | Primitive():
            return expr

        case Symbol():
            return env.lookup(expr)

        case []:
            raise RispNotCallable(expr, expr)

        case [Symbol() as head, *tail] if head in SPECIAL_FORMS:
            return SPECIAL_FORMS[head](tail, env, evaluate)

        case [head, *tail]:
            fn = evaluate(head, env)
            if not is_function(fn):
                raise RispNotCallable(fn, expr)
            args = [evaluate(arg, env) for arg in tail]
            return apply(fn, args, env, evaluate, expr)

    raise RispTypeError("evaluate", "an expression", expr)
