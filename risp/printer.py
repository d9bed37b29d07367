"""Printed and value forms of Risp values.

Only strings differ between the two: the printed form is the quoted text, the
value form is the bare text. Lists print their elements in printed form,
separated by commas.
"""

from __future__ import annotations

from risp import LispValue, SExpression


def to_lisp_string(value: LispValue) -> str:
    match value:
        case bool():
            return "true" if value else "false"
        case str():
            return f'"{value}"'
        case list():
            return "(" + ",".join(to_lisp_string(v) for v in value) + ")"
        case float():
            return repr(value)
        case _:
            return str(value)


def to_value_string(value: LispValue) -> str:
    if isinstance(value, str):
        return value
    return to_lisp_string(value)


def to_source(expr: SExpression) -> str:
    """Render an unevaluated expression back as reader syntax."""
    if isinstance(expr, list):
        return "(" + " ".join(to_source(e) for e in expr) + ")"
    return to_lisp_string(expr)
