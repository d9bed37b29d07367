import pytest

from risp import errors
from risp.evaluation.evaluator import evaluate
from risp.types import Closure, Environment, Keyword, Primitive, Structured, Symbol

# -----------------------------------------------------
# Fixtures
# -----------------------------------------------------


@pytest.fixture
def env():
    env = Environment()
    env.define(Symbol("+"), Primitive("+", lambda _, args: sum(args)))
    env.define(Symbol("x"), 42)
    env.define(Symbol("y"), 100)
    return env


# -----------------------------------------------------
# Tests
# -----------------------------------------------------


def test_self_evaluating_literals(env):
    assert evaluate(1, env) == 1
    assert evaluate(3.14, env) == 3.14
    assert evaluate("hello", env) == "hello"
    assert evaluate(True, env) is True
    assert evaluate(False, env) is False
    assert evaluate(Keyword(":k"), env) == Keyword(":k")


def test_structured_passes_through(env):
    value = Structured({"a": [1, 2]})
    assert evaluate(value, env) is value


def test_symbol_lookup(env):
    assert evaluate(Symbol("x"), env) == 42
    assert evaluate(Symbol("y"), env) == 100
    with pytest.raises(errors.RispUnboundSymbol):
        evaluate(Symbol("z"), env)


def test_keyword_is_not_looked_up(env):
    env.define(Symbol(":k"), 7)
    assert evaluate(Keyword(":k"), env) == Keyword(":k")


def test_simple_application(env):
    assert evaluate([Symbol("+"), 1, 2], env) == 3


def test_nested_application(env):
    assert evaluate([Symbol("+"), [Symbol("+"), 1, 2], Symbol("x")], env) == 45


def test_fn_simple(env):
    expr = [Symbol("fn"), [Symbol("a"), Symbol("b")], [Symbol("+"), Symbol("a"), Symbol("b")]]
    lam = evaluate(expr, env)
    assert isinstance(lam, Closure)
    assert lam.env is env
    assert evaluate([lam, 2, 3], env) == 5


def test_immediate_fn_application(env):
    expr = [[Symbol("fn"), [Symbol("a")], [Symbol("+"), Symbol("a"), 1]], 41]
    assert evaluate(expr, env) == 42


def test_closure_arity_mismatch(env):
    lam = evaluate([Symbol("fn"), [Symbol("a")], Symbol("a")], env)
    with pytest.raises(errors.RispArityError) as info:
        evaluate([lam, 1, 2], env)
    assert info.value.expected == "1"
    assert info.value.actual == 2


def test_not_callable(env):
    with pytest.raises(errors.RispNotCallable) as info:
        evaluate([1, 2, 3], env)
    assert info.value.value == 1
    assert info.value.form == [1, 2, 3]


def test_not_callable_before_arguments(env):
    # arguments are never evaluated when the head is not a function
    with pytest.raises(errors.RispNotCallable):
        evaluate([Symbol("x"), Symbol("unbound")], env)


def test_arguments_evaluated_left_to_right(env):
    seen = []

    def record(_, args):
        seen.append(args[0])
        return args[0]

    env.define(Symbol("rec"), Primitive("rec", record, 1, 1))
    evaluate([Symbol("+"), [Symbol("rec"), 1], [Symbol("rec"), 2], [Symbol("rec"), 3]], env)
    assert seen == [1, 2, 3]


def test_empty_list_is_an_error(env):
    with pytest.raises(errors.RispNotCallable):
        evaluate([], env)


def test_primitive_arity(env):
    env.define(Symbol("one"), Primitive("one", lambda _, args: args[0], 1, 1))
    with pytest.raises(errors.RispArityError) as info:
        evaluate([Symbol("one")], env)
    assert info.value.name == "one"
    assert info.value.expected == "1"
    assert info.value.actual == 0
