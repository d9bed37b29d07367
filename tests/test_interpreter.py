import pytest
from loguru import logger

from risp import config
from risp.errors import RispLexError, RispParseError, RispRecursionError, RispUnboundSymbol
from risp.logging_utils import configure_logging


def test_eval_returns_last_value(interp):
    assert interp.eval("(def x 2) (+ x 1)") == 3


def test_eval_all_returns_every_value(interp):
    assert interp.eval_all("1 2\n(+ 1 2)") == [1, 2, 3]


def test_blank_and_comment_lines(interp):
    assert interp.eval("") is None
    assert interp.eval("   ; just a comment") is None
    assert interp.eval("# also a comment\n\n5 ;; trailing") == 5


def test_forms_may_not_span_lines(interp):
    with pytest.raises(RispParseError):
        interp.eval("(+ 1\n2)")


def test_unbalanced_input_fails_cleanly(interp):
    with pytest.raises(RispParseError):
        interp.eval("(+ 1 2")
    assert interp.eval("(+ 1 2)") == 3


def test_errors_do_not_poison_later_forms(interp):
    with pytest.raises(RispLexError):
        interp.eval('(def s "oops)')
    with pytest.raises(RispUnboundSymbol):
        interp.eval("(missing 1)")
    with pytest.raises(RispParseError):
        interp.eval(")")
    assert interp.eval('(def s "fine")') == "fine"
    assert interp.eval("s") == "fine"


def test_forms_before_a_bad_one_still_run(interp):
    with pytest.raises(RispUnboundSymbol):
        interp.eval("(def a 1) (def b nope)")
    assert interp.eval("a") == 1


def test_interpreters_are_independent(interp):
    from risp.interpreter import Interpreter

    other = Interpreter()
    interp.eval("(def only-here 1)")
    with pytest.raises(RispUnboundSymbol):
        other.eval("only-here")


def test_configure_logging_captures_debug():
    messages = []
    handler_id = configure_logging("DEBUG", sink=messages.append)
    try:
        from risp.interpreter import Interpreter

        Interpreter().eval("(def answer 42)")
    finally:
        logger.remove(handler_id)
        logger.disable("risp")
    assert any("def answer = 42" in m for m in messages)
    assert any("eval (def answer 42)" in m for m in messages)


def test_configure_logging_uses_env_level(monkeypatch):
    monkeypatch.setenv("RISP_LOG_LEVEL", "error")
    messages = []
    handler_id = configure_logging(sink=messages.append)
    try:
        from risp.interpreter import Interpreter

        Interpreter().eval("(def answer 42)")
    finally:
        logger.remove(handler_id)
        logger.disable("risp")
    assert messages == []


def test_config_defaults(monkeypatch):
    for var in ("RISP_LOG_LEVEL", "RISP_HTTP_TIMEOUT", "RISP_HTTP_FOLLOW_REDIRECTS"):
        monkeypatch.delenv(var, raising=False)
    assert config.get_log_level() == "WARNING"
    assert config.get_http_timeout() is None
    assert config.get_follow_redirects() is True


def test_config_from_environment(monkeypatch):
    monkeypatch.setenv("RISP_HTTP_TIMEOUT", "2.5")
    monkeypatch.setenv("RISP_HTTP_FOLLOW_REDIRECTS", "no")
    assert config.get_http_timeout() == 2.5
    assert config.get_follow_redirects() is False


def test_config_rejects_bad_timeout(monkeypatch):
    monkeypatch.setenv("RISP_HTTP_TIMEOUT", "soon")
    with pytest.raises(ValueError, match="RISP_HTTP_TIMEOUT"):
        config.get_http_timeout()


def test_deep_recursion_raises_risp_error(interp):
    interp.eval("(def count (fn (n) (if (<= n 0) 0 (+ 1 (count (- n 1))))))")
    assert interp.eval("(count 50)") == 50
    with pytest.raises(RispRecursionError) as info:
        interp.eval("(count 100000)")
    assert info.value.form == "(count 100000)"
    assert interp.eval("(count 10)") == 10


@pytest.mark.parametrize("char", ["\x0b", "\x0c", "\x1c", "\x1d", "\x1e", "\x85", "\u2028", "\u2029"])
def test_unicode_line_breaks_inside_strings(interp, char):
    assert interp.eval(f'(def s "a{char}b")') == f"a{char}b"


def test_crlf_line_endings(interp):
    assert interp.eval_all("(def x 1)\r\n(+ x 1)\r\n") == [1, 2]
