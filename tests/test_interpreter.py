import io
import logging

import pytest

from mclisp import runtime_context
from mclisp.config import Settings
from mclisp.interpreter import Interpreter
from mclisp.types.constants import Undefined
from mclisp.types.errors import McLispRecursionError, McLispSyntaxError, McLispUnboundSymbol
from mclisp.types.pair import Pair, make_list
from mclisp.types.symbol import Symbol

a, b = Symbol("a"), Symbol("b")


@pytest.fixture
def interp(errors):
    return Interpreter(error_sink=errors.append, settings=Settings())


def test_eval_returns_last_value(interp):
    assert interp.eval("(define x (quote a)) (cons x (quote b))") == Pair(a, b)


def test_eval_of_empty_source(interp):
    assert interp.eval("  ; nothing here\n") is Undefined


def test_eval_raises(interp):
    with pytest.raises(McLispUnboundSymbol):
        interp.eval("nope")
    with pytest.raises(McLispSyntaxError):
        interp.eval("(a")


def test_global_frame_persists_between_calls(interp):
    interp.eval("(define x (quote a))")
    assert interp.eval("x") is a


def test_run_reports_and_continues(interp, errors):
    source = b"(car (quote a))\n(quote ok)\nundefined-symbol\n"
    results = [value for _, value in interp.run(source)]
    assert results == [Undefined, Symbol("ok"), Undefined]
    assert len(errors) == 2
    assert errors[0].startswith("McLispTypeError: ")
    assert "undefined symbol undefined-symbol" in errors[1]


def test_run_yields_forms_in_order(interp):
    forms = [expr for expr, _ in interp.run("(quote a)\n(quote b)")]
    assert forms == [make_list([Symbol("quote"), a]), make_list([Symbol("quote"), b])]


def test_parse_error_aborts_read_phase(interp, errors):
    assert list(interp.run(b"(quote a)\n(a")) == []
    assert len(errors) == 1
    assert errors[0].startswith("parse error: Unmatched (")
    assert "(line 2)" in errors[0]


def test_reserved_tokens_are_parse_errors(interp, errors):
    assert list(interp.run("(car '(a b))")) == []
    assert errors and errors[0].startswith("parse error")


def test_run_file(interp, tmp_path):
    path = tmp_path / "prog.lisp"
    path.write_text("(car (quote (a b)))\n(cdr (quote (a b c)))\n(cons (quote a) (quote b))\n")
    out = io.StringIO()
    interp.run_file(str(path), out)
    assert out.getvalue() == "a\n( b c )\n( a b )\n"


def test_run_file_with_printer_options(interp, tmp_path):
    path = tmp_path / "prog.lisp"
    path.write_text("(cons (quote a) (quote b))\n")
    out = io.StringIO()
    interp.run_file(str(path), out, {"show_dots": True})
    assert out.getvalue() == "( a . b )\n"


def test_run_file_missing(interp, tmp_path):
    with pytest.raises(OSError):
        interp.run_file(str(tmp_path / "missing.lisp"), io.StringIO())


def test_default_sink_logs(caplog):
    interp = Interpreter(settings=Settings())
    with caplog.at_level(logging.ERROR, logger="mclisp"):
        results = [value for _, value in interp.run("undefined-thing")]
    assert results == [Undefined]
    assert "undefined symbol undefined-thing" in caplog.text


def test_runaway_recursion(interp):
    interp.eval("(define loop (lambda (x) (loop x)))")
    with pytest.raises(McLispRecursionError):
        interp.eval("(loop (quote a))")


def test_runaway_recursion_is_reported(interp, errors):
    interp.eval("(define loop (lambda (x) (loop x)))")
    results = [value for _, value in interp.run("(loop (quote a))\n(quote after)")]
    assert results == [Undefined, Symbol("after")]
    assert errors[0].startswith("McLispRecursionError")


def test_extended_syntax(errors):
    interp = Interpreter(error_sink=errors.append, settings=Settings(extended_syntax=True))
    assert interp.eval("(car '(a b))") is a
    assert interp.eval('(quote "hello world")') == "hello world"
    assert interp.eval("(cdr '(a . b))") is b


def test_lenient_arity_setting(errors):
    interp = Interpreter(error_sink=errors.append, settings=Settings(strict_arity=False))
    assert runtime_context.get_strict_arity_mode() is False
    assert interp.eval("((lambda (x y) x) (quote a))") is a


def test_settings_from_env(monkeypatch):
    monkeypatch.setenv("MCLISP_RECURSION_LIMIT", "2000")
    monkeypatch.setenv("MCLISP_STRICT_ARITY", "0")
    monkeypatch.setenv("MCLISP_EXTENDED_SYNTAX", "yes")
    assert Settings.from_env() == Settings(recursion_limit=2000, strict_arity=False, extended_syntax=True)


def test_settings_defaults(monkeypatch):
    for var in ("MCLISP_RECURSION_LIMIT", "MCLISP_STRICT_ARITY", "MCLISP_EXTENDED_SYNTAX"):
        monkeypatch.delenv(var, raising=False)
    assert Settings.from_env() == Settings(recursion_limit=10000, strict_arity=True, extended_syntax=False)


@pytest.mark.parametrize(
    "var,value",
    [("MCLISP_RECURSION_LIMIT", "lots"), ("MCLISP_STRICT_ARITY", "maybe")],
)
def test_settings_reject_bad_values(monkeypatch, var, value):
    monkeypatch.setenv(var, value)
    with pytest.raises(ValueError):
        Settings.from_env()


def test_deep_nesting_is_reported_as_parse_error(interp, errors):
    source = io.BytesIO(b"(" * 50000 + b")" * 50000 + b"\n(quote ok)\n")
    assert list(interp.run(source)) == []
    assert errors == ["parse error: Expression nested too deeply (line 1)"]
