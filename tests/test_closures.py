import pytest

from mclisp.printer import pformat
from mclisp.types.errors import McLispArityError, McLispBadFormal
from mclisp.types.function import Closure, Function
from mclisp.types.nil import Nil
from mclisp.types.pair import make_list
from mclisp.types.symbol import Symbol

a, b, c = Symbol("a"), Symbol("b"), Symbol("c")


def test_lambda_evaluates_to_closure(run):
    fn = run("(lambda (x) x)")
    assert isinstance(fn, Closure)
    assert str(fn) == "#<lambda (x)>"
    assert pformat(fn) == "#<lambda (x)>"


def test_define_lambda_then_call(run):
    run("(define second (lambda (x) (car (cdr x))))")
    assert run("(second (quote (a b c)))") is b


def test_closure_captures_defining_frame(run):
    run("(define k (lambda (x) (lambda (y) x)))")
    assert run("((k (quote a)) (quote b))") is a


def test_closures_keep_separate_frames(run):
    run("(define k (lambda (x) (lambda (y) (cons x y))))")
    run("(define ka (k (quote a)))")
    run("(define kb (k (quote b)))")
    assert run("(ka (quote c))") == make_list([a], c)
    assert run("(kb (quote c))") == make_list([b], c)


def test_standalone_label_is_named_closure(run):
    fn = run("(label f (lambda (x) x))")
    assert isinstance(fn, Closure)
    assert fn.name == "f"
    assert str(fn) == "#<lambda f (x)>"


def test_defined_label_recurses(run):
    run(
        """
        (define walk (label f (lambda (x)
            (cond ((atom x) (quote done))
                  (#t (f (cdr x)))))))
        """
    )
    assert run("(walk (quote (a b c)))") is Symbol("done")


def test_primitive_functions_are_values(run):
    run("(define first car)")
    assert run("(first (quote (a b)))") is a
    assert isinstance(run("first"), Function)


def test_function_passed_as_argument(run):
    assert run("((lambda (f) (f (quote (a b)))) cdr)") == make_list([b])


def test_closure_passed_as_argument(run):
    src = "((lambda (f x) (f (f x))) (lambda (y) (cons (quote a) y)) nil)"
    assert run(src) == make_list([a, a])


def test_rest_formal_collects_arguments(run):
    assert run("((lambda args args) (quote a) (quote b))") == make_list([a, b])
    assert run("((lambda args args))") is Nil


def test_rest_formal_on_closure(run):
    run("(define all (lambda args args))")
    assert run("(all (quote a) (quote b) (quote c))") == make_list([a, b, c])


def test_closure_arity(run):
    run("(define pair (lambda (x y) (cons x y)))")
    with pytest.raises(McLispArityError):
        run("(pair (quote a))")


def test_function_arity(run):
    run("(define first car)")
    with pytest.raises(McLispArityError):
        run("(first (quote (a)) (quote (b)))")


def test_lambda_rejects_bad_formals(run):
    with pytest.raises(McLispBadFormal):
        run("(lambda ((x)) x)")


def test_closure_call_does_not_leak_bindings(run, env):
    run("(define id (lambda (x) x))")
    run("(id (quote a))")
    assert env.find(Symbol("x")) is None
