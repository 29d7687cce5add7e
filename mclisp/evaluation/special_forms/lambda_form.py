from mclisp import EvaluatorFn
from mclisp import SExpression, LispValue
from mclisp.evaluation.apply import check_formals
from mclisp.evaluation.special_forms.operands import operands
from mclisp.types.environment import Environment
from mclisp.types.errors import McLispBadFormal
from mclisp.types.function import Closure
from mclisp.types.pair import Pair
from mclisp.types.symbol import LAMBDA, Symbol


def lambda_form(
    args: SExpression,
    env: Environment,
    evaluate_fn: EvaluatorFn,
) -> LispValue:
    """(lambda (p1 ... pn) body) evaluates to a closure over the current frame."""
    formals, body = operands(args, 2, "lambda")
    check_formals(formals)
    return Closure(formals, body, env)


def label_form(
    args: SExpression,
    env: Environment,
    evaluate_fn: EvaluatorFn,
) -> LispValue:
    """
    (label f (lambda ...)) evaluates to a closure that can call itself as f.
    The closure's frame binds f to the closure, so recursion resolves lexically.
    """
    name, fn_expr = operands(args, 2, "label")
    if not isinstance(name, Symbol):
        raise McLispBadFormal(f"label: cannot bind {name!r}, expected a symbol")
    frame = Environment(outer=env)
    if isinstance(fn_expr, Pair) and fn_expr.car is LAMBDA:
        formals, body = operands(fn_expr.cdr, 2, "lambda")
        check_formals(formals)
        fn = Closure(formals, body, frame, name=name.id)
    else:
        fn = evaluate_fn(fn_expr, frame)
    frame.define(name, fn)
    return fn
