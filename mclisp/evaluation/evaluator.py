"""Core evaluator for the mclisp interpreter.

Implements McCarthy-style eval: special-form dispatch by singleton head,
applicative-order evaluation of arguments, literal lambda and label
application, and application of first-class function values.

Evaluation is strictly recursive (no tail-call optimisation). Lisp recursion
depth is therefore bounded by the host stack; see Interpreter for how the
limit is raised and how overflow is reported.
"""

from __future__ import annotations

from mclisp import SExpression, LispValue
from mclisp.evaluation.apply import apply, bind_arguments
from mclisp.evaluation.special_forms import lookup_special_form
from mclisp.evaluation.special_forms.operands import operands
from mclisp.primitives import cons
from mclisp.types.constants import Undefined
from mclisp.types.environment import Environment
from mclisp.types.errors import McLispBadFormal, McLispNotCallable, McLispUnboundSymbol
from mclisp.types.function import Closure, Function
from mclisp.types.nil import Nil
from mclisp.types.pair import Pair
from mclisp.types.symbol import LABEL, LAMBDA, Symbol


def evaluate(expr: SExpression, env: Environment) -> LispValue:
    """Evaluate `expr` in `env` and return its value."""
    # --- Atoms ---
    if not isinstance(expr, Pair):
        if isinstance(expr, Symbol):
            return lookup_symbol(expr, env)
        return expr

    head = expr.car
    tail = expr.cdr

    # --- Symbol head: special forms first, then a variable reference ---
    if isinstance(head, Symbol):
        handler = lookup_special_form(head)
        if handler is not None:
            return handler(tail, env, evaluate)
        # Replace the head with its value and evaluate the rebuilt pair.
        # A head bound to a lambda form (as label does) re-enters the
        # literal lambda rule below.
        return evaluate(Pair(lookup_symbol(head, env), tail), env)

    # --- Pair head: literal lambda / label, or a computed function ---
    if isinstance(head, Pair):
        if head.car is LAMBDA:
            return apply_lambda_form(head, tail, env)
        if head.car is LABEL:
            return apply_label_form(head, tail, env)
        fn = evaluate(head, env)
        if not isinstance(fn, (Closure, Function)):
            raise McLispNotCallable(f"Expected a function, received {fn!r}")
        return apply(fn, eval_each(tail, env), evaluate)

    # --- Any other atom head: a function value substituted for its name ---
    if isinstance(head, (Closure, Function)):
        return apply(head, eval_each(tail, env), evaluate)
    raise McLispNotCallable(f"Expected a function, received {head!r}")


def lookup_symbol(sym: Symbol, env: Environment) -> LispValue:
    value = env.lookup(sym)
    if value is Undefined:
        raise McLispUnboundSymbol(f"undefined symbol {sym}")
    return value


def eval_each(exprs: SExpression, env: Environment) -> LispValue:
    """Evaluate an argument list left to right, returning the list of values.

    An atom in tail position is evaluated and becomes the tail of the result,
    so a dotted argument list yields a dotted value list.
    """
    values: list[LispValue] = []
    cell = exprs
    while isinstance(cell, Pair):
        values.append(evaluate(cell.car, env))
        cell = cell.cdr
    result = Nil if cell is Nil else evaluate(cell, env)
    for value in reversed(values):
        result = cons(value, result)
    return result


def apply_lambda_form(lambda_expr: Pair, args: SExpression, env: Environment) -> LispValue:
    """((lambda (p1 ... pn) body) a1 ... an)

    The arguments are evaluated in `env`, bound in a fresh frame whose parent
    is `env`, and the body is evaluated there. The frame is released on return.
    """
    formals, body = operands(lambda_expr.cdr, 2, "lambda")
    values = eval_each(args, env)
    frame = Environment(outer=env)
    try:
        bind_arguments(formals, values, frame)
        return evaluate(body, frame)
    finally:
        frame.release()


def apply_label_form(label_expr: Pair, args: SExpression, env: Environment) -> LispValue:
    """((label f (lambda ...)) a1 ... an)

    Binds f to the unevaluated lambda form in a fresh frame and evaluates the
    application of that lambda to the original arguments inside it, so that
    (f ...) in the body re-enters the lambda.
    """
    name, fn_expr = operands(label_expr.cdr, 2, "label")
    if not isinstance(name, Symbol):
        raise McLispBadFormal(f"label: cannot bind {name!r}, expected a symbol")
    frame = Environment(outer=env)
    try:
        frame.define(name, fn_expr)
        return evaluate(Pair(fn_expr, args), frame)
    finally:
        frame.release()
