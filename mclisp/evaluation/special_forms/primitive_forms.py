"""Special forms for the five kernel primitives.

Each evaluates its operands in the current frame and hands the values to the
matching function in mclisp.primitives.
"""

from mclisp import SExpression, LispValue, EvaluatorFn
from mclisp import primitives
from mclisp.types.environment import Environment
from mclisp.evaluation.special_forms.operands import operands


def atom_form(args: SExpression, env: Environment, evaluate_fn: EvaluatorFn) -> LispValue:
    (x,) = operands(args, 1, "atom")
    return primitives.atom(evaluate_fn(x, env))


def eq_form(args: SExpression, env: Environment, evaluate_fn: EvaluatorFn) -> LispValue:
    x, y = operands(args, 2, "eq?")
    return primitives.checked_eq(evaluate_fn(x, env), evaluate_fn(y, env))


def car_form(args: SExpression, env: Environment, evaluate_fn: EvaluatorFn) -> LispValue:
    (x,) = operands(args, 1, "car")
    return primitives.car(evaluate_fn(x, env))


def cdr_form(args: SExpression, env: Environment, evaluate_fn: EvaluatorFn) -> LispValue:
    (x,) = operands(args, 1, "cdr")
    return primitives.cdr(evaluate_fn(x, env))


def cons_form(args: SExpression, env: Environment, evaluate_fn: EvaluatorFn) -> LispValue:
    x, y = operands(args, 2, "cons")
    # Left to right: car operand first
    a = evaluate_fn(x, env)
    b = evaluate_fn(y, env)
    return primitives.cons(a, b)
