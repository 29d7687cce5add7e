from mclisp import EvaluatorFn
from mclisp import SExpression, LispValue
from mclisp.types.constants import Undefined
from mclisp.types.environment import Environment
from mclisp.types.errors import McLispBadFormal
from mclisp.types.symbol import Symbol
from mclisp.evaluation.special_forms.operands import operands


def define_form(
    args: SExpression,
    env: Environment,
    evaluate_fn: EvaluatorFn,
) -> LispValue:
    """
    (define name value)
    The name is not evaluated. The binding goes into the current frame and
    shadows any earlier one; the form itself yields #undefined.
    """
    name, val_expr = operands(args, 2, "define")
    if not isinstance(name, Symbol):
        raise McLispBadFormal(f"define: cannot bind {name!r}, expected a symbol")
    value = evaluate_fn(val_expr, env)
    env.define(name, value)
    return Undefined
