from mclisp import SExpression, LispValue, EvaluatorFn
from mclisp.types.environment import Environment
from mclisp.evaluation.special_forms.operands import operands


def quote_form(args: SExpression, env: Environment, evaluate_fn: EvaluatorFn) -> LispValue:
    """(quote x) returns x unevaluated."""
    (datum,) = operands(args, 1, "quote")
    return datum
