from mclisp import SExpression, LispValue, EvaluatorFn
from mclisp.types.constants import TRUE, Undefined
from mclisp.types.environment import Environment
from mclisp.types.errors import McLispMalformedCond
from mclisp.types.nil import Nil
from mclisp.types.pair import Pair


def cond_form(args: SExpression, env: Environment, evaluate_fn: EvaluatorFn) -> LispValue:
    """Evaluate a (cond (p1 e1) (p2 e2) ...).

    Clauses are tried top to bottom. Only a predicate whose value is exactly
    #t selects its clause; any other value, truthy or not, moves on to the next
    one. If no clause is selected the result is #undefined.
    """
    clauses = args
    while isinstance(clauses, Pair):
        clause = clauses.car
        if not isinstance(clause, Pair):
            raise McLispMalformedCond(
                f"atom passed to cond as conditional expression, expected pair: {clause!r}"
            )
        rest = clause.cdr
        if not isinstance(rest, Pair) or rest.cdr is not Nil:
            raise McLispMalformedCond(
                f"cond clause must be (predicate expression): {clause!r}"
            )
        if evaluate_fn(clause.car, env) is TRUE:
            return evaluate_fn(rest.car, env)
        clauses = clauses.cdr
    if clauses is not Nil:
        raise McLispMalformedCond("cond clauses must form a proper list")
    return Undefined
