"""Registry of special forms for the mclisp evaluator.

Maps the interned head Symbols to handler functions that implement
non-applicative evaluation rules. The evaluator matches a pair's head against
this table by identity before treating it as a variable reference, so
rebinding e.g. `cons` with define never changes how (cons ...) is evaluated.

Every handler has the signature (args, env, evaluate_fn) where `args` is the
unevaluated operand list of the form.
"""

from mclisp.types.symbol import ATOM, CAR, CDR, COND, CONS, DEFINE, EQ, LABEL, LAMBDA, QUOTE, Symbol
from mclisp.evaluation.special_forms.quote_form import quote_form
from mclisp.evaluation.special_forms.primitive_forms import atom_form, eq_form, car_form, cdr_form, cons_form
from mclisp.evaluation.special_forms.cond_form import cond_form
from mclisp.evaluation.special_forms.define_form import define_form
from mclisp.evaluation.special_forms.lambda_form import lambda_form, label_form

# Head symbol -> handler
SPECIAL_FORMS = {
    QUOTE: quote_form,
    ATOM: atom_form,
    EQ: eq_form,
    COND: cond_form,
    CAR: car_form,
    CDR: cdr_form,
    CONS: cons_form,
    DEFINE: define_form,
    LAMBDA: lambda_form,
    LABEL: label_form,
}


def lookup_special_form(head):
    """Return the handler for `head` if it is one of the special-form singletons."""
    # Symbols are interned, so a hash hit here is an identity match
    if not isinstance(head, Symbol):
        return None
    return SPECIAL_FORMS.get(head)
