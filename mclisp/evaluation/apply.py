"""Application engine for mclisp.

This module centralizes function application semantics for the interpreter:
- Binding of formal parameters to evaluated arguments in a fresh frame, in
  strict mode (count mismatch is an arity error) or lenient lockstep mode.
- Application of first-class Closures.
- Application of host Functions, which receive the argument list as one value.

Keeping this logic in one place prevents duplication between the evaluator's
literal lambda/label rules and ordinary application of function values.
"""

from __future__ import annotations

from mclisp import SExpression, LispValue, EvaluatorFn
from mclisp.runtime_context import get_strict_arity_mode
from mclisp.types.constants import Undefined
from mclisp.types.environment import Environment
from mclisp.types.errors import McLispArityError, McLispBadFormal, McLispNotCallable
from mclisp.types.function import Closure, Function
from mclisp.types.nil import Nil
from mclisp.types.pair import Pair
from mclisp.types.symbol import Symbol


def check_formals(formals: SExpression) -> None:
    """Validate a lambda list: nil, a list of symbols, optionally dotted with a rest symbol."""
    cell = formals
    while isinstance(cell, Pair):
        if not isinstance(cell.car, Symbol):
            raise McLispBadFormal(
                f"Expected only symbols as formal arguments to lambda, got {cell.car!r}"
            )
        cell = cell.cdr
    if cell is not Nil and not isinstance(cell, Symbol):
        raise McLispBadFormal(f"Malformed lambda list: {formals!r}")


def bind_arguments(
    formals: SExpression,
    args: LispValue,
    frame: Environment,
    strict: bool | None = None,
) -> Environment:
    """
    Bind each formal to the matching argument in `frame`.

    Formals and arguments are walked in lockstep. A symbol in the tail
    position of the lambda list collects the remaining arguments as a list.

    In strict mode a count mismatch raises McLispArityError. Otherwise
    missing arguments bind to #undefined and extra arguments are ignored.
    """
    if strict is None:
        strict = get_strict_arity_mode()

    f, a = formals, args
    while isinstance(f, Pair):
        name = f.car
        if not isinstance(name, Symbol):
            raise McLispBadFormal(
                f"Expected only symbols as formal arguments to lambda, got {name!r}"
            )
        if isinstance(a, Pair):
            frame.define(name, a.car)
            a = a.cdr
        elif strict:
            raise McLispArityError(
                f"Too few arguments: expected {list_length_loose(formals)}, got {list_length_loose(args)}"
            )
        else:
            frame.define(name, Undefined)
        f = f.cdr

    if isinstance(f, Symbol):
        frame.define(f, a if isinstance(a, Pair) else Nil)
        return frame
    if f is not Nil:
        raise McLispBadFormal(f"Malformed lambda list: {formals!r}")
    if strict and a is not Nil:
        raise McLispArityError(
            f"Too many arguments: expected {list_length_loose(formals)}, got {list_length_loose(args)}"
        )
    return frame


def list_length_loose(value: SExpression) -> int:
    """Count the pairs on a spine, ignoring whatever terminates it."""
    n = 0
    while isinstance(value, Pair):
        n += 1
        value = value.cdr
    return n


def apply_closure(fn: Closure, args: LispValue, evaluate_fn: EvaluatorFn) -> LispValue:
    frame = Environment(outer=fn.env)
    try:
        bind_arguments(fn.formals, args, frame)
        return evaluate_fn(fn.body, frame)
    finally:
        frame.release()


def apply(head: LispValue, args: LispValue, evaluate_fn: EvaluatorFn) -> LispValue:
    """Apply a function value to an already-evaluated argument list.

    - For a Closure, bind its formals in a fresh frame over the captured one.
    - For a host Function, pass the argument list as a single value.
    - Otherwise, raise McLispNotCallable.
    """
    if isinstance(head, Closure):
        return apply_closure(head, args, evaluate_fn)
    if isinstance(head, Function):
        return head(args)
    raise McLispNotCallable(f"Expected a function, received {head!r}")
