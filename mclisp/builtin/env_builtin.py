"""Built-in bindings for the mclisp global environment.

The global frame binds nil, #t and #f to their singletons. The five kernel
primitives are also bound as host Function values, so they can be passed
around and applied like any other function: after (define first car),
(first (quote (a b))) yields a.
These bindings never affect the special-form dispatch of (car ...) and friends.
"""
from __future__ import annotations

from mclisp import LispValue
from mclisp import primitives
from mclisp.evaluation.apply import list_length_loose
from mclisp.types.constants import TRUE, FALSE
from mclisp.types.environment import Environment
from mclisp.types.errors import McLispArityError
from mclisp.types.function import Function
from mclisp.types.nil import Nil
from mclisp.types.pair import Pair


def _args(name: str, args: LispValue, count: int) -> list[LispValue]:
    """Unpack exactly `count` values from an argument list."""
    items: list[LispValue] = []
    cell = args
    while isinstance(cell, Pair):
        items.append(cell.car)
        cell = cell.cdr
    if cell is not Nil or len(items) != count:
        raise McLispArityError(
            f"{name} expects {count} argument(s), got {list_length_loose(args)}"
        )
    return items


def fn_car(args: LispValue) -> LispValue:
    (p,) = _args("car", args, 1)
    return primitives.car(p)


def fn_cdr(args: LispValue) -> LispValue:
    (p,) = _args("cdr", args, 1)
    return primitives.cdr(p)


def fn_cons(args: LispValue) -> LispValue:
    a, b = _args("cons", args, 2)
    return primitives.cons(a, b)


def fn_atom(args: LispValue) -> LispValue:
    (v,) = _args("atom", args, 1)
    return primitives.atom(v)


def fn_eq(args: LispValue) -> LispValue:
    a, b = _args("eq?", args, 2)
    return primitives.checked_eq(a, b)


PRIMITIVE_FUNCTIONS: dict[str, Function] = {
    "car": Function("car", fn_car),
    "cdr": Function("cdr", fn_cdr),
    "cons": Function("cons", fn_cons),
    "atom": Function("atom", fn_atom),
    "eq?": Function("eq?", fn_eq),
}


def register(env: Environment) -> Environment:
    """Populate `env` with the built-in constants and primitive functions."""
    env.update(
        {
            "nil": Nil,
            "#t": TRUE,
            "#f": FALSE,
        }
    )
    env.update(PRIMITIVE_FUNCTIONS)
    return env


def initialise_interpreter() -> Environment:
    """Create the global frame."""
    return register(Environment())
