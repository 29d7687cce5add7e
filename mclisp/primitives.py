"""Kernel operations on S-expressions: atom, eq?, car, cdr, cons.

These are the host-level primitives the evaluator's special forms call
directly. `car` on nil is an error rather than nil, following McCarthy.
"""

from __future__ import annotations

import struct

from mclisp import LispValue
from mclisp.types.constants import Boolean, Undefined, UndefinedType, lisp_bool
from mclisp.types.errors import McLispArityError, McLispTypeError
from mclisp.types.nil import NilType
from mclisp.types.pair import Pair
from mclisp.types.symbol import Symbol

_FLOAT_WORD = struct.Struct("<d")


def cons(a: LispValue, b: LispValue) -> Pair:
    """Construct a fresh pair. Raises McLispBadArgument on a None argument."""
    return Pair(a, b)


def car(p: LispValue) -> LispValue:
    if not isinstance(p, Pair):
        raise McLispTypeError(f"Invalid argument (non-pair) to car: {p!r}")
    return p.car


def cdr(p: LispValue) -> LispValue:
    if not isinstance(p, Pair):
        raise McLispTypeError(f"Invalid argument (non-pair) to cdr: {p!r}")
    return p.cdr


def atom(v: LispValue) -> Boolean:
    """#t for every non-pair except #undefined."""
    return lisp_bool(not isinstance(v, Pair) and v is not Undefined)


def is_eq(a: LispValue, b: LispValue) -> bool:
    """Atom equality as a Python bool. Never raises."""
    if isinstance(a, Pair) or isinstance(b, Pair):
        return False
    if isinstance(a, UndefinedType) or isinstance(b, UndefinedType):
        return False
    if type(a) is not type(b):
        return False
    if isinstance(a, Symbol):
        return a.id == b.id
    if isinstance(a, float):
        # Compare the stored word, so a NaN is eq? to itself
        return _FLOAT_WORD.pack(a) == _FLOAT_WORD.pack(b)
    if isinstance(a, (str, int)):
        return a == b
    if isinstance(a, Boolean):
        return a.value == b.value
    if isinstance(a, NilType):
        return True
    # Functions, closures and anything host-supplied compare by identity
    return a is b


def eq(a: LispValue, b: LispValue) -> Boolean:
    return lisp_bool(is_eq(a, b))


def checked_eq(a: LispValue, b: LispValue) -> Boolean:
    """eq? as dispatched from the form: both operands must be present."""
    if a is None or b is None:
        raise McLispArityError("Not enough arguments supplied to eq?")
    return eq(a, b)
