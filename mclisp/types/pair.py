"""Cons cells and list helpers.

A list of N elements is N nested pairs terminated by Nil:
(a b c) == Pair(a, Pair(b, Pair(c, Nil))). The empty list is Nil itself.
"""

from __future__ import annotations

from io import StringIO
from typing import Iterable, Iterator

from mclisp import LispValue
from mclisp.types.errors import McLispBadArgument, McLispTypeError
from mclisp.types.nil import Nil


class Pair:
    """An immutable two-field cell."""

    __slots__ = ("_car", "_cdr")

    def __init__(self, car: LispValue, cdr: LispValue):
        if car is None or cdr is None:
            raise McLispBadArgument("Invalid arguments supplied to cons")
        self._car = car
        self._cdr = cdr

    @property
    def car(self) -> LispValue:
        return self._car

    @property
    def cdr(self) -> LispValue:
        return self._cdr

    def __iter__(self) -> Iterator[LispValue]:
        return iter_list(self)

    def __eq__(self, other) -> bool:
        """Structural equality, used by tests and the reader round trip.

        The Lisp-level eq? never calls this: pairs are never eq?.
        """
        a, b = self, other
        while isinstance(a, Pair) and isinstance(b, Pair):
            if a is b:
                return True
            if a._car != b._car:
                return False
            a, b = a._cdr, b._cdr
        if isinstance(a, Pair) or isinstance(b, Pair):
            return False
        return a is b or a == b

    __hash__ = None

    def __repr__(self) -> str:
        with StringIO() as buffer:
            buffer.write("(")
            cell = self
            first = True
            while isinstance(cell, Pair):
                if not first:
                    buffer.write(" ")
                buffer.write(repr(cell._car))
                first = False
                cell = cell._cdr
            if cell is not Nil:
                buffer.write(" . ")
                buffer.write(repr(cell))
            buffer.write(")")
            return buffer.getvalue()


def make_list(items: Iterable[LispValue], tail: LispValue = Nil) -> LispValue:
    """Build a list from a Python iterable, ending in `tail` (Nil by default)."""
    result = tail
    for item in reversed(list(items)):
        result = Pair(item, result)
    return result


def iter_list(value: LispValue) -> Iterator[LispValue]:
    """Iterate the elements of a proper list.

    Raises McLispTypeError if the spine ends in anything but Nil.
    """
    cell = value
    while isinstance(cell, Pair):
        yield cell.car
        cell = cell.cdr
    if cell is not Nil:
        raise McLispTypeError(f"Improper list, tail is {cell!r}")


def list_length(value: LispValue) -> int:
    return sum(1 for _ in iter_list(value))
