from __future__ import annotations
import sys


class Symbol:
    """An interned identifier.

    Constructing a Symbol with a label that has been seen before returns the
    existing instance, so `Symbol("quote") is Symbol("quote")` holds and the
    evaluator can match form heads by identity.
    """

    __slots__ = ("id", "__weakref__")

    _table: dict[str, Symbol] = {}

    def __new__(cls, name: str):
        existing = cls._table.get(name)
        if existing is not None:
            return existing
        sym = super().__new__(cls)
        # Intern the label too, to ensure fast equality/hash
        sym.id = sys.intern(name)
        cls._table[sym.id] = sym
        return sym

    def __eq__(self, other: Symbol) -> bool:
        return isinstance(other, Symbol) and self.id == other.id

    def __hash__(self) -> int:
        return hash(self.id)

    def __reduce__(self):
        return Symbol, (self.id,)

    def __repr__(self):
        return f"Symbol({self.id!r})"

    def __str__(self):
        return self.id


# Special form heads
QUOTE = Symbol("quote")
COND = Symbol("cond")
DEFINE = Symbol("define")
LAMBDA = Symbol("lambda")
LABEL = Symbol("label")

# Primitive operation heads
CONS = Symbol("cons")
CAR = Symbol("car")
CDR = Symbol("cdr")
EQ = Symbol("eq?")
ATOM = Symbol("atom")

# Only meaningful to the extended reader
DOT = Symbol(".")
