"""Boolean and undefined singletons.

Python's own True/False are not used as Lisp values: `bool` is a subclass of
`int`, which would make `#t` indistinguishable from the integer 1 for `eq?`.
"""

from __future__ import annotations


class Boolean:
    __slots__ = ("value",)

    _instances: dict[bool, Boolean] = {}

    def __new__(cls, value: bool):
        value = bool(value)
        existing = cls._instances.get(value)
        if existing is not None:
            return existing
        inst = super().__new__(cls)
        inst.value = value
        cls._instances[value] = inst
        return inst

    def __bool__(self) -> bool:
        return self.value

    def __reduce__(self):
        return Boolean, (self.value,)

    def __repr__(self) -> str:
        return "#t" if self.value else "#f"


class UndefinedType:
    """The absence marker. Never equal to anything, including itself."""

    _instance: UndefinedType | None = None

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __eq__(self, other) -> bool:
        return False

    def __hash__(self) -> int:
        return id(self)

    def __bool__(self) -> bool:
        return False

    def __reduce__(self):
        return UndefinedType, ()

    def __repr__(self) -> str:
        return "#undefined"


TRUE = Boolean(True)
FALSE = Boolean(False)
Undefined = UndefinedType()


def lisp_bool(flag: bool) -> Boolean:
    """Map a Python truth value onto #t / #f."""
    return TRUE if flag else FALSE
