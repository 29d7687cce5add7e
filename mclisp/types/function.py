"""Callable values: host functions and first-class lambdas."""

from __future__ import annotations

from io import StringIO
from typing import Callable

from mclisp import SExpression, LispValue
from mclisp.types.environment import Environment
from mclisp.types.nil import Nil
from mclisp.types.pair import Pair


class Function:
    """A host-implemented callable.

    The callable receives the already-evaluated argument list as a single
    value (a proper list) and is responsible for its own arity checking.
    """

    __slots__ = ("name", "fn")

    def __init__(self, name: str, fn: Callable[[LispValue], LispValue]):
        self.name = name
        self.fn = fn

    def __call__(self, args: LispValue) -> LispValue:
        return self.fn(args)

    def __repr__(self) -> str:
        return f"#<function {self.name}>"


class Closure:
    """A first-class lambda with formal parameters, body, and captured frame."""

    __slots__ = ("formals", "body", "env", "name")

    def __init__(
        self,
        formals: SExpression,
        body: SExpression,
        env: Environment,
        name: str | None = None,
    ):
        self.formals: SExpression = formals
        self.body: SExpression = body
        self.env: Environment = env
        self.name = name
        env.capture()

    def __str__(self) -> str:
        with StringIO() as buffer:
            buffer.write("#<lambda")
            if self.name:
                buffer.write(f" {self.name}")
            buffer.write(" (")
            if isinstance(self.formals, Pair):
                buffer.write(" ".join(str(f) for f in self.formals))
            elif self.formals is not Nil:
                buffer.write(str(self.formals))
            buffer.write(")>")
            return buffer.getvalue()

    def __repr__(self) -> str:
        return str(self)
