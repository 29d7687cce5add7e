"""Runtime environment for mclisp.

An Environment frame stores label -> value bindings and supports nested
lexical scopes via an `outer` link. Lookup misses return the Undefined
singleton rather than raising; the evaluator decides whether a miss is an
error.
"""

from __future__ import annotations

from io import StringIO
from typing import Optional

from mclisp import LispValue
from mclisp.types.constants import Undefined
from mclisp.types.errors import McLispBadFormal
from mclisp.types.symbol import Symbol


def _label_of(name: Symbol | str) -> str:
    if isinstance(name, Symbol):
        return name.id
    if isinstance(name, str):
        return name
    raise McLispBadFormal(f"Cannot bind {name!r}, expected a symbol")


class Environment:
    """One frame of the lexical chain."""

    __slots__ = ("vars", "outer", "captured", "released")

    def __init__(self, outer: Optional[Environment] = None):
        # Most recent binding wins; redefining a label shadows the old value.
        self.vars: dict[str, LispValue] = {}
        self.outer: Environment | None = outer
        self.captured: bool = False
        self.released: bool = False

    def define(self, name: Symbol | str, value: LispValue) -> None:
        """Bind `name` to `value` in this frame.

        No search is made for an earlier binding: the new binding shadows any
        binding of the same label here or in an ancestor frame.

        Raises McLispBadFormal if `name` is not a Symbol (or label string).
        """
        self.vars[_label_of(name)] = value

    def find(self, name: Symbol | str) -> Optional[Environment]:
        """Find the nearest frame in the chain that binds `name`."""
        label = _label_of(name)
        env: Optional[Environment] = self
        while env is not None:
            if label in env.vars:
                return env
            env = env.outer
        return None

    def lookup(self, name: Symbol | str) -> LispValue:
        """Return the value bound to `name`, or Undefined if it is unbound."""
        env = self.find(name)
        if env is None:
            return Undefined
        return env.vars[_label_of(name)]

    def capture(self) -> None:
        """Mark this frame and its ancestors as referenced by a closure."""
        env: Optional[Environment] = self
        while env is not None and not env.captured:
            env.captured = True
            env = env.outer

    def release(self) -> None:
        """Drop the bindings owned by this frame.

        The parent chain and the bound values are left alone. Frames that a
        closure has captured stay alive, since the closure still reads them.
        """
        if self.captured:
            return
        self.vars.clear()
        self.released = True

    def update(self, mapping: dict[Symbol | str, LispValue]) -> None:
        """Bulk-define a mapping of label -> value in the current frame."""
        for k, v in mapping.items():
            self.define(k, v)

    def _write_vars(self, buffer: StringIO) -> None:
        """Write this frame's variables into the buffer in a compact form."""
        buffer.write("{")
        first = True
        for k, v in self.vars.items():
            if not first:
                buffer.write(", ")
            buffer.write(f"{k}: {v!r}")
            first = False
        buffer.write("}")

    def __str__(self) -> str:
        """Human-readable single-frame view with an indicator for parent."""
        with StringIO() as buffer:
            self._write_vars(buffer)
            if self.outer is not None:
                buffer.write(" -> ...")  # indicate parent exists
            return buffer.getvalue()

    def __repr__(self) -> str:
        """Detailed chain representation for debugging purposes."""
        with StringIO() as buffer:
            buffer.write("<Environment chain: ")
            env = self
            chain = []
            while env is not None:
                env_buf = StringIO()
                env._write_vars(env_buf)
                chain.append(env_buf.getvalue())
                env = env.outer
            buffer.write(" -> ".join(chain))
            buffer.write(">")
            return buffer.getvalue()
