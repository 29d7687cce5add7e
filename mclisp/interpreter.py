from __future__ import annotations

import sys
from typing import IO, Iterator, Optional, TextIO

from mclisp import SExpression, LispValue, runtime_context
from mclisp.builtin.env_builtin import initialise_interpreter
from mclisp.config import Settings
from mclisp.evaluation.evaluator import evaluate
from mclisp.printer import pprint
from mclisp.reader.parser import parse_stream, parse_string
from mclisp.runtime_context import ErrorSink
from mclisp.types.constants import Undefined
from mclisp.types.environment import Environment
from mclisp.types.errors import McLispError, McLispRecursionError


class Interpreter:
    """
    Orchestrates reading and evaluating mclisp code.
    Maintains the global Environment across calls.

    `eval` is the host-facing API and raises McLispError. `run` is the
    read-eval loop used by the command line: every error is reported through
    the error sink, and a form whose evaluation fails yields #undefined.
    """

    def __init__(
        self,
        error_sink: ErrorSink | None = None,
        settings: Settings | None = None,
    ):
        self.settings: Settings = settings if settings is not None else Settings.from_env()
        self.error_sink: ErrorSink = error_sink if error_sink is not None else runtime_context.log_error
        self.env: Environment = initialise_interpreter()

        runtime_context.set_strict_arity(self.settings.strict_arity)
        if sys.getrecursionlimit() < self.settings.recursion_limit:
            sys.setrecursionlimit(self.settings.recursion_limit)

    def _evaluate(self, expr: SExpression) -> LispValue:
        try:
            return evaluate(expr, self.env)
        except RecursionError:
            raise McLispRecursionError(
                f"maximum recursion depth exceeded (limit {sys.getrecursionlimit()})"
            ) from None

    def eval(self, code: str) -> LispValue:
        """Evaluate every form in `code`; return the last value (#undefined if none)."""
        result: LispValue = Undefined
        for expr in parse_string(code, self.settings.extended_syntax):
            result = self._evaluate(expr)
        return result

    def read(self, source: IO[bytes] | IO[str] | bytes | str) -> list[SExpression]:
        """Read all top-level forms, reporting a parse error and returning [] on failure."""
        return parse_stream(source, self.settings.extended_syntax, on_error=self.error_sink)

    def eval_toplevel(self, expr: SExpression) -> LispValue:
        """Evaluate one top-level form, reporting any error and yielding #undefined."""
        try:
            return self._evaluate(expr)
        except McLispError as ex:
            self.error_sink(f"{type(ex).__name__}: {ex}")
            return Undefined

    def run(self, source: IO[bytes] | IO[str] | bytes | str) -> Iterator[tuple[SExpression, LispValue]]:
        """Read `source` then evaluate its forms one at a time, in order."""
        for expr in self.read(source):
            yield expr, self.eval_toplevel(expr)

    def run_file(
        self,
        path: str,
        out: Optional[TextIO] = None,
        printer_options: Optional[dict] = None,
    ) -> None:
        """Run a source file, pretty-printing each top-level result to `out`.

        Raises OSError if the file cannot be opened.
        """
        if out is None:
            out = sys.stdout
        with open(path, "rb") as fp:
            for _, result in self.run(fp):
                pprint(result, out, printer_options)
