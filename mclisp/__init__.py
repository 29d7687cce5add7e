# Core type aliases for mclisp's data model.
# Code (forms) and runtime values share one representation: Pair cells, interned
# Symbols, the Nil/TRUE/FALSE/Undefined singletons, plain int/float/str atoms,
# host Functions and Closures.
#
# Naming guidance:
# - SExpression: Use in reader/parser code to denote syntactic forms (code-as-data).
# - LispValue:  Use in evaluator/runtime code to denote evaluated values.
# Both aliases resolve to `Any` and are interchangeable.

from typing import Any, Callable

# Runtime value alias
LispValue = Any
# Forms alias
SExpression = LispValue

# Evaluator function type passed into special forms
EvaluatorFn = Callable[..., LispValue]

__version__ = "0.1.0"
