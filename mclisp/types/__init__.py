"""Value model: S-expression node kinds, singletons and the environment."""

from mclisp.types.errors import McLispError
from mclisp.types.symbol import Symbol
from mclisp.types.nil import Nil, NilType
from mclisp.types.constants import TRUE, FALSE, Undefined, Boolean, lisp_bool
from mclisp.types.pair import Pair, make_list, iter_list, list_length
from mclisp.types.environment import Environment
from mclisp.types.function import Function, Closure

__all__ = [
    "McLispError",
    "Symbol",
    "Nil",
    "NilType",
    "TRUE",
    "FALSE",
    "Undefined",
    "Boolean",
    "lisp_bool",
    "Pair",
    "make_list",
    "iter_list",
    "list_length",
    "Environment",
    "Function",
    "Closure",
]
