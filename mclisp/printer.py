import json
import re
import sys
from typing import Optional, TextIO

from mclisp import LispValue
from mclisp.types.constants import Boolean, UndefinedType
from mclisp.types.function import Closure, Function
from mclisp.types.nil import NilType
from mclisp.types.pair import Pair
from mclisp.types.symbol import Symbol

# ----------------- ANSI colors -----------------
RESET = "\033[0m"
COLOR_SYMBOL = "\033[94m"
COLOR_SPECIAL_FORM = "\033[90m"
COLOR_LITERAL = "\033[93m"
COLOR_LAMBDA = "\033[92m"
COLOR_PY_CALLABLE = "\033[95m"
COLOR_UNDEFINED = "\033[91m"

_ANSI_RE = re.compile(r"\033\[[0-9;]*m")

# ----------------- Defaults -----------------
DEFAULT_OPTIONS = {
    "max_line_length": 80,
    "indent": 2,
    "max_depth": None,
    "show_dots": False,
    "color": False,
}

SPECIAL_FORMS = {"quote", "cond", "define", "lambda", "label", "cons", "car", "cdr", "eq?", "atom"}


# ----------------- Atoms -----------------
def format_atom(obj: LispValue) -> str:
    if isinstance(obj, Symbol):
        return obj.id
    if isinstance(obj, Boolean):
        return "#t" if obj.value else "#f"
    if isinstance(obj, UndefinedType):
        return "#undefined"
    if isinstance(obj, NilType):
        return "nil"
    if isinstance(obj, str):
        return f'"{obj}"'
    if isinstance(obj, float):
        return repr(obj)
    if isinstance(obj, int):
        return str(obj)
    # Functions, closures and host objects
    return repr(obj)


# ----------------- Colorize utility -----------------
def colorize(obj: LispValue, options: dict = DEFAULT_OPTIONS) -> str:
    text = format_atom(obj)
    if not options.get("color", False):
        return text
    if isinstance(obj, Symbol):
        color = COLOR_SPECIAL_FORM if obj.id in SPECIAL_FORMS else COLOR_SYMBOL
    elif isinstance(obj, Closure):
        color = COLOR_LAMBDA
    elif isinstance(obj, Function):
        color = COLOR_PY_CALLABLE
    elif isinstance(obj, UndefinedType):
        color = COLOR_UNDEFINED
    else:
        color = COLOR_LITERAL
    return f"{color}{text}{RESET}"


def visible_length(text: str) -> int:
    return len(_ANSI_RE.sub("", text))


# ----------------- Pretty printer -----------------
def pformat(
    expr: LispValue,
    options: Optional[dict] = None,
    indent: int = 0,
    _current_depth: int = 0,
) -> str:
    """Render a value as text.

    A list renders as `( a b c )`. Elements follow the car on the same line
    while the cdr is a pair; a non-nil atom tail is printed as one more
    element (or after a ` . ` when `show_dots` is set). If the one-line form
    would exceed `max_line_length`, every element after the first goes on its
    own line, indented `indent` spaces per nesting level.
    """
    if options is None:
        options = DEFAULT_OPTIONS
    else:
        options = {**DEFAULT_OPTIONS, **options}

    if not isinstance(expr, Pair):
        return colorize(expr, options)

    max_depth = options.get("max_depth")
    if max_depth is not None and _current_depth >= max_depth:
        return "( ... )"

    parts: list[str] = []
    cell = expr
    while isinstance(cell, Pair):
        parts.append(pformat(cell.car, options, indent + 1, _current_depth + 1))
        cell = cell.cdr
    if not isinstance(cell, NilType):
        if options.get("show_dots", False):
            parts.append(".")
        parts.append(colorize(cell, options))

    single_line = "( " + " ".join(parts) + " )"
    width = options.get("indent", 2)
    fits = visible_length(single_line) + indent * width <= options.get("max_line_length", 80)
    if fits and not any("\n" in p for p in parts):
        return single_line

    pad = " " * ((indent + 1) * width)
    aligned_lines = ["( " + parts[0]]
    for part in parts[1:]:
        aligned_lines.append(pad + part)
    aligned_lines[-1] += " )"
    return "\n".join(aligned_lines)


def pprint(expr: LispValue, stream: Optional[TextIO] = None, options: Optional[dict] = None) -> None:
    """Write the rendering of `expr` and a newline to `stream` (stdout by default)."""
    if stream is None:
        stream = sys.stdout
    stream.write(pformat(expr, options))
    stream.write("\n")


# ----------------- Load JSON config -----------------
def load_options_from_json(json_str: str) -> dict:
    """Merge a JSON object of printer options over the defaults.

    Raises ValueError on malformed JSON or unknown option names.
    """
    user_opts = json.loads(json_str)
    if not isinstance(user_opts, dict):
        raise ValueError("printer options must be a JSON object")
    unknown = set(user_opts) - set(DEFAULT_OPTIONS)
    if unknown:
        raise ValueError(f"unknown printer option(s): {', '.join(sorted(unknown))}")
    return {**DEFAULT_OPTIONS, **user_opts}
