"""
  Line-oriented tokenizer

- Each line is tokenized on its own; a token never spans a line break.
- Every token carries the 1-based number of the line it came from.
- Token kinds:

    - ( -> OPEN_PAREN       ) -> CLOSE_PAREN
    - [ -> OPEN_BRACKET     ] -> CLOSE_BRACKET
    - ' -> QUOTE            " -> DOUBLE_QUOTE
    - any maximal run of characters other than whitespace, ')' and ']' -> SYMBOL
    - "text" on one line -> STRING (extended syntax only)

- A ';' at the start of a token begins a comment running to end of line.
  Note that '(', '[', quotes and ';' only act as delimiters at the start of a
  token: `a(b` is a single symbol.
"""

from __future__ import annotations

import enum
import re
from typing import Iterable, Iterator, NamedTuple

from mclisp.types.errors import McLispSyntaxError


class TokenKind(enum.Enum):
    OPEN_PAREN = "("
    CLOSE_PAREN = ")"
    OPEN_BRACKET = "["
    CLOSE_BRACKET = "]"
    QUOTE = "'"
    DOUBLE_QUOTE = '"'
    SYMBOL = "symbol"
    STRING = "string"


class Token(NamedTuple):
    kind: TokenKind
    text: str
    line: int


OPENERS = (TokenKind.OPEN_PAREN, TokenKind.OPEN_BRACKET)
CLOSERS = (TokenKind.CLOSE_PAREN, TokenKind.CLOSE_BRACKET)

TOKEN_RE = re.compile(
    r"\s*(?:"
    r"(?P<comment>;.*)"  # single-line comment
    r"|(?P<open_paren>\()"  # (
    r"|(?P<close_paren>\))"  # )
    r"|(?P<open_bracket>\[)"  # [
    r"|(?P<close_bracket>\])"  # ]
    r"|(?P<quote>')"  # '
    r'|(?P<double_quote>")'  # "
    r"|(?P<symbol>[^\s\])]+)"  # fallback: symbols
    r")"
)

_GROUP_KINDS: dict[str, TokenKind] = {
    "open_paren": TokenKind.OPEN_PAREN,
    "close_paren": TokenKind.CLOSE_PAREN,
    "open_bracket": TokenKind.OPEN_BRACKET,
    "close_bracket": TokenKind.CLOSE_BRACKET,
    "quote": TokenKind.QUOTE,
    "double_quote": TokenKind.DOUBLE_QUOTE,
    "symbol": TokenKind.SYMBOL,
}


def lex_line(line: str, line_number: int, extended: bool = False) -> Iterator[Token]:
    """Token generator for a single line of source."""
    pos = 0
    n = len(line)
    while pos < n:
        m = TOKEN_RE.match(line, pos)
        if m is None or m.end() == pos:
            # only trailing whitespace is left
            break
        pos = m.end()
        group = m.lastgroup
        if group is None:
            break
        if group == "comment":
            break

        if group == "double_quote" and extended:
            close = line.find('"', pos)
            if close < 0:
                raise McLispSyntaxError("Unterminated string literal", line_number)
            yield Token(TokenKind.STRING, line[pos:close], line_number)
            pos = close + 1
            continue

        yield Token(_GROUP_KINDS[group], m.group(group), line_number)


def lex_lines(lines: Iterable[str | bytes], extended: bool = False) -> Iterator[Token]:
    """Tokenize a sequence of lines, numbering them from 1.

    Byte lines (as read from a binary stream) are decoded as UTF-8.
    """
    for line_number, line in enumerate(lines, start=1):
        if isinstance(line, (bytes, bytearray)):
            try:
                line = line.decode("utf-8")
            except UnicodeDecodeError as ex:
                raise McLispSyntaxError(f"Invalid UTF-8 input: {ex.reason}", line_number) from None
        yield from lex_line(line, line_number, extended)


def lex(source: str, extended: bool = False) -> Iterator[Token]:
    """Token generator over a whole source string."""
    return lex_lines(source.split("\n"), extended)
