"""
  Lisp Reader

- Consumes the token sequence of a whole input and builds S-expressions:

    - symbols -> interned Symbol (numbers and booleans stay symbols and are
      resolved through the environment, which is how nil, #t and #f work)
    - ( ... ) and [ ... ] -> Pair chains terminated by Nil; the closing
      character need not match the opening one
    - () -> Nil

- The reserved tokens ' and " are parse errors in the core syntax. With
  extended syntax on:

    - 'x -> (quote x)
    - "text" -> str
    - (a . b) -> dotted pair
"""

from __future__ import annotations

from typing import IO, Callable, Iterable, Iterator, Optional

from mclisp import SExpression, runtime_context
from mclisp.config import get_extended_syntax
from mclisp.reader.lexer import CLOSERS, OPENERS, Token, TokenKind, lex, lex_lines
from mclisp.types.errors import McLispSyntaxError
from mclisp.types.pair import make_list
from mclisp.types.symbol import DOT, QUOTE, Symbol


class TokenStream:
    def __init__(self, token_iter: Iterable[Token], extended: bool = False):
        self.tokens = iter(token_iter)
        self.buffer: list[Token] = []
        self.extended = extended

    def peek(self) -> Optional[Token]:
        if not self.buffer:
            try:
                self.buffer.append(next(self.tokens))
            except StopIteration:
                return None
        return self.buffer[0]

    def advance(self) -> Optional[Token]:
        if self.buffer:
            return self.buffer.pop(0)
        return next(self.tokens, None)

    def parse_expr(self) -> SExpression | None:
        """Read one S-expression, or return None at end of input."""
        tok = self.advance()
        if tok is None:
            return None

        if tok.kind is TokenKind.SYMBOL:
            return Symbol(tok.text)

        if tok.kind in OPENERS:
            return self._parse_list(tok)

        if tok.kind in CLOSERS:
            raise McLispSyntaxError(f"Unexpected {tok.text}", tok.line)

        if tok.kind is TokenKind.QUOTE:
            if not self.extended:
                raise McLispSyntaxError("Unexpected '. Quotes are not supported", tok.line)
            quoted = self.parse_expr()
            if quoted is None:
                raise McLispSyntaxError("Expected an expression after '", tok.line)
            return make_list([QUOTE, quoted])

        if tok.kind is TokenKind.DOUBLE_QUOTE:
            raise McLispSyntaxError('Unexpected ". Double quotes are not supported', tok.line)

        if tok.kind is TokenKind.STRING:
            return tok.text

        raise McLispSyntaxError(f"Unknown token: {tok.kind} {tok.text}", tok.line)

    def _parse_list(self, open_tok: Token) -> SExpression:
        items: list[SExpression] = []
        while True:
            tok = self.peek()
            if tok is None:
                raise McLispSyntaxError(
                    f"Unmatched {open_tok.text}, end of input reached", open_tok.line
                )
            if tok.kind in CLOSERS:
                self.advance()
                return make_list(items)
            if self.extended and tok.kind is TokenKind.SYMBOL and tok.text == DOT.id:
                self.advance()
                return self._parse_dotted_tail(items, tok)
            items.append(self.parse_expr())

    def _parse_dotted_tail(self, items: list[SExpression], dot_tok: Token) -> SExpression:
        if not items:
            raise McLispSyntaxError("Expected an expression before '.'", dot_tok.line)
        nxt = self.peek()
        if nxt is None or nxt.kind in CLOSERS:
            raise McLispSyntaxError("Expected an expression after '.'", dot_tok.line)
        tail = self.parse_expr()
        close = self.advance()
        if close is None or close.kind not in CLOSERS:
            line = close.line if close is not None else dot_tok.line
            raise McLispSyntaxError("Expected ) or ] after dotted tail", line)
        return make_list(items, tail)

    def parse_all(self) -> Iterator[SExpression]:
        while True:
            start = self.peek()
            try:
                expr = self.parse_expr()
            except RecursionError:
                # Each nesting level costs host stack frames
                line = start.line if start is not None else None
                raise McLispSyntaxError("Expression nested too deeply", line) from None
            if expr is None:
                break
            yield expr


def parse_string(source: str, extended: bool = False) -> list[SExpression]:
    """Read every top-level expression in `source`; raises McLispSyntaxError."""
    return list(TokenStream(lex(source, extended), extended).parse_all())


def read_lines(lines: Iterable[str | bytes], extended: bool = False) -> list[SExpression]:
    """Read every top-level expression from an iterable of lines; raises McLispSyntaxError."""
    return list(TokenStream(lex_lines(lines, extended), extended).parse_all())


def parse_stream(
    stream: IO[bytes] | IO[str] | bytes | str,
    extended: bool | None = None,
    on_error: Callable[[str], None] | None = None,
) -> list[SExpression]:
    """Read all top-level expressions from a byte (or text) stream.

    A parse error aborts the read phase: it is reported once through the
    error sink and an empty list is returned.
    """
    if extended is None:
        extended = get_extended_syntax()
    if on_error is None:
        on_error = runtime_context.get_error_sink()

    if isinstance(stream, (bytes, bytearray)):
        lines: Iterable[str | bytes] = bytes(stream).split(b"\n")
    elif isinstance(stream, str):
        lines = stream.split("\n")
    else:
        lines = stream

    try:
        return read_lines(lines, extended)
    except McLispSyntaxError as ex:
        on_error(f"parse error: {ex}")
        return []
