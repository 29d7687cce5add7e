from mclisp.reader.lexer import Token, TokenKind, lex, lex_line, lex_lines
from mclisp.reader.parser import TokenStream, parse_stream, parse_string, read_lines

__all__ = [
    "Token",
    "TokenKind",
    "lex",
    "lex_line",
    "lex_lines",
    "TokenStream",
    "parse_stream",
    "parse_string",
    "read_lines",
]
