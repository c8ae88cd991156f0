from lexer import Lexer
from tokens import Token, TokenType


def lex(text):
    """Return the tokens of `text` without the trailing EOF marker."""
    return list(Lexer(text))


def types_of(text):
    return [t.type for t in lex(text)]


def spans_of(text):
    return [(t.span.start, t.span.end) for t in lex(text)]


def ident(name: str) -> Token:
    return Token(TokenType.IDENTIFIER, name)
