"""Token and span definitions for the lexer.

This module defines the `TokenType` enum for all token kinds recognized by
the lexer, the `Span` byte range attached to every token and AST node, and a
small `Token` dataclass that holds a token type, an optional payload and its
span. Tokens are the atomic units produced by the lexer and consumed by the
parser.

Spans are 0-indexed UTF-8 byte offsets into the original source and the end
offset is inclusive: the `+` in `"1 + 2"` has span `2..2`.
"""

from __future__ import annotations
from enum import Enum, auto
from dataclasses import dataclass, field
from typing import Dict, Optional, Union


@dataclass(frozen=True)
class Span:
    start: int
    end: int

    def __post_init__(self) -> None:
        if self.start < 0 or self.end < self.start:
            raise ValueError(f"invalid span range {self.start}..{self.end}")

    def __str__(self) -> str:
        return f"{self.start}..{self.end}"

    def merge(self, other: Span) -> Span:
        """Return the smallest span covering both `self` and `other`."""
        return Span(min(self.start, other.start), max(self.end, other.end))

    def contains(self, other: Span) -> bool:
        return self.start <= other.start and other.end <= self.end

    def text(self, source: Union[str, bytes]) -> str:
        """Slice the covered text back out of the original source."""
        data = source.encode("utf-8") if isinstance(source, str) else source
        return data[self.start : self.end + 1].decode("utf-8", errors="replace")


class TokenType(Enum):
    # Literals
    INTEGER = auto()
    IDENTIFIER = auto()

    # Arithmetic operators
    PLUS = auto()
    MINUS = auto()
    ASTERISK = auto()
    SLASH = auto()
    MODULO = auto()

    # Grouping
    LEFT_PAREN = auto()
    RIGHT_PAREN = auto()
    LEFT_BRACE = auto()
    RIGHT_BRACE = auto()

    # Punctuation
    COMMA = auto()
    ASSIGN = auto()
    SEMICOLON = auto()
    HASHTAG = auto()
    DOUBLE_QUOTE = auto()
    PIPE = auto()

    # Comparison operators
    EQUAL = auto()
    NOT_EQUAL = auto()
    LESS = auto()
    GREATER = auto()
    LESS_EQUAL = auto()
    GREATER_EQUAL = auto()

    # Logical operators
    AND = auto()
    OR = auto()

    # Keywords
    FUNCTION = auto()
    MATCH = auto()
    IF = auto()
    ELSE = auto()
    RETURN = auto()
    FOR = auto()
    BREAK = auto()
    CONTINUE = auto()
    TRUE = auto()
    FALSE = auto()

    # Special
    EOF = auto()

    def __str__(self) -> str:
        return self.name


KEYWORDS: Dict[str, TokenType] = {
    "fn": TokenType.FUNCTION,
    "match": TokenType.MATCH,
    "if": TokenType.IF,
    "else": TokenType.ELSE,
    "ret": TokenType.RETURN,
    "for": TokenType.FOR,
    "break": TokenType.BREAK,
    "continue": TokenType.CONTINUE,
    "true": TokenType.TRUE,
    "false": TokenType.FALSE,
}

# Two-character operators, tried before the single-character table.
DOUBLE_CHAR_TOKENS: Dict[str, TokenType] = {
    "==": TokenType.EQUAL,
    "!=": TokenType.NOT_EQUAL,
    "<=": TokenType.LESS_EQUAL,
    ">=": TokenType.GREATER_EQUAL,
    "&&": TokenType.AND,
    "||": TokenType.OR,
}

SINGLE_CHAR_TOKENS: Dict[str, TokenType] = {
    "+": TokenType.PLUS,
    "-": TokenType.MINUS,
    "*": TokenType.ASTERISK,
    "/": TokenType.SLASH,
    "%": TokenType.MODULO,
    "=": TokenType.ASSIGN,
    "<": TokenType.LESS,
    ">": TokenType.GREATER,
    "(": TokenType.LEFT_PAREN,
    ")": TokenType.RIGHT_PAREN,
    "{": TokenType.LEFT_BRACE,
    "}": TokenType.RIGHT_BRACE,
    ",": TokenType.COMMA,
    "#": TokenType.HASHTAG,
    '"': TokenType.DOUBLE_QUOTE,
    "|": TokenType.PIPE,
    ";": TokenType.SEMICOLON,
}

FIXED_TEXT: Dict[TokenType, str] = {
    **{t: s for s, t in SINGLE_CHAR_TOKENS.items()},
    **{t: s for s, t in DOUBLE_CHAR_TOKENS.items()},
    **{t: s for s, t in KEYWORDS.items()},
}


@dataclass(frozen=True)
class Token:
    type: TokenType
    value: Optional[Union[int, str]] = None
    # Spans are kept for diagnostics but two tokens with the same kind and
    # payload compare equal wherever they occur.
    span: Span = field(default=Span(0, 0), compare=False)

    def __repr__(self) -> str:
        return f"Token({self.type}, {repr(self.value)}, {self.span})"

    @property
    def lexeme(self) -> str:
        if self.value is not None:
            return str(self.value)
        return FIXED_TEXT.get(self.type, str(self.type))
