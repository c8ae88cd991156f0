"""
Lexer for the expression language.

Overview:
- This module implements a small hand-written lexical analyzer (scanner) that
    transforms an input source string into a stream of `Token` objects defined
    in `tokens.py`.
- It recognizes keywords (`fn`, `match`, `if`, `else`, `ret`, `for`,
    `break`, `continue`, `true`, `false`), identifiers, integer literals,
    single- and two-character operators (e.g. `==`, `!=`, `<=`, `>=`, `&&`,
    `||`), punctuation and skips whitespace and single-line comments starting
    with `//`.

Examples:
    Input:  "fn add(a, b) { ret a + b; }"
    Tokens: [FUNCTION, IDENTIFIER('add'), LEFT_PAREN, IDENTIFIER('a'), ...]

Implementation notes:
- The lexer is a pull-based scanner: `next_token()` advances `self.pos` (a
    character index) and `self.offset` (the matching UTF-8 byte offset) past
    exactly one lexeme. Spans are built from byte offsets.
- Two-character operators are checked first so `==` is not lexed as `=` `=`.
    Repeated characters with no combined form (`++`) stay separate tokens.
- Errors are raised, never printed. After a `LexError` the cursor stays on
    the offending lexeme; the caller may call `recover()` to step past it.
"""

from __future__ import annotations
from string import ascii_letters
from typing import List, Optional, Tuple, Union
from tokens import (
    DOUBLE_CHAR_TOKENS,
    KEYWORDS,
    SINGLE_CHAR_TOKENS,
    Span,
    Token,
    TokenType,
)

INT64_MAX = 2**63 - 1
INT64_DIGITS = len(str(INT64_MAX))

WHITESPACE = " \t\n\r"
DIGITS = "0123456789"
IDENT_START = ascii_letters + "_"
IDENT_CHARS = IDENT_START + DIGITS


def _byte_width(char: str) -> int:
    if char < "\x80":
        return 1
    return len(char.encode("utf-8", errors="surrogatepass"))


class LexError(SyntaxError):
    """Base class for lexical errors; `offset` is a byte offset into the source."""

    def __init__(self, message: str, span: Span):
        super().__init__(f"Lexical error at offset {span.start}: {message}")
        self.offset = span.start
        self.span = span


class UnrecognizedCharacterError(LexError):
    def __init__(self, char: str, span: Span):
        super().__init__(f"Unexpected character {char!r}", span)
        self.char = char


class NumericOverflowError(LexError):
    def __init__(self, literal: str, span: Span):
        super().__init__(
            f"Integer literal {literal} does not fit in a signed 64-bit integer",
            span,
        )
        self.literal = literal


class Lexer:
    def __init__(self, source: Union[str, bytes]):
        self.text = source.decode("utf-8") if isinstance(source, bytes) else source
        self.pos = 0
        self.offset = 0
        self.current_char = self.text[self.pos] if self.text else None
        self.end_offset = sum(_byte_width(c) for c in self.text)
        # Cursor position just past the lexeme that raised the last error.
        self._resume: Optional[Tuple[int, int]] = None

    def _seek(self, pos: int, offset: int) -> None:
        self.pos = pos
        self.offset = offset
        self.current_char = self.text[pos] if pos < len(self.text) else None

    def advance(self) -> None:
        """Advance to next character."""
        if self.current_char is None:
            return
        self._seek(self.pos + 1, self.offset + _byte_width(self.current_char))

    def peek_char(self) -> Optional[str]:
        """Look at next character without consuming it."""
        next_pos = self.pos + 1
        if next_pos < len(self.text):
            return self.text[next_pos]
        return None

    def _fail(self, error: LexError, start_pos: int, start_offset: int) -> LexError:
        # Park the cursor on the offending lexeme and remember where it ends.
        self._resume = (self.pos, self.offset)
        self._seek(start_pos, start_offset)
        return error

    def skip_whitespace(self) -> None:
        """Skip whitespace characters."""
        while self.current_char is not None and self.current_char in WHITESPACE:
            self.advance()

    def skip_comment(self) -> None:
        """Skip single-line comments (// ...)."""
        while self.current_char is not None and self.current_char != "\n":
            self.advance()

        if self.current_char == "\n":
            self.advance()

    def integer(self) -> Token:
        """Parse a multi-digit integer."""
        start_pos, start = self.pos, self.offset
        result = []

        while self.current_char is not None and self.current_char in DIGITS:
            result.append(self.current_char)
            self.advance()

        literal = "".join(result)
        span = Span(start, self.offset - 1)
        # Check the length first: int() refuses very long digit strings.
        if len(literal.lstrip("0")) > INT64_DIGITS or int(literal) > INT64_MAX:
            raise self._fail(NumericOverflowError(literal, span), start_pos, start)

        return Token(TokenType.INTEGER, int(literal), span)

    def identifier(self) -> Token:
        """Parse an identifier or keyword."""
        start = self.offset
        result = []

        while self.current_char is not None and self.current_char in IDENT_CHARS:
            result.append(self.current_char)
            self.advance()

        name = "".join(result)
        span = Span(start, self.offset - 1)
        keyword = KEYWORDS.get(name)
        if keyword is not None:
            return Token(keyword, span=span)
        return Token(TokenType.IDENTIFIER, name, span)

    def next_token(self) -> Token:
        """Lexical analyzer that returns tokens one at a time."""
        self._resume = None
        while self.current_char is not None:
            if self.current_char in WHITESPACE:
                self.skip_whitespace()
                continue

            if self.current_char == "/" and self.peek_char() == "/":
                self.skip_comment()
                continue

            if self.current_char in DIGITS:
                return self.integer()

            if self.current_char in IDENT_START:
                return self.identifier()

            start = self.offset
            pair = self.current_char + (self.peek_char() or "")
            if pair in DOUBLE_CHAR_TOKENS:
                self.advance()
                self.advance()
                return Token(DOUBLE_CHAR_TOKENS[pair], span=Span(start, start + 1))

            token_type = SINGLE_CHAR_TOKENS.get(self.current_char)
            if token_type is not None:
                self.advance()
                return Token(token_type, span=Span(start, start))

            # Nothing matched, including a bare `!` or `&`.
            char = self.current_char
            span = Span(start, start + _byte_width(char) - 1)
            start_pos = self.pos
            self.advance()
            raise self._fail(UnrecognizedCharacterError(char, span), start_pos, start)

        return Token(TokenType.EOF, span=Span(self.end_offset, self.end_offset))

    get_next_token = next_token

    def recover(self) -> bool:
        """Skip the lexeme that raised the last error, if any."""
        if self._resume is None:
            return False
        self._seek(*self._resume)
        self._resume = None
        return True

    def __iter__(self) -> Lexer:
        return self

    def __next__(self) -> Token:
        token = self.next_token()
        if token.type == TokenType.EOF:
            raise StopIteration
        return token

    def tokenize(self) -> List[Token]:
        """Return all tokens from the input string, including the final EOF."""
        tokens = []
        while True:
            token = self.next_token()
            tokens.append(token)
            if token.type == TokenType.EOF:
                break
        return tokens
