"""Tests for the token and span value types."""

import pytest

from tokens import KEYWORDS, Span, Token, TokenType


def test_span_rejects_inverted_range():
    with pytest.raises(ValueError):
        Span(3, 2)
    with pytest.raises(ValueError):
        Span(-1, 0)


def test_span_merge_and_contains():
    left = Span(0, 0)
    right = Span(4, 6)
    merged = left.merge(right)
    assert merged == Span(0, 6)
    assert right.merge(left) == merged
    assert merged.contains(left)
    assert merged.contains(right)
    assert not right.contains(merged)


def test_span_text_and_str():
    assert Span(2, 4).text("a + bcd") == "+ b"
    assert Span(1, 2).text(b"xyz") == "yz"
    assert str(Span(2, 4)) == "2..4"


def test_tokens_compare_by_kind_and_payload_only():
    a = Token(TokenType.INTEGER, 1, Span(0, 0))
    b = Token(TokenType.INTEGER, 1, Span(7, 7))
    assert a == b
    assert hash(a) == hash(b)
    assert a.span != b.span
    assert Token(TokenType.INTEGER, 2) != a
    assert Token(TokenType.IDENTIFIER, "x") != Token(TokenType.IDENTIFIER, "y")


def test_tokens_are_immutable():
    token = Token(TokenType.PLUS)
    with pytest.raises(AttributeError):
        token.type = TokenType.MINUS


def test_lexeme():
    assert Token(TokenType.IDENTIFIER, "foo").lexeme == "foo"
    assert Token(TokenType.INTEGER, 42).lexeme == "42"
    assert Token(TokenType.NOT_EQUAL).lexeme == "!="
    assert Token(TokenType.RETURN).lexeme == "ret"
    assert Token(TokenType.EOF).lexeme == "EOF"


def test_keyword_table():
    assert KEYWORDS["fn"] == TokenType.FUNCTION
    assert KEYWORDS["ret"] == TokenType.RETURN
    assert "function" not in KEYWORDS
    assert len(KEYWORDS) == 10
