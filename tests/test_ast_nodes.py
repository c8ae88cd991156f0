from ast_nodes import *
from tests.utils import lex
from tokens import Span, Token, TokenType


def _expr_from(src: str) -> InfixExpressionNode:
    """Build `left op right` by hand from three tokens, as a parser would."""
    left_tok, op_tok, right_tok = lex(src)
    left = IntegerLiteralNode(value=left_tok.value, span=left_tok.span)
    right = IdentifierNode(name=right_tok.value, span=right_tok.span)
    return InfixExpressionNode.build(left, op_tok, right)


def test_infix_span_runs_from_left_to_right_operand():
    expr = _expr_from("10 <= count")
    assert expr.span == Span(0, 10)
    assert expr.span.start == expr.left.span.start
    assert expr.span.end == expr.right.span.end
    assert expr.span.contains(expr.operator.span)


def test_nested_infix_spans_contain_children():
    inner = _expr_from("1 + x")
    outer = InfixExpressionNode.build(
        inner,
        Token(TokenType.ASTERISK, span=Span(6, 6)),
        IntegerLiteralNode(value=3, span=Span(8, 8)),
    )
    assert outer.span == Span(0, 8)
    for child in (outer.left, outer.right):
        assert outer.span.contains(child.span)
    assert str(outer) == "((1 + x) * 3)"


def test_prefix_span_and_display():
    minus, ten = lex("-10")
    expr = PrefixExpressionNode.build(
        minus, IntegerLiteralNode(value=ten.value, span=ten.span)
    )
    assert expr.type == NodeType.PREFIX_EXPR
    assert expr.span == Span(0, 2)
    assert str(expr) == "(-10)"


def test_function_call_display():
    call = FunctionCallNode(
        function=IdentifierNode(name="add", span=Span(0, 2)),
        arguments=[
            IntegerLiteralNode(value=1, span=Span(4, 4)),
            BooleanLiteralNode(value=True, span=Span(7, 10)),
        ],
        span=Span(0, 11),
    )
    assert call.type == NodeType.FUNC_CALL
    assert str(call) == "add(1, true)"
    assert str(FunctionCallNode(function=IdentifierNode(name="f"))) == "f()"


def test_literal_display():
    assert str(StringLiteralNode(value="hi there")) == '"hi there"'
    assert str(BooleanLiteralNode(value=False)) == "false"
    assert isinstance(StringLiteralNode(), LiteralNode)


def test_array_literal_keeps_order_and_duplicates():
    one = IntegerLiteralNode(value=1)
    arr = ArrayLiteralNode(elements=[one, IntegerLiteralNode(value=2), one])
    assert str(arr) == "[1, 2, 1]"
    assert str(ArrayLiteralNode()) == "[]"


def test_hash_literal_keeps_duplicate_keys():
    key = StringLiteralNode(value="a")
    h = HashLiteralNode(
        pairs=[
            (key, IntegerLiteralNode(value=1)),
            (StringLiteralNode(value="b"), IntegerLiteralNode(value=2)),
            (key, IntegerLiteralNode(value=3)),
        ]
    )
    assert len(h.pairs) == 3
    assert str(h) == '{"a": 1, "b": 2, "a": 3}'


def test_format_expressions_concatenates_in_order():
    exprs = [
        IdentifierNode(name="x"),
        _expr_from("2 - y"),
        IntegerLiteralNode(value=7),
    ]
    assert format_expressions(exprs) == "x(2 - y)7"
    assert format_expressions([]) == ""


def test_function_call_build_covers_callee_and_arguments():
    name, lparen, one, comma, two, rparen = lex("add(1, 2)")
    call = FunctionCallNode.build(
        IdentifierNode(name=name.value, span=name.span),
        [
            IntegerLiteralNode(value=one.value, span=one.span),
            IntegerLiteralNode(value=two.value, span=two.span),
        ],
        rparen,
    )
    assert call.span == Span(0, 8)
    assert call.span.contains(call.function.span)
    for arg in call.arguments:
        assert call.span.contains(arg.span)


def test_array_and_hash_build_span_their_delimiters():
    lbrace, key, _assign, value, rbrace = lex("{ x = 1 }")
    pair = (
        IdentifierNode(name="x", span=key.span),
        IntegerLiteralNode(value=1, span=value.span),
    )
    h = HashLiteralNode.build(lbrace, [pair], rbrace)
    assert h.span == Span(0, 8)
    for k, v in h.pairs:
        assert h.span.contains(k.span) and h.span.contains(v.span)

    arr = ArrayLiteralNode.build(lbrace, [], rbrace)
    assert arr.span == Span(0, 8)
    assert arr.elements == []
