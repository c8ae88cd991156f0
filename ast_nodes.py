"""AST node definitions for expressions.

This module defines the concrete AST node dataclasses that a parser builds
from the token stream. Each node is a dataclass carrying the relevant
information (an operator token, child nodes, names, literal values) plus the
`Span` of source it was built from. The `NodeType` enum identifies node kinds
and is used by the JSON encoder and the Graphviz renderer.

Conventions:
- All AST node dataclasses inherit from `ASTNode` which records the node
    kind (`NodeType`) and its source `span`.
- Children are owned by exactly one parent; a node's span covers the spans
    of all of its children.
- `str(node)` gives a compact, fully parenthesized rendering for
    diagnostics. It is not meant to reproduce the original source.
"""

from __future__ import annotations
from dataclasses import dataclass, field
from enum import Enum, auto
from typing import List, Sequence, Tuple
from tokens import Span, Token, TokenType


class NodeType(Enum):
    IDENTIFIER = auto()
    INTEGER_LITERAL = auto()
    BOOLEAN_LITERAL = auto()
    STRING_LITERAL = auto()
    ARRAY_LITERAL = auto()
    HASH_LITERAL = auto()
    PREFIX_EXPR = auto()
    INFIX_EXPR = auto()
    FUNC_CALL = auto()

    def __str__(self) -> str:
        return self.name


# Base AST Node
@dataclass
class ASTNode:
    type: NodeType
    span: Span = field(default_factory=lambda: Span(0, 0))


@dataclass
class IdentifierNode(ASTNode):
    type: NodeType = NodeType.IDENTIFIER
    name: str = ""

    def __str__(self) -> str:
        return self.name


# Literals
@dataclass
class LiteralNode(ASTNode):
    pass


@dataclass
class IntegerLiteralNode(LiteralNode):
    type: NodeType = NodeType.INTEGER_LITERAL
    value: int = 0

    def __str__(self) -> str:
        return str(self.value)


@dataclass
class BooleanLiteralNode(LiteralNode):
    type: NodeType = NodeType.BOOLEAN_LITERAL
    value: bool = False

    def __str__(self) -> str:
        return "true" if self.value else "false"


@dataclass
class StringLiteralNode(LiteralNode):
    type: NodeType = NodeType.STRING_LITERAL
    # Raw text between the quotes; escapes are not processed.
    value: str = ""

    def __str__(self) -> str:
        return f'"{self.value}"'


@dataclass
class ArrayLiteralNode(LiteralNode):
    type: NodeType = NodeType.ARRAY_LITERAL
    elements: List[ASTNode] = field(default_factory=list)

    @classmethod
    def build(
        cls, open_token: Token, elements: List[ASTNode], close_token: Token
    ) -> ArrayLiteralNode:
        """Create the node with a span running between its delimiters."""
        return cls(elements=elements, span=open_token.span.merge(close_token.span))

    def __str__(self) -> str:
        return "[" + ", ".join(str(e) for e in self.elements) + "]"


@dataclass
class HashLiteralNode(LiteralNode):
    type: NodeType = NodeType.HASH_LITERAL
    # Pairs keep source order; duplicate keys are left for later passes.
    pairs: List[Tuple[ASTNode, ASTNode]] = field(default_factory=list)

    @classmethod
    def build(
        cls,
        open_token: Token,
        pairs: List[Tuple[ASTNode, ASTNode]],
        close_token: Token,
    ) -> HashLiteralNode:
        return cls(pairs=pairs, span=open_token.span.merge(close_token.span))

    def __str__(self) -> str:
        return "{" + ", ".join(f"{k}: {v}" for k, v in self.pairs) + "}"


# Operators and calls
@dataclass
class PrefixExpressionNode(ASTNode):
    type: NodeType = NodeType.PREFIX_EXPR
    operator: Token = field(default_factory=lambda: Token(TokenType.MINUS))
    operand: ASTNode = field(default_factory=lambda: IntegerLiteralNode())

    @classmethod
    def build(cls, operator: Token, operand: ASTNode) -> PrefixExpressionNode:
        """Create the node with a span running from the operator to the operand."""
        return cls(
            operator=operator, operand=operand, span=operator.span.merge(operand.span)
        )

    def __str__(self) -> str:
        return f"({self.operator.lexeme}{self.operand})"


@dataclass
class InfixExpressionNode(ASTNode):
    type: NodeType = NodeType.INFIX_EXPR
    operator: Token = field(default_factory=lambda: Token(TokenType.PLUS))
    left: ASTNode = field(default_factory=lambda: IntegerLiteralNode())
    right: ASTNode = field(default_factory=lambda: IntegerLiteralNode())

    @classmethod
    def build(cls, left: ASTNode, operator: Token, right: ASTNode) -> InfixExpressionNode:
        """Create the node with a span from the left operand's start to the right operand's end."""
        return cls(
            operator=operator,
            left=left,
            right=right,
            span=Span(left.span.start, right.span.end),
        )

    def __str__(self) -> str:
        return f"({self.left} {self.operator.lexeme} {self.right})"


@dataclass
class FunctionCallNode(ASTNode):
    type: NodeType = NodeType.FUNC_CALL
    function: ASTNode = field(default_factory=lambda: IdentifierNode())
    arguments: List[ASTNode] = field(default_factory=list)

    @classmethod
    def build(
        cls, function: ASTNode, arguments: List[ASTNode], close_paren: Token
    ) -> FunctionCallNode:
        """Create the node with a span from the callee to the closing paren."""
        return cls(
            function=function,
            arguments=arguments,
            span=function.span.merge(close_paren.span),
        )

    def __str__(self) -> str:
        return f"{self.function}(" + ", ".join(str(a) for a in self.arguments) + ")"


def format_expressions(exprs: Sequence[ASTNode]) -> str:
    """Concatenate the renderings of `exprs` in order."""
    return "".join(str(expr) for expr in exprs)
