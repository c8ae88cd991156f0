"""Convert AST nodes into JSON-serializable structures.

This module provides `ast_to_json(node)` which returns a nested structure
of dicts/lists/primitives describing the AST node. It encodes the node type,
the key fields and the span as a `[start, end]` pair. Operator tokens are
encoded by their lexeme.
"""

from typing import Any, Dict, Optional
from ast_nodes import *


def _span(node: ASTNode) -> list:
    return [node.span.start, node.span.end]


def ast_to_json(node: Optional[ASTNode]) -> Any:
    if node is None:
        return None

    t = node.type
    data: Dict[str, Any]
    # literals
    if t == NodeType.INTEGER_LITERAL and isinstance(node, IntegerLiteralNode):
        data = {"node_type": "IntegerLiteral", "value": node.value}
    elif t == NodeType.BOOLEAN_LITERAL and isinstance(node, BooleanLiteralNode):
        data = {"node_type": "BooleanLiteral", "value": node.value}
    elif t == NodeType.STRING_LITERAL and isinstance(node, StringLiteralNode):
        data = {"node_type": "StringLiteral", "value": node.value}
    elif t == NodeType.ARRAY_LITERAL and isinstance(node, ArrayLiteralNode):
        data = {
            "node_type": "ArrayLiteral",
            "elements": [ast_to_json(e) for e in node.elements],
        }
    elif t == NodeType.HASH_LITERAL and isinstance(node, HashLiteralNode):
        data = {
            "node_type": "HashLiteral",
            "pairs": [[ast_to_json(k), ast_to_json(v)] for k, v in node.pairs],
        }
    elif t == NodeType.IDENTIFIER and isinstance(node, IdentifierNode):
        data = {"node_type": "Identifier", "name": node.name}
    # expressions
    elif t == NodeType.PREFIX_EXPR and isinstance(node, PrefixExpressionNode):
        data = {
            "node_type": "PrefixExpression",
            "operator": node.operator.lexeme,
            "operand": ast_to_json(node.operand),
        }
    elif t == NodeType.INFIX_EXPR and isinstance(node, InfixExpressionNode):
        data = {
            "node_type": "InfixExpression",
            "operator": node.operator.lexeme,
            "left": ast_to_json(node.left),
            "right": ast_to_json(node.right),
        }
    elif t == NodeType.FUNC_CALL and isinstance(node, FunctionCallNode):
        data = {
            "node_type": "FunctionCall",
            "function": ast_to_json(node.function),
            "arguments": [ast_to_json(a) for a in node.arguments],
        }
    else:
        raise TypeError(f"Cannot serialize AST node of type {t}")

    data["span"] = _span(node)
    return data
