"""Graphviz visualization helpers for expression trees.

Provides `render_ast_dot(exprs)` which returns a `graphviz.Digraph` object
(not rendered). Optionally `write_and_render` can write the file to disk.

Each AST node becomes a box labelled with its kind, its key field (name,
value or operator) and its span. Edges run from parent to child and are
labelled with the child's role (`left`, `right`, `operand`, `arg0`, ...).
"""

from typing import Iterator, List, Optional, Sequence, Tuple, Union
from ast_nodes import *
from graphviz import Digraph


def _children(node: ASTNode) -> Iterator[Tuple[str, ASTNode]]:
    """Yield `(role, child)` pairs in source order."""
    if isinstance(node, PrefixExpressionNode):
        yield "operand", node.operand
    elif isinstance(node, InfixExpressionNode):
        yield "left", node.left
        yield "right", node.right
    elif isinstance(node, FunctionCallNode):
        yield "function", node.function
        for i, arg in enumerate(node.arguments):
            yield f"arg{i}", arg
    elif isinstance(node, ArrayLiteralNode):
        for i, elem in enumerate(node.elements):
            yield f"[{i}]", elem
    elif isinstance(node, HashLiteralNode):
        for i, (key, value) in enumerate(node.pairs):
            yield f"key{i}", key
            yield f"value{i}", value


def _label(node: ASTNode) -> str:
    if isinstance(node, IdentifierNode):
        detail = node.name
    elif isinstance(node, (IntegerLiteralNode, BooleanLiteralNode, StringLiteralNode)):
        detail = str(node)
    elif isinstance(node, (PrefixExpressionNode, InfixExpressionNode)):
        detail = node.operator.lexeme
    else:
        detail = ""
    parts = [str(node.type)]
    if detail:
        # Backslashes are escapes inside DOT labels.
        parts.append(detail.replace("\\", "\\\\"))
    parts.append(f"[{node.span}]")
    return "\\n".join(parts)


def render_ast_dot(exprs: Union[ASTNode, Sequence[ASTNode]]) -> Digraph:
    """Return a graphviz.Digraph for one expression or a sequence of them.

    The caller may call `dot.source` to inspect the dot text, or call
    `dot.render(filename, format=...)` to write files (requires Graphviz installed).
    """
    if isinstance(exprs, ASTNode):
        exprs = [exprs]

    dot = Digraph(format="svg")
    dot.attr("graph", rankdir="TB")
    dot.attr("node", shape="box", fontname="monospace")

    counter = 0
    stack: List[Tuple[Optional[str], str, ASTNode]] = []
    for expr in reversed(exprs):
        stack.append((None, "", expr))

    while stack:
        parent_id, role, node = stack.pop()
        node_id = f"n{counter}"
        counter += 1
        dot.node(node_id, _label(node))
        if parent_id is not None:
            dot.edge(parent_id, node_id, label=role)
        # Push in reverse so children are emitted left to right.
        for child_role, child in reversed(list(_children(node))):
            stack.append((node_id, child_role, child))

    return dot


def write_and_render(
    exprs: Union[ASTNode, Sequence[ASTNode]],
    out_path: str,
    fmt: str = "svg",
) -> None:
    """Write and render the tree to the given path (without extension).

    Example: write_and_render(expr, 'out/ast', fmt='png') will create out/ast.png
    (requires Graphviz)."""
    dot = render_ast_dot(exprs)
    dot.format = fmt
    # Note: render will append extension automatically
    dot.render(out_path, cleanup=True)
