"""Graphviz visualization helpers for ASTs.

Provides `render_ast_dot(node)` which returns a `graphviz.Digraph` object
(not rendered). Optionally `write_and_render` can write the file to disk.

Layout: one graph node per AST node, labeled with its kind and payload
(`Integer 5`, `Let x`). Edges from a parent to its children are labeled with
the field name (`value`, `expression`, `stmt[0]`). Statements are emitted in
source order, so the program's children read left to right.
"""

from typing import List, Tuple
from graphviz import Digraph
from ast_nodes import *


def _label(node: ASTNode) -> str:
    """Return a short label for a node."""
    match node:
        case IntegerNode(value=v):
            text = f"Integer {v}"
        case BooleanNode(value=v):
            text = f"Boolean {'true' if v else 'false'}"
        case IdentifierNode():
            text = f"Identifier {node.name}"
        case LetStatementNode(name=name):
            text = f"Let {name.lexeme}"
        case ReturnStatementNode():
            text = "Return"
        case ExpressionStatementNode():
            text = "ExpressionStatement"
        case ProgramNode():
            text = "Program"
        case _:
            text = str(getattr(node, "type", type(node).__name__))
    return text


def _children(node: ASTNode) -> List[Tuple[str, ASTNode]]:
    match node:
        case LetStatementNode(value=value) | ReturnStatementNode(value=value):
            return [("value", value)]
        case ExpressionStatementNode(expression=expr):
            return [("expression", expr)]
        case ProgramNode(statements=stmts):
            return [(f"stmt[{i}]", s) for i, s in enumerate(stmts)]
        case _:
            # Nodes added through the parser's registry: any AST-valued field.
            return [
                (k, v)
                for k, v in getattr(node, "__dict__", {}).items()
                if isinstance(v, ASTNode)
            ]


def render_ast_dot(node: ASTNode) -> Digraph:
    """Return a graphviz.Digraph for the given AST.

    The caller may call `dot.source` to inspect the dot text, or call
    `dot.render(filename, format=...)` to write files (requires Graphviz installed).
    """
    dot = Digraph(format="svg")
    dot.attr("graph", rankdir="TB", ordering="out")
    dot.attr("node", shape="box", style="rounded", fontsize="10")

    counter = 0
    queue: List[Tuple[str, ASTNode]] = []

    def _emit(n: ASTNode) -> str:
        nonlocal counter
        name = f"n{counter}"
        counter += 1
        dot.node(name, label=_label(n))
        queue.append((name, n))
        return name

    _emit(node)
    while queue:
        parent_name, parent = queue.pop(0)
        for field_name, child in _children(parent):
            child_name = _emit(child)
            dot.edge(parent_name, child_name, label=field_name)

    return dot


def write_and_render(node: ASTNode, out_path: str, fmt: str = "svg") -> None:
    """Write and render the AST to the given path (without extension).

    Example: write_and_render(program, 'out/ast', fmt='png') will create
    out/ast.png (requires Graphviz)."""
    dot = render_ast_dot(node)
    dot.format = fmt
    # Note: render will append extension automatically
    dot.render(out_path, cleanup=True)
