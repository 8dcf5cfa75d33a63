"""Convert AST nodes into JSON-serializable structures.

This module provides `ast_to_json(node)` which returns a nested structure
of dicts/lists/primitives describing the AST node. It's intentionally
simple: it encodes the node type and key fields. Tokens are encoded as
`{"token_type": ..., "value": ...}`.
"""

from typing import Any, Dict, Optional
from ast_nodes import *
from tokens import Token


def token_to_json(token: Token) -> Dict[str, Any]:
    return {"token_type": token.type.name, "value": token.value}


def ast_to_json(node: Optional[ASTNode]) -> Any:
    if node is None:
        return None

    t = node.type
    # expressions
    if t == NodeType.INTEGER and isinstance(node, IntegerNode):
        return {"node_type": "Integer", "value": node.value}
    if t == NodeType.BOOLEAN and isinstance(node, BooleanNode):
        return {"node_type": "Boolean", "value": node.value}
    if t == NodeType.IDENTIFIER and isinstance(node, IdentifierNode):
        return {"node_type": "Identifier", "token": token_to_json(node.token)}
    # statements
    if t == NodeType.LET_STMT and isinstance(node, LetStatementNode):
        return {
            "node_type": "Let",
            "name": token_to_json(node.name),
            "value": ast_to_json(node.value),
        }
    if t == NodeType.RETURN_STMT and isinstance(node, ReturnStatementNode):
        return {"node_type": "Return", "value": ast_to_json(node.value)}
    if t == NodeType.EXPR_STMT and isinstance(node, ExpressionStatementNode):
        return {"node_type": "ExprStmt", "expression": ast_to_json(node.expression)}
    if t == NodeType.PROGRAM and isinstance(node, ProgramNode):
        return {
            "node_type": "Program",
            "statements": [ast_to_json(s) for s in node.statements],
        }

    # Nodes added through the parser's registry: fall back to their fields.
    data: Dict[str, Any] = {"node_type": getattr(t, "name", str(t))}
    for k, v in getattr(node, "__dict__", {}).items():
        if k == "type":
            continue
        if isinstance(v, ASTNode):
            data[k] = ast_to_json(v)
        elif isinstance(v, Token):
            data[k] = token_to_json(v)
        elif isinstance(v, (list, tuple)):
            data[k] = [ast_to_json(x) if isinstance(x, ASTNode) else x for x in v]
        else:
            data[k] = v
    return data
