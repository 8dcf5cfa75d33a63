"""AST node definitions for the Monkey language.

This module defines the AST node dataclasses built by the parser and read by
the printers. Each node is a frozen dataclass tagged with a `NodeType`, which
the pretty-printer and JSON dumper use to identify node kinds.

Conventions:
- All AST node dataclasses inherit from `ASTNode` which records the node
    kind (`NodeType`). Nodes carry no source positions.
- Nodes are frozen and `ProgramNode.statements` is a tuple, so a program
    handed back by the parser cannot be changed afterwards.
- Expression nodes are leaves for now (integer, boolean, identifier).
    Operator and call forms plug in through the parser's infix registry.
"""

from __future__ import annotations
from dataclasses import dataclass, field
from enum import Enum, auto
from typing import Tuple, Union
from tokens import Token, TokenType


class NodeType(Enum):
    INTEGER = auto()
    BOOLEAN = auto()
    IDENTIFIER = auto()
    LET_STMT = auto()
    RETURN_STMT = auto()
    EXPR_STMT = auto()
    PROGRAM = auto()

    def __str__(self) -> str:
        return self.name


def _require_identifier(token: Token, owner: str) -> None:
    if not isinstance(token, Token) or token.type != TokenType.IDENTIFIER:
        raise TypeError(f"{owner} requires an IDENTIFIER token, got {token!r}")


# Base AST Node
@dataclass(frozen=True)
class ASTNode:
    type: NodeType


# Expression Nodes
@dataclass(frozen=True)
class IntegerNode(ASTNode):
    type: NodeType = NodeType.INTEGER
    value: int = 0


@dataclass(frozen=True)
class BooleanNode(ASTNode):
    type: NodeType = NodeType.BOOLEAN
    value: bool = False


@dataclass(frozen=True)
class IdentifierNode(ASTNode):
    type: NodeType = NodeType.IDENTIFIER
    token: Token = field(default_factory=lambda: Token(TokenType.IDENTIFIER, ""))

    def __post_init__(self) -> None:
        _require_identifier(self.token, "IdentifierNode")

    @property
    def name(self) -> str:
        return self.token.lexeme


Expression = Union[IntegerNode, BooleanNode, IdentifierNode]


# Statement Nodes
@dataclass(frozen=True)
class LetStatementNode(ASTNode):
    type: NodeType = NodeType.LET_STMT
    name: Token = field(default_factory=lambda: Token(TokenType.IDENTIFIER, ""))
    value: ASTNode = field(default_factory=lambda: IntegerNode())

    def __post_init__(self) -> None:
        _require_identifier(self.name, "LetStatementNode")


@dataclass(frozen=True)
class ReturnStatementNode(ASTNode):
    type: NodeType = NodeType.RETURN_STMT
    value: ASTNode = field(default_factory=lambda: IntegerNode())


@dataclass(frozen=True)
class ExpressionStatementNode(ASTNode):
    type: NodeType = NodeType.EXPR_STMT
    expression: ASTNode = field(default_factory=lambda: IntegerNode())


# Program Node
@dataclass(frozen=True)
class ProgramNode(ASTNode):
    type: NodeType = NodeType.PROGRAM
    statements: Tuple[ASTNode, ...] = ()

    def __post_init__(self) -> None:
        # Accept any iterable but always store an immutable tuple.
        object.__setattr__(self, "statements", tuple(self.statements))
