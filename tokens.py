"""Token definitions for the lexer.

This module defines the `TokenType` enum for all token kinds recognized by
the lexer and a small frozen `Token` dataclass that holds a token type and an
optional lexeme/value. Tokens are the atomic units produced by the lexer and
consumed by the parser. They carry no source position and compare by value.
"""

from __future__ import annotations
from enum import Enum, auto
from dataclasses import dataclass
from typing import Optional


class TokenType(Enum):
    # Special
    EOF = auto()
    ILLEGAL = auto()

    # Literals
    IDENTIFIER = auto()
    INTEGER = auto()

    # Operators
    ASSIGN = auto()
    PLUS = auto()
    MINUS = auto()
    BANG = auto()
    ASTERISK = auto()
    SLASH = auto()

    # Comparison operators
    LT = auto()
    GT = auto()
    EQ = auto()
    NOT_EQ = auto()

    # Punctuation
    COMMA = auto()
    SEMICOLON = auto()
    LPAREN = auto()
    RPAREN = auto()
    LBRACE = auto()
    RBRACE = auto()

    # Keywords
    FUNCTION = auto()
    LET = auto()
    RETURN = auto()
    IF = auto()
    ELSE = auto()
    TRUE = auto()
    FALSE = auto()

    def __str__(self) -> str:
        return self.name


KEYWORDS = {
    "fn": TokenType.FUNCTION,
    "let": TokenType.LET,
    "return": TokenType.RETURN,
    "true": TokenType.TRUE,
    "false": TokenType.FALSE,
    "if": TokenType.IF,
    "else": TokenType.ELSE,
}


@dataclass(frozen=True)
class Token:
    type: TokenType
    value: Optional[str | int] = None

    def __repr__(self) -> str:
        return f"Token({self.type}, {repr(self.value)})"

    @property
    def lexeme(self) -> str:
        if self.value is None:
            return str(self.type)
        return str(self.value)
