"""Error taxonomy for the lexer and parser.

Both layers raise subclasses of `SyntaxError`. Errors are structured so a
caller can branch on `ParseError.kind` instead of matching message text.

- `IntegerOverflowError` is raised by the lexer when a digit run does not fit
  a signed 32-bit integer.
- `ParseError` is raised inside the parser for a malformed statement. The
  parser catches it, records it in `Parser.errors` and resynchronizes, so it
  never escapes `Parser.parse_program()`.

Illegal characters are not errors at this level: the lexer emits them as
`ILLEGAL` tokens and leaves the decision to the parser.
"""

from __future__ import annotations
from enum import Enum, auto
from typing import Optional
from tokens import Token, TokenType


class LexerError(SyntaxError):
    """Base class for failures raised while scanning characters."""


class IntegerOverflowError(LexerError):
    def __init__(self, literal: str):
        self.literal = literal
        super().__init__(f"Integer literal {literal} does not fit in 32 bits")


class ParseErrorKind(Enum):
    EXPECTED_IDENTIFIER = auto()
    EXPECTED_ASSIGN_TOKEN = auto()
    # Raised for any token with no registered prefix behavior in expression
    # position, including the first token of a statement.
    UNEXPECTED_STATEMENT_START = auto()
    UNEXPECTED_END_OF_INPUT = auto()
    INTEGER_OVERFLOW = auto()

    def __str__(self) -> str:
        return self.name


_MESSAGES = {
    ParseErrorKind.EXPECTED_IDENTIFIER: "Expected identifier after 'let', got {lexeme}",
    ParseErrorKind.EXPECTED_ASSIGN_TOKEN: "Expected '=' after identifier, got {lexeme}",
    ParseErrorKind.UNEXPECTED_STATEMENT_START: "Unexpected token {lexeme}",
    ParseErrorKind.UNEXPECTED_END_OF_INPUT: "Unexpected end of input",
    ParseErrorKind.INTEGER_OVERFLOW: "Integer literal {lexeme} does not fit in 32 bits",
}


class ParseError(SyntaxError):
    def __init__(
        self,
        kind: ParseErrorKind,
        token: Optional[Token] = None,
        message: Optional[str] = None,
    ):
        self.kind = kind
        self.token = token if token is not None else Token(TokenType.EOF, None)
        msg = message or _MESSAGES[kind].format(lexeme=repr(self.token.lexeme))
        super().__init__(msg)

    def __repr__(self) -> str:
        return f"ParseError({self.kind}, {self.token!r})"
