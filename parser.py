"""
Parser for the Monkey language.

Overview and approach:
- The parser pulls tokens from a `Lexer` one at a time and keeps a single
    token of lookahead in `self.current`. It never backtracks.
- Statements are dispatched on the current token: `let`, `return`, and
    anything else as an expression statement. A trailing `;` is optional.
- Expressions use a Pratt-style registry. `prefix_parse_fns` maps a token
    type to a function that starts an expression at that token;
    `infix_parse_fns` maps a token type to a function that continues an
    expression given the left side, and `precedences` gives its binding power.
    `parse_expression()` is the precedence-climbing loop over these tables.

Registered by default:
    INTEGER, TRUE, FALSE and IDENTIFIER prefixes. No infix behaviors are
    registered; `register_prefix()` and `register_infix()` add more forms
    without changing the loop.

Error recovery:
- A malformed statement raises `ParseError` internally. `parse_program()`
    records it in `self.errors`, skips to the next statement boundary and
    keeps going, so one bad statement does not hide the rest.
- An integer literal that overflows in the lexer is replaced by an ILLEGAL
    token; using it as an expression raises `INTEGER_OVERFLOW`.

Examples:
    Input:  "let x = 10; return x;"
    Output: Program(Let(x, Integer(10)), Return(Identifier(x)))
"""

from __future__ import annotations
import logging
from enum import IntEnum, auto
from typing import Callable, Dict, List, Optional
from tokens import Token, TokenType
from lexer import Lexer
from errors import LexerError, ParseError, ParseErrorKind
from ast_nodes import *

logger = logging.getLogger(__name__)

PrefixParseFn = Callable[[], ASTNode]
InfixParseFn = Callable[[ASTNode], ASTNode]

# Tokens where recovery stops without consuming them.
STATEMENT_STARTS = (TokenType.LET, TokenType.RETURN)


class Precedence(IntEnum):
    """Binding power of operators, lowest to highest."""

    LOWEST = auto()
    EQUALS = auto()  # == !=
    LESSGREATER = auto()  # < >
    SUM = auto()  # + -
    PRODUCT = auto()  # * /
    PREFIX = auto()  # -x !x
    CALL = auto()  # f(x)


class Parser:
    def __init__(self, lexer: Lexer):
        self.lexer = lexer
        self.errors: List[ParseError] = []
        # Number of tokens pulled so far; used to tell whether recovery moved.
        self.pos = -1
        self.current = Token(TokenType.EOF, None)
        self.current_error: Optional[LexerError] = None

        self.prefix_parse_fns: Dict[TokenType, PrefixParseFn] = {}
        self.infix_parse_fns: Dict[TokenType, InfixParseFn] = {}
        self.precedences: Dict[TokenType, Precedence] = {}

        self.register_prefix(TokenType.INTEGER, self.parse_integer_literal)
        self.register_prefix(TokenType.TRUE, self.parse_boolean_literal)
        self.register_prefix(TokenType.FALSE, self.parse_boolean_literal)
        self.register_prefix(TokenType.IDENTIFIER, self.parse_identifier)

        self.advance()

    def register_prefix(self, token_type: TokenType, fn: PrefixParseFn) -> None:
        """Register how an expression starts at `token_type`."""
        self.prefix_parse_fns[token_type] = fn

    def register_infix(
        self, token_type: TokenType, precedence: Precedence, fn: InfixParseFn
    ) -> None:
        """Register how an expression continues at `token_type`.

        `fn` receives the left-hand expression with `self.current` still on
        the operator token; it must consume the operator and parse its right
        side, normally with `self.parse_expression(precedence)`.
        """
        self.infix_parse_fns[token_type] = fn
        self.precedences[token_type] = precedence

    def advance(self) -> Token:
        """Pull the next token from the lexer."""
        self.pos += 1
        try:
            self.current = self.lexer.next_token()
            self.current_error = None
        except LexerError as e:
            # Keep the token stream going; the error surfaces when a
            # statement tries to use this token.
            literal = getattr(e, "literal", "")
            self.current = Token(TokenType.ILLEGAL, literal)
            self.current_error = e
        return self.current

    def error(self, kind: ParseErrorKind) -> ParseError:
        if self.current.type == TokenType.EOF:
            kind = ParseErrorKind.UNEXPECTED_END_OF_INPUT
        return ParseError(kind, self.current)

    def expect(self, expected_type: TokenType, kind: ParseErrorKind) -> Token:
        """Expect and consume token of given type."""
        if self.current_error is not None:
            raise ParseError(ParseErrorKind.INTEGER_OVERFLOW, self.current)
        if self.current.type == expected_type:
            token = self.current
            self.advance()
            return token
        raise self.error(kind)

    def match(self, token_type: TokenType) -> bool:
        """Check if current token matches type, consume if true."""
        if self.current.type == token_type:
            self.advance()
            return True
        return False

    def current_precedence(self) -> Precedence:
        return self.precedences.get(self.current.type, Precedence.LOWEST)

    def parse_integer_literal(self) -> IntegerNode:
        token = self.current
        self.advance()
        return IntegerNode(value=token.value)

    def parse_boolean_literal(self) -> BooleanNode:
        token = self.current
        self.advance()
        return BooleanNode(value=token.type == TokenType.TRUE)

    def parse_identifier(self) -> IdentifierNode:
        token = self.current
        self.advance()
        return IdentifierNode(token=token)

    def parse_expression(self, precedence: Precedence = Precedence.LOWEST) -> ASTNode:
        """Parse an expression by precedence climbing."""
        if self.current_error is not None:
            raise ParseError(ParseErrorKind.INTEGER_OVERFLOW, self.current)

        prefix = self.prefix_parse_fns.get(self.current.type)
        if prefix is None:
            raise self.error(ParseErrorKind.UNEXPECTED_STATEMENT_START)
        left = prefix()

        # Strict `>` binds equal-precedence operators to the left.
        while (
            self.current.type not in (TokenType.SEMICOLON, TokenType.EOF)
            and precedence < self.current_precedence()
        ):
            infix = self.infix_parse_fns.get(self.current.type)
            if infix is None:
                break
            left = infix(left)

        return left

    def parse_let_statement(self) -> LetStatementNode:
        """Parse let statement: let ident = expr ;?"""
        self.expect(TokenType.LET, ParseErrorKind.UNEXPECTED_STATEMENT_START)
        name = self.expect(TokenType.IDENTIFIER, ParseErrorKind.EXPECTED_IDENTIFIER)
        self.expect(TokenType.ASSIGN, ParseErrorKind.EXPECTED_ASSIGN_TOKEN)
        value = self.parse_expression()
        self.match(TokenType.SEMICOLON)
        return LetStatementNode(name=name, value=value)

    def parse_return_statement(self) -> ReturnStatementNode:
        """Parse return statement: return expr ;?"""
        self.expect(TokenType.RETURN, ParseErrorKind.UNEXPECTED_STATEMENT_START)
        value = self.parse_expression()
        self.match(TokenType.SEMICOLON)
        return ReturnStatementNode(value=value)

    def parse_expression_statement(self) -> ExpressionStatementNode:
        """Parse expression statement: expr ;?"""
        expr = self.parse_expression()
        self.match(TokenType.SEMICOLON)
        return ExpressionStatementNode(expression=expr)

    def parse_statement(self) -> ASTNode:
        """Parse a statement."""
        match self.current.type:
            case TokenType.LET:
                return self.parse_let_statement()
            case TokenType.RETURN:
                return self.parse_return_statement()
            case _:
                return self.parse_expression_statement()

    def synchronize(self, start_pos: int) -> None:
        """Skip past a malformed statement that began at token `start_pos`."""
        while self.current.type != TokenType.EOF:
            if self.current.type == TokenType.SEMICOLON:
                self.advance()
                return
            if self.current.type in STATEMENT_STARTS and self.pos > start_pos:
                return
            self.advance()

    def parse_program(self) -> ProgramNode:
        """Parse a complete program (sequence of statements)."""
        statements: List[ASTNode] = []

        while self.current.type != TokenType.EOF:
            start_pos = self.pos
            try:
                statements.append(self.parse_statement())
            except ParseError as e:
                logger.debug("recording %r: %s", e, e)
                self.errors.append(e)
                self.synchronize(start_pos)
                logger.debug("resuming at %r", self.current)

        return ProgramNode(statements=statements)
