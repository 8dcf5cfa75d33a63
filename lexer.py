"""
Lexer for the Monkey language.

Overview:
- This module implements a small hand-written lexical analyzer (scanner) that
    transforms an input source string into a stream of `Token` objects defined
    in `tokens.py`. Tokens are produced lazily, one per `next_token()` call.
- It recognizes keywords (`fn`, `let`, `return`, `if`, `else`, `true`,
    `false`), identifiers, integer literals, the two-character operators `==`
    and `!=`, single-character operators and punctuation, and skips
    whitespace.

Examples:
    Input:  "let five = 5;"
    Tokens: [LET, IDENTIFIER('five'), ASSIGN, INTEGER(5), SEMICOLON, EOF]

Implementation notes:
- The lexer is a simple stateful scanner using `self.pos` and `self.current_char`.
- `=` and `!` peek one character ahead and only consume it when it is `=`.
- Identifiers are runs of letters and underscores (no digits) and are mapped
    to keywords through `KEYWORDS` after the whole run is scanned.
- Integer literals must fit a signed 32-bit integer; larger runs raise
    `IntegerOverflowError` after the digits have been consumed.
- Unrecognized characters become `ILLEGAL` tokens; the lexer never stops on them.
- Once the input is exhausted every call returns `EOF`.
"""

from __future__ import annotations
from typing import Optional, List
from tokens import KEYWORDS, Token, TokenType
from errors import IntegerOverflowError

INT32_MAX = 2**31 - 1

SINGLE_CHAR_TOKENS = {
    "+": TokenType.PLUS,
    "-": TokenType.MINUS,
    "*": TokenType.ASTERISK,
    "/": TokenType.SLASH,
    "<": TokenType.LT,
    ">": TokenType.GT,
    ",": TokenType.COMMA,
    ";": TokenType.SEMICOLON,
    "(": TokenType.LPAREN,
    ")": TokenType.RPAREN,
    "{": TokenType.LBRACE,
    "}": TokenType.RBRACE,
}


def is_letter(ch: Optional[str]) -> bool:
    return ch is not None and (ch.isalpha() or ch == "_")


def is_digit(ch: Optional[str]) -> bool:
    return ch is not None and "0" <= ch <= "9"


class Lexer:
    def __init__(self, text: str):
        self.text = text
        self.pos = 0
        self.current_char = self.text[self.pos] if self.text else None

    def advance(self) -> None:
        """Advance to next character."""
        self.pos += 1
        if self.pos < len(self.text):
            self.current_char = self.text[self.pos]
        else:
            self.current_char = None

    def peek_char(self) -> Optional[str]:
        """Look at next character without consuming it."""
        next_pos = self.pos + 1
        if next_pos < len(self.text):
            return self.text[next_pos]
        return None

    def match_next_char(self, expected: str) -> bool:
        """Consume the next character only if it equals `expected`."""
        if self.peek_char() == expected:
            self.advance()
            return True
        return False

    def skip_whitespace(self) -> None:
        """Skip whitespace characters."""
        while self.current_char is not None and self.current_char.isspace():
            self.advance()

    def integer(self) -> int:
        """Parse a multi-digit integer."""
        start = self.pos
        while is_digit(self.current_char):
            self.advance()

        literal = self.text[start : self.pos]
        # Check the length first: int() refuses very long digit strings.
        digits = literal.lstrip("0") or "0"
        if len(digits) > len(str(INT32_MAX)) or int(digits) > INT32_MAX:
            raise IntegerOverflowError(literal)
        return int(digits)

    def identifier(self) -> str:
        """Parse an identifier or keyword."""
        start = self.pos
        while is_letter(self.current_char):
            self.advance()
        return self.text[start : self.pos]

    def next_token(self) -> Token:
        """Lexical analyzer that returns tokens one at a time."""
        self.skip_whitespace()

        ch = self.current_char
        if ch is None:
            return Token(TokenType.EOF, None)

        # Identifiers/keywords and integers leave the cursor on the first
        # character after the run, so they return without a trailing advance.
        if is_letter(ch):
            ident = self.identifier()
            return Token(KEYWORDS.get(ident, TokenType.IDENTIFIER), ident)

        if is_digit(ch):
            return Token(TokenType.INTEGER, self.integer())

        match ch:
            case "=":
                if self.match_next_char("="):
                    token = Token(TokenType.EQ, "==")
                else:
                    token = Token(TokenType.ASSIGN, "=")
            case "!":
                if self.match_next_char("="):
                    token = Token(TokenType.NOT_EQ, "!=")
                else:
                    token = Token(TokenType.BANG, "!")
            case _ if ch in SINGLE_CHAR_TOKENS:
                token = Token(SINGLE_CHAR_TOKENS[ch], ch)
            case _:
                token = Token(TokenType.ILLEGAL, ch)

        self.advance()
        return token

    def tokenize(self) -> List[Token]:
        """Return all tokens from the input string, ending with EOF."""
        tokens = []
        while True:
            token = self.next_token()
            tokens.append(token)
            if token.type == TokenType.EOF:
                break
        return tokens
