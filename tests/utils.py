from lexer import Lexer
from parser import Parser
from tokens import TokenType


def token_pairs(text: str):
    """Return (type, value) pairs for every token in `text`, EOF excluded."""
    return [(t.type, t.value) for t in Lexer(text).tokenize() if t.type != TokenType.EOF]


def parse_with_errors(text: str):
    """Convenience: lex+parse a source text, returning (program, errors)."""
    parser = Parser(Lexer(text))
    program = parser.parse_program()
    return program, parser.errors


def parse_text(text: str):
    """Parse a source text that is expected to be well formed."""
    program, errors = parse_with_errors(text)
    assert errors == [], f"unexpected parse errors: {errors}"
    return program
