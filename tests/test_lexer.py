import pytest
from main import lex
from lexer import Lexer
from tokens import Token, TokenType
from errors import IntegerOverflowError
from tests.utils import token_pairs


def test_lexer_tokenizes_simple_chars():
    types = [t.type for t in lex("=+(){},;")]
    assert types == [
        TokenType.ASSIGN,
        TokenType.PLUS,
        TokenType.LPAREN,
        TokenType.RPAREN,
        TokenType.LBRACE,
        TokenType.RBRACE,
        TokenType.COMMA,
        TokenType.SEMICOLON,
        TokenType.EOF,
    ]


def test_lexer_let_statement():
    assert lex("let five = 5;") == [
        Token(TokenType.LET, "let"),
        Token(TokenType.IDENTIFIER, "five"),
        Token(TokenType.ASSIGN, "="),
        Token(TokenType.INTEGER, 5),
        Token(TokenType.SEMICOLON, ";"),
        Token(TokenType.EOF, None),
    ]


def test_lexer_two_character_operators():
    assert token_pairs("10 == 10;") == [
        (TokenType.INTEGER, 10),
        (TokenType.EQ, "=="),
        (TokenType.INTEGER, 10),
        (TokenType.SEMICOLON, ";"),
    ]
    assert token_pairs("10 != 9;") == [
        (TokenType.INTEGER, 10),
        (TokenType.NOT_EQ, "!="),
        (TokenType.INTEGER, 9),
        (TokenType.SEMICOLON, ";"),
    ]


def test_lexer_single_assign_and_bang_without_lookahead_match():
    types = [t for t, _ in token_pairs("= ! =! !x")]
    assert types == [
        TokenType.ASSIGN,
        TokenType.BANG,
        TokenType.ASSIGN,
        TokenType.BANG,
        TokenType.BANG,
        TokenType.IDENTIFIER,
    ]


def test_lexer_recognizes_all_keywords():
    src = "fn let return true false if else"
    types = [t for t, _ in token_pairs(src)]
    assert types == [
        TokenType.FUNCTION,
        TokenType.LET,
        TokenType.RETURN,
        TokenType.TRUE,
        TokenType.FALSE,
        TokenType.IF,
        TokenType.ELSE,
    ]


def test_lexer_full_program():
    src = """let add = fn(x, y) {
        x + y;
    };
    !-/*5;
    5 < 10 > 5;
    if (5 < 10) { return true; } else { return false; }
    """
    types = [t for t, _ in token_pairs(src)]
    assert types[:6] == [
        TokenType.LET,
        TokenType.IDENTIFIER,
        TokenType.ASSIGN,
        TokenType.FUNCTION,
        TokenType.LPAREN,
        TokenType.IDENTIFIER,
    ]
    assert [
        TokenType.BANG,
        TokenType.MINUS,
        TokenType.SLASH,
        TokenType.ASTERISK,
        TokenType.INTEGER,
    ] == types[16:21]
    assert types.count(TokenType.RETURN) == 2
    assert types[-1] == TokenType.RBRACE


def test_identifiers_do_not_contain_digits():
    assert token_pairs("abc123") == [
        (TokenType.IDENTIFIER, "abc"),
        (TokenType.INTEGER, 123),
    ]
    assert token_pairs("_under_score") == [(TokenType.IDENTIFIER, "_under_score")]


def test_keyword_prefix_is_an_identifier():
    assert token_pairs("letter returns") == [
        (TokenType.IDENTIFIER, "letter"),
        (TokenType.IDENTIFIER, "returns"),
    ]


def test_whitespace_is_skipped():
    assert token_pairs(" \t\n let\r\n x ") == [
        (TokenType.LET, "let"),
        (TokenType.IDENTIFIER, "x"),
    ]


def test_illegal_character_becomes_token_and_scanning_continues():
    assert token_pairs("a @ b") == [
        (TokenType.IDENTIFIER, "a"),
        (TokenType.ILLEGAL, "@"),
        (TokenType.IDENTIFIER, "b"),
    ]


@pytest.mark.parametrize("ch", ["@", "#", "$", "%", "&", "|", "[", "?", "\"", "~"])
def test_each_unrecognized_character_yields_one_illegal_token(ch):
    assert token_pairs(f"1{ch}2") == [
        (TokenType.INTEGER, 1),
        (TokenType.ILLEGAL, ch),
        (TokenType.INTEGER, 2),
    ]


def test_only_illegal_characters():
    tokens = lex("@@@")
    assert [t.type for t in tokens] == [TokenType.ILLEGAL] * 3 + [TokenType.EOF]


def test_eof_is_idempotent():
    lexer = Lexer("x")
    assert lexer.next_token() == Token(TokenType.IDENTIFIER, "x")
    for _ in range(5):
        assert lexer.next_token() == Token(TokenType.EOF, None)


def test_empty_input_yields_eof():
    assert lex("") == [Token(TokenType.EOF, None)]
    assert lex("   \n") == [Token(TokenType.EOF, None)]


def test_tokenizing_is_deterministic():
    src = "let x = 10; x != 9; @ fn(a, b) { a };"
    assert lex(src) == lex(src)


def test_int32_max_is_accepted():
    assert token_pairs("2147483647") == [(TokenType.INTEGER, 2147483647)]


def test_integer_overflow_is_reported():
    lexer = Lexer("2147483648")
    with pytest.raises(IntegerOverflowError) as exc_info:
        lexer.next_token()
    assert exc_info.value.literal == "2147483648"


def test_integer_overflow_consumes_digits_and_scanning_continues():
    lexer = Lexer("99999999999999999999 ;")
    with pytest.raises(IntegerOverflowError):
        lexer.next_token()
    assert lexer.next_token() == Token(TokenType.SEMICOLON, ";")
    assert lexer.next_token() == Token(TokenType.EOF, None)


def test_tokenize_propagates_overflow():
    with pytest.raises(SyntaxError):
        lex("let x = 4294967296;")


def test_tokens_are_immutable():
    token = Token(TokenType.IDENTIFIER, "x")
    with pytest.raises(AttributeError):
        token.value = "y"


def test_very_long_digit_run_is_overflow_not_crash():
    literal = "9" * 5000
    lexer = Lexer(literal + " x")
    with pytest.raises(IntegerOverflowError) as exc_info:
        lexer.next_token()
    assert exc_info.value.literal == literal
    assert lexer.next_token() == Token(TokenType.IDENTIFIER, "x")


def test_leading_zeros_do_not_count_toward_overflow():
    assert token_pairs("000000000000042") == [(TokenType.INTEGER, 42)]
    assert token_pairs("0") == [(TokenType.INTEGER, 0)]
    with pytest.raises(IntegerOverflowError):
        lex("0002147483648")
