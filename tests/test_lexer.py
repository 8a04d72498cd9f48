import io

import pytest

from arithcalc.lexer import Lexer, Token, TokenType, tokenize, untokenize


@pytest.mark.parametrize(
    "code, expected_types",
    [
        pytest.param("", [TokenType.END_OF_INPUT]),
        pytest.param(" \t\n", [TokenType.END_OF_INPUT]),
        pytest.param(
            "()-+*/^",
            [
                TokenType.LEFT_PAREN,
                TokenType.RIGHT_PAREN,
                TokenType.MINUS,
                TokenType.PLUS,
                TokenType.STAR,
                TokenType.SLASH,
                TokenType.CARET,
                TokenType.END_OF_INPUT,
            ],
        ),
        pytest.param(
            "3 & 4",
            [TokenType.NUMBER, TokenType.INVALID, TokenType.NUMBER, TokenType.END_OF_INPUT],
        ),
        pytest.param("\r", [TokenType.INVALID, TokenType.END_OF_INPUT], id="carriage-return-is-not-whitespace"),
        pytest.param("x", [TokenType.INVALID, TokenType.END_OF_INPUT]),
        pytest.param("٣", [TokenType.INVALID, TokenType.END_OF_INPUT], id="non-ascii-digit"),
    ],
)
def test_token_types(code: str, expected_types: list[TokenType]) -> None:
    assert [t.type for t in tokenize(code)] == expected_types


@pytest.mark.parametrize(
    "code, expected_lexeme, expected_value",
    [
        pytest.param("42", "42", 42.0),
        pytest.param("3.14", "3.14", 3.14),
        pytest.param("3.", "3.", 3.0),
        pytest.param("0.5", "0.5", 0.5),
    ],
)
def test_number_literal(code: str, expected_lexeme: str, expected_value: float) -> None:
    token = Lexer.from_string(code).next_token()
    assert token == Token(type=TokenType.NUMBER, lexeme=expected_lexeme, value=expected_value)


def test_second_dot_ends_literal() -> None:
    tokens = tokenize("1.2.3")
    assert [t.type for t in tokens] == [TokenType.NUMBER, TokenType.INVALID, TokenType.NUMBER, TokenType.END_OF_INPUT]
    assert tokens[0].value == 1.2
    assert tokens[2].value == 3.0


def test_end_of_input_repeats() -> None:
    lexer = Lexer.from_string("1")
    assert lexer.next_token().type is TokenType.NUMBER
    assert lexer.next_token().type is TokenType.END_OF_INPUT
    assert lexer.next_token().type is TokenType.END_OF_INPUT


def test_reads_lazily_from_stream() -> None:
    source = io.StringIO("12 + 3")
    lexer = Lexer(source)
    assert lexer.next_token().value == 12.0
    # one character of lookahead past the literal
    assert source.tell() == 3


def test_untokenize() -> None:
    assert untokenize(tokenize("( 1+2 ) * 4 ^ 5")) == "(1 + 2) * 4^5"
