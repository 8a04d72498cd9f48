import pytest

from arithcalc.lexer import Lexer, Token, TokenType
from arithcalc.parser import Binary, CalcSyntaxError, Number, Parenthesized, Parser, Unary, format_expression, parse

PLUS = Token(type=TokenType.PLUS, lexeme="+")
MINUS = Token(type=TokenType.MINUS, lexeme="-")
CARET = Token(type=TokenType.CARET, lexeme="^")


@pytest.mark.parametrize(
    "code, expected_ast",
    [
        pytest.param("1", Number(1.0)),
        pytest.param("(1)", Parenthesized(Number(1.0))),
        pytest.param("--3", Unary(MINUS, Unary(MINUS, Number(3.0)))),
        pytest.param("1+2-3", Binary(Binary(Number(1.0), PLUS, Number(2.0)), MINUS, Number(3.0))),
        pytest.param("2^3^2", Binary(Number(2.0), CARET, Binary(Number(3.0), CARET, Number(2.0)))),
        pytest.param("-2^2", Binary(Unary(MINUS, Number(2.0)), CARET, Number(2.0))),
    ],
)
def test_parse_tree(code: str, expected_ast) -> None:
    assert parse(code) == expected_ast


@pytest.mark.parametrize(
    "code, expected_str",
    [
        pytest.param("1+2*3", "(1.0 + (2.0 * 3.0))"),
        pytest.param("1*2+3", "((1.0 * 2.0) + 3.0)"),
        pytest.param("8/4/2", "((8.0 / 4.0) / 2.0)"),
        pytest.param("2^3^2", "(2.0 ^ (3.0 ^ 2.0))"),
        pytest.param("2*3^2", "(2.0 * (3.0 ^ 2.0))"),
        pytest.param("(1+2)*3", "((1.0 + 2.0) * 3.0)"),
        pytest.param("-+-3", "(-(+(-3.0)))"),
    ],
)
def test_grouping(code: str, expected_str: str) -> None:
    assert format_expression(parse(code)) == expected_str


def test_syntax_error_carries_expected_and_found() -> None:
    with pytest.raises(CalcSyntaxError) as exc_info:
        parse("(2+3")
    assert exc_info.value.expected is TokenType.RIGHT_PAREN
    assert exc_info.value.found.type is TokenType.END_OF_INPUT
    assert str(exc_info.value) == "RIGHT_PAREN expected, found END_OF_INPUT"


def test_parse_expression_leaves_trailing_tokens() -> None:
    lexer = Lexer.from_string("1 + 2 ) 7")
    assert Parser(lexer).parse_expression() == Binary(Number(1.0), PLUS, Number(2.0))
    # the parser already holds ")" as lookahead
    assert lexer.next_token().value == 7.0


class TokenList:
    """Stands in for a lexer, handing out prepared tokens"""

    def __init__(self, tokens: list[Token]) -> None:
        self._tokens = iter(tokens)

    def next_token(self) -> Token:
        return next(self._tokens, Token(type=TokenType.END_OF_INPUT, lexeme=""))


def test_number_token_without_value_is_internal_error() -> None:
    parser = Parser(TokenList([Token(type=TokenType.NUMBER, lexeme="1")]))
    with pytest.raises(RuntimeError, match="Unexpected literal"):
        parser.parse_expression()
