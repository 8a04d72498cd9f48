import logging
from dataclasses import dataclass
from typing import Union

from arithcalc.lexer import Lexer, Token, TokenType

logger = logging.getLogger(__name__)


@dataclass
class CalcSyntaxError(Exception):
    errmsg: str
    expected: TokenType
    found: Token

    def __str__(self) -> str:
        return self.errmsg


@dataclass(frozen=True)
class Number:
    value: float


@dataclass(frozen=True)
class Unary:
    operator: Token
    operand: "Expression"


@dataclass(frozen=True)
class Binary:
    left: "Expression"
    operator: Token
    right: "Expression"


@dataclass(frozen=True)
class Parenthesized:
    inner: "Expression"


Expression = Union[Number, Unary, Binary, Parenthesized]

ADDITIVE_OPERATORS = (TokenType.PLUS, TokenType.MINUS)
MULTIPLICATIVE_OPERATORS = (TokenType.STAR, TokenType.SLASH)
SIGN_OPERATORS = (TokenType.PLUS, TokenType.MINUS)


class Parser:
    """Recursive-descent parser over a lexer, with one token of lookahead.

    Grammar:

        Expression := Term { ("+" | "-") Term }
        Term       := Factor { ("*" | "/") Factor }
        Factor     := Primary [ "^" Factor ]
        Primary    := Number | "(" Expression ")" | ("+" | "-") Primary
    """

    def __init__(self, lexer: Lexer) -> None:
        self._lexer = lexer
        self._lookahead = lexer.next_token()

    def parse(self, strict: bool = False) -> Expression:
        """Parse one expression.

        Tokens left over after the expression are ignored unless ``strict``
        is set, in which case anything but the end of input is an error.
        """
        expression = self.parse_expression()
        if strict:
            self._expect(TokenType.END_OF_INPUT)
        elif self._lookahead.type is not TokenType.END_OF_INPUT:
            logger.debug("Ignoring trailing input starting at %s", self._lookahead)
        return expression

    def parse_expression(self) -> Expression:
        left = self._term()
        while self._lookahead.type in ADDITIVE_OPERATORS:
            operator = self._consume()
            left = Binary(left=left, operator=operator, right=self._term())
        return left

    def _term(self) -> Expression:
        left = self._factor()
        while self._lookahead.type in MULTIPLICATIVE_OPERATORS:
            operator = self._consume()
            left = Binary(left=left, operator=operator, right=self._factor())
        return left

    def _factor(self) -> Expression:
        base = self._primary()
        if self._lookahead.type is TokenType.CARET:
            operator = self._consume()
            # right recursion makes ^ right-associative
            return Binary(left=base, operator=operator, right=self._factor())
        return base

    def _primary(self) -> Expression:
        if self._lookahead.type is TokenType.LEFT_PAREN:
            self._consume()
            inner = self.parse_expression()
            self._expect(TokenType.RIGHT_PAREN)
            return Parenthesized(inner=inner)
        if self._lookahead.type in SIGN_OPERATORS:
            operator = self._consume()
            return Unary(operator=operator, operand=self._primary())
        return self._number()

    def _number(self) -> Number:
        token = self._expect(TokenType.NUMBER)
        if token.value is None:
            raise RuntimeError(f"Unexpected literal: {token}")
        return Number(token.value)

    def _expect(self, token_type: TokenType) -> Token:
        if self._lookahead.type is not token_type:
            raise CalcSyntaxError(
                f"{token_type} expected, found {self._lookahead.type}",
                expected=token_type,
                found=self._lookahead,
            )
        return self._consume()

    def _consume(self) -> Token:
        consumed = self._lookahead
        if consumed.type is not TokenType.END_OF_INPUT:
            self._lookahead = self._lexer.next_token()
        return consumed


def parse(code: str, strict: bool = False) -> Expression:
    return Parser(Lexer.from_string(code)).parse(strict=strict)


def format_expression(expression: Expression) -> str:
    """Render a tree as text, wrapping every operation in parentheses"""
    if isinstance(expression, Number):
        return repr(expression.value)
    elif isinstance(expression, Parenthesized):
        return format_expression(expression.inner)
    elif isinstance(expression, Unary):
        return f"({expression.operator.lexeme}{format_expression(expression.operand)})"
    elif isinstance(expression, Binary):
        left = format_expression(expression.left)
        right = format_expression(expression.right)
        return f"({left} {expression.operator.lexeme} {right})"
    else:
        raise RuntimeError(f"Unexpected expression type: {expression}")
