from arithcalc.lexer import Lexer, Token, TokenType, tokenize
from arithcalc.parser import (
    Binary,
    CalcSyntaxError,
    Expression,
    Number,
    Parenthesized,
    Parser,
    Unary,
    format_expression,
    parse,
)
from arithcalc.runtime import evaluate, evaluate_expression

__all__ = [
    "Binary",
    "CalcSyntaxError",
    "Expression",
    "Lexer",
    "Number",
    "Parenthesized",
    "Parser",
    "Token",
    "TokenType",
    "Unary",
    "evaluate",
    "evaluate_expression",
    "format_expression",
    "parse",
    "tokenize",
]
