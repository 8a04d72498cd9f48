import logging
import math

from arithcalc.lexer import Lexer, TokenType
from arithcalc.parser import Binary, Expression, Number, Parenthesized, Parser, Unary

logger = logging.getLogger(__name__)


def evaluate(code: str, strict: bool = False) -> float:
    """Evaluate one line of arithmetic.

    A fresh lexer and parser are built for every call. Raises
    ``CalcSyntaxError`` when the line does not match the grammar.
    """
    expression = Parser(Lexer.from_string(code)).parse(strict=strict)
    logger.debug("Parsed %r into %s", code, expression)
    result = evaluate_expression(expression)
    logger.debug("Evaluated %r to %r", code, result)
    return result


def evaluate_expression(expression: Expression) -> float:
    if isinstance(expression, Number):
        return expression.value
    elif isinstance(expression, Parenthesized):
        return evaluate_expression(expression.inner)
    elif isinstance(expression, Unary):
        operand = evaluate_expression(expression.operand)
        if expression.operator.type is TokenType.PLUS:
            return operand
        elif expression.operator.type is TokenType.MINUS:
            return -operand
        else:
            raise RuntimeError(f"Unexpected unary operator: {expression.operator}")
    elif isinstance(expression, Binary):
        left = evaluate_expression(expression.left)
        right = evaluate_expression(expression.right)
        if expression.operator.type is TokenType.PLUS:
            return left + right
        elif expression.operator.type is TokenType.MINUS:
            return left - right
        elif expression.operator.type is TokenType.STAR:
            return left * right
        elif expression.operator.type is TokenType.SLASH:
            return divide(left, right)
        elif expression.operator.type is TokenType.CARET:
            return power(left, right)
        else:
            raise RuntimeError(f"Unexpected binary operator: {expression.operator}")
    else:
        raise RuntimeError(f"Unexpected expression type: {expression}")


def divide(a: float, b: float) -> float:
    """IEEE-754 division: x/0 is a signed infinity, 0/0 is NaN"""
    if b != 0.0:
        return a / b
    if a == 0.0 or math.isnan(a):
        return math.nan
    return math.copysign(math.inf, a) * math.copysign(1.0, b)


def _is_odd_integer(x: float) -> bool:
    return math.isfinite(x) and x.is_integer() and x % 2 == 1


def power(a: float, b: float) -> float:
    """IEEE-754 pow with the JVM's special cases.

    Domain errors give NaN, poles and overflow give infinity. Unlike C99,
    a NaN exponent, or an infinite exponent on a base of
    magnitude one give NaN.
    """
    if math.isnan(b) or (abs(a) == 1.0 and math.isinf(b)):
        return math.nan
    try:
        return math.pow(a, b)
    except OverflowError:
        if a < 0 and _is_odd_integer(b):
            return -math.inf
        return math.inf
    except ValueError:
        if a == 0.0:
            # pole: 0 raised to a negative power
            if math.copysign(1.0, a) < 0 and _is_odd_integer(b):
                return -math.inf
            return math.inf
        # negative base with a fractional exponent
        return math.nan
