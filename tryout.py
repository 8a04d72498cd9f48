from arithcalc.lexer import tokenize
from arithcalc.parser import CalcSyntaxError, format_expression, parse
from arithcalc.runtime import evaluate_expression
from arithcalc.utils import format_result

for code in [
    "5",
    "-1",
    "1 + 1",
    "-1 + 1",
    "1 + -1",
    "4 + 6 * 3",
    "(4 + 6)",
    "(4+6) * 3",
    "80225/+2",
    "7/6/2000",
    "5^2",
    "2^3^2",
    "--3",
    "3.",
    "1/0",
    "(-8)^0.5",
    "(2+3",
    "3 & 4",
]:
    print("=" * 10)
    print(f"code: {code!r}")

    tokens = tokenize(code)
    print(f"tokens: {' '.join(str(t) for t in tokens)}")

    try:
        expression = parse(code)
    except CalcSyntaxError as e:
        print(f"Error: {e}")
        continue
    print(f"ast: {format_expression(expression)}")
    print(f"result: {format_result(evaluate_expression(expression))}")
