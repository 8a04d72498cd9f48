"""Random expressions checked two ways:

- expressions without "^" or a literal zero divisor against Python's eval;
- every accepted expression against its fully parenthesized rendering, which
  must parse and evaluate to the same IEEE value (NaN and infinities included).
"""
import math
import random
import re
import string
import warnings

from arithcalc.parser import CalcSyntaxError, format_expression, parse
from arithcalc.runtime import evaluate, evaluate_expression
from arithcalc.utils import format_result

warnings.filterwarnings("ignore")

ALPHABET = string.digits + ".()+-*/^ "


def eval_py(code: str) -> float | str:
    try:
        return float(eval(code))
    except Exception as e:
        return str(e)


def eval_my(code: str) -> float | str:
    try:
        return evaluate(code, strict=True)
    except CalcSyntaxError as e:
        return str(e)


def same_result(a: float | str, b: float | str) -> bool:
    if isinstance(a, str) or isinstance(b, str):
        return isinstance(a, str) and isinstance(b, str)
    if math.isnan(a) or math.isnan(b):
        return math.isnan(a) and math.isnan(b)
    if math.isinf(a) or math.isinf(b):
        return a == b
    return math.isclose(a, b)


def comparable_with_python(code: str) -> bool:
    if "^" in code:
        return False  # python's ** binds tighter than a leading sign
    if re.findall(r"\*\s*\*|/\s*/", code):
        return False  # python reads these as ** and //
    if re.findall(r"(^|[^\d])\.|\d\s+[\d.]|\d\.\d*\.", code):
        return False  # ".5", "1 2" and "1.2.3" are not literals here
    if re.findall(r"/\s*[-+]*\s*\(*\s*0", code):
        return False  # python raises on division by zero
    return True


def check_rendering(code: str, res_my: float) -> None:
    rendered = format_expression(parse(code, strict=True))
    if "e" in rendered:
        return  # repr of tiny or huge literals uses an exponent we do not lex
    res_rendered = evaluate_expression(parse(rendered, strict=True))
    if not same_result(res_my, res_rendered):
        print(f"{code!r} rendered as {rendered!r}\nmy: {format_result(res_my)}\nrendered: {format_result(res_rendered)}\n\n")


if __name__ == "__main__":

    def generate(length: int) -> str:
        return "".join(random.choices(ALPHABET, k=length))

    while True:
        code = generate(12)
        res_my = eval_my(code)

        if isinstance(res_my, float):
            check_rendering(code, res_my)

        if not comparable_with_python(code):
            continue
        res_py = eval_py(code)
        if same_result(res_py, res_my):
            continue
        if isinstance(res_py, str) and res_py.startswith("leading zeros in decimal integer literals are not permitted"):
            continue
        print(f"{code!r}\npy: {res_py}\nmy: {res_my}\n\n")
