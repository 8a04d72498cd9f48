import enum
import io
import re
from dataclasses import dataclass
from typing import Iterator, Optional, TextIO

from arithcalc.utils import PrintableEnum


class TokenType(PrintableEnum):
    NUMBER = enum.auto()
    PLUS = enum.auto()
    MINUS = enum.auto()
    STAR = enum.auto()
    SLASH = enum.auto()
    CARET = enum.auto()
    LEFT_PAREN = enum.auto()
    RIGHT_PAREN = enum.auto()
    END_OF_INPUT = enum.auto()
    INVALID = enum.auto()


@dataclass(frozen=True)
class Token:
    type: TokenType
    lexeme: str
    value: Optional[float] = None

    def __str__(self) -> str:
        return f"<{self.type}>{self.lexeme}"


SINGLE_CHAR_TOKENS = {
    "(": TokenType.LEFT_PAREN,
    ")": TokenType.RIGHT_PAREN,
    "-": TokenType.MINUS,
    "+": TokenType.PLUS,
    "*": TokenType.STAR,
    "/": TokenType.SLASH,
    "^": TokenType.CARET,
}

WHITESPACE = frozenset(" \t\n")


def _is_digit(s: str) -> bool:
    # str.isdigit() also accepts non-ASCII digits
    return len(s) == 1 and "0" <= s <= "9"


class Lexer:
    """Reads tokens from a text stream on demand, one character of lookahead.

    The lexer never raises: characters outside the grammar come out as
    INVALID tokens and it is up to the parser to reject them.
    """

    def __init__(self, source: TextIO) -> None:
        self._source = source
        self._next = source.read(1)

    @classmethod
    def from_string(cls, code: str) -> "Lexer":
        return cls(io.StringIO(code))

    def next_token(self) -> Token:
        while self._next in WHITESPACE:
            self._consume()

        if self._at_end():
            return Token(type=TokenType.END_OF_INPUT, lexeme="")

        if _is_digit(self._next):
            lexeme = self._consume_digits()
            if self._next == ".":
                lexeme += self._consume()
                lexeme += self._consume_digits()
            return Token(type=TokenType.NUMBER, lexeme=lexeme, value=float(lexeme))

        char = self._consume()
        return Token(type=SINGLE_CHAR_TOKENS.get(char, TokenType.INVALID), lexeme=char)

    def __iter__(self) -> Iterator[Token]:
        while True:
            token = self.next_token()
            yield token
            if token.type is TokenType.END_OF_INPUT:
                return

    def _at_end(self) -> bool:
        return self._next == ""

    def _consume(self) -> str:
        consumed = self._next
        self._next = self._source.read(1)
        return consumed

    def _consume_digits(self) -> str:
        digits = ""
        while _is_digit(self._next):
            digits += self._consume()
        return digits


def tokenize(code: str) -> list[Token]:
    return list(Lexer.from_string(code))


def untokenize(tokens: list[Token]) -> str:
    result = " ".join(t.lexeme for t in tokens if t.type is not TokenType.END_OF_INPUT)

    # ( 1 + 2 ) => (1 + 2)
    result = re.sub(r"\(\s+", "(", result)
    result = re.sub(r"\s+\)", ")", result)

    # 4 ^ 5 => 4^5
    result = re.sub(r"\s+\^\s+", "^", result)
    return result
