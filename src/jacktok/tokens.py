"""Token kinds, data structures, and character/lexeme classification."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class TokenKind(Enum):
    """Lexical category of a token; the value is its XML tag name."""

    KEYWORD = "keyword"
    SYMBOL = "symbol"
    IDENTIFIER = "identifier"
    INT_CONST = "integerConstant"
    STRING_CONST = "stringConstant"

    @property
    def tag(self) -> str:
        return self.value


@dataclass(frozen=True, slots=True)
class Position:
    """Source position, 1-based line and column."""

    line: int
    column: int


@dataclass(frozen=True, slots=True)
class Token:
    """A classified lexeme. String constants exclude their quotes."""

    kind: TokenKind
    text: str
    position: Position = Position(1, 1)


KEYWORDS = frozenset(
    {
        "class",
        "constructor",
        "function",
        "method",
        "int",
        "boolean",
        "char",
        "void",
        "var",
        "static",
        "field",
        "let",
        "do",
        "if",
        "else",
        "while",
        "return",
        "true",
        "false",
        "null",
        "this",
    }
)

SYMBOLS = frozenset("{}()[].,;+-*/&|<>=~")

_WHITESPACE = frozenset(" \t")
_DIGITS = frozenset("0123456789")


def is_symbol_char(ch: str) -> bool:
    """Return True if ch is one of the 19 Jack symbol characters."""
    return ch in SYMBOLS


def is_delimiter(ch: str) -> bool:
    """Return True if ch ends a pending lexeme (symbol, space or tab)."""
    return ch in SYMBOLS or ch in _WHITESPACE


def is_keyword(text: str) -> bool:
    return text in KEYWORDS


def classify_lexeme(text: str) -> TokenKind | None:
    """Classify a non-empty lexeme bounded by delimiters.

    Returns None when the lexeme is neither all digits, nor a keyword, nor
    identifier-shaped (e.g. ``3x``).
    """
    if text and all(ch in _DIGITS for ch in text):
        return TokenKind.INT_CONST
    if is_keyword(text):
        return TokenKind.KEYWORD
    if text and (text[0].isalpha() or text[0] == "_"):
        return TokenKind.IDENTIFIER
    return None
