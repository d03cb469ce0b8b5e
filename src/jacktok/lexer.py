"""Jack lexer: scans source one line at a time into a flat token stream."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass

from jacktok.errors import InvalidTokenError
from jacktok.tokens import (
    Position,
    Token,
    TokenKind,
    classify_lexeme,
    is_delimiter,
    is_symbol_char,
)


@dataclass(slots=True)
class ScanState:
    """Lexical state carried from one line to the next.

    At most one of the two flags is set at a time.
    """

    in_block_comment: bool = False
    in_string_literal: bool = False

    @property
    def is_normal(self) -> bool:
        return not self.in_block_comment and not self.in_string_literal

    def reset(self) -> None:
        self.in_block_comment = False
        self.in_string_literal = False


def scan_line(
    line: str, state: ScanState, line_number: int = 1
) -> Iterator[Token | InvalidTokenError]:
    """Scan one line (newline already stripped), updating *state* in place.

    Yields tokens in left-to-right order. A lexeme that cannot be classified
    is yielded as an InvalidTokenError and scanning continues after it.

    Two cursors walk the line: ``start`` marks the beginning of the pending
    lexeme and ``pos`` is the character under examination. Tokens are only
    finalized when ``pos`` reaches a delimiter; the end of the line counts as
    one, so a trailing lexeme is flushed.
    """
    length = len(line)

    def peek(i: int) -> str:
        # Empty string is the end-of-line sentinel
        return line[i] if i < length else ""

    def boundary(ch: str) -> bool:
        return ch == "" or is_delimiter(ch)

    start = 0
    pos = 0
    # Column of the opening quote; a literal carried over from the previous line starts at 1
    string_col = 1
    while pos <= length:
        ch = peek(pos)
        nxt = peek(pos + 1)

        if not state.in_string_literal and ch == "/" and nxt == "/":
            return

        if state.is_normal and ch == "/" and nxt == "*":
            state.in_block_comment = True
            pos += 2
            continue

        if state.in_block_comment:
            if ch == "*" and nxt == "/":
                state.in_block_comment = False
                pos += 2
                start = pos
            else:
                pos += 1
            continue

        if state.in_string_literal:
            if ch == '"':
                text = line[start:pos]
                yield Token(TokenKind.STRING_CONST, text, Position(line_number, string_col))
                state.in_string_literal = False
                pos += 1
                start = pos
            else:
                pos += 1
            continue

        if ch == '"':
            # The quote opens a string literal; it is never a symbol token
            state.in_string_literal = True
            string_col = pos + 1
            pos += 1
            start = pos
            continue

        if not boundary(ch):
            pos += 1
            ch = peek(pos)
            if not boundary(ch):
                continue

        if start == pos:
            if is_symbol_char(ch):
                yield Token(TokenKind.SYMBOL, ch, Position(line_number, pos + 1))
            pos += 1
            start = pos
        else:
            lexeme = line[start:pos]
            kind = classify_lexeme(lexeme)
            where = Position(line_number, start + 1)
            if kind is None:
                yield InvalidTokenError(lexeme, where, line)
            else:
                yield Token(kind, lexeme, where)
            # The delimiter itself is examined on the next pass
            start = pos


class Lexer:
    """Tokenize Jack source line by line, carrying comment/string state across lines."""

    def __init__(self, filename: str = "input.jack") -> None:
        self.filename = filename
        self.state = ScanState()
        self.errors: list[InvalidTokenError] = []
        self._line_number = 0

    def reset(self) -> None:
        self.state.reset()
        self.errors.clear()
        self._line_number = 0

    def feed(self, line: str) -> Iterator[Token]:
        """Scan the next line, yielding tokens and recording invalid lexemes."""
        self._line_number += 1
        for item in scan_line(line, self.state, self._line_number):
            if isinstance(item, InvalidTokenError):
                self.errors.append(item)
            else:
                yield item

    def tokenize(self, lines: Iterable[str]) -> Iterator[Token]:
        """Scan each line in order, yielding all tokens."""
        for line in lines:
            yield from self.feed(line)


def split_lines(source: str) -> list[str]:
    """Split source text on LF or CRLF only; a trailing newline adds no line."""
    lines = source.split("\n")
    if lines and lines[-1] == "":
        lines.pop()
    return [line[:-1] if line.endswith("\r") else line for line in lines]


def tokenize(
    source: str, filename: str = "input.jack"
) -> tuple[list[Token], list[InvalidTokenError]]:
    """Convenience function: tokenize source text, returning (tokens, errors)."""
    lexer = Lexer(filename)
    tokens = list(lexer.tokenize(split_lines(source)))
    return tokens, lexer.errors
