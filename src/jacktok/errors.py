"""Error types with formatted source context."""

from __future__ import annotations

from jacktok.tokens import Position


class InvalidTokenError(Exception):
    """A lexeme that is not an integer, keyword, or identifier.

    The scanner yields these as values instead of raising them, so a single
    bad lexeme never stops the scan.
    """

    def __init__(self, lexeme: str, position: Position, source_line: str) -> None:
        self.lexeme = lexeme
        self.message = f"invalid token '{lexeme}'"
        self.position = position
        self.source_line = source_line
        super().__init__(self.format())

    def format(self, filename: str = "input.jack") -> str:
        col = self.position.column

        # Underline the lexeme, staying within the line
        underline_len = max(1, min(len(self.lexeme), len(self.source_line) - col + 1))

        pad = " " * (col - 1)
        carets = "^" * underline_len

        line_num = str(self.position.line)
        gutter_width = len(line_num) + 1

        blank_gutter = " " * gutter_width + "|"
        line_gutter = f"{line_num:>{gutter_width - 1}} |"

        return (
            f"error: {self.message}\n"
            f"{' ' * gutter_width}--> {filename}:{self.position.line}:{col}\n"
            f"{blank_gutter}\n"
            f"{line_gutter} {self.source_line}\n"
            f"{blank_gutter} {pad}{carets}"
        )
