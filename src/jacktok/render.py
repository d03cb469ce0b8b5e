"""XML token-stream renderer."""

from __future__ import annotations

from collections.abc import Iterable
from typing import TextIO

from jacktok.tokens import Token, TokenKind

OPEN_TAG = "<tokens>"
CLOSE_TAG = "</tokens>"


# ---------------------------------------------------------------------------
# XML escaping
# ---------------------------------------------------------------------------


def escape_symbol(ch: str) -> str:
    """Escape a symbol character for XML content."""
    if ch == "<":
        return "&lt;"
    if ch == ">":
        return "&gt;"
    if ch == '"':
        return "&quot;"
    if ch == "&":
        return "&amp;"
    return ch


# ---------------------------------------------------------------------------
# Records
# ---------------------------------------------------------------------------


def render_token(token: Token) -> str:
    """Render one token as a ``<kind> text </kind>`` record."""
    tag = token.kind.tag
    payload = escape_symbol(token.text) if token.kind is TokenKind.SYMBOL else token.text
    return f"<{tag}> {payload} </{tag}>"


def write_tokens(tokens: Iterable[Token], out: TextIO) -> None:
    """Write the envelope and one record per token to *out*, in scan order."""
    out.write(OPEN_TAG + "\n")
    for token in tokens:
        out.write(render_token(token) + "\n")
    out.write(CLOSE_TAG + "\n")


def render(tokens: Iterable[Token]) -> str:
    """Render a complete token document to a string."""
    parts: list[str] = [OPEN_TAG + "\n"]
    for token in tokens:
        parts.append(render_token(token))
        parts.append("\n")
    parts.append(CLOSE_TAG + "\n")
    return "".join(parts)
