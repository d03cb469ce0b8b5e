"""--debug token dump to stderr."""

from __future__ import annotations

import sys
from collections.abc import Iterable
from typing import TextIO

from jacktok.tokens import Token


def dump_tokens(tokens: Iterable[Token], *, file: TextIO = sys.stderr) -> None:
    """Print one line per token: position, kind, and repr of the text."""
    for tok in tokens:
        where = f"{tok.position.line}:{tok.position.column}"
        file.write(f"{where:>8}  {tok.kind.name:<12} {tok.text!r}\n")
