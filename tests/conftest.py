"""Shared test fixtures and helpers."""

from __future__ import annotations

import pytest

from jacktok.errors import InvalidTokenError
from jacktok.lexer import ScanState, scan_line, tokenize
from jacktok.tokens import Token


@pytest.fixture
def lex():
    """Return a helper that tokenizes source and returns (kind tag, text) pairs."""

    def _lex(source: str) -> list[tuple[str, str]]:
        tokens, _errors = tokenize(source)
        return [(t.kind.tag, t.text) for t in tokens]

    return _lex


@pytest.fixture
def scan():
    """Return a helper that scans one line with the given state, returning all items."""

    def _scan(line: str, state: ScanState | None = None) -> list[Token | InvalidTokenError]:
        return list(scan_line(line, state if state is not None else ScanState()))

    return _scan


@pytest.fixture
def write_jack(tmp_path):
    """Return a helper that writes a .jack file under tmp_path."""

    def _write(name: str, source: str):
        path = tmp_path / name
        path.write_text(source, encoding="utf-8")
        return path

    return _write
