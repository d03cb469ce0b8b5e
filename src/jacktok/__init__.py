"""Jack tokenizer: converts Jack source into an XML token stream."""

from __future__ import annotations

__version__ = "0.1.0"


def tokenize_to_xml(source: str, filename: str = "input.jack") -> str:
    """Tokenize Jack source and render it as an XML token document.

    Invalid lexemes are skipped; use ``jacktok.lexer.tokenize`` to inspect them.
    """
    from jacktok.lexer import tokenize
    from jacktok.render import render

    tokens, _errors = tokenize(source, filename)
    return render(tokens)
