"""Test character and lexeme classification."""

import pytest

from jacktok.tokens import (
    KEYWORDS,
    SYMBOLS,
    TokenKind,
    classify_lexeme,
    is_delimiter,
    is_keyword,
    is_symbol_char,
)


class TestTables:
    def test_keyword_count(self):
        assert len(KEYWORDS) == 21

    def test_symbol_count(self):
        assert len(SYMBOLS) == 19

    def test_quote_is_not_a_symbol(self):
        assert '"' not in SYMBOLS


class TestSymbolChar:
    @pytest.mark.parametrize("ch", list("{}()[].,;+-*/&|<>=~"))
    def test_symbols(self, ch):
        assert is_symbol_char(ch)

    @pytest.mark.parametrize("ch", ["a", "0", "_", " ", '"', "!", ""])
    def test_non_symbols(self, ch):
        assert not is_symbol_char(ch)


class TestDelimiter:
    def test_space_and_tab(self):
        assert is_delimiter(" ")
        assert is_delimiter("\t")

    def test_symbol_is_delimiter(self):
        assert is_delimiter(";")
        assert is_delimiter("<")

    def test_letters_digits_quote_are_not(self):
        assert not is_delimiter("x")
        assert not is_delimiter("7")
        assert not is_delimiter('"')
        assert not is_delimiter("$")


class TestClassifyLexeme:
    def test_integer(self):
        assert classify_lexeme("0") is TokenKind.INT_CONST
        assert classify_lexeme("32767") is TokenKind.INT_CONST

    def test_keywords(self):
        for word in KEYWORDS:
            assert classify_lexeme(word) is TokenKind.KEYWORD

    def test_keyword_is_case_sensitive(self):
        assert classify_lexeme("Class") is TokenKind.IDENTIFIER
        assert classify_lexeme("RETURN") is TokenKind.IDENTIFIER

    def test_no_partial_keyword_match(self):
        assert classify_lexeme("classes") is TokenKind.IDENTIFIER
        assert classify_lexeme("iff") is TokenKind.IDENTIFIER
        assert classify_lexeme("do_it") is TokenKind.IDENTIFIER

    def test_identifier(self):
        assert classify_lexeme("x") is TokenKind.IDENTIFIER
        assert classify_lexeme("_tmp") is TokenKind.IDENTIFIER
        assert classify_lexeme("SquareGame") is TokenKind.IDENTIFIER
        assert classify_lexeme("a1b2") is TokenKind.IDENTIFIER

    def test_identifier_tail_not_validated(self):
        assert classify_lexeme("a$b") is TokenKind.IDENTIFIER

    def test_invalid(self):
        assert classify_lexeme("3x") is None
        assert classify_lexeme("1_000") is None
        assert classify_lexeme("$x") is None

    def test_is_keyword(self):
        assert is_keyword("while")
        assert not is_keyword("While")


class TestTokenKind:
    def test_tags(self):
        assert TokenKind.KEYWORD.tag == "keyword"
        assert TokenKind.SYMBOL.tag == "symbol"
        assert TokenKind.IDENTIFIER.tag == "identifier"
        assert TokenKind.INT_CONST.tag == "integerConstant"
        assert TokenKind.STRING_CONST.tag == "stringConstant"
