"""
EasyDB Tokenizer Tests
======================
Tests for the lazy DDL tokenizer (SQL text -> tokens).

Focus:
1. Keyword recognition and case-insensitivity
2. Numbers, strings, quoted identifiers
3. Greedy two-character symbols
4. Lazy, terminal error reporting with line/column info
"""

import sys
import os
import pytest

# Ensure project root is on path
current_dir = os.path.dirname(os.path.abspath(__file__))
parent_dir = os.path.dirname(current_dir)
sys.path.insert(0, parent_dir)

from ddl import tokenize, ParseError
from ddl.keywords import Keyword
from ddl.tokenizer import Token, Tokenizer, TokenType


def kinds(sql):
    return [(t.type, t.value) for t in tokenize(sql)]


class TestTokenizer:

    # ─── Keywords & Identifiers ─────────────────────────────────────

    def test_keywords_case_insensitive(self):
        tokens = tokenize("create Table DROP")
        assert [t.type for t in tokens] == [TokenType.KEYWORD] * 3
        assert [t.keyword for t in tokens] == [Keyword.CREATE, Keyword.TABLE, Keyword.DROP]
        # Display form is the canonical spelling
        assert [str(t) for t in tokens] == ["CREATE", "TABLE", "DROP"]

    def test_identifier_keeps_case(self):
        assert kinds("Users user_id2") == [
            (TokenType.IDENT, "Users"),
            (TokenType.IDENT, "user_id2"),
        ]

    def test_identifier_is_not_keyword(self):
        token = tokenize("users")[0]
        assert token.type == TokenType.IDENT
        assert token.keyword is None

    def test_keyword_lookup(self):
        assert Keyword.lookup("varchar") is Keyword.VARCHAR
        assert Keyword.lookup("References") is Keyword.REFERENCES
        assert Keyword.lookup("select") is None

    def test_quoted_identifier(self):
        assert kinds('"My Table" "say ""hi"""') == [
            (TokenType.IDENT, "My Table"),
            (TokenType.IDENT, 'say "hi"'),
        ]

    def test_quoted_keyword_stays_identifier(self):
        token = tokenize('"table"')[0]
        assert token.type == TokenType.IDENT
        assert token.value == "table"

    # ─── Literals ───────────────────────────────────────────────────

    def test_number_with_exponent(self):
        assert kinds("1.5e-3") == [(TokenType.NUMBER, "1.5e-3")]

    def test_number_forms(self):
        assert kinds("42 3.14 3. 2E+10") == [
            (TokenType.NUMBER, "42"),
            (TokenType.NUMBER, "3.14"),
            (TokenType.NUMBER, "3."),
            (TokenType.NUMBER, "2E+10"),
        ]

    def test_string_literal(self):
        assert kinds("'hello world'") == [(TokenType.STRING, "hello world")]

    def test_string_literal_escaped(self):
        assert kinds("'O''Reilly'") == [(TokenType.STRING, "O'Reilly")]

    def test_empty_string_literal(self):
        assert kinds("''") == [(TokenType.STRING, "")]

    # ─── Symbols ────────────────────────────────────────────────────

    def test_two_character_symbols(self):
        assert [t.type for t in tokenize("!= <= >= <>")] == [
            TokenType.NOT_EQUAL,
            TokenType.LESS_THAN_OR_EQUAL,
            TokenType.GREATER_THAN_OR_EQUAL,
            TokenType.LESS_OR_GREATER_THAN,
        ]

    def test_single_character_fallback(self):
        assert [t.type for t in tokenize("! < > =")] == [
            TokenType.EXCLAMATION,
            TokenType.LESS_THAN,
            TokenType.GREATER_THAN,
            TokenType.EQUAL,
        ]

    def test_punctuation(self):
        tokens = tokenize("(a, b);")
        assert [t.type for t in tokens] == [
            TokenType.OPEN_PAREN, TokenType.IDENT, TokenType.COMMA,
            TokenType.IDENT, TokenType.CLOSE_PAREN, TokenType.SEMICOLON,
        ]
        assert "".join(str(t) for t in tokens) == "(a,b);"

    def test_arithmetic_symbols(self):
        assert "".join(str(t) for t in tokenize(". + - * / ^ % ?")) == ".+-*/^%?"

    # ─── Stream Behaviour ───────────────────────────────────────────

    def test_empty_input(self):
        assert tokenize("") == []
        assert tokenize("  \n\t ") == []

    def test_deterministic(self):
        sql = "CREATE TABLE t (a INT PRIMARY KEY, b TEXT)"
        assert tokenize(sql) == tokenize(sql)

    def test_restartable(self):
        tokenizer = Tokenizer("DROP TABLE t")
        assert list(tokenizer) == list(tokenizer)

    def test_interleaved_scans(self):
        tokenizer = Tokenizer("DROP TABLE t")
        first = iter(tokenizer)
        assert next(first).value == "DROP"
        assert next(first).value == "TABLE"
        second = iter(tokenizer)
        assert next(second).value == "DROP"
        assert next(first).value == "t"
        assert next(second).value == "TABLE"
        assert next(first, None) is None

    def test_scanner_end_position(self):
        scanner = iter(Tokenizer("DROP\n  TABLE t  "))
        assert len(list(scanner)) == 3
        assert (scanner.line, scanner.col) == (2, 12)

    def test_positions(self):
        tokens = tokenize("CREATE\n  TABLE t")
        assert (tokens[0].line, tokens[0].col) == (1, 1)
        assert (tokens[1].line, tokens[1].col) == (2, 3)
        assert (tokens[2].line, tokens[2].col) == (2, 9)

    def test_token_repr(self):
        token = Token(TokenType.IDENT, "users", 1, 5)
        assert repr(token) == "Token(IDENT, 'users', 1:5)"

    # ─── Errors ─────────────────────────────────────────────────────

    def test_unexpected_character(self):
        with pytest.raises(ParseError) as exc:
            tokenize("@")
        assert "Unexpected character @" in str(exc.value)
        assert exc.value.line == 1
        assert exc.value.col == 1

    def test_error_is_lazy_and_terminal(self):
        tokens = iter(Tokenizer("a b @ c"))
        assert next(tokens).value == "a"
        assert next(tokens).value == "b"
        with pytest.raises(ParseError) as exc:
            next(tokens)
        assert exc.value.col == 5
        # Nothing past the bad character is scanned
        assert next(tokens, None) is None

    def test_unterminated_string(self):
        with pytest.raises(ParseError) as exc:
            tokenize("'never closed")
        assert "Unexpected end of input" in str(exc.value)

    def test_unterminated_quoted_identifier(self):
        with pytest.raises(ParseError) as exc:
            tokenize('"never closed')
        assert "Unexpected end of input" in str(exc.value)

    def test_empty_quoted_identifier(self):
        with pytest.raises(ParseError) as exc:
            tokenize('""')
        assert "Empty quoted identifier" in str(exc.value)


if __name__ == "__main__":
    pytest.main([__file__, "-v", "--tb=short"])
