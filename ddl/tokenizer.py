"""
EasyDB DDL Tokenizer
====================
Converts raw SQL text into a lazy stream of typed tokens.

Features:
- Case-insensitive keywords (CREATE = create)
- Quoted identifiers ("My Table", "" escapes a quote)
- String literals ('it''s', '' escapes a quote)
- Numeric literals kept as exact text (1, 3.14, 1.5e-3)
- Operators and punctuation, with greedy != <= >= <>
- Line/column tracking for error reporting

Tokens are produced on demand: iterating a Tokenizer runs a generator, so a
bad character only raises ParseError when the token containing it is drawn.
Each new iteration starts over from the beginning of the text with its own
cursor.
"""

import logging
import re
from dataclasses import dataclass
from enum import Enum, auto
from typing import Iterator, NoReturn, Optional

from ddl.errors import ParseError
from ddl.keywords import Keyword

logger = logging.getLogger(__name__)


class TokenType(Enum):
    # Literals
    NUMBER = auto()                 # 123, 3.14, 1.5e-3
    STRING = auto()                 # 'hello'
    IDENT = auto()                  # table_name, "Quoted Name"
    KEYWORD = auto()                # CREATE, TABLE, ...

    # Operators
    PERIOD = auto()                 # .
    EQUAL = auto()                  # =
    GREATER_THAN = auto()           # >
    GREATER_THAN_OR_EQUAL = auto()  # >=
    LESS_THAN = auto()              # <
    LESS_THAN_OR_EQUAL = auto()     # <=
    LESS_OR_GREATER_THAN = auto()   # <>
    PLUS = auto()                   # +
    MINUS = auto()                  # -
    ASTERISK = auto()               # *
    SLASH = auto()                  # /
    CARET = auto()                  # ^
    PERCENT = auto()                # %
    EXCLAMATION = auto()            # !
    NOT_EQUAL = auto()              # !=
    QUESTION = auto()               # ?

    # Punctuation
    OPEN_PAREN = auto()             # (
    CLOSE_PAREN = auto()            # )
    COMMA = auto()                  # ,
    SEMICOLON = auto()              # ;


@dataclass(frozen=True)
class Token:
    """Immutable token with position info."""
    type: TokenType
    value: str
    line: int = 0
    col: int = 0

    @property
    def keyword(self) -> Optional[Keyword]:
        if self.type != TokenType.KEYWORD:
            return None
        return Keyword(self.value)

    def __str__(self) -> str:
        return self.value

    def __repr__(self) -> str:
        return f"Token({self.type.name}, '{self.value}', {self.line}:{self.col})"


class Tokenizer:
    """
    Lexer for DDL. Iterate it to get tokens one at a time.

    Every iter() returns a fresh Scanner with its own position, so several
    scans of the same text never disturb each other.
    """

    # Note: order matters! Two-character symbols first.
    SYMBOLS = [
        ("!=", TokenType.NOT_EQUAL),
        ("<>", TokenType.LESS_OR_GREATER_THAN),
        ("<=", TokenType.LESS_THAN_OR_EQUAL),
        (">=", TokenType.GREATER_THAN_OR_EQUAL),
        (".", TokenType.PERIOD),
        ("=", TokenType.EQUAL),
        (">", TokenType.GREATER_THAN),
        ("<", TokenType.LESS_THAN),
        ("+", TokenType.PLUS),
        ("-", TokenType.MINUS),
        ("*", TokenType.ASTERISK),
        ("/", TokenType.SLASH),
        ("^", TokenType.CARET),
        ("%", TokenType.PERCENT),
        ("!", TokenType.EXCLAMATION),
        ("?", TokenType.QUESTION),
        ("(", TokenType.OPEN_PAREN),
        (")", TokenType.CLOSE_PAREN),
        (",", TokenType.COMMA),
        (";", TokenType.SEMICOLON),
    ]

    WHITESPACE = re.compile(r"\s+")
    # Number: 123, 123.45, 1.5e-3 (digits after . or e are optional)
    NUMBER = re.compile(r"[0-9]+(?:\.[0-9]*)?(?:[eE][+-]?[0-9]*)?")
    # Unquoted word: starts with a letter, may be a keyword
    WORD = re.compile(r"[^\W\d_]\w*")
    # String: 'hello' (supports escaped single quote via '')
    STRING_LIT = re.compile(r"'((?:''|[^'])*)'")
    # Quoted identifier: "My Table" (supports "" escape)
    QUOTED_IDENT = re.compile(r'"((?:""|[^"])*)"')

    def __init__(self, sql: str):
        self._sql = sql

    def __iter__(self) -> "Scanner":
        return Scanner(self._sql)


class Scanner:
    """
    One pass over the input. Holds the cursor (position, line, column);
    after the last token, line/col point at the end of input.
    """

    def __init__(self, sql: str):
        self._sql = sql
        self._pos = 0
        self._line_start = 0
        self.line = 1
        self.col = 1
        self._tokens = self._scan()

    def __iter__(self) -> "Scanner":
        return self

    def __next__(self) -> Token:
        return next(self._tokens)

    def _scan(self) -> Iterator[Token]:
        while True:
            whitespace = Tokenizer.WHITESPACE.match(self._sql, self._pos)
            if whitespace:
                self._advance(whitespace.group(0))
            if self._pos >= len(self._sql):
                return
            yield self._scan_token()

    def _scan_token(self) -> Token:
        sql, pos = self._sql, self._pos
        line, col = self.line, self.col

        match = Tokenizer.NUMBER.match(sql, pos)
        if match:
            self._advance(match.group(0))
            return Token(TokenType.NUMBER, match.group(0), line, col)

        match = Tokenizer.WORD.match(sql, pos)
        if match:
            text = match.group(0)
            self._advance(text)
            keyword = Keyword.lookup(text)
            if keyword is not None:
                return Token(TokenType.KEYWORD, keyword.value, line, col)
            return Token(TokenType.IDENT, text, line, col)

        char = sql[pos]
        if char == "'":
            value = self._scan_quoted(Tokenizer.STRING_LIT, "'", "string literal")
            return Token(TokenType.STRING, value, line, col)
        if char == '"':
            value = self._scan_quoted(Tokenizer.QUOTED_IDENT, '"', "quoted identifier")
            if not value:
                self._fail("Empty quoted identifier", line, col)
            return Token(TokenType.IDENT, value, line, col)

        for symbol, token_type in Tokenizer.SYMBOLS:
            if sql.startswith(symbol, pos):
                self._advance(symbol)
                return Token(token_type, symbol, line, col)

        self._fail(f"Unexpected character {char}", line, col)

    def _scan_quoted(self, pattern: "re.Pattern[str]", quote: str, what: str) -> str:
        line, col = self.line, self.col
        match = pattern.match(self._sql, self._pos)
        if not match:
            self._fail(f"Unexpected end of input in unterminated {what}", line, col)
        self._advance(match.group(0))
        return match.group(1).replace(quote * 2, quote)

    def _advance(self, text: str):
        """Move past `text`, keeping line/column in step."""
        newlines = text.count("\n")
        if newlines:
            self.line += newlines
            self._line_start = self._pos + text.rfind("\n") + 1
        self._pos += len(text)
        self.col = self._pos - self._line_start + 1

    def _fail(self, message: str, line: int, col: int) -> NoReturn:
        logger.debug("lexical error: %s at %d:%d", message, line, col)
        raise ParseError(message, line, col)
