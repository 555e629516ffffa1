"""
EasyDB DDL Parser
=================
Recursive-descent parser for CREATE TABLE / DROP TABLE.
Converts a stream of tokens into an AST.

Architecture:
- Input: SQL text, tokenized lazily while parsing
- Output: Statement AST node (CreateTable | DropTable)
- Lookahead: exactly 1 token, pulled from the tokenizer on demand

Grammar:
    statement    := ddl [';']
    ddl          := CREATE TABLE ident '(' column (',' column)* ')'
                  | DROP TABLE ident
    column       := ident type constraint*
    type         := BOOL | BOOLEAN | INT | INTEGER | FLOAT | DOUBLE
                  | CHAR | STRING | TEXT | VARCHAR
    constraint   := PRIMARY KEY | NULL | NOT NULL | UNIQUE | INDEX
                  | REFERENCES ident
"""

import logging
from typing import Optional

from ddl.ast_nodes import Column, CreateTable, DropTable, Nullability, Statement
from ddl.errors import InternalError, InvalidValueError, ParseError
from ddl.keywords import Keyword
from ddl.tokenizer import Scanner, Token, Tokenizer, TokenType
from ddl.types import DataType

logger = logging.getLogger(__name__)


class Parser:
    """
    Recursive-descent DDL parser.
    Initialize with SQL text, call .parse() to get the AST.
    """

    DATA_TYPES = {
        Keyword.BOOL: DataType.BOOLEAN,
        Keyword.BOOLEAN: DataType.BOOLEAN,
        Keyword.INT: DataType.INTEGER,
        Keyword.INTEGER: DataType.INTEGER,
        Keyword.FLOAT: DataType.FLOAT,
        Keyword.DOUBLE: DataType.FLOAT,
        Keyword.CHAR: DataType.STRING,
        Keyword.STRING: DataType.STRING,
        Keyword.TEXT: DataType.STRING,
        Keyword.VARCHAR: DataType.STRING,
    }

    def __init__(self, sql: str):
        self._tokens: Scanner = iter(Tokenizer(sql))
        self._lookahead: Optional[Token] = None
        self._peeked = False

    def parse(self) -> Statement:
        """Parse a single DDL statement, optionally terminated by ';'."""
        stmt = self._parse_statement()

        if self._match(TokenType.SEMICOLON) and self._peek() is not None:
            raise self._error("Multiple statements not supported", self._peek())

        token = self._peek()
        if token is not None:
            raise self._error(f"Unexpected token {token} after statement", token)

        logger.debug("parsed %s", stmt)
        return stmt

    # ─── Statement Parsing ──────────────────────────────────────────

    def _parse_statement(self) -> Statement:
        token = self._peek()
        if token is None:
            raise self._error("Unexpected end of input", None)
        if token.keyword in (Keyword.CREATE, Keyword.DROP):
            return self._parse_ddl()
        raise self._error(f"Unexpected token {token}", token)

    def _parse_ddl(self) -> Statement:
        # CREATE TABLE ... or DROP TABLE ...
        token = self._advance()
        keyword = token.keyword if token is not None else None

        if keyword == Keyword.CREATE:
            self._consume_keyword(Keyword.TABLE, "TABLE after CREATE")
            return self._parse_ddl_create_table()
        if keyword == Keyword.DROP:
            self._consume_keyword(Keyword.TABLE, "TABLE after DROP")
            return self._parse_ddl_drop_table()

        raise InternalError(f"Unexpected token {token} in DDL dispatch")

    def _parse_ddl_create_table(self) -> CreateTable:
        # CREATE TABLE name (col type ..., ...)
        name = self._consume_ident("table name")
        self._consume(TokenType.OPEN_PAREN, "( after table name")

        columns = []
        while True:
            columns.append(self._parse_ddl_column())
            if not self._match(TokenType.COMMA):
                break

        self._consume(TokenType.CLOSE_PAREN, ") after column definitions")
        return CreateTable(name, tuple(columns))

    def _parse_ddl_column(self) -> Column:
        # Column definition: name type [constraints...] in any order
        name = self._consume_ident("column name")
        datatype = self._parse_data_type()

        primary_key = False
        nullable = Nullability.UNSPECIFIED
        unique = False
        index = False
        references = None

        while self._check(TokenType.KEYWORD):
            token = self._advance()
            keyword = token.keyword

            if keyword == Keyword.PRIMARY:
                self._consume_keyword(Keyword.KEY, "KEY after PRIMARY")
                primary_key = True
            elif keyword == Keyword.NULL:
                if nullable == Nullability.NOT_NULLABLE:
                    raise InvalidValueError(f"Column {name} cannot be both NULL and NOT NULL")
                nullable = Nullability.NULLABLE
            elif keyword == Keyword.NOT:
                self._consume_keyword(Keyword.NULL, "NULL after NOT")
                if nullable == Nullability.NULLABLE:
                    raise InvalidValueError(f"Column {name} cannot be both NULL and NOT NULL")
                nullable = Nullability.NOT_NULLABLE
            elif keyword == Keyword.UNIQUE:
                unique = True
            elif keyword == Keyword.INDEX:
                index = True
            elif keyword == Keyword.REFERENCES:
                references = self._consume_ident("table name after REFERENCES")
            elif keyword == Keyword.DEFAULT:
                raise self._error("DEFAULT column values are not supported", token)
            else:
                raise self._error(f"Unexpected keyword {keyword}", token)

        return Column(
            name=name,
            datatype=datatype,
            primary_key=primary_key,
            nullable=nullable,
            unique=unique,
            index=index,
            references=references,
        )

    def _parse_ddl_drop_table(self) -> DropTable:
        # DROP TABLE name
        return DropTable(self._consume_ident("table name"))

    def _parse_data_type(self) -> DataType:
        token = self._advance()
        if token is None:
            raise self._error("Unexpected end of input, expected data type", None)
        if token.keyword not in self.DATA_TYPES:
            raise self._error(f"Expected data type, found {token}", token)
        return self.DATA_TYPES[token.keyword]

    # ─── Core Parser Logic ──────────────────────────────────────────

    def _peek(self) -> Optional[Token]:
        """Next token without consuming it; None at end of input."""
        if not self._peeked:
            self._lookahead = next(self._tokens, None)
            self._peeked = True
        return self._lookahead

    def _advance(self) -> Optional[Token]:
        token = self._peek()
        self._lookahead = None
        self._peeked = False
        return token

    def _check(self, type: TokenType) -> bool:
        token = self._peek()
        return token is not None and token.type == type

    def _match(self, type: TokenType) -> bool:
        if self._check(type):
            self._advance()
            return True
        return False

    def _consume(self, type: TokenType, expected: str) -> Token:
        if self._check(type):
            return self._advance()
        raise self._expected(expected)

    def _consume_keyword(self, keyword: Keyword, expected: str) -> Token:
        token = self._peek()
        if token is not None and token.keyword == keyword:
            return self._advance()
        raise self._expected(expected)

    def _consume_ident(self, expected: str) -> str:
        return self._consume(TokenType.IDENT, expected).value

    def _expected(self, expected: str) -> ParseError:
        token = self._peek()
        if token is None:
            return self._error(f"Unexpected end of input, expected {expected}", None)
        return self._error(f"Expected {expected}, found {token}", token)

    def _error(self, message: str, token: Optional[Token]) -> ParseError:
        if token is None:
            line, col = self._tokens.line, self._tokens.col
        else:
            line, col = token.line, token.col
        logger.debug("parse error: %s at %d:%d", message, line, col)
        return ParseError(message, line, col)
