"""
EasyDB DDL Parser
=================
Public API for the CREATE TABLE / DROP TABLE front end.

Usage:
    from ddl import parse, EasyDBError

    stmt = parse("CREATE TABLE users (id INT PRIMARY KEY, name TEXT NOT NULL)")
    print(stmt)
"""

from typing import List

from ddl.ast_nodes import Column, CreateTable, DropTable, Nullability, Statement
from ddl.errors import EasyDBError, ErrorKind, InternalError, InvalidValueError, ParseError
from ddl.keywords import Keyword
from ddl.parser import Parser
from ddl.tokenizer import Scanner, Token, Tokenizer, TokenType
from ddl.types import DataType


def parse(sql: str) -> Statement:
    """
    Parse a DDL string into a Statement.
    Raises ParseError if syntax is invalid, InvalidValueError if a column
    definition contradicts itself.
    """
    return Parser(sql).parse()


def tokenize(sql: str) -> List[Token]:
    """Tokenize SQL string (for debugging)."""
    return list(Tokenizer(sql))
