"""
EasyDB Keyword Vocabulary
=========================
Closed set of reserved words recognized by the tokenizer.

Matching is case-insensitive (create = CREATE). Anything that is not listed
here stays a plain identifier.
"""

from enum import Enum
from typing import Optional


class Keyword(Enum):
    """Reserved word. The value is its canonical spelling."""

    # Statements
    CREATE = "CREATE"
    DROP = "DROP"
    TABLE = "TABLE"

    # Data Types
    BOOL = "BOOL"
    BOOLEAN = "BOOLEAN"
    CHAR = "CHAR"
    DOUBLE = "DOUBLE"
    FLOAT = "FLOAT"
    INT = "INT"
    INTEGER = "INTEGER"
    STRING = "STRING"
    TEXT = "TEXT"
    VARCHAR = "VARCHAR"

    # Column Constraints
    PRIMARY = "PRIMARY"
    KEY = "KEY"
    NULL = "NULL"
    NOT = "NOT"
    DEFAULT = "DEFAULT"
    UNIQUE = "UNIQUE"
    INDEX = "INDEX"
    REFERENCES = "REFERENCES"

    # Operators
    AND = "AND"

    @classmethod
    def lookup(cls, ident: str) -> Optional["Keyword"]:
        """Return the keyword spelled by `ident`, or None."""
        return _BY_NAME.get(ident.upper())

    def __str__(self) -> str:
        return self.value


_BY_NAME = {kw.value: kw for kw in Keyword}
