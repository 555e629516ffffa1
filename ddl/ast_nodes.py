"""
EasyDB AST Nodes
================
Statement and column definitions produced by the DDL parser.

Design:
- Frozen dataclasses; nothing is mutated after the parser builds it
- Statement is a closed union (CreateTable | DropTable), dispatched on by
  isinstance rather than through methods on a shared base class
- Nullability is three-valued so "NULL after NOT NULL" can be told apart
  from "nothing said about NULL"
- str() renders canonical DDL that parses back to an equal node
"""

from dataclasses import dataclass
from enum import Enum
from typing import Optional, Tuple, Union

from ddl.types import DataType


class Nullability(Enum):
    """Whether a column was declared NULL, NOT NULL, or neither."""
    UNSPECIFIED = "UNSPECIFIED"
    NULLABLE = "NULL"
    NOT_NULLABLE = "NOT NULL"


def _quote_ident(name: str) -> str:
    return '"' + name.replace('"', '""') + '"'


# ═══════════════════════════════════════════════════════════════════════════
# Columns
# ═══════════════════════════════════════════════════════════════════════════

@dataclass(frozen=True)
class Column:
    """Column definition in CREATE TABLE."""
    name: str
    datatype: DataType
    primary_key: bool = False
    nullable: Nullability = Nullability.UNSPECIFIED
    unique: bool = False
    index: bool = False
    references: Optional[str] = None  # Foreign table name

    def __str__(self) -> str:
        parts = [_quote_ident(self.name), self.datatype.value]
        if self.primary_key:
            parts.append("PRIMARY KEY")
        if self.nullable != Nullability.UNSPECIFIED:
            parts.append(self.nullable.value)
        if self.unique:
            parts.append("UNIQUE")
        if self.index:
            parts.append("INDEX")
        if self.references is not None:
            parts.append(f"REFERENCES {_quote_ident(self.references)}")
        return " ".join(parts)


# ═══════════════════════════════════════════════════════════════════════════
# Statements
# ═══════════════════════════════════════════════════════════════════════════

@dataclass(frozen=True)
class CreateTable:
    """
    CREATE TABLE name (col type [constraints], ...)
    """
    name: str
    columns: Tuple[Column, ...]

    def __str__(self) -> str:
        cols = ", ".join(map(str, self.columns))
        return f"CREATE TABLE {_quote_ident(self.name)} ({cols})"


@dataclass(frozen=True)
class DropTable:
    """DROP TABLE name"""
    name: str

    def __str__(self) -> str:
        return f"DROP TABLE {_quote_ident(self.name)}"


Statement = Union[CreateTable, DropTable]
