"""
EasyDB Data Type System
=======================
The four semantic column types. The DDL accepts several spellings for each
(INT and INTEGER, TEXT and VARCHAR, ...); they all collapse onto one of these.
"""

from enum import Enum


class DataType(Enum):
    """Supported column data types."""
    BOOLEAN = "BOOLEAN"
    INTEGER = "INTEGER"
    FLOAT = "FLOAT"
    STRING = "STRING"

    def __str__(self) -> str:
        return self.value
