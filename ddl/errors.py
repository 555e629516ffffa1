"""
EasyDB Errors
=============
Error taxonomy shared by the tokenizer and the parser.

Kinds:
- INTERNAL: an invariant inside the front end was violated (a bug)
- PARSE:    lexical or syntactic failure in the input
- VALUE:    well-formed input that is semantically invalid
            (e.g. NULL and NOT NULL on the same column)

Every error can be flattened with to_dict() so it can be handed across a
process or API boundary and rebuilt with EasyDBError.from_dict().
"""

from enum import Enum
from typing import Any, Dict, Optional


class ErrorKind(Enum):
    INTERNAL = "Internal"
    PARSE = "Parse"
    VALUE = "Value"


class EasyDBError(Exception):
    """Base class for all front-end errors."""

    kind: ErrorKind = ErrorKind.INTERNAL

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message

    def to_dict(self) -> Dict[str, Any]:
        return {"kind": self.kind.value, "message": self.message}

    @staticmethod
    def from_dict(data: Dict[str, Any]) -> "EasyDBError":
        """Rebuild an error produced by to_dict()."""
        try:
            kind = ErrorKind(data["kind"])
            message = data["message"]
        except (KeyError, ValueError) as e:
            raise InternalError(f"Malformed error payload: {data!r}") from e

        if kind == ErrorKind.PARSE:
            return ParseError(message, line=data.get("line"), col=data.get("col"))
        if kind == ErrorKind.VALUE:
            return InvalidValueError(message)
        return InternalError(message)


class InternalError(EasyDBError):
    """Unreachable state reached inside the front end."""
    kind = ErrorKind.INTERNAL


class ParseError(EasyDBError):
    """Error during tokenizing or parsing with optional position info."""

    kind = ErrorKind.PARSE

    def __init__(self, message: str, line: Optional[int] = None, col: Optional[int] = None):
        super().__init__(message)
        self.line = line
        self.col = col

    def __str__(self) -> str:
        if self.line is None:
            return self.message
        return f"{self.message} at line {self.line}:{self.col}"

    def to_dict(self) -> Dict[str, Any]:
        data = super().to_dict()
        data["line"] = self.line
        data["col"] = self.col
        return data


class InvalidValueError(EasyDBError):
    """Semantically invalid column definition."""
    kind = ErrorKind.VALUE
