"""
Parse Errors
============
Error taxonomy for reading mesh files. Every failure is fatal for the parse;
the exception carries the kind and, where known, the 1-based line number so
callers can report or inspect it.
"""
from __future__ import annotations

from enum import StrEnum
from typing import Optional


class ParseErrorKind(StrEnum):
    STREAM_OPEN = "stream-open"
    FIELD_ARITY = "field-arity"
    NUMERIC_CONVERSION = "numeric-conversion"


class MeshParseError(Exception):
    """Base class for all mesh file parse failures."""
    kind: ParseErrorKind

    def __init__(
        self,
        message: str,
        kind: ParseErrorKind,
        line_number: Optional[int] = None,
        line: Optional[str] = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.kind = kind
        self.line_number = line_number
        self.line = line

    def __str__(self) -> str:
        if self.line_number is None:
            return self.message
        return f"line {self.line_number}: {self.message}"


class StreamOpenError(MeshParseError):
    """The input source could not be opened or read."""
    def __init__(self, message: str, line_number: Optional[int] = None) -> None:
        super().__init__(message, ParseErrorKind.STREAM_OPEN, line_number=line_number)


class FieldArityError(MeshParseError):
    """A row did not split into the expected number of fields."""
    def __init__(self, message: str, line_number: Optional[int] = None, line: Optional[str] = None) -> None:
        super().__init__(message, ParseErrorKind.FIELD_ARITY, line_number=line_number, line=line)


class NumericConversionError(MeshParseError):
    """A token expected to be numeric could not be converted."""
    def __init__(self, message: str, line_number: Optional[int] = None, line: Optional[str] = None) -> None:
        super().__init__(message, ParseErrorKind.NUMERIC_CONVERSION, line_number=line_number, line=line)
