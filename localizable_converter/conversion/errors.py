"""Exceptions raised while converting localization documents."""

from typing import Optional


class ConversionError(Exception):
    """Base class for all conversion failures."""


class LineConversionError(ConversionError):
    """A single line could not be converted. Recoverable per line."""

    def __init__(self, message: str, line: str = "", column: Optional[int] = None):
        super().__init__(message)
        self.message = message
        self.line = line
        self.column = column
        self.line_number: Optional[int] = None

    def __str__(self) -> str:
        location = []
        if self.line_number is not None:
            location.append(f"line {self.line_number}")
        if self.column is not None:
            location.append(f"column {self.column}")
        if location:
            return f"{self.message} ({', '.join(location)})"
        return self.message


class MalformedQuotingError(LineConversionError):
    """A quoted field was opened but never properly closed."""


class CellCountError(LineConversionError):
    """A CSV record has more cells than an entry can hold."""


class MissingInputResourceError(ConversionError):
    """The source document cannot be located or read."""


class OutputWriteError(ConversionError):
    """The destination document cannot be written."""
