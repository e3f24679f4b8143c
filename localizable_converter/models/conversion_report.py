"""Data models for conversion direction and per-document results."""

from dataclasses import dataclass, field
from enum import Enum
from typing import List


class ConversionMode(str, Enum):
    """Direction of a conversion."""

    STRINGS_TO_CSV = "strings-to-csv"
    CSV_TO_STRINGS = "csv-to-strings"

    @property
    def input_extension(self) -> str:
        return "strings" if self is ConversionMode.STRINGS_TO_CSV else "csv"

    @property
    def output_extension(self) -> str:
        return "csv" if self is ConversionMode.STRINGS_TO_CSV else "strings"


@dataclass
class LineError:
    """A line that could not be converted."""

    line_number: int  # 1-based
    content: str
    error_type: str  # MalformedQuotingError, CellCountError
    message: str


@dataclass
class ConversionReport:
    """Result of converting a whole document."""

    mode: ConversionMode
    lines: List[str] = field(default_factory=list)
    errors: List[LineError] = field(default_factory=list)

    @property
    def success(self) -> bool:
        """Check if every line converted."""
        return not self.errors

    @property
    def failed_line_numbers(self) -> List[int]:
        return [error.line_number for error in self.errors]

    @property
    def converted_count(self) -> int:
        """Number of input lines that converted without error."""
        return len(self.lines) - len(self.errors)

    def to_text(self) -> str:
        """Join the output lines with newline separators."""
        return "\n".join(self.lines)
