"""Validator checking that lines survive a conversion to the other format and back."""

from dataclasses import dataclass
from typing import Dict, Iterable, List, Optional, Tuple

from ..config import Dialect, DEFAULT_DIALECT
from ..conversion.cell_codec import cell_value, split_cells
from ..conversion.csv_format import CsvLineParser, CsvLineWriter
from ..conversion.errors import LineConversionError
from ..conversion.strings_format import StringsLineParser, StringsLineWriter
from ..models.localization_entry import LocalizationEntry

SOURCE_FORMATS = ("strings", "csv")


@dataclass
class RoundTripIssue:
    """Represents a round-trip validation issue."""

    error_type: str  # parse_error, target_parse_error, identifier_mismatch, text_mismatch, comment_mismatch, text_dropped
    message: str
    severity: str  # critical, warning


class RoundTripValidator:
    """
    Validates that a line keeps its identifier, text and comment when
    converted to the other format and parsed back.

    Lossy cases this catches:
    - a quote mark inside a strings value, which has no escape
    - an identifier containing the CSV delimiter, which is written unquoted
    - an empty identifier, which reads back as a comment-only line
    - a CSV comment-only record that also carries text
    """

    def __init__(self, dialect: Dialect = DEFAULT_DIALECT):
        self.dialect = dialect
        self.strings_parser = StringsLineParser(dialect)
        self.strings_writer = StringsLineWriter(dialect)
        self.csv_parser = CsvLineParser(dialect)
        self.csv_writer = CsvLineWriter(dialect)

    def validate_line(self, line: str, source_format: str) -> Tuple[bool, List[RoundTripIssue]]:
        """
        Validate a single line.

        Args:
            line: Raw line in the source format
            source_format: "strings" or "csv"

        Returns:
            Tuple of (is_valid, list of issues)
        """
        if source_format not in SOURCE_FORMATS:
            raise ValueError(f"Unknown source format: {source_format}")

        issues: List[RoundTripIssue] = []

        if source_format == "strings":
            parser, writer, target_parser = self.strings_parser, self.csv_writer, self.csv_parser
        else:
            parser, writer, target_parser = self.csv_parser, self.strings_writer, self.strings_parser

        try:
            entry = parser.parse_line(line)
        except LineConversionError as exc:
            issues.append(RoundTripIssue("parse_error", str(exc), "critical"))
            return False, issues

        if entry is None:
            return True, issues

        if source_format == "csv":
            issues.extend(self._check_dropped_text(line))

        converted = writer.format_entry(entry)
        try:
            round_tripped = target_parser.parse_line(converted)
        except LineConversionError as exc:
            issues.append(
                RoundTripIssue(
                    "target_parse_error",
                    f"Converted line {converted!r} cannot be read back: {exc}",
                    "critical",
                )
            )
            return False, issues

        issues.extend(self._compare(entry, round_tripped))

        is_valid = not any(issue.severity == "critical" for issue in issues)
        return is_valid, issues

    def validate_lines(
        self, lines: Iterable[str], source_format: str
    ) -> Dict[int, List[RoundTripIssue]]:
        """Validate many lines, returning issues keyed by 1-based line number."""
        results = {}
        for line_number, line in enumerate(lines, start=1):
            _, issues = self.validate_line(line, source_format)
            if issues:
                results[line_number] = issues
        return results

    def _compare(
        self, original: LocalizationEntry, round_tripped: Optional[LocalizationEntry]
    ) -> List[RoundTripIssue]:
        if round_tripped is None:
            return [RoundTripIssue("identifier_mismatch", "Line converted to a blank line", "critical")]

        issues = []
        for field_name in ("identifier", "text", "comment"):
            before = getattr(original, field_name)
            after = getattr(round_tripped, field_name)
            if before != after:
                issues.append(
                    RoundTripIssue(
                        f"{field_name}_mismatch",
                        f"{field_name.capitalize()} changed: {before!r} -> {after!r}",
                        "critical",
                    )
                )
        return issues

    def _check_dropped_text(self, line: str) -> List[RoundTripIssue]:
        """A record with an empty identifier is a comment; any text in it is lost."""
        cells = split_cells(line.strip(), self.dialect)
        if len(cells) < 2:
            return []
        identifier = cell_value(cells[0], self.dialect)
        text = cell_value(cells[1], self.dialect)
        if not identifier and text:
            return [
                RoundTripIssue(
                    "text_dropped",
                    f"Comment-only record carries text that will be dropped: {text!r}",
                    "warning",
                )
            ]
        return []
