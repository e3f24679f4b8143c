"""Line transforms between the strings and CSV formats, and a document converter."""

import logging
from enum import Enum
from typing import Callable, Iterable, Optional

from ..config import Dialect, DEFAULT_DIALECT
from ..models.conversion_report import ConversionMode, ConversionReport, LineError
from ..models.localization_entry import LocalizationEntry
from .csv_format import CsvLineParser, CsvLineWriter
from .document_io import PathLike, read_document, split_lines, write_document
from .errors import LineConversionError
from .strings_format import StringsLineParser, StringsLineWriter

LineTransform = Callable[[str, Dialect], str]


def encode_line(line: str, dialect: Dialect = DEFAULT_DIALECT) -> str:
    """
    Convert one strings-format line to a CSV line.

    Blank lines stay blank.

    Raises:
        MalformedQuotingError: If the identifier or text is not quoted properly
    """
    entry = StringsLineParser(dialect).parse_line(line)
    if entry is None:
        return ""
    return CsvLineWriter(dialect).format_entry(entry)


def decode_line(line: str, dialect: Dialect = DEFAULT_DIALECT) -> str:
    """
    Convert one CSV line to a strings-format line.

    Blank lines stay blank.

    Raises:
        MalformedQuotingError: If a quoted cell is not closed properly
        CellCountError: If the record has more than three cells
    """
    entry = CsvLineParser(dialect).parse_line(line)
    if entry is None:
        return ""
    return StringsLineWriter(dialect).format_entry(entry)


_TRANSFORMS = {
    ConversionMode.STRINGS_TO_CSV: encode_line,
    ConversionMode.CSV_TO_STRINGS: decode_line,
}


def get_transform(mode: ConversionMode) -> LineTransform:
    """Get the line transform for a conversion direction."""
    return _TRANSFORMS[ConversionMode(mode)]


class ErrorPolicy(str, Enum):
    """What the document converter emits for a line that fails."""

    SKIP = "skip"  # empty line in its place
    PLACEHOLDER = "placeholder"  # comment-only line describing the failure
    HALT = "halt"  # re-raise the first failure


class DocumentConverter:
    """
    Converts whole documents line by line.

    Lines are independent: a failing line is recorded in the report and
    handled according to the error policy, the rest keep converting. Output
    order always matches input order.
    """

    def __init__(
        self,
        mode: ConversionMode,
        dialect: Dialect = DEFAULT_DIALECT,
        error_policy: ErrorPolicy = ErrorPolicy.SKIP,
        logger: Optional[logging.Logger] = None,
    ):
        """
        Initialize the converter.

        Args:
            mode: Conversion direction
            dialect: Character set used by both formats
            error_policy: Handling of lines that fail to convert
            logger: Logger for per-line failures (module logger if not provided)
        """
        self.mode = ConversionMode(mode)
        self.dialect = dialect
        self.error_policy = ErrorPolicy(error_policy)
        self.logger = logger or logging.getLogger(__name__)
        self.transform = get_transform(self.mode)

    def convert_lines(self, lines: Iterable[str]) -> ConversionReport:
        """
        Convert a sequence of raw lines.

        Raises:
            LineConversionError: Only with ErrorPolicy.HALT, for the first
                failing line
        """
        report = ConversionReport(mode=self.mode)

        for line_number, line in enumerate(lines, start=1):
            try:
                report.lines.append(self.transform(line, self.dialect))
            except LineConversionError as exc:
                exc.line_number = line_number
                self.logger.warning("Line %d failed to convert: %s", line_number, exc.message)
                if self.error_policy is ErrorPolicy.HALT:
                    raise

                report.errors.append(
                    LineError(
                        line_number=line_number,
                        content=line,
                        error_type=type(exc).__name__,
                        message=str(exc),
                    )
                )
                report.lines.append(self._failed_line(line_number, line))

        return report

    def convert_text(self, text: str) -> ConversionReport:
        """Split a document into lines and convert them."""
        return self.convert_lines(split_lines(text))

    def convert_file(
        self,
        input_path: PathLike,
        output_path: Optional[PathLike] = None,
        encoding: str = "utf-8",
    ) -> ConversionReport:
        """
        Convert a file on disk.

        Args:
            input_path: Document in the mode's input format
            output_path: Where to write the result, nothing is written if None
            encoding: Text encoding for reading and writing

        Raises:
            MissingInputResourceError: If the input cannot be read
            OutputWriteError: If the output cannot be written
        """
        report = self.convert_text(read_document(input_path, encoding=encoding))

        if report.errors:
            self.logger.warning(
                "%d of %d lines in %s failed to convert",
                len(report.errors),
                len(report.lines),
                input_path,
            )

        if output_path is not None:
            write_document(output_path, report.lines, encoding=encoding)

        return report

    def _failed_line(self, line_number: int, line: str) -> str:
        if self.error_policy is ErrorPolicy.SKIP:
            return ""

        placeholder = LocalizationEntry.comment_only(
            f"ERROR line {line_number}: {line.strip()}"
        )
        if self.mode is ConversionMode.STRINGS_TO_CSV:
            return CsvLineWriter(self.dialect).format_entry(placeholder)
        return StringsLineWriter(self.dialect).format_entry(placeholder)
