"""Parser and writer for single three-cell CSV lines."""

from typing import Optional

from ..config import Dialect, DEFAULT_DIALECT
from ..models.localization_entry import LocalizationEntry
from .cell_codec import cell_value, csv_quote, split_cells
from .errors import CellCountError

CELLS_PER_RECORD = 3


class CsvLineParser:
    """Parser for lines like ``greeting,"Hello","shown on launch"``."""

    def __init__(self, dialect: Dialect = DEFAULT_DIALECT):
        self.dialect = dialect

    def parse_line(self, line: str) -> Optional[LocalizationEntry]:
        """
        Parse one CSV record into an entry.

        Missing trailing cells are read as empty. A record whose identifier
        cell is empty is a comment-only line.

        Returns:
            LocalizationEntry, or None for a blank line

        Raises:
            MalformedQuotingError: If a quoted cell is not closed properly
            CellCountError: If the record has more than three cells
        """
        line = line.strip()
        if not line:
            return None

        cells = split_cells(line, self.dialect)
        if len(cells) > CELLS_PER_RECORD:
            raise CellCountError(
                f"Expected {CELLS_PER_RECORD} cells, got {len(cells)}",
                line=line,
                column=cells[CELLS_PER_RECORD].start + 1,
            )

        values = [cell_value(cell, self.dialect) for cell in cells]
        values += [""] * (CELLS_PER_RECORD - len(values))
        identifier, text, comment = values

        if not identifier:
            return LocalizationEntry.comment_only(comment)
        return LocalizationEntry(identifier=identifier, text=text, comment=comment)


class CsvLineWriter:
    """Writer for CSV records; text and comment cells are always quoted."""

    def __init__(self, dialect: Dialect = DEFAULT_DIALECT):
        self.dialect = dialect

    def format_entry(self, entry: LocalizationEntry) -> str:
        delimiter = self.dialect.delimiter
        comment = csv_quote(entry.comment, self.dialect)
        if entry.is_comment_only:
            return f"{delimiter}{delimiter}{comment}"

        text = csv_quote(entry.text, self.dialect)
        return f"{entry.identifier}{delimiter}{text}{delimiter}{comment}"
