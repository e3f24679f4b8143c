"""Parser and writer for single lines of the .strings localization format."""

from typing import Optional, Tuple

from ..config import Dialect, DEFAULT_DIALECT
from ..models.localization_entry import LocalizationEntry
from .errors import MalformedQuotingError


class StringsLineParser:
    """
    Parser for lines like ``"greeting" = "Hello"; //shown on launch``.

    Values are taken literally between quote marks; there is no escape
    sequence for a quote mark inside a value.
    """

    def __init__(self, dialect: Dialect = DEFAULT_DIALECT):
        self.dialect = dialect

    def parse_line(self, line: str) -> Optional[LocalizationEntry]:
        """
        Parse one line into an entry.

        Args:
            line: Raw line, surrounding whitespace is ignored

        Returns:
            LocalizationEntry, or None for a blank line

        Raises:
            MalformedQuotingError: If the identifier or text is not enclosed
                in a pair of quote marks
        """
        line = line.strip()
        if not line:
            return None

        if self.is_comment_only(line):
            return LocalizationEntry.comment_only(self._comment_after(line, 0))

        identifier, end = self._quoted_value(line, 0, "identifier")
        text, end = self._quoted_value(line, end, "text")
        comment = self._comment_after(line, end)

        return LocalizationEntry(identifier=identifier, text=text, comment=comment)

    def is_comment_only(self, line: str) -> bool:
        """Check if the comment marker comes before any quote mark."""
        comment_index = line.find(self.dialect.comment_marker)
        if comment_index == -1:
            return False
        quote_index = line.find(self.dialect.quote_mark)
        return quote_index == -1 or comment_index < quote_index

    def _quoted_value(self, line: str, start: int, field_name: str) -> Tuple[str, int]:
        """Find the next quoted substring at or after start and the index past it."""
        quote = self.dialect.quote_mark

        opening = line.find(quote, start)
        if opening == -1:
            raise MalformedQuotingError(
                f"Expected opening quote mark for {field_name}",
                line=line,
                column=start + 1,
            )

        closing = line.find(quote, opening + len(quote))
        if closing == -1:
            raise MalformedQuotingError(
                f"Quoted {field_name} is never closed",
                line=line,
                column=opening + 1,
            )

        return line[opening + len(quote):closing], closing + len(quote)

    def _comment_after(self, line: str, start: int) -> str:
        marker = self.dialect.comment_marker
        index = line.find(marker, start)
        if index == -1:
            return ""
        return line[index + len(marker):]


class StringsLineWriter:
    """Writer for single .strings lines."""

    def __init__(self, dialect: Dialect = DEFAULT_DIALECT):
        self.dialect = dialect

    def format_entry(self, entry: LocalizationEntry) -> str:
        """Serialize an entry, comment-only entries become ``//comment``."""
        d = self.dialect
        if entry.is_comment_only:
            return f"{d.comment_marker}{entry.comment}"

        q = d.quote_mark
        return (
            f"{q}{entry.identifier}{q}{d.key_value_separator}{q}{entry.text}{q}"
            f"{d.entry_terminator} {d.comment_marker}{entry.comment}"
        )
