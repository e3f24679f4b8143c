"""
Unit tests for the CSV line parser and writer.
"""

import pytest

from localizable_converter.conversion.errors import CellCountError, MalformedQuotingError
from localizable_converter.models.localization_entry import LocalizationEntry


class TestCsvLineParser:
    """Tests for CsvLineParser."""

    def test_parse_standard_record(self, csv_parser):
        entry = csv_parser.parse_line('greeting,"Hello","shown on launch"')

        assert entry == LocalizationEntry("greeting", "Hello", "shown on launch")

    def test_embedded_comma_in_text(self, csv_parser):
        """Test that a comma inside a quoted text cell does not split it."""
        entry = csv_parser.parse_line('id,"a, b","c"')

        assert entry.text == "a, b"
        assert entry.comment == "c"

    def test_escaped_quotes_in_text(self, csv_parser):
        entry = csv_parser.parse_line('id,"He said ""hi""",""')

        assert entry.text == 'He said "hi"'

    def test_comment_only_record(self, csv_parser):
        """Test that an empty identifier cell marks a comment-only line."""
        entry = csv_parser.parse_line(',,"TODO translate"')

        assert entry.is_comment_only
        assert entry.comment == "TODO translate"

    def test_unquoted_cells(self, csv_parser):
        entry = csv_parser.parse_line("a,b,c")

        assert entry == LocalizationEntry("a", "b", "c")

    def test_quoted_identifier(self, csv_parser):
        entry = csv_parser.parse_line('"greeting","Hello",""')

        assert entry.identifier == "greeting"

    def test_missing_cells_are_empty(self, csv_parser):
        """Test that short records are padded with empty cells."""
        entry = csv_parser.parse_line('a,"b"')

        assert entry == LocalizationEntry("a", "b", "")

    def test_too_many_cells_raises(self, csv_parser):
        with pytest.raises(CellCountError) as exc_info:
            csv_parser.parse_line('a,"b","c","d"')

        assert exc_info.value.column == 11

    def test_space_before_quote_leaves_cell_unquoted(self, csv_parser):
        """Test that only a quote mark directly after the delimiter opens a quoted cell."""
        with pytest.raises(CellCountError):
            csv_parser.parse_line('id, "a, b", "c"')

    def test_space_before_quote_without_inner_comma(self, csv_parser):
        entry = csv_parser.parse_line('id, "a", "c"')

        assert entry == LocalizationEntry("id", ' "a"', ' "c"')

    def test_unterminated_quote_raises(self, csv_parser):
        with pytest.raises(MalformedQuotingError):
            csv_parser.parse_line('id,"never closed,"c')

    def test_blank_line_returns_none(self, csv_parser):
        assert csv_parser.parse_line("  ") is None


class TestCsvLineWriter:
    """Tests for CsvLineWriter."""

    def test_format_standard_entry(self, csv_writer):
        line = csv_writer.format_entry(LocalizationEntry("greeting", "Hello", "shown on launch"))

        assert line == 'greeting,"Hello","shown on launch"'

    def test_format_comment_only_entry(self, csv_writer):
        line = csv_writer.format_entry(LocalizationEntry.comment_only("TODO translate"))

        assert line == ',,"TODO translate"'

    def test_text_and_comment_always_quoted(self, csv_writer):
        """Test that quoting is applied even without special characters."""
        line = csv_writer.format_entry(LocalizationEntry("id", "", ""))

        assert line == 'id,"",""'

    def test_quotes_in_text_are_doubled(self, csv_writer):
        line = csv_writer.format_entry(LocalizationEntry("id", 'He said "hi"', ""))

        assert line == 'id,"He said ""hi""",""'
