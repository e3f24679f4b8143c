"""
Unit tests for the strings line parser and writer.
"""

import pytest

from localizable_converter.conversion.errors import MalformedQuotingError
from localizable_converter.models.localization_entry import LocalizationEntry


class TestStringsLineParser:
    """Tests for StringsLineParser."""

    def test_parse_standard_line(self, strings_parser):
        """Test parsing identifier, text and comment."""
        entry = strings_parser.parse_line('"greeting" = "Hello"; //shown on launch')

        assert entry == LocalizationEntry("greeting", "Hello", "shown on launch")
        assert not entry.is_comment_only

    def test_parse_comment_only_line(self, strings_parser):
        """Test that a line starting with the comment marker has no identifier."""
        entry = strings_parser.parse_line("//TODO translate")

        assert entry.is_comment_only
        assert entry.comment == "TODO translate"
        assert entry.text == ""

    def test_comment_with_quotes_is_still_comment_only(self, strings_parser):
        entry = strings_parser.parse_line('// use "Hello" here')

        assert entry.is_comment_only
        assert entry.comment == ' use "Hello" here'

    def test_parse_without_comment(self, strings_parser):
        entry = strings_parser.parse_line('"a" = "b";')

        assert entry == LocalizationEntry("a", "b", "")

    def test_parse_empty_text(self, strings_parser):
        entry = strings_parser.parse_line('"empty" = ""; //')

        assert entry == LocalizationEntry("empty", "", "")

    def test_comment_marker_inside_text_is_not_a_comment(self, strings_parser):
        """Test that the comment is searched for after the text."""
        entry = strings_parser.parse_line('"link" = "http://example.com"; //homepage')

        assert entry.text == "http://example.com"
        assert entry.comment == "homepage"

    def test_surrounding_whitespace_is_ignored(self, strings_parser):
        entry = strings_parser.parse_line('   "a" = "b"; //c  \t')

        assert entry == LocalizationEntry("a", "b", "c")

    def test_blank_line_returns_none(self, strings_parser):
        assert strings_parser.parse_line("") is None
        assert strings_parser.parse_line("   ") is None

    def test_unclosed_identifier_raises(self, strings_parser):
        """Test that a missing closing quote is a malformed quoting error."""
        with pytest.raises(MalformedQuotingError) as exc_info:
            strings_parser.parse_line('"greeting')

        assert exc_info.value.column == 1

    def test_missing_text_raises(self, strings_parser):
        with pytest.raises(MalformedQuotingError):
            strings_parser.parse_line('"greeting" = Hello;')

    def test_unclosed_text_raises(self, strings_parser):
        with pytest.raises(MalformedQuotingError):
            strings_parser.parse_line('"greeting" = "Hello; //oops')

    def test_line_without_quotes_or_comment_raises(self, strings_parser):
        with pytest.raises(MalformedQuotingError):
            strings_parser.parse_line("greeting = Hello;")

    def test_is_comment_only(self, strings_parser):
        assert strings_parser.is_comment_only("//note")
        assert not strings_parser.is_comment_only('"a" = "b"; //note')
        assert not strings_parser.is_comment_only('"a" = "b";')


class TestStringsLineWriter:
    """Tests for StringsLineWriter."""

    def test_format_standard_entry(self, strings_writer):
        line = strings_writer.format_entry(LocalizationEntry("greeting", "Hello", "shown on launch"))

        assert line == '"greeting" = "Hello"; //shown on launch'

    def test_format_comment_only_entry(self, strings_writer):
        """Test that comment-only entries produce a comment line, not a triple."""
        line = strings_writer.format_entry(LocalizationEntry.comment_only("TODO translate"))

        assert line == "//TODO translate"

    def test_format_entry_without_comment(self, strings_writer):
        line = strings_writer.format_entry(LocalizationEntry("a", "b"))

        assert line == '"a" = "b"; //'

    def test_values_are_written_literally(self, strings_writer):
        line = strings_writer.format_entry(LocalizationEntry("id", "a, b", "x"))

        assert line == '"id" = "a, b"; //x'
