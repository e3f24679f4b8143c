"""
Pytest configuration and shared fixtures.
"""

import sys
from pathlib import Path

import pytest

# Make the package importable without installing it
sys.path.insert(0, str(Path(__file__).parent.parent))

from localizable_converter.conversion.csv_format import CsvLineParser, CsvLineWriter
from localizable_converter.conversion.strings_format import StringsLineParser, StringsLineWriter


# ============================================================================
# Sample documents
# ============================================================================

STRINGS_DOCUMENT = """\
//Launch screen
"greeting" = "Hello"; //shown on launch
"farewell" = "Goodbye, friend"; //shown on exit

"empty" = ""; //
"""

CSV_DOCUMENT = """\
,,"Launch screen"
greeting,"Hello","shown on launch"
farewell,"Goodbye, friend","shown on exit"

empty,"",""
"""


# ============================================================================
# Fixtures
# ============================================================================


@pytest.fixture
def strings_parser():
    """Create a strings line parser."""
    return StringsLineParser()


@pytest.fixture
def strings_writer():
    """Create a strings line writer."""
    return StringsLineWriter()


@pytest.fixture
def csv_parser():
    """Create a CSV line parser."""
    return CsvLineParser()


@pytest.fixture
def csv_writer():
    """Create a CSV line writer."""
    return CsvLineWriter()


@pytest.fixture
def strings_file(tmp_path):
    """Write the sample strings document to a temporary file."""
    path = tmp_path / "Localizable.strings"
    path.write_text(STRINGS_DOCUMENT, encoding="utf-8")
    return path


@pytest.fixture
def csv_file(tmp_path):
    """Write the sample CSV document to a temporary file."""
    path = tmp_path / "Localizable.csv"
    path.write_text(CSV_DOCUMENT, encoding="utf-8")
    return path
