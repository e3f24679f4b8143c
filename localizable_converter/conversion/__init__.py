"""Line parsers, writers and converters for the strings and CSV formats."""

from .cell_codec import csv_quote, csv_unquote, split_cells
from .converter import DocumentConverter, ErrorPolicy, decode_line, encode_line, get_transform
from .csv_format import CsvLineParser, CsvLineWriter
from .errors import (
    CellCountError,
    ConversionError,
    LineConversionError,
    MalformedQuotingError,
    MissingInputResourceError,
    OutputWriteError,
)
from .strings_format import StringsLineParser, StringsLineWriter

__all__ = [
    "csv_quote",
    "csv_unquote",
    "split_cells",
    "DocumentConverter",
    "ErrorPolicy",
    "decode_line",
    "encode_line",
    "get_transform",
    "CsvLineParser",
    "CsvLineWriter",
    "StringsLineParser",
    "StringsLineWriter",
    "CellCountError",
    "ConversionError",
    "LineConversionError",
    "MalformedQuotingError",
    "MissingInputResourceError",
    "OutputWriteError",
]
