"""Quoting rules for single CSV cells and a quote-aware cell scanner."""

from dataclasses import dataclass
from enum import Enum
from typing import List

from ..config import Dialect, DEFAULT_DIALECT
from .errors import MalformedQuotingError


class ScanState(Enum):
    """States of the cell scanner."""

    UNQUOTED = "unquoted"
    IN_QUOTED_CELL = "in_quoted_cell"
    AFTER_POSSIBLE_CLOSE_QUOTE = "after_possible_close_quote"


@dataclass
class Cell:
    """A raw cell span as it appears in the line."""

    raw: str
    quoted: bool
    start: int  # 0-based offset of the cell in the line


def csv_quote(value: str, dialect: Dialect = DEFAULT_DIALECT) -> str:
    """Double every quote mark in value and wrap the result in quote marks."""
    quote = dialect.quote_mark
    return f"{quote}{value.replace(quote, quote * 2)}{quote}"


def csv_unquote(cell: str, dialect: Dialect = DEFAULT_DIALECT) -> str:
    """
    Inverse of csv_quote.

    Args:
        cell: A quote-delimited cell, including its surrounding quote marks

    Returns:
        The cell value with the wrapping removed and doubled quote marks collapsed

    Raises:
        MalformedQuotingError: If the cell is not wrapped in quote marks
    """
    quote = dialect.quote_mark
    if len(cell) < 2 * len(quote) or not (cell.startswith(quote) and cell.endswith(quote)):
        raise MalformedQuotingError("Cell is not wrapped in quote marks", line=cell)
    inner = cell[len(quote):-len(quote)]
    return inner.replace(quote * 2, quote)


def split_cells(line: str, dialect: Dialect = DEFAULT_DIALECT) -> List[Cell]:
    """
    Split a CSV line into raw cells without splitting inside quoted cells.

    A cell is quote-delimited when its first character is the quote mark.
    Inside such a cell a doubled quote mark is a literal quote; a single
    quote mark followed by the delimiter or the end of the line closes it.

    Raises:
        MalformedQuotingError: If a quoted cell is never closed, or a closing
            quote mark is followed by anything but the delimiter
    """
    quote = dialect.quote_mark
    delimiter = dialect.delimiter

    cells: List[Cell] = []
    state = ScanState.UNQUOTED
    start = 0

    for index, char in enumerate(line):
        if state is ScanState.UNQUOTED:
            if char == delimiter:
                cells.append(Cell(raw=line[start:index], quoted=False, start=start))
                start = index + 1
            elif char == quote and index == start:
                state = ScanState.IN_QUOTED_CELL
        elif state is ScanState.IN_QUOTED_CELL:
            if char == quote:
                state = ScanState.AFTER_POSSIBLE_CLOSE_QUOTE
        else:
            if char == quote:
                # doubled quote mark, still inside the cell
                state = ScanState.IN_QUOTED_CELL
            elif char == delimiter:
                cells.append(Cell(raw=line[start:index], quoted=True, start=start))
                start = index + 1
                state = ScanState.UNQUOTED
            else:
                raise MalformedQuotingError(
                    f"Unexpected character {char!r} after closing quote mark",
                    line=line,
                    column=index + 1,
                )

    if state is ScanState.IN_QUOTED_CELL:
        raise MalformedQuotingError(
            "Quoted cell is never closed", line=line, column=start + 1
        )

    cells.append(
        Cell(
            raw=line[start:],
            quoted=state is ScanState.AFTER_POSSIBLE_CLOSE_QUOTE,
            start=start,
        )
    )
    return cells


def cell_value(cell: Cell, dialect: Dialect = DEFAULT_DIALECT) -> str:
    """Get the logical value of a scanned cell."""
    if cell.quoted:
        return csv_unquote(cell.raw, dialect)
    return cell.raw
