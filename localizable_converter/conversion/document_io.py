"""Reading and writing whole documents as sequences of lines."""

import logging
from pathlib import Path
from typing import Iterable, List, Union

from ..models.conversion_report import ConversionMode
from .errors import MissingInputResourceError, OutputWriteError

logger = logging.getLogger(__name__)

PathLike = Union[str, Path]


def split_lines(text: str) -> List[str]:
    """Split a document on any line boundary, dropping the newline characters."""
    return text.splitlines()


def read_document(file_path: PathLike, encoding: str = "utf-8") -> str:
    """
    Read a whole document from disk.

    Args:
        file_path: Path to the input document
        encoding: Text encoding of the document

    Returns:
        The document content

    Raises:
        MissingInputResourceError: If the file is missing, not a file, or
            cannot be read with the given encoding
    """
    path = Path(file_path)
    if not path.exists():
        raise MissingInputResourceError(f"File not found: {file_path}")
    if not path.is_file():
        raise MissingInputResourceError(f"Not a file: {file_path}")

    try:
        content = path.read_text(encoding=encoding)
    except (OSError, UnicodeDecodeError) as exc:
        raise MissingInputResourceError(f"Could not read {file_path}: {exc}") from exc

    logger.info("Read %d characters from %s", len(content), path)
    return content


def write_document(file_path: PathLike, lines: Iterable[str], encoding: str = "utf-8") -> None:
    """
    Write lines to disk joined by newlines, with a trailing newline.

    Raises:
        OutputWriteError: If the destination cannot be written
    """
    path = Path(file_path)
    content = "\n".join(lines)

    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        with open(path, "w", encoding=encoding, newline="\n") as f:
            f.write(content)
            f.write("\n")  # Trailing newline
    except (OSError, UnicodeEncodeError) as exc:
        raise OutputWriteError(f"Could not write {file_path}: {exc}") from exc

    logger.info("Wrote %s", path)


def default_output_path(input_path: PathLike, mode: ConversionMode) -> Path:
    """Swap the input file extension for the one the mode produces."""
    return Path(input_path).with_suffix(f".{mode.output_extension}")
