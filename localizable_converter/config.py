"""Configuration management for the strings/CSV converter."""

import codecs
import logging
import os
from dataclasses import dataclass, field
from typing import List
from dotenv import load_dotenv

load_dotenv()


ERROR_POLICIES = ("skip", "placeholder", "halt")


@dataclass(frozen=True)
class Dialect:
    """Character set shared by every parser and writer."""

    quote_mark: str = '"'
    delimiter: str = ","
    comment_marker: str = "//"
    key_value_separator: str = " = "
    entry_terminator: str = ";"

    def __post_init__(self):
        # The cell scanner works one character at a time
        for name in ("quote_mark", "delimiter"):
            value = getattr(self, name)
            if len(value) != 1:
                raise ValueError(f"{name} must be a single character, got {value!r}")
        if not self.comment_marker:
            raise ValueError("comment_marker must not be empty")
        if self.quote_mark == self.delimiter:
            raise ValueError("quote_mark and delimiter must differ")


DEFAULT_DIALECT = Dialect()


@dataclass
class Config:
    """Application configuration."""

    # File handling
    encoding: str = field(default_factory=lambda: os.getenv("LOCALIZE_ENCODING", "utf-8"))

    # What to do with lines that fail to convert
    on_error: str = field(
        default_factory=lambda: os.getenv("LOCALIZE_ON_ERROR", "skip").lower()
    )

    # Logging
    log_level: str = field(
        default_factory=lambda: os.getenv("LOCALIZE_LOG_LEVEL", "WARNING").upper()
    )

    dialect: Dialect = DEFAULT_DIALECT

    def validate(self) -> List[str]:
        """Validate configuration and return list of errors."""
        errors = []
        if self.on_error not in ERROR_POLICIES:
            errors.append(
                f"LOCALIZE_ON_ERROR must be one of {', '.join(ERROR_POLICIES)}, got '{self.on_error}'"
            )
        if not isinstance(logging.getLevelName(self.log_level), int):
            errors.append(f"LOCALIZE_LOG_LEVEL is not a logging level: '{self.log_level}'")
        try:
            codecs.lookup(self.encoding)
        except LookupError:
            errors.append(f"LOCALIZE_ENCODING is not a known encoding: '{self.encoding}'")
        return errors


# Global config instance
config = Config()
