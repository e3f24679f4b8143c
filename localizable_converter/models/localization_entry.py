"""Data model for a single localization line."""

from dataclasses import dataclass
from typing import Optional


@dataclass
class LocalizationEntry:
    """
    One logical record of a strings or CSV file.

    An entry without an identifier stands for a comment-only line.
    """

    identifier: Optional[str]
    text: str = ""
    comment: str = ""

    @property
    def is_comment_only(self) -> bool:
        """Check if this entry represents a comment-only line."""
        return self.identifier is None

    @classmethod
    def comment_only(cls, comment: str) -> "LocalizationEntry":
        return cls(identifier=None, text="", comment=comment)
