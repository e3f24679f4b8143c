"""Data models for the strings/CSV converter."""

from .localization_entry import LocalizationEntry
from .conversion_report import ConversionMode, ConversionReport, LineError

__all__ = [
    "LocalizationEntry",
    "ConversionMode",
    "ConversionReport",
    "LineError",
]
