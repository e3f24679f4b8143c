"""Convert localization files between the .strings and three-column CSV formats."""

__version__ = "0.1.0"
