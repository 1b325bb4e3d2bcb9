"""printf-style formatting with width, precision and flag handling, plus C-style string helpers."""

__version__ = "0.1.0"