"""Find hardcoded color literals in a source tree."""

__version__ = "1.0.0"
