"""Custom exceptions for syntax tree construction."""

from typing import Any


class SyntaxTreeError(Exception):
    """Base exception for syntax tree operations."""

    def __init__(self, message: str, error_details: dict[str, Any] | None = None):
        """
        Initialize the exception.

        Args:
            message: Error message
            error_details: Optional dictionary with detailed error information
        """
        super().__init__(message)
        self.error_details = error_details


class FormatterPatternError(SyntaxTreeError):
    """Raised when a formatter's regular expression fails to compile."""


class FormatterRegistryError(SyntaxTreeError):
    """Raised when a parser is given something that isn't a usable formatter."""
