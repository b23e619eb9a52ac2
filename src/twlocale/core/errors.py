"""Core error types shared across formatting and parsing layers.

Provides error types that need to be importable from both packages
without creating circular dependencies.

Python 3.13+.
"""

from twlocale.diagnostics import TaiwanFormattingError
from twlocale.diagnostics.codes import Diagnostic

__all__ = ["FormattingError", "NumeralRangeError"]


class FormattingError(TaiwanFormattingError):
    """Raised when Babel-backed formatting fails.

    The error carries a fallback_value that callers may display instead,
    so a rejected value never leaves an empty slot on screen.

    Attributes:
        fallback_value: String to use in output when formatting fails
    """

    def __init__(self, message: str | Diagnostic, fallback_value: str) -> None:
        """Initialize FormattingError.

        Args:
            message: Error message string OR Diagnostic object
            fallback_value: Value to use in output when formatting fails
        """
        super().__init__(message)
        self.fallback_value = fallback_value


class NumeralRangeError(TaiwanFormattingError, ValueError):
    """Value outside the domain of a strict numeral converter.

    Subclasses ValueError so callers can catch it without importing
    twlocale types.
    """
