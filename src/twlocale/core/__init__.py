"""Core utilities shared across formatting and parsing layers.

Exports:
    FormattingError: Exception raised when Babel-backed formatting fails
    NumeralRangeError: Exception raised for values outside a numeral domain

Python 3.13+.
"""

from .errors import FormattingError, NumeralRangeError

__all__ = ["FormattingError", "NumeralRangeError"]
