"""twlocale exception hierarchy with structured diagnostics.

All exceptions may store Diagnostic objects for rich error information.

Python 3.13+. Zero external dependencies.
"""

from .codes import Diagnostic, ErrorCategory, FrozenErrorContext


class TaiwanLocaleError(Exception):
    """Base exception for all twlocale errors.

    Attributes:
        diagnostic: Structured diagnostic information (optional)
        category: Error category (parse or formatting)
    """

    category: ErrorCategory = ErrorCategory.FORMATTING

    def __init__(self, message: str | Diagnostic) -> None:
        """Initialize TaiwanLocaleError.

        Args:
            message: Error message string OR Diagnostic object
        """
        if isinstance(message, Diagnostic):
            self.diagnostic: Diagnostic | None = message
            super().__init__(message.format_error())
        else:
            self.diagnostic = None
            super().__init__(message)


class TaiwanFormattingError(TaiwanLocaleError):
    """Display formatting failed.

    Raised only by strict formatters (numeral conversion); lenient display
    helpers pass bad input through instead.
    """


class TaiwanParseError(TaiwanLocaleError):
    """Error during parsing of user-entered text.

    Parsers never raise this error. They return it inside the error tuple
    alongside a ``None`` result, so callers can tell a failed parse from a
    legitimately parsed zero.

    Attributes:
        input_value: The text that failed to parse
        parse_type: Type of parsing ('amount', 'number', 'phone', 'date')

    Example:
        >>> result, errors = parse_twd("not a number")
        >>> if errors:
        ...     for error in errors:
        ...         print(f"Parse failed: {error.input_value} ({error.parse_type})")
    """

    category = ErrorCategory.PARSE

    def __init__(
        self,
        message: str | Diagnostic,
        *,
        input_value: str = "",
        parse_type: str = "",
    ) -> None:
        """Initialize TaiwanParseError.

        Args:
            message: Error message string OR Diagnostic object
            input_value: The text that failed to parse
            parse_type: Type of parsing ('amount', 'number', 'phone', 'date')
        """
        super().__init__(message)
        self.input_value = input_value
        self.parse_type = parse_type

    @property
    def context(self) -> FrozenErrorContext:
        """Immutable snapshot of the failed input, for logging and UI layers."""
        return FrozenErrorContext(input_value=self.input_value, parse_type=self.parse_type)
