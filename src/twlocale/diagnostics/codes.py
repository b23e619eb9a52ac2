"""Diagnostic codes and data structures.

Defines error codes, error context, and diagnostic messages.
Python 3.13+. Zero external dependencies.
"""

from dataclasses import dataclass
from enum import Enum, StrEnum
from typing import Literal

__all__ = [
    "Diagnostic",
    "DiagnosticCode",
    "ErrorCategory",
    "FrozenErrorContext",
]


class ErrorCategory(StrEnum):
    """Error categorization for twlocale errors.

    A StrEnum, so a category compares equal to its plain string value.

    Categories:
        PARSE: Parsing failure (amount, number, phone, date)
        FORMATTING: Formatting failure (numeral range, Babel rejection)
    """

    PARSE = "parse"
    FORMATTING = "formatting"


@dataclass(frozen=True, slots=True)
class FrozenErrorContext:
    """Immutable context for parse/formatting errors.

    Attributes:
        input_value: Text or value that failed (empty if not applicable)
        parse_type: Kind of parsing attempted (amount, number, phone, date)
    """

    input_value: str = ""
    parse_type: str = ""


class DiagnosticCode(Enum):
    """Error codes with unique identifiers.

    Numbered by category:
        2000-2999: Formatting errors (display-side failures)
        4000-4999: Parsing errors (user input back to values)
    """

    # Formatting errors (2000-2999)
    FORMATTING_FAILED = 2014
    NUMERAL_OUT_OF_RANGE = 2016
    NUMERAL_NOT_INTEGER = 2017

    # Parsing errors (4000-4999)
    PARSE_INPUT_EMPTY = 4001
    PARSE_NUMBER_FAILED = 4002
    PARSE_DATE_FAILED = 4003
    PARSE_DATE_INVALID = 4004
    PARSE_AMOUNT_FAILED = 4009
    PARSE_PHONE_FAILED = 4011


@dataclass(frozen=True, slots=True)
class Diagnostic:
    """Structured diagnostic message.

    Carries enough detail for a form to show a hint next to the field
    and for a log line to name the function and argument that failed.

    Attributes:
        code: Unique error code
        message: Human-readable error description
        hint: Suggestion for fixing the error
        function_name: Function name where error occurred
        argument_name: Argument name that caused error
        expected_type: Expected type or shape for argument
        received_type: Actual type or value received
        severity: Error severity level
    """

    code: DiagnosticCode
    message: str
    hint: str | None = None
    function_name: str | None = None
    argument_name: str | None = None
    expected_type: str | None = None
    received_type: str | None = None
    severity: Literal["error", "warning"] = "error"

    def __str__(self) -> str:
        """Return human-readable error description."""
        return self.message

    def format_error(self) -> str:
        """Format diagnostic like Rust compiler.

        Delegates to DiagnosticFormatter for consistent output.

        Example output:
            error[PARSE_AMOUNT_FAILED]: Failed to parse amount 'abc': not a number
              = help: Enter digits, optionally with NT$, commas or 萬/億 units

        Returns:
            Formatted error message
        """
        from .formatter import DiagnosticFormatter  # noqa: PLC0415 - circular

        return DiagnosticFormatter().format(self)
