"""Message templates for every twlocale diagnostic.

Callers build diagnostics through ErrorTemplate rather than formatting
messages inline, so wording and hints stay in one file.
Python 3.13+. Zero external dependencies.
"""

from .codes import Diagnostic, DiagnosticCode


class ErrorTemplate:
    """Factory methods returning Diagnostic objects, one per failure kind.

    Exception constructors receive a Diagnostic from here, never an
    f-string built at the raise site.
    """

    # =========================================================================
    # FORMATTING ERRORS (2000-2999)
    # =========================================================================

    @staticmethod
    def numeral_out_of_range(
        value: object,
        minimum: int,
        maximum: int,
        function_name: str = "to_chinese_numeral",
    ) -> Diagnostic:
        """Value outside the domain of a Chinese numeral converter.

        Args:
            value: The rejected value
            minimum: Smallest accepted value
            maximum: Largest accepted value
            function_name: Converter that rejected the value

        Returns:
            Diagnostic for NUMERAL_OUT_OF_RANGE
        """
        msg = f"Value {value!r} must be between {minimum} and {maximum}"
        return Diagnostic(
            code=DiagnosticCode.NUMERAL_OUT_OF_RANGE,
            message=msg,
            hint=f"Chinese numerals are only produced for {minimum}-{maximum}",
            function_name=function_name,
            argument_name="value",
            expected_type=f"int in [{minimum}, {maximum}]",
            received_type=repr(value),
        )

    @staticmethod
    def numeral_not_integer(value: object) -> Diagnostic:
        """Non-integer value passed to the Chinese numeral converter.

        Args:
            value: The rejected value

        Returns:
            Diagnostic for NUMERAL_NOT_INTEGER
        """
        msg = f"Value {value!r} is not an integer"
        return Diagnostic(
            code=DiagnosticCode.NUMERAL_NOT_INTEGER,
            message=msg,
            hint="Round or truncate the value before converting",
            function_name="to_chinese_numeral",
            argument_name="value",
            expected_type="int",
            received_type=type(value).__name__,
        )

    @staticmethod
    def amount_negative(amount: object) -> Diagnostic:
        """Negative amount passed to the formal numeral renderer.

        Args:
            amount: The rejected amount

        Returns:
            Diagnostic for NUMERAL_OUT_OF_RANGE
        """
        msg = f"Amount {amount!r} is negative"
        return Diagnostic(
            code=DiagnosticCode.NUMERAL_OUT_OF_RANGE,
            message=msg,
            hint="Formal amount numerals are only written for non-negative amounts",
            function_name="to_chinese_numerals",
            argument_name="amount",
            expected_type="amount >= 0",
            received_type=repr(amount),
        )

    @staticmethod
    def formatting_failed(function_name: str, value: object, reason: str) -> Diagnostic:
        """Babel or arithmetic rejected a value during formatting.

        Args:
            function_name: Formatting function that failed
            value: The value being formatted
            reason: The underlying error message

        Returns:
            Diagnostic for FORMATTING_FAILED
        """
        msg = f"{function_name} failed for {value!r}: {reason}"
        return Diagnostic(
            code=DiagnosticCode.FORMATTING_FAILED,
            message=msg,
            function_name=function_name,
        )

    # =========================================================================
    # PARSING ERRORS (4000-4999)
    # =========================================================================

    @staticmethod
    def parse_input_empty(parse_type: str) -> Diagnostic:
        """Nothing to parse.

        Args:
            parse_type: Kind of value expected

        Returns:
            Diagnostic for PARSE_INPUT_EMPTY
        """
        msg = f"Cannot parse {parse_type} from empty input"
        return Diagnostic(
            code=DiagnosticCode.PARSE_INPUT_EMPTY,
            message=msg,
            hint="This field is required",
        )

    @staticmethod
    def parse_amount_failed(value: str, reason: str) -> Diagnostic:
        """NT dollar amount parsing failed.

        Args:
            value: The input string that failed to parse
            reason: The reason parsing failed

        Returns:
            Diagnostic for PARSE_AMOUNT_FAILED
        """
        msg = f"Failed to parse amount '{value}': {reason}"
        return Diagnostic(
            code=DiagnosticCode.PARSE_AMOUNT_FAILED,
            message=msg,
            hint="Enter digits, optionally with NT$, commas or 萬/億 units (e.g. 'NT$ 1,500', '1.2萬')",
        )

    @staticmethod
    def parse_number_failed(value: str, reason: str) -> Diagnostic:
        """Chinese number parsing failed.

        Args:
            value: The input string that failed to parse
            reason: The reason parsing failed

        Returns:
            Diagnostic for PARSE_NUMBER_FAILED
        """
        msg = f"Failed to parse number '{value}': {reason}"
        return Diagnostic(
            code=DiagnosticCode.PARSE_NUMBER_FAILED,
            message=msg,
            hint="Use Arabic digits or Chinese numerals, optionally with 十/百/千/萬/億 units",
        )

    @staticmethod
    def parse_phone_failed(value: str) -> Diagnostic:
        """Taiwan phone number parsing failed.

        Args:
            value: The input string that failed to parse

        Returns:
            Diagnostic for PARSE_PHONE_FAILED
        """
        msg = f"'{value}' is not a valid Taiwan phone number"
        return Diagnostic(
            code=DiagnosticCode.PARSE_PHONE_FAILED,
            message=msg,
            hint="Use 09XX-XXX-XXX (mobile), 0X-XXXX-XXXX (landline) or 0800-XXX-XXX",
        )

    @staticmethod
    def parse_date_failed(value: str) -> Diagnostic:
        """No supported date shape matched.

        Args:
            value: The input string that failed to parse

        Returns:
            Diagnostic for PARSE_DATE_FAILED
        """
        msg = f"Failed to parse date '{value}': no supported format matched"
        return Diagnostic(
            code=DiagnosticCode.PARSE_DATE_FAILED,
            message=msg,
            hint="Use YYYY/MM/DD, YYYY年MM月DD日 or 民國YYY年MM月DD日",
        )

    @staticmethod
    def parse_date_invalid(value: str, reason: str) -> Diagnostic:
        """Date matched a supported shape but does not exist on the calendar.

        Args:
            value: The input string that failed to parse
            reason: The reason the date was rejected

        Returns:
            Diagnostic for PARSE_DATE_INVALID
        """
        msg = f"Invalid date '{value}': {reason}"
        return Diagnostic(
            code=DiagnosticCode.PARSE_DATE_INVALID,
            message=msg,
            hint="Check the month and day ranges",
        )
