"""twlocale - Taiwan locale formatting and parsing.

Renders amounts, phone numbers, numbers and dates the way they are written
in Taiwan (Traditional Chinese, NT$, 萬/億, 民國 years) and parses
user-entered text back into Python values.

Public API:
    Currency: format_twd, parse_twd, format_discount, format_invoice_amount,
        to_chinese_numerals
    Phone: is_valid_taiwan_phone, format_taiwan_phone, parse_taiwan_phone,
        get_phone_type_label, get_area_name, normalize_phone, compare_phones
    Number: format_chinese_number, to_chinese_numeral, parse_chinese_number,
        format_ordinal, format_percentage, format_file_size, format_distance
    Date: format_taiwan_date, format_relative_time, format_date_range,
        format_event_duration, format_roc_date, parse_taiwan_date

Exceptions:
    TaiwanLocaleError - Base exception class
    TaiwanParseError - Returned (never raised) by parse_* functions
    FormattingError - Babel-backed formatting failed
    NumeralRangeError - Value outside a strict numeral converter's domain

Submodules:
    twlocale.formatting - All display formatters and supplementary helpers
    twlocale.parsing - Parsers, validators and TypeIs guards
    twlocale.diagnostics - Diagnostic codes, templates and formatter
    twlocale.runtime.locale_context - Thread-safe LocaleContext for Babel formatting
"""

from .core.errors import FormattingError, NumeralRangeError
from .diagnostics import TaiwanFormattingError, TaiwanLocaleError, TaiwanParseError
from .enums import CompactUnit, PhoneType
from .formatting import (
    format_chinese_number,
    format_date_range,
    format_discount,
    format_distance,
    format_event_duration,
    format_file_size,
    format_invoice_amount,
    format_ordinal,
    format_percentage,
    format_relative_time,
    format_roc_date,
    format_taiwan_date,
    format_taiwan_phone,
    format_twd,
    get_area_name,
    get_phone_type_label,
    to_chinese_numeral,
    to_chinese_numerals,
)
from .parsing import (
    ParsedPhone,
    compare_phones,
    is_valid_taiwan_phone,
    normalize_phone,
    parse_chinese_number,
    parse_taiwan_date,
    parse_taiwan_phone,
    parse_twd,
)

# Version information - Auto-populated from package metadata
# SINGLE SOURCE OF TRUTH: pyproject.toml [project] version
from importlib.metadata import PackageNotFoundError
from importlib.metadata import version as _get_version

try:
    __version__ = _get_version("twlocale")
except PackageNotFoundError:
    # Development mode: package not installed yet
    __version__ = "0.0.0+dev"

__all__ = [
    "CompactUnit",
    "FormattingError",
    "NumeralRangeError",
    "ParsedPhone",
    "PhoneType",
    "TaiwanFormattingError",
    "TaiwanLocaleError",
    "TaiwanParseError",
    "__version__",
    "compare_phones",
    "format_chinese_number",
    "format_date_range",
    "format_discount",
    "format_distance",
    "format_event_duration",
    "format_file_size",
    "format_invoice_amount",
    "format_ordinal",
    "format_percentage",
    "format_relative_time",
    "format_roc_date",
    "format_taiwan_date",
    "format_taiwan_phone",
    "format_twd",
    "get_area_name",
    "get_phone_type_label",
    "is_valid_taiwan_phone",
    "normalize_phone",
    "parse_chinese_number",
    "parse_taiwan_date",
    "parse_taiwan_phone",
    "parse_twd",
    "to_chinese_numeral",
    "to_chinese_numerals",
]
