"""Parse user-entered Taiwan-convention text back to Python values.

- Functions NEVER raise exceptions - errors are returned in tuple
- A failed parse yields ``None``, so it is never confused with a parsed zero

This package provides the inverse operations to twlocale.formatting:
- Formatting: Python value -> Taiwan display string
- Parsing: Taiwan display string -> Python value

Public API:
    Parsing Functions:
        parse_twd - Returns tuple[Decimal | None, tuple[TaiwanParseError, ...]]
        parse_chinese_number - Returns tuple[Decimal | None, tuple[TaiwanParseError, ...]]
        parse_taiwan_phone - Returns tuple[ParsedPhone | None, tuple[TaiwanParseError, ...]]
        parse_taiwan_date - Returns tuple[date | None, tuple[TaiwanParseError, ...]]

    Validators:
        is_valid_twd_amount, is_valid_taiwan_phone, normalize_phone, compare_phones

    Type Guards:
        is_valid_amount, is_valid_number, is_valid_phone, is_valid_date

Python 3.13+.
"""

from .currency import is_valid_twd_amount, parse_twd
from .dates import parse_taiwan_date
from .guards import is_valid_amount, is_valid_date, is_valid_number, is_valid_phone
from .numbers import parse_chinese_number
from .phone import (
    ParsedPhone,
    compare_phones,
    is_valid_taiwan_phone,
    normalize_phone,
    parse_taiwan_phone,
)

__all__ = [
    "ParsedPhone",
    # Validators
    "compare_phones",
    # Type guards
    "is_valid_amount",
    "is_valid_date",
    "is_valid_number",
    "is_valid_phone",
    "is_valid_taiwan_phone",
    "is_valid_twd_amount",
    "normalize_phone",
    # Parsing functions
    "parse_chinese_number",
    "parse_taiwan_date",
    "parse_taiwan_phone",
    "parse_twd",
]
