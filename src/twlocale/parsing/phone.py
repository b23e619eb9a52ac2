"""Taiwan telephone number validation and parsing.

- parse_taiwan_phone() returns tuple[ParsedPhone | None, tuple[TaiwanParseError, ...]]
- Functions NEVER raise exceptions - errors are returned in tuple

Validation is strict: a number must match one rule of the numbering
table exactly. The display formatter in twlocale.formatting.phone is
lenient and passes unmatched input through instead.

Python 3.13+. Zero external dependencies.
"""

import logging
import re
from dataclasses import dataclass

from twlocale.constants import TAIWAN_COUNTRY_CODE
from twlocale.core.phone_rules import (
    PhoneRule,
    collapse_country_code,
    match_phone_rule,
    to_ascii_digits,
)
from twlocale.diagnostics import TaiwanParseError
from twlocale.diagnostics.templates import ErrorTemplate
from twlocale.enums import PhoneType

__all__ = [
    "ParsedPhone",
    "compare_phones",
    "is_valid_taiwan_phone",
    "normalize_phone",
    "parse_taiwan_phone",
]

logger = logging.getLogger(__name__)

# Separators people type between digit groups.
_SEPARATORS = re.compile(r"[\s\-()]")
_NON_DIGITS = re.compile(r"\D", re.ASCII)


@dataclass(frozen=True, slots=True)
class ParsedPhone:
    """A validated Taiwan phone number.

    Attributes:
        phone_type: mobile, landline or tollFree
        area_code: ``09XX`` for mobile, ``0800`` for toll-free, two digits
            for landlines
        number: National digits with the leading ``0``
        formatted: Grouped national form, e.g. ``0912-345-678``
        international: ``+886-`` form without the trunk ``0``
    """

    phone_type: PhoneType
    area_code: str
    number: str
    formatted: str
    international: str


def _validated_rule(value: str) -> tuple[str, PhoneRule | None]:
    digits = collapse_country_code(_SEPARATORS.sub("", to_ascii_digits(value)))
    return digits, match_phone_rule(digits)


def is_valid_taiwan_phone(value: str) -> bool:
    """Check that text is a Taiwan mobile, landline or toll-free number.

    Spaces, parentheses and hyphens are ignored, and an international
    ``+886``/``886`` prefix stands for the trunk ``0``. Full-width digits
    are read as ASCII digits. Any other character makes the number invalid.

    Examples:
        >>> is_valid_taiwan_phone("0912-345-678")
        True
        >>> is_valid_taiwan_phone("(02) 2345-6789")
        True
        >>> is_valid_taiwan_phone("12345")
        False
    """
    if not value:
        return False
    _, rule = _validated_rule(value)
    return rule is not None


def parse_taiwan_phone(value: str) -> tuple[ParsedPhone | None, tuple[TaiwanParseError, ...]]:
    """Parse and classify a Taiwan phone number.

    Args:
        value: User-entered phone number

    Returns:
        Tuple of (result, errors):
        - result: ParsedPhone, or None if the number is not valid
        - errors: Tuple of TaiwanParseError (empty tuple on success)

    Examples:
        >>> phone, errors = parse_taiwan_phone("+886 912 345 678")
        >>> phone.phone_type, phone.area_code, phone.international
        (<PhoneType.MOBILE: 'mobile'>, '0912', '+886-912-345-678')
    """
    if not value or not value.strip():
        diagnostic = ErrorTemplate.parse_input_empty("phone")
        return (None, (TaiwanParseError(diagnostic, input_value=value, parse_type="phone"),))

    digits, rule = _validated_rule(value)
    if rule is None:
        logger.debug("parse_taiwan_phone rejected %r", value)
        diagnostic = ErrorTemplate.parse_phone_failed(value)
        return (None, (TaiwanParseError(diagnostic, input_value=value, parse_type="phone"),))

    formatted = rule.group(digits)
    logger.debug("parse_taiwan_phone matched rule %s for %r", rule.name, value)
    return (
        ParsedPhone(
            phone_type=rule.phone_type,
            area_code=rule.area_code(digits),
            number=digits,
            formatted=formatted,
            international=f"{TAIWAN_COUNTRY_CODE}-{formatted[1:]}",
        ),
        (),
    )


def normalize_phone(value: str) -> str:
    """Reduce a phone number to national digits for storage and comparison.

    Every non-digit is removed and a leading ``886`` becomes ``0``.
    Applying it twice gives the same result as applying it once.

    >>> normalize_phone("+886 912-345-678")
    '0912345678'
    """
    if not value:
        return ""
    return collapse_country_code(_NON_DIGITS.sub("", to_ascii_digits(value)))


def compare_phones(first: str, second: str) -> bool:
    """Check whether two inputs denote the same number.

    >>> compare_phones("0912-345-678", "+886 912 345 678")
    True
    """
    return normalize_phone(first) == normalize_phone(second)
