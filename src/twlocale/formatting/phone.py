"""Taiwan telephone number display helpers.

format_taiwan_phone is best-effort: input that matches no numbering rule
comes back unchanged so a half-typed number is never rewritten under the
user's cursor. The lookups below always return a printable label.

Python 3.13+. Zero external dependencies.
"""

import logging
import re
from dataclasses import dataclass

from twlocale.constants import (
    AREA_FALLBACK_NAME,
    AREA_NAMES,
    PHONE_INPUT_MASKS,
    PHONE_TYPE_FALLBACK_LABEL,
    PHONE_TYPE_LABELS,
    TAIWAN_COUNTRY_CODE,
)
from twlocale.core.phone_rules import collapse_country_code, match_phone_rule, to_ascii_digits
from twlocale.parsing.phone import parse_taiwan_phone

__all__ = [
    "PhoneExample",
    "format_taiwan_phone",
    "get_area_name",
    "get_example_phones",
    "get_phone_input_mask",
    "get_phone_type_label",
]

logger = logging.getLogger(__name__)

# Everything except digits and the "+" of an international prefix.
_NON_DIALABLE = re.compile(r"[^0-9+]")


@dataclass(frozen=True, slots=True)
class PhoneExample:
    """Sample number shown as a form placeholder."""

    label: str
    example: str
    formatted: str


def format_taiwan_phone(value: str, international: bool = False) -> str:
    """Group a Taiwan phone number with hyphens.

    Args:
        value: Phone number in any common spelling
        international: Render as ``+886-`` without the trunk ``0``

    Returns:
        Grouped number; the input unchanged if no rule matches; ``""``
        for empty input

    Examples:
        >>> format_taiwan_phone("0912345678")
        '0912-345-678'
        >>> format_taiwan_phone("+886223456789")
        '02-2345-6789'
        >>> format_taiwan_phone("0912345678", international=True)
        '+886-912-345-678'
        >>> format_taiwan_phone("12345")
        '12345'
    """
    if not value:
        return ""

    digits = collapse_country_code(_NON_DIALABLE.sub("", to_ascii_digits(value)))
    rule = match_phone_rule(digits)
    if rule is None:
        logger.debug("format_taiwan_phone left %r unformatted", value)
        return value

    formatted = rule.group(digits)
    return f"{TAIWAN_COUNTRY_CODE}-{formatted[1:]}" if international else formatted


def get_phone_type_label(value: str) -> str:
    """Chinese label for the kind of number: 手機, 市話 or 免費電話.

    Invalid numbers get ``未知``.
    """
    phone, _ = parse_taiwan_phone(value)
    if phone is None:
        return PHONE_TYPE_FALLBACK_LABEL
    return PHONE_TYPE_LABELS.get(phone.phone_type, PHONE_TYPE_FALLBACK_LABEL)


def get_area_name(area_code: str) -> str:
    """Region served by an area code, with or without the leading ``0``.

    >>> get_area_name("2")
    '台北'
    >>> get_area_name("0800")
    '免費電話'
    >>> get_area_name("99")
    '未知地區'
    """
    code = area_code if area_code.startswith("0") else "0" + area_code
    return AREA_NAMES.get(code, AREA_FALLBACK_NAME)


def get_phone_input_mask(kind: str = "any") -> str:
    """Input mask for a phone field: ``mobile``, ``landline`` or ``any``."""
    return PHONE_INPUT_MASKS.get(kind, PHONE_INPUT_MASKS["any"])


def get_example_phones() -> tuple[PhoneExample, ...]:
    """Placeholder numbers for each common kind of phone."""
    return tuple(
        PhoneExample(label=label, example=example, formatted=format_taiwan_phone(example))
        for label, example in (
            ("手機", "0912345678"),
            ("台北市話", "0223456789"),
            ("免費電話", "0800123456"),
        )
    )
