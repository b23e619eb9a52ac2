"""Taiwan telephone numbering rules shared by the phone formatter and parser.

Numbers are classified by an ordered table of rules evaluated top to
bottom. More specific rules sit above the generic ones they overlap:
toll-free ``0800`` precedes the generic ``08`` landline rule, and the
Taipei/Taichung/Kaohsiung rules precede the generic area rule.

Python 3.13+. Zero external dependencies.
"""

import re
from dataclasses import dataclass

from twlocale.constants import TAIWAN_COUNTRY_CODE
from twlocale.enums import PhoneType

__all__ = [
    "PHONE_RULES",
    "PhoneRule",
    "collapse_country_code",
    "match_phone_rule",
    "to_ascii_digits",
]

_COUNTRY_DIGITS = TAIWAN_COUNTRY_CODE.lstrip("+")

# Full-width digits and punctuation typed with a Chinese input method.
_FULLWIDTH = str.maketrans("０１２３４５６７８９＋－（）　", "0123456789+-() ")


@dataclass(frozen=True, slots=True)
class PhoneRule:
    """One row of the numbering table.

    Attributes:
        name: Short rule name for logs
        pattern: Full-match pattern over the national (0-prefixed) digits
        phone_type: Classification of matching numbers
        area_code_length: Leading digits reported as the area code
        groupings: Digit group sizes; the one whose total equals the
            number length is used
    """

    name: str
    pattern: re.Pattern[str]
    phone_type: PhoneType
    area_code_length: int
    groupings: tuple[tuple[int, ...], ...]

    def matches(self, digits: str) -> bool:
        """Check whether national-format digits belong to this rule."""
        return self.pattern.fullmatch(digits) is not None

    def group(self, digits: str) -> str:
        """Split matching digits into hyphen-separated groups.

        >>> PHONE_RULES[0].group("0912345678")
        '0912-345-678'
        """
        sizes = next(g for g in self.groupings if sum(g) == len(digits))
        parts: list[str] = []
        start = 0
        for size in sizes:
            parts.append(digits[start : start + size])
            start += size
        return "-".join(parts)

    def area_code(self, digits: str) -> str:
        """Leading digits that identify the area or carrier block."""
        return digits[: self.area_code_length]


PHONE_RULES: tuple[PhoneRule, ...] = (
    PhoneRule("mobile", re.compile(r"09[0-9]{8}"), PhoneType.MOBILE, 4, ((4, 3, 3),)),
    PhoneRule("toll_free", re.compile(r"0800[0-9]{6}"), PhoneType.TOLL_FREE, 4, ((4, 3, 3),)),
    PhoneRule("taipei", re.compile(r"02[0-9]{8}"), PhoneType.LANDLINE, 2, ((2, 4, 4),)),
    PhoneRule("taichung", re.compile(r"04[0-9]{8}"), PhoneType.LANDLINE, 2, ((2, 4, 4),)),
    PhoneRule("kaohsiung", re.compile(r"07[0-9]{7}"), PhoneType.LANDLINE, 2, ((2, 3, 4),)),
    PhoneRule(
        "other_area",
        re.compile(r"0[3-9][0-9]{7,8}"),
        PhoneType.LANDLINE,
        2,
        ((2, 3, 4), (2, 4, 4)),
    ),
)


def to_ascii_digits(value: str) -> str:
    """Fold full-width digits and phone punctuation to ASCII.

    >>> to_ascii_digits("０９１２－３４５６７８")
    '0912-345678'
    """
    return value.translate(_FULLWIDTH)


def collapse_country_code(digits: str) -> str:
    """Replace a leading ``+886`` or ``886`` with the trunk prefix ``0``.

    >>> collapse_country_code("+886912345678")
    '0912345678'
    >>> collapse_country_code("0912345678")
    '0912345678'
    """
    if digits.startswith(TAIWAN_COUNTRY_CODE):
        return "0" + digits[len(TAIWAN_COUNTRY_CODE) :]
    if digits.startswith(_COUNTRY_DIGITS):
        return "0" + digits[len(_COUNTRY_DIGITS) :]
    return digits


def match_phone_rule(digits: str) -> PhoneRule | None:
    """Return the first rule matching national-format digits, or None."""
    for rule in PHONE_RULES:
        if rule.matches(digits):
            return rule
    return None
