"""General number formatting with Taiwan conventions.

Compact 萬/億 units, Chinese numerals for small integers, ordinals,
percentages, ratios, file sizes, distances and scores.

Every display helper here is lenient except to_chinese_numeral, which is
a strict converter and raises NumeralRangeError outside 0-9999.

Python 3.13+. Uses Babel via LocaleContext.
"""

import logging
from decimal import Decimal

from twlocale.constants import (
    CHINESE_DIGITS,
    CHINESE_POSITION_UNITS,
    COMMON_FRACTIONS,
    FILE_SIZE_UNITS,
)
from twlocale.core.arithmetic import Numeric, round_half_up, strip_trailing_zeros, to_decimal
from twlocale.core.errors import FormattingError, NumeralRangeError
from twlocale.diagnostics.templates import ErrorTemplate
from twlocale.runtime.locale_context import LocaleContext

__all__ = [
    "format_chinese_number",
    "format_count",
    "format_distance",
    "format_file_size",
    "format_ordinal",
    "format_percentage",
    "format_ratio",
    "format_score",
    "generate_chinese_sequence",
    "to_chinese_numeral",
]

logger = logging.getLogger(__name__)

# Checked in descending order; the first boundary the value reaches wins.
_UNIT_BOUNDARIES: tuple[tuple[Decimal, str], ...] = (
    (Decimal(10) ** 8, "億"),
    (Decimal(10) ** 4, "萬"),
    (Decimal(10) ** 3, "千"),
)

NUMERAL_MIN = 0
NUMERAL_MAX = 9999

_FILE_SIZE_STEP = Decimal(1024)
_METERS_PER_KILOMETER = Decimal(1000)
_RATIO_TOLERANCE = Decimal("0.01")


def format_chinese_number(
    value: Numeric,
    *,
    decimals: int = 0,
    use_chinese_units: bool = False,
    compact: bool = False,
) -> str:
    """Format a number with grouping or with 億/萬/千 units.

    Args:
        value: Number to format
        decimals: Fraction digits. With units, the coefficient is rounded
            to this many places (one when zero) and trailing zeros dropped.
            Without units, exactly this many digits are shown.
        use_chinese_units: Render 1000 and above with 千/萬/億
        compact: Same as ``use_chinese_units``

    Returns:
        Formatted number

    Examples:
        >>> format_chinese_number(1234567)
        '1,234,567'
        >>> format_chinese_number(15000, use_chinese_units=True)
        '1.5萬'
        >>> format_chinese_number(3.14159, decimals=2)
        '3.14'
    """
    number = to_decimal(value)
    if (use_chinese_units or compact) and number.is_finite():
        for boundary, glyph in _UNIT_BOUNDARIES:
            if number >= boundary:
                coefficient = round_half_up(number / boundary, decimals or 1)
                return f"{strip_trailing_zeros(coefficient)}{glyph}"

    ctx = LocaleContext.create()
    try:
        return ctx.format_number(
            number,
            minimum_fraction_digits=decimals,
            maximum_fraction_digits=decimals,
        )
    except FormattingError as e:
        logger.warning("format_chinese_number fell back to raw value: %s", e)
        return e.fallback_value


def to_chinese_numeral(value: int) -> str:
    """Convert an integer from 0 to 9999 to everyday Chinese numerals.

    A run of zeros between non-zero digits is written as a single 零 and
    trailing zeros are not written. Numbers from 10 to 19 start with 十
    rather than 一十.

    Args:
        value: Integer in [0, 9999]

    Returns:
        Chinese numeral string

    Raises:
        NumeralRangeError: If value is not an int or lies outside [0, 9999]

    Examples:
        >>> to_chinese_numeral(11)
        '十一'
        >>> to_chinese_numeral(1001)
        '一千零一'
        >>> to_chinese_numeral(2300)
        '二千三百'
    """
    if isinstance(value, bool) or not isinstance(value, int):
        raise NumeralRangeError(ErrorTemplate.numeral_not_integer(value))
    if not NUMERAL_MIN <= value <= NUMERAL_MAX:
        raise NumeralRangeError(ErrorTemplate.numeral_out_of_range(value, NUMERAL_MIN, NUMERAL_MAX))
    if value == 0:
        return CHINESE_DIGITS[0]

    digits = str(value)
    parts: list[str] = []
    pending_zero = False
    for index, char in enumerate(digits):
        position = len(digits) - 1 - index
        digit = int(char)
        if digit == 0:
            pending_zero = True
            continue
        if pending_zero:
            parts.append(CHINESE_DIGITS[0])
            pending_zero = False
        if index == 0 and position == 1 and digit == 1:
            parts.append(CHINESE_POSITION_UNITS[1])
        else:
            parts.append(CHINESE_DIGITS[digit] + CHINESE_POSITION_UNITS[position])
    return "".join(parts)


def format_ordinal(value: int) -> str:
    """``第`` followed by the number, e.g. ``第3``."""
    return f"第{value}"


def generate_chinese_sequence(start: int, end: int) -> list[str]:
    """Ordinals from start to end inclusive.

    >>> generate_chinese_sequence(1, 3)
    ['第1', '第2', '第3']
    """
    return [format_ordinal(n) for n in range(start, end + 1)]


def format_percentage(value: Numeric, is_ratio: bool = True, decimals: int = 0) -> str:
    """Format a percentage with a fixed number of decimals.

    >>> format_percentage(0.256)
    '26%'
    >>> format_percentage(45.5, is_ratio=False, decimals=1)
    '45.5%'
    """
    percentage = to_decimal(value) * 100 if is_ratio else to_decimal(value)
    return f"{round_half_up(percentage, decimals):f}%"


def format_ratio(numerator: Numeric, denominator: Numeric) -> str:
    """Describe a ratio in words when it is a common fraction.

    Within 0.01 of a half, a quarter, three quarters, a third or two
    thirds the Chinese word is used; otherwise ``n/d``. A zero
    denominator renders as ``—``.

    >>> format_ratio(1, 2)
    '一半'
    >>> format_ratio(3, 7)
    '3/7'
    """
    denominator_value = to_decimal(denominator)
    if denominator_value == 0:
        return "—"
    ratio = to_decimal(numerator) / denominator_value
    for fraction, label in COMMON_FRACTIONS:
        if abs(ratio - fraction) < _RATIO_TOLERANCE:
            return label
    return f"{numerator}/{denominator}"


def format_count(value: Numeric, unit: str) -> str:
    """Grouped count followed by its unit, e.g. ``1,200 人``."""
    return f"{format_chinese_number(value)} {unit}"


def format_file_size(size_bytes: Numeric) -> str:
    """Format a byte count with binary units.

    Bytes are shown as an integer; KB and above carry one decimal.

    >>> format_file_size(512)
    '512 B'
    >>> format_file_size(1536)
    '1.5 KB'
    """
    size = to_decimal(size_bytes)
    unit_index = 0
    while size >= _FILE_SIZE_STEP and unit_index < len(FILE_SIZE_UNITS) - 1:
        size /= _FILE_SIZE_STEP
        unit_index += 1
    places = 0 if unit_index == 0 else 1
    return f"{round_half_up(size, places):f} {FILE_SIZE_UNITS[unit_index]}"


def format_distance(meters: Numeric) -> str:
    """Format a distance in 公尺 below one kilometer, 公里 above.

    >>> format_distance(850)
    '850 公尺'
    >>> format_distance(2500)
    '2.5 公里'
    >>> format_distance(3000)
    '3 公里'
    """
    value = to_decimal(meters)
    if value < _METERS_PER_KILOMETER:
        return f"{round_half_up(value):f} 公尺"
    kilometers = round_half_up(value / _METERS_PER_KILOMETER, 1)
    return f"{strip_trailing_zeros(kilometers)} 公里"


def format_score(score: Numeric, max_score: Numeric = 5, show_max: bool = True) -> str:
    """Format a rating with one decimal.

    >>> format_score(4.25)
    '4.3/5'
    """
    formatted = f"{round_half_up(score, 1):f}"
    return f"{formatted}/{max_score}" if show_max else formatted
