"""Chinese number parsing.

- parse_chinese_number() returns tuple[Decimal | None, tuple[TaiwanParseError, ...]]
- Functions NEVER raise exceptions - errors are returned in tuple
- ``None`` means nothing could be read; a parsed zero is ``Decimal(0)``

Accepts Arabic digits mixed with unit glyphs (``3千``, ``1.2萬``,
``3億5000萬``), everyday numerals (``兩千三百``, ``一萬零五``) and the
formal numerals written on checks (``壹仟貳佰``).

Parsing works in sections. 億 and 萬 split the text into four-digit
sections, largest first; inside each section 千, 百 and 十 are applied in
descending order. A unit without a number in front counts once
(``十五`` is 15), so composites such as ``三千五百萬`` read as
3500 × 10,000.

Digits are read by Babel with strict grouping, so a misplaced separator
(``1,50``) is an error rather than a different number.

Python 3.13+. Uses Babel via LocaleContext.
"""

import logging
import re
from decimal import Decimal

from babel.numbers import NumberFormatError, parse_decimal

from twlocale.diagnostics import TaiwanParseError
from twlocale.diagnostics.templates import ErrorTemplate
from twlocale.runtime.locale_context import LocaleContext

__all__ = ["parse_chinese_number", "read_decimal"]

logger = logging.getLogger(__name__)

_WHITESPACE = re.compile(r"\s")

# Shapes handed to Babel: digits, group separators and one decimal point.
_UNSIGNED_NUMBER = re.compile(r"\d[\d,]*(?:\.\d+)?", re.ASCII)
_SIGNED_NUMBER = re.compile(r"[-+]?(?:\d[\d,]*(?:\.\d*)?|\.\d+)", re.ASCII)

# Everyday, formal and colloquial glyphs mapped onto Arabic digits and the
# everyday unit glyphs.
_GLYPHS = str.maketrans({
    "零": "0", "〇": "0",
    "一": "1", "壹": "1",
    "二": "2", "貳": "2", "兩": "2",
    "三": "3", "參": "3",
    "四": "4", "肆": "4",
    "五": "5", "伍": "5",
    "六": "6", "陸": "6",
    "七": "7", "柒": "7",
    "八": "8", "捌": "8",
    "九": "9", "玖": "9",
    "拾": "十", "佰": "百", "仟": "千",
})  # fmt: skip

_SECTION_UNITS: tuple[tuple[str, Decimal], ...] = (
    ("億", Decimal(10) ** 8),
    ("萬", Decimal(10) ** 4),
)

_DIGIT_UNITS: tuple[tuple[str, Decimal], ...] = (
    ("千", Decimal(1000)),
    ("百", Decimal(100)),
    ("十", Decimal(10)),
)


def read_decimal(text: str, *, signed: bool = False) -> Decimal:
    """Read a plain Arabic number with zh_Hant_TW separators.

    Grouping is checked by Babel in strict mode, so ``1,500`` reads as 1500
    while ``1,50`` and ``1,2,3`` are rejected.

    Args:
        text: Digits with optional ``,`` grouping and ``.`` decimal point
        signed: Allow a leading ``-`` or ``+``

    Returns:
        The number as a Decimal

    Raises:
        NumberFormatError: If the text is not a well-grouped plain number

    >>> read_decimal("1,234.5")
    Decimal('1234.5')
    """
    shape = _SIGNED_NUMBER if signed else _UNSIGNED_NUMBER
    if not shape.fullmatch(text):
        msg = f"{text!r} is not a plain decimal number"
        raise NumberFormatError(msg)
    return parse_decimal(text, locale=LocaleContext.create().babel_locale, strict=True)


def _read_plain(text: str) -> Decimal | None:
    try:
        return read_decimal(text)
    except NumberFormatError as e:
        logger.debug("Plain number rejected: %s", e)
        return None


def _read(text: str, units: tuple[tuple[str, Decimal], ...], read_rest: bool) -> Decimal | None:
    """Accumulate ``coefficient × unit`` for each unit found, in table order.

    With ``read_rest`` the text in front of each unit is itself read with
    the digit units; otherwise it must be a plain number. The text left
    after the last unit must be a plain number or empty.
    """
    total = Decimal(0)
    rest = text
    for glyph, multiplier in units:
        head, found, tail = rest.partition(glyph)
        if not found:
            continue
        if not head:
            coefficient: Decimal | None = Decimal(1)
        elif read_rest:
            coefficient = _read(head, _DIGIT_UNITS, read_rest=False)
        else:
            coefficient = _read_plain(head)
        if coefficient is None:
            return None
        total += coefficient * multiplier
        rest = tail

    if not rest:
        return total
    if read_rest:
        remainder = _read(rest, _DIGIT_UNITS, read_rest=False)
        return None if remainder is None else total + remainder
    plain = _read_plain(rest)
    return None if plain is None else total + plain


def parse_chinese_number(value: str) -> tuple[Decimal | None, tuple[TaiwanParseError, ...]]:
    """Parse a number written with Chinese numerals or units.

    Whitespace is ignored. Thousands separators must sit every three digits.

    Args:
        value: Text such as ``兩千三百``, ``1.2萬`` or ``3,000``

    Returns:
        Tuple of (result, errors):
        - result: Parsed Decimal, or None if the text is not a number
        - errors: Tuple of TaiwanParseError (empty tuple on success)

    Examples:
        >>> parse_chinese_number("兩千三百")
        (Decimal('2300'), ())
        >>> parse_chinese_number("1.2萬")
        (Decimal('12000.0'), ())
        >>> parse_chinese_number("十五")
        (Decimal('15'), ())
        >>> result, errors = parse_chinese_number("")
        >>> result is None, errors[0].parse_type
        (True, 'number')
    """
    cleaned = _WHITESPACE.sub("", value or "")
    if not cleaned:
        diagnostic = ErrorTemplate.parse_input_empty("number")
        return (None, (TaiwanParseError(diagnostic, input_value=value, parse_type="number"),))

    result = _read(cleaned.translate(_GLYPHS), _SECTION_UNITS, read_rest=True)
    if result is None:
        logger.debug("parse_chinese_number rejected %r", value)
        diagnostic = ErrorTemplate.parse_number_failed(value, "unrecognized characters")
        return (None, (TaiwanParseError(diagnostic, input_value=value, parse_type="number"),))
    return (result, ())
