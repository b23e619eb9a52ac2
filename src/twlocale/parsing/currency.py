"""NT dollar amount parsing.

- parse_twd() returns tuple[Decimal | None, tuple[TaiwanParseError, ...]]
- Functions NEVER raise exceptions - errors are returned in tuple
- A failed parse is ``None``, never ``Decimal(0)``

Accepts what people type into price fields: ``NT$ 1,500``, ``1500元``,
``新台幣 2,000``, ``1.2萬``, ``3億``.

Python 3.13+. Uses Babel via LocaleContext.
"""

import logging
import re
from decimal import Decimal

from babel.numbers import NumberFormatError

from twlocale.constants import TWD_CODE, TWD_NAMES
from twlocale.diagnostics import Diagnostic, TaiwanParseError
from twlocale.diagnostics.templates import ErrorTemplate
from twlocale.enums import CompactUnit

from .numbers import read_decimal

__all__ = ["is_valid_twd_amount", "parse_twd"]

logger = logging.getLogger(__name__)

# Currency markers removed before reading the number. "NT" may be typed
# without the dollar sign.
_CURRENCY_MARKERS = re.compile(
    r"(?:{})\s*".format("|".join((r"NT\$?", re.escape(TWD_CODE), *TWD_NAMES, "元"))),
    re.IGNORECASE,
)

# Checked top to bottom so "1.2億" is never read as "1.2" followed by a stray unit.
_LARGE_UNIT_PATTERNS: tuple[tuple[re.Pattern[str], CompactUnit], ...] = tuple(
    (re.compile(rf"(\d[\d,]*(?:\.\d+)?){unit.glyph}", re.ASCII), unit)
    for unit in (
        CompactUnit.YI,
        CompactUnit.QIANWAN,
        CompactUnit.BAIWAN,
        CompactUnit.SHIWAN,
        CompactUnit.WAN,
    )
)


def parse_twd(value: str) -> tuple[Decimal | None, tuple[TaiwanParseError, ...]]:
    """Parse an NT dollar amount.

    Currency symbols, codes and the words 新台幣/新臺幣 and 元 are removed
    first. If a large-number unit is present, the number directly in front
    of the first matching unit (億 before 千萬 before 百萬 before 十萬
    before 萬) is multiplied by it. Otherwise the remaining text must be a
    plain decimal number. Digits are read by Babel with strict grouping,
    so ``1,50`` is rejected rather than read as 150.

    Args:
        value: User-entered amount

    Returns:
        Tuple of (result, errors):
        - result: Parsed Decimal, or None if parsing failed
        - errors: Tuple of TaiwanParseError (empty tuple on success)

    Examples:
        >>> parse_twd("NT$ 1,500")
        (Decimal('1500'), ())
        >>> parse_twd("1.2萬")
        (Decimal('12000.0'), ())
        >>> result, errors = parse_twd("not a number")
        >>> result is None, len(errors)
        (True, 1)
    """
    if not value or not value.strip():
        return (None, (_error(ErrorTemplate.parse_input_empty("amount"), value),))

    cleaned = _CURRENCY_MARKERS.sub("", value).strip()
    if not cleaned:
        reason = "no digits after removing currency markers"
        return (None, (_error(ErrorTemplate.parse_amount_failed(value, reason), value),))

    try:
        for pattern, unit in _LARGE_UNIT_PATTERNS:
            match = pattern.search(cleaned)
            if match:
                return (read_decimal(match.group(1)) * unit.multiplier, ())
        return (read_decimal(cleaned, signed=True), ())
    except NumberFormatError as e:
        logger.debug("parse_twd rejected %r: %s", value, e)
        return (None, (_error(ErrorTemplate.parse_amount_failed(value, str(e)), value),))


def is_valid_twd_amount(value: str) -> bool:
    """Check that text parses to a non-negative amount.

    >>> is_valid_twd_amount("NT$ 500")
    True
    >>> is_valid_twd_amount("-500")
    False
    """
    result, _ = parse_twd(value)
    return result is not None and result >= 0


def _error(diagnostic: Diagnostic, value: str) -> TaiwanParseError:
    return TaiwanParseError(diagnostic, input_value=value, parse_type="amount")
