"""Taiwan date parsing.

- parse_taiwan_date() returns tuple[date | None, tuple[TaiwanParseError, ...]]
- Functions NEVER raise exceptions - errors are returned in tuple

Supported shapes, tried in order:
    YYYY/MM/DD          2025/1/14, 2025/01/14
    YYYY年MM月DD日       2025年1月14日
    民國YYY年MM月DD日     民國114年1月14日 (ROC year + 1911)

A string that has one of these shapes but names a day that does not
exist (2025/02/30) is rejected with PARSE_DATE_INVALID rather than rolled
over into the next month.

Python 3.13+. Zero external dependencies.
"""

import logging
import re
from datetime import date

from twlocale.constants import ROC_YEAR_OFFSET
from twlocale.diagnostics import TaiwanParseError
from twlocale.diagnostics.templates import ErrorTemplate

__all__ = ["parse_taiwan_date"]

logger = logging.getLogger(__name__)

# (pattern, year offset) evaluated top to bottom.
_DATE_SHAPES: tuple[tuple[re.Pattern[str], int], ...] = (
    (re.compile(r"(\d{4})/(\d{1,2})/(\d{1,2})"), 0),
    (re.compile(r"(\d{4})年(\d{1,2})月(\d{1,2})日"), 0),
    (re.compile(r"民國(\d{1,3})年(\d{1,2})月(\d{1,2})日"), ROC_YEAR_OFFSET),
)


def parse_taiwan_date(value: str) -> tuple[date | None, tuple[TaiwanParseError, ...]]:
    """Parse a date typed in one of the Taiwan conventions.

    Args:
        value: Date text; surrounding whitespace is ignored

    Returns:
        Tuple of (result, errors):
        - result: Parsed date, or None if parsing failed
        - errors: Tuple of TaiwanParseError (empty tuple on success)

    Examples:
        >>> parse_taiwan_date("2025/01/14")
        (datetime.date(2025, 1, 14), ())
        >>> parse_taiwan_date("民國114年1月14日")
        (datetime.date(2025, 1, 14), ())
        >>> result, errors = parse_taiwan_date("garbage")
        >>> result is None, len(errors)
        (True, 1)
    """
    text = (value or "").strip()
    if not text:
        diagnostic = ErrorTemplate.parse_input_empty("date")
        return (None, (TaiwanParseError(diagnostic, input_value=value, parse_type="date"),))

    for pattern, year_offset in _DATE_SHAPES:
        match = pattern.fullmatch(text)
        if match is None:
            continue
        year, month, day = (int(group) for group in match.groups())
        try:
            return (date(year + year_offset, month, day), ())
        except ValueError as e:
            logger.debug("parse_taiwan_date: %r matched but is not a real date: %s", value, e)
            diagnostic = ErrorTemplate.parse_date_invalid(value, str(e))
            return (None, (TaiwanParseError(diagnostic, input_value=value, parse_type="date"),))

    logger.debug("parse_taiwan_date: no shape matched %r", value)
    diagnostic = ErrorTemplate.parse_date_failed(value)
    return (None, (TaiwanParseError(diagnostic, input_value=value, parse_type="date"),))
