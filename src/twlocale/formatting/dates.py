"""Taiwan date and time formatting.

Calendar rendering goes through Babel with the zh_Hant_TW CLDR data
(星期二, 24-hour clock); the phrasing Taiwan sites use for relative
times, ranges and durations is built from the tables in
twlocale.constants.

Inputs may be ``date``, ``datetime`` or ISO 8601 strings. A string that is
not ISO 8601 is passed through unchanged by every display formatter here.

Python 3.13+. Uses Babel via LocaleContext.
"""

import logging
from collections.abc import Callable, Mapping
from dataclasses import dataclass
from datetime import date, datetime, time, timedelta

from twlocale.constants import (
    DURATION_UNDER_MINUTE,
    MONTHS,
    RELATIVE_TIME_UNITS,
    ROC_YEAR_OFFSET,
    TAIWAN_DATE_PATTERNS,
    WEEKDAYS,
)
from twlocale.core.arithmetic import round_half_up
from twlocale.core.errors import FormattingError
from twlocale.runtime.locale_context import LocaleContext

__all__ = [
    "DateInput",
    "RocDate",
    "format_date_range",
    "format_event_duration",
    "format_relative_time",
    "format_roc_date",
    "format_taiwan_date",
    "format_taiwan_time",
    "get_chinese_month",
    "get_chinese_weekday",
]

logger = logging.getLogger(__name__)

type DateInput = date | datetime | str

_DEFAULT_LEVEL = "medium"
_DEFAULT_WIDTH = "long"

_SECONDS_PER_MINUTE = 60
_SECONDS_PER_HOUR = 3600

# (phrase key, seconds per unit, largest rounded count the phrase covers).
# Evaluated top to bottom; anything beyond the last row is "yy".
_RELATIVE_STEPS: tuple[tuple[str, int, int], ...] = (
    ("s", 1, 44),
    ("m", 60, 1),
    ("mm", 60, 44),
    ("h", 3_600, 1),
    ("hh", 3_600, 21),
    ("d", 86_400, 1),
    ("dd", 86_400, 25),
    ("M", 2_629_746, 1),
    ("MM", 2_629_746, 10),
    ("y", 31_556_952, 1),
)
_YEAR_SECONDS = 31_556_952

_CALENDAR_DAY_WORDS: dict[int, str] = {0: "今天", -1: "昨天", 1: "明天"}


@dataclass(frozen=True, slots=True)
class RocDate:
    """A date in the Republic of China calendar (ROC year = Gregorian year - 1911).

    >>> RocDate.from_gregorian(date(2025, 1, 14))
    RocDate(roc_year=114, month=1, day=14)
    >>> str(RocDate(114, 1, 14))
    '民國114年1月14日'
    """

    roc_year: int
    month: int
    day: int

    @classmethod
    def from_gregorian(cls, value: date) -> "RocDate":
        """Convert a Gregorian date."""
        return cls(roc_year=value.year - ROC_YEAR_OFFSET, month=value.month, day=value.day)

    def to_gregorian(self) -> date:
        """Convert back to a Gregorian date.

        Raises:
            ValueError: If the month or day does not exist
        """
        return date(self.roc_year + ROC_YEAR_OFFSET, self.month, self.day)

    def __str__(self) -> str:
        return f"民國{self.roc_year}年{self.month}月{self.day}日"


def _to_datetime(value: DateInput) -> datetime | None:
    """Coerce input to datetime; None for strings that are not ISO 8601."""
    if isinstance(value, datetime):
        return value
    if isinstance(value, date):
        return datetime.combine(value, time())
    try:
        return datetime.fromisoformat(value)
    except ValueError:
        logger.debug("Not an ISO 8601 date string: %r", value)
        return None


def _same_clock(first: datetime, second: datetime) -> tuple[datetime, datetime]:
    """Give a naive datetime the zone of an aware partner so the two subtract."""
    if first.tzinfo is None and second.tzinfo is not None:
        return first.replace(tzinfo=second.tzinfo), second
    if second.tzinfo is None and first.tzinfo is not None:
        return first, second.replace(tzinfo=first.tzinfo)
    return first, second


def format_taiwan_date(value: DateInput, level: str = _DEFAULT_LEVEL) -> str:
    """Format a date at one of the Taiwan verbosity levels.

    Levels: short ``2025/01/14``, medium ``2025年01月14日``, long
    ``2025年01月14日 星期二``, time ``15:30``, datetime
    ``2025年01月14日 15:30``, monthDay ``01月14日``, yearMonth
    ``2025年01月``, weekday ``星期二``. An unknown level logs a warning
    and uses medium.

    Args:
        value: date, datetime or ISO 8601 string
        level: Verbosity level (default: medium)

    Returns:
        Formatted date; the input unchanged if it is not a readable date

    Examples:
        >>> format_taiwan_date(date(2025, 1, 14))
        '2025年01月14日'
        >>> format_taiwan_date("2025-01-14T15:30:00", "long")
        '2025年01月14日 星期二'
    """
    moment = _to_datetime(value)
    if moment is None:
        return str(value)

    pattern = TAIWAN_DATE_PATTERNS.get(level)
    if pattern is None:
        logger.warning("Unknown date level '%s', using %s", level, _DEFAULT_LEVEL)
        pattern = TAIWAN_DATE_PATTERNS[_DEFAULT_LEVEL]

    try:
        return LocaleContext.create().format_datetime(moment, pattern)
    except FormattingError as e:
        logger.warning("format_taiwan_date fell back to ISO format: %s", e)
        return e.fallback_value


def format_taiwan_time(value: DateInput) -> str:
    """24-hour ``HH:mm`` time."""
    return format_taiwan_date(value, "time")


def _names(table: Mapping[str, tuple[str, ...]], width: str) -> tuple[str, ...]:
    names = table.get(width)
    if names is None:
        logger.warning("Unknown name width '%s', using %s", width, _DEFAULT_WIDTH)
        return table[_DEFAULT_WIDTH]
    return names


def get_chinese_weekday(value: DateInput, width: str = _DEFAULT_WIDTH) -> str:
    """Weekday name: long ``星期二``, short ``週二`` or narrow ``二``.

    An unknown width logs a warning and uses long.
    """
    moment = _to_datetime(value)
    if moment is None:
        return str(value)
    # Tables are Sunday-first; Python weekdays are Monday-first.
    return _names(WEEKDAYS, width)[(moment.weekday() + 1) % 7]


def get_chinese_month(value: DateInput | int, width: str = _DEFAULT_WIDTH) -> str:
    """Month name from a date or a month number 1-12.

    A month number outside 1-12 is returned as text unchanged.

    >>> get_chinese_month(11)
    '十一月'
    >>> get_chinese_month(date(2025, 3, 1), "short")
    '3月'
    >>> get_chinese_month(13)
    '13'
    """
    if isinstance(value, int):
        if not 1 <= value <= 12:
            logger.debug("Month number out of range: %r", value)
            return str(value)
        return _names(MONTHS, width)[value - 1]
    moment = _to_datetime(value)
    if moment is None:
        return str(value)
    return _names(MONTHS, width)[moment.month - 1]


def format_relative_time(value: DateInput, base: DateInput | None = None) -> str:
    """Describe a moment relative to ``base`` (default: now).

    Same, previous and next calendar day are always 今天, 昨天 and 明天.
    Other distances are rounded to the largest sensible unit and suffixed
    with 前 (past) or 後 (future): 幾秒, 1分鐘, N分鐘, 1小時, N小時, 1天,
    N天, 1個月, N個月, 1年, N年.

    Args:
        value: The moment to describe
        base: Reference moment (default: now, in the value's timezone).
            A naive base next to an aware value is read on the value's clock

    Returns:
        Relative phrase; the input unchanged if it is not a readable date

    Examples:
        >>> base = datetime(2025, 1, 14, 12, 0)
        >>> format_relative_time(datetime(2025, 1, 13, 9, 0), base)
        '昨天'
        >>> format_relative_time(datetime(2025, 1, 9, 12, 0), base)
        '5天前'
        >>> format_relative_time(datetime(2025, 1, 14, 15, 0), base)
        '今天'
    """
    moment = _to_datetime(value)
    if moment is None:
        return str(value)
    reference = datetime.now(moment.tzinfo) if base is None else _to_datetime(base)
    if reference is None:
        return str(value)
    moment, reference = _same_clock(moment, reference)
    if moment.tzinfo is not None:
        # Calendar days are counted on the described moment's clock.
        reference = reference.astimezone(moment.tzinfo)

    day_offset = (moment.date() - reference.date()).days
    if day_offset in _CALENDAR_DAY_WORDS:
        return _CALENDAR_DAY_WORDS[day_offset]

    delta = moment - reference
    seconds = abs(delta.total_seconds())
    phrase = _distance_phrase(seconds)
    template = RELATIVE_TIME_UNITS["future" if delta > timedelta(0) else "past"]
    return template % phrase


def _distance_phrase(seconds: float) -> str:
    for key, unit_seconds, limit in _RELATIVE_STEPS:
        count = int(round_half_up(seconds / unit_seconds))
        if count <= limit:
            return _unit_phrase(key, count)
    return _unit_phrase("yy", int(round_half_up(seconds / _YEAR_SECONDS)))


def _unit_phrase(key: str, count: int) -> str:
    phrase = RELATIVE_TIME_UNITS[key]
    return phrase % count if "%d" in phrase else phrase


def _same_day(start: datetime, end: datetime) -> bool:
    return start.date() == end.date()


def _same_month(start: datetime, end: datetime) -> bool:
    return (start.year, start.month) == (end.year, end.month)


def _same_year(start: datetime, end: datetime) -> bool:
    return start.year == end.year


def _render_single_day(start: datetime, end: datetime) -> str:
    return format_taiwan_date(start, "medium")


def _render_within_month(start: datetime, end: datetime) -> str:
    return f"{start.year}年{start.month}月{start.day}日 - {end.day}日"


def _render_within_year(start: datetime, end: datetime) -> str:
    return f"{start.year}年{start.month}月{start.day}日 - {end.month}月{end.day}日"


def _render_full(start: datetime, end: datetime) -> str:
    return f"{format_taiwan_date(start, 'medium')} - {format_taiwan_date(end, 'medium')}"


# Most specific first; the first matching predicate picks the renderer.
_RANGE_COLLAPSE: tuple[
    tuple[Callable[[datetime, datetime], bool], Callable[[datetime, datetime], str]], ...
] = (
    (_same_day, _render_single_day),
    (_same_month, _render_within_month),
    (_same_year, _render_within_year),
)


def format_date_range(start: DateInput, end: DateInput) -> str:
    """Format a date range as the shortest unambiguous phrase.

    Examples:
        >>> format_date_range(date(2025, 3, 1), date(2025, 3, 1))
        '2025年03月01日'
        >>> format_date_range(date(2025, 3, 1), date(2025, 3, 15))
        '2025年3月1日 - 15日'
        >>> format_date_range(date(2025, 3, 1), date(2025, 6, 15))
        '2025年3月1日 - 6月15日'
        >>> format_date_range(date(2024, 12, 30), date(2025, 1, 2))
        '2024年12月30日 - 2025年01月02日'
    """
    start_moment = _to_datetime(start)
    end_moment = _to_datetime(end)
    if start_moment is None or end_moment is None:
        return f"{start} - {end}"

    for predicate, render in _RANGE_COLLAPSE:
        if predicate(start_moment, end_moment):
            return render(start_moment, end_moment)
    return _render_full(start_moment, end_moment)


def format_event_duration(start: DateInput, end: DateInput) -> str:
    """Length of an event in days, hours and minutes.

    Minutes are only shown for events shorter than a day. Anything under
    a minute, including an end before the start, is ``少於1分鐘``.
    When only one end carries a timezone, the other is read on that clock.

    Examples:
        >>> format_event_duration(datetime(2025, 1, 14, 19, 0), datetime(2025, 1, 14, 21, 30))
        '2小時30分鐘'
        >>> format_event_duration(datetime(2025, 1, 14, 9, 0), datetime(2025, 1, 16, 12, 45))
        '2天3小時'
    """
    start_moment = _to_datetime(start)
    end_moment = _to_datetime(end)
    if start_moment is None or end_moment is None:
        return f"{start} - {end}"

    start_moment, end_moment = _same_clock(start_moment, end_moment)
    delta = end_moment - start_moment
    if delta < timedelta(minutes=1):
        return DURATION_UNDER_MINUTE

    hours, remainder = divmod(delta.seconds, _SECONDS_PER_HOUR)
    minutes = remainder // _SECONDS_PER_MINUTE

    parts: list[str] = []
    if delta.days:
        parts.append(f"{delta.days}天")
    if hours:
        parts.append(f"{hours}小時")
    if minutes and not delta.days:
        parts.append(f"{minutes}分鐘")
    return "".join(parts) or DURATION_UNDER_MINUTE


def format_roc_date(value: DateInput) -> str:
    """Format a date in the ROC calendar.

    >>> format_roc_date(date(2025, 1, 14))
    '民國114年1月14日'
    """
    moment = _to_datetime(value)
    if moment is None:
        return str(value)
    return str(RocDate.from_gregorian(moment.date()))
