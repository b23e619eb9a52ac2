"""Cached Babel locale handle shared by every twlocale formatter.

All CLDR-backed output (digit grouping, calendar patterns, weekday names)
goes through one LocaleContext per locale. Instances are frozen and kept
in a small LRU cache, so formatting never touches Python's process-wide
``locale`` module.

Rounding is done here, half-up, before Babel quantizes with its own
half-even rule; Babel then only lays out the already rounded digits.

Python 3.13+. Uses Babel for i18n.
"""

import logging
from collections import OrderedDict
from dataclasses import dataclass
from datetime import date, datetime, time
from decimal import InvalidOperation
from functools import cache
from threading import RLock
from typing import ClassVar

from babel import Locale, UnknownLocaleError
from babel import dates as babel_dates
from babel import numbers as babel_numbers

from twlocale.constants import DEFAULT_LOCALE, MAX_LOCALE_CACHE_SIZE
from twlocale.core.arithmetic import Numeric, round_half_up
from twlocale.core.errors import FormattingError
from twlocale.diagnostics.templates import ErrorTemplate
from twlocale.locale_utils import normalize_locale

__all__ = ["LocaleContext"]

logger = logging.getLogger(__name__)


@cache
def _decimal_pattern(min_digits: int, max_digits: int, grouping: bool) -> str:
    """CLDR decimal pattern such as ``#,##0.00##``."""
    integer = "#,##0" if grouping else "0"
    if max_digits == 0:
        return integer
    return f"{integer}.{'0' * min_digits}{'#' * (max_digits - min_digits)}"


def _resolve_locale(cache_key: str, requested: str) -> tuple[Locale, bool]:
    """Parse a POSIX code; unknown or malformed codes resolve to the default."""
    try:
        return Locale.parse(cache_key), False
    except (UnknownLocaleError, ValueError) as e:
        logger.warning(
            "Locale '%s' rejected (%s). Falling back to %s", requested, e, DEFAULT_LOCALE
        )
        return Locale.parse(DEFAULT_LOCALE), True


@dataclass(frozen=True, slots=True)
class LocaleContext:
    """Frozen pairing of a requested locale code with its Babel Locale.

    Obtain instances through ``LocaleContext.create()``; it validates the
    code and returns the cached instance when one exists.

    Attributes:
        locale_code: The code as the caller passed it
        babel_locale: Resolved Babel Locale (the default when is_fallback)
        is_fallback: True when the requested code could not be resolved

    Examples:
        >>> ctx = LocaleContext.create()
        >>> ctx.format_number(1234567)
        '1,234,567'
        >>> LocaleContext.create("xx-YY").is_fallback
        True
    """

    _instances: ClassVar[OrderedDict[str, "LocaleContext"]] = OrderedDict()
    _lock: ClassVar[RLock] = RLock()

    locale_code: str
    babel_locale: Locale
    is_fallback: bool = False

    @classmethod
    def clear_cache(cls) -> None:
        """Drop every cached instance."""
        with cls._lock:
            cls._instances.clear()

    @classmethod
    def cache_size(cls) -> int:
        """Number of cached instances."""
        with cls._lock:
            return len(cls._instances)

    @classmethod
    def cache_info(cls) -> dict[str, int | tuple[str, ...]]:
        """Snapshot of the cache: size, bound and keys, oldest first.

        >>> LocaleContext.clear_cache()
        >>> _ = LocaleContext.create("zh-TW")
        >>> LocaleContext.cache_info()
        {'size': 1, 'max_size': 16, 'locales': ('zh_TW',)}
        """
        with cls._lock:
            return {
                "size": len(cls._instances),
                "max_size": MAX_LOCALE_CACHE_SIZE,
                "locales": tuple(cls._instances),
            }

    @classmethod
    def create(cls, locale_code: str = DEFAULT_LOCALE) -> "LocaleContext":
        """Return the context for a locale, building and caching it on first use.

        Never raises. A code Babel does not know is logged at warning level
        and served with zh_Hant_TW data, flagged ``is_fallback``.

        Args:
            locale_code: BCP 47 (``zh-TW``) or POSIX (``zh_TW``) code

        Returns:
            The cached LocaleContext; ``zh-TW`` and ``zh_TW`` share one entry
        """
        key = normalize_locale(locale_code)
        with cls._lock:
            cached = cls._instances.get(key)
            if cached is not None:
                cls._instances.move_to_end(key)
                return cached

        # Locale.parse loads CLDR data from disk; keep it outside the lock.
        babel_locale, is_fallback = _resolve_locale(key, locale_code)
        built = cls(locale_code=locale_code, babel_locale=babel_locale, is_fallback=is_fallback)

        with cls._lock:
            # Another thread may have stored the same key meanwhile.
            winner = cls._instances.setdefault(key, built)
            cls._instances.move_to_end(key)
            while len(cls._instances) > MAX_LOCALE_CACHE_SIZE:
                cls._instances.popitem(last=False)
            return winner

    def format_number(
        self,
        value: Numeric,
        *,
        minimum_fraction_digits: int = 0,
        maximum_fraction_digits: int = 3,
        use_grouping: bool = True,
    ) -> str:
        """Round half-up and lay out digits with the locale's separators.

        Args:
            value: int, float or Decimal
            minimum_fraction_digits: Fraction digits always shown
            maximum_fraction_digits: Rounding precision
            use_grouping: Insert thousands separators

        Returns:
            Grouped number, e.g. ``1,234.5``

        Raises:
            FormattingError: For NaN, infinities and values Babel rejects.
                ``fallback_value`` holds ``str(value)``.

        Examples:
            >>> ctx = LocaleContext.create()
            >>> ctx.format_number(2.5, maximum_fraction_digits=0)
            '3'
            >>> ctx.format_number(42, minimum_fraction_digits=2, maximum_fraction_digits=2)
            '42.00'
        """
        try:
            rounded = round_half_up(value, maximum_fraction_digits)
            if not rounded.is_finite():
                msg = "value is not finite"
                raise ValueError(msg)
            pattern = _decimal_pattern(
                minimum_fraction_digits, maximum_fraction_digits, use_grouping
            )
            formatted = babel_numbers.format_decimal(
                rounded, format=pattern, locale=self.babel_locale
            )
            return str(formatted)
        except (ValueError, TypeError, InvalidOperation) as e:
            diagnostic = ErrorTemplate.formatting_failed("format_number", value, str(e))
            raise FormattingError(diagnostic, fallback_value=str(value)) from e

    def format_datetime(self, value: date | datetime, pattern: str) -> str:
        """Render a date or datetime with a CLDR pattern.

        A plain date is taken as midnight. Aware datetimes stay in their own
        zone and naive ones are rendered as given.

        Raises:
            FormattingError: If Babel rejects the pattern or value.
                ``fallback_value`` holds the ISO form.

        >>> LocaleContext.create().format_datetime(date(2025, 1, 14), "yyyy年MM月dd日 EEEE")
        '2025年01月14日 星期二'
        """
        moment = value if isinstance(value, datetime) else datetime.combine(value, time())
        try:
            return str(
                babel_dates.format_datetime(
                    moment, format=pattern, tzinfo=moment.tzinfo, locale=self.babel_locale
                )
            )
        except (ValueError, OverflowError, AttributeError, KeyError) as e:
            diagnostic = ErrorTemplate.formatting_failed("format_datetime", value, str(e))
            raise FormattingError(diagnostic, fallback_value=value.isoformat()) from e
