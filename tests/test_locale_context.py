"""Tests for LocaleContext - Babel-backed formatting without global state.

Tests the bounded instance cache, locale fallback, half-up number
formatting and CLDR date patterns.
"""

import logging
import threading
from datetime import date, datetime, timedelta, timezone
from decimal import Decimal

import pytest
from hypothesis import event, given
from hypothesis import strategies as st

from twlocale.constants import DEFAULT_LOCALE, MAX_LOCALE_CACHE_SIZE
from twlocale.core.errors import FormattingError
from twlocale.diagnostics import DiagnosticCode
from twlocale.locale_utils import normalize_locale
from twlocale.runtime.locale_context import LocaleContext

# ============================================================================
# Cache Management Tests
# ============================================================================


class TestLocaleContextCache:
    """clear_cache, cache_size, cache_info and LRU eviction."""

    def test_same_locale_same_instance(self) -> None:
        """Repeated create() returns the cached instance."""
        assert LocaleContext.create() is LocaleContext.create()

    def test_bcp47_and_posix_share_entry(self) -> None:
        """zh-TW and zh_TW normalize to one cache key."""
        assert LocaleContext.create("zh-TW") is LocaleContext.create("zh_TW")
        assert LocaleContext.cache_size() == 1

    def test_cache_info(self) -> None:
        """cache_info reports size, bound and keys in LRU order."""
        LocaleContext.create("zh-TW")
        LocaleContext.create("en")
        info = LocaleContext.cache_info()
        assert info == {"size": 2, "max_size": MAX_LOCALE_CACHE_SIZE, "locales": ("zh_TW", "en")}

    def test_clear_cache(self) -> None:
        """clear_cache empties the cache."""
        LocaleContext.create()
        LocaleContext.clear_cache()
        assert LocaleContext.cache_size() == 0

    def test_eviction_is_least_recently_used(self) -> None:
        """The cache never grows past its bound; the oldest entry goes first."""
        codes = [
            "en", "en_US", "en_GB", "fr", "de", "ja", "ko", "zh_TW", "zh_CN",
            "es", "it", "pt", "ru", "nl", "sv", "pl", "tr",
        ]  # fmt: skip
        for code in codes:
            LocaleContext.create(code)
        info = LocaleContext.cache_info()
        assert info["size"] == MAX_LOCALE_CACHE_SIZE
        assert "en" not in info["locales"]  # type: ignore[operator]
        assert "tr" in info["locales"]  # type: ignore[operator]

    def test_concurrent_create(self) -> None:
        """Threads creating the same locale all get one instance."""
        results: list[LocaleContext] = []
        lock = threading.Lock()

        def worker() -> None:
            ctx = LocaleContext.create("zh-Hant-TW")
            with lock:
                results.append(ctx)

        threads = [threading.Thread(target=worker) for _ in range(8)]
        for thread in threads:
            thread.start()
        for thread in threads:
            thread.join()

        assert len(results) == 8
        assert all(ctx is results[0] for ctx in results)
        assert LocaleContext.cache_size() == 1


# ============================================================================
# Fallback Tests
# ============================================================================


class TestLocaleContextFallback:
    """Unknown locales fall back to zh_Hant_TW."""

    def test_default_locale(self) -> None:
        """Default context is Taiwan Traditional Chinese."""
        ctx = LocaleContext.create()
        assert ctx.locale_code == DEFAULT_LOCALE
        assert not ctx.is_fallback
        assert ctx.babel_locale.territory == "TW"

    @pytest.mark.parametrize("code", ["xx-YY", "invalid-locale", "!!"])
    def test_invalid_locale_falls_back(self, code: str, caplog: pytest.LogCaptureFixture) -> None:
        """Invalid codes log a warning and use the default locale."""
        with caplog.at_level(logging.WARNING, logger="twlocale.runtime.locale_context"):
            ctx = LocaleContext.create(code)
        assert ctx.is_fallback
        assert ctx.locale_code == code
        assert str(ctx.babel_locale) == DEFAULT_LOCALE
        assert f"Falling back to {DEFAULT_LOCALE}" in caplog.text

    def test_normalize_locale(self) -> None:
        """Hyphens become underscores."""
        assert normalize_locale("zh-Hant-TW") == "zh_Hant_TW"
        assert normalize_locale("zh_TW") == "zh_TW"


# ============================================================================
# Number Formatting Tests
# ============================================================================


class TestFormatNumber:
    """Grouping and half-up rounding."""

    @pytest.mark.parametrize(
        ("value", "kwargs", "expected"),
        [
            (1234567, {}, "1,234,567"),
            (1234.5, {}, "1,234.5"),
            (42, {"minimum_fraction_digits": 2, "maximum_fraction_digits": 2}, "42.00"),
            (2.5, {"maximum_fraction_digits": 0}, "3"),
            (3.5, {"maximum_fraction_digits": 0}, "4"),
            (Decimal("0.125"), {"maximum_fraction_digits": 2}, "0.13"),
            (1234567, {"use_grouping": False}, "1234567"),
            (-1500, {}, "-1,500"),
        ],
    )
    def test_format(self, value: object, kwargs: dict[str, object], expected: str) -> None:
        """Halves round away from zero, never to even."""
        ctx = LocaleContext.create()
        assert ctx.format_number(value, **kwargs) == expected  # type: ignore[arg-type]

    @pytest.mark.parametrize(
        ("value", "fallback"),
        [(Decimal("NaN"), "NaN"), (Decimal("Infinity"), "Infinity"), (float("inf"), "inf")],
    )
    def test_non_finite_raises(self, value: object, fallback: str) -> None:
        """Non-finite values raise FormattingError carrying a fallback."""
        ctx = LocaleContext.create()
        with pytest.raises(FormattingError) as exc_info:
            ctx.format_number(value)  # type: ignore[arg-type]
        assert exc_info.value.fallback_value == fallback
        assert exc_info.value.diagnostic is not None
        assert exc_info.value.diagnostic.code == DiagnosticCode.FORMATTING_FAILED

    @given(st.integers(min_value=0, max_value=10**15))
    def test_grouping_preserves_digits(self, value: int) -> None:
        """Removing separators gives the plain digits back."""
        event(f"groups={len(f'{value:,}'.split(','))}")
        formatted = LocaleContext.create().format_number(value)
        assert formatted.replace(",", "") == str(value)


# ============================================================================
# Date Formatting Tests
# ============================================================================


class TestFormatDatetime:
    """CLDR patterns with literal Chinese characters."""

    def test_date_is_midnight(self) -> None:
        """Plain dates render time fields as 00:00."""
        ctx = LocaleContext.create()
        assert ctx.format_datetime(date(2025, 1, 14), "yyyy年MM月dd日 HH:mm") == (
            "2025年01月14日 00:00"
        )

    def test_weekday_name(self) -> None:
        """EEEE gives the Traditional Chinese weekday."""
        ctx = LocaleContext.create()
        assert ctx.format_datetime(date(2025, 1, 14), "yyyy年MM月dd日 EEEE") == (
            "2025年01月14日 星期二"
        )

    def test_naive_datetime_not_shifted(self) -> None:
        """Naive datetimes render as given."""
        ctx = LocaleContext.create()
        assert ctx.format_datetime(datetime(2025, 1, 14, 15, 30), "HH:mm") == "15:30"

    def test_aware_datetime_uses_own_zone(self) -> None:
        """Aware datetimes render in their own offset."""
        taipei = timezone(timedelta(hours=8))
        ctx = LocaleContext.create()
        assert ctx.format_datetime(datetime(2025, 1, 14, 15, 30, tzinfo=taipei), "HH:mm") == (
            "15:30"
        )
