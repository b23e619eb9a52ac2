"""Tests for Chinese number formatting and parsing.

Covers the strict numeral converter, unit formatting, the lenient
display helpers and the section-based Chinese number parser.
"""

from decimal import Decimal

import pytest
from hypothesis import event, given
from hypothesis import strategies as st

from twlocale.core.errors import NumeralRangeError
from twlocale.diagnostics import DiagnosticCode, TaiwanFormattingError
from twlocale.formatting.numbers import (
    NUMERAL_MAX,
    format_chinese_number,
    format_count,
    format_distance,
    format_file_size,
    format_ordinal,
    format_percentage,
    format_ratio,
    format_score,
    generate_chinese_sequence,
    to_chinese_numeral,
)
from twlocale.parsing.guards import is_valid_number
from twlocale.parsing.numbers import parse_chinese_number

# ============================================================================
# to_chinese_numeral
# ============================================================================


class TestToChineseNumeral:
    """Everyday numerals for 0-9999."""

    @pytest.mark.parametrize(
        ("value", "expected"),
        [
            (0, "零"),
            (7, "七"),
            (10, "十"),
            (11, "十一"),
            (19, "十九"),
            (20, "二十"),
            (100, "一百"),
            (101, "一百零一"),
            (110, "一百一十"),
            (1001, "一千零一"),
            (1010, "一千零一十"),
            (2300, "二千三百"),
            (9999, "九千九百九十九"),
        ],
    )
    def test_values(self, value: int, expected: str) -> None:
        """Zero runs collapse to one 零; trailing zeros are silent."""
        assert to_chinese_numeral(value) == expected

    @pytest.mark.parametrize("value", [-1, 10_000, 123_456])
    def test_out_of_range(self, value: int) -> None:
        """Values outside 0-9999 raise with NUMERAL_OUT_OF_RANGE."""
        with pytest.raises(NumeralRangeError) as exc_info:
            to_chinese_numeral(value)
        assert exc_info.value.diagnostic is not None
        assert exc_info.value.diagnostic.code == DiagnosticCode.NUMERAL_OUT_OF_RANGE
        assert exc_info.value.diagnostic.function_name == "to_chinese_numeral"

    @pytest.mark.parametrize("value", [1.5, "12", True, None])
    def test_not_integer(self, value: object) -> None:
        """Non-int values, including bool, are rejected."""
        with pytest.raises(NumeralRangeError) as exc_info:
            to_chinese_numeral(value)  # type: ignore[arg-type]
        assert exc_info.value.diagnostic is not None
        assert exc_info.value.diagnostic.code == DiagnosticCode.NUMERAL_NOT_INTEGER

    def test_error_is_value_error(self) -> None:
        """Callers can catch a plain ValueError."""
        with pytest.raises(ValueError, match="must be between"):
            to_chinese_numeral(NUMERAL_MAX + 1)
        assert issubclass(NumeralRangeError, TaiwanFormattingError)

    @given(st.integers(min_value=0, max_value=NUMERAL_MAX))
    def test_parses_back(self, value: int) -> None:
        """Every numeral the converter writes is read back as the same value."""
        event(f"digits={len(str(value))}")
        numeral = to_chinese_numeral(value)
        parsed, errors = parse_chinese_number(numeral)
        assert errors == ()
        assert parsed == value


# ============================================================================
# format_chinese_number
# ============================================================================


class TestFormatChineseNumber:
    """Grouped digits or 千/萬/億 units."""

    def test_grouping(self) -> None:
        """Default rendering groups thousands."""
        assert format_chinese_number(1234567) == "1,234,567"

    def test_fixed_decimals(self) -> None:
        """Without units, exactly ``decimals`` digits are shown, rounded half-up."""
        assert format_chinese_number(3.14159, decimals=2) == "3.14"
        assert format_chinese_number(2.5) == "3"
        assert format_chinese_number(1, decimals=2) == "1.00"

    @pytest.mark.parametrize(
        ("value", "expected"),
        [
            (1500, "1.5千"),
            (15_000, "1.5萬"),
            (20_000, "2萬"),
            (1_234_567, "123.5萬"),
            (350_000_000, "3.5億"),
            (999, "999"),
        ],
    )
    def test_units(self, value: int, expected: str) -> None:
        """The first boundary reached picks the unit."""
        assert format_chinese_number(value, use_chinese_units=True) == expected

    def test_compact_alias(self) -> None:
        """compact behaves like use_chinese_units."""
        assert format_chinese_number(15_000, compact=True) == "1.5萬"

    def test_unit_coefficient_decimals(self) -> None:
        """decimals controls the coefficient precision with units."""
        assert format_chinese_number(12_345, decimals=2, use_chinese_units=True) == "1.23萬"

    def test_nan_falls_back(self) -> None:
        """Non-finite values come back as text instead of raising."""
        assert format_chinese_number(Decimal("NaN")) == "NaN"


# ============================================================================
# Display helpers
# ============================================================================


class TestDisplayHelpers:
    """Ordinals, percentages, ratios, sizes, distances and scores."""

    def test_ordinal(self) -> None:
        """Ordinals prefix 第."""
        assert format_ordinal(3) == "第3"

    def test_sequence(self) -> None:
        """Sequences are inclusive."""
        assert generate_chinese_sequence(1, 3) == ["第1", "第2", "第3"]
        assert generate_chinese_sequence(3, 1) == []

    @pytest.mark.parametrize(
        ("value", "kwargs", "expected"),
        [
            (0.256, {}, "26%"),
            (0.5, {}, "50%"),
            (0.125, {"decimals": 1}, "12.5%"),
            (45.5, {"is_ratio": False, "decimals": 1}, "45.5%"),
            (45.5, {"is_ratio": False}, "46%"),
        ],
    )
    def test_percentage(self, value: float, kwargs: dict[str, object], expected: str) -> None:
        """Percentages round half-up to a fixed number of places."""
        assert format_percentage(value, **kwargs) == expected  # type: ignore[arg-type]

    @pytest.mark.parametrize(
        ("numerator", "denominator", "expected"),
        [
            (1, 2, "一半"),
            (1, 4, "四分之一"),
            (3, 4, "四分之三"),
            (1, 3, "三分之一"),
            (2, 3, "三分之二"),
            (3, 7, "3/7"),
            (5, 0, "—"),
        ],
    )
    def test_ratio(self, numerator: int, denominator: int, expected: str) -> None:
        """Common fractions become words; others stay n/d."""
        assert format_ratio(numerator, denominator) == expected

    def test_count(self) -> None:
        """Counts are grouped and followed by their unit."""
        assert format_count(1200, "人") == "1,200 人"

    @pytest.mark.parametrize(
        ("size", "expected"),
        [
            (0, "0 B"),
            (512, "512 B"),
            (1536, "1.5 KB"),
            (1_048_576, "1.0 MB"),
            (5 * 1024**3, "5.0 GB"),
            (2048 * 1024**4, "2048.0 TB"),
        ],
    )
    def test_file_size(self, size: int, expected: str) -> None:
        """Binary steps; TB is the largest unit."""
        assert format_file_size(size) == expected

    @pytest.mark.parametrize(
        ("meters", "expected"),
        [(850, "850 公尺"), (2500, "2.5 公里"), (3000, "3 公里"), (1000, "1 公里")],
    )
    def test_distance(self, meters: int, expected: str) -> None:
        """Meters below a kilometer, kilometers from one kilometer up."""
        assert format_distance(meters) == expected

    def test_score(self) -> None:
        """Scores carry one decimal and the maximum by default."""
        assert format_score(4.25) == "4.3/5"
        assert format_score(8.5, 10) == "8.5/10"
        assert format_score(4, show_max=False) == "4.0"


# ============================================================================
# parse_chinese_number
# ============================================================================


class TestParseChineseNumber:
    """Everyday, formal and mixed numerals."""

    @pytest.mark.parametrize(
        ("text", "expected"),
        [
            ("兩千三百", Decimal(2300)),
            ("1.2萬", Decimal(12000)),
            ("3千", Decimal(3000)),
            ("十", Decimal(10)),
            ("十五", Decimal(15)),
            ("二十", Decimal(20)),
            ("一百零五", Decimal(105)),
            ("一萬零五", Decimal(10005)),
            ("三千五百萬", Decimal(35_000_000)),
            ("3億5000萬", Decimal(350_000_000)),
            ("壹仟貳佰", Decimal(1200)),
            ("參拾", Decimal(30)),
            ("零", Decimal(0)),
            ("3,000", Decimal(3000)),
            ("  42  ", Decimal(42)),
            ("0.5", Decimal("0.5")),
        ],
    )
    def test_accepted(self, text: str, expected: Decimal) -> None:
        """Units multiply the number in front of them; a bare unit counts once."""
        result, errors = parse_chinese_number(text)
        assert errors == ()
        assert result == expected

    def test_zero_is_not_failure(self) -> None:
        """A parsed zero is a value, not None."""
        result, _ = parse_chinese_number("0")
        assert is_valid_number(result)
        assert result == 0

    def test_empty(self) -> None:
        """Empty input gives PARSE_INPUT_EMPTY."""
        result, errors = parse_chinese_number("")
        assert result is None
        assert errors[0].diagnostic is not None
        assert errors[0].diagnostic.code == DiagnosticCode.PARSE_INPUT_EMPTY
        assert errors[0].parse_type == "number"

    @pytest.mark.parametrize("text", ["1,50", "3,00萬", "1,2,3"])
    def test_misgrouped_separators(self, text: str) -> None:
        """Separators must sit every three digits."""
        result, errors = parse_chinese_number(text)
        assert result is None
        assert errors[0].diagnostic is not None
        assert errors[0].diagnostic.code == DiagnosticCode.PARSE_NUMBER_FAILED

    @pytest.mark.parametrize("text", ["abc", "千千", "1..2", "十五abc", "萬萬"])
    def test_rejected(self, text: str) -> None:
        """Unrecognized characters give PARSE_NUMBER_FAILED."""
        result, errors = parse_chinese_number(text)
        assert result is None
        assert errors[0].diagnostic is not None
        assert errors[0].diagnostic.code == DiagnosticCode.PARSE_NUMBER_FAILED
        assert errors[0].input_value == text

    @given(st.integers(min_value=0, max_value=10**12))
    def test_arabic_digits_round_trip(self, value: int) -> None:
        """Plain Arabic digits parse to themselves."""
        event(f"grouped={value >= 1000}")
        result, errors = parse_chinese_number(f"{value:,}")
        assert errors == ()
        assert result == value
