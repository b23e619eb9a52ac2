"""Hypothesis-based property tests over arbitrary input.

Parsers return tuple[value, errors]:
- exactly one side is populated: a value with no errors, or None with errors
- they never raise, whatever text they receive

Also covers compact-unit monotonicity and the formal numeral range.
"""

from decimal import Decimal

import pytest
from hypothesis import assume, event, given, settings
from hypothesis import strategies as st

from twlocale.enums import CompactUnit
from twlocale.formatting.currency import compact_magnitude, to_chinese_numerals
from twlocale.formatting.phone import format_taiwan_phone
from twlocale.parsing.currency import parse_twd
from twlocale.parsing.dates import parse_taiwan_date
from twlocale.parsing.numbers import parse_chinese_number
from twlocale.parsing.phone import normalize_phone, parse_taiwan_phone

pytestmark = pytest.mark.fuzz

# Digits, unit glyphs and currency markers mixed with arbitrary text, so
# generated input reaches past the first rejection branch.
_TAIWAN_ALPHABET = st.sampled_from(list("0123456789.,+-/ 年月日民國萬億千百十兩零壹貳參NT$元"))
_near_miss_text = st.lists(_TAIWAN_ALPHABET, max_size=20).map("".join)
_any_text = st.one_of(st.text(max_size=40), _near_miss_text)

_PARSERS = {
    "amount": parse_twd,
    "number": parse_chinese_number,
    "phone": parse_taiwan_phone,
    "date": parse_taiwan_date,
}


class TestParserContract:
    """Value xor errors, never an exception."""

    @given(kind=st.sampled_from(sorted(_PARSERS)), text=_any_text)
    @settings(max_examples=1000)
    def test_value_xor_errors(self, kind: str, text: str) -> None:
        """A parser returns a value or errors, never both and never neither."""
        result, errors = _PARSERS[kind](text)
        event(f"parser={kind}")
        event(f"outcome={'value' if result is not None else 'errors'}")
        assert (result is None) == bool(errors)
        for error in errors:
            assert error.parse_type == kind
            assert error.diagnostic is not None

    @given(text=_any_text)
    @settings(max_examples=500)
    def test_phone_formatter_is_total(self, text: str) -> None:
        """The lenient formatter returns the input or a hyphenated number."""
        formatted = format_taiwan_phone(text)
        changed = formatted != text
        event(f"formatted={changed}")
        if changed:
            assert normalize_phone(formatted) == normalize_phone(text)


class TestCompactMonotonicity:
    """Larger amounts never get a smaller unit."""

    @given(
        first=st.decimals(min_value=0, max_value=10**12, places=2),
        second=st.decimals(min_value=0, max_value=10**12, places=2),
    )
    def test_unit_grows_with_amount(self, first: Decimal, second: Decimal) -> None:
        """unit(a) <= unit(b) whenever a <= b."""
        low, high = sorted((first, second))
        low_unit = compact_magnitude(low).unit
        high_unit = compact_magnitude(high).unit
        event(f"high_unit={high_unit.name}")
        assert low_unit.multiplier <= high_unit.multiplier

    @given(st.decimals(min_value=10_000, max_value=10**12, places=2))
    def test_coefficient_range(self, amount: Decimal) -> None:
        """The rendered coefficient lies in [1, 10) except under 億."""
        magnitude = compact_magnitude(amount)
        assume(magnitude.unit is not CompactUnit.YI)
        event(f"unit={magnitude.unit.name}")
        assert Decimal(1) <= magnitude.coefficient <= Decimal(10)


class TestFormalNumeralRange:
    """to_chinese_numerals over its whole domain."""

    @given(st.decimals(min_value=0, max_value=10**16 - 1, places=2))
    @settings(max_examples=500)
    def test_always_renders(self, amount: Decimal) -> None:
        """Every non-negative amount below 10^16 renders with 元."""
        result = to_chinese_numerals(amount)
        event(f"whole={amount == amount.to_integral_value()}")
        assert "元" in result
        assert result.endswith(("整", "角", "分"))
