"""New Taiwan Dollar formatting.

Renders NT dollar amounts the way Taiwan storefronts, receipts and
invoices print them:

- ``format_twd``: grouped amounts with ``NT$`` or ``TWD``, or compact
  萬/十萬/百萬/千萬/億 notation for large amounts
- ``to_chinese_numerals``: formal 大寫 numerals written on checks
- Discount, invoice, price-range and payment helpers built on ``format_twd``

All rounding is half-up. Display formatters never raise for values they
cannot render; they log a warning and fall back to ``str(amount)``.

Python 3.13+. Uses Babel via LocaleContext.
"""

import logging
from dataclasses import dataclass
from decimal import Decimal

from twlocale.constants import (
    AMOUNT_TOLERANCE,
    COMPACT_THRESHOLD,
    DEFAULT_TAX_RATE,
    FINANCIAL_DIGITS,
    FINANCIAL_GROUP_UNITS,
    FINANCIAL_POSITION_UNITS,
    TWD_CODE,
    TWD_SYMBOL,
)
from twlocale.core.arithmetic import Numeric, round_half_up, strip_trailing_zeros, to_decimal
from twlocale.core.errors import FormattingError, NumeralRangeError
from twlocale.diagnostics.templates import ErrorTemplate
from twlocale.enums import CompactUnit
from twlocale.runtime.locale_context import LocaleContext

__all__ = [
    "CompactMagnitude",
    "InvoiceAmounts",
    "amounts_equal",
    "compact_magnitude",
    "format_discount",
    "format_invoice_amount",
    "format_payment_amount",
    "format_price_range",
    "format_twd",
    "to_chinese_numerals",
]

logger = logging.getLogger(__name__)

# Largest unit first: the first unit not exceeding the amount wins.
_COMPACT_UNITS: tuple[CompactUnit, ...] = (
    CompactUnit.YI,
    CompactUnit.QIANWAN,
    CompactUnit.BAIWAN,
    CompactUnit.SHIWAN,
    CompactUnit.WAN,
)

# 大寫 numerals stop at the 兆 group.
_MAX_FORMAL_AMOUNT: int = 10 ** (4 * len(FINANCIAL_GROUP_UNITS)) - 1


@dataclass(frozen=True, slots=True)
class CompactMagnitude:
    """An amount paired with the single large-number unit used to display it.

    Attributes:
        raw: The amount as given
        unit: Largest unit not exceeding ``raw`` (``CompactUnit.NONE``
            below 10,000)
    """

    raw: Decimal
    unit: CompactUnit

    @property
    def coefficient(self) -> Decimal:
        """``raw / unit`` rounded half-up to one decimal place."""
        if self.unit is CompactUnit.NONE:
            return self.raw
        return round_half_up(self.raw / self.unit.multiplier, 1)

    def render(self) -> str:
        """Coefficient with a trailing ``.0`` dropped, followed by the unit glyph.

        >>> compact_magnitude(25_000_000).render()
        '2.5千萬'
        """
        return f"{strip_trailing_zeros(self.coefficient)}{self.unit.glyph}"


@dataclass(frozen=True, slots=True)
class InvoiceAmounts:
    """Formatted invoice lines. All values carry two decimals."""

    subtotal: str
    tax: str
    total: str


def compact_magnitude(amount: Numeric) -> CompactMagnitude:
    """Select the compact unit for an amount.

    Args:
        amount: NT dollar amount

    Returns:
        CompactMagnitude with exactly one unit. Amounts below 10,000
        (and non-finite values) get ``CompactUnit.NONE``.

    Examples:
        >>> compact_magnitude(150_000).unit
        <CompactUnit.SHIWAN: (Decimal('100000'), '十萬')>
        >>> compact_magnitude(9_999).unit
        <CompactUnit.NONE: (Decimal('1'), '')>
    """
    value = to_decimal(amount)
    if value.is_finite() and value >= COMPACT_THRESHOLD:
        for unit in _COMPACT_UNITS:
            if value >= unit.multiplier:
                return CompactMagnitude(raw=value, unit=unit)
    return CompactMagnitude(raw=value, unit=CompactUnit.NONE)


def format_twd(
    amount: Numeric,
    *,
    show_symbol: bool = True,
    show_code: bool = False,
    decimals: bool = False,
    compact: bool = True,
) -> str:
    """Format an NT dollar amount.

    Compact notation applies only from 10,000 upward; smaller amounts fall
    through to grouped digits. Exactly one marker is added: ``NT$ `` when
    ``show_symbol`` is set, otherwise `` TWD`` when ``show_code`` is set.
    Compact output never carries the code.

    Args:
        amount: NT dollar amount
        show_symbol: Prefix ``NT$ `` (default: True)
        show_code: Suffix `` TWD`` when the symbol is off (default: False)
        decimals: Always show two fraction digits (default: False shows
            up to two, and none for whole amounts)
        compact: Use 萬/億 units for amounts of 10,000 or more (default: True)

    Returns:
        Display string. Values Babel cannot render come back as ``str(amount)``.

    Examples:
        >>> format_twd(1500)
        'NT$ 1,500'
        >>> format_twd(25_000_000)
        'NT$ 2.5千萬'
        >>> format_twd(1234.5, decimals=True, compact=False)
        'NT$ 1,234.50'
        >>> format_twd(1500, show_symbol=False, show_code=True)
        '1,500 TWD'
    """
    magnitude = compact_magnitude(amount) if compact else None
    if magnitude is not None and magnitude.unit is not CompactUnit.NONE:
        body = magnitude.render()
        return f"{TWD_SYMBOL} {body}" if show_symbol else body

    ctx = LocaleContext.create()
    try:
        body = ctx.format_number(
            amount,
            minimum_fraction_digits=2 if decimals else 0,
            maximum_fraction_digits=2,
        )
    except FormattingError as e:
        logger.warning("format_twd fell back to raw value: %s", e)
        body = e.fallback_value

    if show_symbol:
        return f"{TWD_SYMBOL} {body}"
    if show_code:
        return f"{body} {TWD_CODE}"
    return body


def format_price_range(minimum: Numeric, maximum: Numeric | None = None) -> str:
    """Format a ticket price range.

    >>> format_price_range(500, 1200)
    'NT$ 500 - NT$ 1,200'
    >>> format_price_range(500)
    'NT$ 500'
    """
    if maximum is None or to_decimal(minimum) == to_decimal(maximum):
        return format_twd(minimum)
    return f"{format_twd(minimum)} - {format_twd(maximum)}"


def format_discount(original: Numeric, discounted: Numeric) -> str:
    """Describe the saving between two prices.

    Args:
        original: Price before the discount
        discounted: Price after the discount

    Returns:
        ``"省 {savings} ({percent}% off)"`` with the percent rounded half-up

    Raises:
        ZeroDivisionError: If ``original`` is zero

    Example:
        >>> format_discount(1000, 800)
        '省 NT$ 200 (20% off)'
    """
    original_value = to_decimal(original)
    if original_value == 0:
        msg = "format_discount: original price is zero"
        raise ZeroDivisionError(msg)
    savings = original_value - to_decimal(discounted)
    percent = round_half_up(savings / original_value * 100)
    return f"省 {format_twd(savings)} ({percent}% off)"


def format_payment_amount(amount: Numeric, description: str | None = None) -> str:
    """Format a payment line with two decimals and an optional description.

    >>> format_payment_amount(1500, "演唱會門票")
    'NT$ 1,500.00 - 演唱會門票'
    """
    formatted = format_twd(amount, decimals=True, compact=False)
    return f"{formatted} - {description}" if description else formatted


def format_invoice_amount(
    subtotal: Numeric, tax_rate: Numeric = DEFAULT_TAX_RATE
) -> InvoiceAmounts:
    """Compute and format business tax for an invoice.

    The tax is rounded half-up to whole dollars; the total is the exact
    subtotal plus that tax. All three lines use two decimals and never
    switch to compact notation.

    Args:
        subtotal: Amount before tax
        tax_rate: Tax rate (default: 0.05, Taiwan business tax)

    Returns:
        InvoiceAmounts with formatted subtotal, tax and total

    Example:
        >>> format_invoice_amount(1363.64)
        InvoiceAmounts(subtotal='NT$ 1,363.64', tax='NT$ 68.00', total='NT$ 1,431.64')
    """
    subtotal_value = to_decimal(subtotal)
    tax = round_half_up(subtotal_value * to_decimal(tax_rate))
    total = subtotal_value + tax
    return InvoiceAmounts(
        subtotal=format_twd(subtotal_value, decimals=True, compact=False),
        tax=format_twd(tax, decimals=True, compact=False),
        total=format_twd(total, decimals=True, compact=False),
    )


def amounts_equal(first: Numeric, second: Numeric) -> bool:
    """Compare two amounts to within one cent."""
    return abs(to_decimal(first) - to_decimal(second)) < AMOUNT_TOLERANCE


def to_chinese_numerals(amount: Numeric) -> str:
    """Render an amount in formal 大寫 numerals for checks and invoices.

    Digits use 壹..玖 with 拾/佰/仟 inside each four-digit group and
    萬/億/兆 after every group that holds a non-zero digit. Zero digits
    are not written. The fraction is rounded half-up to 分; whole amounts
    end in 元整.

    Args:
        amount: Non-negative amount below 10^16

    Returns:
        Formal numeral string

    Raises:
        NumeralRangeError: If the amount is negative, non-finite or too large

    Examples:
        >>> to_chinese_numerals(0)
        '零元整'
        >>> to_chinese_numerals(12345)
        '壹萬貳仟參佰肆拾伍元整'
        >>> to_chinese_numerals(100_000_000)
        '壹億元整'
        >>> to_chinese_numerals(10.5)
        '壹拾元伍角'
    """
    value = to_decimal(amount)
    if not value.is_finite():
        raise NumeralRangeError(
            ErrorTemplate.formatting_failed("to_chinese_numerals", amount, "amount is not finite")
        )
    if value < 0:
        raise NumeralRangeError(ErrorTemplate.amount_negative(amount))

    cents = round_half_up(value, 2)
    if cents == 0:
        return "零元整"

    integer = int(cents)
    if integer > _MAX_FORMAL_AMOUNT:
        raise NumeralRangeError(
            ErrorTemplate.numeral_out_of_range(
                amount, 0, _MAX_FORMAL_AMOUNT, function_name="to_chinese_numerals"
            )
        )

    integer_text = _financial_integer(integer) if integer else FINANCIAL_DIGITS[0]
    fraction = int((cents - integer) * 100)
    if fraction == 0:
        return f"{integer_text}元整"

    jiao, fen = divmod(fraction, 10)
    result = f"{integer_text}元"
    if jiao:
        result += f"{FINANCIAL_DIGITS[jiao]}角"
    if fen:
        result += f"{FINANCIAL_DIGITS[fen]}分"
    return result


def _financial_integer(value: int) -> str:
    digits = str(value)
    length = len(digits)
    parts: list[str] = []
    for index, char in enumerate(digits):
        group, offset = divmod(length - 1 - index, 4)
        digit = int(char)
        if digit:
            parts.append(FINANCIAL_DIGITS[digit] + FINANCIAL_POSITION_UNITS[offset])
        # Last digit of a group: close it with 萬/億/兆 unless the group is empty.
        if offset == 0 and group > 0 and int(digits[max(0, index - 3) : index + 1]):
            parts.append(FINANCIAL_GROUP_UNITS[group])
    return "".join(parts)
