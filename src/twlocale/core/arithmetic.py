"""Decimal helpers shared by the formatters.

Every displayed quantity goes through these helpers so rounding is
half-up everywhere (the convention Taiwan receipts and invoices use),
never the banker's rounding that decimal and Babel default to.

Python 3.13+. Zero external dependencies.
"""

from decimal import ROUND_HALF_UP, Decimal

__all__ = [
    "Numeric",
    "round_half_up",
    "strip_trailing_zeros",
    "to_decimal",
]

type Numeric = int | float | Decimal


def to_decimal(value: Numeric) -> Decimal:
    """Convert a numeric value to Decimal.

    Floats go through ``str()`` so ``0.1`` becomes ``Decimal('0.1')``
    rather than its binary expansion.
    """
    if isinstance(value, Decimal):
        return value
    if isinstance(value, float):
        return Decimal(str(value))
    return Decimal(value)


def round_half_up(value: Numeric, places: int = 0) -> Decimal:
    """Round to ``places`` fractional digits, halves away from zero.

    Examples:
        >>> round_half_up(Decimal("2.5"))
        Decimal('3')
        >>> round_half_up(1.25, 1)
        Decimal('1.3')
    """
    quantum = Decimal(1).scaleb(-places)
    return to_decimal(value).quantize(quantum, rounding=ROUND_HALF_UP)


def strip_trailing_zeros(value: Decimal) -> str:
    """Render a Decimal without trailing fractional zeros or exponent.

    Examples:
        >>> strip_trailing_zeros(Decimal("2.50"))
        '2.5'
        >>> strip_trailing_zeros(Decimal("100.0"))
        '100'
    """
    if value == value.to_integral_value():
        return str(value.quantize(Decimal(1)))
    return format(value.normalize(), "f")
