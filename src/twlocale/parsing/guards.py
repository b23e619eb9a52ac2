"""Type guard functions for parsing result type narrowing.

All parse_* functions return tuple[result, tuple[TaiwanParseError, ...]].
Type guards check the result component to narrow types for mypy.

Note: All guards accept None and return False. This simplifies the pattern from
`if not errors and is_valid_amount(result)` to just `if is_valid_amount(result)`.

Example:
    >>> from decimal import Decimal
    >>> from twlocale.parsing import parse_twd
    >>> from twlocale.parsing.guards import is_valid_amount
    >>> result, errors = parse_twd("NT$ 1,500")
    >>> if is_valid_amount(result):
    ...     # mypy knows result is a finite, non-negative Decimal
    ...     tax = result * Decimal("0.05")

Python 3.13+ with TypeIs support (PEP 742).
"""

from datetime import date
from decimal import Decimal
from typing import TypeIs

from .phone import ParsedPhone

__all__ = [
    "is_valid_amount",
    "is_valid_date",
    "is_valid_number",
    "is_valid_phone",
]


def is_valid_amount(value: Decimal | None) -> TypeIs[Decimal]:
    """Type guard: Check if a parsed amount is usable as a price.

    Returns False for None, NaN, Infinity and negative amounts.

    Args:
        value: Decimal from parse_twd() result tuple (may be None on error)

    Returns:
        True if value is a finite, non-negative Decimal
    """
    return value is not None and value.is_finite() and value >= 0


def is_valid_number(value: Decimal | None) -> TypeIs[Decimal]:
    """Type guard: Check if a parsed number is valid (not None/NaN/Infinity).

    Args:
        value: Decimal from parse_chinese_number() result tuple (may be None on error)

    Returns:
        True if value is a finite Decimal, False otherwise
    """
    return value is not None and value.is_finite()


def is_valid_phone(value: ParsedPhone | None) -> TypeIs[ParsedPhone]:
    """Type guard: Check if a parsed phone number is present."""
    return value is not None


def is_valid_date(value: date | None) -> TypeIs[date]:
    """Type guard: Check if a parsed date is valid (not None).

    Example:
        >>> result, errors = parse_taiwan_date("2025/01/14")
        >>> if is_valid_date(result):
        ...     roc_year = result.year - 1911
    """
    return value is not None
