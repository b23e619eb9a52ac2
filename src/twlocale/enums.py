"""Enumerations for twlocale type-safe constants.

Uses StrEnum (Python 3.11+) for automatic string conversion.
StrEnum members are strings themselves, eliminating boilerplate __str__ methods.

Python 3.13+.
"""

from decimal import Decimal
from enum import Enum, StrEnum


class PhoneType(StrEnum):
    """Classification of a Taiwan telephone number.

    StrEnum provides automatic string conversion: str(PhoneType.MOBILE) == "mobile"
    """

    MOBILE = "mobile"
    """Mobile number: 09XX-XXX-XXX"""

    LANDLINE = "landline"
    """Landline number with a two-digit area code: 02-XXXX-XXXX"""

    TOLL_FREE = "tollFree"
    """Toll-free number: 0800-XXX-XXX"""


class CompactUnit(Enum):
    """Large-number unit used by compact currency notation.

    Each member's value is a ``(multiplier, glyph)`` pair. NONE marks an
    amount below the compact threshold.
    """

    NONE = (Decimal(1), "")
    WAN = (Decimal(10) ** 4, "萬")
    SHIWAN = (Decimal(10) ** 5, "十萬")
    BAIWAN = (Decimal(10) ** 6, "百萬")
    QIANWAN = (Decimal(10) ** 7, "千萬")
    YI = (Decimal(10) ** 8, "億")

    @property
    def multiplier(self) -> Decimal:
        """Numeric size of the unit."""
        return self.value[0]

    @property
    def glyph(self) -> str:
        """Chinese suffix rendered after the coefficient."""
        return self.value[1]


__all__ = [
    "CompactUnit",
    "PhoneType",
]
