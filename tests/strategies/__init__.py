"""Hypothesis strategies for twlocale property-based testing.

Strategies are organized by domain:

- amounts: NT dollar amounts and their magnitudes
- phones: Taiwan phone numbers in national and international spellings
- dates: Calendar dates and date pairs for range collapsing

Usage:
    from tests.strategies import twd_amounts, mobile_numbers
    from tests.strategies.dates import same_month_pairs

Event-Emitting Strategies (HypoFuzz-Optimized):
    These strategies emit hypothesis.event() calls for coverage-guided fuzzing:
    - twd_amounts, compact_amounts
    - phone_numbers, phone_spellings
    - date_pairs
"""

from .amounts import compact_amounts, twd_amounts
from .dates import date_pairs, reasonable_dates, same_month_pairs, same_year_pairs
from .phones import landline_numbers, mobile_numbers, phone_numbers, phone_spellings

__all__ = [
    "compact_amounts",
    "date_pairs",
    "landline_numbers",
    "mobile_numbers",
    "phone_numbers",
    "phone_spellings",
    "reasonable_dates",
    "same_month_pairs",
    "same_year_pairs",
    "twd_amounts",
]
