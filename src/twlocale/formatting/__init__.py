"""Render Python values as Taiwan-convention display text.

Display helpers are lenient: input they cannot render is passed through
(phone numbers, non-ISO date strings) or falls back to ``str(value)``.
Only the strict numeral converters raise NumeralRangeError.

Modules:
    currency - NT dollar amounts, compact 萬/億 notation, formal 大寫 numerals
    phone - Hyphenated phone numbers, labels, area names, input masks
    numbers - Chinese units and numerals, percentages, sizes, distances
    dates - Date levels, relative time, ranges, durations, ROC calendar

Python 3.13+.
"""

from .currency import (
    CompactMagnitude,
    InvoiceAmounts,
    amounts_equal,
    compact_magnitude,
    format_discount,
    format_invoice_amount,
    format_payment_amount,
    format_price_range,
    format_twd,
    to_chinese_numerals,
)
from .dates import (
    RocDate,
    format_date_range,
    format_event_duration,
    format_relative_time,
    format_roc_date,
    format_taiwan_date,
    format_taiwan_time,
    get_chinese_month,
    get_chinese_weekday,
)
from .numbers import (
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
from .phone import (
    PhoneExample,
    format_taiwan_phone,
    get_area_name,
    get_example_phones,
    get_phone_input_mask,
    get_phone_type_label,
)

__all__ = [
    "CompactMagnitude",
    "InvoiceAmounts",
    "PhoneExample",
    "RocDate",
    "amounts_equal",
    "compact_magnitude",
    "format_chinese_number",
    "format_count",
    "format_date_range",
    "format_discount",
    "format_distance",
    "format_event_duration",
    "format_file_size",
    "format_invoice_amount",
    "format_ordinal",
    "format_payment_amount",
    "format_percentage",
    "format_price_range",
    "format_ratio",
    "format_relative_time",
    "format_roc_date",
    "format_score",
    "format_taiwan_date",
    "format_taiwan_phone",
    "format_taiwan_time",
    "format_twd",
    "generate_chinese_sequence",
    "get_area_name",
    "get_chinese_month",
    "get_chinese_weekday",
    "get_example_phones",
    "get_phone_input_mask",
    "get_phone_type_label",
    "to_chinese_numeral",
    "to_chinese_numerals",
]
