"""Shared constants for twlocale.

This module provides the Taiwan convention tables used across the
formatting and parsing packages. Placing them here avoids circular
imports and provides a single source of truth.

Constants are grouped by domain:
- Locale: Default CLDR locale and cache bounds
- Currency: Symbols, large-number units, tax rate
- Phone: Country code, fallback labels, area names, input masks
- Dates: CLDR patterns per verbosity level, weekday/month tables,
  relative-time phrasing
- Numbers: Numeral glyph tables

Python 3.13+. Zero external dependencies.
"""

from decimal import Decimal
from types import MappingProxyType

# ruff: noqa: RUF022 - __all__ organized by category for readability
__all__ = [
    # Locale
    "DEFAULT_LOCALE",
    "MAX_LOCALE_CACHE_SIZE",
    "ROC_YEAR_OFFSET",
    # Currency
    "TWD_SYMBOL",
    "TWD_CODE",
    "TWD_NAMES",
    "COMPACT_THRESHOLD",
    "DEFAULT_TAX_RATE",
    "AMOUNT_TOLERANCE",
    # Phone
    "TAIWAN_COUNTRY_CODE",
    "PHONE_TYPE_LABELS",
    "PHONE_TYPE_FALLBACK_LABEL",
    "AREA_NAMES",
    "AREA_FALLBACK_NAME",
    "PHONE_INPUT_MASKS",
    # Dates
    "TAIWAN_DATE_PATTERNS",
    "WEEKDAYS",
    "MONTHS",
    "RELATIVE_TIME_UNITS",
    "DURATION_UNDER_MINUTE",
    # Numbers
    "CHINESE_DIGITS",
    "CHINESE_POSITION_UNITS",
    "FINANCIAL_DIGITS",
    "FINANCIAL_POSITION_UNITS",
    "FINANCIAL_GROUP_UNITS",
    "FILE_SIZE_UNITS",
    "COMMON_FRACTIONS",
]

# ============================================================================
# LOCALE
# ============================================================================

# CLDR locale for Traditional Chinese as written in Taiwan.
# Babel resolves both "zh_TW" and "zh_Hant_TW" to the same data.
DEFAULT_LOCALE: str = "zh_Hant_TW"

# Maximum cached LocaleContext instances.
MAX_LOCALE_CACHE_SIZE: int = 16

# Republic of China calendar: ROC year = Gregorian year - 1911.
ROC_YEAR_OFFSET: int = 1911

# ============================================================================
# CURRENCY
# ============================================================================

TWD_SYMBOL: str = "NT$"
TWD_CODE: str = "TWD"

# Currency names stripped by the parser. Both character variants of
# "Taiwan" appear in user input.
TWD_NAMES: tuple[str, ...] = ("新台幣", "新臺幣")

# Compact notation never applies below one 萬.
COMPACT_THRESHOLD: Decimal = Decimal(10_000)

# Business tax (營業稅) rate applied to invoices.
DEFAULT_TAX_RATE: Decimal = Decimal("0.05")

# Amounts closer than this compare equal (one cent).
AMOUNT_TOLERANCE: Decimal = Decimal("0.01")

# ============================================================================
# PHONE
# ============================================================================

TAIWAN_COUNTRY_CODE: str = "+886"

PHONE_TYPE_LABELS: MappingProxyType[str, str] = MappingProxyType({
    "mobile": "手機",
    "landline": "市話",
    "tollFree": "免費電話",
})

PHONE_TYPE_FALLBACK_LABEL: str = "未知"

AREA_NAMES: MappingProxyType[str, str] = MappingProxyType({
    "02": "台北",
    "03": "桃園/新竹/宜蘭",
    "04": "台中",
    "05": "嘉義/雲林",
    "06": "台南",
    "07": "高雄",
    "08": "屏東",
    "09": "手機",
    "0800": "免費電話",
})

AREA_FALLBACK_NAME: str = "未知地區"

PHONE_INPUT_MASKS: MappingProxyType[str, str] = MappingProxyType({
    "mobile": "09##-###-###",
    "landline": "0#-####-####",
    "any": "0###-###-###",
})

# ============================================================================
# DATES
# ============================================================================

# CLDR date-time patterns (Babel syntax). Non-ASCII characters are literals.
TAIWAN_DATE_PATTERNS: MappingProxyType[str, str] = MappingProxyType({
    "short": "yyyy/MM/dd",                # 2025/01/14
    "medium": "yyyy年MM月dd日",            # 2025年01月14日
    "long": "yyyy年MM月dd日 EEEE",         # 2025年01月14日 星期二
    "time": "HH:mm",                      # 15:30
    "datetime": "yyyy年MM月dd日 HH:mm",     # 2025年01月14日 15:30
    "monthDay": "MM月dd日",                # 01月14日
    "yearMonth": "yyyy年MM月",             # 2025年01月
    "weekday": "EEEE",                    # 星期二
})

# Indexed Sunday-first, matching the Taiwan calendar layout.
WEEKDAYS: MappingProxyType[str, tuple[str, ...]] = MappingProxyType({
    "long": ("星期日", "星期一", "星期二", "星期三", "星期四", "星期五", "星期六"),
    "short": ("週日", "週一", "週二", "週三", "週四", "週五", "週六"),
    "narrow": ("日", "一", "二", "三", "四", "五", "六"),
})

MONTHS: MappingProxyType[str, tuple[str, ...]] = MappingProxyType({
    "long": (
        "一月", "二月", "三月", "四月", "五月", "六月",
        "七月", "八月", "九月", "十月", "十一月", "十二月",
    ),
    "short": (
        "1月", "2月", "3月", "4月", "5月", "6月",
        "7月", "8月", "9月", "10月", "11月", "12月",
    ),
    "narrow": (
        "一", "二", "三", "四", "五", "六",
        "七", "八", "九", "十", "十一", "十二",
    ),
})

# Relative-time phrasing. Keys follow the moment.js relativeTime convention
# (single letter = exactly one unit, doubled letter = %d units).
RELATIVE_TIME_UNITS: MappingProxyType[str, str] = MappingProxyType({
    "future": "%s後",
    "past": "%s前",
    "s": "幾秒",
    "m": "1分鐘",
    "mm": "%d分鐘",
    "h": "1小時",
    "hh": "%d小時",
    "d": "1天",
    "dd": "%d天",
    "M": "1個月",
    "MM": "%d個月",
    "y": "1年",
    "yy": "%d年",
})

DURATION_UNDER_MINUTE: str = "少於1分鐘"

# ============================================================================
# NUMBERS
# ============================================================================

CHINESE_DIGITS: tuple[str, ...] = ("零", "一", "二", "三", "四", "五", "六", "七", "八", "九")
CHINESE_POSITION_UNITS: tuple[str, ...] = ("", "十", "百", "千")

# Financial (大寫) numerals used on checks and invoices.
FINANCIAL_DIGITS: tuple[str, ...] = ("零", "壹", "貳", "參", "肆", "伍", "陸", "柒", "捌", "玖")
FINANCIAL_POSITION_UNITS: tuple[str, ...] = ("", "拾", "佰", "仟")
FINANCIAL_GROUP_UNITS: tuple[str, ...] = ("", "萬", "億", "兆")

FILE_SIZE_UNITS: tuple[str, ...] = ("B", "KB", "MB", "GB", "TB")

# Ratios rendered as words. Matched with a 0.01 tolerance.
COMMON_FRACTIONS: tuple[tuple[Decimal, str], ...] = (
    (Decimal("0.5"), "一半"),
    (Decimal("0.25"), "四分之一"),
    (Decimal("0.75"), "四分之三"),
    (Decimal("0.333"), "三分之一"),
    (Decimal("0.667"), "三分之二"),
)
