"""Locale utilities for BCP-47 to POSIX conversion.

Centralizes locale format normalization so LocaleContext cache keys are
canonical: "zh-TW" and "zh_TW" share one entry.

Python 3.13+.
"""

__all__ = ["normalize_locale"]


def normalize_locale(locale_code: str) -> str:
    """Convert BCP-47 locale code to POSIX format for Babel.

    BCP-47 uses hyphens (zh-TW), while Babel/POSIX uses underscores (zh_TW).

    Args:
        locale_code: BCP-47 locale code (e.g., "zh-TW", "zh-Hant-TW")

    Returns:
        POSIX-formatted locale code (e.g., "zh_TW", "zh_Hant_TW")

    Example:
        >>> normalize_locale("zh-Hant-TW")
        'zh_Hant_TW'
        >>> normalize_locale("zh_TW")  # Already normalized
        'zh_TW'
    """
    return locale_code.replace("-", "_")
