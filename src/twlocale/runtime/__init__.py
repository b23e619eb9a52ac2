"""Runtime support shared by the formatters.

Provides the cached, immutable LocaleContext that wraps Babel for
Taiwan-convention number and date rendering.

Python 3.13+.
"""

from .locale_context import LocaleContext

__all__ = ["LocaleContext"]
