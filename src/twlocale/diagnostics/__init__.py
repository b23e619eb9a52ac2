"""Diagnostic system for twlocale errors.

Provides structured error diagnostics with codes, hints and typed context.
Each error carries a Diagnostic; DiagnosticFormatter renders it as
rust-style, single-line or JSON text.

Python 3.13+. Zero external dependencies.
"""

from .codes import Diagnostic, DiagnosticCode, ErrorCategory, FrozenErrorContext
from .errors import TaiwanFormattingError, TaiwanLocaleError, TaiwanParseError
from .formatter import DiagnosticFormatter, OutputFormat
from .templates import ErrorTemplate

__all__ = [
    "Diagnostic",
    "DiagnosticCode",
    "DiagnosticFormatter",
    "ErrorCategory",
    "ErrorTemplate",
    "FrozenErrorContext",
    "OutputFormat",
    "TaiwanFormattingError",
    "TaiwanLocaleError",
    "TaiwanParseError",
]
