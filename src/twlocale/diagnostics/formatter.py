"""Render Diagnostic objects as text for logs, form validators and tooling.

Python 3.13+. Zero external dependencies.
"""

import json
from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from enum import StrEnum

from .codes import Diagnostic

__all__ = [
    "DiagnosticFormatter",
    "OutputFormat",
]

# (label in rust output, Diagnostic attribute), in display order.
_DETAIL_FIELDS: tuple[tuple[str, str], ...] = (
    ("function", "function_name"),
    ("argument", "argument_name"),
    ("expected", "expected_type"),
    ("received", "received_type"),
    ("help", "hint"),
)

# Attributes that echo user input; clipped when sanitizing.
_USER_TEXT_FIELDS = frozenset({"received_type"})


class OutputFormat(StrEnum):
    """Diagnostic rendering styles."""

    RUST = "rust"
    SIMPLE = "simple"
    JSON = "json"


@dataclass(frozen=True, slots=True)
class DiagnosticFormatter:
    """Turns diagnostics into strings.

    Attributes:
        output_format: rust (multi-line, default), simple (one line) or json
        sanitize: Truncate the message and echoed input
        max_content_length: Length kept when sanitizing

    Example:
        >>> diagnostic = ErrorTemplate.parse_date_failed("garbage")
        >>> print(DiagnosticFormatter().format(diagnostic))
        error[PARSE_DATE_FAILED]: Failed to parse date 'garbage': no supported format matched
          = help: Use YYYY/MM/DD, YYYY年MM月DD日 or 民國YYY年MM月DD日
        >>> print(DiagnosticFormatter(output_format=OutputFormat.SIMPLE).format(diagnostic))
        PARSE_DATE_FAILED: Failed to parse date 'garbage': no supported format matched
    """

    output_format: OutputFormat = OutputFormat.RUST
    sanitize: bool = False
    max_content_length: int = 100

    def format(self, diagnostic: Diagnostic) -> str:
        """Render one diagnostic in the configured style."""
        match self.output_format:
            case OutputFormat.RUST:
                return self._format_rust(diagnostic)
            case OutputFormat.SIMPLE:
                return f"{diagnostic.code.name}: {self._clip(diagnostic.message)}"
            case OutputFormat.JSON:
                return self._format_json(diagnostic)

    def format_all(self, diagnostics: Iterable[Diagnostic]) -> str:
        """Render several diagnostics separated by blank lines."""
        return "\n\n".join(self.format(d) for d in diagnostics)

    def _details(self, diagnostic: Diagnostic) -> Iterator[tuple[str, str, str]]:
        """Yield (label, attribute, text) for every populated detail field."""
        for label, attribute in _DETAIL_FIELDS:
            text = getattr(diagnostic, attribute)
            if not text:
                continue
            yield label, attribute, self._clip(text) if attribute in _USER_TEXT_FIELDS else text

    def _format_rust(self, diagnostic: Diagnostic) -> str:
        """Header line plus one ``= label: text`` line per detail.

        Example output:
            error[NUMERAL_OUT_OF_RANGE]: Value 10000 must be between 0 and 9999
              = function: to_chinese_numeral
              = received: 10000
              = help: Chinese numerals are only produced for 0-9999
        """
        header = f"{diagnostic.severity}[{diagnostic.code.name}]: {self._clip(diagnostic.message)}"
        lines = [header]
        lines.extend(f"  = {label}: {text}" for label, _, text in self._details(diagnostic))
        return "\n".join(lines)

    def _format_json(self, diagnostic: Diagnostic) -> str:
        # ensure_ascii=False keeps Chinese hints readable in logs.
        data: dict[str, str | int] = {
            "code": diagnostic.code.name,
            "code_value": diagnostic.code.value,
            "message": self._clip(diagnostic.message),
            "severity": diagnostic.severity,
        }
        data.update((attribute, text) for _, attribute, text in self._details(diagnostic))
        return json.dumps(data, ensure_ascii=False)

    def _clip(self, text: str) -> str:
        if self.sanitize and len(text) > self.max_content_length:
            return text[: self.max_content_length] + "..."
        return text
