"""Rendering of UTF-8 diagnostics for terminals, logs and tools.

A diagnostic only records byte offsets. When the caller also hands over the
buffer that was being decoded, the formatter shows the offending bytes in
hex, bracketed, with a few bytes of context on either side:

    error[OVERLONG_SEQUENCE]: Overlong 3-byte UTF-8 sequence for U+0000
      --> bytes 2..5
       | 6f 6b [e0 80 80] 74 61
      = help: ...

Python 3.13+. Zero external dependencies.
"""

import json
from collections.abc import Iterable
from dataclasses import dataclass
from enum import StrEnum
from typing import TypeAlias

from .codes import ByteSpan, Diagnostic

__all__ = [
    "DiagnosticFormatter",
    "OutputFormat",
    "hex_window",
]

Buffer: TypeAlias = bytes | bytearray | memoryview

_ELLIPSIS = "..."
_RED = "\033[1;31m"
_YELLOW = "\033[1;33m"
_RESET = "\033[0m"


class OutputFormat(StrEnum):
    """Output styles understood by DiagnosticFormatter."""

    RUST = "rust"
    SIMPLE = "simple"
    JSON = "json"


def hex_window(source: Buffer, span: ByteSpan, context: int = 4) -> str | None:
    """Hex-dump span within source, with up to context bytes either side.

    The span's bytes are wrapped in brackets; an empty span renders as
    "[]" at its offset. Elided bytes at either end are marked with "...".
    Returns None when span does not lie within source.

    Example:
        >>> hex_window(b"ok\\xe0\\x80\\x80ta", ByteSpan(2, 5))
        '6f 6b [e0 80 80] 74 61'
        >>> hex_window(b"ok\\xe0\\x80\\x80ta", ByteSpan(2, 5), context=1)
        '... 6b [e0 80 80] 74 ...'
    """
    size = len(source)
    if span.end > size:
        return None

    lo = max(0, span.start - context)
    hi = min(size, span.end + context)
    before = bytes(source[lo : span.start]).hex(" ")
    inside = bytes(source[span.start : span.end]).hex(" ")
    after = bytes(source[span.end : hi]).hex(" ")

    pieces = [_ELLIPSIS] if lo > 0 else []
    if before:
        pieces.append(before)
    pieces.append(f"[{inside}]")
    if after:
        pieces.append(after)
    if hi < size:
        pieces.append(_ELLIPSIS)
    return " ".join(pieces)


@dataclass(frozen=True, slots=True)
class DiagnosticFormatter:
    """Turns Diagnostic objects into text.

    Attributes:
        output_format: rust (multi-line), simple (one line) or json
        color: Wrap the severity label in ANSI colors (rust only)
        context_bytes: Bytes of context shown around the offending span

    Example:
        >>> formatter = DiagnosticFormatter()
        >>> print(formatter.format(ErrorTemplate.empty_input(0)))
        error[EMPTY_INPUT]: No bytes for UTF-8 code point
          --> bytes 0..0
          = help: Check is_eof before decoding
    """

    output_format: OutputFormat = OutputFormat.RUST
    color: bool = False
    context_bytes: int = 4

    def format(self, diagnostic: Diagnostic, source: Buffer | None = None) -> str:
        """Render one diagnostic.

        Args:
            diagnostic: Diagnostic to render
            source: Buffer the diagnostic's span refers to; enables the
                hex dump (rust) and the "bytes" field (json)
        """
        match self.output_format:
            case OutputFormat.RUST:
                return self._rust(diagnostic, source)
            case OutputFormat.SIMPLE:
                return self._simple(diagnostic)
            case OutputFormat.JSON:
                return self._json(diagnostic, source)

    def format_all(
        self, diagnostics: Iterable[Diagnostic], source: Buffer | None = None
    ) -> str:
        """Render several diagnostics against the same buffer, blank-line separated."""
        return "\n\n".join(self.format(d, source) for d in diagnostics)

    def _label(self, diagnostic: Diagnostic) -> str:
        if not self.color:
            return diagnostic.severity
        tint = _YELLOW if diagnostic.severity == "warning" else _RED
        return f"{tint}{diagnostic.severity}{_RESET}"

    def _rust(self, diagnostic: Diagnostic, source: Buffer | None) -> str:
        lines = [f"{self._label(diagnostic)}[{diagnostic.code.name}]: {diagnostic.message}"]

        span = diagnostic.span
        if span is not None:
            lines.append(f"  --> bytes {span.start}..{span.end}")
            if source is not None:
                window = hex_window(source, span, self.context_bytes)
                if window is not None:
                    lines.append(f"   | {window}")

        if diagnostic.hint:
            lines.append(f"  = help: {diagnostic.hint}")
        if diagnostic.help_url:
            lines.append(f"  = note: see {diagnostic.help_url}")
        return "\n".join(lines)

    @staticmethod
    def _simple(diagnostic: Diagnostic) -> str:
        span = diagnostic.span
        where = f" (bytes {span.start}..{span.end})" if span is not None else ""
        return f"{diagnostic.code.name}: {diagnostic.message}{where}"

    @staticmethod
    def _json(diagnostic: Diagnostic, source: Buffer | None) -> str:
        record: dict[str, str | int] = {
            "code": diagnostic.code.name,
            "code_value": diagnostic.code.value,
            "message": diagnostic.message,
            "severity": diagnostic.severity,
        }
        span = diagnostic.span
        if span is not None:
            record["start"] = span.start
            record["end"] = span.end
            if source is not None and span.end <= len(source):
                record["bytes"] = bytes(source[span.start : span.end]).hex()
        if diagnostic.code_point is not None:
            record["code_point"] = diagnostic.code_point
        if diagnostic.hint:
            record["hint"] = diagnostic.hint
        if diagnostic.help_url:
            record["help_url"] = diagnostic.help_url
        return json.dumps(record)
