"""Diagnostic codes and data structures.

Defines error codes, byte spans, and diagnostic messages.
Python 3.13+. Zero external dependencies.
"""

from dataclasses import dataclass
from enum import Enum, StrEnum
from typing import Literal

__all__ = [
    "ByteSpan",
    "Diagnostic",
    "DiagnosticCode",
    "ErrorCategory",
]


class ErrorCategory(StrEnum):
    """Error categorization for Utf8Error.

    Inherits from ``StrEnum`` so that ``str(category)`` and direct string
    comparisons work without accessing ``.value``; log aggregation receives
    plain strings (``"overlong"``, ``"structure"``, etc.).

    Categories:
        CODE_POINT: Code point fails the validity predicate
        STRUCTURE: Malformed introducer or continuation byte
        TRUNCATION: Input ended before a code point was complete
        OVERLONG: Valid structure but more bytes than the minimum
        LIMIT: Input exceeds a configured size bound
    """

    CODE_POINT = "code_point"
    STRUCTURE = "structure"
    TRUNCATION = "truncation"
    OVERLONG = "overlong"
    LIMIT = "limit"


class DiagnosticCode(Enum):
    """Error codes with unique identifiers.

    Organized by category:
        1000-1999: Code point errors
        2000-2999: Structural errors (introducer/continuation bytes)
        3000-3999: Truncation errors
        4000-4999: Overlong encodings
        5000-5999: Input limits
    """

    # Code point errors (1000-1999)
    INVALID_CODE_POINT = 1001

    # Structural errors (2000-2999)
    INVALID_INTRODUCER = 2001
    UNEXPECTED_ASCII = 2002

    # Truncation errors (3000-3999)
    INCOMPLETE_SEQUENCE = 3001
    EMPTY_INPUT = 3002

    # Overlong encodings (4000-4999)
    OVERLONG_SEQUENCE = 4001

    # Input limits (5000-5999)
    INPUT_TOO_LARGE = 5001


@dataclass(frozen=True, slots=True)
class ByteSpan:
    """Byte range of the sequence that triggered a diagnostic.

    Attributes:
        start: Offset of the first byte of the sequence (0-indexed)
        end: Offset one past the last byte examined (exclusive)
    """

    start: int
    end: int

    def __post_init__(self) -> None:
        """Validate ByteSpan invariants.

        Raises:
            ValueError: If start is negative or end precedes start.
        """
        if self.start < 0:
            msg = f"ByteSpan.start must be >= 0, got {self.start}"
            raise ValueError(msg)
        if self.end < self.start:
            msg = f"ByteSpan.end ({self.end}) must be >= start ({self.start})"
            raise ValueError(msg)


@dataclass(frozen=True, slots=True)
class Diagnostic:
    """Structured diagnostic message.

    Inspired by Rust compiler diagnostics. Provides rich error information
    for both humans and tools.

    Attributes:
        code: Unique error code
        message: Human-readable error description
        span: Byte range of the offending sequence (None for encoder errors)
        hint: Suggestion for fixing the error
        help_url: Documentation URL for this error
        code_point: Offending code point, when one was computed
        severity: Error severity level
    """

    code: DiagnosticCode
    message: str
    span: ByteSpan | None = None
    hint: str | None = None
    help_url: str | None = None
    code_point: int | None = None
    severity: Literal["error", "warning"] = "error"

    def __str__(self) -> str:
        """Return human-readable error description."""
        return self.message

    def format_error(self, source: bytes | bytearray | memoryview | None = None) -> str:
        """Format diagnostic like Rust compiler.

        Delegates to DiagnosticFormatter. Pass the decoded buffer as source
        to include a hex dump of the offending bytes.

        Example output:
            error[OVERLONG_SEQUENCE]: Overlong 2-byte UTF-8 sequence for U+0000
              --> bytes 0..2
               | [c0 80]
              = help: Overlong forms can smuggle characters past filters and are never accepted
              = note: see https://www.cl.cam.ac.uk/~mgk25/unicode.html#utf-8

        Returns:
            Formatted error message
        """
        from .formatter import DiagnosticFormatter  # noqa: PLC0415 - circular

        return DiagnosticFormatter().format(self, source)
