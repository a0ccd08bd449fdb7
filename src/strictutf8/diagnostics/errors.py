"""UTF-8 codec exception hierarchy with structured diagnostics.

All exceptions store Diagnostic objects for rich error information.
The codec returns these objects in an errors tuple instead of raising
them; only the explicit raising conveniences (to_utf8, consume_code_point,
iter_code_points) raise.

Hierarchy:
    Utf8Error
    ├─ InvalidCodePointError (surrogate, U+FFFE/U+FFFF, out of range)
    ├─ InvalidIntroducerError (malformed leader or continuation byte)
    ├─ IncompleteSequenceError (input ended mid-sequence)
    ├─ EmptyInputError (nothing left to decode)
    ├─ OverlongSequenceError (non-minimal encoding)
    └─ InputTooLargeError (buffer exceeds max_size)

Python 3.13+. Zero external dependencies.
"""

from typing import ClassVar

from .codes import ByteSpan, Diagnostic, ErrorCategory

__all__ = [
    "EmptyInputError",
    "IncompleteSequenceError",
    "InputTooLargeError",
    "InvalidCodePointError",
    "InvalidIntroducerError",
    "OverlongSequenceError",
    "Utf8Error",
]


class Utf8Error(Exception):
    """Base exception for all UTF-8 codec errors.

    Attributes:
        diagnostic: Structured diagnostic information (optional)
        category: Broad error class shared by all instances of a subclass
    """

    category: ClassVar[ErrorCategory] = ErrorCategory.STRUCTURE

    def __init__(self, message: str | Diagnostic) -> None:
        """Initialize Utf8Error.

        Args:
            message: Error message string OR Diagnostic object
        """
        if isinstance(message, Diagnostic):
            self.diagnostic: Diagnostic | None = message
            super().__init__(message.message)
        else:
            self.diagnostic = None
            super().__init__(message)

    @property
    def span(self) -> ByteSpan | None:
        """Byte range of the offending sequence, when known."""
        return self.diagnostic.span if self.diagnostic is not None else None

    @property
    def position(self) -> int | None:
        """Offset where the offending sequence starts, when known."""
        span = self.span
        return span.start if span is not None else None


class InvalidCodePointError(Utf8Error):
    """Code point fails the validity predicate.

    Raised by the encoder before any output is produced, and by the
    decoder after a structurally valid sequence has been accumulated.
    """

    category = ErrorCategory.CODE_POINT


class InvalidIntroducerError(Utf8Error):
    """A byte does not match the pattern expected at its position.

    Covers bare continuation bytes where a leader is expected, the
    0xFE/0xFF bytes, and leaders or ASCII bytes inside a sequence.
    """

    category = ErrorCategory.STRUCTURE


class IncompleteSequenceError(Utf8Error):
    """Byte range exhausted in the middle of a multi-byte sequence."""

    category = ErrorCategory.TRUNCATION


class EmptyInputError(Utf8Error):
    """Decode attempted on an exhausted byte range."""

    category = ErrorCategory.TRUNCATION


class OverlongSequenceError(Utf8Error):
    """Structurally valid sequence using more bytes than necessary.

    Kept distinct from InvalidCodePointError: overlong forms are a known
    smuggling vector (e.g. 0xC0 0xAF for '/') and callers may want to
    flag them specifically.
    """

    category = ErrorCategory.OVERLONG


class InputTooLargeError(Utf8Error):
    """Buffer handed to a whole-buffer helper exceeds its size bound."""

    category = ErrorCategory.LIMIT
