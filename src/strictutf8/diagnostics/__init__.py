"""Diagnostic system for UTF-8 codec errors.

Provides structured error diagnostics with codes, byte spans, hints, and help URLs.
Inspired by Rust compiler diagnostics and Elm error messages.

Python 3.13+. Zero external dependencies.
"""

from .codes import ByteSpan, Diagnostic, DiagnosticCode, ErrorCategory
from .errors import (
    EmptyInputError,
    IncompleteSequenceError,
    InputTooLargeError,
    InvalidCodePointError,
    InvalidIntroducerError,
    OverlongSequenceError,
    Utf8Error,
)
from .formatter import DiagnosticFormatter, OutputFormat, hex_window
from .templates import ErrorTemplate, format_code_point

__all__ = [
    "ByteSpan",
    "Diagnostic",
    "DiagnosticCode",
    "DiagnosticFormatter",
    "EmptyInputError",
    "ErrorCategory",
    "ErrorTemplate",
    "IncompleteSequenceError",
    "InputTooLargeError",
    "InvalidCodePointError",
    "InvalidIntroducerError",
    "OutputFormat",
    "OverlongSequenceError",
    "Utf8Error",
    "format_code_point",
    "hex_window",
]
