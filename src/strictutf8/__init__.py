"""strictutf8 - Security-conscious UTF-8 codec.

Converts between Unicode code points and their UTF-8 byte sequences,
rejecting overlong encodings, surrogates, U+FFFE/U+FFFF and malformed
structure. Supports the historical 1 to 6 byte layout (code points up to
U+7FFFFFFF), a superset of the RFC 3629 4-byte profile.

Public API:
    is_valid_code_point - Validity predicate
    encode - Code point to bytes, returns (result, errors)
    decode - One code point from a ByteCursor, returns (result, errors)
    ByteCursor - Immutable view over a byte range
    DecodeResult - Decoded value plus advanced cursor
    decode_bytes, encode_code_points - Whole-buffer helpers

Exceptions:
    Utf8Error - Base exception class
    InvalidCodePointError - Surrogate, reserved, or out-of-range code point
    InvalidIntroducerError - Malformed leader or continuation byte
    IncompleteSequenceError - Input ended mid-sequence
    EmptyInputError - Nothing left to decode
    OverlongSequenceError - Non-minimal encoding

Submodules:
    strictutf8.codec - Codec core and raising conveniences
    strictutf8.text - Whole-buffer helpers
    strictutf8.diagnostics - Error codes, templates and formatting
    strictutf8.constants - Lookup tables and limits
"""

from .codec import ByteCursor, DecodeResult, decode, encode, is_valid_code_point
from .diagnostics import (
    EmptyInputError,
    IncompleteSequenceError,
    InputTooLargeError,
    InvalidCodePointError,
    InvalidIntroducerError,
    OverlongSequenceError,
    Utf8Error,
)
from .text import decode_bytes, encode_code_points

# Version information - Auto-populated from package metadata
# SINGLE SOURCE OF TRUTH: pyproject.toml [project] version
from importlib.metadata import PackageNotFoundError
from importlib.metadata import version as _get_version

try:
    __version__ = _get_version("strictutf8")
except PackageNotFoundError:
    # Development mode: package not installed yet
    __version__ = "0.0.0+dev"

__all__ = [
    "ByteCursor",
    "DecodeResult",
    "EmptyInputError",
    "IncompleteSequenceError",
    "InputTooLargeError",
    "InvalidCodePointError",
    "InvalidIntroducerError",
    "OverlongSequenceError",
    "Utf8Error",
    "__version__",
    "decode",
    "decode_bytes",
    "encode",
    "encode_code_points",
    "is_valid_code_point",
]
