"""UTF-8 encoder: code point to its minimal 1 to 6 byte sequence.

- encode() returns tuple[bytes | None, tuple[Utf8Error, ...]]
- Invalid code points are reported, never partially emitted
- to_utf8() is the raising convenience for callers that prefer exceptions

Thread-safe. Only reads the module-level lookup tables.
"""

from bisect import bisect_right
from typing import Protocol

from strictutf8.constants import (
    BITS_PER_CHUNK,
    CHUNK_MASK,
    CODE_POINT_RANGES,
    CONTINUATION_BIT,
    INTRODUCER_BITS,
)
from strictutf8.diagnostics import ErrorTemplate, InvalidCodePointError, Utf8Error

from .validity import is_valid_code_point

__all__ = [
    "ByteSink",
    "append_utf8",
    "encode",
    "encoded_length",
    "to_utf8",
]


class ByteSink(Protocol):
    """Anything bytes can be appended to (bytearray, array('B'), ...)."""

    def extend(self, data: bytes, /) -> None: ...  # noqa: D102


def _require_int(code_point: object) -> None:
    if not isinstance(code_point, int):
        msg = f"code point must be int, got {type(code_point).__name__}"
        raise TypeError(msg)


def encoded_length(code_point: int) -> int | None:
    """Return the minimal number of bytes needed for code_point.

    Returns:
        1 to 6 for a valid code point, None otherwise

    Example:
        >>> encoded_length(0x41)
        1
        >>> encoded_length(0x20AC)
        3
        >>> encoded_length(0xDFFF) is None
        True
    """
    _require_int(code_point)
    if 0 <= code_point < CODE_POINT_RANGES[0]:
        return 1
    if not is_valid_code_point(code_point):
        return None
    # Number of thresholds at or below the code point = continuation bytes.
    return bisect_right(CODE_POINT_RANGES, code_point) + 1


def append_utf8(code_point: int, buffer: ByteSink) -> bool:
    """Append the UTF-8 encoding of code_point to buffer.

    The encoding is built completely before it is appended, so an invalid
    code point leaves buffer untouched.

    Args:
        code_point: Code point to encode
        buffer: Destination with an extend() method

    Returns:
        False if the code point is invalid, True otherwise

    Raises:
        TypeError: If code_point is not an int

    Example:
        >>> out = bytearray(b"x")
        >>> append_utf8(0xA9, out)
        True
        >>> bytes(out)
        b'x\\xc2\\xa9'
    """
    _require_int(code_point)
    if 0 <= code_point < CODE_POINT_RANGES[0]:
        # It's plain old ASCII.
        buffer.extend(bytes((code_point,)))
        return True

    if not is_valid_code_point(code_point):
        return False

    extended_bytes = bisect_right(CODE_POINT_RANGES, code_point)

    # Peel 6-bit chunks off the low end; they come out least significant first.
    stack = bytearray()
    remainder = code_point
    for _ in range(extended_bytes):
        stack.append((remainder & CHUNK_MASK) | CONTINUATION_BIT)
        remainder >>= BITS_PER_CHUNK

    stack.append(INTRODUCER_BITS[extended_bytes - 1] | remainder)
    stack.reverse()
    buffer.extend(bytes(stack))
    return True


def encode(code_point: int) -> tuple[bytes | None, tuple[Utf8Error, ...]]:
    """Encode a code point as its minimal UTF-8 byte sequence.

    Args:
        code_point: Code point to encode

    Returns:
        Tuple of (result, errors):
        - result: Encoded bytes, or None if the code point is invalid
        - errors: Tuple of Utf8Error (empty tuple on success)

    Raises:
        TypeError: If code_point is not an int

    Examples:
        >>> encode(0x41)
        (b'A', ())
        >>> encode(0xA9)
        (b'\\xc2\\xa9', ())
        >>> result, errors = encode(0xD800)
        >>> result is None, type(errors[0]).__name__
        (True, 'InvalidCodePointError')
    """
    out = bytearray()
    if not append_utf8(code_point, out):
        diagnostic = ErrorTemplate.invalid_code_point(code_point)
        return (None, (InvalidCodePointError(diagnostic),))
    return (bytes(out), ())


def to_utf8(code_point: int) -> bytes:
    """Encode a code point, raising on invalid input.

    Raises:
        InvalidCodePointError: If the code point is invalid
        TypeError: If code_point is not an int
    """
    result, errors = encode(code_point)
    if errors:
        raise errors[0]
    assert result is not None
    return result
