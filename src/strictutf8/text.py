"""Whole-buffer helpers built on the single code point codec.

The codec decodes exactly one code point per call; these helpers drive it
in a loop for the common cases. Each stops at the first failure and
returns no partial output (abort policy). Callers that want to skip and
resync should drive decode() themselves.

Public API:
    decode_bytes - Returns tuple[tuple[int, ...] | None, tuple[Utf8Error, ...]]
    encode_code_points - Returns tuple[bytes | None, tuple[Utf8Error, ...]]
    count_code_points - Returns tuple[int | None, tuple[Utf8Error, ...]]
    iter_code_points - Lazy decoding, raises Utf8Error
    code_points_to_json - JSON string body with \\uXXXX escapes, raises Utf8Error

Thread-safe. No shared mutable state.
"""

import logging
from collections.abc import Iterable, Iterator

from strictutf8.codec import ByteCursor, append_utf8, decode
from strictutf8.constants import MAX_INPUT_SIZE
from strictutf8.diagnostics import (
    ByteSpan,
    ErrorTemplate,
    InputTooLargeError,
    InvalidCodePointError,
    Utf8Error,
)

__all__ = [
    "code_points_to_json",
    "count_code_points",
    "decode_bytes",
    "encode_code_points",
    "iter_code_points",
]

logger = logging.getLogger(__name__)

# Largest code point JSON can express (via a UTF-16 surrogate pair).
_MAX_JSON_CODE_POINT: int = 0x10FFFF

# Largest code point a single \uXXXX escape can express.
_MAX_BMP_CODE_POINT: int = 0xFFFF


def _as_cursor(data: object) -> ByteCursor:
    if isinstance(data, ByteCursor):
        return data
    return ByteCursor.from_buffer(data)


def _check_size(cursor: ByteCursor, max_size: int) -> InputTooLargeError | None:
    if cursor.remaining > max_size:
        logger.debug("Rejected %d-byte input (limit %d)", cursor.remaining, max_size)
        return InputTooLargeError(ErrorTemplate.input_too_large(cursor.remaining, max_size))
    return None


def _log_failure(error: Utf8Error) -> None:
    code = error.diagnostic.code.name if error.diagnostic else type(error).__name__
    logger.debug("UTF-8 decoding stopped at byte %s: %s", error.position, code)


def decode_bytes(
    data: object,
    *,
    max_size: int = MAX_INPUT_SIZE,
) -> tuple[tuple[int, ...] | None, tuple[Utf8Error, ...]]:
    """Decode a whole buffer into code points.

    Args:
        data: bytes-like object or ByteCursor
        max_size: Maximum number of bytes accepted

    Returns:
        Tuple of (result, errors):
        - result: Tuple of code points, or None if any sequence was malformed
        - errors: Tuple with the first Utf8Error (empty tuple on success)

    Examples:
        >>> decode_bytes(b"a\\xc2\\xa9")
        ((97, 169), ())
        >>> result, errors = decode_bytes(b"a\\xc0\\x80")
        >>> result, errors[0].position
        (None, 1)
    """
    cursor = _as_cursor(data)
    too_large = _check_size(cursor, max_size)
    if too_large is not None:
        return (None, (too_large,))

    code_points: list[int] = []
    while not cursor.is_eof:
        result, errors = decode(cursor)
        if result is None:
            _log_failure(errors[0])
            return (None, errors)
        code_points.append(result.value)
        cursor = result.cursor
    return (tuple(code_points), ())


def count_code_points(
    data: object,
    *,
    max_size: int = MAX_INPUT_SIZE,
) -> tuple[int | None, tuple[Utf8Error, ...]]:
    """Count the code points in a buffer, validating every sequence.

    Example:
        >>> count_code_points("na\\u00efve".encode())
        (5, ())
    """
    cursor = _as_cursor(data)
    too_large = _check_size(cursor, max_size)
    if too_large is not None:
        return (None, (too_large,))

    count = 0
    while not cursor.is_eof:
        result, errors = decode(cursor)
        if result is None:
            _log_failure(errors[0])
            return (None, errors)
        count += 1
        cursor = result.cursor
    return (count, ())


def iter_code_points(data: object) -> Iterator[int]:
    """Yield code points lazily, raising the Utf8Error of the first bad sequence.

    Code points before the malformed sequence are yielded normally.

    Example:
        >>> list(iter_code_points(b"hi"))
        [104, 105]
    """
    cursor = _as_cursor(data)
    while not cursor.is_eof:
        result, errors = decode(cursor)
        if result is None:
            _log_failure(errors[0])
            raise errors[0]
        yield result.value
        cursor = result.cursor


def encode_code_points(
    code_points: Iterable[int],
) -> tuple[bytes | None, tuple[Utf8Error, ...]]:
    """Encode a sequence of code points into one UTF-8 buffer.

    Returns:
        Tuple of (result, errors):
        - result: Encoded bytes, or None if any code point was invalid
        - errors: Tuple with an InvalidCodePointError (empty tuple on success)

    Example:
        >>> encode_code_points([0x48, 0x20AC])
        (b'H\\xe2\\x82\\xac', ())
    """
    out = bytearray()
    for index, code_point in enumerate(code_points):
        if not append_utf8(code_point, out):
            logger.debug("Invalid code point at index %d: %#x", index, code_point)
            diagnostic = ErrorTemplate.invalid_code_point(code_point)
            return (None, (InvalidCodePointError(diagnostic),))
    return (bytes(out), ())


def code_points_to_json(data: object) -> str:
    """Escape every non-ASCII code point of UTF-8 bytes as \\uXXXX.

    Each non-ASCII code point becomes a lowercase \\uXXXX escape, or a
    surrogate pair above U+FFFF. ASCII bytes, including '"', '\\\\' and
    control characters, are copied through unchanged, so callers building a
    JSON string literal must escape those themselves.

    Raises:
        Utf8Error: If data is not valid UTF-8
        InvalidCodePointError: If a code point is above U+10FFFF

    Example:
        >>> code_points_to_json(b"\\xc3\\x87a")
        '\\\\u00c7a'
    """
    cursor = _as_cursor(data)
    parts: list[str] = []
    while not cursor.is_eof:
        result, errors = decode(cursor)
        if result is None:
            _log_failure(errors[0])
            raise errors[0]

        code_point = result.value
        if code_point < 0x80:
            parts.append(chr(code_point))
        elif code_point <= _MAX_BMP_CODE_POINT:
            parts.append(f"\\u{code_point:04x}")
        elif code_point <= _MAX_JSON_CODE_POINT:
            offset = code_point - 0x10000
            high = 0xD800 | (offset >> 10)
            low = 0xDC00 | (offset & 0x3FF)
            parts.append(f"\\u{high:04x}\\u{low:04x}")
        else:
            span = ByteSpan(cursor.pos, result.cursor.pos)
            raise InvalidCodePointError(ErrorTemplate.not_json_representable(code_point, span))
        cursor = result.cursor
    return "".join(parts)
