"""UTF-8 decoder: one code point per call from an immutable ByteCursor.

- decode() returns tuple[DecodeResult | None, tuple[Utf8Error, ...]]
- The input cursor is never modified; success hands back an advanced copy
- consume_code_point() is the raising convenience

State machine:
    Start: empty range -> EmptyInputError; ASCII byte -> done (1 byte).
        Otherwise the smallest introducer strictly greater than the byte
        gives the number of continuation bytes to expect.
    Continuation: each byte must be 0b10xx_xxxx; its 6 payload bits are
        shifted into the accumulator.
    Completion: the accumulated value must be a valid code point, then it
        must need every byte that was used (no overlong forms).

Thread-safe. Only reads the module-level lookup tables.
"""

from bisect import bisect_right
from typing import TypeAlias

from strictutf8.constants import (
    BITS_PER_CHUNK,
    CHUNK_MASK,
    CODE_POINT_RANGES,
    CONTINUATION_BIT,
    CONTINUATION_TAG,
    INTRODUCER_BITS,
)
from strictutf8.diagnostics import (
    ByteSpan,
    EmptyInputError,
    ErrorTemplate,
    IncompleteSequenceError,
    InvalidCodePointError,
    InvalidIntroducerError,
    OverlongSequenceError,
    Utf8Error,
)

from .cursor import ByteCursor, DecodeResult
from .validity import is_valid_code_point

__all__ = ["consume_code_point", "decode"]

DecodeOutcome: TypeAlias = tuple[DecodeResult | None, tuple[Utf8Error, ...]]


def _fail(error: Utf8Error) -> DecodeOutcome:
    return (None, (error,))


def decode(cursor: ByteCursor) -> DecodeOutcome:
    """Decode exactly one code point starting at the cursor position.

    Args:
        cursor: Position of a presumed UTF-8 encoded code point

    Returns:
        Tuple of (result, errors):
        - result: DecodeResult(value, advanced_cursor), or None on failure
        - errors: Tuple with one Utf8Error on failure (empty on success)

    Raises:
        TypeError: If cursor is not a ByteCursor

    Examples:
        >>> result, errors = decode(ByteCursor(b"\\xc2\\xa9"))
        >>> hex(result.value), result.cursor.pos
        ('0xa9', 2)

        >>> result, errors = decode(ByteCursor(b"\\xc0\\x80"))
        >>> type(errors[0]).__name__
        'OverlongSequenceError'
    """
    if not isinstance(cursor, ByteCursor):
        msg = f"decode() expects a ByteCursor, got {type(cursor).__name__}"
        raise TypeError(msg)

    start = cursor.pos
    if cursor.is_eof:
        return _fail(EmptyInputError(ErrorTemplate.empty_input(start)))

    source = cursor.source
    byte = source[start]
    if byte < CONTINUATION_BIT:
        return (DecodeResult(byte, cursor.advance()), ())

    # Find the first introducer strictly greater than the byte, which also
    # gives us the number of continuation bytes to expect. Index 0 means a
    # bare continuation byte; running off the end means 0xFE or 0xFF.
    index = bisect_right(INTRODUCER_BITS, byte)
    if index in (0, len(INTRODUCER_BITS)):
        diagnostic = ErrorTemplate.invalid_introducer(byte, ByteSpan(start, start + 1))
        return _fail(InvalidIntroducerError(diagnostic))

    extended_bytes = index
    code_point = byte & ~INTRODUCER_BITS[index]

    pos = start + 1
    for _ in range(extended_bytes):
        if pos >= cursor.end:
            diagnostic = ErrorTemplate.incomplete_sequence(
                extended_bytes + 1, pos - start, ByteSpan(start, pos)
            )
            return _fail(IncompleteSequenceError(diagnostic))

        byte = source[pos]
        pos += 1
        if byte < CONTINUATION_BIT:
            diagnostic = ErrorTemplate.unexpected_ascii(byte, ByteSpan(start, pos))
            return _fail(InvalidIntroducerError(diagnostic))
        if byte >= CONTINUATION_TAG:
            diagnostic = ErrorTemplate.invalid_introducer(byte, ByteSpan(start, pos))
            return _fail(InvalidIntroducerError(diagnostic))

        # Shift in a new chunk.
        code_point = (code_point << BITS_PER_CHUNK) | (byte & CHUNK_MASK)

    span = ByteSpan(start, pos)
    if not is_valid_code_point(code_point):
        return _fail(InvalidCodePointError(ErrorTemplate.invalid_code_point(code_point, span)))

    # Forbid overlong sequences as a security risk.
    if code_point < CODE_POINT_RANGES[extended_bytes - 1]:
        diagnostic = ErrorTemplate.overlong_sequence(code_point, extended_bytes + 1, span)
        return _fail(OverlongSequenceError(diagnostic))

    return (DecodeResult(code_point, cursor.advance(pos - start)), ())


def consume_code_point(cursor: ByteCursor) -> DecodeResult:
    """Decode one code point, raising the matching Utf8Error on failure.

    Raises:
        EmptyInputError: If the cursor is exhausted
        IncompleteSequenceError: If the range ends mid-sequence
        InvalidIntroducerError: If a byte is out of place
        InvalidCodePointError: If the decoded value is not a valid code point
        OverlongSequenceError: If the encoding is not minimal
    """
    result, errors = decode(cursor)
    if errors:
        raise errors[0]
    assert result is not None
    return result
