"""Shared constants for strictutf8.

This module provides the lookup tables and limits used across the codec
and the buffer helpers. Placing constants here avoids circular imports and
provides a single source of truth.

Constants are grouped by domain:
- Sequence layout: Length Table, Introducer Table, chunk sizes
- Bit masks: Continuation byte structure
- Validity bounds: Reserved and surrogate code points
- Input limits: DoS prevention via size constraints

See https://www.cl.cam.ac.uk/~mgk25/unicode.html#utf-8 for the 6-byte
layout this codec implements (a superset of the RFC 3629 4-byte profile).

Python 3.13+. Zero external dependencies.
"""

# ruff: noqa: RUF022 - __all__ organized by category for readability
__all__ = [
    # Sequence layout
    "MAX_CODEPOINT_BYTES",
    "BITS_PER_CHUNK",
    "CODE_POINT_RANGES",
    "INTRODUCER_BITS",
    # Bit masks
    "CHUNK_MASK",
    "CONTINUATION_BIT",
    "CONTINUATION_TAG",
    # Validity bounds
    "SURROGATE_RANGE_START",
    "SURROGATE_RANGE_END",
    "NONCHARACTER_FFFE",
    "NONCHARACTER_FFFF",
    "MAX_CODE_POINT",
    # Input limits
    "MAX_INPUT_SIZE",
]

# ============================================================================
# SEQUENCE LAYOUT
# ============================================================================

# The maximum number of bytes in a UTF-8 encoded code point.
MAX_CODEPOINT_BYTES: int = 6

# UTF-8 splits code points into 6-bit chunks.
BITS_PER_CHUNK: int = 6

# Length Table: code points strictly below CODE_POINT_RANGES[i] can be
# encoded with at most i + 1 bytes. Everything below 0x80 is plain ASCII;
# the last entry is the exclusive upper bound of encodable values.
CODE_POINT_RANGES: tuple[int, ...] = (
    0x80,
    0x800,
    0x10000,
    0x200000,
    0x4000000,
    0x80000000,
)

# Introducer Table: INTRODUCER_BITS[i] is the high-bit prefix of the first
# byte of an (i + 2)-byte sequence.
#   0b1100_0000, 0b1110_0000, 0b1111_0000
#   0b1111_1000, 0b1111_1100, 0b1111_1110
INTRODUCER_BITS: tuple[int, ...] = (0xC0, 0xE0, 0xF0, 0xF8, 0xFC, 0xFE)

# ============================================================================
# BIT MASKS
# ============================================================================

# Payload bits of a continuation byte (0b0011_1111).
CHUNK_MASK: int = 0x3F

# High bit set on every byte of a multi-byte sequence (0b1000_0000).
CONTINUATION_BIT: int = 0x80

# Continuation bytes are always 0b10xx_xxxx, so anything at or above the
# smallest introducer is a leader rather than a continuation.
CONTINUATION_TAG: int = INTRODUCER_BITS[0]

# ============================================================================
# VALIDITY BOUNDS
# ============================================================================

# UTF-16 surrogate code point range (D800-DFFF), invalid in isolation.
SURROGATE_RANGE_START: int = 0xD800
SURROGATE_RANGE_END: int = 0xDFFF

# Byte-order-mark mirror images, never valid as encoded text.
# See https://en.wikipedia.org/wiki/Specials_(Unicode_block)
NONCHARACTER_FFFE: int = 0xFFFE
NONCHARACTER_FFFF: int = 0xFFFF

# Largest code point a 6-byte sequence can carry (31 payload bits).
MAX_CODE_POINT: int = CODE_POINT_RANGES[-1] - 1

# ============================================================================
# INPUT LIMITS
# ============================================================================

# Default maximum buffer size in bytes (10 MB) for the whole-buffer helpers.
# Prevents unbounded tuple growth when decoding untrusted input.
MAX_INPUT_SIZE: int = 10 * 1024 * 1024
