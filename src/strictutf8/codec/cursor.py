"""Immutable byte cursor infrastructure for UTF-8 decoding.

Implements the immutable cursor pattern over a byte range.
Python 3.13+. Zero external dependencies.

Design Philosophy:
    - Cursor is immutable (frozen dataclass)
    - EOF is a state (is_eof), not a return value
    - Every advance() returns NEW cursor (prevents infinite loops)
    - The cursor borrows its buffer; it never copies it

Construction:
    - ByteCursor(source, pos, end): explicit bounds
    - ByteCursor.from_bounds(buffer, begin, end): a pair of raw byte bounds
    - ByteCursor.from_c_string(data): stops at the first NUL byte
    - ByteCursor.from_buffer(buffer): any buffer-protocol object, via memoryview
"""

from dataclasses import dataclass
from typing import TypeAlias

__all__ = ["ByteCursor", "ByteSource", "DecodeResult"]

ByteSource: TypeAlias = bytes | bytearray | memoryview


@dataclass(frozen=True, slots=True)
class ByteCursor:
    """Immutable byte position tracker.

    Key Design Decisions:
        1. Frozen dataclass - Immutability enforced by Python
        2. Slots - Memory efficiency
        3. Explicit end bound - A cursor can view a sub-range of a buffer
        4. EOF is a property - Not a return value
        5. current raises - No None handling needed

    Example:
        >>> cursor = ByteCursor(b"\\xc2\\xa9", 0)
        >>> cursor.current
        194
        >>> cursor.advance().current
        169
        >>> cursor.remaining
        2
        >>> ByteCursor(b"", 0).is_eof
        True
    """

    source: ByteSource
    pos: int = 0
    end: int = -1

    def __post_init__(self) -> None:
        """Resolve the default end bound and validate positions.

        Raises:
            ValueError: If pos or end fall outside the buffer, or pos > end.
        """
        size = len(self.source)
        if self.end == -1:
            object.__setattr__(self, "end", size)
        if not 0 <= self.end <= size:
            msg = f"ByteCursor.end must be in 0..{size}, got {self.end}"
            raise ValueError(msg)
        if not 0 <= self.pos <= self.end:
            msg = f"ByteCursor.pos must be in 0..{self.end}, got {self.pos}"
            raise ValueError(msg)

    def __hash__(self) -> int:
        # Writable memoryviews refuse hash(); equal cursors share these bounds.
        return hash((len(self.source), self.pos, self.end))

    @classmethod
    def from_bounds(cls, buffer: ByteSource, begin: int, end: int) -> "ByteCursor":
        """Create a cursor over buffer[begin:end] without copying.

        Raises:
            ValueError: If either bound is negative or outside buffer
        """
        if begin < 0 or end < 0:
            msg = f"ByteCursor.from_bounds needs non-negative bounds, got {begin}..{end}"
            raise ValueError(msg)
        return cls(buffer, begin, end)

    @classmethod
    def from_c_string(cls, data: bytes | bytearray) -> "ByteCursor":
        """Create a cursor that ends at the first NUL byte of data.

        Example:
            >>> ByteCursor.from_c_string(b"ab\\x00cd").remaining
            2
        """
        nul = data.find(0)
        return cls(data, 0, len(data) if nul < 0 else nul)

    @classmethod
    def from_buffer(cls, buffer: object) -> "ByteCursor":
        """Borrow any buffer-protocol object (bytes, bytearray, array, mmap).

        The buffer is wrapped in an unsigned-byte memoryview so that its
        storage is shared, not copied. The caller must keep the buffer
        alive and unmodified for as long as the cursor is in use.

        Raises:
            TypeError: If buffer does not support the buffer protocol
        """
        if isinstance(buffer, bytes):
            return cls(buffer)
        view = memoryview(buffer)  # type: ignore[arg-type]
        if view.format != "B" or view.ndim != 1:
            view = view.cast("B")
        return cls(view)

    @property
    def is_eof(self) -> bool:
        """Check if at end of the byte range.

        Note: This is the preferred way to check for EOF.
              Use this in while loops: `while not cursor.is_eof:`
        """
        return self.pos >= self.end

    @property
    def remaining(self) -> int:
        """Number of bytes left before the end bound."""
        return self.end - self.pos

    def __bool__(self) -> bool:
        """True while at least one byte remains."""
        return self.pos < self.end

    @property
    def current(self) -> int:
        """Get the current byte value.

        Raises:
            EOFError: If at end of range
        """
        if self.is_eof:
            msg = f"Unexpected end of bytes at position {self.pos}"
            raise EOFError(msg)
        return self.source[self.pos]

    def peek(self, offset: int = 0) -> int | None:
        """Peek at the byte at pos + offset, or None beyond the end bound."""
        target_pos = self.pos + offset
        if target_pos >= self.end:
            return None
        return self.source[target_pos]

    def advance(self, count: int = 1) -> "ByteCursor":
        """Return new cursor advanced by count bytes, clamped to the end bound.

        Example:
            >>> cursor = ByteCursor(b"abc", 0)
            >>> cursor2 = cursor.advance()
            >>> cursor.pos  # Original unchanged
            0
            >>> cursor2.pos
            1
        """
        new_pos = min(self.pos + count, self.end)
        return ByteCursor(self.source, new_pos, self.end)

    def slice_to(self, end_pos: int) -> bytes:
        """Copy the bytes from the current position up to end_pos (exclusive)."""
        return bytes(self.source[self.pos : min(end_pos, self.end)])


@dataclass(frozen=True, slots=True)
class DecodeResult:
    """Decoder result containing the code point and the advanced cursor.

    Design:
        - Frozen for immutability
        - Contains BOTH decoded value AND new cursor
        - decode() returns tuple[DecodeResult | None, tuple[Utf8Error, ...]]

    Example:
        >>> cursor = ByteCursor(b"A", 0)
        >>> result = DecodeResult(0x41, cursor.advance())
        >>> result.value
        65
        >>> result.cursor.is_eof
        True
    """

    value: int
    cursor: ByteCursor
