"""Tests for ByteCursor infrastructure.

Validates the immutable cursor pattern over byte ranges.
"""

from __future__ import annotations

import array

import pytest

from strictutf8.codec import ByteCursor, DecodeResult

# ============================================================================
# CONSTRUCTION
# ============================================================================


class TestByteCursorConstruction:
    """Test the different ways to build a cursor."""

    def test_create_cursor_defaults(self) -> None:
        """Default bounds cover the whole buffer."""
        cursor = ByteCursor(b"hello")

        assert cursor.pos == 0
        assert cursor.end == 5
        assert cursor.remaining == 5

    def test_from_bounds(self) -> None:
        """from_bounds views a sub-range."""
        cursor = ByteCursor.from_bounds(b"abcdef", 1, 4)

        assert cursor.current == ord("b")
        assert cursor.remaining == 3

    @pytest.mark.parametrize(("begin", "end"), [(0, -1), (-1, 2), (-3, -1)])
    def test_from_bounds_rejects_negative(self, begin: int, end: int) -> None:
        """Negative bounds are errors, not the whole-buffer default."""
        with pytest.raises(ValueError, match="non-negative bounds"):
            ByteCursor.from_bounds(b"abc", begin, end)

    def test_from_c_string_stops_at_nul(self) -> None:
        """from_c_string ends at the first NUL byte."""
        cursor = ByteCursor.from_c_string(b"ab\x00cd")

        assert cursor.end == 2

    def test_from_c_string_without_nul(self) -> None:
        """from_c_string without NUL covers the whole buffer."""
        cursor = ByteCursor.from_c_string(b"abc")

        assert cursor.end == 3

    def test_from_buffer_borrows_bytearray(self) -> None:
        """from_buffer shares storage with a bytearray."""
        buffer = bytearray(b"xyz")
        cursor = ByteCursor.from_buffer(buffer)
        buffer[0] = ord("X")

        assert cursor.current == ord("X")

    def test_from_buffer_keeps_bytes(self) -> None:
        """from_buffer uses bytes objects directly."""
        data = b"xyz"
        cursor = ByteCursor.from_buffer(data)

        assert cursor.source is data

    def test_from_buffer_casts_other_formats(self) -> None:
        """Non-byte buffers are viewed as unsigned bytes."""
        words = array.array("H", [0x4141])
        cursor = ByteCursor.from_buffer(words)

        assert cursor.remaining == 2
        assert cursor.current == 0x41

    def test_from_buffer_rejects_str(self) -> None:
        """str does not support the buffer protocol."""
        with pytest.raises(TypeError):
            ByteCursor.from_buffer("text")

    def test_rejects_end_beyond_buffer(self) -> None:
        """end past the buffer length raises ValueError."""
        with pytest.raises(ValueError, match="end"):
            ByteCursor(b"abc", 0, 4)

    def test_rejects_pos_beyond_end(self) -> None:
        """pos past end raises ValueError."""
        with pytest.raises(ValueError, match="pos"):
            ByteCursor(b"abc", 3, 2)

    def test_rejects_negative_pos(self) -> None:
        """Negative pos raises ValueError."""
        with pytest.raises(ValueError, match="pos"):
            ByteCursor(b"abc", -1)

    def test_cursor_immutability(self) -> None:
        """Cursor is immutable (frozen dataclass)."""
        cursor = ByteCursor(b"hello")

        with pytest.raises(AttributeError):
            cursor.pos = 2  # type: ignore[misc]

    def test_hash_over_writable_buffer(self) -> None:
        """Cursors over a bytearray view can be hashed and used as keys."""
        cursor = ByteCursor.from_buffer(bytearray(b"abc"))

        seen = {cursor: "first"}

        assert seen[ByteCursor(b"abc")] == "first"
        assert hash(cursor.advance()) != hash(cursor)

    def test_equal_cursors_hash_equal(self) -> None:
        """Equal cursors over different buffer types share a hash."""
        view = ByteCursor.from_buffer(memoryview(bytearray(b"xyz")))
        plain = ByteCursor(b"xyz")

        assert view == plain
        assert hash(view) == hash(plain)


# ============================================================================
# NAVIGATION
# ============================================================================


class TestByteCursorNavigation:
    """Test EOF detection, byte access, and advancing."""

    def test_is_eof_for_empty_source(self) -> None:
        """Empty buffer is immediately at EOF."""
        cursor = ByteCursor(b"")

        assert cursor.is_eof
        assert not cursor

    def test_bool_true_with_bytes_left(self) -> None:
        """Cursor is truthy while bytes remain."""
        assert ByteCursor(b"a")

    def test_current_returns_int(self) -> None:
        """current yields the byte value as an int."""
        assert ByteCursor(b"\xc2").current == 0xC2

    def test_current_raises_at_eof(self) -> None:
        """Accessing current at EOF raises EOFError."""
        cursor = ByteCursor(b"ab", 2)

        with pytest.raises(EOFError, match="Unexpected end of bytes"):
            _ = cursor.current

    def test_current_respects_end_bound(self) -> None:
        """Bytes after the end bound are not visible."""
        cursor = ByteCursor(b"ab", 1, 1)

        assert cursor.is_eof
        assert cursor.peek() is None

    def test_peek_offsets(self) -> None:
        """peek looks ahead without moving."""
        cursor = ByteCursor(b"abc")

        assert cursor.peek(2) == ord("c")
        assert cursor.peek(3) is None
        assert cursor.pos == 0

    def test_advance_returns_new_cursor(self) -> None:
        """advance leaves the original untouched."""
        cursor = ByteCursor(b"abc")
        moved = cursor.advance(2)

        assert cursor.pos == 0
        assert moved.pos == 2
        assert moved.end == cursor.end

    def test_advance_clamps_to_end(self) -> None:
        """advance never passes the end bound."""
        cursor = ByteCursor.from_bounds(b"abcdef", 0, 3)

        assert cursor.advance(10).pos == 3

    def test_slice_to(self) -> None:
        """slice_to copies bytes up to the end bound."""
        cursor = ByteCursor.from_bounds(b"abcdef", 1, 4)

        assert cursor.slice_to(3) == b"bc"
        assert cursor.slice_to(10) == b"bcd"


class TestDecodeResult:
    """Test the decoder result container."""

    def test_holds_value_and_cursor(self) -> None:
        """DecodeResult exposes value and cursor."""
        cursor = ByteCursor(b"A").advance()
        result = DecodeResult(0x41, cursor)

        assert result.value == 0x41
        assert result.cursor.is_eof

    def test_is_frozen(self) -> None:
        """DecodeResult is immutable."""
        result = DecodeResult(1, ByteCursor(b""))

        with pytest.raises(AttributeError):
            result.value = 2  # type: ignore[misc]
