"""Tests for the UTF-8 lookup tables and limits."""

from __future__ import annotations

from strictutf8 import constants
from strictutf8.constants import (
    BITS_PER_CHUNK,
    CODE_POINT_RANGES,
    CONTINUATION_TAG,
    INTRODUCER_BITS,
    MAX_CODE_POINT,
    MAX_CODEPOINT_BYTES,
)


class TestLookupTables:
    """Length Table and Introducer Table invariants."""

    def test_tables_have_one_entry_per_length(self) -> None:
        """Both tables have MAX_CODEPOINT_BYTES entries."""
        assert len(CODE_POINT_RANGES) == MAX_CODEPOINT_BYTES
        assert len(INTRODUCER_BITS) == MAX_CODEPOINT_BYTES

    def test_tables_are_immutable(self) -> None:
        """Tables are tuples, not lists."""
        assert isinstance(CODE_POINT_RANGES, tuple)
        assert isinstance(INTRODUCER_BITS, tuple)

    def test_ranges_ascending(self) -> None:
        """Length thresholds strictly increase."""
        assert list(CODE_POINT_RANGES) == sorted(set(CODE_POINT_RANGES))

    def test_introducers_ascending(self) -> None:
        """Introducer patterns strictly increase (required by bisect)."""
        assert list(INTRODUCER_BITS) == sorted(set(INTRODUCER_BITS))

    def test_range_matches_payload_bits(self) -> None:
        """An n-byte sequence carries exactly log2(threshold) payload bits."""
        for index, bound in enumerate(CODE_POINT_RANGES[1:], start=2):
            leader_bits = 7 - index
            assert bound == 1 << (leader_bits + BITS_PER_CHUNK * (index - 1))

    def test_introducer_prefix_length(self) -> None:
        """The n-byte introducer has n leading one bits."""
        for length, bits in enumerate(INTRODUCER_BITS, start=2):
            assert f"{bits:08b}".startswith("1" * length + "0")

    def test_known_values(self) -> None:
        """Spot-check the documented boundaries."""
        assert CODE_POINT_RANGES[0] == 0x80
        assert CODE_POINT_RANGES[-1] == 0x80000000
        assert INTRODUCER_BITS[0] == 0xC0
        assert INTRODUCER_BITS[-1] == 0xFE
        assert MAX_CODE_POINT == 0x7FFFFFFF
        assert CONTINUATION_TAG == 0xC0


class TestInputLimits:
    """Input limit configuration."""

    def test_max_input_size_positive(self) -> None:
        """Default input bound is 10 MiB."""
        assert constants.MAX_INPUT_SIZE == 10 * 1024 * 1024

    def test_all_exports_exist(self) -> None:
        """Every name in __all__ is defined."""
        for name in constants.__all__:
            assert hasattr(constants, name)
