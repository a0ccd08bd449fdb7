#!/usr/bin/env python3
"""UTF-8 Codec Fuzzer (Atheris).

Targets: strictutf8.codec (decode, encode), strictutf8.text (decode_bytes,
encode_code_points)

Invariants checked on every iteration:
- decode() never raises on any byte buffer; failures are returned Utf8Errors
- Every accepted sequence re-encodes to exactly the consumed bytes
- Cursors only move forward and never past their end
- encode_code_points() output decodes back to the same code points

Each iteration picks an input shape from a weighted rotation so that
malformed shapes keep getting exercised however libFuzzer steers coverage.
A JSON summary (counts per shape, per error class, RSS growth) is written
on exit.

Usage:
    python fuzz_atheris/fuzz_codec.py [--report PATH] [libFuzzer flags...]

Requires Python 3.13+ and the "fuzz" extra (atheris, psutil).
"""

from __future__ import annotations

import argparse
import atexit
import itertools
import json
import logging
import os
import pathlib
import sys
from collections import Counter
from dataclasses import dataclass, field

try:
    import atheris
    import psutil
except ImportError as exc:
    print(f"fuzz_codec needs the fuzz extra ({exc.name} missing):", file=sys.stderr)
    print('    pip install -e ".[fuzz]"', file=sys.stderr)
    sys.exit(1)

logging.getLogger("strictutf8").setLevel(logging.CRITICAL)

with atheris.instrument_imports(include=["strictutf8"]):
    from strictutf8.codec import ByteCursor, decode, encode
    from strictutf8.diagnostics import Utf8Error
    from strictutf8.text import decode_bytes, encode_code_points


class CodecFuzzError(Exception):
    """Raised when an invariant breach is detected."""


# Input shapes and their share of the rotation.
_SHAPES: tuple[tuple[str, int], ...] = (
    ("raw_bytes", 10),
    ("well_formed", 8),
    ("truncated", 6),
    ("overlong", 6),
    ("encoded_surrogate", 4),
    ("extended_planes", 5),
    ("stray_continuation", 4),
    ("code_point_ints", 8),
)

_ROTATION = itertools.cycle([name for name, weight in _SHAPES for _ in range(weight)])

_LEADERS = (0xC0, 0xE0, 0xF0, 0xF8, 0xFC)

_MEMORY_SAMPLE_EVERY = 1000


@dataclass
class RunStats:
    """Counters for one fuzzing session."""

    iterations: int = 0
    code_points: int = 0
    encode_rejections: int = 0
    shapes: Counter[str] = field(default_factory=Counter)
    errors: Counter[str] = field(default_factory=Counter)
    rss_start_mb: float = 0.0
    rss_peak_mb: float = 0.0

    def sample_rss(self) -> None:
        """Record current RSS, remembering the first sample as the baseline."""
        rss_mb = psutil.Process(os.getpid()).memory_info().rss / (1024 * 1024)
        if not self.rss_start_mb:
            self.rss_start_mb = rss_mb
        self.rss_peak_mb = max(self.rss_peak_mb, rss_mb)

    def as_dict(self) -> dict[str, object]:
        """JSON-ready summary of the session."""
        return {
            "iterations": self.iterations,
            "code_points": self.code_points,
            "encode_rejections": self.encode_rejections,
            "shapes": dict(self.shapes),
            "errors": dict(self.errors),
            "rss_growth_mb": round(self.rss_peak_mb - self.rss_start_mb, 2),
        }


_stats = RunStats()
_report_path = pathlib.Path(".fuzz_atheris_corpus") / "codec" / "fuzz_codec_report.json"


def _write_report() -> None:
    report = json.dumps(_stats.as_dict(), sort_keys=True)
    print(f"\n[fuzz_codec] {report}", file=sys.stderr, flush=True)
    try:
        _report_path.parent.mkdir(parents=True, exist_ok=True)
        _report_path.write_text(report, encoding="utf-8")
    except OSError as exc:
        print(f"[fuzz_codec] could not write {_report_path}: {exc}", file=sys.stderr)


# --- Input Generation ---


def _sequence(length: int, value: int) -> bytes:
    """Pack value into a length-byte sequence regardless of minimality."""
    if length == 1:
        return bytes([value & 0x7F])
    # An n-byte sequence carries 5n + 1 payload bits.
    value &= (1 << (5 * length + 1)) - 1
    tail = []
    for _ in range(length - 1):
        tail.append(0x80 | (value & 0x3F))
        value >>= 6
    return bytes([_LEADERS[length - 2] | value, *reversed(tail)])


def _generate_input(fdp: atheris.FuzzedDataProvider, shape: str) -> bytes:  # noqa: PLR0911
    """Generate a byte buffer of the given shape."""
    match shape:
        case "raw_bytes":
            return fdp.ConsumeBytes(fdp.ConsumeIntInRange(0, 64))
        case "well_formed":
            text = fdp.ConsumeUnicodeNoSurrogates(fdp.ConsumeIntInRange(0, 32))
            return text.encode("utf-8")
        case "truncated":
            text = fdp.ConsumeUnicodeNoSurrogates(fdp.ConsumeIntInRange(1, 16))
            data = text.encode("utf-8")
            return data[: fdp.ConsumeIntInRange(0, len(data))]
        case "overlong":
            value = fdp.ConsumeIntInRange(0, 0xFFFF)
            return _sequence(fdp.ConsumeIntInRange(2, 6), value)
        case "encoded_surrogate":
            return _sequence(3, fdp.ConsumeIntInRange(0xD800, 0xDFFF))
        case "extended_planes":
            length = fdp.ConsumeIntInRange(4, 6)
            return _sequence(length, fdp.ConsumeIntInRange(0x110000, 0x7FFFFFFF))
        case "stray_continuation":
            return bytes([fdp.ConsumeIntInRange(0x80, 0xBF)]) + fdp.ConsumeBytes(8)
        case _:
            return fdp.ConsumeBytes(fdp.ConsumeIntInRange(0, 8))


# --- Invariant Checks ---


def _check_decode_walk(data: bytes) -> None:
    """Walk the buffer with decode(), checking every step."""
    cursor = ByteCursor(data)
    while not cursor.is_eof:
        result, errors = decode(cursor)
        if result is None:
            if len(errors) != 1 or not isinstance(errors[0], Utf8Error):
                msg = f"decode() failure without a single Utf8Error: {errors!r}"
                raise CodecFuzzError(msg)
            _stats.errors[type(errors[0]).__name__] += 1
            # Resync one byte past the failed sequence start.
            cursor = cursor.advance()
            continue

        consumed = data[cursor.pos : result.cursor.pos]
        if not consumed or result.cursor.pos > cursor.end:
            msg = f"cursor moved from {cursor.pos} to {result.cursor.pos}"
            raise CodecFuzzError(msg)
        encoded, _ = encode(result.value)
        if encoded != consumed:
            msg = f"U+{result.value:04X} decoded from {consumed!r} re-encodes to {encoded!r}"
            raise CodecFuzzError(msg)
        _stats.code_points += 1
        cursor = result.cursor


def _check_code_points(fdp: atheris.FuzzedDataProvider) -> None:
    """Encode fuzzed integers and decode them back."""
    count = fdp.ConsumeIntInRange(0, 8)
    code_points = [fdp.ConsumeIntInRange(-1, 0x80000000) for _ in range(count)]
    data, errors = encode_code_points(code_points)
    if data is None:
        _stats.encode_rejections += 1
        return
    decoded, errors = decode_bytes(data)
    if errors or list(decoded or ()) != code_points:
        msg = f"{code_points!r} did not survive encode/decode: {errors!r}"
        raise CodecFuzzError(msg)


# --- Main Entry Point ---


def test_one_input(data: bytes) -> None:
    """Atheris entry point: exercise the UTF-8 codec."""
    if _stats.iterations % _MEMORY_SAMPLE_EVERY == 0:
        _stats.sample_rss()
    _stats.iterations += 1

    shape = next(_ROTATION)
    _stats.shapes[shape] += 1
    fdp = atheris.FuzzedDataProvider(data)

    if shape == "code_point_ints":
        _check_code_points(fdp)
    else:
        _check_decode_walk(_generate_input(fdp, shape))


def main() -> None:
    """Run the codec fuzzer; unknown arguments go to libFuzzer."""
    global _report_path  # noqa: PLW0603  # pylint: disable=global-statement

    parser = argparse.ArgumentParser(
        description="UTF-8 codec fuzzer using Atheris/libFuzzer",
        epilog="All unrecognized arguments are passed to libFuzzer.",
    )
    parser.add_argument(
        "--report",
        type=pathlib.Path,
        default=_report_path,
        help=f"Where to write the JSON summary (default: {_report_path})",
    )
    args, remaining = parser.parse_known_args()
    _report_path = args.report

    if not any(arg.startswith("-rss_limit_mb") for arg in remaining):
        remaining.append("-rss_limit_mb=2048")

    atexit.register(_write_report)
    atheris.Setup([sys.argv[0], *remaining], test_one_input)
    atheris.Fuzz()


if __name__ == "__main__":
    main()
