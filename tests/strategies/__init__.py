"""Hypothesis strategies for strictutf8 property-based testing.

Usage:
    from tests.strategies import valid_code_points, overlong_sequences

Event-Emitting Strategies (HypoFuzz-Optimized):
    These strategies emit hypothesis.event() calls for coverage-guided fuzzing:
    - code_points_by_length, overlong_sequences
"""

from .utf8 import (
    arbitrary_bytes,
    code_points_by_length,
    continuation_bytes,
    invalid_code_points,
    leader_bytes,
    overlong_sequences,
    raw_encode,
    surrogate_code_points,
    valid_code_points,
)

__all__ = [
    "arbitrary_bytes",
    "code_points_by_length",
    "continuation_bytes",
    "invalid_code_points",
    "leader_bytes",
    "overlong_sequences",
    "raw_encode",
    "surrogate_code_points",
    "valid_code_points",
]
