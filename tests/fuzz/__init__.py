"""Fuzz testing infrastructure for strictutf8.

This package contains:
- shadow_codec: Simple reference implementation for differential testing
- test_codec_oracle: Differential and state machine fuzzers against the shadow

Python 3.13+.
"""
