"""UTF-8 codec core.

Validity check, encoder and decoder layered on the lookup tables in
strictutf8.constants. Every function is synchronous, pure, and safe to
call from multiple threads on independent inputs.

Public API:
    is_valid_code_point - Validity predicate
    encode - Returns tuple[bytes | None, tuple[Utf8Error, ...]]
    decode - Returns tuple[DecodeResult | None, tuple[Utf8Error, ...]]
    append_utf8, encoded_length, to_utf8 - Encoder conveniences
    consume_code_point - Raising decoder convenience
    ByteCursor, DecodeResult - Cursor types
"""

from .cursor import ByteCursor, ByteSource, DecodeResult
from .decoder import consume_code_point, decode
from .encoder import ByteSink, append_utf8, encode, encoded_length, to_utf8
from .validity import is_valid_code_point

__all__ = [
    "ByteCursor",
    "ByteSink",
    "ByteSource",
    "DecodeResult",
    "append_utf8",
    "consume_code_point",
    "decode",
    "encode",
    "encoded_length",
    "is_valid_code_point",
    "to_utf8",
]
