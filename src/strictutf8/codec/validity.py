"""Code point validity predicate shared by the encoder and decoder."""

from strictutf8.constants import (
    CODE_POINT_RANGES,
    NONCHARACTER_FFFE,
    NONCHARACTER_FFFF,
    SURROGATE_RANGE_END,
    SURROGATE_RANGE_START,
)

__all__ = ["is_valid_code_point"]


def is_valid_code_point(code_point: int) -> bool:
    """Return True exactly if the code point can be encoded as UTF-8.

    Invalid code points are UTF-16 surrogates, U+FFFE and U+FFFF, negative
    values, and values at or above 0x80000000 (more than 31 bits). Values
    that are not integers are never valid.

    See http://unicode.org/faq/utf_bom.html#utf8-4.

    Example:
        >>> is_valid_code_point(0x41)
        True
        >>> is_valid_code_point(0xD800)
        False
        >>> is_valid_code_point(0x7FFFFFFF)
        True
    """
    if not isinstance(code_point, int):
        return False
    return not (
        SURROGATE_RANGE_START <= code_point <= SURROGATE_RANGE_END
        or code_point in (NONCHARACTER_FFFE, NONCHARACTER_FFFF)
        or code_point < 0
        or code_point >= CODE_POINT_RANGES[-1]
    )
