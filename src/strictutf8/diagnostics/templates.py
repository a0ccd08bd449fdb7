"""Error message templates.

Centralized error message templates for testable, consistent error messages.
Python 3.13+. Zero external dependencies.
"""

from .codes import ByteSpan, Diagnostic, DiagnosticCode

__all__ = ["ErrorTemplate", "format_code_point"]


def format_code_point(code_point: int) -> str:
    """Render a code point in U+XXXX notation (at least 4 hex digits)."""
    if code_point < 0:
        return f"-U+{-code_point:04X}"
    return f"U+{code_point:04X}"


class ErrorTemplate:
    """Centralized error message templates.

    All error messages are created here. NO f-strings in exception constructors!
    This provides:
        - Testable error messages
        - Consistent formatting
        - Documentation of all error cases
    """

    # Base documentation URLs
    _UTF8_DOCS = "https://www.cl.cam.ac.uk/~mgk25/unicode.html#utf-8"
    _VALIDITY_DOCS = "http://unicode.org/faq/utf_bom.html#utf8-4"

    @staticmethod
    def invalid_code_point(code_point: int, span: ByteSpan | None = None) -> Diagnostic:
        """Code point is a surrogate, a reserved marker, or out of range.

        Args:
            code_point: The rejected value
            span: Bytes that produced it (decoder only)

        Returns:
            Diagnostic for INVALID_CODE_POINT
        """
        rendered = format_code_point(code_point)
        msg = f"Invalid code point {rendered}"
        return Diagnostic(
            code=DiagnosticCode.INVALID_CODE_POINT,
            message=msg,
            span=span,
            hint=(
                "Surrogates (U+D800..U+DFFF), U+FFFE, U+FFFF and values above "
                "U+7FFFFFFF cannot be encoded"
            ),
            help_url=ErrorTemplate._VALIDITY_DOCS,
            code_point=code_point,
        )

    @staticmethod
    def not_json_representable(code_point: int, span: ByteSpan) -> Diagnostic:
        """Valid UTF-8 code point beyond the range JSON escapes can express.

        Args:
            code_point: The decoded value (above U+10FFFF)
            span: Bytes that produced it

        Returns:
            Diagnostic for INVALID_CODE_POINT
        """
        rendered = format_code_point(code_point)
        msg = f"Code point {rendered} cannot be escaped in JSON"
        return Diagnostic(
            code=DiagnosticCode.INVALID_CODE_POINT,
            message=msg,
            span=span,
            hint="JSON \\u escapes only reach U+10FFFF through surrogate pairs",
            code_point=code_point,
        )

    @staticmethod
    def invalid_introducer(byte: int, span: ByteSpan) -> Diagnostic:
        """Byte cannot start a sequence or cannot continue one.

        Args:
            byte: The offending byte value
            span: Bytes examined so far for this code point

        Returns:
            Diagnostic for INVALID_INTRODUCER
        """
        if span.end - span.start == 1:
            msg = f"Invalid UTF-8 introducer 0x{byte:02X}"
            hint = "A sequence must start with an ASCII byte or a 0b11xx_xxxx leader"
        else:
            msg = f"Invalid UTF-8 continuation byte 0x{byte:02X}"
            hint = "Continuation bytes must have the form 0b10xx_xxxx"
        return Diagnostic(
            code=DiagnosticCode.INVALID_INTRODUCER,
            message=msg,
            span=span,
            hint=hint,
            help_url=ErrorTemplate._UTF8_DOCS,
        )

    @staticmethod
    def unexpected_ascii(byte: int, span: ByteSpan) -> Diagnostic:
        """ASCII byte found where a continuation byte was expected.

        Args:
            byte: The offending byte value
            span: Bytes examined so far for this code point

        Returns:
            Diagnostic for UNEXPECTED_ASCII
        """
        msg = f"Expected UTF-8 continuation byte, got ASCII 0x{byte:02X}"
        return Diagnostic(
            code=DiagnosticCode.UNEXPECTED_ASCII,
            message=msg,
            span=span,
            hint="The multi-byte sequence was cut short by plain ASCII text",
            help_url=ErrorTemplate._UTF8_DOCS,
        )

    @staticmethod
    def incomplete_sequence(expected: int, received: int, span: ByteSpan) -> Diagnostic:
        """Input ended in the middle of a multi-byte sequence.

        Args:
            expected: Total byte count announced by the introducer
            received: Bytes actually available
            span: Bytes consumed before the input ended

        Returns:
            Diagnostic for INCOMPLETE_SEQUENCE
        """
        msg = f"Incomplete UTF-8 code point: expected {expected} bytes, got {received}"
        return Diagnostic(
            code=DiagnosticCode.INCOMPLETE_SEQUENCE,
            message=msg,
            span=span,
            hint="The input was truncated inside a multi-byte sequence",
            help_url=ErrorTemplate._UTF8_DOCS,
        )

    @staticmethod
    def empty_input(position: int) -> Diagnostic:
        """Decode attempted on an exhausted byte range.

        Args:
            position: Offset of the exhausted cursor

        Returns:
            Diagnostic for EMPTY_INPUT
        """
        return Diagnostic(
            code=DiagnosticCode.EMPTY_INPUT,
            message="No bytes for UTF-8 code point",
            span=ByteSpan(position, position),
            hint="Check is_eof before decoding",
        )

    @staticmethod
    def overlong_sequence(code_point: int, length: int, span: ByteSpan) -> Diagnostic:
        """Code point encoded with more bytes than necessary.

        Args:
            code_point: The decoded value
            length: Number of bytes used by the sequence
            span: Bytes of the overlong sequence

        Returns:
            Diagnostic for OVERLONG_SEQUENCE
        """
        rendered = format_code_point(code_point)
        msg = f"Overlong {length}-byte UTF-8 sequence for {rendered}"
        return Diagnostic(
            code=DiagnosticCode.OVERLONG_SEQUENCE,
            message=msg,
            span=span,
            hint="Overlong forms can smuggle characters past filters and are never accepted",
            help_url=ErrorTemplate._UTF8_DOCS,
            code_point=code_point,
        )

    @staticmethod
    def input_too_large(size: int, max_size: int) -> Diagnostic:
        """Buffer exceeds the configured size bound.

        Args:
            size: Actual buffer size in bytes
            max_size: Configured maximum

        Returns:
            Diagnostic for INPUT_TOO_LARGE
        """
        msg = f"Input of {size} bytes exceeds limit of {max_size} bytes"
        return Diagnostic(
            code=DiagnosticCode.INPUT_TOO_LARGE,
            message=msg,
            hint="Split the input or raise max_size",
        )
