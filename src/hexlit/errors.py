"""
Typed errors for hexlit.

Every failure of the decoder is fatal: nothing is returned, the caller gets
one of these. They derive from ValueError so code that already guards hex
parsing with ``except ValueError`` keeps working.

The CLI maps each error to a stable exit code (``exit_code`` attribute).
"""
from __future__ import annotations

from typing import Optional

EXIT_OK = 0
EXIT_USAGE = 2
EXIT_GENERIC = 10
EXIT_ODD_DIGITS = 11
EXIT_INVALID_DIGIT = 12
EXIT_LENGTH_MISMATCH = 13


class HexLiteralError(ValueError):
    """Base error for hexlit."""

    exit_code: int = EXIT_GENERIC


class UsageError(HexLiteralError):
    exit_code = EXIT_USAGE


class OddDigitCount(HexLiteralError):
    exit_code = EXIT_ODD_DIGITS

    def __init__(self, digit_count: int) -> None:
        self.digit_count = digit_count
        super().__init__(
            f"hex literal has an odd number of digits ({digit_count}); "
            "every byte needs exactly two hex digits"
        )


class InvalidHexDigit(HexLiteralError):
    exit_code = EXIT_INVALID_DIGIT

    def __init__(self, char: str, index: Optional[int] = None) -> None:
        self.char = char
        self.index = index
        where = '' if index is None else f' at index {index}'
        super().__init__(f"invalid hex digit {char!r}{where}")


class LengthMismatch(HexLiteralError):
    exit_code = EXIT_LENGTH_MISMATCH

    def __init__(self, name: str, expected: int, actual: int) -> None:
        self.expected = expected
        self.actual = actual
        super().__init__(f"{name} must be {expected} bytes (got {actual})")
