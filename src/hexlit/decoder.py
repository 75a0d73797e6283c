"""
Hex literal decoder.

decode_hex(text) runs the whole pipeline:

  1) scan        -> exact output length (separators and prefix skipped)
  2) parity      -> EvenDigits proof, or OddDigitCount
  3) convert     -> fill a pre-sized buffer pair by pair

Any character outside the digits, the dialect's separators and an allowed
prefix raises InvalidHexDigit. Nothing partial is ever returned.

Examples
  decode_hex("01020304")      == b"\\x01\\x02\\x03\\x04"
  decode_hex("0xDEADBEEF")    == b"\\xde\\xad\\xbe\\xef"
  decode_hex("01_02|03-04")   == b"\\x01\\x02\\x03\\x04"
"""
from __future__ import annotations

from functools import lru_cache
from typing import Optional, Union

from .dialect import STANDARD, Dialect
from .errors import HexLiteralError, InvalidHexDigit
from .parity import EvenDigits, require_even_digits
from .preprocess import BytesLike, Layout, is_prefix_at, scan, skip_separators

HexInput = Union[str, bytes, bytearray, memoryview]

_ORD_0 = ord('0')
_ORD_9 = ord('9')
_ORD_UA = ord('A')
_ORD_UF = ord('F')
_ORD_LA = ord('a')
_ORD_LF = ord('f')


def to_ordinal(c: int, index: Optional[int] = None) -> int:
    """Map one ASCII hex digit to 0..15."""
    if _ORD_0 <= c <= _ORD_9:
        return c - _ORD_0
    if _ORD_UA <= c <= _ORD_UF:
        return c - _ORD_UA + 10
    if _ORD_LA <= c <= _ORD_LF:
        return c - _ORD_LA + 10
    raise InvalidHexDigit(chr(c), index)


def as_input_bytes(text: HexInput) -> bytes:
    if isinstance(text, str):
        try:
            return text.encode('ascii')
        except UnicodeEncodeError as e:
            raise InvalidHexDigit(text[e.start], e.start) from None
    if isinstance(text, (bytes, bytearray, memoryview)):
        return bytes(text)
    raise TypeError(f"hex literal must be str or bytes-like, not {type(text).__name__}")


def convert(data: BytesLike, proof: EvenDigits, dialect: Dialect = STANDARD) -> bytes:
    """Second pass: pair significant digits into ``proof.output_length`` bytes."""
    n = len(data)
    out = bytearray(proof.output_length)
    size = len(out)
    w = 0
    i = 0
    pair_index = 0
    while i < n:
        c = data[i]
        if dialect.is_separator(c):
            i += 1
            continue
        j = skip_separators(data, i + 1, dialect)
        if not (dialect.allows_prefix(pair_index) and is_prefix_at(data, i, j)):
            if j >= n or w >= size:
                raise HexLiteralError(f"digit count {proof.digit_count} does not match the input")
            out[w] = (to_ordinal(c, i) << 4) | to_ordinal(data[j], j)
            w += 1
        pair_index += 1
        i = j + 1
    if w != size:
        raise HexLiteralError(f"digit count {proof.digit_count} does not match the input")
    return bytes(out)


def layout(text: HexInput, dialect: Dialect = STANDARD) -> Layout:
    return scan(as_input_bytes(text), dialect)


def _decode(data: bytes, dialect: Dialect) -> bytes:
    proof = require_even_digits(scan(data, dialect).digit_count)
    return convert(data, proof, dialect)


@lru_cache(maxsize=1024)
def _decode_str(text: str, dialect: Dialect) -> bytes:
    return _decode(as_input_bytes(text), dialect)


def decode_hex(text: HexInput, dialect: Dialect = STANDARD) -> bytes:
    """Decode a hex literal into bytes.

    Args:
        text: hex digits with optional separators and ``0x`` prefix.
        dialect: separator set and prefix rule (default STANDARD).

    Returns:
        The decoded bytes; ``b""`` for an empty or separator-only literal.

    Raises:
        OddDigitCount: the number of significant digits is odd.
        InvalidHexDigit: a character is neither digit, separator nor prefix.
    """
    if isinstance(text, str):
        return _decode_str(text, dialect)
    return _decode(as_input_bytes(text), dialect)
