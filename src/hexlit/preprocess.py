"""
First pass over a hex literal: work out how many bytes are not digits.

The walk goes left to right in pairs. A significant byte starts a pair; the
separators after it are skipped to find the second half. When the dialect
allows a prefix at that pair and the pair reads ``0`` + ``x``/``X``, both
bytes are skipped instead of being counted as digits.

Nothing here validates digits. ``scan`` is total over any byte sequence;
bad characters are the decoder's business.
"""
from __future__ import annotations

from typing import NamedTuple, Union

from .dialect import PREFIX_MARKS, PREFIX_ZERO, STANDARD, Dialect

BytesLike = Union[bytes, bytearray, memoryview]


class Layout(NamedTuple):
    length: int          # output bytes (digit_count // 2)
    skip_count: int      # separators + prefix bytes
    digit_count: int     # significant hex digits
    prefix_count: int    # recognized 0x markers


def skip_separators(data: BytesLike, start: int, dialect: Dialect = STANDARD) -> int:
    """Index of the first non-separator at or after ``start`` (``len(data)`` if none)."""
    n = len(data)
    i = start
    while i < n and dialect.is_separator(data[i]):
        i += 1
    return i


def is_prefix_at(data: BytesLike, i: int, j: int) -> bool:
    """True when data[i] / data[j] form a ``0x``/``0X`` marker."""
    return j < len(data) and data[i] == PREFIX_ZERO and data[j] in PREFIX_MARKS


def scan(data: BytesLike, dialect: Dialect = STANDARD) -> Layout:
    n = len(data)
    skipped = 0
    prefixes = 0
    pair_index = 0
    i = 0
    while i < n:
        if dialect.is_separator(data[i]):
            skipped += 1
            i += 1
            continue
        j = skip_separators(data, i + 1, dialect)
        skipped += j - (i + 1)
        if dialect.allows_prefix(pair_index) and is_prefix_at(data, i, j):
            skipped += 2
            prefixes += 1
        pair_index += 1
        # a pair start with nothing after it is a lone digit; it stays counted
        i = j + 1
    digits = n - skipped
    return Layout(digits // 2, skipped, digits, prefixes)


def count_skipped(data: BytesLike, dialect: Dialect = STANDARD) -> int:
    return scan(data, dialect).skip_count
