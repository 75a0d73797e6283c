"""
Hex literal dialects.

A dialect is the configuration shared by the preprocessor and the decoder:
which bytes are separators and where a ``0x``/``0X`` prefix may appear.

Built-in dialects
- BASIC:    space, underscore, double-quote; no prefix.
- STANDARD: space, underscore, pipe, dash, double-quote, newline; one prefix,
            only in front of the first digit (the default).
- LENIENT:  STANDARD separators plus tab and carriage return; a prefix is
            accepted in front of every byte ("0x0A 0x0B").
"""
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Dict, FrozenSet, Iterable

from .errors import UsageError

HEX_DIGITS = frozenset(b"0123456789abcdefABCDEF")
PREFIX_ZERO = ord('0')
PREFIX_MARKS = frozenset(b"xX")


class PrefixRule(Enum):
    NONE = "none"              # 0x is never special
    LEADING = "leading"        # only before the first significant digit
    EVERY_PAIR = "every-pair"  # before any byte


def separator_set(chars: Iterable[str]) -> FrozenSet[int]:
    return frozenset(ord(c) for c in chars)


@dataclass(frozen=True)
class Dialect:
    """Separator set plus prefix rule.

    Attributes:
        name: short identifier used by the CLI (``--dialect``).
        separators: byte values ignored for pairing.
        prefix: where a ``0x``/``0X`` marker is recognized.
    """
    name: str
    separators: FrozenSet[int]
    prefix: PrefixRule = PrefixRule.LEADING

    def __post_init__(self) -> None:
        object.__setattr__(self, 'separators', frozenset(self.separators))

    def is_separator(self, c: int) -> bool:
        return c in self.separators

    def allows_prefix(self, pair_index: int) -> bool:
        if self.prefix is PrefixRule.EVERY_PAIR:
            return True
        if self.prefix is PrefixRule.LEADING:
            return pair_index == 0
        return False

    def validate(self) -> "Dialect":
        if not self.name:
            raise UsageError("dialect name must not be empty")
        clash = self.separators & (HEX_DIGITS | PREFIX_MARKS)
        if clash:
            shown = ''.join(sorted(chr(c) for c in clash))
            raise UsageError(f"dialect {self.name!r}: separators overlap hex digits or prefix ({shown})")
        if any(c > 0x7F for c in self.separators):
            raise UsageError(f"dialect {self.name!r}: separators must be ASCII")
        return self


BASIC = Dialect('basic', separator_set(' _"'), PrefixRule.NONE).validate()
STANDARD = Dialect('standard', separator_set(' _|-"\n'), PrefixRule.LEADING).validate()
LENIENT = Dialect('lenient', separator_set(' _|-"\n\t\r'), PrefixRule.EVERY_PAIR).validate()

DIALECTS: Dict[str, Dialect] = {d.name: d for d in (BASIC, STANDARD, LENIENT)}


def get_dialect(name: str) -> Dialect:
    try:
        return DIALECTS[name.lower()]
    except KeyError:
        known = ', '.join(sorted(DIALECTS))
        raise UsageError(f"unknown dialect {name!r} (expected one of: {known})") from None
