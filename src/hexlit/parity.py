"""
Parity guard between the preprocessor and the decoder.

``EvenDigits`` is the only way to hand an output length to the decoder, and
it cannot be built from an odd count. A literal written at module level
therefore fails when the module is imported, before any buffer exists.
"""
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from .errors import OddDigitCount


class Parity(Enum):
    EVEN = 0
    ODD = 1


def parity_of(count: int) -> Parity:
    return Parity(count % 2)


@dataclass(frozen=True)
class EvenDigits:
    """Proof that a literal has an even number of significant digits."""
    digit_count: int

    def __post_init__(self) -> None:
        if self.digit_count < 0:
            raise ValueError("digit count must be non-negative")
        if parity_of(self.digit_count) is Parity.ODD:
            raise OddDigitCount(self.digit_count)

    @property
    def output_length(self) -> int:
        return self.digit_count // 2


def require_even_digits(count: int) -> EvenDigits:
    return EvenDigits(count)
