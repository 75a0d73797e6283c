"""
Named hex inputs (small, focused)

Goals
- Wrap decode_hex with the name of the value being parsed, so errors say
  which argument was wrong.
- Optional fixed-length validation.
- A "file or hex" reader for CLI flags.
"""
from __future__ import annotations

from typing import Optional

from .decoder import HexInput, decode_hex
from .dialect import STANDARD, Dialect
from .errors import HexLiteralError, LengthMismatch, UsageError


def is_hex_str(s: Optional[HexInput], dialect: Dialect = STANDARD) -> bool:
    """True if ``s`` decodes cleanly under ``dialect``."""
    if s is None:
        return False
    try:
        decode_hex(s, dialect)
    except HexLiteralError:
        return False
    return True


def parse_hex(name: str, s: Optional[HexInput], length: Optional[int] = None,
              dialect: Dialect = STANDARD) -> bytes:
    """Parse a hex literal into bytes with optional fixed-length validation.

    Args:
        name: human-readable name for error messages.
        s: hex literal (separators and prefix per ``dialect``).
        length: expected length in bytes (optional). If set, enforce exact length.

    Returns:
        Decoded bytes.
    """
    if s is None:
        raise UsageError(f"{name} is required")
    try:
        b = decode_hex(s, dialect)
    except HexLiteralError as e:
        e.args = (f"Invalid hex for {name}: {e}",)
        raise
    if length is not None and len(b) != length:
        raise LengthMismatch(name, length, len(b))
    return b


def file_or_hex(name: str, hex_value: Optional[str], file_path: Optional[str], *,
                length: Optional[int] = None, dialect: Dialect = STANDARD) -> bytes:
    """Read bytes from a hex literal or a file containing one.

    Precedence: hex_value if provided; otherwise file_path is used.
    Raises if neither is provided.
    """
    if hex_value is not None:
        return parse_hex(name, hex_value, length, dialect)
    if file_path is not None:
        with open(file_path, 'rt') as f:
            return parse_hex(name, f.read().strip(), length, dialect)
    raise UsageError(f"{name} required")
