"""
Bare-token literals.

    hexlit('0a', '"01"', '0C', '02') == b"\\x0a\\x01\\x0c\\x02"

Tokens are rendered into one text the way a token stream is stringified,
single spaces between tokens, and then handed to decode_hex. Quotes are
separators, so a quoted token decodes exactly like an unquoted one.

literal_table() decodes a set of named constants in one go. Used at module
level, a bad literal stops the import and the error names the constant.
"""
from __future__ import annotations

from types import MappingProxyType
from typing import Mapping, Union

from .decoder import decode_hex
from .dialect import STANDARD, Dialect
from .errors import HexLiteralError

Token = Union[str, bytes, bytearray]


def render_tokens(*tokens: Token) -> str:
    parts = []
    for tok in tokens:
        if isinstance(tok, (bytes, bytearray)):
            tok = bytes(tok).decode('latin-1')
        elif not isinstance(tok, str):
            raise TypeError(f"hex token must be str or bytes, not {type(tok).__name__}")
        parts.append(tok)
    return ' '.join(parts)


def hexlit(*tokens: Token, dialect: Dialect = STANDARD) -> bytes:
    return decode_hex(render_tokens(*tokens), dialect)


def literal_table(dialect: Dialect = STANDARD, **literals: str) -> Mapping[str, bytes]:
    """Decode named literals eagerly into a read-only mapping."""
    table = {}
    for name, text in literals.items():
        try:
            table[name] = decode_hex(text, dialect)
        except HexLiteralError as e:
            e.args = (f"{name}: {e}",)
            raise
    return MappingProxyType(table)
