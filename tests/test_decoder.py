import random

import pytest

from hexlit.decoder import as_input_bytes, convert, decode_hex, layout, to_ordinal
from hexlit.dialect import LENIENT
from hexlit.errors import HexLiteralError, InvalidHexDigit, OddDigitCount
from hexlit.parity import EvenDigits


@pytest.mark.parametrize('text,expected', [
    ('01020304', [1, 2, 3, 4]),
    ('a1b2c3d4', [0xA1, 0xB2, 0xC3, 0xD4]),
    ('E5E69092', [0xE5, 0xE6, 0x90, 0x92]),
    ('0a0B0C0d', [10, 11, 12, 13]),
    ('01 02 03 04', [1, 2, 3, 4]),
    ('E5 E6 90 92', [0xE5, 0xE6, 0x90, 0x92]),
    ('0a 0B 0C 0d', [10, 11, 12, 13]),
    ('0F 03-0B 0C-0d 0E', [15, 3, 11, 12, 13, 14]),
    ('1a 0_b 0C 0d', [0x1a, 11, 12, 13]),
    ('"de" "ad"', [0xDE, 0xAD]),
    ('0XdeadBEEF', [0xDE, 0xAD, 0xBE, 0xEF]),
])
def test_decode_hex_vectors(text: str, expected: list) -> None:
    assert decode_hex(text) == bytes(expected)


def test_case_insensitive():
    assert decode_hex('a1b2') == decode_hex('A1B2') == b'\xa1\xb2'


def test_separator_invariance():
    a = decode_hex('01020304')
    assert a == decode_hex('01 02 03 04')
    assert a == decode_hex('01_02|03-04')
    assert a == decode_hex('01\n02\n03\n04\n')


def test_prefix_is_skipped():
    assert decode_hex('0xDEADBEEF') == decode_hex('DEADBEEF') == b'\xde\xad\xbe\xef'
    assert decode_hex('0xe9e7cea3dedca5984780bafc599bd69add087d56') == bytes([
        0xE9, 0xE7, 0xCE, 0xA3, 0xDE, 0xDC, 0xA5, 0x98, 0x47, 0x80, 0xBA, 0xFC,
        0x59, 0x9B, 0xD6, 0x9A, 0xDD, 0x08, 0x7D, 0x56,
    ])


def test_new_lines_do_not_matter():
    a = decode_hex("""
        00000000 00000000 00000000
        00000000
        00000000 00000000 00000000 00000000 00000000
    """)
    b = decode_hex(' '.join(['00000000'] * 9))
    assert a == b == bytes(36)


@pytest.mark.parametrize('text', ['', '   ', '_|-', '0x'])
def test_empty_literals(text: str) -> None:
    assert decode_hex(text) == b''


def test_roundtrip_lower_and_upper():
    rng = random.Random(1234)
    for n in (0, 1, 2, 31, 256):
        data = bytes(rng.randrange(256) for _ in range(n))
        assert decode_hex(data.hex()) == data
        assert decode_hex(data.hex().upper()) == data


def test_deterministic():
    assert decode_hex('01_02 ff') == decode_hex('01_02 ff')


def test_bytes_input():
    assert decode_hex(b'de ad') == b'\xde\xad'
    assert decode_hex(bytearray(b'0xbeef')) == b'\xbe\xef'
    assert decode_hex(memoryview(b'00ff')) == b'\x00\xff'


def test_odd_count_rejected_before_decode():
    with pytest.raises(OddDigitCount) as ei:
        decode_hex('abc')
    assert ei.value.digit_count == 3
    # odd wins even when the digits are bad
    with pytest.raises(OddDigitCount):
        decode_hex('zzz')


@pytest.mark.parametrize('text,char,index', [
    ('zz', 'z', 0),
    ('ag', 'g', 1),
    ('01 0x', 'x', 4),
    ('0x0x', 'x', 3),
])
def test_invalid_digit_reported(text: str, char: str, index: int) -> None:
    with pytest.raises(InvalidHexDigit) as ei:
        decode_hex(text)
    assert ei.value.char == char
    assert ei.value.index == index
    assert repr(char) in str(ei.value)


def test_invalid_digit_is_value_error():
    with pytest.raises(ValueError, match='invalid hex digit'):
        decode_hex('zz')


def test_non_ascii_rejected():
    with pytest.raises(InvalidHexDigit) as ei:
        decode_hex('aé')
    assert ei.value.char == 'é'
    assert ei.value.index == 1


def test_second_prefix_needs_lenient_dialect():
    with pytest.raises(InvalidHexDigit) as ei:
        decode_hex('0x0A 0x0B')
    assert ei.value.index == 6
    assert decode_hex('0x0A 0x0B', LENIENT) == b'\x0a\x0b'


def test_to_ordinal_all_digits():
    for i, c in enumerate('0123456789abcdef'):
        assert to_ordinal(ord(c)) == i
        assert to_ordinal(ord(c.upper())) == i
    with pytest.raises(InvalidHexDigit):
        to_ordinal(ord('G'), 7)


def test_convert_rejects_mismatched_proof():
    with pytest.raises(HexLiteralError, match='does not match'):
        convert(b'abcd', EvenDigits(2))
    with pytest.raises(HexLiteralError, match='does not match'):
        convert(b'ab', EvenDigits(4))


def test_layout_and_input_types():
    assert layout('0x01 02').length == 2
    assert as_input_bytes('ab') == b'ab'
    with pytest.raises(TypeError):
        decode_hex(1234)  # type: ignore[arg-type]
