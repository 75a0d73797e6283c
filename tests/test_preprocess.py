import pytest

from hexlit.dialect import BASIC, LENIENT, STANDARD
from hexlit.preprocess import Layout, count_skipped, is_prefix_at, scan, skip_separators


@pytest.mark.parametrize('text,expected', [
    (b'', Layout(0, 0, 0, 0)),
    (b'01020304', Layout(4, 0, 8, 0)),
    (b'01 02 03 04', Layout(4, 3, 8, 0)),
    (b'0xDEADBEEF', Layout(4, 2, 8, 1)),
    (b'0X 01', Layout(1, 3, 2, 1)),
    (b'abc', Layout(1, 0, 3, 0)),
    (b'ab  ', Layout(1, 2, 2, 0)),
    (b'a  ', Layout(0, 2, 1, 0)),
    (b'"0a"|"0b"', Layout(2, 5, 4, 0)),
])
def test_scan_standard(text: bytes, expected: Layout) -> None:
    assert scan(text, STANDARD) == expected


def test_scan_lenient_counts_every_prefix():
    assert scan(b'0x0A 0x0B', LENIENT) == Layout(2, 5, 4, 2)
    assert scan(b'0x0A 0x0B', STANDARD) == Layout(3, 3, 6, 1)


def test_scan_basic_dialect():
    # no prefix and no pipe/dash/newline separators
    assert scan(b'0xab', BASIC) == Layout(2, 0, 4, 0)
    assert scan(b'01|02', BASIC).digit_count == 5
    assert count_skipped(b'E5 E6_90"92"', BASIC) == 4


def test_count_skipped_is_total_over_garbage():
    assert count_skipped(b'zz--qq\n') == 3
    assert count_skipped(bytes(range(256))) >= 0


def test_skip_separators_and_prefix_helpers():
    assert skip_separators(b'a  _b', 1) == 4
    assert skip_separators(b'a  ', 1) == 3
    assert is_prefix_at(b'0 x', 0, 2)
    assert not is_prefix_at(b'0', 0, 1)
    assert not is_prefix_at(b'1x', 0, 1)
