import pytest

from ebmlfix import vint
from ebmlfix.exceptions import VintException


@pytest.mark.parametrize('data,expected', [
    (b'\x81', (1, 1)),
    (b'\x40\x01', (1, 2)),
    (b'\x44\x89', (0x489, 2)),
    (b'\x2a\xd7\xb1', (0xad7b1, 3)),
    (b'\x18\x53\x80\x67', (0x8538067, 4)),
    (b'\x01\xff\xff\xff\xff\xff\xff\xff', (vint.UNKNOWN_SIZE, 8)),
])
def test_decode(data, expected):
    assert vint.decode(data) == expected


def test_decode_w_offset():
    data = b'\xaa\xbb\x44\x89\xcc'

    assert vint.decode(data, 2) == (0x489, 2)
    assert vint.decode(data, 4) == (0x4c, 1)


def test_decode_errors():
    with pytest.raises(VintException):
        vint.decode(b'\x00\x01')

    # the leading byte says 4 bytes but there are only 3
    with pytest.raises(VintException):
        vint.decode(b'\x18\x53\x80')

    with pytest.raises(VintException):
        vint.decode(b'\x81', 1)

    with pytest.raises(VintException):
        vint.decode(b'', 0)


@pytest.mark.parametrize('value,expected', [
    (0, b'\x80'),
    (0x489, b'\x44\x89'),
    (0xad7b1, b'\x2a\xd7\xb1'),
    (0x8538067, b'\x18\x53\x80\x67'),
    (0x549a966, b'\x15\x49\xa9\x66'),
])
def test_encode(value, expected):
    assert vint.encode(value) == expected
    assert vint.encode(value, draft=True) == len(expected)


def test_width_boundaries():
    assert vint.width(2 ** 7 - 1) == 1
    assert vint.width(2 ** 7) == 2
    assert vint.width(2 ** 14) == 3
    assert vint.width(2 ** 56 - 1) == 8

    with pytest.raises(VintException):
        vint.width(2 ** 56)

    with pytest.raises(VintException):
        vint.encode(-1)


@pytest.mark.parametrize('value', [
    0, 1, 126, 127, 128, 1000, 2 ** 14 - 1, 2 ** 21 + 5, 2 ** 35 + 12345, 2 ** 49 - 2, 2 ** 56 - 1,
])
def test_round_trip(value):
    encoded = vint.encode(value)

    assert vint.decode(encoded) == (value, len(encoded))
