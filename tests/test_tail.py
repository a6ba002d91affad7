# -*- coding: utf-8 -*-

import pytest

from wordcodec.bits import Bits
from wordcodec.errors import InvalidTailError
from wordcodec.tail import decode_tail_len, encode_tail_len, tail_bits_len


@pytest.mark.parametrize(
    "bits_per_word, expected",
    [
        # bip39: the longest tail is 10 bits, and 10 < 2 ** 4
        (11, 4),
        # 32 words: the longest tail is 4 bits, which needs 3 bits
        (5, 3),
        (8, 3),
        (2, 1),
        (1, 0),
    ],
)
def test_tail_bits_len(bits_per_word, expected):
    assert tail_bits_len(bits_per_word) == expected


def test_encode_tail_len_keeps_lowest_bits():
    assert str(encode_tail_len(9, 11, 4)) == "1001"


def test_encode_tail_len_zero():
    assert str(encode_tail_len(0, 5, 3)) == "000"


def test_encode_tail_len_without_tail_bits():
    assert encode_tail_len(0, 1, 0) == Bits()


@pytest.mark.parametrize("tail_len", range(11))
def test_decode_tail_len_inverts_encode(tail_len):
    assert decode_tail_len(encode_tail_len(tail_len, 11, 4), 11, 4) == tail_len


def test_decode_tail_len_without_tail_bits():
    assert decode_tail_len(Bits(), 1, 0) == 0


def test_decode_tail_len_invalid_tail_error_if_too_large():
    with pytest.raises(InvalidTailError):
        decode_tail_len(Bits(0b1011, 4), 11, 4)


def test_decode_tail_len_invalid_tail_error_on_wrong_width():
    with pytest.raises(InvalidTailError):
        decode_tail_len(Bits(0b1, 2), 11, 4)
