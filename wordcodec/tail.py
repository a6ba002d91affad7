# -*- coding: utf-8 -*-
"""
The tail header: how many data bits the final, possibly partial word holds.

A tail length is always in ``[0, k)`` for ``k`` bits per word, so it fits in
``tail_bits_len(k)`` bits, which share the header word with the checksum.
"""
from wordcodec.bits import Bits, bits_to_index, index_to_bits
from wordcodec.errors import InvalidTailError


def tail_bits_len(bits_per_word: int) -> int:
    """
    Return ``ceil(log2(bits_per_word))``, or 0 for one bit per word.
    """
    if bits_per_word > 1:
        return (bits_per_word - 1).bit_length()
    return 0


def encode_tail_len(tail_len: int, bits_per_word: int, tail_bits: int) -> Bits:
    return index_to_bits(tail_len, bits_per_word).tail(tail_bits)


def decode_tail_len(
    tail_len_bits: Bits, bits_per_word: int, tail_bits: int
) -> int:
    if len(tail_len_bits) != tail_bits:
        raise InvalidTailError(
            f"Expected {tail_bits} tail header bits, got {len(tail_len_bits)}"
        )
    padded = index_to_bits(0, bits_per_word - tail_bits) + tail_len_bits
    tail_len = bits_to_index(padded)
    if tail_len >= bits_per_word:
        raise InvalidTailError(
            f"Tail length {tail_len} does not fit a {bits_per_word}-bit word"
        )
    return tail_len
