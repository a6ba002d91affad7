# -*- coding: utf-8 -*-
"""
Encode bytes into a mnemonic and back.

A mnemonic is laid out as::

    [checksum | tail length] [data ...] [tail data | 1 ... 1]

The header word carries ``checksum_bits`` bits of checksum followed by
``tail_bits`` bits giving the number of data bits in the final word. When the
data divides evenly into words there is no final padded word.
"""
from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Sequence

from wordcodec.bits import (
    bits_to_bytes,
    bits_to_index,
    bytes_to_bits,
    indexes_to_bits,
)
from wordcodec.checksum import checksum
from wordcodec.errors import (
    ChecksumMismatchError,
    EmptyMnemonicError,
    InvalidTailError,
)
from wordcodec.tail import decode_tail_len, encode_tail_len

if TYPE_CHECKING:
    from wordcodec.dictionary import Dictionary

logger = logging.getLogger(__name__)


def encode(data: bytes, dictionary: Dictionary) -> list[str]:
    data = bytes(data)
    k = dictionary.bits_per_word

    data_bits = bytes_to_bits(data)
    tail_len = len(data_bits) % k
    stream = (
        checksum(data, dictionary)
        + encode_tail_len(tail_len, k, dictionary.tail_bits)
        + data_bits
    )

    mnemonic = [
        dictionary.word_of(bits_to_index(group))
        for group in stream.drop_tail(tail_len).chunks(k)
    ]
    if tail_len:
        padded = stream.tail(tail_len).pad_ones(k)
        mnemonic.append(dictionary.word_of(bits_to_index(padded)))

    logger.debug(
        "Encoded %i bytes into %i words (tail length %i)",
        len(data),
        len(mnemonic),
        tail_len,
    )
    return mnemonic


def decode(mnemonic: Sequence[str], dictionary: Dictionary) -> bytes:
    if not mnemonic:
        raise EmptyMnemonicError("Cannot decode an empty mnemonic")
    k = dictionary.bits_per_word

    header = dictionary.bits_of(mnemonic[0])
    expected = header.head(dictionary.checksum_bits)
    tail_len = decode_tail_len(
        header.tail(dictionary.tail_bits), k, dictionary.tail_bits
    )

    indexes = [
        dictionary.index_of(word, position)
        for position, word in enumerate(mnemonic[1:], start=1)
    ]
    body = indexes_to_bits(indexes, k)

    if tail_len:
        if not body:
            raise InvalidTailError(
                f"Tail length {tail_len} given but the mnemonic has no data"
            )
        body = body.drop_tail(k - tail_len)
    if len(body) % 8:
        raise InvalidTailError(
            f"Tail length {tail_len} leaves {len(body)} data bits, "
            "which is not a whole number of bytes"
        )

    data = bits_to_bytes(body)
    if checksum(data, dictionary) != expected:
        raise ChecksumMismatchError(
            "Checksum mismatch; the mnemonic is corrupted, mistyped or was "
            "made with a different dictionary"
        )
    logger.debug("Decoded %i words into %i bytes", len(mnemonic), len(data))
    return data
