# -*- coding: utf-8 -*-
from __future__ import annotations

from hashlib import sha256
from typing import TYPE_CHECKING

from wordcodec.bits import Bits, bytes_to_bits

if TYPE_CHECKING:
    from wordcodec.dictionary import Dictionary


def checksum(data: bytes, dictionary: Dictionary) -> Bits:
    """
    Derive the checksum embedded in a mnemonic's header word.

    The checksum is the leading ``dictionary.checksum_bits`` bits of
    SHA-256 over ``data`` followed by the dictionary's fingerprint, so a
    mnemonic only verifies against the exact dictionary that produced it.
    """
    h = sha256()
    h.update(data)
    h.update(dictionary.fingerprint)
    return bytes_to_bits(h.digest()).head(dictionary.checksum_bits)
