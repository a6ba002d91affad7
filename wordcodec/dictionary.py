# -*- coding: utf-8 -*-
from __future__ import annotations

from hashlib import sha256
from typing import Iterable, Sequence

from attrs import field, frozen

from wordcodec import codec
from wordcodec.bits import Bits, index_to_bits
from wordcodec.errors import (
    DuplicateWordError,
    EmptyWordError,
    IncompleteDictionaryError,
    TooFewWordsError,
    UnknownIndexError,
    UnknownWordError,
    UntrimmedWordError,
)
from wordcodec.tail import tail_bits_len


def validate_words(words: Sequence[str]) -> None:
    """
    Check that ``words`` can serve as a dictionary.

    :raises DictionaryError: A subclass naming the first problem found.
    """
    if len(words) < 2:
        raise TooFewWordsError(
            f"A dictionary needs at least 2 words, got {len(words)}"
        )
    if len(words) & (len(words) - 1):
        raise IncompleteDictionaryError(
            f"Dictionary incomplete: {len(words)} is not a power of two"
        )
    seen: set[str] = set()
    for i, word in enumerate(words):
        if word != word.strip():
            raise UntrimmedWordError(f"Word {i} is not trimmed: {word!r}")
        if not word:
            raise EmptyWordError(f"Word {i} is empty")
        if word in seen:
            raise DuplicateWordError(f"Word {i} is a duplicate: {word!r}")
        seen.add(word)


def compute_fingerprint(words: Iterable[str]) -> bytes:
    h = sha256()
    for word in words:
        h.update(word.encode("utf-8"))
    return h.digest()


def _validate(instance: Dictionary, attribute: object, words: tuple) -> None:
    validate_words(words)


@frozen
class Dictionary:
    """
    An immutable, validated word list.

    Each word stands for ``bits_per_word`` bits: its position in the list.

    :ivar fingerprint: SHA-256 over the words in order. Checksums are bound
        to it, so a mnemonic does not decode with a reordered or otherwise
        different dictionary of the same size.
    :ivar tail_bits: Bits of the header word holding the tail length.
    :ivar checksum_bits: Bits of the header word holding the checksum.
    """

    words: tuple[str, ...] = field(converter=tuple, validator=_validate)
    fingerprint: bytes = field(init=False, repr=False)
    bits_per_word: int = field(init=False, eq=False)
    tail_bits: int = field(init=False, eq=False, repr=False)
    checksum_bits: int = field(init=False, eq=False, repr=False)
    _indexes: dict[str, int] = field(init=False, eq=False, repr=False)

    @fingerprint.default
    def _fingerprint_default(self) -> bytes:
        return compute_fingerprint(self.words)

    @bits_per_word.default
    def _bits_per_word_default(self) -> int:
        return max(len(self.words).bit_length() - 1, 0)

    @tail_bits.default
    def _tail_bits_default(self) -> int:
        return tail_bits_len(self.bits_per_word)

    @checksum_bits.default
    def _checksum_bits_default(self) -> int:
        return self.bits_per_word - self.tail_bits

    @_indexes.default
    def _indexes_default(self) -> dict[str, int]:
        return {word: i for i, word in enumerate(self.words)}

    def __len__(self) -> int:
        return len(self.words)

    def __contains__(self, word: object) -> bool:
        return word in self._indexes

    def index_of(self, word: str, position: int = 0) -> int:
        try:
            return self._indexes[word]
        except KeyError:
            raise UnknownWordError(word, position) from None

    def word_of(self, index: int) -> str:
        if not 0 <= index < len(self.words):
            raise UnknownIndexError(
                f"Index {index} is outside a {len(self.words)}-word dictionary"
            )
        return self.words[index]

    def bits_of(self, word: str, position: int = 0) -> Bits:
        return index_to_bits(self.index_of(word, position), self.bits_per_word)

    def encode(self, data: bytes) -> list[str]:
        return codec.encode(data, self)

    def decode(self, mnemonic: Sequence[str]) -> bytes:
        return codec.decode(mnemonic, self)


def new_dictionary(words: Iterable[str]) -> Dictionary:
    return Dictionary(tuple(words))
