# -*- coding: utf-8 -*-
"""
Bit-strings packed into integers.

A ``Bits`` value is an unsigned integer plus an explicit length, read most
significant bit first. Leading zero bits are therefore significant: ``Bits(1,
4)`` is ``0001``.
"""
from __future__ import annotations

from typing import Iterator, Sequence

from attrs import field, frozen


def _check_length(instance: Bits, attribute: object, length: int) -> None:
    if length < 0:
        raise ValueError(f"Negative bit length: {length}")


@frozen
class Bits:
    value: int = 0
    length: int = field(default=0, validator=_check_length)

    def __attrs_post_init__(self) -> None:
        if not 0 <= self.value < (1 << self.length):
            raise ValueError(
                f"Value {self.value} does not fit in {self.length} bits"
            )

    def __len__(self) -> int:
        return self.length

    def __add__(self, other: Bits) -> Bits:
        return Bits(
            (self.value << other.length) | other.value,
            self.length + other.length,
        )

    def __str__(self) -> str:
        if not self.length:
            return ""
        return format(self.value, f"0{self.length}b")

    def head(self, n: int) -> Bits:
        """
        Return the first (most significant) ``n`` bits.
        """
        if not 0 <= n <= self.length:
            raise ValueError(f"Cannot take {n} of {self.length} bits")
        return Bits(self.value >> (self.length - n), n)

    def tail(self, n: int) -> Bits:
        """
        Return the last (least significant) ``n`` bits.
        """
        if not 0 <= n <= self.length:
            raise ValueError(f"Cannot take {n} of {self.length} bits")
        return Bits(self.value & ((1 << n) - 1), n)

    def drop_tail(self, n: int) -> Bits:
        return self.head(self.length - n)

    def pad_ones(self, length: int) -> Bits:
        """
        Right-pad with ``1`` bits up to ``length`` bits.
        """
        padding = length - self.length
        if padding < 0:
            raise ValueError(f"Cannot pad {self.length} bits to {length}")
        return self + Bits((1 << padding) - 1, padding)

    def chunks(self, size: int) -> Iterator[Bits]:
        """
        Yield consecutive ``size``-bit groups, first to last.

        The length must be a multiple of ``size``.
        """
        if size <= 0 or self.length % size:
            raise ValueError(
                f"Cannot split {self.length} bits into groups of {size}"
            )
        rendered = str(self)
        for start in range(0, self.length, size):
            yield Bits(int(rendered[start : start + size], 2), size)


def bytes_to_bits(data: bytes) -> Bits:
    data = bytes(data)
    return Bits(int.from_bytes(data, "big"), len(data) * 8)


def bits_to_bytes(bits: Bits) -> bytes:
    if bits.length % 8:
        raise ValueError(f"{bits.length} bits is not a whole number of bytes")
    return bits.value.to_bytes(bits.length // 8, "big")


def index_to_bits(index: int, length: int) -> Bits:
    if index < 0:
        raise ValueError(f"Negative index: {index}")
    return Bits(index, length)


def bits_to_index(bits: Bits) -> int:
    return bits.value


def indexes_to_bits(indexes: Sequence[int], length: int) -> Bits:
    """
    Concatenate ``length``-bit renderings of ``indexes`` into one ``Bits``.
    """
    if not indexes:
        return Bits()
    if min(indexes) < 0:
        raise ValueError(f"Negative index: {min(indexes)}")
    rendered = "".join(format(index, f"0{length}b") for index in indexes)
    if len(rendered) != len(indexes) * length:
        raise ValueError(f"An index does not fit in {length} bits")
    return Bits(int(rendered, 2), len(rendered))
