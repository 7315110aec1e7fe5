"""Arithmetic in GF(2^128) modulo x^128 + x^7 + x^2 + x + 1."""

from __future__ import annotations

from functools import reduce as _fold
from operator import xor
from typing import Sequence

from mpctool.block import MASK128

_POLY = (1 << 128) | 0x87


def _clmul(a: int, b: int) -> int:
    result = 0
    while b:
        if b & 1:
            result ^= a
        a <<= 1
        b >>= 1
    return result


def _poly_mod(value: int) -> int:
    while value >> 128:
        shift = value.bit_length() - 129
        value ^= _POLY << shift
    return value


def _reverse_bits(value: int, width: int) -> int:
    return int(f"{value:0{width}b}"[::-1], 2)


def mul128(a: int, b: int) -> tuple[int, int]:
    """Carry-less product of two blocks, as (low, high) halves."""
    product = _clmul(a & MASK128, b & MASK128)
    return product & MASK128, product >> 128


def reduce(low: int, high: int) -> int:
    """Reduce a 256-bit carry-less product modulo the field polynomial."""
    return _poly_mod(((high & MASK128) << 128) | (low & MASK128))


def reduce_reflect(low: int, high: int) -> int:
    """Reduce a product of bit-reflected operands, keeping the reflection."""
    value = ((high & MASK128) << 128) | (low & MASK128)
    # The product of two reflected 128-bit values is a reflected 255-bit value.
    straight = _reverse_bits(value << 1 & ((1 << 256) - 1), 256)
    return _reverse_bits(_poly_mod(straight), 128)


def gfmul(a: int, b: int) -> int:
    """Field product of two blocks."""
    return reduce(*mul128(a, b))


def gfmul_reflect(a: int, b: int) -> int:
    """Field product of two bit-reflected blocks (GHASH convention)."""
    return reduce_reflect(*mul128(a, b))


def _check_lengths(a: Sequence[int], b: Sequence[int]) -> None:
    if len(a) != len(b):
        raise ValueError("vectors differ in length")


def vector_inn_prdt_sum_red(a: Sequence[int], b: Sequence[int]) -> int:
    """Inner product of two field vectors, reduced."""
    _check_lengths(a, b)
    return _fold(xor, (gfmul(x, y) for x, y in zip(a, b)), 0)


def vector_inn_prdt_sum_no_red(a: Sequence[int], b: Sequence[int]) -> tuple[int, int]:
    """Inner product of two field vectors, left unreduced as (low, high)."""
    _check_lengths(a, b)
    low = high = 0
    for x, y in zip(a, b):
        lo, hi = mul128(x, y)
        low ^= lo
        high ^= hi
    return low, high


def uni_hash_coeff_gen(seed: int, size: int) -> list[int]:
    """Return ``seed``, ``seed^2``, ..., ``seed^size``."""
    if size < 1:
        raise ValueError("size must be at least 1")
    coeffs = [seed]
    while len(coeffs) < size:
        coeffs.append(gfmul(coeffs[-1], seed))
    return coeffs


def vector_self_xor(data: Sequence[int]) -> int:
    """Xor of all blocks in ``data``."""
    return _fold(xor, data, 0)


class GaloisFieldPacking:
    """Packs 128 field elements v[i] into sum v[i] * X^i."""

    def __init__(self) -> None:
        self.base = [1 << i for i in range(128)]

    def packing(self, data: Sequence[int]) -> int:
        if len(data) != 128:
            raise ValueError(f"packing needs 128 elements, got {len(data)}")
        return vector_inn_prdt_sum_red(data, self.base)