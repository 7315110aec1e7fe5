"""A pseudorandom generator: AES in counter mode under a seed-derived key."""

from __future__ import annotations

import os
from typing import Optional, Union

from mpctool.aes import AESKey
from mpctool.block import (
    BLOCK_BYTES,
    MASK64,
    block_from_bytes,
    block_to_bytes,
    make_block,
)

Seed = Union[int, bytes]

_WORD_BUFFER = 32


def _seed_to_block(seed: Seed) -> int:
    if isinstance(seed, (bytes, bytearray)):
        return block_from_bytes(bytes(seed))
    return seed


class PRG:
    """Generates blocks by encrypting a running counter with AES."""

    MIN = 0
    MAX = MASK64

    def __init__(self, seed: Optional[Seed] = None, id: int = 0) -> None:
        self.counter = 0
        self.key = 0
        self.aes = AESKey(0)
        self._words: list[int] = []
        if seed is None:
            seed = block_from_bytes(os.urandom(BLOCK_BYTES))
        self.reseed(seed, id)

    def reseed(self, seed: Seed, id: int = 0) -> None:
        """Restart the generator from ``seed`` xored with ``id`` in the low word."""
        self.key = _seed_to_block(seed) ^ make_block(0, id)
        self.aes = AESKey(self.key)
        self.counter = 0

    def random_block(self, nblocks: int = 1) -> list[int]:
        """Return ``nblocks`` pseudorandom blocks."""
        if nblocks < 0:
            raise ValueError("number of blocks must not be negative")
        counters = [make_block(0, self.counter + n) for n in range(nblocks)]
        self.counter += nblocks
        return self.aes.encrypt_blocks(counters)

    def random_data(self, nbytes: int) -> bytes:
        """Return ``nbytes`` pseudorandom bytes."""
        if nbytes < 0:
            raise ValueError("number of bytes must not be negative")
        whole, rest = divmod(nbytes, BLOCK_BYTES)
        data = b"".join(block_to_bytes(b) for b in self.random_block(whole))
        if rest:
            data += block_to_bytes(self.random_block(1)[0])[:rest]
        return data

    def random_bool(self, length: int) -> list[bool]:
        """Return ``length`` pseudorandom bools."""
        return [bool(byte & 1) for byte in self.random_data(length)]

    def __call__(self) -> int:
        """Return one pseudorandom 64-bit word."""
        if not self._words:
            for b in self.random_block(_WORD_BUFFER // 2):
                self._words.append(b & MASK64)
                self._words.append((b >> 64) & MASK64)
            self._words.reverse()
        return self._words.pop()