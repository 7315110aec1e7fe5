"""A pseudorandom permutation: AES under a (usually public) fixed key."""

from __future__ import annotations

from typing import Iterable, Optional

from mpctool.aes import AESKey
from mpctool.block import ZERO_BLOCK


class PRP:
    """AES with a fixed key, modelled as a random permutation."""

    def __init__(self, key: Optional[int] = None) -> None:
        self.aes = AESKey(ZERO_BLOCK)
        self.aes_set_key(ZERO_BLOCK if key is None else key)

    def aes_set_key(self, key: int) -> None:
        """Replace the permutation key."""
        self.aes = AESKey(key)

    def permute_block(self, blocks: Iterable[int]) -> list[int]:
        """Apply the permutation to every block."""
        return self.aes.encrypt_blocks(blocks)