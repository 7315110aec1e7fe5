"""Correlation-robust hashes built from a fixed-key permutation."""

from __future__ import annotations

from typing import Optional, Sequence

from mpctool.block import ZERO_BLOCK, make_block, sigma
from mpctool.prp import PRP


class CRH(PRP):
    """H(x) = pi(x) xor x."""

    def __init__(self, key: Optional[int] = ZERO_BLOCK) -> None:
        super().__init__(key)

    def h(self, block: int) -> int:
        return self.permute_block([block])[0] ^ block

    def hn(self, blocks: Sequence[int]) -> list[int]:
        return [p ^ b for p, b in zip(self.permute_block(blocks), blocks)]


class CCRH(PRP):
    """Circular correlation-robust hash: H(x) = pi(sigma(x)) xor sigma(x)."""

    def __init__(self, key: Optional[int] = ZERO_BLOCK) -> None:
        super().__init__(key)

    def h(self, block: int) -> int:
        s = sigma(block)
        return self.permute_block([s])[0] ^ s

    def hn(self, blocks: Sequence[int]) -> list[int]:
        ss = [sigma(b) for b in blocks]
        return [p ^ s for p, s in zip(self.permute_block(ss), ss)]


class TCCRH(PRP):
    """Tweakable circular correlation-robust hash.

    H(x, i) = pi(pi(x) xor i) xor pi(x).
    """

    def __init__(self, key: Optional[int] = ZERO_BLOCK) -> None:
        super().__init__(key)

    def h(self, block: int, i: int) -> int:
        t = self.permute_block([block])[0]
        return self.permute_block([t ^ make_block(0, i)])[0] ^ t

    def hn(self, blocks: Sequence[int], id: int) -> list[int]:
        """Hash each block with tweaks ``id``, ``id + 1``, ..."""
        first = self.permute_block(blocks)
        tweaked = [t ^ make_block(0, id + n) for n, t in enumerate(first)]
        return [u ^ t for u, t in zip(self.permute_block(tweaked), first)]