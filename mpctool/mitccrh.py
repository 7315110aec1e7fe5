"""Multi-instance tweakable circular correlation-robust hash with rekeying."""

from __future__ import annotations

from typing import Optional, Sequence

from mpctool.aes import AESKey, opt_key_schedule, para_enc
from mpctool.block import ZERO_BLOCK, make_block, sigma


class MITCCRH:
    """Hashes batches of blocks, drawing fresh keys from a start point and gate id."""

    def __init__(self, batch_size: int = 8) -> None:
        if batch_size <= 0:
            raise ValueError("batch size must be positive")
        self.batch_size = batch_size
        self.scheduled_key: list[AESKey] = []
        self.keys: list[int] = []
        self.key_used = batch_size
        self.start_point = ZERO_BLOCK
        self.gid = 0

    def set_s(self, start_point: int) -> None:
        self.start_point = start_point

    def renew_ks(self, gid: Optional[int] = None) -> None:
        """Derive a fresh batch of keys, optionally restarting at ``gid``."""
        if gid is not None:
            self.gid = gid
        self.keys = [
            self.start_point ^ make_block(self.gid + n, 0)
            for n in range(self.batch_size)
        ]
        self.gid += self.batch_size
        self.scheduled_key = opt_key_schedule(self.keys)
        self.key_used = 0

    def hash(self, blocks: Sequence[int], k: int, h: int) -> list[int]:
        """Hash ``k`` groups of ``h`` blocks, one fresh key per group."""
        if k <= 0 or k > self.batch_size or self.batch_size % k:
            raise ValueError(f"k={k} must divide the batch size {self.batch_size}")
        if len(blocks) != k * h:
            raise ValueError(f"expected {k * h} blocks, got {len(blocks)}")
        if self.key_used == self.batch_size:
            self.renew_ks()
        keys = self.scheduled_key[self.key_used:self.key_used + k]
        tmp = para_enc(list(blocks), keys, h)
        self.key_used += k
        return [b ^ t for b, t in zip(blocks, tmp)]

    def hash_cir(self, blocks: Sequence[int], k: int, h: int) -> list[int]:
        """Apply sigma to every block, then :meth:`hash`."""
        return self.hash([sigma(b) for b in blocks], k, h)