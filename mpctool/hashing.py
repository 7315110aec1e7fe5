"""SHA-256 hashing with block helpers and a key derivation for curve points."""

from __future__ import annotations

import hashlib
from typing import Iterable, Protocol, Union

from mpctool.block import BLOCK_BYTES, block_from_bytes, block_to_bytes


class _Serialisable(Protocol):
    def to_bin(self) -> bytes: ...


class Hash:
    """Incremental SHA-256 that resets after each digest."""

    DIGEST_SIZE = 32

    def __init__(self) -> None:
        self._md = hashlib.sha256()

    def put(self, data: bytes) -> None:
        """Feed bytes into the hash."""
        self._md.update(data)

    def put_block(self, blocks: Union[int, Iterable[int]]) -> None:
        """Feed one block or several blocks into the hash."""
        if isinstance(blocks, int):
            blocks = [blocks]
        self.put(b"".join(block_to_bytes(b) for b in blocks))

    def digest(self) -> bytes:
        """Return the 32-byte digest and start over."""
        result = self._md.digest()
        self.reset()
        return result

    def reset(self) -> None:
        """Discard everything fed so far."""
        self._md = hashlib.sha256()

    @staticmethod
    def hash_once(data: bytes) -> bytes:
        """SHA-256 of ``data``."""
        h = Hash()
        h.put(data)
        return h.digest()

    @staticmethod
    def hash_for_block(data: bytes) -> int:
        """The first 16 bytes of the digest of ``data``, read as a block."""
        return block_from_bytes(Hash.hash_once(data)[:BLOCK_BYTES])

    @staticmethod
    def kdf(point: _Serialisable, id: int = 1) -> int:
        """Derive a block from a point's encoding followed by a 64-bit id."""
        return Hash.hash_for_block(point.to_bin() + (id & ((1 << 64) - 1)).to_bytes(8, "little"))