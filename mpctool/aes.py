"""AES-128 on 128-bit blocks: key expansion, batch encryption and decryption.

A block's 16-byte in-memory form is the AES state, so encrypting a block
means encrypting ``block_to_bytes(b)`` and reading the result back.
"""

from __future__ import annotations

from typing import Iterable, Sequence

from cryptography.hazmat.primitives.ciphers import Cipher, algorithms, modes

from mpctool.block import BLOCK_BYTES, block_from_bytes, block_to_bytes

ROUNDS = 10
_RCON = (0x01, 0x02, 0x04, 0x08, 0x10, 0x20, 0x40, 0x80, 0x1B, 0x36)


def _rotl8(x: int, shift: int) -> int:
    return ((x << shift) | (x >> (8 - shift))) & 0xFF


def _build_sbox() -> tuple[int, ...]:
    sbox = [0] * 256
    p = q = 1
    while True:
        p = p ^ ((p << 1) & 0xFF) ^ (0x1B if p & 0x80 else 0)
        q ^= q << 1
        q ^= q << 2
        q ^= q << 4
        q &= 0xFF
        if q & 0x80:
            q ^= 0x09
        affine = q ^ _rotl8(q, 1) ^ _rotl8(q, 2) ^ _rotl8(q, 3) ^ _rotl8(q, 4)
        sbox[p] = affine ^ 0x63
        if p == 1:
            break
    sbox[0] = 0x63
    return tuple(sbox)


_SBOX = _build_sbox()


def expand_key(key: int) -> list[int]:
    """Return the eleven AES-128 round keys of ``key`` as blocks."""
    raw = block_to_bytes(key)
    words = [list(raw[i:i + 4]) for i in range(0, BLOCK_BYTES, 4)]
    for i in range(4, 4 * (ROUNDS + 1)):
        temp = list(words[i - 1])
        if i % 4 == 0:
            temp = temp[1:] + temp[:1]
            temp = [_SBOX[byte] for byte in temp]
            temp[0] ^= _RCON[i // 4 - 1]
        words.append([a ^ b for a, b in zip(words[i - 4], temp)])
    return [
        block_from_bytes(bytes(sum(words[r * 4:r * 4 + 4], [])))
        for r in range(ROUNDS + 1)
    ]


class AESKey:
    """An expanded AES-128 key able to encrypt and decrypt blocks."""

    def __init__(self, key: int = 0) -> None:
        self.key = key
        self.rounds = ROUNDS
        self.round_keys = expand_key(key)
        self._cipher = Cipher(algorithms.AES(block_to_bytes(key)), modes.ECB())

    def encrypt_blocks(self, blocks: Iterable[int]) -> list[int]:
        """Encrypt each block independently (ECB)."""
        data = b"".join(block_to_bytes(b) for b in blocks)
        if not data:
            return []
        enc = self._cipher.encryptor()
        out = enc.update(data) + enc.finalize()
        return [
            block_from_bytes(out[i:i + BLOCK_BYTES])
            for i in range(0, len(out), BLOCK_BYTES)
        ]

    def decrypt_blocks(self, blocks: Iterable[int]) -> list[int]:
        """Invert :meth:`encrypt_blocks`."""
        data = b"".join(block_to_bytes(b) for b in blocks)
        if not data:
            return []
        dec = self._cipher.decryptor()
        out = dec.update(data) + dec.finalize()
        return [
            block_from_bytes(out[i:i + BLOCK_BYTES])
            for i in range(0, len(out), BLOCK_BYTES)
        ]


def opt_key_schedule(user_keys: Iterable[int]) -> list[AESKey]:
    """Expand several user keys at once."""
    return [AESKey(k) for k in user_keys]


def para_enc(blocks: Sequence[int], keys: Sequence[AESKey], num_encs: int) -> list[int]:
    """Encrypt ``num_encs`` consecutive blocks with each key in turn."""
    if num_encs < 0:
        raise ValueError("num_encs must not be negative")
    if len(blocks) != len(keys) * num_encs:
        raise ValueError(
            f"expected {len(keys) * num_encs} blocks, got {len(blocks)}"
        )
    out: list[int] = []
    for idx, key in enumerate(keys):
        out.extend(key.encrypt_blocks(blocks[idx * num_encs:(idx + 1) * num_encs]))
    return out