"""128-bit blocks represented as Python integers, and the shared constants.

A block is an ``int`` in ``range(0, 2**128)``. Its memory layout is
little-endian: the low 64-bit word comes first, then the high word.
"""

from __future__ import annotations

from typing import Iterable, Sequence, Union

BLOCK_BITS = 128
BLOCK_BYTES = 16
MASK64 = (1 << 64) - 1
MASK128 = (1 << 128) - 1

AES_BATCH_SIZE = 8
HASH_BUFFER_SIZE = 1024 * 8
NETWORK_BUFFER_SIZE2 = 1024 * 32
NETWORK_BUFFER_SIZE = 1024 * 1024
FILE_BUFFER_SIZE = 1024 * 16
CHECK_BUFFER_SIZE = 1024 * 8

XOR = -1
PUBLIC = 0
ALICE = 1
BOB = 2

FIX_KEY = bytes.fromhex("617e8da2a0511e965e41c29b153fc77a")

ZERO_BLOCK = 0
ALL_ONE_BLOCK = MASK128
SELECT_MASK = (ZERO_BLOCK, ALL_ONE_BLOCK)


def make_block(high: int, low: int) -> int:
    """Build a block from its high and low 64-bit words."""
    return ((high & MASK64) << 64) | (low & MASK64)


def _high(b: int) -> int:
    return (b >> 64) & MASK64


def _low(b: int) -> int:
    return b & MASK64


def get_lsb(x: int) -> bool:
    """Return the least significant bit of a block."""
    return (x & 1) == 1


def sigma(a: int) -> int:
    """Linear orthomorphism: swap the halves, then xor the old high half into the high half."""
    hi, lo = _high(a), _low(a)
    return make_block(lo ^ hi, hi)


def set_bit(a: int, i: int) -> int:
    """Return ``a`` with bit ``i`` (0..127) set."""
    if not 0 <= i < BLOCK_BITS:
        raise ValueError(f"bit index {i} outside 0..127")
    return (a | (1 << i)) & MASK128


def block_to_bytes(b: int) -> bytes:
    """Serialise a block to its 16-byte in-memory form."""
    return (b & MASK128).to_bytes(BLOCK_BYTES, "little")


def block_from_bytes(data: bytes) -> int:
    """Read a block from exactly 16 bytes."""
    if len(data) != BLOCK_BYTES:
        raise ValueError(f"a block needs {BLOCK_BYTES} bytes, got {len(data)}")
    return int.from_bytes(data, "little")


def format_block(b: int) -> str:
    """Render a block as two zero-padded hex words, high word first."""
    return f"{_high(b):016x} {_low(b):016x}"


def xor_blocks(xs: Sequence[int], ys: Union[Sequence[int], int]) -> list[int]:
    """Xor two equally long block sequences, or every block with one block."""
    if isinstance(ys, int):
        return [x ^ ys for x in xs]
    if len(xs) != len(ys):
        raise ValueError("block sequences differ in length")
    return [x ^ y for x, y in zip(xs, ys)]


def cmp_blocks(xs: Iterable[int], ys: Iterable[int]) -> bool:
    """Return True when both sequences hold the same blocks."""
    xs, ys = list(xs), list(ys)
    if len(xs) != len(ys):
        raise ValueError("block sequences differ in length")
    return all(x == y for x, y in zip(xs, ys))


def sse_trans(inp: bytes, nrows: int, ncols: int) -> bytes:
    """Transpose an ``nrows`` x ``ncols`` bit matrix.

    Rows are stored one after another, ``ncols // 8`` bytes each, bits
    numbered least significant first. The result has ``ncols`` rows of
    ``nrows`` bits.
    """
    if nrows % 8 or ncols % 8:
        raise ValueError("row and column counts must be multiples of 8")
    row_bytes = ncols // 8
    if len(inp) < nrows * row_bytes:
        raise ValueError("input is shorter than the matrix")
    columns = [0] * ncols
    for r in range(nrows):
        row = int.from_bytes(inp[r * row_bytes:(r + 1) * row_bytes], "little")
        c = 0
        while row:
            if row & 1:
                columns[c] |= 1 << r
            row >>= 1
            c += 1
    out_row_bytes = nrows // 8
    return b"".join(col.to_bytes(out_row_bytes, "little") for col in columns)