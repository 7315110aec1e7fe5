"""Bit conversions, timing helpers and small utilities."""

from __future__ import annotations

import time
from typing import Sequence

from mpctool.block import MASK64, make_block


class EmpError(Exception):
    """Raised where a fatal library error is reported."""


def bool_to_int(bits: Sequence[bool], width: int = 64) -> int:
    """Pack the first ``width`` bits, least significant first, into an int."""
    if len(bits) < width:
        raise ValueError(f"need {width} bits, got {len(bits)}")
    return sum(1 << i for i, bit in enumerate(bits[:width]) if bit)


def int_to_bool(value: int, length: int) -> list[bool]:
    """Unpack the low ``length`` bits of ``value``, least significant first."""
    return [bool((value >> i) & 1) for i in range(length)]


def to_bool(data: bytes, length: int, reverse: bool = False) -> list[bool]:
    """Read the first ``length`` bits of ``data`` (LSB first in each byte)."""
    if len(data) * 8 < length:
        raise ValueError("data holds fewer bits than requested")
    bits = [bool(data[i // 8] & (1 << (i % 8))) for i in range(length)]
    return bits[::-1] if reverse else bits


def from_bool(bits: Sequence[bool], length: int, reverse: bool = False) -> bytes:
    """Pack the first ``length`` bools into bytes (LSB first in each byte)."""
    if len(bits) < length:
        raise ValueError("fewer bits supplied than requested")
    chosen = list(bits[:length])
    if reverse:
        chosen.reverse()
    out = bytearray((length + 7) // 8)
    for i, bit in enumerate(chosen):
        if bit:
            out[i // 8] |= 1 << (i % 8)
    return bytes(out)


def bool_to_block(bits: Sequence[bool]) -> int:
    """Pack 128 bools into a block; the first 64 form the low word."""
    return make_block(bool_to_int(bits[64:], 64), bool_to_int(bits, 64))


def block_to_bool(b: int) -> list[bool]:
    """Unpack a block into 128 bools, low word first."""
    return int_to_bool(b & MASK64, 64) + int_to_bool((b >> 64) & MASK64, 64)


def file_exists(name: str) -> bool:
    """Return True when ``name`` can be opened for reading."""
    try:
        with open(name, "rb"):
            return True
    except OSError:
        return False


def clock_start() -> float:
    """Return a high-resolution start mark."""
    return time.perf_counter()


def time_from(start: float) -> float:
    """Microseconds elapsed since ``start``, truncated to whole microseconds."""
    return float(int((time.perf_counter() - start) * 1_000_000))


def parse_party_and_port(argv: Sequence[str]) -> tuple[int, int]:
    """Read the party number and port from ``argv[1]`` and ``argv[2]``."""
    if len(argv) < 3:
        raise EmpError("expected party and port arguments")
    try:
        return int(argv[1]), int(argv[2])
    except ValueError as exc:
        raise EmpError(f"invalid party or port: {exc}") from exc