"""Elliptic-curve group NIST P-256 with points and integer scalars."""

from __future__ import annotations

import secrets
from typing import Optional

from mpctool.utils import EmpError

_P = 0xFFFFFFFF00000001000000000000000000000000FFFFFFFFFFFFFFFFFFFFFFFF
_A = _P - 3
_B = 0x5AC635D8AA3A93E7B3EBBD55769886BC651D06B0CC53B0F63BCE3C3E27D2604B
_GX = 0x6B17D1F2E12C4247F8BCE6E563A440F277037D812DEB33A0F4A13945D898C296
_GY = 0x4FE342E2FE1A7F9B8EE7EB4A7C0F9E162BCE33576B315ECECBB6406837BF51F5
_N = 0xFFFFFFFF00000000FFFFFFFFFFFFFFFFBCE6FAADA7179E84F3B9CAC2FC632551
_COORD_BYTES = 32

_Affine = Optional[tuple[int, int]]


def _on_curve(x: int, y: int) -> bool:
    return (y * y - (x * x * x + _A * x + _B)) % _P == 0


def _add(p1: _Affine, p2: _Affine) -> _Affine:
    if p1 is None:
        return p2
    if p2 is None:
        return p1
    x1, y1 = p1
    x2, y2 = p2
    if x1 == x2:
        if (y1 + y2) % _P == 0:
            return None
        slope = (3 * x1 * x1 + _A) * pow(2 * y1, -1, _P) % _P
    else:
        slope = (y2 - y1) * pow(x2 - x1, -1, _P) % _P
    x3 = (slope * slope - x1 - x2) % _P
    y3 = (slope * (x1 - x3) - y1) % _P
    return x3, y3


def _scalar_mul(k: int, point: _Affine) -> _Affine:
    k %= _N
    result: _Affine = None
    addend = point
    while k:
        if k & 1:
            result = _add(result, addend)
        addend = _add(addend, addend)
        k >>= 1
    return result


class Group:
    """The P-256 curve group."""

    def __init__(self) -> None:
        self.order = _N
        self.prime = _P

    def get_rand_bn(self) -> int:
        """A uniformly random scalar in ``range(order)``."""
        return secrets.randbelow(self.order)

    def get_generator(self) -> "Point":
        return Point(self, _GX, _GY)

    def mul_gen(self, m: int) -> "Point":
        """The generator multiplied by ``m``."""
        return self.get_generator().mul(m)


class Point:
    """A point on the group's curve; no coordinates means the point at infinity."""

    def __init__(self, group: Group, x: Optional[int] = None, y: Optional[int] = None) -> None:
        if (x is None) != (y is None):
            raise EmpError("a point needs both coordinates or neither")
        if x is not None and y is not None:
            if not (0 <= x < _P and 0 <= y < _P) or not _on_curve(x, y):
                raise EmpError("point is not on the curve")
        self.group = group
        self.x = x
        self.y = y

    @property
    def _affine(self) -> _Affine:
        if self.x is None or self.y is None:
            return None
        return self.x, self.y

    def _wrap(self, affine: _Affine) -> "Point":
        if affine is None:
            return Point(self.group)
        return Point(self.group, affine[0], affine[1])

    def is_at_infinity(self) -> bool:
        return self.x is None

    def add(self, rhs: "Point") -> "Point":
        return self._wrap(_add(self._affine, rhs._affine))

    def mul(self, m: int) -> "Point":
        return self._wrap(_scalar_mul(m, self._affine))

    def inv(self) -> "Point":
        affine = self._affine
        if affine is None:
            return Point(self.group)
        return Point(self.group, affine[0], (-affine[1]) % _P)

    def to_bin(self) -> bytes:
        """Uncompressed encoding; the point at infinity is a single zero byte."""
        if self.x is None or self.y is None:
            return b"\x00"
        return (
            b"\x04"
            + self.x.to_bytes(_COORD_BYTES, "big")
            + self.y.to_bytes(_COORD_BYTES, "big")
        )

    def size(self) -> int:
        return len(self.to_bin())

    @staticmethod
    def from_bin(group: Group, data: bytes) -> "Point":
        """Decode an uncompressed, compressed or infinity encoding."""
        if not data:
            raise EmpError("ECC FROM_BIN: empty encoding")
        tag = data[0]
        if tag == 0 and len(data) == 1:
            return Point(group)
        if tag == 4 and len(data) == 1 + 2 * _COORD_BYTES:
            x = int.from_bytes(data[1:1 + _COORD_BYTES], "big")
            y = int.from_bytes(data[1 + _COORD_BYTES:], "big")
            return Point(group, x, y)
        if tag in (2, 3) and len(data) == 1 + _COORD_BYTES:
            x = int.from_bytes(data[1:], "big")
            if x >= _P:
                raise EmpError("ECC FROM_BIN: coordinate out of range")
            rhs = (x * x * x + _A * x + _B) % _P
            y = pow(rhs, (_P + 1) // 4, _P)
            if y * y % _P != rhs:
                raise EmpError("ECC FROM_BIN: point is not on the curve")
            if (y & 1) != (tag & 1):
                y = _P - y
            return Point(group, x, y)
        raise EmpError("ECC FROM_BIN: malformed encoding")

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Point):
            return NotImplemented
        return self.x == other.x and self.y == other.y

    def __hash__(self) -> int:
        return hash((self.x, self.y))

    def __repr__(self) -> str:
        if self.x is None:
            return "Point(infinity)"
        return f"Point(x={self.x:#x}, y={self.y:#x})"