"""Interfaces for evaluating boolean circuits and feeding or revealing their wires."""

from __future__ import annotations

from abc import ABC, abstractmethod
from enum import IntEnum
from typing import Sequence

from mpctool.block import ALICE, BOB, MASK64, PUBLIC


class Party(IntEnum):
    """Who owns an input or may learn an output."""

    PUBLIC = PUBLIC
    ALICE = ALICE
    BOB = BOB


class CircuitExecution(ABC):
    """Evaluates individual gates on wire labels (blocks)."""

    @abstractmethod
    def and_gate(self, a: int, b: int) -> int:
        """Return the label of ``a AND b``."""

    @abstractmethod
    def xor_gate(self, a: int, b: int) -> int:
        """Return the label of ``a XOR b``."""

    @abstractmethod
    def not_gate(self, a: int) -> int:
        """Return the label of ``NOT a``."""

    @abstractmethod
    def public_label(self, b: bool) -> int:
        """Return the label of the public constant ``b``."""

    def num_and(self) -> int:
        """Number of AND gates evaluated; all ones when not tracked."""
        return MASK64


class ProtocolExecution(ABC):
    """Turns input bits into wire labels and wire labels back into bits."""

    def __init__(self, party: int = Party.PUBLIC) -> None:
        self.cur_party = party

    @abstractmethod
    def feed(self, party: int, bits: Sequence[bool]) -> list[int]:
        """Return one label for each input bit owned by ``party``."""

    @abstractmethod
    def reveal(self, party: int, labels: Sequence[int]) -> list[bool]:
        """Return the bit carried by each label, revealed to ``party``."""

    def finalize(self) -> None:
        """Release whatever the protocol holds; nothing by default."""