"""Clear-text circuit evaluation that can also record the circuit it runs."""

from __future__ import annotations

from typing import Optional, Sequence, TextIO

from mpctool.block import make_block
from mpctool.execution import CircuitExecution, Party, ProtocolExecution

_PLACEHOLDER_WIDTH = 200


class PlainCircExec(CircuitExecution):
    """Evaluates gates on plain values, optionally writing each gate to a file.

    A label keeps its value tag in the low word and its wire id in the high word.
    """

    P1 = 1
    P0 = 2
    S0 = 3
    S1 = 4

    def __init__(self, print_circuit: bool = False, filename: Optional[str] = None) -> None:
        self.gid = 0
        self.print = print_circuit
        self.gates = 0
        self.ands = 0
        self.public_one = make_block(0, self.P1)
        self.public_zero = make_block(0, self.P0)
        self._fout: Optional[TextIO] = None
        if print_circuit:
            if filename is None:
                raise ValueError("a filename is needed to record the circuit")
            self._fout = open(filename, "w", encoding="ascii", newline="\n")
            # room for the header written once the circuit is complete
            self._fout.write(" " * _PLACEHOLDER_WIDTH + "\n")

    @staticmethod
    def _tag(label: int) -> int:
        return label & ((1 << 64) - 1)

    @staticmethod
    def _wire(label: int) -> int:
        return label >> 64

    def _emit(self, line: str) -> None:
        if self._fout is not None:
            self._fout.write(line + "\n")

    def _new_label(self, tag: int) -> int:
        label = make_block(self.gid, tag)
        self.gid += 1
        return label

    def finalize(self) -> None:
        """Close the circuit file, if one is open."""
        if self._fout is not None:
            self._fout.close()
            self._fout = None

    def is_public(self, b: int) -> bool:
        return self._tag(b) in (self.P0, self.P1)

    def public_label(self, b: bool) -> int:
        return self.public_one if b else self.public_zero

    def private_label(self, b: bool) -> int:
        """A fresh input wire carrying ``b``."""
        return self._new_label(self.S1 if b else self.S0)

    def and_gate(self, a: int, b: int) -> int:
        ta, tb = self._tag(a), self._tag(b)
        if ta == self.P1:
            return b
        if tb == self.P1:
            return a
        if ta == self.P0 or tb == self.P0:
            return self.public_zero
        value = self.S0 if self.S0 in (ta, tb) else self.S1
        self._emit(f"2 1 {self._wire(a)} {self._wire(b)} {self.gid} AND")
        self.gates += 1
        self.ands += 1
        return self._new_label(value)

    def xor_gate(self, a: int, b: int) -> int:
        ta, tb = self._tag(a), self._tag(b)
        if ta == self.P1:
            return self.not_gate(b)
        if tb == self.P1:
            return self.not_gate(a)
        if ta == self.P0:
            return b
        if tb == self.P0:
            return a
        value = self.S0 if ta == tb else self.S1
        self._emit(f"2 1 {self._wire(a)} {self._wire(b)} {self.gid} XOR")
        self.gates += 1
        return self._new_label(value)

    def not_gate(self, a: int) -> int:
        ta = self._tag(a)
        if ta == self.P1:
            return self.public_zero
        if ta == self.P0:
            return self.public_one
        value = self.S1 if ta == self.S0 else self.S0
        self._emit(f"1 1 {self._wire(a)} {self.gid} INV")
        self.gates += 1
        return self._new_label(value)

    def get_value(self, a: int) -> bool:
        """The plain bit a label carries."""
        return self._tag(a) not in (self.S0, self.P0)

    def num_and(self) -> int:
        return self.ands


class PlainProt(ProtocolExecution):
    """Feeds and reveals plain values, counting inputs and outputs per party."""

    def __init__(
        self,
        circ_exec: PlainCircExec,
        print_circuit: bool = False,
        filename: Optional[str] = None,
    ) -> None:
        super().__init__()
        self.circ_exec = circ_exec
        self.print = print_circuit
        self.filename = filename
        self.n1 = 0
        self.n2 = 0
        self.n3 = 0
        self.output_vec: list[int] = []

    def feed(self, party: int, bits: Sequence[bool]) -> list[int]:
        if party == Party.PUBLIC:
            return [self.circ_exec.public_label(b) for b in bits]
        labels = [self.circ_exec.private_label(b) for b in bits]
        if party == Party.ALICE:
            self.n1 += len(labels)
        else:
            self.n2 += len(labels)
        return labels

    def reveal(self, party: int, labels: Sequence[int]) -> list[bool]:
        values = []
        for label in labels:
            self.output_vec.append(label >> 64)
            values.append(self.circ_exec.get_value(label))
        self.n3 += len(values)
        return values

    def finalize(self) -> None:
        """Write the circuit header over the placeholder at the top of the file."""
        if self.print and self.filename is not None:
            with open(self.filename, "r+", encoding="ascii", newline="\n") as fout:
                fout.seek(0)
                fout.write(f"{self.circ_exec.gates} {self.circ_exec.gid}\n")
                fout.write(f"{self.n1} {self.n2} {self.n3}\n")


def setup_plain_prot(print_circuit: bool = False, filename: Optional[str] = None) -> PlainProt:
    """Create a plain circuit executor and the protocol driving it."""
    circ = PlainCircExec(print_circuit, filename)
    return PlainProt(circ, print_circuit, filename)


def finalize_plain_prot(prot: PlainProt) -> None:
    """Append the output gates, close the circuit file and write its header."""
    circ = prot.circ_exec
    z_index = circ.gid
    circ.gid += 1
    circ._emit(f"2 1 0 0 {z_index} XOR")
    for v in prot.output_vec:
        circ._emit(f"2 1 {z_index} {v} {circ.gid} XOR")
        circ.gid += 1
    circ.gates += 1 + len(prot.output_vec)
    circ.finalize()
    prot.finalize()