from itertools import product

import pytest

from mpctool.execution import Party
from mpctool.plain import (
    PlainCircExec,
    PlainProt,
    finalize_plain_prot,
    setup_plain_prot,
)


@pytest.fixture
def circ():
    return PlainCircExec()


def test_public_labels_carry_tags(circ):
    assert circ.public_label(True) & 0xFF == PlainCircExec.P1
    assert circ.public_label(False) & 0xFF == PlainCircExec.P0
    assert circ.is_public(circ.public_label(True))
    assert not circ.is_public(circ.private_label(True))


def test_private_labels_get_increasing_wires(circ):
    a = circ.private_label(True)
    b = circ.private_label(False)
    assert (b >> 64) == (a >> 64) + 1
    assert circ.get_value(a) is True
    assert circ.get_value(b) is False


@pytest.mark.parametrize("x,y", list(product([False, True], repeat=2)))
def test_private_gate_truth_tables(circ, x, y):
    a, b = circ.private_label(x), circ.private_label(y)
    assert circ.get_value(circ.and_gate(a, b)) == (x and y)
    assert circ.get_value(circ.xor_gate(a, b)) == (x != y)
    assert circ.get_value(circ.not_gate(a)) == (not x)


def test_public_shortcuts(circ):
    a = circ.private_label(True)
    one, zero = circ.public_label(True), circ.public_label(False)
    assert circ.and_gate(one, a) == a
    assert circ.and_gate(a, zero) == zero
    assert circ.xor_gate(zero, a) == a
    assert circ.get_value(circ.xor_gate(a, one)) is False
    assert circ.not_gate(one) == zero
    assert circ.gates == 1


def test_counters(circ):
    a, b = circ.private_label(True), circ.private_label(True)
    circ.and_gate(a, b)
    circ.xor_gate(a, b)
    assert circ.num_and() == 1
    assert circ.gates == 2


def test_print_needs_filename():
    with pytest.raises(ValueError):
        PlainCircExec(True, None)


def test_feed_and_reveal_counts():
    prot = PlainProt(PlainCircExec())
    a = prot.feed(Party.ALICE, [True, False])
    b = prot.feed(Party.BOB, [True])
    p = prot.feed(Party.PUBLIC, [True])
    assert (prot.n1, prot.n2) == (2, 1)
    out = prot.reveal(Party.PUBLIC, a + b + p)
    assert out == [True, False, True, True]
    assert prot.n3 == 4
    assert prot.output_vec[:3] == [lbl >> 64 for lbl in a + b]


def test_recorded_circuit_file(tmp_path):
    path = tmp_path / "circ.txt"
    prot = setup_plain_prot(True, str(path))
    circ = prot.circ_exec
    (a,) = prot.feed(Party.ALICE, [True])
    (b,) = prot.feed(Party.BOB, [False])
    c = circ.and_gate(a, b)
    assert prot.reveal(Party.PUBLIC, [c]) == [False]
    finalize_plain_prot(prot)

    lines = path.read_text(encoding="ascii").splitlines()
    assert lines[0] == f"{circ.gates} {circ.gid}"
    assert lines[1] == f"{prot.n1} {prot.n2} {prot.n3}"
    assert lines[2].strip() == ""
    gate_line = f"2 1 {a >> 64} {b >> 64} {c >> 64} AND"
    assert gate_line in lines
    z = (c >> 64) + 1
    assert lines[-2] == f"2 1 0 0 {z} XOR"
    assert lines[-1] == f"2 1 {z} {c >> 64} {z + 1} XOR"
    assert circ.gates == 1 + 1 + len(prot.output_vec)