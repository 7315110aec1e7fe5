from mpctool.block import make_block, sigma
from mpctool.crh import CCRH, CRH, TCCRH
from mpctool.prp import PRP

BLOCKS = [0, 1, 2**64, 2**128 - 1, 0x0123456789ABCDEF]


def test_crh_definition():
    prp = PRP()
    for b in BLOCKS:
        assert CRH().h(b) == prp.permute_block([b])[0] ^ b


def test_crh_batch_matches_single():
    crh = CRH(5)
    assert crh.hn(BLOCKS) == [crh.h(b) for b in BLOCKS]


def test_ccrh_uses_sigma():
    ccrh, crh = CCRH(), CRH()
    for b in BLOCKS:
        assert ccrh.h(b) == crh.h(sigma(b))


def test_ccrh_batch_matches_single():
    ccrh = CCRH(8)
    assert ccrh.hn(BLOCKS) == [ccrh.h(b) for b in BLOCKS]


def test_tccrh_definition():
    prp = PRP()
    t = prp.permute_block([7])[0]
    expected = prp.permute_block([t ^ make_block(0, 3)])[0] ^ t
    assert TCCRH().h(7, 3) == expected


def test_tccrh_batch_increments_tweak():
    tc = TCCRH(2)
    assert tc.hn(BLOCKS, 10) == [tc.h(b, 10 + n) for n, b in enumerate(BLOCKS)]


def test_tccrh_tweak_matters():
    tc = TCCRH()
    assert tc.h(1, 0) != tc.h(1, 1)


def test_empty_batches():
    assert CRH().hn([]) == []
    assert CCRH().hn([]) == []
    assert TCCRH().hn([], 0) == []