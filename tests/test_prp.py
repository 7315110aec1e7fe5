from mpctool.aes import AESKey
from mpctool.prp import PRP


def test_default_key_is_zero():
    assert PRP().permute_block([1, 2, 3]) == AESKey(0).encrypt_blocks([1, 2, 3])


def test_explicit_key():
    assert PRP(77).permute_block([5]) == AESKey(77).encrypt_blocks([5])


def test_set_key_changes_permutation():
    prp = PRP()
    before = prp.permute_block([42])
    prp.aes_set_key(1)
    assert prp.permute_block([42]) == AESKey(1).encrypt_blocks([42])
    assert prp.permute_block([42]) != before


def test_permutation_is_injective():
    out = PRP(3).permute_block(list(range(20)))
    assert len(set(out)) == 20


def test_permutation_invertible():
    prp = PRP(9)
    blocks = [0, 11, 2**100]
    assert prp.aes.decrypt_blocks(prp.permute_block(blocks)) == blocks


def test_empty():
    assert PRP().permute_block([]) == []