import pytest

from mpctool.aes import AESKey
from mpctool.block import MASK64, block_to_bytes, make_block
from mpctool.prg import PRG


def test_same_seed_same_stream():
    a = PRG(123, 0)
    b = PRG(123, 0)
    assert a.random_block(10) == b.random_block(10)


def test_id_changes_stream():
    assert PRG(123, 0).random_block(4) != PRG(123, 1).random_block(4)


def test_id_is_xored_into_seed():
    assert PRG(5, 3).random_block(3) == PRG(5 ^ 3, 0).random_block(3)


def test_bytes_seed_equals_int_seed():
    seed = 0x0123456789ABCDEF_FEDCBA9876543210
    assert PRG(block_to_bytes(seed)).random_block(2) == PRG(seed).random_block(2)


def test_random_block_is_counter_mode():
    prg = PRG(77)
    expected = AESKey(77).encrypt_blocks([make_block(0, i) for i in range(9)])
    assert prg.random_block(9) == expected
    assert prg.counter == 9


def test_blocks_continue_across_calls():
    a = PRG(9)
    b = PRG(9)
    assert a.random_block(3) + a.random_block(5) == b.random_block(8)


def test_random_data_prefix_matches_blocks():
    a = PRG(42)
    b = PRG(42)
    data = a.random_data(20)
    blocks = b.random_block(2)
    assert len(data) == 20
    assert data == (block_to_bytes(blocks[0]) + block_to_bytes(blocks[1]))[:20]


def test_random_data_negative_rejected():
    with pytest.raises(ValueError):
        PRG(1).random_data(-1)


def test_random_block_negative_rejected():
    with pytest.raises(ValueError):
        PRG(1).random_block(-2)


def test_reseed_resets_counter():
    prg = PRG(11)
    first = prg.random_block(2)
    prg.random_block(5)
    prg.reseed(11)
    assert prg.counter == 0
    assert prg.random_block(2) == first


def test_random_bool_length_and_values():
    bits = PRG(3).random_bool(100)
    assert len(bits) == 100
    assert set(bits) <= {True, False}
    assert True in bits and False in bits


def test_call_yields_words_low_then_high():
    a = PRG(8)
    b = PRG(8)
    blocks = b.random_block(16)
    words = [a() for _ in range(33)]
    assert words[0] == blocks[0] & MASK64
    assert words[1] == blocks[0] >> 64
    assert words[31] == blocks[15] >> 64
    assert all(PRG.MIN <= w <= PRG.MAX for w in words)
    assert words[32] == PRG(8, 0).random_block(17)[16] & MASK64


def test_unseeded_generators_differ():
    first = PRG().random_block(2)
    second = PRG().random_block(2)
    assert len(first) == 2
    assert len(set(first + second)) == 4