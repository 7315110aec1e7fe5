import pytest

from mpctool.aes import AESKey, expand_key, opt_key_schedule, para_enc
from mpctool.block import block_from_bytes

FIPS_KEY = block_from_bytes(bytes.fromhex("000102030405060708090a0b0c0d0e0f"))
FIPS_PLAIN = block_from_bytes(bytes.fromhex("00112233445566778899aabbccddeeff"))


def test_fips197_vector():
    key = AESKey(FIPS_KEY)
    expected = block_from_bytes(bytes.fromhex("69c4e0d86a7b0430d8cdb78070b4c55a"))
    assert key.encrypt_blocks([FIPS_PLAIN]) == [expected]


def test_expand_key_fips_appendix():
    key = block_from_bytes(bytes.fromhex("2b7e151628aed2a6abf7158809cf4f3c"))
    rks = expand_key(key)
    assert len(rks) == 11
    assert rks[0] == key
    assert rks[10] == block_from_bytes(
        bytes.fromhex("d014f9a8c9ee2589e13f0cc8b6630ca6")
    )


def test_zero_key_zero_block():
    out = AESKey(0).encrypt_blocks([0])
    assert out == [block_from_bytes(bytes.fromhex("66e94bd4ef8a2c3b884cfa59ca342b2e"))]


def test_decrypt_round_trip():
    key = AESKey(12345678901234567890)
    blocks = [0, 1, 2**127, 2**128 - 1, 0xDEADBEEF]
    assert key.decrypt_blocks(key.encrypt_blocks(blocks)) == blocks


def test_empty_input():
    assert AESKey(5).encrypt_blocks([]) == []
    assert AESKey(5).decrypt_blocks([]) == []


def test_ecb_blocks_independent():
    key = AESKey(99)
    batch = key.encrypt_blocks([7, 8, 9])
    assert batch == [key.encrypt_blocks([b])[0] for b in (7, 8, 9)]


def test_opt_key_schedule_matches_expand_key():
    keys = opt_key_schedule([1, 2, 3])
    assert [k.round_keys for k in keys] == [expand_key(v) for v in (1, 2, 3)]


def test_para_enc_uses_each_key_for_its_run():
    keys = opt_key_schedule([10, 20])
    blocks = [1, 2, 3, 4, 5, 6]
    out = para_enc(blocks, keys, 3)
    assert out[:3] == keys[0].encrypt_blocks([1, 2, 3])
    assert out[3:] == keys[1].encrypt_blocks([4, 5, 6])


def test_para_enc_length_mismatch():
    with pytest.raises(ValueError):
        para_enc([1, 2, 3], opt_key_schedule([1, 2]), 2)