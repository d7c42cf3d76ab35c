import hashlib

import pytest
from hypothesis import given, settings
from hypothesis import strategies as st

from fkocrypt.sha3 import (
    SHA3_256_BLOCK_LEN,
    SHA3_256_DIGEST_LEN,
    SHA3_512_BLOCK_LEN,
    SHA3_512_DIGEST_LEN,
    keccak,
    keccak_f1600,
    sha3_256,
    sha3_512,
)


def test_sha3_256_empty_known_value():
    assert sha3_256(b"").hex() == (
        "a7ffc6f8bf1ed76651c14756a061d662f580ff4de43b49fa82d80a4b80f8434a"
    )


def test_sha3_256_abc_matches_hashlib():
    assert sha3_256(b"abc") == hashlib.sha3_256(b"abc").digest()


def test_sha3_512_abc_matches_hashlib():
    assert sha3_512(b"abc") == hashlib.sha3_512(b"abc").digest()


def test_digest_lengths():
    assert len(sha3_256(b"data")) == SHA3_256_DIGEST_LEN
    assert len(sha3_512(b"data")) == SHA3_512_DIGEST_LEN


@pytest.mark.parametrize(
    "length",
    [0, 1, SHA3_256_BLOCK_LEN - 1, SHA3_256_BLOCK_LEN, SHA3_256_BLOCK_LEN + 1,
     2 * SHA3_256_BLOCK_LEN, 1000],
)
def test_sha3_256_block_boundaries(length):
    data = bytes(i % 251 for i in range(length))
    assert sha3_256(data) == hashlib.sha3_256(data).digest()


@pytest.mark.parametrize(
    "length",
    [0, SHA3_512_BLOCK_LEN - 1, SHA3_512_BLOCK_LEN, SHA3_512_BLOCK_LEN + 1,
     3 * SHA3_512_BLOCK_LEN],
)
def test_sha3_512_block_boundaries(length):
    data = bytes((i * 7) % 256 for i in range(length))
    assert sha3_512(data) == hashlib.sha3_512(data).digest()


@settings(max_examples=30, deadline=None)
@given(st.binary(max_size=400))
def test_sha3_256_matches_hashlib(data):
    assert sha3_256(data) == hashlib.sha3_256(data).digest()


@settings(max_examples=30, deadline=None)
@given(st.binary(max_size=300))
def test_sha3_512_matches_hashlib(data):
    assert sha3_512(data) == hashlib.sha3_512(data).digest()


def test_keccak_sha3_384_parameters_match_hashlib():
    data = b"The quick brown fox jumps over the lazy dog"
    assert keccak(832, 768, data, 0x06, 48) == hashlib.sha3_384(data).digest()


def test_keccak_sha3_224_parameters_match_hashlib():
    data = b"message"
    assert keccak(1152, 448, data, 0x06, 28) == hashlib.sha3_224(data).digest()


@pytest.mark.parametrize("length", [0, 1, 32, 168, 169, 500])
def test_keccak_shake128_matches_hashlib(length):
    data = b"shake input"
    assert keccak(1344, 256, data, 0x1F, length) == hashlib.shake_128(data).digest(length)


def test_keccak_shake256_long_output_matches_hashlib():
    data = bytes(range(200))
    assert keccak(1088, 512, data, 0x1F, 700) == hashlib.shake_256(data).digest(700)


def test_keccak_output_is_prefix_of_longer_output():
    short = keccak(1088, 512, b"prefix", 0x1F, 50)
    longer = keccak(1088, 512, b"prefix", 0x1F, 300)
    assert longer[:50] == short


def test_keccak_zero_output_length():
    assert keccak(1088, 512, b"anything", 0x06, 0) == b""


def test_keccak_suffix_with_high_bit_at_last_rate_byte():
    data = b"x" * (SHA3_256_BLOCK_LEN - 1)
    out = keccak(1088, 512, data, 0x8B, 32)
    assert len(out) == 32
    assert out != keccak(1088, 512, data, 0x0B, 32)


def test_keccak_accepts_bytearray_and_memoryview():
    expected = sha3_256(b"abc")
    assert keccak(1088, 512, bytearray(b"abc"), 0x06, 32) == expected
    assert keccak(1088, 512, memoryview(b"abc"), 0x06, 32) == expected


def test_keccak_rejects_negative_output_length():
    with pytest.raises(ValueError):
        keccak(1088, 512, b"", 0x06, -1)


def test_keccak_rejects_suffix_out_of_range():
    with pytest.raises(ValueError):
        keccak(1088, 512, b"", 0x100, 32)


def test_keccak_f1600_zero_state_first_lane():
    out = keccak_f1600(bytes(200))
    assert len(out) == 200
    assert int.from_bytes(out[:8], "little") == 0xF1258F7940E1DDE7


def test_keccak_f1600_is_deterministic_and_changes_state():
    state = bytes(range(200))
    first = keccak_f1600(state)
    assert keccak_f1600(state) == first
    assert first != state


@pytest.mark.parametrize("length", [0, 199, 201])
def test_keccak_f1600_rejects_wrong_length(length):
    with pytest.raises(ValueError):
        keccak_f1600(bytes(length))