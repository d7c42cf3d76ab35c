import hashlib

import pytest
from hypothesis import given, strategies as st

from fkocrypt.sha256 import DIGEST_LEN, SHA256, sha256


def test_empty_message_vector():
    assert SHA256().hexdigest() == (
        "e3b0c44298fc1c149afbf4c8996fb92427ae41e4649b934ca495991b7852b855"
    )


def test_abc_vector():
    assert sha256(b"abc").hex() == (
        "ba7816bf8f01cfea414140de5dae2223b00361a396177a9cb410ff61f20015ad"
    )


def test_two_block_vector():
    message = b"abcdbcdecdefdefgefghfghighijhijkijkljklmklmnlmnomnopnopq"
    assert sha256(message).hex() == (
        "248d6a61d20638b8e5c026930c3e6039a33ce45964ff2167f6ecedd419db06c1"
    )


@pytest.mark.parametrize("length", [0, 1, 55, 56, 57, 63, 64, 65, 119, 120, 128, 1000])
def test_padding_boundaries_match_reference(length):
    data = bytes(i % 251 for i in range(length))
    assert sha256(data) == hashlib.sha256(data).digest()


@given(st.binary(max_size=400))
def test_matches_reference(data):
    assert sha256(data) == hashlib.sha256(data).digest()


@given(st.binary(max_size=300), st.lists(st.integers(min_value=0, max_value=300), max_size=5))
def test_incremental_equals_one_shot(data, cuts):
    points = sorted({min(c, len(data)) for c in cuts})
    h = SHA256()
    previous = 0
    for point in points + [len(data)]:
        h.update(data[previous:point])
        previous = point
    assert h.digest() == sha256(data)


def test_digest_length_and_hex_form():
    h = SHA256(b"message")
    assert len(h.digest()) == DIGEST_LEN
    assert h.hexdigest() == h.digest().hex()


def test_digest_does_not_disturb_state():
    h = SHA256(b"first part ")
    first = h.digest()
    assert h.digest() == first
    h.update(b"second part")
    assert h.digest() == sha256(b"first part second part")


def test_accepts_bytes_like_objects():
    assert SHA256(bytearray(b"abc")).digest() == sha256(memoryview(b"abc"))


def test_rejects_text():
    with pytest.raises(TypeError):
        SHA256().update("abc")