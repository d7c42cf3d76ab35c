"""SHA-256 message digest."""

from __future__ import annotations

import struct

BLOCK_LEN = 64
DIGEST_LEN = 32
DIGEST_STR_LEN = DIGEST_LEN * 2 + 1
B64_LEN = 43

_MASK32 = 0xFFFFFFFF
_MASK64 = 0xFFFFFFFFFFFFFFFF

_K256 = (
    0x428A2F98, 0x71374491, 0xB5C0FBCF, 0xE9B5DBA5,
    0x3956C25B, 0x59F111F1, 0x923F82A4, 0xAB1C5ED5,
    0xD807AA98, 0x12835B01, 0x243185BE, 0x550C7DC3,
    0x72BE5D74, 0x80DEB1FE, 0x9BDC06A7, 0xC19BF174,
    0xE49B69C1, 0xEFBE4786, 0x0FC19DC6, 0x240CA1CC,
    0x2DE92C6F, 0x4A7484AA, 0x5CB0A9DC, 0x76F988DA,
    0x983E5152, 0xA831C66D, 0xB00327C8, 0xBF597FC7,
    0xC6E00BF3, 0xD5A79147, 0x06CA6351, 0x14292967,
    0x27B70A85, 0x2E1B2138, 0x4D2C6DFC, 0x53380D13,
    0x650A7354, 0x766A0ABB, 0x81C2C92E, 0x92722C85,
    0xA2BFE8A1, 0xA81A664B, 0xC24B8B70, 0xC76C51A3,
    0xD192E819, 0xD6990624, 0xF40E3585, 0x106AA070,
    0x19A4C116, 0x1E376C08, 0x2748774C, 0x34B0BCB5,
    0x391C0CB3, 0x4ED8AA4A, 0x5B9CCA4F, 0x682E6FF3,
    0x748F82EE, 0x78A5636F, 0x84C87814, 0x8CC70208,
    0x90BEFFFA, 0xA4506CEB, 0xBEF9A3F7, 0xC67178F2,
)

_INITIAL_HASH = (
    0x6A09E667, 0xBB67AE85, 0x3C6EF372, 0xA54FF53A,
    0x510E527F, 0x9B05688C, 0x1F83D9AB, 0x5BE0CD19,
)

_BLOCK_WORDS = struct.Struct(">16I")
_DIGEST_WORDS = struct.Struct(">8I")


def _rotr(x: int, n: int) -> int:
    return ((x >> n) | (x << (32 - n))) & _MASK32


def _compress(state: list[int], block: bytes) -> list[int]:
    """Apply the SHA-256 compression function to one 64-byte block."""
    w = list(_BLOCK_WORDS.unpack(block))
    for j in range(16, 64):
        s0 = _rotr(w[j - 15], 7) ^ _rotr(w[j - 15], 18) ^ (w[j - 15] >> 3)
        s1 = _rotr(w[j - 2], 17) ^ _rotr(w[j - 2], 19) ^ (w[j - 2] >> 10)
        w.append((w[j - 16] + s0 + w[j - 7] + s1) & _MASK32)

    a, b, c, d, e, f, g, h = state
    for k, wj in zip(_K256, w):
        big_s1 = _rotr(e, 6) ^ _rotr(e, 11) ^ _rotr(e, 25)
        ch = (e & f) ^ (~e & g)
        t1 = (h + big_s1 + ch + k + wj) & _MASK32
        big_s0 = _rotr(a, 2) ^ _rotr(a, 13) ^ _rotr(a, 22)
        maj = (a & b) ^ (a & c) ^ (b & c)
        t2 = (big_s0 + maj) & _MASK32
        h, g, f, e, d, c, b, a = g, f, e, (d + t1) & _MASK32, c, b, a, (t1 + t2) & _MASK32

    return [(s + v) & _MASK32 for s, v in zip(state, (a, b, c, d, e, f, g, h))]


class SHA256:
    """Incremental SHA-256 hash object.

    ``digest`` does not disturb the running state, so more data may be
    added afterwards.
    """

    name = "sha256"
    digest_size = DIGEST_LEN
    block_size = BLOCK_LEN

    def __init__(self, data: bytes = b"") -> None:
        self._state = list(_INITIAL_HASH)
        self._buffer = b""
        self._length = 0
        self.update(data)

    def update(self, data: bytes) -> None:
        """Feed more bytes into the hash."""
        data = bytes(memoryview(data))
        if not data:
            return
        self._length += len(data)
        pending = self._buffer + data
        whole = len(pending) - len(pending) % BLOCK_LEN
        state = self._state
        for start in range(0, whole, BLOCK_LEN):
            state = _compress(state, pending[start : start + BLOCK_LEN])
        self._state = state
        self._buffer = pending[whole:]

    def digest(self) -> bytes:
        """Return the 32-byte digest of everything fed so far."""
        bit_count = (self._length * 8) & _MASK64
        tail = self._buffer + b"\x80"
        tail += b"\x00" * ((BLOCK_LEN - 8 - len(tail)) % BLOCK_LEN)
        tail += bit_count.to_bytes(8, "big")
        state = self._state
        for start in range(0, len(tail), BLOCK_LEN):
            state = _compress(state, tail[start : start + BLOCK_LEN])
        return _DIGEST_WORDS.pack(*state)

    def hexdigest(self) -> str:
        """Return the digest as 64 lowercase hexadecimal characters."""
        return self.digest().hex()


def sha256(data: bytes) -> bytes:
    """Return the SHA-256 digest of ``data``."""
    return SHA256(data).digest()