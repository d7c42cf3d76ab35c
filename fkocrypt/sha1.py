"""SHA-1 message digest."""

from __future__ import annotations

import struct

BLOCK_SIZE = 64
BLOCK_LEN = BLOCK_SIZE
DIGEST_LEN = 20
DIGEST_STR_LEN = DIGEST_LEN * 2 + 1
B64_LEN = 27

_MASK32 = 0xFFFFFFFF
_MASK64 = 0xFFFFFFFFFFFFFFFF

_INITIAL_HASH = (0x67452301, 0xEFCDAB89, 0x98BADCFE, 0x10325476, 0xC3D2E1F0)

_ROUND_CONSTANTS = (0x5A827999, 0x6ED9EBA1, 0x8F1BBCDC, 0xCA62C1D6)

_BLOCK_WORDS = struct.Struct(">16I")
_DIGEST_WORDS = struct.Struct(">5I")


def _rotl(x: int, n: int) -> int:
    return ((x << n) | (x >> (32 - n))) & _MASK32


def _f(stage: int, x: int, y: int, z: int) -> int:
    if stage == 0:
        return (x & y) | (~x & z)
    if stage == 2:
        return (x & y) | (x & z) | (y & z)
    return x ^ y ^ z


def _compress(state: list[int], block: bytes) -> list[int]:
    """Apply the SHA-1 compression function to one 64-byte block."""
    w = list(_BLOCK_WORDS.unpack(block))
    for i in range(16, 80):
        w.append(_rotl(w[i - 3] ^ w[i - 8] ^ w[i - 14] ^ w[i - 16], 1))

    a, b, c, d, e = state
    for i, wi in enumerate(w):
        stage = i // 20
        t = (_rotl(a, 5) + _f(stage, b, c, d) + e + wi + _ROUND_CONSTANTS[stage]) & _MASK32
        a, b, c, d, e = t, a, _rotl(b, 30), c, d

    return [(s + v) & _MASK32 for s, v in zip(state, (a, b, c, d, e))]


class SHA1:
    """Incremental SHA-1 hash object.

    ``digest`` does not disturb the running state, so more data may be
    added afterwards.
    """

    name = "sha1"
    digest_size = DIGEST_LEN
    block_size = BLOCK_SIZE

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
        whole = len(pending) - len(pending) % BLOCK_SIZE
        state = self._state
        for start in range(0, whole, BLOCK_SIZE):
            state = _compress(state, pending[start : start + BLOCK_SIZE])
        self._state = state
        self._buffer = pending[whole:]

    def digest(self) -> bytes:
        """Return the 20-byte digest of everything fed so far."""
        bit_count = (self._length * 8) & _MASK64
        tail = self._buffer + b"\x80"
        tail += b"\x00" * ((BLOCK_SIZE - 8 - len(tail)) % BLOCK_SIZE)
        tail += bit_count.to_bytes(8, "big")
        state = self._state
        for start in range(0, len(tail), BLOCK_SIZE):
            state = _compress(state, tail[start : start + BLOCK_SIZE])
        return _DIGEST_WORDS.pack(*state)

    def hexdigest(self) -> str:
        """Return the digest as 40 lowercase hexadecimal characters."""
        return self.digest().hex()


def sha1(data: bytes) -> bytes:
    """Return the SHA-1 digest of ``data``."""
    return SHA1(data).digest()