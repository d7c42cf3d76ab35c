"""Keccak-f[1600] permutation, the Keccak sponge and SHA3-256/SHA3-512."""

from __future__ import annotations

import struct

SHA3_256_DIGEST_LEN = 32
SHA3_512_DIGEST_LEN = 64
SHA3_256_BLOCK_LEN = 136
SHA3_512_BLOCK_LEN = 72
SHA3_256_B64_LEN = 43
SHA3_512_B64_LEN = 86
SHA3_256_DIGEST_STR_LEN = SHA3_256_DIGEST_LEN * 2 + 1
SHA3_512_DIGEST_STR_LEN = SHA3_512_DIGEST_LEN * 2 + 1

STATE_BYTES = 200
STATE_BITS = STATE_BYTES * 8
ROUNDS = 24

_MASK64 = 0xFFFFFFFFFFFFFFFF
_LANES = struct.Struct("<25Q")


def _rol64(value: int, offset: int) -> int:
    offset %= 64
    if offset == 0:
        return value
    return ((value << offset) | (value >> (64 - offset))) & _MASK64


def _lfsr_bits():
    """Yield the output bits of the LFSR defining the round constants."""
    register = 0x01
    while True:
        yield register & 0x01
        if register & 0x80:
            register = ((register << 1) ^ 0x71) & 0xFF
        else:
            register = (register << 1) & 0xFF


def _build_round_constants() -> tuple[int, ...]:
    bits = _lfsr_bits()
    constants = []
    for _ in range(ROUNDS):
        constant = 0
        for j in range(7):
            if next(bits):
                constant |= 1 << ((1 << j) - 1)
        constants.append(constant)
    return tuple(constants)


def _build_rho_pi_steps() -> tuple[tuple[int, int], ...]:
    """Lane index and rotation for each step of the combined rho/pi walk."""
    steps = []
    x, y = 1, 0
    for t in range(24):
        rotation = ((t + 1) * (t + 2) // 2) % 64
        x, y = y, (2 * x + 3 * y) % 5
        steps.append((x + 5 * y, rotation))
    return tuple(steps)


_ROUND_CONSTANTS = _build_round_constants()
_RHO_PI_STEPS = _build_rho_pi_steps()


def _permute_lanes(lanes: list[int]) -> list[int]:
    a = list(lanes)
    for constant in _ROUND_CONSTANTS:
        # theta
        parity = [a[x] ^ a[x + 5] ^ a[x + 10] ^ a[x + 15] ^ a[x + 20] for x in range(5)]
        effect = [parity[(x + 4) % 5] ^ _rol64(parity[(x + 1) % 5], 1) for x in range(5)]
        a = [lane ^ effect[i % 5] for i, lane in enumerate(a)]

        # rho and pi
        current = a[1]
        for index, rotation in _RHO_PI_STEPS:
            current, a[index] = a[index], _rol64(current, rotation)

        # chi
        chi = []
        for y in range(0, 25, 5):
            plane = a[y : y + 5]
            chi.extend(
                plane[x] ^ (~plane[(x + 1) % 5] & plane[(x + 2) % 5] & _MASK64)
                for x in range(5)
            )
        a = chi

        # iota
        a[0] ^= constant
    return a


def keccak_f1600(state: bytes) -> bytes:
    """Apply the Keccak-f[1600] permutation to a 200-byte state."""
    state = bytes(state)
    if len(state) != STATE_BYTES:
        raise ValueError(f"state must be exactly {STATE_BYTES} bytes, got {len(state)}")
    return _LANES.pack(*_permute_lanes(list(_LANES.unpack(state))))


def _xor_into(state: bytearray, data: bytes) -> None:
    for i, byte in enumerate(data):
        state[i] ^= byte


def keccak(
    rate: int,
    capacity: int,
    data: bytes,
    delimited_suffix: int,
    output_length: int,
) -> bytes:
    """Compute the Keccak[rate, capacity] sponge over ``data``.

    ``delimited_suffix`` holds the domain-separation bits followed by a
    delimiting 1 bit (0x06 for SHA-3, 0x1F for SHAKE, 0x01 for none).
    """
    if rate + capacity != STATE_BITS or rate % 8 != 0 or rate <= 0:
        raise ValueError(
            f"rate + capacity must be {STATE_BITS} with a positive rate that is "
            f"a multiple of 8, got rate={rate}, capacity={capacity}"
        )
    if not 0 <= delimited_suffix <= 0xFF:
        raise ValueError(f"delimited suffix must be a byte, got {delimited_suffix}")
    if output_length < 0:
        raise ValueError(f"output length must not be negative, got {output_length}")

    data = bytes(memoryview(data))
    rate_bytes = rate // 8
    state = bytearray(STATE_BYTES)

    def permute() -> None:
        state[:] = keccak_f1600(state)

    block_size = 0
    for start in range(0, len(data), rate_bytes):
        chunk = data[start : start + rate_bytes]
        _xor_into(state, chunk)
        block_size = len(chunk)
        if block_size == rate_bytes:
            permute()
            block_size = 0

    state[block_size] ^= delimited_suffix
    if delimited_suffix & 0x80 and block_size == rate_bytes - 1:
        permute()
    state[rate_bytes - 1] ^= 0x80
    permute()

    output = bytearray()
    while len(output) < output_length:
        take = min(output_length - len(output), rate_bytes)
        output += state[:take]
        if len(output) < output_length:
            permute()
    return bytes(output)


def sha3_256(data: bytes) -> bytes:
    """Return the 32-byte SHA3-256 digest of ``data``."""
    return keccak(1088, 512, data, 0x06, SHA3_256_DIGEST_LEN)


def sha3_512(data: bytes) -> bytes:
    """Return the 64-byte SHA3-512 digest of ``data``."""
    return keccak(576, 1024, data, 0x06, SHA3_512_DIGEST_LEN)