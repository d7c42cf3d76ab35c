# fkocrypt

A small Python library with no dependencies. It provides the digest and
helper pieces used around Single Packet Authorization (SPA) messages:

- `fkocrypt.sha1`: SHA-1 (`SHA1`, `sha1`).
- `fkocrypt.sha256`: SHA-256 (`SHA256`, `sha256`).
- `fkocrypt.sha512`: SHA-512 and SHA-384 (`SHA512`, `SHA384`, `sha512`,
  `sha384`).
- `fkocrypt.sha3`: the Keccak-f[1600] permutation (`keccak_f1600`), the
  general Keccak sponge (`keccak`), and `sha3_256` / `sha3_512`.
- `fkocrypt.strutil`: copying and appending within a fixed buffer size
  (`strlcpy`, `strlcat`).
- `fkocrypt.state`: SPA context state flags (`StateFlags`), the helpers
  that set, clear and test them, and the SPA size limits as module
  constants (for example `MAX_SPA_MESSAGE_SIZE`, `MAX_PORT`).

## Installation

```
pip install .
```

To run the test suite:

```
pip install .[test]
pytest
```

## Digests

`SHA1`, `SHA256`, `SHA384` and `SHA512` are incremental hash objects. Each
takes optional initial data and has `update`, `digest` and `hexdigest`,
plus the `name`, `digest_size` and `block_size` attributes. Calling
`digest` does not change the running state, so you can keep calling
`update` afterwards. The functions `sha1`, `sha256`, `sha384` and `sha512`
hash a byte string in a single call.

```python
from fkocrypt.sha256 import SHA256, sha256

h = SHA256(b"hello ")
h.update(b"world")
assert h.digest() == sha256(b"hello world")
print(h.hexdigest())
```

## SHA-3 and Keccak

```python
from fkocrypt.sha3 import keccak, keccak_f1600, sha3_256, sha3_512

print(sha3_256(b"hello world").hex())
print(sha3_512(b"hello world").hex())

# SHAKE128-style output: rate 1344, capacity 256, suffix 0x1F, 32 bytes
print(keccak(1344, 256, b"hello world", 0x1F, 32).hex())

# One permutation of a 200-byte state
state = keccak_f1600(bytes(200))
```

`keccak` raises `ValueError` in these cases:

- `rate + capacity` is not 1600;
- the rate is not a positive multiple of 8;
- the suffix is not a byte;
- the output length is negative.

`keccak_f1600` raises `ValueError` if the state is not exactly 200 bytes.

## Bounded string copying

`size` is the full size of the destination buffer, including its
terminating NUL. At most `size - 1` characters are kept, and input stops at
the first NUL. Both functions work with `str` and `bytes`. Each returns the
resulting string together with the length the result would have had with
no truncation. A returned length of `size` or more means the result was
truncated. A negative `size` raises `ValueError`.

```python
from fkocrypt.strutil import strlcat, strlcpy

assert strlcpy("hello", 4) == ("hel", 5)
assert strlcat("ab", "cdef", 5) == ("abcd", 6)
```

## State flags

```python
from fkocrypt.state import (
    StateFlags,
    clear_ctx_initialized,
    clear_spa_data_modified,
    is_spa_data_modified,
    set_ctx_initialized,
)

state = set_ctx_initialized(StateFlags.DATA_MODIFIED)
assert is_spa_data_modified(state)
assert not is_spa_data_modified(clear_spa_data_modified(state))
assert clear_ctx_initialized(state) == StateFlags.DATA_MODIFIED
```

`clear_ctx_initialized` and `clear_spa_data_modified` keep only the low 16
bits of the state. This means `ENCRYPT_MODE_MODIFIED` and
`HMAC_MODE_MODIFIED` are dropped whenever either function is called.

## What this package does not do

This package contains no cipher. It does not encrypt or decrypt data, it
does not build or parse SPA messages, and it has no command-line program.
It gives you digests, the Keccak sponge, bounded string helpers and state
flags, and nothing beyond them.