"""State flags and size limits for an SPA message context."""

from __future__ import annotations

import enum

MAX_FKO_ERR_MSG_SIZE = 128

MAX_SPA_ENCRYPTED_SIZE = 1500
MAX_SPA_CMD_LEN = 1400
MAX_SPA_USERNAME_SIZE = 64
MAX_SPA_MESSAGE_SIZE = 256
MAX_SPA_NAT_ACCESS_SIZE = 128
MAX_SPA_SERVER_AUTH_SIZE = 64
MAX_SPA_TIMESTAMP_SIZE = 12
MAX_SPA_VERSION_SIZE = 8
MAX_SPA_MESSAGE_TYPE_SIZE = 2

MIN_SPA_ENCODED_MSG_SIZE = 36
MAX_SPA_ENCODED_MSG_SIZE = MAX_SPA_ENCRYPTED_SIZE

MIN_SPA_PLAINTEXT_MSG_SIZE = MIN_SPA_ENCODED_MSG_SIZE
MAX_SPA_PLAINTEXT_MSG_SIZE = MAX_SPA_ENCODED_MSG_SIZE

MIN_GNUPG_MSG_SIZE = 400
MIN_SPA_FIELDS = 6
MAX_SPA_FIELDS = 9

MAX_IPV4_STR_LEN = 16
MIN_IPV4_STR_LEN = 7

MAX_PROTO_STR_LEN = 4
MAX_PORT_STR_LEN = 5
MAX_PORT = 65535

FKO_ENCODE_TMP_BUF_SIZE = 1024
FKO_RAND_VAL_SIZE = 16

_LOW16 = 0xFFFF


class StateFlags(enum.IntFlag):
    """Bit values recorded in a context's state word."""

    CTX_SET = 1
    DATA_MODIFIED = 1 << 1
    RESERVED_2 = 1 << 2
    RESERVED_3 = 1 << 3
    RESERVED_4 = 1 << 4
    RESERVED_5 = 1 << 5
    SPA_MSG_TYPE_MODIFIED = 1 << 6
    CTX_SET_2 = 1 << 7
    RESERVED_8 = 1 << 8
    RESERVED_9 = 1 << 9
    RESERVED_10 = 1 << 10
    RESERVED_11 = 1 << 11
    DIGEST_TYPE_MODIFIED = 1 << 12
    ENCRYPT_TYPE_MODIFIED = 1 << 13
    RESERVED_14 = 1 << 14
    BACKWARD_COMPATIBLE = 1 << 15
    ENCRYPT_MODE_MODIFIED = 1 << 16
    HMAC_MODE_MODIFIED = 1 << 17


CTX_INITIALIZED = StateFlags.CTX_SET | StateFlags.CTX_SET_2

SPA_DATA_MODIFIED = (
    StateFlags.DATA_MODIFIED
    | StateFlags.SPA_MSG_TYPE_MODIFIED
    | StateFlags.DIGEST_TYPE_MODIFIED
    | StateFlags.ENCRYPT_TYPE_MODIFIED
)


def set_ctx_initialized(state: int) -> StateFlags:
    """Return ``state`` with the context-initialised bits set."""
    return StateFlags(int(state) | CTX_INITIALIZED)


def clear_ctx_initialized(state: int) -> StateFlags:
    """Return ``state`` with the context-initialised bits cleared.

    Only the low 16 bits of the state survive, as with the original mask.
    """
    return StateFlags(int(state) & (_LOW16 & ~CTX_INITIALIZED))


def is_spa_data_modified(state: int) -> bool:
    """Tell whether any SPA data field is marked as modified."""
    return bool(int(state) & SPA_DATA_MODIFIED)


def clear_spa_data_modified(state: int) -> StateFlags:
    """Return ``state`` with every SPA-data-modified bit cleared.

    Only the low 16 bits of the state survive, as with the original mask.
    """
    return StateFlags(int(state) & (_LOW16 & ~SPA_DATA_MODIFIED))