import pytest
from hypothesis import given
from hypothesis import strategies as st

from fkocrypt.state import (
    CTX_INITIALIZED,
    SPA_DATA_MODIFIED,
    StateFlags,
    clear_ctx_initialized,
    clear_spa_data_modified,
    is_spa_data_modified,
    set_ctx_initialized,
)

low16 = st.integers(min_value=0, max_value=0xFFFF)


def test_set_ctx_initialized_from_zero():
    assert set_ctx_initialized(0) == StateFlags.CTX_SET | StateFlags.CTX_SET_2


def test_set_keeps_other_bits():
    result = set_ctx_initialized(StateFlags.HMAC_MODE_MODIFIED)
    assert result & StateFlags.HMAC_MODE_MODIFIED
    assert result & CTX_INITIALIZED == CTX_INITIALIZED


def test_clear_ctx_initialized_drops_high_bits():
    state = StateFlags.ENCRYPT_MODE_MODIFIED | StateFlags.CTX_SET | StateFlags.DATA_MODIFIED
    assert clear_ctx_initialized(state) == StateFlags.DATA_MODIFIED


@pytest.mark.parametrize(
    "flag",
    [
        StateFlags.DATA_MODIFIED,
        StateFlags.SPA_MSG_TYPE_MODIFIED,
        StateFlags.DIGEST_TYPE_MODIFIED,
        StateFlags.ENCRYPT_TYPE_MODIFIED,
    ],
)
def test_modified_flags_detected(flag):
    assert is_spa_data_modified(flag) is True
    assert is_spa_data_modified(clear_spa_data_modified(flag)) is False


@pytest.mark.parametrize(
    "flag",
    [
        StateFlags.CTX_SET,
        StateFlags.BACKWARD_COMPATIBLE,
        StateFlags.ENCRYPT_MODE_MODIFIED,
        StateFlags.HMAC_MODE_MODIFIED,
    ],
)
def test_other_flags_not_spa_modified(flag):
    assert is_spa_data_modified(flag) is False


def test_clear_spa_data_modified_keeps_init_bits():
    state = set_ctx_initialized(SPA_DATA_MODIFIED)
    assert clear_spa_data_modified(state) == CTX_INITIALIZED


@given(low16)
def test_set_then_clear_round_trip(state):
    assert clear_ctx_initialized(set_ctx_initialized(state)) == state & ~CTX_INITIALIZED


@given(low16)
def test_clear_spa_is_idempotent(state):
    once = clear_spa_data_modified(state)
    assert clear_spa_data_modified(once) == once
    assert not is_spa_data_modified(once)


@given(st.integers(min_value=0, max_value=(1 << 18) - 1))
def test_clear_never_exceeds_low16(state):
    assert int(clear_ctx_initialized(state)) <= 0xFFFF
    assert int(clear_spa_data_modified(state)) <= 0xFFFF