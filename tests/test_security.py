# tests/test_security.py
"""Tests for password hashing and token helpers."""

import pytest

from messagely.core.errors import UnauthorizedError
from messagely.core.security import (
    create_access_token,
    decode_access_token,
    hash_password,
    verify_password,
)


def test_hash_is_salted() -> None:
    first = hash_password("pw1", work_factor=4)
    second = hash_password("pw1", work_factor=4)
    assert first != second
    assert verify_password("pw1", first)
    assert verify_password("pw1", second)


def test_hash_uses_work_factor() -> None:
    assert hash_password("pw1", work_factor=5).split("$")[2] == "05"


def test_verify_rejects_wrong_password() -> None:
    hashed = hash_password("pw1", work_factor=4)
    assert not verify_password("pw2", hashed)


def test_verify_rejects_malformed_hash() -> None:
    assert not verify_password("pw1", "not-a-bcrypt-hash")


def test_token_round_trip() -> None:
    assert decode_access_token(create_access_token("alice")) == "alice"


def test_decode_rejects_garbage() -> None:
    with pytest.raises(UnauthorizedError):
        decode_access_token("garbage")


def test_verify_rejects_overlong_candidate() -> None:
    hashed = hash_password("x" * 72, work_factor=4)
    assert not verify_password("x" * 72 + "EXTRA", hashed)
    assert verify_password("x" * 72, hashed)
