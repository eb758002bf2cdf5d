"""Tests for password hashing and JWT helpers."""

from __future__ import annotations

from datetime import timedelta

import pytest
from jose import jwt

from src.fundrazor.config import get_settings
from src.fundrazor.core.errors import UnauthorizedError
from src.fundrazor.core.security import (
    create_access_token,
    create_refresh_token,
    hash_password,
    verify_password,
    verify_token,
)


def test_hash_and_verify_password():
    hashed = hash_password("correct horse battery")

    assert hashed != "correct horse battery"
    assert verify_password("correct horse battery", hashed)
    assert not verify_password("wrong", hashed)


def test_access_token_round_trip():
    token = create_access_token({"sub": "user-1", "role": "MGO"})

    payload = verify_token(token)

    assert payload["sub"] == "user-1"
    assert payload["role"] == "MGO"
    assert payload["type"] == "access"


def test_refresh_token_is_not_an_access_token():
    token = create_refresh_token({"sub": "user-1"})

    assert verify_token(token, token_type="refresh")["sub"] == "user-1"
    with pytest.raises(UnauthorizedError):
        verify_token(token, token_type="access")


def test_expired_token_rejected():
    token = create_access_token({"sub": "user-1"}, expires_delta=timedelta(seconds=-5))

    with pytest.raises(UnauthorizedError):
        verify_token(token)


def test_token_signed_with_other_key_rejected():
    settings = get_settings()
    forged = jwt.encode(
        {"sub": "user-1", "type": "access"}, "not-the-secret", algorithm=settings.JWT_ALGORITHM
    )

    with pytest.raises(UnauthorizedError, match="Could not validate credentials"):
        verify_token(forged)


def test_token_without_subject_rejected():
    token = create_access_token({"role": "MGO"})

    with pytest.raises(UnauthorizedError):
        verify_token(token)
