from __future__ import annotations

from datetime import timedelta

import jwt
import pytest

from app.core.auth import verify_token
from app.core.exceptions import InvalidTokenError, TokenExpiredError
from app.core.security import create_access_token, get_password_hash, verify_password


def test_password_hash_is_salted_and_verifiable():
    first = get_password_hash("secret123")
    second = get_password_hash("secret123")
    assert first != second
    assert verify_password("secret123", first)
    assert not verify_password("secret124", first)


def test_verify_token_returns_user_id():
    token = create_access_token("42")
    assert verify_token(token) == 42


def test_verify_token_expired():
    token = create_access_token("42", expires_delta=timedelta(seconds=-5))
    with pytest.raises(TokenExpiredError) as exc_info:
        verify_token(token)
    assert exc_info.value.error_code == "token_expired"


def test_verify_token_wrong_signature():
    token = jwt.encode({"sub": "42"}, "some-other-secret", algorithm="HS256")
    with pytest.raises(InvalidTokenError):
        verify_token(token)


@pytest.mark.parametrize("payload", [{}, {"sub": "not-a-number"}])
def test_verify_token_bad_subject(payload):
    token = jwt.encode(payload, "test-secret", algorithm="HS256")
    with pytest.raises(InvalidTokenError):
        verify_token(token)


def test_verify_token_garbage():
    with pytest.raises(InvalidTokenError):
        verify_token("definitely.not.a-jwt")
