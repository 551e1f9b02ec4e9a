from datetime import timedelta

import pytest
from jose import jwt

from app.exceptions import UnauthorizedError
from app.utils.security import (
    authenticate,
    create_access_token,
    decode_token,
    hash_password,
    verify_password,
)


def test_valid_token_yields_user_id():
    token = create_access_token({"userId": "abc123"})

    assert authenticate(token) == "abc123"


def test_token_signed_with_other_secret_is_rejected():
    token = jwt.encode({"userId": "abc123"}, "some-other-secret", algorithm="HS256")

    assert decode_token(token) is None
    with pytest.raises(UnauthorizedError):
        authenticate(token)


def test_expired_token_is_rejected():
    token = create_access_token({"userId": "abc123"}, expires_delta=timedelta(seconds=-30))

    with pytest.raises(UnauthorizedError):
        authenticate(token)


@pytest.mark.parametrize("token", [None, "", "not-a-jwt", "a.b.c"])
def test_missing_or_malformed_token_is_rejected(token):
    with pytest.raises(UnauthorizedError) as exc_info:
        authenticate(token)

    assert exc_info.value.status_code == 401
    assert exc_info.value.detail == "Unauthorized"


def test_token_without_user_claim_is_rejected():
    token = create_access_token({"sub": "someone"})

    with pytest.raises(UnauthorizedError):
        authenticate(token)


def test_token_without_expiry_is_accepted():
    token = jwt.encode({"userId": "abc123"}, "test-secret-key", algorithm="HS256")

    assert authenticate(token) == "abc123"


def test_tampered_payload_is_rejected():
    header, _, signature = create_access_token({"userId": "abc123"}).split(".")
    forged_payload = jwt.encode({"userId": "admin"}, "x", algorithm="HS256").split(".")[1]

    with pytest.raises(UnauthorizedError):
        authenticate(f"{header}.{forged_payload}.{signature}")


def test_password_is_stored_as_salted_hash():
    first = hash_password("Password123!")
    second = hash_password("Password123!")

    assert first != "Password123!"
    assert first != second
    assert verify_password("Password123!", first)
    assert not verify_password("wrong", first)
