from __future__ import annotations

from datetime import datetime, timedelta, timezone

import jwt
import pytest

from product_catalog.core.enums import Role
from product_catalog.core.exceptions import InvalidTokenError
from product_catalog.security.jwt_generator import JwtGenerator

SECRET = "unit-test-secret-0123456789abcdef0123456789"


def test_token_carries_username_role_and_expiry(fixed_now):
    generator = JwtGenerator(SECRET, expiration_seconds=600, clock=lambda: fixed_now)
    token = generator.generate_token("john", Role.ROLE_USER)

    payload = jwt.decode(token, SECRET, algorithms=["HS256"], options={"verify_exp": False, "verify_iat": False})
    assert payload["sub"] == "john"
    assert payload["role"] == "ROLE_USER"
    assert payload["exp"] - payload["iat"] == 600


def test_get_claims_round_trip():
    generator = JwtGenerator(SECRET)
    claims = generator.get_claims(generator.generate_token("admin", Role.ROLE_ADMIN))

    assert claims.username == "admin"
    assert claims.role == Role.ROLE_ADMIN
    assert claims.authorities == frozenset({"ROLE_ADMIN"})
    assert claims.expires_at > claims.issued_at


def test_expired_token_is_rejected():
    issued_long_ago = datetime.now(timezone.utc) - timedelta(days=30)
    generator = JwtGenerator(SECRET, expiration_seconds=60, clock=lambda: issued_long_ago)
    token = generator.generate_token("john", Role.ROLE_USER)

    with pytest.raises(InvalidTokenError, match="expired"):
        generator.get_claims(token)
    assert generator.validate_token(token) is False


def test_token_signed_with_other_secret_is_rejected():
    forged = JwtGenerator("another-secret-0123456789abcdef0123456789").generate_token("john", Role.ROLE_USER)

    assert JwtGenerator(SECRET).validate_token(forged) is False


def test_garbage_token_is_rejected():
    with pytest.raises(InvalidTokenError):
        JwtGenerator(SECRET).get_claims("not-a-jwt")


def test_unknown_role_claim_is_rejected():
    token = jwt.encode({"sub": "john", "role": "ROLE_ROOT", "iat": 0, "exp": 4102444800}, SECRET, algorithm="HS256")

    with pytest.raises(InvalidTokenError, match="role"):
        JwtGenerator(SECRET).get_claims(token)


def test_empty_secret_not_allowed():
    with pytest.raises(ValueError):
        JwtGenerator("")


def test_secret_shorter_than_32_bytes_not_allowed():
    with pytest.raises(ValueError, match="at least 32 bytes"):
        JwtGenerator("x" * 31)
