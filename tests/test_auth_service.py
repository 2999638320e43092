"""Tests for token and password primitives."""

from datetime import UTC, datetime, timedelta

from jose import jwt

from litlink.config import Settings
from litlink.services.auth import (
    create_access_token,
    decode_access_token,
    get_password_hash,
    verify_password,
)

settings = Settings(jwt_secret="test-secret")


def test_token_round_trip():
    """Test a token decodes to the identity it was signed with."""
    token = create_access_token(settings, 42, "ana")
    identity = decode_access_token(settings, token)
    assert identity is not None
    assert identity.id == 42
    assert identity.username == "ana"


def test_token_expires_after_configured_window():
    """Test the exp claim is 24 hours out by default."""
    token = create_access_token(settings, 1, "ana")
    claims = jwt.get_unverified_claims(token)
    expires = datetime.fromtimestamp(claims["exp"], UTC)
    remaining = expires - datetime.now(UTC)
    assert timedelta(hours=23, minutes=59) < remaining <= timedelta(hours=24)


def test_token_with_other_secret_rejected():
    """Test a token signed with a different secret fails verification."""
    other = Settings(jwt_secret="another-secret")
    token = create_access_token(other, 1, "ana")
    assert decode_access_token(settings, token) is None


def test_expired_token_rejected():
    """Test a token past its expiry fails verification."""
    token = jwt.encode(
        {"id": 1, "username": "ana", "exp": datetime.now(UTC) - timedelta(seconds=5)},
        settings.jwt_secret,
        algorithm=settings.jwt_algorithm,
    )
    assert decode_access_token(settings, token) is None


def test_token_without_identity_rejected():
    """Test a correctly signed token lacking id/username is refused."""
    token = jwt.encode(
        {"sub": "1", "exp": datetime.now(UTC) + timedelta(hours=1)},
        settings.jwt_secret,
        algorithm=settings.jwt_algorithm,
    )
    assert decode_access_token(settings, token) is None


def test_expired_token_rejected_by_guard(client):
    """Test the auth guard answers 403 for an expired token."""
    from litlink.config import get_settings

    app_settings = get_settings()
    token = jwt.encode(
        {"id": 1, "username": "ana", "exp": datetime.now(UTC) - timedelta(minutes=1)},
        app_settings.jwt_secret,
        algorithm=app_settings.jwt_algorithm,
    )
    response = client.get("/api/links", headers={"Authorization": f"Bearer {token}"})
    assert response.status_code == 403


def test_password_hash_verifies():
    """Test hashing is salted and verifiable."""
    first = get_password_hash("p1")
    second = get_password_hash("p1")
    assert first != second
    assert verify_password("p1", first)
    assert not verify_password("p2", first)
