# tests/v1/test_dependencies.py
"""Tests for token verification and caller identity."""

from datetime import UTC, datetime, timedelta

import pytest
from jose import jwt

from threadline.api.v1.dependencies import ensure_same_identity
from threadline.core.security import CallerIdentity, create_access_token, verify_token
from threadline.core.settings import settings
from threadline.services.errors import AuthenticationError, AuthorizationError


def test_round_trip_carries_profile_claims() -> None:
    token = create_access_token("alice@example.com", name="Alice", picture="https://img/a.png")
    caller = verify_token(token)
    assert caller == CallerIdentity("alice@example.com", "Alice", "https://img/a.png")


def test_missing_token() -> None:
    with pytest.raises(AuthenticationError, match="No token provided"):
        verify_token(None)


def test_token_signed_with_another_key() -> None:
    token = jwt.encode(
        {"email": "alice@example.com", "exp": datetime.now(UTC) + timedelta(minutes=5)},
        "not-the-secret",
        algorithm=settings.jwt_algorithm,
    )
    with pytest.raises(AuthenticationError, match="Invalid token"):
        verify_token(token)


def test_expired_token() -> None:
    token = create_access_token("alice@example.com", expires_minutes=-5)
    with pytest.raises(AuthenticationError, match="Invalid token"):
        verify_token(token)


def test_token_without_email_claim() -> None:
    token = jwt.encode(
        {"sub": "someone", "exp": datetime.now(UTC) + timedelta(minutes=5)},
        settings.secret_key,
        algorithm=settings.jwt_algorithm,
    )
    with pytest.raises(AuthenticationError, match="No user email"):
        verify_token(token)


def test_ensure_same_identity() -> None:
    caller = CallerIdentity("alice@example.com")
    ensure_same_identity(caller, "alice@example.com", "post")
    ensure_same_identity(caller, None, "post")
    with pytest.raises(AuthorizationError):
        ensure_same_identity(caller, "bob@example.com", "post")
