"""Bearer-token identity verification.

Tokens are JWTs signed with ``SECRET_KEY``. The verified ``email`` claim is the
caller identity used throughout the engagement services; ``name`` and
``picture`` are optional display attributes.
"""
from __future__ import annotations

from dataclasses import dataclass
from datetime import UTC, datetime, timedelta

from jose import JWTError, jwt

from threadline.core.settings import settings
from threadline.services.errors import AuthenticationError


@dataclass(frozen=True)
class CallerIdentity:
    """Verified identity of the caller making a request."""

    email: str
    name: str = ""
    picture: str = ""


def create_access_token(
    email: str,
    name: str | None = None,
    picture: str | None = None,
    expires_minutes: int | None = None,
) -> str:
    """Create a signed access token asserting ``email``."""
    claims: dict[str, object] = {"sub": email, "email": email}
    if name:
        claims["name"] = name
    if picture:
        claims["picture"] = picture
    minutes = settings.access_token_expire_minutes if expires_minutes is None else expires_minutes
    claims["exp"] = datetime.now(UTC) + timedelta(minutes=minutes)
    encoded_jwt: str = jwt.encode(
        claims,
        settings.secret_key,
        algorithm=settings.jwt_algorithm,
    )
    return encoded_jwt


def verify_token(token: str | None) -> CallerIdentity:
    """Decode ``token`` and return the caller identity it asserts.

    Raises:
        AuthenticationError: If the token is missing, fails verification, or
            carries no email claim.
    """
    if not token:
        raise AuthenticationError("Unauthorized: No token provided")
    try:
        payload = jwt.decode(
            token,
            settings.secret_key,
            algorithms=[settings.jwt_algorithm],
        )
    except JWTError as err:
        raise AuthenticationError("Unauthorized: Invalid token") from err

    email = payload.get("email")
    if not email:
        raise AuthenticationError("Unauthorized: No user email")
    return CallerIdentity(
        email=email,
        name=payload.get("name") or "",
        picture=payload.get("picture") or "",
    )
