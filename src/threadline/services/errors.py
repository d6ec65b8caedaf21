"""Exceptions raised by the Threadline service layer.

The API layer maps each class onto an HTTP status code; services never
raise ``HTTPException`` themselves.
"""

from __future__ import annotations

import logging
from collections.abc import Iterator
from contextlib import contextmanager

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session


class ThreadlineError(RuntimeError):
    """Base exception for service-layer failures."""

    status_code = 500

    def __init__(self, detail: str) -> None:
        super().__init__(detail)
        self.detail = detail


class ValidationError(ThreadlineError):
    """Raised when required fields are missing or malformed."""

    status_code = 400


class InvalidIdError(ValidationError):
    """Raised when a record identifier is not a well-formed id token."""


class NotFoundError(ThreadlineError):
    """Raised when a referenced post, comment, announcement or user is absent."""

    status_code = 404


class AuthenticationError(ThreadlineError):
    """Raised when a bearer token is missing, invalid or carries no email."""

    status_code = 401


class AuthorizationError(ThreadlineError):
    """Raised when the caller may not act on a resource."""

    status_code = 403


class ConflictError(ThreadlineError):
    """Raised when a record with the same unique key already exists."""

    status_code = 409


class PersistenceError(ThreadlineError):
    """Raised when the database rejects or fails an operation.

    The detail is deliberately generic; the underlying error is logged by the
    service that raised it.
    """

    status_code = 500


def parse_record_id(raw: str | int, kind: str = "record") -> int:
    """Return the integer primary key encoded by ``raw``.

    Raises:
        InvalidIdError: If ``raw`` is not a positive decimal integer.
    """
    if isinstance(raw, int) and not isinstance(raw, bool):
        value = raw
    else:
        text = str(raw).strip()
        if not text.isdigit() or not text.isascii():
            raise InvalidIdError(f"Invalid {kind} id")
        value = int(text)
    if value <= 0:
        raise InvalidIdError(f"Invalid {kind} id")
    return value


def require_fields(**fields: str | None) -> None:
    """Raise ``ValidationError`` naming every empty field."""
    missing = [name for name, value in fields.items() if value is None or not str(value).strip()]
    if missing:
        raise ValidationError(f"Missing required fields: {', '.join(missing)}")


@contextmanager
def persistence_guard(session: Session, action: str, log: logging.Logger) -> Iterator[None]:
    """Translate database failures inside the block into ``PersistenceError``.

    The session is rolled back before the error propagates.
    """
    try:
        yield
    except SQLAlchemyError as exc:
        session.rollback()
        log.exception("Database failure while trying to %s", action)
        raise PersistenceError("Internal server error") from exc
