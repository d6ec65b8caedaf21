"""Account helpers: creation, lookup, roles and the per-user post counter."""
from __future__ import annotations

import logging

from sqlalchemy import select, update
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from threadline.models.user import User
from threadline.services.errors import (
    ConflictError,
    NotFoundError,
    persistence_guard,
    require_fields,
)

__all__ = ["UserService"]

logger = logging.getLogger(__name__)


class UserService:
    """Thin wrapper around database access for user accounts."""

    def __init__(self, session: Session) -> None:
        self.session = session

    def create(
        self,
        *,
        name: str | None,
        email: str | None,
        avatar: str | None,
        role: str | None = None,
        membership: str = "no",
        user_status: str = "bronze",
    ) -> User:
        """Persist a new account.

        Raises:
            ValidationError: If name, email or avatar is missing.
            ConflictError: If an account already uses ``email``.
        """
        require_fields(name=name, email=email, avatar=avatar)
        with persistence_guard(self.session, "create user", logger):
            if self.find_by_email(email) is not None:
                raise ConflictError("User already exists")
            user = User(
                name=name,
                email=email,
                avatar=avatar,
                role=role,
                membership=membership,
                user_status=user_status,
                posts=0,
            )
            self.session.add(user)
            try:
                self.session.commit()
            except IntegrityError as exc:
                # Lost a race with a concurrent registration for the same email.
                self.session.rollback()
                raise ConflictError("User already exists") from exc
            self.session.refresh(user)
        logger.info("Created user account for %s", email)
        return user

    def find_by_email(self, email: str | None) -> User | None:
        """Return the account registered under ``email``, if any."""
        return self.session.scalars(select(User).where(User.email == email)).first()

    def get_by_email(self, email: str) -> User:
        """Return the account registered under ``email``.

        Raises:
            NotFoundError: If there is no such account.
        """
        with persistence_guard(self.session, "load user", logger):
            user = self.find_by_email(email)
        if user is None:
            raise NotFoundError("User not found")
        return user

    def role_of(self, email: str) -> str | None:
        """Return the role stored for ``email`` or ``None`` for unknown callers."""
        with persistence_guard(self.session, "look up user role", logger):
            return self.session.scalar(select(User.role).where(User.email == email))

    def increment_post_count(self, email: str) -> None:
        """Bump the post counter of ``email`` with a single in-place update."""
        with persistence_guard(self.session, "increment post counter", logger):
            self.session.execute(
                update(User)
                .where(User.email == email)
                .values(posts=User.posts + 1)
                .execution_options(synchronize_session=False)
            )
            self.session.commit()
