"""Shared API dependencies for authentication and service wiring."""

from typing import Annotated

from fastapi import Depends
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from sqlalchemy.orm import Session

from threadline.core.security import CallerIdentity, verify_token
from threadline.db.session import get_db
from threadline.models.user import ROLE_ADMIN
from threadline.services import (
    AnnouncementTracker,
    EngagementService,
    PostStore,
    TagService,
    UserService,
)
from threadline.services.errors import AuthorizationError

# HTTP Bearer scheme; missing headers are reported by verify_token as 401.
bearer_scheme = HTTPBearer(auto_error=False)

# Type alias for database session dependency
SessionDep = Annotated[Session, Depends(get_db)]


def get_current_caller(
    credentials: Annotated[HTTPAuthorizationCredentials | None, Depends(bearer_scheme)],
) -> CallerIdentity:
    """Return the verified identity behind the request's bearer token.

    Raises:
        AuthenticationError: If the token is missing or invalid.
    """
    token = credentials.credentials if credentials else None
    return verify_token(token)


CurrentCallerDep = Annotated[CallerIdentity, Depends(get_current_caller)]


def get_user_service(db: SessionDep) -> UserService:
    """Return a user service bound to the request session."""
    return UserService(db)


def get_engagement_service(db: SessionDep) -> EngagementService:
    """Return the engagement façade bound to the request session."""
    return EngagementService(db, posts=PostStore(db, users=UserService(db)))


def get_announcement_tracker(db: SessionDep) -> AnnouncementTracker:
    """Return the announcement tracker bound to the request session."""
    return AnnouncementTracker(db)


def get_tag_service(db: SessionDep) -> TagService:
    """Return the tag catalog service bound to the request session."""
    return TagService(db)


UserServiceDep = Annotated[UserService, Depends(get_user_service)]
EngagementDep = Annotated[EngagementService, Depends(get_engagement_service)]
AnnouncementTrackerDep = Annotated[AnnouncementTracker, Depends(get_announcement_tracker)]
TagServiceDep = Annotated[TagService, Depends(get_tag_service)]


def ensure_admin(caller: CallerIdentity, users: UserService) -> None:
    """Raise ``AuthorizationError`` unless ``caller`` holds the admin role."""
    if users.role_of(caller.email) != ROLE_ADMIN:
        raise AuthorizationError("Forbidden: Admins only")


def ensure_same_identity(caller: CallerIdentity, email: str | None, action: str) -> None:
    """Raise ``AuthorizationError`` when ``caller`` acts on behalf of ``email``."""
    if email and caller.email != email:
        raise AuthorizationError(f"Forbidden: Cannot {action} as another user")
