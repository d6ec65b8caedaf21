# src/threadline/api/v1/endpoints/announcements.py
"""Announcement endpoints: publishing, listing and read tracking."""

from fastapi import APIRouter, status

from threadline.api.v1.dependencies import (
    AnnouncementTrackerDep,
    CurrentCallerDep,
    UserServiceDep,
    ensure_admin,
    ensure_same_identity,
)
from threadline.core.settings import settings
from threadline.models.announcement import Announcement
from threadline.schemas.announcement import (
    AnnouncementCreate,
    AnnouncementListResponse,
    AnnouncementResponse,
    MarkSeenResponse,
    UnseenCountResponse,
)
from threadline.services.errors import require_fields

router = APIRouter(prefix="/announcements", tags=["announcements"])


def _to_response(announcement: Announcement, seen_by: list[str]) -> AnnouncementResponse:
    return AnnouncementResponse(
        id=str(announcement.id),
        author_name=announcement.author_name,
        author_email=announcement.author_email,
        author_image=announcement.author_image,
        title=announcement.title,
        description=announcement.description,
        created_at=announcement.created_at,
        seen_by=seen_by,
    )


@router.post("/", response_model=AnnouncementResponse, status_code=status.HTTP_201_CREATED)
async def create_announcement(
    payload: AnnouncementCreate,
    caller: CurrentCallerDep,
    tracker: AnnouncementTrackerDep,
    users: UserServiceDep,
) -> AnnouncementResponse:
    """Publish an announcement as the caller.

    When ``ANNOUNCEMENTS_PUBLISH_REQUIRES_ADMIN`` is set only admins may
    publish.
    """
    require_fields(
        author_name=payload.author_name,
        author_email=payload.author_email,
        title=payload.title,
        description=payload.description,
    )
    ensure_same_identity(caller, payload.author_email, "announce")
    if settings.announcements_publish_requires_admin:
        ensure_admin(caller, users)
    announcement = tracker.create(
        author_name=payload.author_name,
        author_email=payload.author_email,
        author_image=payload.author_image,
        title=payload.title,
        description=payload.description,
    )
    return _to_response(announcement, [])


@router.get("/", response_model=AnnouncementListResponse)
async def list_announcements(
    caller: CurrentCallerDep,
    tracker: AnnouncementTrackerDep,
    users: UserServiceDep,
) -> AnnouncementListResponse:
    """List every announcement, newest first.

    Restricted to admins unless ``ANNOUNCEMENTS_LIST_REQUIRES_ADMIN`` is off.
    """
    if settings.announcements_list_requires_admin:
        ensure_admin(caller, users)
    announcements = tracker.list_all()
    seen = tracker.seen_by(item.id for item in announcements)
    return AnnouncementListResponse(
        items=[_to_response(item, seen[item.id]) for item in announcements],
        count=len(announcements),
    )


@router.get("/unseen/count", response_model=UnseenCountResponse)
async def unseen_count(
    caller: CurrentCallerDep,
    tracker: AnnouncementTrackerDep,
) -> UnseenCountResponse:
    """Return how many announcements the caller has not acknowledged."""
    return UnseenCountResponse(count=tracker.unseen_count_for(caller.email))


@router.patch("/mark-seen", response_model=MarkSeenResponse)
async def mark_seen(
    caller: CurrentCallerDep,
    tracker: AnnouncementTrackerDep,
) -> MarkSeenResponse:
    """Acknowledge every announcement for the caller. Safe to repeat."""
    marked = tracker.mark_all_seen_for(caller.email)
    return MarkSeenResponse(message="Announcements marked as seen", marked=marked)
