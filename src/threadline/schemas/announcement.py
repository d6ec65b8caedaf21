# src/threadline/schemas/announcement.py
"""Announcement-related Pydantic schemas."""

from datetime import datetime

from pydantic import BaseModel, Field


class AnnouncementCreate(BaseModel):
    """Schema for publishing an announcement."""

    title: str | None = Field(None, description="Announcement headline")
    description: str | None = Field(None, description="Announcement body")
    author_name: str | None = None
    author_email: str | None = None
    author_image: str | None = None


class AnnouncementResponse(BaseModel):
    """Schema for announcement information returned by the API."""

    id: str
    author_name: str
    author_email: str
    author_image: str
    title: str
    description: str
    created_at: datetime
    seen_by: list[str]


class AnnouncementListResponse(BaseModel):
    """All announcements, newest first, with their total."""

    items: list[AnnouncementResponse]
    count: int


class UnseenCountResponse(BaseModel):
    """Number of announcements the caller has not acknowledged."""

    count: int


class MarkSeenResponse(BaseModel):
    """Outcome of acknowledging every announcement."""

    message: str
    marked: int
