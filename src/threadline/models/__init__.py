# src/threadline/models/__init__.py
"""SQLAlchemy models for the Threadline application."""

from .announcement import Announcement, AnnouncementSeen
from .comment import Comment
from .post import Post
from .tag import Tag
from .user import User
from .vote import PostVote

__all__ = [
    "Announcement", "AnnouncementSeen",
    "Comment",
    "Post",
    "Tag",
    "User",
    "PostVote",
]
