# src/threadline/services/__init__.py
"""Business logic services for the Threadline application."""

from .announcement_service import AnnouncementTracker
from .comment_service import CommentStore
from .engagement import EngagementService
from .post_service import PostStore
from .tag_service import TagService
from .user_service import UserService

__all__ = [
    "AnnouncementTracker",
    "CommentStore",
    "EngagementService",
    "PostStore",
    "TagService",
    "UserService",
]
