"""
Pydantic schemas for API request/response models.

These schemas define the structure of API data for serialization and validation.
"""

from .announcement import (
    AnnouncementCreate,
    AnnouncementListResponse,
    AnnouncementResponse,
    MarkSeenResponse,
    UnseenCountResponse,
)
from .comment import CommentCreate, CommentCreatedResponse, CommentResponse
from .post import PostCreate, PostDetailResponse, PostPageResponse, PostResponse
from .tag import TagResponse
from .user import UserCreate, UserResponse
from .vote import VoteToggle

__all__ = [
    "AnnouncementCreate", "AnnouncementListResponse", "AnnouncementResponse",
    "MarkSeenResponse", "UnseenCountResponse",
    "CommentCreate", "CommentCreatedResponse", "CommentResponse",
    "PostCreate", "PostDetailResponse", "PostPageResponse", "PostResponse",
    "TagResponse",
    "UserCreate", "UserResponse",
    "VoteToggle",
]
