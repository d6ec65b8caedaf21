# src/threadline/schemas/post.py
"""Post-related Pydantic schemas."""

from datetime import datetime

from pydantic import BaseModel, Field

from threadline.schemas.comment import CommentResponse


class PostCreate(BaseModel):
    """Schema for creating a new post.

    Fields are optional at the schema level so that missing values are
    reported as a 400 by the service layer.
    """

    title: str | None = Field(None, description="Post title")
    description: str | None = Field(None, description="Post body")
    tag: str | None = Field(None, description="Tag name from the catalog")
    author_name: str | None = None
    author_email: str | None = None
    author_image: str | None = None


class PostResponse(BaseModel):
    """Schema for post information returned by the API."""

    id: str
    author_name: str
    author_email: str
    author_image: str
    title: str
    description: str
    tag: str
    created_at: datetime
    upvoters: list[str]
    downvoters: list[str]
    popularity_score: int
    comment_count: int


class PostDetailResponse(PostResponse):
    """A single post together with its comments, newest first."""

    comments: list[CommentResponse]


class PostPageResponse(BaseModel):
    """Paginated post listing."""

    items: list[PostResponse]
    current_page: int
    total_pages: int
    total_count: int
