# src/threadline/schemas/comment.py
"""Comment-related Pydantic schemas."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field, model_validator


class CommentCreate(BaseModel):
    """Schema for adding a comment to a post."""

    comment: str | None = Field(None, description="Comment text")


class CommentResponse(BaseModel):
    """Schema for comment information returned by the API."""

    id: str
    post_id: str
    post_title: str
    body: str
    commenter_name: str
    commenter_email: str
    commenter_image: str
    created_at: datetime

    @model_validator(mode="before")
    @classmethod
    def _stringify_ids(cls, data: object) -> object:
        if not isinstance(data, dict):
            data = {name: getattr(data, name, None) for name in cls.model_fields}
        else:
            data = dict(data)
        for key in ("id", "post_id"):
            if isinstance(data.get(key), int):
                data[key] = str(data[key])
        return data

    model_config = ConfigDict(from_attributes=True)


class CommentCreatedResponse(BaseModel):
    """A newly stored comment and the post's updated comment count."""

    comment: CommentResponse
    comment_count: int
