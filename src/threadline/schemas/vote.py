# src/threadline/schemas/vote.py
"""Vote-related Pydantic schemas."""

from pydantic import BaseModel, Field


class VoteToggle(BaseModel):
    """Schema for toggling a vote on a post."""

    type: str | None = Field(None, description="'upvote' or 'downvote'")
