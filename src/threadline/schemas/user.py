# src/threadline/schemas/user.py
"""User-related Pydantic schemas."""

from pydantic import BaseModel, ConfigDict


class UserCreate(BaseModel):
    """Schema for registering an account."""

    name: str | None = None
    email: str | None = None
    avatar: str | None = None
    role: str | None = None
    membership: str = "no"
    user_status: str = "bronze"


class UserResponse(BaseModel):
    """Schema for account information returned by the API."""

    id: int
    name: str
    email: str
    avatar: str
    role: str | None
    membership: str
    user_status: str
    posts: int

    model_config = ConfigDict(from_attributes=True)
