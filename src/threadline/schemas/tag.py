# src/threadline/schemas/tag.py
"""Tag-related Pydantic schemas."""

from pydantic import BaseModel, ConfigDict


class TagResponse(BaseModel):
    """Schema for a catalog tag."""

    id: int
    name: str

    model_config = ConfigDict(from_attributes=True)
