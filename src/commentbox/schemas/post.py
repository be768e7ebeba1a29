# src/commentbox/schemas/post.py
"""Post-related Pydantic schemas."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field

from commentbox.schemas.user import PostAuthorSummary


class PostCreate(BaseModel):
    """Schema for creating a new post."""

    title: str = Field(..., min_length=3, max_length=255)
    content: str = Field(..., min_length=10)


class PostUpdate(BaseModel):
    """Schema for editing a post; omitted fields are left unchanged."""

    title: str | None = Field(None, min_length=3, max_length=255)
    content: str | None = Field(None, min_length=10)


class PostResponse(BaseModel):
    """Schema for post information returned by the API."""

    id: int
    author_id: int
    author: PostAuthorSummary
    title: str
    content: str
    created_at: datetime
    updated_at: datetime

    model_config = ConfigDict(from_attributes=True)
