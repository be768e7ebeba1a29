"""User-related Pydantic schemas."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field


class AuthorSummary(BaseModel):
    """Public identity shown next to a comment."""

    id: int
    name: str

    model_config = ConfigDict(from_attributes=True)


class PostAuthorSummary(AuthorSummary):
    """Identity shown next to a post, including the contact address."""

    email: str


class UserResponse(BaseModel):
    """Public view of an authenticated user."""

    id: int
    name: str
    email: str
    created_at: datetime

    model_config = ConfigDict(from_attributes=True)


class ActivityCounts(BaseModel):
    """How much content a user has authored."""

    posts: int = Field(..., ge=0)
    comments: int = Field(..., ge=0)


class UserProfileResponse(UserResponse):
    """The authenticated user together with their authored content counts."""

    counts: ActivityCounts
