# src/commentbox/schemas/__init__.py
"""
Pydantic schemas for API request/response models.

These schemas define the structure of API data for serialization and validation.
"""

from .comment import (
    ApprovalUpdate,
    CommentCreate,
    CommentResponse,
    CommentUpdate,
    ThreadNodeResponse,
)
from .post import PostCreate, PostResponse, PostUpdate
from .user import (
    ActivityCounts,
    AuthorSummary,
    PostAuthorSummary,
    UserProfileResponse,
    UserResponse,
)

__all__ = [
    "ApprovalUpdate", "CommentCreate", "CommentResponse", "CommentUpdate", "ThreadNodeResponse",
    "PostCreate", "PostResponse", "PostUpdate",
    "ActivityCounts", "AuthorSummary", "PostAuthorSummary", "UserProfileResponse", "UserResponse",
]
