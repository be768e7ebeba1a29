# src/commentbox/schemas/comment.py
"""Comment-related Pydantic schemas."""

from __future__ import annotations

from datetime import datetime
from typing import TYPE_CHECKING, Literal

from pydantic import BaseModel, ConfigDict, Field

from commentbox.models.comment import COMMENT_TEXT_MAX_LENGTH, CommentStatus
from commentbox.schemas.user import AuthorSummary

if TYPE_CHECKING:
    from commentbox.services.threads import ThreadNode

COMMENT_TEXT_MIN_LENGTH = 3


class CommentCreate(BaseModel):
    """Schema for creating a comment on a post."""

    text: str = Field(
        ...,
        min_length=COMMENT_TEXT_MIN_LENGTH,
        max_length=COMMENT_TEXT_MAX_LENGTH,
        description="Comment body",
    )
    parent_id: int | None = Field(None, description="Comment being replied to")


class CommentUpdate(BaseModel):
    """Schema for editing a comment's text."""

    text: str = Field(
        ...,
        min_length=COMMENT_TEXT_MIN_LENGTH,
        max_length=COMMENT_TEXT_MAX_LENGTH,
    )


class ApprovalUpdate(BaseModel):
    """Schema for the post author's moderation decision."""

    status: Literal["approved", "rejected"]

    @property
    def decision(self) -> CommentStatus:
        return CommentStatus(self.status)


class CommentResponse(BaseModel):
    """Schema for comment information returned by the API."""

    id: int
    post_id: int
    author_id: int
    author: AuthorSummary
    parent_id: int | None
    text: str
    status: CommentStatus
    deleted: bool
    created_at: datetime
    updated_at: datetime

    model_config = ConfigDict(from_attributes=True)


class ThreadNodeResponse(BaseModel):
    """A top-level comment with its direct approved replies."""

    comment: CommentResponse
    replies: list[CommentResponse]

    @classmethod
    def from_node(cls, node: ThreadNode) -> ThreadNodeResponse:
        """Build the response for an assembled thread node."""
        return cls(
            comment=CommentResponse.model_validate(node.comment),
            replies=[CommentResponse.model_validate(reply) for reply in node.replies],
        )
