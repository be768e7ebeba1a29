"""Domain errors raised by the comment store and the moderation engine.

The core never recovers from a violated rule on its own; each violation is
raised as one of the classes below and translated into a response by the
caller (see ``commentbox.main``).
"""

from __future__ import annotations


class CommentboxError(RuntimeError):
    """Base class for every domain failure surfaced to callers."""

    default_message = "Request could not be completed"

    def __init__(self, message: str | None = None) -> None:
        super().__init__(message or self.default_message)


class NotFoundError(CommentboxError):
    """Raised when the referenced post or comment does not exist."""

    default_message = "Resource not found"


class InvalidParentError(CommentboxError):
    """Raised when a parent comment is missing or belongs to another post."""

    default_message = "Invalid parent comment"


class ForbiddenError(CommentboxError):
    """Raised when the actor lacks the relationship the operation requires."""

    default_message = "Operation not permitted"


class CannotEditApprovedError(CommentboxError):
    """Raised when the author tries to edit a comment that cleared moderation."""

    default_message = "Cannot edit approved comments"


class CommentDeletedError(CommentboxError):
    """Raised for any mutation attempted on a soft-deleted comment."""

    default_message = "Comment has been deleted"


class ConcurrentUpdateError(CommentboxError):
    """Raised when a save is based on a snapshot another request already changed."""

    default_message = "Comment was modified by another request"


__all__ = [
    "CannotEditApprovedError",
    "CommentDeletedError",
    "CommentboxError",
    "ConcurrentUpdateError",
    "ForbiddenError",
    "InvalidParentError",
    "NotFoundError",
]
