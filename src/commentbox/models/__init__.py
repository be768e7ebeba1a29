# src/commentbox/models/__init__.py
"""SQLAlchemy models for the Commentbox application."""

from .comment import Comment, CommentStatus
from .post import Post
from .user import User

__all__ = [
    "Comment", "CommentStatus",
    "Post",
    "User",
]
