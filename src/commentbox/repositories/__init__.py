# src/commentbox/repositories/__init__.py
"""Data access layer for posts and comments."""

from .comment_repo import CommentFilter, CommentRepository
from .post_repo import PostRepository

__all__ = ["CommentFilter", "CommentRepository", "PostRepository"]
