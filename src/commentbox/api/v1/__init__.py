# src/commentbox/api/v1/__init__.py
"""Version 1 API endpoints."""

from .endpoints import auth_router, comments_router, posts_router

__all__ = [
    "auth_router",
    "comments_router",
    "posts_router",
]
