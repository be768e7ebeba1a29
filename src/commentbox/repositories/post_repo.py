"""Data access helpers for working with posts."""
from __future__ import annotations

from sqlalchemy import select
from sqlalchemy.orm import Session

from commentbox.models.post import Post
from commentbox.repositories.comment_repo import CommentRepository

__all__ = ["PostRepository"]


class PostRepository:
    """Thin wrapper around database access for post entities."""

    def __init__(self, session: Session) -> None:
        """Initialize the repository with a SQLAlchemy session."""
        self.session = session

    def get_by_id(self, post_id: int) -> Post | None:
        """Return a post by identifier."""
        return self.session.get(Post, post_id)

    def list_recent(self, limit: int | None = None) -> list[Post]:
        """Return posts, newest first."""
        stmt = select(Post).order_by(Post.created_at.desc(), Post.id.desc())
        if limit is not None:
            stmt = stmt.limit(limit)
        return list(self.session.scalars(stmt))

    def create(self, *, author_id: int, title: str, content: str) -> Post:
        """Insert a new post and return the persisted ORM instance."""
        post = Post(author_id=author_id, title=title, content=content)
        self.session.add(post)
        self.session.flush()
        return post

    def save(self, post: Post) -> Post:
        """Persist a mutated post."""
        self.session.add(post)
        self.session.flush()
        return post

    def delete(self, post: Post) -> int:
        """Remove a post together with all of its comments.

        Comments are removed explicitly, leaf-first, so the cascade does not
        depend on the database enforcing foreign keys. The caller owns the
        surrounding transaction.

        Returns:
            Number of comments removed alongside the post.
        """
        removed = CommentRepository(self.session).delete_for_post(post.id)
        self.session.delete(post)
        self.session.flush()
        return removed
