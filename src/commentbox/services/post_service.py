"""Service-level helpers for the post registry."""
from __future__ import annotations

import logging

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from commentbox.core.errors import ForbiddenError, NotFoundError
from commentbox.models import Post
from commentbox.repositories import PostRepository

logger = logging.getLogger(__name__)


def get_post(db: Session, post_id: int) -> Post:
    """Return a post or raise :class:`NotFoundError`."""
    post = PostRepository(db).get_by_id(post_id)
    if post is None:
        raise NotFoundError("Post not found")
    return post


def list_posts(db: Session, limit: int | None = None) -> list[Post]:
    """Return posts newest first."""
    return PostRepository(db).list_recent(limit)


def create_post(db: Session, *, author_id: int, title: str, content: str) -> Post:
    """Create a post owned by ``author_id``."""
    repo = PostRepository(db)
    try:
        post = repo.create(author_id=author_id, title=title, content=content)
        db.commit()
    except SQLAlchemyError:
        db.rollback()
        raise
    logger.info("Post %s created by user %s", post.id, author_id)
    return post


def _owned_post(db: Session, post_id: int, actor_id: int, action: str) -> Post:
    post = get_post(db, post_id)
    if post.author_id != actor_id:
        raise ForbiddenError(f"Only the post author can {action} this post")
    return post


def update_post(
    db: Session,
    post_id: int,
    actor_id: int,
    *,
    title: str | None = None,
    content: str | None = None,
) -> Post:
    """Change the title and/or content of a post; author only.

    Raises:
        NotFoundError: If the post does not exist.
        ForbiddenError: If ``actor_id`` does not own the post.
    """
    post = _owned_post(db, post_id, actor_id, "edit")
    if title is not None:
        post.title = title
    if content is not None:
        post.content = content
    try:
        PostRepository(db).save(post)
        db.commit()
    except SQLAlchemyError:
        db.rollback()
        raise
    return post


def delete_post(db: Session, post_id: int, actor_id: int) -> None:
    """Hard-delete a post and, in the same transaction, all of its comments.

    Raises:
        NotFoundError: If the post does not exist.
        ForbiddenError: If ``actor_id`` does not own the post.
    """
    post = _owned_post(db, post_id, actor_id, "delete")
    try:
        removed = PostRepository(db).delete(post)
        db.commit()
    except SQLAlchemyError:
        db.rollback()
        raise
    logger.info("Post %s deleted by user %s along with %d comments", post_id, actor_id, removed)
