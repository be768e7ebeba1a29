# src/commentbox/services/moderation.py
"""Moderation services for Commentbox.

Every public method is one unit of work: load the comment, run the transition
through :mod:`commentbox.core.moderation`, write it back and commit. Nothing is
persisted when a precondition fails.
"""

from __future__ import annotations

import logging
from collections.abc import Callable

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session
from sqlalchemy.orm.exc import StaleDataError

from commentbox.core import moderation as engine
from commentbox.core.errors import (
    CommentboxError,
    ConcurrentUpdateError,
    NotFoundError,
)
from commentbox.models import Comment, CommentStatus, Post
from commentbox.repositories import CommentRepository, PostRepository

logger = logging.getLogger(__name__)


class ModerationService:
    """Service handling comment creation and moderation state transitions."""

    def __init__(self, db: Session) -> None:
        self.db = db
        self.posts = PostRepository(db)
        self.comments = CommentRepository(db)

    def create_comment(
        self,
        *,
        post_id: int,
        author_id: int,
        text: str,
        parent_id: int | None = None,
    ) -> Comment:
        """Create a pending comment on a post, optionally as a reply.

        Args:
            post_id: Post being commented on.
            author_id: Authenticated user writing the comment.
            text: Comment body.
            parent_id: Comment being replied to, if any.

        Returns:
            The persisted comment in ``pending`` status.

        Raises:
            NotFoundError: If the post does not exist.
            InvalidParentError: If the parent is missing or on another post.
        """
        if self.posts.get_by_id(post_id) is None:
            raise NotFoundError("Post not found")

        try:
            comment = self.comments.create(
                post_id=post_id,
                author_id=author_id,
                text=text,
                parent_id=parent_id,
            )
            self.db.commit()
        except SQLAlchemyError:
            self.db.rollback()
            raise

        logger.info(
            "Comment %s created on post %s by user %s (parent=%s)",
            comment.id,
            post_id,
            author_id,
            parent_id,
        )
        return comment

    def get_comment(self, comment_id: int) -> Comment:
        """Return a comment in any state, or raise :class:`NotFoundError`."""
        comment = self.comments.get(comment_id)
        if comment is None:
            raise NotFoundError("Comment not found")
        return comment

    def edit_comment(self, comment_id: int, actor_id: int, text: str) -> Comment:
        """Change a comment's text and return it to the pending queue."""
        comment = self.get_comment(comment_id)
        self._guard("edit", comment, actor_id, engine.apply_edit, comment, actor_id, text)
        self._persist(comment)
        logger.info("Comment %s edited by user %s; status reset to pending", comment.id, actor_id)
        return comment

    def set_approval(
        self,
        comment_id: int,
        actor_id: int,
        decision: CommentStatus,
    ) -> Comment:
        """Approve or reject a comment; only the post author may decide."""
        comment = self.get_comment(comment_id)
        post = self._post_for(comment)
        self._guard(
            "set_approval",
            comment,
            actor_id,
            engine.apply_decision,
            comment,
            post,
            actor_id,
            decision,
        )
        self._persist(comment)
        logger.info(
            "Comment %s on post %s marked %s by user %s",
            comment.id,
            post.id,
            comment.status.value,
            actor_id,
        )
        return comment

    def delete_comment(self, comment_id: int, actor_id: int) -> Comment:
        """Soft-delete a comment on behalf of its author or the post author."""
        comment = self.get_comment(comment_id)
        post = self._post_for(comment)
        self._guard(
            "delete",
            comment,
            actor_id,
            engine.apply_soft_delete,
            comment,
            post,
            actor_id,
        )
        self._persist(comment)
        logger.info("Comment %s on post %s soft-deleted by user %s", comment.id, post.id, actor_id)
        return comment

    def _post_for(self, comment: Comment) -> Post:
        post = self.posts.get_by_id(comment.post_id)
        if post is None:
            raise NotFoundError("Post not found")
        return post

    def _guard(
        self,
        action: str,
        comment: Comment,
        actor_id: int,
        transition: Callable[..., Comment],
        *args: object,
    ) -> Comment:
        try:
            return transition(*args)
        except CommentboxError as exc:
            logger.info(
                "Refused %s on comment %s for user %s: %s",
                action,
                comment.id,
                actor_id,
                type(exc).__name__,
            )
            raise

    def _persist(self, comment: Comment) -> None:
        try:
            self.comments.save(comment)
            self.db.commit()
        except StaleDataError as err:
            self.db.rollback()
            logger.warning("Concurrent update detected on comment %s", comment.id)
            raise ConcurrentUpdateError() from err
        except SQLAlchemyError:
            self.db.rollback()
            raise
