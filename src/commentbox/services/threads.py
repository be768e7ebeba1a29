"""Read-side assembly of a post's comment thread."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass, field
from datetime import UTC, datetime

from sqlalchemy.orm import Session

from commentbox.core.errors import ForbiddenError, NotFoundError
from commentbox.core.moderation import is_post_author
from commentbox.models import Comment, CommentStatus
from commentbox.repositories import CommentFilter, CommentRepository, PostRepository


@dataclass
class ThreadNode:
    """A top-level comment with its direct visible replies."""

    comment: Comment
    replies: list[Comment] = field(default_factory=list)


def is_publicly_visible(comment: Comment) -> bool:
    """Return True for approved comments that have not been deleted."""
    return comment.status == CommentStatus.APPROVED and not comment.deleted


def _creation_key(comment: Comment) -> tuple[datetime, int]:
    # SQLite hands back naive UTC values while fresh rows keep their offset.
    created_at = comment.created_at
    if created_at.tzinfo is None:
        created_at = created_at.replace(tzinfo=UTC)
    return (created_at, comment.id)


def assemble_thread(comments: Iterable[Comment]) -> list[ThreadNode]:
    """Nest visible comments one level deep.

    Visibility is decided for every comment on its own flags. Top-level
    comments become nodes; a visible reply is attached to its parent's node
    when that parent is itself a visible top-level comment. Replies to replies
    are not expanded, and replies are never promoted to the top level. Both
    levels are ordered by creation time, oldest first.
    """
    visible = sorted(
        (comment for comment in comments if is_publicly_visible(comment)),
        key=_creation_key,
    )

    nodes: dict[int, ThreadNode] = {}
    thread: list[ThreadNode] = []
    for comment in visible:
        if comment.parent_id is None:
            node = ThreadNode(comment=comment)
            nodes[comment.id] = node
            thread.append(node)

    for comment in visible:
        if comment.parent_id is not None and comment.parent_id in nodes:
            nodes[comment.parent_id].replies.append(comment)

    return thread


class ThreadService:
    """Public thread and author-only pending queue for a post."""

    def __init__(self, db: Session) -> None:
        self.posts = PostRepository(db)
        self.comments = CommentRepository(db)

    def public_thread(self, post_id: int) -> list[ThreadNode]:
        """Return the approved, non-deleted comments of a post, nested."""
        return assemble_thread(self.comments.list_for_post(post_id, CommentFilter.APPROVED))

    def pending_queue(self, post_id: int, actor_id: int) -> list[Comment]:
        """Return the post's pending comments, newest first, to its author only.

        Raises:
            NotFoundError: If the post does not exist.
            ForbiddenError: If ``actor_id`` is not the post author.
        """
        post = self.posts.get_by_id(post_id)
        if post is None:
            raise NotFoundError("Post not found")
        if not is_post_author(post, actor_id):
            raise ForbiddenError("Only the post author can view pending comments")

        return self.comments.list_for_post(post_id, CommentFilter.PENDING)
