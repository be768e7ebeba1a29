"""Data access helpers for working with comments."""
from __future__ import annotations

import enum
from collections.abc import Iterable

from sqlalchemy import delete, select
from sqlalchemy.orm import Session

from commentbox.core.errors import InvalidParentError
from commentbox.models.comment import Comment, CommentStatus

__all__ = ["CommentFilter", "CommentRepository"]


class CommentFilter(str, enum.Enum):
    """Read-side selections supported by :meth:`CommentRepository.list_for_post`."""

    APPROVED = "approved"
    PENDING = "pending"


class CommentRepository:
    """Storage and identity for comment records.

    Enforces the same-post parent rule on create and removes reply subtrees
    leaf-first when a post goes away.
    """

    def __init__(self, session: Session) -> None:
        """Initialize the repository with a SQLAlchemy session."""
        self.session = session

    def get(self, comment_id: int) -> Comment | None:
        """Return a comment by identifier regardless of status or deleted flag."""
        return self.session.get(Comment, comment_id)

    def create(
        self,
        *,
        post_id: int,
        author_id: int,
        text: str,
        parent_id: int | None = None,
    ) -> Comment:
        """Insert a new pending comment and return the persisted ORM instance.

        Args:
            post_id: Post the comment is addressed at.
            author_id: Identifier of the commenting user.
            text: Comment body.
            parent_id: Optional comment being replied to.

        Raises:
            InvalidParentError: If ``parent_id`` does not exist or belongs to
                another post.
        """
        if parent_id is not None:
            parent = self.get(parent_id)
            if parent is None or parent.post_id != post_id:
                raise InvalidParentError()

        comment = Comment(
            post_id=post_id,
            author_id=author_id,
            text=text,
            parent_id=parent_id,
            status=CommentStatus.PENDING,
            deleted=False,
        )
        self.session.add(comment)
        self.session.flush()
        return comment

    def save(self, comment: Comment) -> Comment:
        """Persist a mutated comment.

        Raises ``sqlalchemy.orm.exc.StaleDataError`` when the row's version no
        longer matches the snapshot being written.
        """
        self.session.add(comment)
        self.session.flush()
        return comment

    def list_for_post(self, post_id: int, comment_filter: CommentFilter) -> list[Comment]:
        """Return the post's non-deleted comments in the requested status.

        Approved comments come back oldest first, pending ones newest first.
        """
        stmt = select(Comment).where(
            Comment.post_id == post_id,
            Comment.deleted.is_(False),
        )
        if comment_filter is CommentFilter.APPROVED:
            stmt = stmt.where(Comment.status == CommentStatus.APPROVED).order_by(
                Comment.created_at.asc(), Comment.id.asc()
            )
        else:
            stmt = stmt.where(Comment.status == CommentStatus.PENDING).order_by(
                Comment.created_at.desc(), Comment.id.desc()
            )
        return list(self.session.scalars(stmt))

    def delete_subtree(self, comment_id: int) -> int:
        """Hard-delete a comment and every transitive reply beneath it.

        Returns:
            Number of rows removed.
        """
        return self._delete_levels(self._collect_levels([comment_id]))

    def delete_for_post(self, post_id: int) -> int:
        """Hard-delete all comments attached to a post, replies before parents.

        Returns:
            Number of rows removed.
        """
        roots = self.session.scalars(
            select(Comment.id).where(
                Comment.post_id == post_id,
                Comment.parent_id.is_(None),
            )
        ).all()
        removed = self._delete_levels(self._collect_levels(roots))
        # Sweep anything not reachable from a root.
        result = self.session.execute(
            delete(Comment)
            .where(Comment.post_id == post_id)
            .execution_options(synchronize_session="fetch")
        )
        return removed + (result.rowcount or 0)

    def _collect_levels(self, root_ids: Iterable[int]) -> list[list[int]]:
        levels: list[list[int]] = []
        level = list(root_ids)
        seen: set[int] = set()
        while level:
            level = [comment_id for comment_id in level if comment_id not in seen]
            if not level:
                break
            seen.update(level)
            levels.append(level)
            level = list(
                self.session.scalars(select(Comment.id).where(Comment.parent_id.in_(level)))
            )
        return levels

    def _delete_levels(self, levels: list[list[int]]) -> int:
        removed = 0
        for level in reversed(levels):
            result = self.session.execute(
                delete(Comment)
                .where(Comment.id.in_(level))
                .execution_options(synchronize_session="fetch")
            )
            removed += result.rowcount or 0
        return removed
