"""Comment moderation state machine.

Each function takes a comment snapshot, the owning post where authority
depends on it, and the acting user's id. It either raises one of the errors in
:mod:`commentbox.core.errors` or applies the transition to the snapshot in
place. Nothing here touches the database; callers persist the result.

Transition table::

    edit text    comment author      status != approved   -> text, status=pending
    approve      post author                              -> status=approved
    reject       post author                              -> status=rejected
    soft delete  comment or post author                   -> deleted=True

A deleted comment accepts none of the above.
"""

from __future__ import annotations

from commentbox.core.errors import (
    CannotEditApprovedError,
    CommentDeletedError,
    ForbiddenError,
)
from commentbox.models.comment import Comment, CommentStatus
from commentbox.models.post import Post

MODERATION_DECISIONS = frozenset({CommentStatus.APPROVED, CommentStatus.REJECTED})


def ensure_not_deleted(comment: Comment) -> None:
    """Raise :class:`CommentDeletedError` if the comment was soft-deleted."""
    if comment.deleted:
        raise CommentDeletedError()


def is_post_author(post: Post, actor_id: int) -> bool:
    return post.author_id == actor_id


def is_comment_author(comment: Comment, actor_id: int) -> bool:
    return comment.author_id == actor_id


def apply_edit(comment: Comment, actor_id: int, text: str) -> Comment:
    """Replace the comment text and send it back to the pending queue.

    Raises:
        CommentDeletedError: The comment was deleted.
        ForbiddenError: ``actor_id`` is not the comment author.
        CannotEditApprovedError: The comment already cleared moderation.
    """
    ensure_not_deleted(comment)
    if not is_comment_author(comment, actor_id):
        raise ForbiddenError("Only the comment author can edit this comment")
    if comment.status == CommentStatus.APPROVED:
        raise CannotEditApprovedError()

    comment.text = text
    comment.status = CommentStatus.PENDING
    return comment


def apply_decision(
    comment: Comment,
    post: Post,
    actor_id: int,
    decision: CommentStatus,
) -> Comment:
    """Approve or reject a comment on behalf of the post author.

    Raises:
        ValueError: ``decision`` is not approved/rejected.
        CommentDeletedError: The comment was deleted.
        ForbiddenError: ``actor_id`` is not the author of the comment's post.
    """
    decision = CommentStatus(decision)
    if decision not in MODERATION_DECISIONS:
        raise ValueError(f"Unsupported moderation decision: {decision.value}")
    ensure_not_deleted(comment)
    if not is_post_author(post, actor_id):
        raise ForbiddenError("Only the post author can approve or reject comments")

    comment.status = decision
    return comment


def apply_soft_delete(comment: Comment, post: Post, actor_id: int) -> Comment:
    """Mark a comment deleted; text and status stay as they were.

    Raises:
        CommentDeletedError: The comment was already deleted.
        ForbiddenError: ``actor_id`` is neither comment author nor post author.
    """
    ensure_not_deleted(comment)
    if not (is_comment_author(comment, actor_id) or is_post_author(post, actor_id)):
        raise ForbiddenError(
            "Only the comment author or post owner can delete this comment"
        )

    comment.deleted = True
    return comment
