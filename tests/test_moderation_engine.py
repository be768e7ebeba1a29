# tests/test_moderation_engine.py
"""Tests for the comment moderation state machine (no database involved)."""

import pytest

from commentbox.core import moderation
from commentbox.core.errors import (
    CannotEditApprovedError,
    CommentDeletedError,
    ForbiddenError,
)
from commentbox.models import Comment, CommentStatus, Post

POST_AUTHOR = 1
COMMENT_AUTHOR = 2
STRANGER = 3


def _post() -> Post:
    return Post(id=10, author_id=POST_AUTHOR, title="Post", content="Some content")


def _comment(status: CommentStatus = CommentStatus.PENDING, deleted: bool = False) -> Comment:
    return Comment(
        id=100,
        post_id=10,
        author_id=COMMENT_AUTHOR,
        parent_id=None,
        text="original text",
        status=status,
        deleted=deleted,
    )


@pytest.mark.parametrize("status", [CommentStatus.PENDING, CommentStatus.REJECTED])
def test_edit_resets_status_to_pending(status: CommentStatus) -> None:
    """A successful edit always lands the comment back in the pending queue."""
    comment = moderation.apply_edit(_comment(status), COMMENT_AUTHOR, "new text")
    assert comment.text == "new text"
    assert comment.status == CommentStatus.PENDING


def test_edit_approved_comment_is_blocked() -> None:
    comment = _comment(CommentStatus.APPROVED)
    with pytest.raises(CannotEditApprovedError):
        moderation.apply_edit(comment, COMMENT_AUTHOR, "sneaky change")
    assert comment.text == "original text"
    assert comment.status == CommentStatus.APPROVED


@pytest.mark.parametrize("actor", [POST_AUTHOR, STRANGER])
def test_only_comment_author_can_edit(actor: int) -> None:
    with pytest.raises(ForbiddenError):
        moderation.apply_edit(_comment(), actor, "new text")


@pytest.mark.parametrize("decision", [CommentStatus.APPROVED, CommentStatus.REJECTED])
def test_post_author_decides(decision: CommentStatus) -> None:
    comment = moderation.apply_decision(_comment(), _post(), POST_AUTHOR, decision)
    assert comment.status == decision


def test_decision_can_be_revised() -> None:
    comment = _comment(CommentStatus.APPROVED)
    moderation.apply_decision(comment, _post(), POST_AUTHOR, CommentStatus.REJECTED)
    assert comment.status == CommentStatus.REJECTED


@pytest.mark.parametrize("actor", [COMMENT_AUTHOR, STRANGER])
def test_only_post_author_decides(actor: int) -> None:
    comment = _comment()
    with pytest.raises(ForbiddenError):
        moderation.apply_decision(comment, _post(), actor, CommentStatus.APPROVED)
    assert comment.status == CommentStatus.PENDING


def test_pending_is_not_a_decision() -> None:
    with pytest.raises(ValueError):
        moderation.apply_decision(_comment(), _post(), POST_AUTHOR, CommentStatus.PENDING)


@pytest.mark.parametrize("actor", [COMMENT_AUTHOR, POST_AUTHOR])
def test_soft_delete_by_comment_or_post_author(actor: int) -> None:
    comment = moderation.apply_soft_delete(_comment(CommentStatus.APPROVED), _post(), actor)
    assert comment.deleted is True
    assert comment.text == "original text"
    assert comment.status == CommentStatus.APPROVED


def test_soft_delete_by_stranger_is_forbidden() -> None:
    comment = _comment()
    with pytest.raises(ForbiddenError):
        moderation.apply_soft_delete(comment, _post(), STRANGER)
    assert comment.deleted is False


@pytest.mark.parametrize("actor", [COMMENT_AUTHOR, POST_AUTHOR, STRANGER])
def test_deleted_comment_rejects_every_transition(actor: int) -> None:
    """Deleted is absorbing: the deleted check wins over authorization."""
    post = _post()
    comment = _comment(CommentStatus.PENDING, deleted=True)

    with pytest.raises(CommentDeletedError):
        moderation.apply_edit(comment, actor, "new text")
    with pytest.raises(CommentDeletedError):
        moderation.apply_decision(comment, post, actor, CommentStatus.APPROVED)
    with pytest.raises(CommentDeletedError):
        moderation.apply_soft_delete(comment, post, actor)

    assert comment.text == "original text"
    assert comment.status == CommentStatus.PENDING
    assert comment.deleted is True
