# src/commentbox/api/v1/endpoints/comments.py
"""Comment moderation endpoints for the Commentbox API."""

from fastapi import APIRouter, Response, status

from commentbox.api.v1.dependencies import CurrentUserDep, SessionDep
from commentbox.models import Comment
from commentbox.schemas.comment import ApprovalUpdate, CommentResponse, CommentUpdate
from commentbox.services.moderation import ModerationService

router = APIRouter(prefix="/comments", tags=["comments"])


@router.put("/{comment_id}", response_model=CommentResponse)
async def update_comment(
    comment_id: int,
    comment_data: CommentUpdate,
    current_user: CurrentUserDep,
    db: SessionDep,
) -> Comment:
    """Edit a comment's text and re-submit it for approval.

    Args:
        comment_id: ID of the comment to edit
        comment_data: New comment text
        current_user: Authenticated user; must be the comment author
        db: Database session

    Returns:
        The edited comment, now pending
    """
    return ModerationService(db).edit_comment(comment_id, current_user.id, comment_data.text)


@router.delete("/{comment_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_comment(
    comment_id: int,
    current_user: CurrentUserDep,
    db: SessionDep,
) -> Response:
    """Soft-delete a comment; allowed for the comment author and the post author."""
    ModerationService(db).delete_comment(comment_id, current_user.id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.patch("/{comment_id}/approval", response_model=CommentResponse)
async def update_comment_approval(
    comment_id: int,
    approval: ApprovalUpdate,
    current_user: CurrentUserDep,
    db: SessionDep,
) -> Comment:
    """Approve or reject a comment; only the post author may decide."""
    return ModerationService(db).set_approval(comment_id, current_user.id, approval.decision)
