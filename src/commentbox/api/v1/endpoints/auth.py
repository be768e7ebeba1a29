# src/commentbox/api/v1/endpoints/auth.py
"""Authentication endpoints for the Commentbox API."""

from fastapi import APIRouter
from sqlalchemy import func, select

from commentbox.api.v1.dependencies import CurrentUserDep, SessionDep
from commentbox.models import Comment, Post
from commentbox.schemas.user import ActivityCounts, UserProfileResponse, UserResponse

router = APIRouter(prefix="/auth", tags=["auth"])


@router.get("/me", response_model=UserProfileResponse)
async def read_current_user(current_user: CurrentUserDep, db: SessionDep) -> UserProfileResponse:
    """Return the user identified by the bearer token and what they have authored."""
    total_posts = (
        db.scalar(select(func.count()).select_from(Post).where(Post.author_id == current_user.id))
        or 0
    )
    # Counts every comment the user wrote, whatever its moderation state.
    total_comments = (
        db.scalar(
            select(func.count()).select_from(Comment).where(Comment.author_id == current_user.id)
        )
        or 0
    )
    user = UserResponse.model_validate(current_user)
    return UserProfileResponse(
        **user.model_dump(),
        counts=ActivityCounts(posts=total_posts, comments=total_comments),
    )
