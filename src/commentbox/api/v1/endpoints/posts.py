# src/commentbox/api/v1/endpoints/posts.py
"""Post-related endpoints for the Commentbox API."""

from fastapi import APIRouter, Query, Response, status

from commentbox.api.v1.dependencies import CurrentUserDep, SessionDep
from commentbox.models import Comment, Post
from commentbox.schemas.comment import CommentCreate, CommentResponse, ThreadNodeResponse
from commentbox.schemas.post import PostCreate, PostResponse, PostUpdate
from commentbox.services import post_service
from commentbox.services.moderation import ModerationService
from commentbox.services.threads import ThreadService

router = APIRouter(prefix="/posts", tags=["posts"])


@router.get("/", response_model=list[PostResponse])
async def list_posts(
    db: SessionDep,
    limit: int = Query(50, ge=1, le=100, description="Maximum number of posts to return"),
) -> list[Post]:
    """List posts, newest first."""
    return post_service.list_posts(db, limit)


@router.post("/", response_model=PostResponse, status_code=status.HTTP_201_CREATED)
async def create_post(
    post_data: PostCreate,
    current_user: CurrentUserDep,
    db: SessionDep,
) -> Post:
    """Create a new post owned by the authenticated user."""
    return post_service.create_post(
        db,
        author_id=current_user.id,
        title=post_data.title,
        content=post_data.content,
    )


@router.get("/{post_id}", response_model=PostResponse)
async def get_post(post_id: int, db: SessionDep) -> Post:
    """Get a specific post by ID."""
    return post_service.get_post(db, post_id)


@router.put("/{post_id}", response_model=PostResponse)
async def update_post(
    post_id: int,
    post_data: PostUpdate,
    current_user: CurrentUserDep,
    db: SessionDep,
) -> Post:
    """Edit a post's title or content; only its author may do so."""
    return post_service.update_post(
        db,
        post_id,
        current_user.id,
        title=post_data.title,
        content=post_data.content,
    )


@router.delete("/{post_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_post(
    post_id: int,
    current_user: CurrentUserDep,
    db: SessionDep,
) -> Response:
    """Delete a post and every comment attached to it."""
    post_service.delete_post(db, post_id, current_user.id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.get("/{post_id}/comments", response_model=list[ThreadNodeResponse])
async def list_post_comments(post_id: int, db: SessionDep) -> list[ThreadNodeResponse]:
    """Return the public thread: approved top-level comments with approved replies."""
    thread = ThreadService(db).public_thread(post_id)
    return [ThreadNodeResponse.from_node(node) for node in thread]


@router.post(
    "/{post_id}/comments",
    response_model=CommentResponse,
    status_code=status.HTTP_201_CREATED,
)
async def create_comment(
    post_id: int,
    comment_data: CommentCreate,
    current_user: CurrentUserDep,
    db: SessionDep,
) -> Comment:
    """Submit a comment (or a reply) for moderation."""
    return ModerationService(db).create_comment(
        post_id=post_id,
        author_id=current_user.id,
        text=comment_data.text,
        parent_id=comment_data.parent_id,
    )


@router.get("/{post_id}/comments/pending", response_model=list[CommentResponse])
async def list_pending_comments(
    post_id: int,
    current_user: CurrentUserDep,
    db: SessionDep,
) -> list[Comment]:
    """Return the moderation queue for a post; visible to the post author only."""
    return ThreadService(db).pending_queue(post_id, current_user.id)
