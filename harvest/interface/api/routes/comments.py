"""Comment routes."""

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Cookie, status
from pydantic import BaseModel, Field

from harvest.application.usecase.comment import (
    CommentResponse,
    CreateCommentRequest,
    CreateCommentUseCase,
    GetCommentsRequest,
    GetCommentsUseCase,
)
from harvest.domain.service import JWTService

from .common import require_user_id, to_http_error

router = APIRouter(prefix="/posts", tags=["comments"], route_class=DishkaRoute)


class CreateCommentAPIRequest(BaseModel):
    """API request for creating a comment."""

    discussion_id: str
    content: str = Field(min_length=1, max_length=10000)
    parent_comment_id: str | None = None  # Parent comment ID for replies


@router.post(
    "/{post_id}/comments",
    response_model=CommentResponse,
    status_code=status.HTTP_201_CREATED,
)
async def create_comment(
    post_id: str,
    request: CreateCommentAPIRequest,
    create_comment_use_case: FromDishka[CreateCommentUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
) -> CommentResponse:
    """Create a comment on a post or reply to another comment.

    Requires authentication.

    Args:
        post_id: Post UUID
        request: Comment creation data
        create_comment_use_case: Create comment use case from DI
        jwt_service: JWT service for token verification (injected)
        auth_token: JWT token from cookie

    Returns:
        Created comment details

    Raises:
        HTTPException: If not authenticated, the post or parent is missing,
            or the parent belongs to another post
    """
    try:
        user_id = require_user_id(jwt_service, auth_token, "create comments")
        return await create_comment_use_case.execute(
            CreateCommentRequest(
                post_id=post_id,
                discussion_id=request.discussion_id,
                content=request.content,
                author_id=user_id,
                parent_comment_id=request.parent_comment_id,
            )
        )
    except Exception as e:
        raise to_http_error(e, "Comment creation") from e


@router.get("/{post_id}/comments", response_model=list[CommentResponse])
async def get_comments(
    post_id: str,
    get_comments_use_case: FromDishka[GetCommentsUseCase],
) -> list[CommentResponse]:
    """Get every comment on a post, oldest first.

    Replies come back flat with ``parent_comment_id`` and ``depth`` set.
    """
    try:
        return await get_comments_use_case.execute(GetCommentsRequest(post_id=post_id))
    except Exception as e:
        raise to_http_error(e, "Comment listing") from e
