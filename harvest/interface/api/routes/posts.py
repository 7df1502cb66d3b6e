"""Post routes.

Posts live under their discussion: ``/discussions/{discussion_id}/posts``.
"""

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Cookie, Query, status
from pydantic import BaseModel, Field

from harvest.application.usecase.post import (
    CreatePostRequest,
    CreatePostUseCase,
    ListDiscussionPostsRequest,
    ListDiscussionPostsResponse,
    ListDiscussionPostsUseCase,
    PostResponse,
)
from harvest.domain.service import JWTService

from .common import require_user_id, to_http_error

router = APIRouter(prefix="/discussions", tags=["posts"], route_class=DishkaRoute)


class CreatePostAPIRequest(BaseModel):
    """API request for creating a post."""

    content: str = Field(min_length=1, max_length=10000)


@router.get("/{discussion_id}/posts", response_model=ListDiscussionPostsResponse)
async def list_discussion_posts(
    discussion_id: str,
    list_posts_use_case: FromDishka[ListDiscussionPostsUseCase],
    page: int = Query(default=1, ge=1),
) -> ListDiscussionPostsResponse:
    """Get one page of a discussion's posts with pagination metadata.

    Args:
        discussion_id: Discussion UUID
        list_posts_use_case: List posts use case from DI
        page: 1-based page number

    Raises:
        HTTPException: 404 if the discussion doesn't exist
    """
    try:
        return await list_posts_use_case.execute(
            ListDiscussionPostsRequest(discussion_id=discussion_id, page=page)
        )
    except Exception as e:
        raise to_http_error(e, "Post listing") from e


@router.post(
    "/{discussion_id}/posts",
    response_model=PostResponse,
    status_code=status.HTTP_201_CREATED,
)
async def create_post(
    discussion_id: str,
    request: CreatePostAPIRequest,
    create_post_use_case: FromDishka[CreatePostUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
) -> PostResponse:
    """Add a post to a discussion.

    Requires authentication.

    Raises:
        HTTPException: If not authenticated, the discussion doesn't exist,
            or validation fails
    """
    try:
        user_id = require_user_id(jwt_service, auth_token, "create posts")
        return await create_post_use_case.execute(
            CreatePostRequest(
                discussion_id=discussion_id,
                content=request.content,
                author_id=user_id,
            )
        )
    except Exception as e:
        raise to_http_error(e, "Post creation") from e
