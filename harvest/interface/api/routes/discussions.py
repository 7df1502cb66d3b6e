"""Discussion routes."""

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Cookie, Query, Response, status

from harvest.application.usecase.discussion import (
    CreateDiscussionRequest,
    CreateDiscussionUseCase,
    DeleteDiscussionRequest,
    DeleteDiscussionUseCase,
    DiscussionFields,
    DiscussionResponse,
    GetDiscussionRequest,
    GetDiscussionUseCase,
    ListDiscussionsRequest,
    ListDiscussionsResponse,
    ListDiscussionsUseCase,
    UpdateDiscussionRequest,
    UpdateDiscussionUseCase,
)
from harvest.domain.service import JWTService
from harvest.domain.value import DiscussionCategory

from .common import require_user_id, to_http_error

router = APIRouter(prefix="/discussions", tags=["discussions"], route_class=DishkaRoute)


@router.get("", response_model=ListDiscussionsResponse)
async def list_discussions(
    list_discussions_use_case: FromDishka[ListDiscussionsUseCase],
    page: int = Query(default=1, ge=1),
    category: DiscussionCategory | None = None,
) -> ListDiscussionsResponse:
    """List discussions, newest first.

    Args:
        list_discussions_use_case: List discussions use case from DI
        page: 1-based page number
        category: Optional category filter
    """
    return await list_discussions_use_case.execute(
        ListDiscussionsRequest(page=page, category=category)
    )


@router.post(
    "", response_model=DiscussionResponse, status_code=status.HTTP_201_CREATED
)
async def create_discussion(
    request: DiscussionFields,
    create_discussion_use_case: FromDishka[CreateDiscussionUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
) -> DiscussionResponse:
    """Open a new discussion.

    Requires authentication.

    Args:
        request: Title, description, category and tags
        create_discussion_use_case: Create discussion use case from DI
        jwt_service: JWT service for token verification (injected)
        auth_token: JWT token from cookie

    Raises:
        HTTPException: If not authenticated or validation fails
    """
    try:
        user_id = require_user_id(jwt_service, auth_token, "create discussions")
        return await create_discussion_use_case.execute(
            CreateDiscussionRequest(author_id=user_id, fields=request)
        )
    except Exception as e:
        raise to_http_error(e, "Discussion creation") from e


@router.get("/{discussion_id}", response_model=DiscussionResponse)
async def get_discussion(
    discussion_id: str,
    get_discussion_use_case: FromDishka[GetDiscussionUseCase],
) -> DiscussionResponse:
    """Get a single discussion.

    Raises:
        HTTPException: 404 if the discussion doesn't exist
    """
    try:
        return await get_discussion_use_case.execute(
            GetDiscussionRequest(discussion_id=discussion_id)
        )
    except Exception as e:
        raise to_http_error(e, "Discussion lookup") from e


@router.put("/{discussion_id}", response_model=DiscussionResponse)
async def update_discussion(
    discussion_id: str,
    request: DiscussionFields,
    update_discussion_use_case: FromDishka[UpdateDiscussionUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
) -> DiscussionResponse:
    """Overwrite a discussion's title, description, category and tags.

    Only the author can edit.

    Raises:
        HTTPException: 401 if not authenticated, 403 if not the author,
            404 if the discussion doesn't exist
    """
    try:
        user_id = require_user_id(jwt_service, auth_token, "edit discussions")
        return await update_discussion_use_case.execute(
            UpdateDiscussionRequest(
                discussion_id=discussion_id, user_id=user_id, fields=request
            )
        )
    except Exception as e:
        raise to_http_error(e, "Discussion update") from e


@router.delete("/{discussion_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_discussion(
    discussion_id: str,
    delete_discussion_use_case: FromDishka[DeleteDiscussionUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
) -> Response:
    """Delete a discussion with all of its posts and comments.

    Only the author can delete.
    """
    try:
        user_id = require_user_id(jwt_service, auth_token, "delete discussions")
        await delete_discussion_use_case.execute(
            DeleteDiscussionRequest(discussion_id=discussion_id, user_id=user_id)
        )
    except Exception as e:
        raise to_http_error(e, "Discussion deletion") from e
    return Response(status_code=status.HTTP_204_NO_CONTENT)
