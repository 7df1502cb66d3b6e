"""List discussion posts use case."""

from uuid import UUID

from pydantic import BaseModel, Field

from harvest.config import ForumSettings
from harvest.domain.error import NotFoundError
from harvest.domain.service import DiscussionService, PostService
from harvest.domain.value import DiscussionId, Pagination

from ..base import BaseUseCase
from .create_post import PostResponse


class ListDiscussionPostsRequest(BaseModel):
    """List discussion posts request."""

    discussion_id: str  # UUID string
    page: int = Field(default=1, ge=1)


class ListDiscussionPostsResponse(BaseModel):
    """One page of a discussion's posts."""

    posts: list[PostResponse]
    pagination: Pagination


class ListDiscussionPostsUseCase(BaseUseCase):
    """Use case for reading one page of posts in a discussion, oldest first."""

    def __init__(
        self,
        post_service: PostService,
        discussion_service: DiscussionService,
        forum_settings: ForumSettings,
    ) -> None:
        self.post_service = post_service
        self.discussion_service = discussion_service
        self.forum_settings = forum_settings

    async def execute(
        self, request: ListDiscussionPostsRequest
    ) -> ListDiscussionPostsResponse:
        """Execute list posts flow.

        A page past the end returns an empty post list with the real
        pagination totals.

        Raises:
            NotFoundError: If the discussion doesn't exist
        """
        discussion_id = DiscussionId(UUID(request.discussion_id))
        if await self.discussion_service.get_discussion_by_id(discussion_id) is None:
            raise NotFoundError("Discussion", request.discussion_id)

        posts, pagination = await self.post_service.get_discussion_posts(
            discussion_id,
            page=request.page,
            page_size=self.forum_settings.posts_page_size,
        )
        return ListDiscussionPostsResponse(
            posts=[PostResponse.from_post(post) for post in posts],
            pagination=pagination,
        )
