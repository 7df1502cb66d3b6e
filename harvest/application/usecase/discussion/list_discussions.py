"""List discussions use case."""

from pydantic import BaseModel, Field

from harvest.config import ForumSettings
from harvest.domain.service import DiscussionService
from harvest.domain.value import DiscussionCategory, Pagination

from ..base import BaseUseCase
from .common import DiscussionResponse


class ListDiscussionsRequest(BaseModel):
    """List discussions request."""

    page: int = Field(default=1, ge=1)
    category: DiscussionCategory | None = None


class ListDiscussionsResponse(BaseModel):
    """List discussions response."""

    discussions: list[DiscussionResponse]
    pagination: Pagination


class ListDiscussionsUseCase(BaseUseCase):
    """Use case for paging through discussions, newest first."""

    def __init__(
        self, discussion_service: DiscussionService, forum_settings: ForumSettings
    ) -> None:
        """Initialize list discussions use case.

        Args:
            discussion_service: Discussion domain service
            forum_settings: Forum settings (page size)
        """
        self.discussion_service = discussion_service
        self.forum_settings = forum_settings

    async def execute(self, request: ListDiscussionsRequest) -> ListDiscussionsResponse:
        discussions, pagination = await self.discussion_service.list_discussions(
            page=request.page,
            page_size=self.forum_settings.discussions_page_size,
            category=request.category,
        )
        return ListDiscussionsResponse(
            discussions=[DiscussionResponse.from_discussion(d) for d in discussions],
            pagination=pagination,
        )
