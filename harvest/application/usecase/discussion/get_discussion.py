"""Get discussion use case."""

from uuid import UUID

from pydantic import BaseModel

from harvest.domain.error import NotFoundError
from harvest.domain.service import DiscussionService
from harvest.domain.value import DiscussionId

from ..base import BaseUseCase
from .common import DiscussionResponse


class GetDiscussionRequest(BaseModel):
    """Get discussion request."""

    discussion_id: str  # UUID string


class GetDiscussionUseCase(BaseUseCase):
    """Use case for reading a single discussion."""

    def __init__(self, discussion_service: DiscussionService) -> None:
        self.discussion_service = discussion_service

    async def execute(self, request: GetDiscussionRequest) -> DiscussionResponse:
        """Execute get discussion flow.

        Raises:
            NotFoundError: If the discussion doesn't exist
        """
        discussion = await self.discussion_service.get_discussion_by_id(
            DiscussionId(UUID(request.discussion_id))
        )
        if discussion is None:
            raise NotFoundError("Discussion", request.discussion_id)
        return DiscussionResponse.from_discussion(discussion)
