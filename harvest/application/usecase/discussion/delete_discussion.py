"""Delete discussion use case."""

from uuid import UUID

from pydantic import BaseModel

from harvest.domain.service import DiscussionService
from harvest.domain.value import DiscussionId, UserId

from ..base import BaseUseCase


class DeleteDiscussionRequest(BaseModel):
    """Delete discussion request."""

    discussion_id: str  # UUID string
    user_id: str  # Current user ID (must be author)


class DeleteDiscussionUseCase(BaseUseCase):
    """Use case for deleting a discussion together with its posts and comments."""

    def __init__(self, discussion_service: DiscussionService) -> None:
        self.discussion_service = discussion_service

    async def execute(self, request: DeleteDiscussionRequest) -> None:
        """Execute delete discussion flow.

        Raises:
            NotFoundError: If the discussion doesn't exist
            NotAuthorizedError: If the user doesn't own the discussion
        """
        await self.discussion_service.delete_discussion(
            DiscussionId(UUID(request.discussion_id)),
            UserId(UUID(request.user_id)),
        )
