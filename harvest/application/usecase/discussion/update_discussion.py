"""Update discussion use case."""

from uuid import UUID

from pydantic import BaseModel

from harvest.config import ForumSettings
from harvest.domain.error import ValidationError
from harvest.domain.service import DiscussionService
from harvest.domain.value import DiscussionId, UserId

from ..base import BaseUseCase
from .common import DiscussionFields, DiscussionResponse


class UpdateDiscussionRequest(BaseModel):
    """Update discussion request."""

    discussion_id: str  # UUID string
    user_id: str  # Current user ID (must be author)
    fields: DiscussionFields


class UpdateDiscussionUseCase(BaseUseCase):
    """Use case for overwriting a discussion's title, description, category and tags."""

    def __init__(
        self, discussion_service: DiscussionService, forum_settings: ForumSettings
    ) -> None:
        """Initialize update discussion use case.

        Args:
            discussion_service: Discussion domain service
            forum_settings: Forum limits
        """
        self.discussion_service = discussion_service
        self.forum_settings = forum_settings

    async def execute(self, request: UpdateDiscussionRequest) -> DiscussionResponse:
        """Execute update discussion flow.

        Raises:
            NotFoundError: If the discussion doesn't exist
            NotAuthorizedError: If the user doesn't own the discussion
            ValidationError: If too many tags are supplied
        """
        fields = request.fields
        if len(fields.tags) > self.forum_settings.max_tags:
            raise ValidationError(
                f"A discussion can have at most {self.forum_settings.max_tags} tags"
            )

        discussion = await self.discussion_service.update_discussion(
            discussion_id=DiscussionId(UUID(request.discussion_id)),
            user_id=UserId(UUID(request.user_id)),
            title=fields.title,
            description=fields.description,
            category=fields.category,
            tags=fields.tag_names(),
        )
        return DiscussionResponse.from_discussion(discussion)
