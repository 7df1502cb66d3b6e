"""Create discussion use case."""

from uuid import UUID

from pydantic import BaseModel

from harvest.config import ForumSettings
from harvest.domain.error import ValidationError
from harvest.domain.service import DiscussionService, UserService
from harvest.domain.value import UserId

from ..base import BaseUseCase
from .common import DiscussionFields, DiscussionResponse


class CreateDiscussionRequest(BaseModel):
    """Create discussion request."""

    author_id: str  # User ID from authenticated user
    fields: DiscussionFields


class CreateDiscussionUseCase(BaseUseCase):
    """Use case for opening a new discussion."""

    def __init__(
        self,
        discussion_service: DiscussionService,
        user_service: UserService,
        forum_settings: ForumSettings,
    ) -> None:
        """Initialize create discussion use case.

        Args:
            discussion_service: Discussion domain service
            user_service: User domain service
            forum_settings: Forum limits
        """
        self.discussion_service = discussion_service
        self.user_service = user_service
        self.forum_settings = forum_settings

    async def execute(self, request: CreateDiscussionRequest) -> DiscussionResponse:
        """Execute create discussion flow.

        Steps:
        1. Resolve the author (handle is denormalized onto the discussion)
        2. Check the tag limit
        3. Create the discussion via the discussion service

        Raises:
            NotFoundError: If the author doesn't exist
            ValidationError: If too many tags are supplied
        """
        author = await self.user_service.get_by_id(UserId(UUID(request.author_id)))
        fields = request.fields

        if len(fields.tags) > self.forum_settings.max_tags:
            raise ValidationError(
                f"A discussion can have at most {self.forum_settings.max_tags} tags"
            )

        discussion = await self.discussion_service.create_discussion(
            author_id=author.id,
            author_handle=author.handle,
            title=fields.title,
            description=fields.description,
            category=fields.category,
            tags=fields.tag_names(),
        )
        return DiscussionResponse.from_discussion(discussion)
