"""Create post use case."""

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel

from harvest.domain.error import NotFoundError
from harvest.domain.model import Post
from harvest.domain.service import DiscussionService, PostService, UserService
from harvest.domain.value import DiscussionId, UserId

from ..base import BaseUseCase


class CreatePostRequest(BaseModel):
    """Create post request."""

    discussion_id: str  # UUID string
    content: str
    author_id: str  # User ID from authenticated user


class PostResponse(BaseModel):
    """Post as returned by the post endpoints."""

    post_id: str
    discussion_id: str
    content: str
    author_id: str
    author_handle: str
    created_at: datetime

    @classmethod
    def from_post(cls, post: Post) -> "PostResponse":
        return cls(
            post_id=str(post.id),
            discussion_id=str(post.discussion_id),
            content=post.content,
            author_id=str(post.author_id),
            author_handle=post.author_handle.root,
            created_at=post.created_at,
        )


class CreatePostUseCase(BaseUseCase):
    """Use case for adding a post to a discussion."""

    def __init__(
        self,
        post_service: PostService,
        discussion_service: DiscussionService,
        user_service: UserService,
    ) -> None:
        """Initialize create post use case.

        Args:
            post_service: Post domain service
            discussion_service: Discussion domain service
            user_service: User domain service
        """
        self.post_service = post_service
        self.discussion_service = discussion_service
        self.user_service = user_service

    async def execute(self, request: CreatePostRequest) -> PostResponse:
        """Execute create post flow.

        Steps:
        1. Verify the discussion exists
        2. Resolve the author's handle
        3. Create the post via post service

        Raises:
            NotFoundError: If the discussion or the author doesn't exist
        """
        discussion_id = DiscussionId(UUID(request.discussion_id))
        discussion = await self.discussion_service.get_discussion_by_id(discussion_id)
        if discussion is None:
            raise NotFoundError("Discussion", request.discussion_id)

        author = await self.user_service.get_by_id(UserId(UUID(request.author_id)))

        post = await self.post_service.create_post(
            discussion_id=discussion_id,
            author_id=author.id,
            author_handle=author.handle,
            content=request.content,
        )
        return PostResponse.from_post(post)
