"""Get comments use case."""

from uuid import UUID

from pydantic import BaseModel

from harvest.domain.error import NotFoundError
from harvest.domain.service import CommentService, PostService
from harvest.domain.value import PostId

from .create_comment import CommentResponse


class GetCommentsRequest(BaseModel):
    """Get comments request."""

    post_id: str  # UUID string


class GetCommentsUseCase:
    """Use case for reading every comment on a post, oldest first."""

    def __init__(
        self, comment_service: CommentService, post_service: PostService
    ) -> None:
        self.comment_service = comment_service
        self.post_service = post_service

    async def execute(self, request: GetCommentsRequest) -> list[CommentResponse]:
        """Execute get comments flow.

        Raises:
            NotFoundError: If the post doesn't exist
        """
        post_id = PostId(UUID(request.post_id))
        if await self.post_service.get_post_by_id(post_id) is None:
            raise NotFoundError("Post", request.post_id)

        comments = await self.comment_service.get_comments_for_post(post_id)
        return [CommentResponse.from_comment(comment) for comment in comments]
