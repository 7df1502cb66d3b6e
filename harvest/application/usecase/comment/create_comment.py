"""Create comment use case."""

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel

from harvest.domain.error import NotFoundError, ValidationError
from harvest.domain.model import Comment
from harvest.domain.service import CommentService, PostService, UserService
from harvest.domain.value import CommentId, PostId, UserId


class CreateCommentRequest(BaseModel):
    """Create comment request."""

    post_id: str  # UUID string
    discussion_id: str  # Discussion the post is expected to belong to
    content: str
    author_id: str  # User ID from authenticated user
    parent_comment_id: str | None = None  # Parent comment ID for replies


class CommentResponse(BaseModel):
    """Comment as returned by the comment endpoints."""

    comment_id: str
    post_id: str
    content: str
    author_id: str
    author_handle: str
    parent_comment_id: str | None
    depth: int
    created_at: datetime

    @classmethod
    def from_comment(cls, comment: Comment) -> "CommentResponse":
        return cls(
            comment_id=str(comment.id),
            post_id=str(comment.post_id),
            content=comment.content,
            author_id=str(comment.author_id),
            author_handle=comment.author_handle.root,
            parent_comment_id=(
                str(comment.parent_comment_id) if comment.parent_comment_id else None
            ),
            depth=comment.depth,
            created_at=comment.created_at,
        )


class CreateCommentUseCase:
    """Use case for creating a comment on a post or replying to another comment."""

    def __init__(
        self,
        comment_service: CommentService,
        post_service: PostService,
        user_service: UserService,
    ) -> None:
        """Initialize create comment use case.

        Args:
            comment_service: Comment domain service
            post_service: Post domain service
            user_service: User domain service
        """
        self.comment_service = comment_service
        self.post_service = post_service
        self.user_service = user_service

    async def execute(self, request: CreateCommentRequest) -> CommentResponse:
        """Execute create comment flow.

        Steps:
        1. Verify post exists and sits in the given discussion
        2. Resolve the author's handle
        3. Create comment via comment service (validates parent if replying)

        Args:
            request: Create comment request

        Returns:
            Created comment

        Raises:
            NotFoundError: If the post, author or parent comment doesn't exist
            ValidationError: If the post belongs to another discussion
            InvalidParentCommentError: If the parent belongs to another post
        """
        post_id = PostId(UUID(request.post_id))

        post = await self.post_service.get_post_by_id(post_id)
        if not post:
            raise NotFoundError("Post", request.post_id)
        if str(post.discussion_id) != request.discussion_id:
            raise ValidationError(
                f"Post {request.post_id} is not part of discussion {request.discussion_id}"
            )

        author = await self.user_service.get_by_id(UserId(UUID(request.author_id)))

        parent_comment_id = (
            CommentId(UUID(request.parent_comment_id))
            if request.parent_comment_id
            else None
        )
        comment = await self.comment_service.create_comment(
            post_id=post_id,
            author_id=author.id,
            author_handle=author.handle,
            content=request.content,
            parent_comment_id=parent_comment_id,
        )
        return CommentResponse.from_comment(comment)
