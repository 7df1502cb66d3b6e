"""Comment domain service."""

import logfire
from datetime import datetime
from uuid import uuid4

from harvest.domain.error import InvalidParentCommentError, NotFoundError
from harvest.domain.model.comment import Comment
from harvest.domain.repository import CommentRepository
from harvest.domain.value import CommentId, PostId, UserId
from harvest.domain.value.types import Handle

from .base import Service


class CommentService(Service):
    """Domain service for comment operations."""

    def __init__(self, comment_repository: CommentRepository) -> None:
        """Initialize comment service.

        Args:
            comment_repository: Comment repository
        """
        self.comment_repository = comment_repository

    async def create_comment(
        self,
        post_id: PostId,
        author_id: UserId,
        author_handle: Handle,
        content: str,
        parent_comment_id: CommentId | None = None,
    ) -> Comment:
        """Create a comment on a post or reply to another comment.

        Args:
            post_id: Post ID
            author_id: Author user ID
            author_handle: Author handle
            content: Comment body
            parent_comment_id: Parent comment ID for replies (None for top-level)

        Returns:
            Created comment

        Raises:
            NotFoundError: If the parent comment doesn't exist
            InvalidParentCommentError: If the parent belongs to another post
        """
        with logfire.span(
            "comment_service.create_comment",
            post_id=str(post_id),
            author_id=str(author_id),
            parent_comment_id=str(parent_comment_id) if parent_comment_id else None,
        ):
            depth = 0
            if parent_comment_id:
                parent = await self.comment_repository.find_by_id(parent_comment_id)
                if not parent:
                    logfire.error(
                        "Parent comment not found",
                        parent_comment_id=str(parent_comment_id),
                        post_id=str(post_id),
                    )
                    raise NotFoundError("Comment", str(parent_comment_id))
                if parent.post_id != post_id:
                    logfire.error(
                        "Parent comment does not belong to post",
                        parent_comment_id=str(parent_comment_id),
                        parent_post_id=str(parent.post_id),
                        target_post_id=str(post_id),
                    )
                    raise InvalidParentCommentError(str(parent_comment_id), str(post_id))
                depth = parent.depth + 1

            comment = Comment(
                id=CommentId(uuid4()),
                post_id=post_id,
                author_id=author_id,
                author_handle=author_handle,
                content=content,
                parent_comment_id=parent_comment_id,
                depth=depth,
                created_at=datetime.now(),
            )

            saved = await self.comment_repository.save(comment)
            logfire.info(
                "Comment created",
                comment_id=str(saved.id),
                post_id=str(post_id),
                depth=depth,
            )
            return saved

    async def get_comments_for_post(self, post_id: PostId) -> list[Comment]:
        """Get all comments for a post, oldest first.

        Args:
            post_id: Post ID

        Returns:
            Flat list of comments
        """
        with logfire.span(
            "comment_service.get_comments_for_post", post_id=str(post_id)
        ):
            comments = await self.comment_repository.find_by_post(post_id)
            logfire.info(
                "Comments retrieved for post",
                post_id=str(post_id),
                count=len(comments),
            )
            return comments
