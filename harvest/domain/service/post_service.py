"""Post domain service."""

from datetime import datetime
from uuid import uuid4

import logfire

from harvest.domain.model.post import Post
from harvest.domain.repository import PostRepository
from harvest.domain.value import DiscussionId, Pagination, PostId, UserId
from harvest.domain.value.types import Handle

from .base import Service


class PostService(Service):
    """Domain service for post operations."""

    def __init__(self, post_repository: PostRepository) -> None:
        """Initialize post service.

        Args:
            post_repository: Post repository
        """
        self.post_repository = post_repository

    async def create_post(
        self,
        discussion_id: DiscussionId,
        author_id: UserId,
        author_handle: Handle,
        content: str,
    ) -> Post:
        """Add a post to a discussion.

        Args:
            discussion_id: Discussion the post belongs to
            author_id: Author user ID
            author_handle: Author handle
            content: Post body

        Returns:
            Created post
        """
        with logfire.span(
            "post_service.create_post",
            discussion_id=str(discussion_id),
            author_id=str(author_id),
        ):
            post = Post(
                id=PostId(uuid4()),
                discussion_id=discussion_id,
                content=content,
                author_id=author_id,
                author_handle=author_handle,
                created_at=datetime.now(),
            )
            saved = await self.post_repository.save(post)
            logfire.info(
                "Post created",
                post_id=str(saved.id),
                discussion_id=str(discussion_id),
                content_length=len(saved.content),
            )
            return saved

    async def get_post_by_id(self, post_id: PostId) -> Post | None:
        """Get a post by ID.

        Args:
            post_id: Post ID

        Returns:
            Post if found, None otherwise
        """
        with logfire.span("post_service.get_post_by_id", post_id=str(post_id)):
            post = await self.post_repository.find_by_id(post_id)
            if post is None:
                logfire.warn("Post not found", post_id=str(post_id))
            return post

    async def get_discussion_posts(
        self, discussion_id: DiscussionId, page: int, page_size: int
    ) -> tuple[list[Post], Pagination]:
        """Get one page of a discussion's posts.

        Pagination is recomputed from a fresh count on every call. A page
        past the end yields no posts rather than an error.

        Args:
            discussion_id: Discussion ID
            page: 1-based page number
            page_size: Posts per page

        Returns:
            The page's posts (oldest first) and pagination metadata
        """
        with logfire.span(
            "post_service.get_discussion_posts",
            discussion_id=str(discussion_id),
            page=page,
            page_size=page_size,
        ):
            total = await self.post_repository.count_by_discussion(discussion_id)
            pagination = Pagination.from_total(total, page, page_size)
            posts = await self.post_repository.find_by_discussion(
                discussion_id,
                limit=page_size,
                offset=pagination.offset,
            )
            logfire.info(
                "Discussion posts retrieved",
                discussion_id=str(discussion_id),
                count=len(posts),
                total=total,
            )
            return posts, pagination
