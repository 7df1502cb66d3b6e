"""Discussion domain service."""

from datetime import datetime
from uuid import uuid4

import logfire

from harvest.domain.error import NotAuthorizedError, NotFoundError
from harvest.domain.model.discussion import Discussion
from harvest.domain.repository import DiscussionRepository
from harvest.domain.value import (
    DiscussionCategory,
    DiscussionId,
    Pagination,
    TagName,
    UserId,
)
from harvest.domain.value.types import Handle

from .base import Service


class DiscussionService(Service):
    """Domain service for discussion operations."""

    def __init__(self, discussion_repository: DiscussionRepository) -> None:
        """Initialize discussion service.

        Args:
            discussion_repository: Discussion repository
        """
        self.discussion_repository = discussion_repository

    async def create_discussion(
        self,
        author_id: UserId,
        author_handle: Handle,
        title: str,
        description: str,
        category: DiscussionCategory,
        tags: list[TagName],
    ) -> Discussion:
        """Create a new discussion.

        Args:
            author_id: Author user ID
            author_handle: Author handle
            title: Discussion title
            description: Opening description
            category: Forum category
            tags: Tags in display order

        Returns:
            Created discussion
        """
        with logfire.span(
            "discussion_service.create_discussion",
            author_id=str(author_id),
            category=category.value,
        ):
            now = datetime.now()
            discussion = Discussion(
                id=DiscussionId(uuid4()),
                title=title,
                description=description,
                category=category,
                tags=tags,
                author_id=author_id,
                author_handle=author_handle,
                created_at=now,
                updated_at=now,
            )
            saved = await self.discussion_repository.save(discussion)
            logfire.info(
                "Discussion created",
                discussion_id=str(saved.id),
                author_handle=author_handle.root,
                tag_count=len(saved.tags),
            )
            return saved

    async def get_discussion_by_id(
        self, discussion_id: DiscussionId
    ) -> Discussion | None:
        """Get a discussion by ID.

        Args:
            discussion_id: Discussion ID

        Returns:
            Discussion if found, None otherwise
        """
        with logfire.span(
            "discussion_service.get_discussion_by_id",
            discussion_id=str(discussion_id),
        ):
            discussion = await self.discussion_repository.find_by_id(discussion_id)
            if discussion is None:
                logfire.warn("Discussion not found", discussion_id=str(discussion_id))
            return discussion

    async def list_discussions(
        self,
        page: int,
        page_size: int,
        category: DiscussionCategory | None = None,
    ) -> tuple[list[Discussion], Pagination]:
        """List one page of discussions, newest first.

        Args:
            page: 1-based page number
            page_size: Discussions per page
            category: Optional category filter

        Returns:
            The page's discussions and freshly computed pagination
        """
        with logfire.span(
            "discussion_service.list_discussions",
            page=page,
            page_size=page_size,
            category=category.value if category else None,
        ):
            total = await self.discussion_repository.count(category=category)
            pagination = Pagination.from_total(total, page, page_size)
            discussions = await self.discussion_repository.find_all(
                category=category,
                limit=page_size,
                offset=pagination.offset,
            )
            logfire.info("Discussions listed", count=len(discussions), total=total)
            return discussions, pagination

    async def update_discussion(
        self,
        discussion_id: DiscussionId,
        user_id: UserId,
        title: str,
        description: str,
        category: DiscussionCategory,
        tags: list[TagName],
    ) -> Discussion:
        """Overwrite a discussion's editable fields.

        Args:
            discussion_id: Discussion ID
            user_id: Acting user (must be the author)
            title: New title
            description: New description
            category: New category
            tags: New tags

        Returns:
            Updated discussion

        Raises:
            NotFoundError: If the discussion doesn't exist
            NotAuthorizedError: If the user is not the author
        """
        with logfire.span(
            "discussion_service.update_discussion",
            discussion_id=str(discussion_id),
            user_id=str(user_id),
        ):
            discussion = await self._get_owned(discussion_id, user_id)
            updated = discussion.revise(
                title=title,
                description=description,
                category=category,
                tags=tags,
                updated_at=datetime.now(),
            )
            saved = await self.discussion_repository.save(updated)
            logfire.info("Discussion updated", discussion_id=str(discussion_id))
            return saved

    async def delete_discussion(
        self, discussion_id: DiscussionId, user_id: UserId
    ) -> None:
        """Delete a discussion with its posts and comments.

        Raises:
            NotFoundError: If the discussion doesn't exist
            NotAuthorizedError: If the user is not the author
        """
        with logfire.span(
            "discussion_service.delete_discussion",
            discussion_id=str(discussion_id),
            user_id=str(user_id),
        ):
            await self._get_owned(discussion_id, user_id)
            await self.discussion_repository.delete(discussion_id)
            logfire.info("Discussion deleted", discussion_id=str(discussion_id))

    async def _get_owned(
        self, discussion_id: DiscussionId, user_id: UserId
    ) -> Discussion:
        discussion = await self.discussion_repository.find_by_id(discussion_id)
        if discussion is None:
            raise NotFoundError("Discussion", str(discussion_id))
        if not discussion.is_authored_by(user_id):
            logfire.warn(
                "Discussion change by non-author rejected",
                discussion_id=str(discussion_id),
                user_id=str(user_id),
                author_id=str(discussion.author_id),
            )
            raise NotAuthorizedError("discussion", str(discussion_id), str(user_id))
        return discussion
