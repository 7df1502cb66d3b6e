"""Discussion repository interface."""

from abc import ABC, abstractmethod
from typing import List, Optional

from harvest.domain.model.discussion import Discussion
from harvest.domain.value import DiscussionCategory, DiscussionId


class DiscussionRepository(ABC):
    """Repository for Discussion aggregate.

    Defines the contract for discussion persistence operations.
    Implementations live in the persistence layer.
    """

    @abstractmethod
    async def find_by_id(self, discussion_id: DiscussionId) -> Optional[Discussion]:
        """Find a discussion by ID.

        Args:
            discussion_id: The discussion's unique identifier

        Returns:
            The discussion if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_all(
        self,
        category: Optional[DiscussionCategory] = None,
        limit: int = 20,
        offset: int = 0,
    ) -> List[Discussion]:
        """Find discussions, newest first.

        Args:
            category: Only return discussions in this category (None for all)
            limit: Maximum number of discussions to return
            offset: Number of discussions to skip

        Returns:
            List of discussions
        """
        pass

    @abstractmethod
    async def count(self, category: Optional[DiscussionCategory] = None) -> int:
        """Count discussions, optionally within one category."""
        pass

    @abstractmethod
    async def save(self, discussion: Discussion) -> Discussion:
        """Save a discussion (create or overwrite).

        Args:
            discussion: The discussion to save

        Returns:
            The saved discussion
        """
        pass

    @abstractmethod
    async def delete(self, discussion_id: DiscussionId) -> None:
        """Delete a discussion together with its posts and their comments.

        Args:
            discussion_id: The discussion ID to delete
        """
        pass
