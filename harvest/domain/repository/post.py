"""Post repository interface."""

from abc import ABC, abstractmethod
from typing import List, Optional

from harvest.domain.model.post import Post
from harvest.domain.value import DiscussionId, PostId


class PostRepository(ABC):
    """Repository for Post entity.

    Defines the contract for post persistence operations.
    Implementations live in the persistence layer.
    """

    @abstractmethod
    async def find_by_id(self, post_id: PostId) -> Optional[Post]:
        """Find a post by ID.

        Args:
            post_id: The post's unique identifier

        Returns:
            The post if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_by_discussion(
        self,
        discussion_id: DiscussionId,
        limit: int = 10,
        offset: int = 0,
    ) -> List[Post]:
        """Find one page of a discussion's posts, oldest first.

        Args:
            discussion_id: The discussion ID
            limit: Maximum number of posts to return
            offset: Number of posts to skip

        Returns:
            List of posts in creation order
        """
        pass

    @abstractmethod
    async def count_by_discussion(self, discussion_id: DiscussionId) -> int:
        """Count the posts in a discussion.

        Args:
            discussion_id: The discussion ID

        Returns:
            Number of posts
        """
        pass

    @abstractmethod
    async def save(self, post: Post) -> Post:
        """Save a post.

        Args:
            post: The post to save

        Returns:
            The saved post
        """
        pass
