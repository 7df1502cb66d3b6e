"""Comment repository interface."""

from abc import ABC, abstractmethod
from typing import List, Optional

from harvest.domain.model.comment import Comment
from harvest.domain.value import CommentId, PostId


class CommentRepository(ABC):
    """Repository for Comment entity.

    Defines the contract for comment persistence operations.
    Implementations live in the persistence layer.
    """

    @abstractmethod
    async def find_by_id(self, comment_id: CommentId) -> Optional[Comment]:
        """Find a comment by ID.

        Args:
            comment_id: The comment's unique identifier

        Returns:
            The comment if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_by_post(self, post_id: PostId) -> List[Comment]:
        """Find all comments for a post, oldest first.

        Replies are returned flat; callers rebuild the tree from
        ``parent_comment_id``.

        Args:
            post_id: The post ID

        Returns:
            List of comments in creation order
        """
        pass

    @abstractmethod
    async def save(self, comment: Comment) -> Comment:
        """Save a comment.

        Args:
            comment: The comment to save

        Returns:
            The saved comment
        """
        pass

    @abstractmethod
    async def count_by_post(self, post_id: PostId) -> int:
        """Count comments for a post.

        Args:
            post_id: The post ID

        Returns:
            Number of comments
        """
        pass
