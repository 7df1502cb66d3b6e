"""In-memory comment repository for testing."""

from typing import Optional

from harvest.domain.model.comment import Comment
from harvest.domain.repository.comment import CommentRepository
from harvest.domain.value import CommentId, PostId

from .store import InMemoryStore


class InMemoryCommentRepository(CommentRepository):
    """In-memory implementation of CommentRepository for testing."""

    def __init__(self, store: InMemoryStore | None = None) -> None:
        self._comments = (store or InMemoryStore()).comments

    async def find_by_id(self, comment_id: CommentId) -> Optional[Comment]:
        """Find a comment by ID."""
        return self._comments.get(comment_id)

    async def find_by_post(self, post_id: PostId) -> list[Comment]:
        """Find all comments for a post, oldest first."""
        comments = [c for c in self._comments.values() if c.post_id == post_id]
        comments.sort(key=lambda c: c.created_at)
        return comments

    async def save(self, comment: Comment) -> Comment:
        """Save a comment."""
        self._comments[comment.id] = comment
        return comment

    async def count_by_post(self, post_id: PostId) -> int:
        """Count comments for a post."""
        return sum(1 for c in self._comments.values() if c.post_id == post_id)
