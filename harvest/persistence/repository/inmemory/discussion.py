"""In-memory discussion repository for testing."""

from typing import Optional

from harvest.domain.model.discussion import Discussion
from harvest.domain.repository.discussion import DiscussionRepository
from harvest.domain.value import DiscussionCategory, DiscussionId

from .store import InMemoryStore


class InMemoryDiscussionRepository(DiscussionRepository):
    """In-memory implementation of DiscussionRepository for testing."""

    def __init__(self, store: InMemoryStore | None = None) -> None:
        self._store = store or InMemoryStore()

    async def find_by_id(self, discussion_id: DiscussionId) -> Optional[Discussion]:
        """Find a discussion by ID."""
        return self._store.discussions.get(discussion_id)

    async def find_all(
        self,
        category: Optional[DiscussionCategory] = None,
        limit: int = 20,
        offset: int = 0,
    ) -> list[Discussion]:
        """Find discussions, newest first."""
        discussions = list(self._store.discussions.values())

        if category is not None:
            discussions = [d for d in discussions if d.category == category]

        discussions.sort(key=lambda d: d.created_at, reverse=True)

        return discussions[offset : offset + limit]

    async def count(self, category: Optional[DiscussionCategory] = None) -> int:
        """Count discussions, optionally within one category."""
        return sum(
            1
            for d in self._store.discussions.values()
            if category is None or d.category == category
        )

    async def save(self, discussion: Discussion) -> Discussion:
        """Save or overwrite a discussion."""
        self._store.discussions[discussion.id] = discussion
        return discussion

    async def delete(self, discussion_id: DiscussionId) -> None:
        """Delete a discussion and cascade to its posts and comments."""
        self._store.discussions.pop(discussion_id, None)

        post_ids = {
            post.id
            for post in self._store.posts.values()
            if post.discussion_id == discussion_id
        }
        for post_id in post_ids:
            del self._store.posts[post_id]

        for comment_id in [
            c.id for c in self._store.comments.values() if c.post_id in post_ids
        ]:
            del self._store.comments[comment_id]
