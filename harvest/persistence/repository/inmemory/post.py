"""In-memory post repository for testing."""

from typing import Optional

from harvest.domain.model.post import Post
from harvest.domain.repository.post import PostRepository
from harvest.domain.value import DiscussionId, PostId

from .store import InMemoryStore


class InMemoryPostRepository(PostRepository):
    """In-memory implementation of PostRepository for testing."""

    def __init__(self, store: InMemoryStore | None = None) -> None:
        self._posts = (store or InMemoryStore()).posts

    async def find_by_id(self, post_id: PostId) -> Optional[Post]:
        """Find a post by ID."""
        return self._posts.get(post_id)

    async def find_by_discussion(
        self,
        discussion_id: DiscussionId,
        limit: int = 10,
        offset: int = 0,
    ) -> list[Post]:
        """Find one page of a discussion's posts, oldest first."""
        posts = [p for p in self._posts.values() if p.discussion_id == discussion_id]

        # Insertion order breaks created_at ties, like the id tiebreak in SQL
        posts.sort(key=lambda p: p.created_at)

        return posts[offset : offset + limit]

    async def count_by_discussion(self, discussion_id: DiscussionId) -> int:
        """Count the posts in a discussion."""
        return sum(1 for p in self._posts.values() if p.discussion_id == discussion_id)

    async def save(self, post: Post) -> Post:
        """Save a post."""
        self._posts[post.id] = post
        return post
