"""PostgreSQL implementation of Post repository."""

from typing import List, Optional

import logfire
from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession

from harvest.domain.model import Post
from harvest.domain.repository import PostRepository
from harvest.domain.value import DiscussionId, PostId
from harvest.persistence.mappers import post_to_dict, row_to_post
from harvest.persistence.tables import posts_table


class PostgresPostRepository(PostRepository):
    """PostgreSQL implementation of PostRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def find_by_id(self, post_id: PostId) -> Optional[Post]:
        """Find a post by ID."""
        stmt = select(posts_table).where(posts_table.c.id == post_id)
        result = await self.session.execute(stmt)
        row = result.mappings().first()
        return row_to_post(dict(row)) if row else None

    async def find_by_discussion(
        self,
        discussion_id: DiscussionId,
        limit: int = 10,
        offset: int = 0,
    ) -> List[Post]:
        """Find one page of a discussion's posts, oldest first."""
        with logfire.span(
            "post_repository.find_by_discussion",
            discussion_id=str(discussion_id),
            limit=limit,
            offset=offset,
        ):
            stmt = (
                select(posts_table)
                .where(posts_table.c.discussion_id == discussion_id)
                .order_by(posts_table.c.created_at, posts_table.c.id)
                .limit(limit)
                .offset(offset)
            )
            result = await self.session.execute(stmt)
            return [row_to_post(dict(row)) for row in result.mappings().all()]

    async def count_by_discussion(self, discussion_id: DiscussionId) -> int:
        """Count the posts in a discussion."""
        stmt = (
            select(func.count())
            .select_from(posts_table)
            .where(posts_table.c.discussion_id == discussion_id)
        )
        result = await self.session.execute(stmt)
        return result.scalar() or 0

    async def save(self, post: Post) -> Post:
        """Insert a post. Post content never changes, so there is no update path."""
        stmt = posts_table.insert().values(**post_to_dict(post))
        await self.session.execute(stmt)
        await self.session.flush()
        return post
