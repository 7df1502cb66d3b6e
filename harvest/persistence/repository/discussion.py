"""PostgreSQL implementation of Discussion repository."""

from typing import List, Optional

from sqlalchemy import desc, func, select
from sqlalchemy.ext.asyncio import AsyncSession

from harvest.domain.model import Discussion
from harvest.domain.repository import DiscussionRepository
from harvest.domain.value import DiscussionCategory, DiscussionId
from harvest.persistence.mappers import discussion_to_dict, row_to_discussion
from harvest.persistence.tables import discussions_table


class PostgresDiscussionRepository(DiscussionRepository):
    """PostgreSQL implementation of DiscussionRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def find_by_id(self, discussion_id: DiscussionId) -> Optional[Discussion]:
        """Find a discussion by ID."""
        stmt = select(discussions_table).where(discussions_table.c.id == discussion_id)
        result = await self.session.execute(stmt)
        row = result.mappings().first()
        return row_to_discussion(dict(row)) if row else None

    async def find_all(
        self,
        category: Optional[DiscussionCategory] = None,
        limit: int = 20,
        offset: int = 0,
    ) -> List[Discussion]:
        """Find discussions, newest first."""
        stmt = select(discussions_table)
        if category is not None:
            stmt = stmt.where(discussions_table.c.category == category.value)

        stmt = (
            stmt.order_by(desc(discussions_table.c.created_at))
            .limit(limit)
            .offset(offset)
        )
        result = await self.session.execute(stmt)
        return [row_to_discussion(dict(row)) for row in result.mappings().all()]

    async def count(self, category: Optional[DiscussionCategory] = None) -> int:
        """Count discussions, optionally within one category."""
        stmt = select(func.count()).select_from(discussions_table)
        if category is not None:
            stmt = stmt.where(discussions_table.c.category == category.value)
        result = await self.session.execute(stmt)
        return result.scalar() or 0

    async def save(self, discussion: Discussion) -> Discussion:
        """Save a discussion (create or overwrite)."""
        values = discussion_to_dict(discussion)
        existing = await self.find_by_id(discussion.id)

        if existing:
            stmt = (
                discussions_table.update()
                .where(discussions_table.c.id == discussion.id)
                .values(**values)
            )
        else:
            stmt = discussions_table.insert().values(**values)

        await self.session.execute(stmt)
        await self.session.flush()
        return discussion

    async def delete(self, discussion_id: DiscussionId) -> None:
        """Delete a discussion; posts and comments go with it (ON DELETE CASCADE)."""
        stmt = discussions_table.delete().where(discussions_table.c.id == discussion_id)
        await self.session.execute(stmt)
        await self.session.flush()
