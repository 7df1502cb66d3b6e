"""PostgreSQL repository implementations."""

from harvest.persistence.repository.comment import PostgresCommentRepository
from harvest.persistence.repository.discussion import PostgresDiscussionRepository
from harvest.persistence.repository.post import PostgresPostRepository
from harvest.persistence.repository.product import PostgresProductRepository
from harvest.persistence.repository.user import PostgresUserRepository

__all__ = [
    "PostgresUserRepository",
    "PostgresDiscussionRepository",
    "PostgresPostRepository",
    "PostgresCommentRepository",
    "PostgresProductRepository",
]
