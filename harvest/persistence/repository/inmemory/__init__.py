"""In-memory repository implementations for testing."""

from .comment import InMemoryCommentRepository
from .discussion import InMemoryDiscussionRepository
from .post import InMemoryPostRepository
from .product import InMemoryProductRepository
from .store import InMemoryStore
from .user import InMemoryUserRepository

__all__ = [
    "InMemoryCommentRepository",
    "InMemoryDiscussionRepository",
    "InMemoryPostRepository",
    "InMemoryProductRepository",
    "InMemoryStore",
    "InMemoryUserRepository",
]
