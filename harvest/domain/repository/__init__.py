"""Repository interfaces for Harvest domain.

Repository interfaces are defined in the domain layer (dependency inversion).
Implementations live in the persistence layer.
"""

from harvest.domain.repository.comment import CommentRepository
from harvest.domain.repository.discussion import DiscussionRepository
from harvest.domain.repository.post import PostRepository
from harvest.domain.repository.product import ProductRepository
from harvest.domain.repository.user import UserRepository

__all__ = [
    "UserRepository",
    "DiscussionRepository",
    "PostRepository",
    "CommentRepository",
    "ProductRepository",
]
