"""Domain model entities for Harvest."""

from harvest.domain.model.comment import Comment
from harvest.domain.model.discussion import Discussion
from harvest.domain.model.post import Post
from harvest.domain.model.product import BulkDiscount, Product
from harvest.domain.model.user import User

__all__ = [
    "User",
    "Discussion",
    "Post",
    "Comment",
    "Product",
    "BulkDiscount",
]
