"""Domain value objects for Harvest."""

from harvest.domain.value.identifiers import (
    CommentId,
    DiscussionId,
    PostId,
    ProductId,
    UserId,
)
from harvest.domain.value.pagination import Pagination
from harvest.domain.value.types import (
    DiscussionCategory,
    Handle,
    SellerType,
    TagName,
)

__all__ = [
    # Identifiers
    "UserId",
    "DiscussionId",
    "PostId",
    "CommentId",
    "ProductId",
    "Pagination",
    # Types
    "DiscussionCategory",
    "Handle",
    "SellerType",
    "TagName",
]
