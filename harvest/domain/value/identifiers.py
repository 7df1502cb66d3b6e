"""Strongly typed identifiers for Harvest domain entities.

Using NewType for strong typing prevents mixing up different entity IDs
and makes the code more self-documenting.
"""

from typing import NewType
from uuid import UUID

UserId = NewType("UserId", UUID)
DiscussionId = NewType("DiscussionId", UUID)
PostId = NewType("PostId", UUID)
CommentId = NewType("CommentId", UUID)
ProductId = NewType("ProductId", UUID)
