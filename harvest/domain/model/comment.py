"""Comment entity.

Comments reply to a post or to another comment on the same post, with
unlimited nesting depth.
"""

from datetime import datetime
from typing import Optional

from pydantic import Field

from harvest.domain.model.common import DomainModel
from harvest.domain.value import CommentId, PostId, UserId
from harvest.domain.value.types import Handle


class Comment(DomainModel):
    """Comment entity.

    Threading is managed through:
    - parent_comment_id: Direct parent comment (None for top-level)
    - depth: Nesting level (0 for top-level, parent depth + 1 for replies)
    """

    id: CommentId
    post_id: PostId
    author_id: UserId
    author_handle: Handle
    content: str = Field(min_length=1, max_length=10000)
    parent_comment_id: Optional[CommentId] = None
    depth: int = Field(default=0, ge=0)
    created_at: datetime = Field(default_factory=datetime.now)
