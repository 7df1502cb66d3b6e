"""Post entity.

Posts are the top-level responses inside a discussion and the anchor for
comment threads. Their content never changes after creation.
"""

from datetime import datetime

from pydantic import Field

from harvest.domain.model.common import DomainModel
from harvest.domain.value import DiscussionId, PostId, UserId
from harvest.domain.value.types import Handle


class Post(DomainModel):
    """Post entity."""

    id: PostId
    discussion_id: DiscussionId
    content: str = Field(min_length=1, max_length=10000)
    author_id: UserId
    author_handle: Handle
    created_at: datetime = Field(default_factory=datetime.now)
