"""Discussion aggregate root.

A discussion is the top of the forum containment tree:
discussion -> posts -> comments. Deleting a discussion removes the whole tree.
"""

from datetime import datetime

from pydantic import Field, field_validator

from harvest.domain.model.common import DomainModel
from harvest.domain.value import DiscussionCategory, DiscussionId, TagName, UserId
from harvest.domain.value.types import Handle


class Discussion(DomainModel):
    """Discussion aggregate root.

    Only the author may change or delete a discussion.
    """

    id: DiscussionId
    title: str = Field(min_length=1, max_length=200)
    description: str = Field(min_length=1, max_length=10000)
    category: DiscussionCategory
    tags: list[TagName] = Field(default_factory=list)
    author_id: UserId
    author_handle: Handle
    created_at: datetime = Field(default_factory=datetime.now)
    updated_at: datetime = Field(default_factory=datetime.now)

    @field_validator("tags")
    @classmethod
    def dedupe_tags(cls, v: list[TagName]) -> list[TagName]:
        """Drop repeated tags, keeping first-seen order."""
        seen: set[str] = set()
        unique = []
        for tag in v:
            if tag.root not in seen:
                seen.add(tag.root)
                unique.append(tag)
        return unique

    def is_authored_by(self, user_id: UserId) -> bool:
        return self.author_id == user_id
