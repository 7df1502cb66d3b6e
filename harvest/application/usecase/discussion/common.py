"""Shared discussion request/response models."""

from datetime import datetime

from pydantic import BaseModel, field_validator

from harvest.domain.model import Discussion
from harvest.domain.value import DiscussionCategory, TagName


class DiscussionFields(BaseModel):
    """Editable discussion fields, as sent on create and update.

    Category is accepted in any case; tags are trimmed and blank entries
    dropped, matching what the discussion form sends.
    """

    title: str
    description: str
    category: DiscussionCategory
    tags: list[str] = []

    @field_validator("category", mode="before")
    @classmethod
    def lowercase_category(cls, v):
        return v.lower() if isinstance(v, str) else v

    @field_validator("tags")
    @classmethod
    def clean_tags(cls, v: list[str]) -> list[str]:
        return [tag.strip() for tag in v if tag.strip()]

    def tag_names(self) -> list[TagName]:
        return [TagName(tag) for tag in self.tags]


class DiscussionResponse(BaseModel):
    """Discussion detail as returned by every discussion endpoint."""

    discussion_id: str
    title: str
    description: str
    category: DiscussionCategory
    tags: list[str]
    author_id: str
    author_handle: str
    created_at: datetime
    updated_at: datetime

    @classmethod
    def from_discussion(cls, discussion: Discussion) -> "DiscussionResponse":
        return cls(
            discussion_id=str(discussion.id),
            title=discussion.title,
            description=discussion.description,
            category=discussion.category,
            tags=[tag.root for tag in discussion.tags],
            author_id=str(discussion.author_id),
            author_handle=discussion.author_handle.root,
            created_at=discussion.created_at,
            updated_at=discussion.updated_at,
        )
