"""Wire models for the forum API, as seen from the client side."""

from datetime import datetime

from pydantic import BaseModel, Field

from harvest.domain.value import Pagination


class RemoteDiscussion(BaseModel):
    """Discussion detail returned by the API."""

    discussion_id: str
    title: str
    description: str
    category: str
    tags: list[str] = Field(default_factory=list)
    author_id: str
    author_handle: str
    created_at: datetime
    updated_at: datetime


class RemotePost(BaseModel):
    """Post returned by the API."""

    post_id: str
    discussion_id: str
    content: str
    author_id: str
    author_handle: str
    created_at: datetime


class RemoteComment(BaseModel):
    """Comment returned by the API."""

    comment_id: str
    post_id: str
    content: str
    author_id: str
    author_handle: str
    parent_comment_id: str | None = None
    depth: int = 0
    created_at: datetime


class PostsPage(BaseModel):
    """One page of a discussion's posts."""

    posts: list[RemotePost]
    pagination: Pagination


class DiscussionInput(BaseModel):
    """Body sent when creating or updating a discussion."""

    title: str
    description: str
    category: str
    tags: list[str] = Field(default_factory=list)
