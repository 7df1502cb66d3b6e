"""Post use cases."""

from .create_post import CreatePostRequest, CreatePostUseCase, PostResponse
from .list_discussion_posts import (
    ListDiscussionPostsRequest,
    ListDiscussionPostsResponse,
    ListDiscussionPostsUseCase,
)

__all__ = [
    "CreatePostRequest",
    "CreatePostUseCase",
    "PostResponse",
    "ListDiscussionPostsRequest",
    "ListDiscussionPostsResponse",
    "ListDiscussionPostsUseCase",
]
