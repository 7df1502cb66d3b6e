"""Forum API client adapter."""

from .client import ForumApi, ForumApiClient, MockForumApi
from .models import (
    DiscussionInput,
    PostsPage,
    RemoteComment,
    RemoteDiscussion,
    RemotePost,
)

__all__ = [
    "ForumApi",
    "ForumApiClient",
    "MockForumApi",
    "DiscussionInput",
    "PostsPage",
    "RemoteComment",
    "RemoteDiscussion",
    "RemotePost",
]
