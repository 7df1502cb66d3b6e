"""Discussion use cases."""

from .common import DiscussionFields, DiscussionResponse
from .create_discussion import CreateDiscussionRequest, CreateDiscussionUseCase
from .delete_discussion import DeleteDiscussionRequest, DeleteDiscussionUseCase
from .get_discussion import GetDiscussionRequest, GetDiscussionUseCase
from .list_discussions import (
    ListDiscussionsRequest,
    ListDiscussionsResponse,
    ListDiscussionsUseCase,
)
from .update_discussion import UpdateDiscussionRequest, UpdateDiscussionUseCase

__all__ = [
    "DiscussionFields",
    "DiscussionResponse",
    "CreateDiscussionRequest",
    "CreateDiscussionUseCase",
    "DeleteDiscussionRequest",
    "DeleteDiscussionUseCase",
    "GetDiscussionRequest",
    "GetDiscussionUseCase",
    "ListDiscussionsRequest",
    "ListDiscussionsResponse",
    "ListDiscussionsUseCase",
    "UpdateDiscussionRequest",
    "UpdateDiscussionUseCase",
]
