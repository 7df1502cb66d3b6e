"""Comment use cases."""

from .create_comment import CommentResponse, CreateCommentRequest, CreateCommentUseCase
from .get_comments import GetCommentsRequest, GetCommentsUseCase

__all__ = [
    "CommentResponse",
    "CreateCommentRequest",
    "CreateCommentUseCase",
    "GetCommentsRequest",
    "GetCommentsUseCase",
]
