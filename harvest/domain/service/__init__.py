"""Domain services."""

from .base import Service
from .comment_service import CommentService
from .discussion_service import DiscussionService
from .jwt_service import JWTService
from .post_service import PostService
from .product_service import ProductService
from .user_service import UserService

__all__ = [
    "CommentService",
    "DiscussionService",
    "JWTService",
    "PostService",
    "ProductService",
    "Service",
    "UserService",
]
