"""Shared backing store for in-memory repositories."""

from dataclasses import dataclass, field

from harvest.domain.model import Comment, Discussion, Post, Product, User
from harvest.domain.value import CommentId, DiscussionId, PostId, ProductId, UserId


@dataclass
class InMemoryStore:
    """Tables shared by the in-memory repositories of one test.

    Sharing one store lets a discussion delete cascade to posts and
    comments the way the database's foreign keys do.
    """

    users: dict[UserId, User] = field(default_factory=dict)
    discussions: dict[DiscussionId, Discussion] = field(default_factory=dict)
    posts: dict[PostId, Post] = field(default_factory=dict)
    comments: dict[CommentId, Comment] = field(default_factory=dict)
    products: dict[ProductId, Product] = field(default_factory=dict)
