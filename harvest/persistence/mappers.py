"""Mappers for converting between database rows and domain models.

Domain models are immutable Pydantic models, so rows are mapped by hand
instead of through SQLAlchemy's ORM.
"""

from typing import Any, Dict
from uuid import UUID

from harvest.domain.model import Comment, Discussion, Post, Product, User
from harvest.domain.model.product import BulkDiscount
from harvest.domain.value import (
    CommentId,
    DiscussionCategory,
    DiscussionId,
    PostId,
    ProductId,
    SellerType,
    TagName,
    UserId,
)
from harvest.domain.value.types import Handle


def _uuid(value: Any) -> UUID:
    """Normalize a UUID column value (asyncpg returns UUID, tests pass str)."""
    return UUID(value) if isinstance(value, str) else value


def row_to_user(row: Dict[str, Any]) -> User:
    """Convert database row to User domain model."""
    return User(
        id=UserId(_uuid(row["id"])),
        handle=Handle(row["handle"]),
        city=row.get("city"),
        created_at=row["created_at"],
        updated_at=row["updated_at"],
    )


def user_to_dict(user: User) -> Dict[str, Any]:
    """Convert User domain model to database dict."""
    return user.model_dump()


def row_to_discussion(row: Dict[str, Any]) -> Discussion:
    """Convert database row to Discussion domain model.

    Args:
        row: Database row as dict

    Returns:
        Discussion domain model
    """
    return Discussion(
        id=DiscussionId(_uuid(row["id"])),
        title=row["title"],
        description=row["description"],
        category=DiscussionCategory(row["category"]),
        tags=[TagName(tag) for tag in row.get("tags") or []],
        author_id=UserId(_uuid(row["author_id"])),
        author_handle=Handle(row["author_handle"]),
        created_at=row["created_at"],
        updated_at=row["updated_at"],
    )


def discussion_to_dict(discussion: Discussion) -> Dict[str, Any]:
    """Convert Discussion domain model to database dict.

    Category is stored as its enum value, tags as a plain text array.
    """
    return discussion.model_dump() | {"category": discussion.category.value}


def row_to_post(row: Dict[str, Any]) -> Post:
    """Convert database row to Post domain model."""
    return Post(
        id=PostId(_uuid(row["id"])),
        discussion_id=DiscussionId(_uuid(row["discussion_id"])),
        content=row["content"],
        author_id=UserId(_uuid(row["author_id"])),
        author_handle=Handle(row["author_handle"]),
        created_at=row["created_at"],
    )


def post_to_dict(post: Post) -> Dict[str, Any]:
    """Convert Post domain model to database dict."""
    return post.model_dump()


def row_to_comment(row: Dict[str, Any]) -> Comment:
    """Convert database row to Comment domain model."""
    parent_id = row.get("parent_comment_id")
    return Comment(
        id=CommentId(_uuid(row["id"])),
        post_id=PostId(_uuid(row["post_id"])),
        author_id=UserId(_uuid(row["author_id"])),
        author_handle=Handle(row["author_handle"]),
        content=row["content"],
        parent_comment_id=CommentId(_uuid(parent_id)) if parent_id else None,
        depth=row["depth"],
        created_at=row["created_at"],
    )


def comment_to_dict(comment: Comment) -> Dict[str, Any]:
    """Convert Comment domain model to database dict."""
    return comment.model_dump()


def row_to_product(row: Dict[str, Any]) -> Product:
    """Convert database row to Product domain model.

    Args:
        row: Database row as dict

    Returns:
        Product domain model
    """
    return Product(
        id=ProductId(_uuid(row["id"])),
        name=row["name"],
        description=row["description"],
        price=row["price"],
        quantity=row["quantity"],
        images=list(row.get("images") or []),
        category=row["category"],
        seller_id=UserId(_uuid(row["seller_id"])),
        seller_name=row["seller_name"],
        seller_type=SellerType(row["seller_type"]),
        certification_type=row.get("certification_type") or "",
        minimum_order=row["minimum_order"],
        bulk_discounts=[
            BulkDiscount(**tier) for tier in row.get("bulk_discounts") or []
        ],
        city=row.get("city"),
        view_count=row["view_count"],
        order_count=row["order_count"],
        last_order_date=row.get("last_order_date"),
        created_at=row["created_at"],
        updated_at=row["updated_at"],
    )


def product_to_dict(product: Product) -> Dict[str, Any]:
    """Convert Product domain model to database dict.

    Bulk discount tiers are stored as a JSONB list of plain dicts.
    """
    return product.model_dump() | {"seller_type": product.seller_type.value}
