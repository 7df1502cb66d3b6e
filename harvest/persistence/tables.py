"""SQLAlchemy table definitions for Harvest.

These tables are used with SQLAlchemy Core and hand-written mappers.
They match the schema defined in Alembic migrations.
"""

from sqlalchemy import (
    CheckConstraint,
    Column,
    Float,
    ForeignKey,
    Index,
    Integer,
    MetaData,
    String,
    Table,
    Text,
    func,
)
from sqlalchemy.dialects import postgresql
from sqlalchemy.dialects.postgresql import JSONB, TIMESTAMP, UUID

# Metadata object for all tables
metadata = MetaData()

# ============================================================================
# USERS TABLE
# ============================================================================
users_table = Table(
    "users",
    metadata,
    Column("id", UUID, primary_key=True, server_default="uuid_generate_v4()"),
    Column("handle", String(255), nullable=False),
    Column("city", String(255), nullable=True),  # Copied onto the user's products
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    Column(
        "updated_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
)

Index("idx_users_handle", users_table.c.handle)

# ============================================================================
# DISCUSSIONS TABLE
# ============================================================================
discussions_table = Table(
    "discussions",
    metadata,
    Column("id", UUID, primary_key=True, server_default="uuid_generate_v4()"),
    Column("title", String(200), nullable=False),
    Column("description", Text, nullable=False),
    Column(
        "category",
        postgresql.ENUM(
            "general",
            "farming",
            "market",
            "pricing",
            "transport",
            "other",
            name="discussion_category",
            create_type=False,
        ),
        nullable=False,
        server_default="general",
    ),
    Column(
        "tags",
        postgresql.ARRAY(String(50)),
        nullable=False,
        server_default="{}",
    ),
    Column(
        "author_id", UUID, ForeignKey("users.id", ondelete="CASCADE"), nullable=False
    ),
    Column("author_handle", String(255), nullable=False),  # Denormalized from users
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    Column(
        "updated_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
)

Index("idx_discussions_created_at", discussions_table.c.created_at.desc())
Index("idx_discussions_category", discussions_table.c.category)
Index("idx_discussions_author_id", discussions_table.c.author_id)

# ============================================================================
# POSTS TABLE
# ============================================================================
posts_table = Table(
    "posts",
    metadata,
    Column("id", UUID, primary_key=True, server_default="uuid_generate_v4()"),
    Column(
        "discussion_id",
        UUID,
        ForeignKey("discussions.id", ondelete="CASCADE"),
        nullable=False,
    ),
    Column("content", Text, nullable=False),
    Column(
        "author_id", UUID, ForeignKey("users.id", ondelete="CASCADE"), nullable=False
    ),
    Column("author_handle", String(255), nullable=False),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
)

Index("idx_posts_discussion_created", posts_table.c.discussion_id, posts_table.c.created_at)
Index("idx_posts_author_id", posts_table.c.author_id)

# ============================================================================
# COMMENTS TABLE
# ============================================================================
comments_table = Table(
    "comments",
    metadata,
    Column("id", UUID, primary_key=True, server_default="uuid_generate_v4()"),
    Column("post_id", UUID, ForeignKey("posts.id", ondelete="CASCADE"), nullable=False),
    Column(
        "parent_comment_id",
        UUID,
        ForeignKey("comments.id", ondelete="CASCADE"),
        nullable=True,
    ),
    Column(
        "author_id", UUID, ForeignKey("users.id", ondelete="CASCADE"), nullable=False
    ),
    Column("author_handle", String(255), nullable=False),
    Column("content", Text, nullable=False),
    Column("depth", Integer, nullable=False, server_default="0"),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    CheckConstraint("depth >= 0", name="depth_non_negative"),
)

Index("idx_comments_post_created", comments_table.c.post_id, comments_table.c.created_at)
Index("idx_comments_parent_comment_id", comments_table.c.parent_comment_id)

# ============================================================================
# PRODUCTS TABLE
# ============================================================================
products_table = Table(
    "products",
    metadata,
    Column("id", UUID, primary_key=True, server_default="uuid_generate_v4()"),
    Column("name", String(200), nullable=False),
    Column("description", Text, nullable=False),
    Column("price", Float, nullable=False),
    Column("quantity", Integer, nullable=False),
    Column("images", postgresql.ARRAY(Text), nullable=False, server_default="{}"),
    Column("category", String(100), nullable=False),
    Column("seller_id", UUID, ForeignKey("users.id"), nullable=False),
    Column("seller_name", String(255), nullable=False),  # Denormalized from users
    Column(
        "seller_type",
        postgresql.ENUM("vendor", "farmer", name="seller_type", create_type=False),
        nullable=False,
    ),
    Column("certification_type", String(255), nullable=False, server_default=""),
    Column("minimum_order", Integer, nullable=False, server_default="1"),
    Column("bulk_discounts", JSONB, nullable=False, server_default="[]"),
    Column("city", String(255), nullable=True),  # Denormalized from seller
    Column("view_count", Integer, nullable=False, server_default="0"),
    Column("order_count", Integer, nullable=False, server_default="0"),
    Column("last_order_date", TIMESTAMP(timezone=True), nullable=True),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    Column(
        "updated_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    CheckConstraint("price >= 0", name="price_non_negative"),
    CheckConstraint("quantity >= 0", name="quantity_non_negative"),
    CheckConstraint("minimum_order >= 1", name="minimum_order_positive"),
)

Index("idx_products_seller_id", products_table.c.seller_id)
Index("idx_products_category", products_table.c.category)
Index("idx_products_city", products_table.c.city)
Index(
    "idx_products_search",
    func.to_tsvector(
        "english", products_table.c.name + " " + products_table.c.description
    ),
    postgresql_using="gin",
)
