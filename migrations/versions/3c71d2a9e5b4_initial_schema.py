"""initial_schema

Create the schema for Harvest Market:
- Users (authors and sellers, with the city copied onto their products)
- Discussions (categorised forum threads with free-form tags)
- Posts (top-level responses inside a discussion)
- Comments (replies to posts, nested with unlimited depth)
- Products (marketplace listings with bulk discounts and demand counters)

Revision ID: 3c71d2a9e5b4
Revises:
Create Date: 2026-10-16 09:12:44.418203

"""

from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa
from sqlalchemy.dialects import postgresql


# revision identifiers, used by Alembic.
revision: str = "3c71d2a9e5b4"
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def _timestamps() -> list[sa.Column]:
    return [
        sa.Column(
            "created_at",
            sa.TIMESTAMP(timezone=True),
            nullable=False,
            server_default=sa.text("NOW()"),
        ),
        sa.Column(
            "updated_at",
            sa.TIMESTAMP(timezone=True),
            nullable=False,
            server_default=sa.text("NOW()"),
        ),
    ]


def _id_column() -> sa.Column:
    return sa.Column(
        "id",
        sa.UUID(),
        server_default=sa.text("uuid_generate_v4()"),
        nullable=False,
    )


def upgrade() -> None:
    """Upgrade schema."""
    op.execute('CREATE EXTENSION IF NOT EXISTS "uuid-ossp"')

    # Create ENUM types (idempotent)
    op.execute("""
        DO $$ BEGIN
            CREATE TYPE discussion_category AS ENUM
                ('general', 'farming', 'market', 'pricing', 'transport', 'other');
        EXCEPTION
            WHEN duplicate_object THEN null;
        END $$;
    """)

    op.execute("""
        DO $$ BEGIN
            CREATE TYPE seller_type AS ENUM ('vendor', 'farmer');
        EXCEPTION
            WHEN duplicate_object THEN null;
        END $$;
    """)

    # ========================================================================
    # USERS table
    # ========================================================================
    op.create_table(
        "users",
        _id_column(),
        sa.Column("handle", sa.String(255), nullable=False),
        sa.Column("city", sa.String(255), nullable=True),
        *_timestamps(),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index("idx_users_handle", "users", ["handle"])

    # ========================================================================
    # DISCUSSIONS table
    # ========================================================================
    op.create_table(
        "discussions",
        _id_column(),
        sa.Column("title", sa.String(200), nullable=False),
        sa.Column("description", sa.Text(), nullable=False),
        sa.Column(
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
        sa.Column(
            "tags",
            postgresql.ARRAY(sa.String(50)),
            nullable=False,
            server_default="{}",
        ),
        sa.Column("author_id", sa.UUID(), nullable=False),
        sa.Column("author_handle", sa.String(255), nullable=False),
        *_timestamps(),
        sa.ForeignKeyConstraint(["author_id"], ["users.id"], ondelete="CASCADE"),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index(
        "idx_discussions_created_at",
        "discussions",
        [sa.text("created_at DESC")],
    )
    op.create_index("idx_discussions_category", "discussions", ["category"])
    op.create_index("idx_discussions_author_id", "discussions", ["author_id"])

    # ========================================================================
    # POSTS table
    # ========================================================================
    op.create_table(
        "posts",
        _id_column(),
        sa.Column("discussion_id", sa.UUID(), nullable=False),
        sa.Column("content", sa.Text(), nullable=False),
        sa.Column("author_id", sa.UUID(), nullable=False),
        sa.Column("author_handle", sa.String(255), nullable=False),
        sa.Column(
            "created_at",
            sa.TIMESTAMP(timezone=True),
            nullable=False,
            server_default=sa.text("NOW()"),
        ),
        sa.ForeignKeyConstraint(
            ["discussion_id"], ["discussions.id"], ondelete="CASCADE"
        ),
        sa.ForeignKeyConstraint(["author_id"], ["users.id"], ondelete="CASCADE"),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index(
        "idx_posts_discussion_created", "posts", ["discussion_id", "created_at"]
    )
    op.create_index("idx_posts_author_id", "posts", ["author_id"])

    # ========================================================================
    # COMMENTS table (threaded via parent_comment_id)
    # ========================================================================
    op.create_table(
        "comments",
        _id_column(),
        sa.Column("post_id", sa.UUID(), nullable=False),
        sa.Column("parent_comment_id", sa.UUID(), nullable=True),
        sa.Column("author_id", sa.UUID(), nullable=False),
        sa.Column("author_handle", sa.String(255), nullable=False),
        sa.Column("content", sa.Text(), nullable=False),
        sa.Column("depth", sa.Integer(), nullable=False, server_default="0"),
        sa.Column(
            "created_at",
            sa.TIMESTAMP(timezone=True),
            nullable=False,
            server_default=sa.text("NOW()"),
        ),
        sa.ForeignKeyConstraint(["post_id"], ["posts.id"], ondelete="CASCADE"),
        sa.ForeignKeyConstraint(
            ["parent_comment_id"], ["comments.id"], ondelete="CASCADE"
        ),
        sa.ForeignKeyConstraint(["author_id"], ["users.id"], ondelete="CASCADE"),
        sa.PrimaryKeyConstraint("id"),
        sa.CheckConstraint("depth >= 0", name="depth_non_negative"),
    )
    op.create_index(
        "idx_comments_post_created", "comments", ["post_id", "created_at"]
    )
    op.create_index(
        "idx_comments_parent_comment_id", "comments", ["parent_comment_id"]
    )

    # ========================================================================
    # PRODUCTS table
    # ========================================================================
    op.create_table(
        "products",
        _id_column(),
        sa.Column("name", sa.String(200), nullable=False),
        sa.Column("description", sa.Text(), nullable=False),
        sa.Column("price", sa.Float(), nullable=False),
        sa.Column("quantity", sa.Integer(), nullable=False),
        sa.Column(
            "images", postgresql.ARRAY(sa.Text()), nullable=False, server_default="{}"
        ),
        sa.Column("category", sa.String(100), nullable=False),
        sa.Column("seller_id", sa.UUID(), nullable=False),
        sa.Column("seller_name", sa.String(255), nullable=False),
        sa.Column(
            "seller_type",
            postgresql.ENUM("vendor", "farmer", name="seller_type", create_type=False),
            nullable=False,
        ),
        sa.Column(
            "certification_type", sa.String(255), nullable=False, server_default=""
        ),
        sa.Column("minimum_order", sa.Integer(), nullable=False, server_default="1"),
        sa.Column(
            "bulk_discounts",
            postgresql.JSONB(),
            nullable=False,
            server_default=sa.text("'[]'::jsonb"),
        ),
        sa.Column("city", sa.String(255), nullable=True),
        sa.Column("view_count", sa.Integer(), nullable=False, server_default="0"),
        sa.Column("order_count", sa.Integer(), nullable=False, server_default="0"),
        sa.Column("last_order_date", sa.TIMESTAMP(timezone=True), nullable=True),
        *_timestamps(),
        sa.ForeignKeyConstraint(["seller_id"], ["users.id"]),
        sa.PrimaryKeyConstraint("id"),
        sa.CheckConstraint("price >= 0", name="price_non_negative"),
        sa.CheckConstraint("quantity >= 0", name="quantity_non_negative"),
        sa.CheckConstraint("minimum_order >= 1", name="minimum_order_positive"),
    )
    op.create_index("idx_products_seller_id", "products", ["seller_id"])
    op.create_index("idx_products_category", "products", ["category"])
    op.create_index("idx_products_city", "products", ["city"])
    op.execute("""
        CREATE INDEX idx_products_search ON products
        USING gin (to_tsvector('english', name || ' ' || description))
    """)

    # Trigger function to update updated_at timestamp
    op.execute("""
        CREATE OR REPLACE FUNCTION update_updated_at_column()
        RETURNS TRIGGER AS $$
        BEGIN
            NEW.updated_at = NOW();
            RETURN NEW;
        END;
        $$ LANGUAGE plpgsql
    """)

    for table in ("users", "discussions", "products"):
        op.execute(f"""
            CREATE TRIGGER update_{table}_updated_at
            BEFORE UPDATE ON {table}
            FOR EACH ROW EXECUTE FUNCTION update_updated_at_column()
        """)


def downgrade() -> None:
    """Downgrade schema."""
    for table in ("users", "discussions", "products"):
        op.execute(f"DROP TRIGGER IF EXISTS update_{table}_updated_at ON {table}")
    op.execute("DROP FUNCTION IF EXISTS update_updated_at_column()")

    # Drop tables (in reverse order of dependencies)
    op.drop_table("products")
    op.drop_table("comments")
    op.drop_table("posts")
    op.drop_table("discussions")
    op.drop_table("users")

    op.execute("DROP TYPE IF EXISTS seller_type")
    op.execute("DROP TYPE IF EXISTS discussion_category")
