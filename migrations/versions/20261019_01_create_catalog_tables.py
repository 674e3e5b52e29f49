"""create design template catalog tables

Revision ID: 20261019_01
Revises:
Create Date: 2026-10-19 09:00:00.000000
"""

from __future__ import annotations

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision = "20261019_01"
down_revision = None
branch_labels = None
depends_on = None


def upgrade() -> None:
    op.create_table(
        "accounts",
        sa.Column("id", sa.String(length=36), primary_key=True),
        sa.Column("first_name", sa.String(length=100), nullable=False, server_default=""),
        sa.Column("last_name", sa.String(length=100), nullable=False, server_default=""),
        sa.Column("email", sa.String(length=100), nullable=True, unique=True),
        sa.Column("role", sa.String(length=20), nullable=False, server_default="user"),
        sa.Column("created_at", sa.DateTime(timezone=True), server_default=sa.func.now()),
    )

    op.create_table(
        "categories",
        sa.Column("id", sa.String(length=36), primary_key=True),
        sa.Column("name", sa.String(length=100), nullable=False),
        sa.Column("slug", sa.String(length=120), nullable=False),
        sa.Column("type", sa.String(length=30), nullable=False, server_default="design-template"),
        sa.Column("product_count", sa.Integer(), nullable=False, server_default="0"),
        sa.Column("created_at", sa.DateTime(timezone=True), server_default=sa.func.now()),
        sa.Column("updated_at", sa.DateTime(timezone=True), nullable=True),
    )
    op.create_index("ix_categories_slug", "categories", ["slug"], unique=True)

    op.create_table(
        "design_templates",
        sa.Column("id", sa.String(length=36), primary_key=True),
        sa.Column("title", sa.String(length=200), nullable=False),
        sa.Column("slug", sa.String(length=255), nullable=False),
        sa.Column("author_id", sa.String(length=36), nullable=False),
        sa.Column("category_id", sa.String(length=36), nullable=False),
        sa.Column("platform", sa.String(length=50), nullable=False),
        sa.Column("template_type", sa.String(length=50), nullable=False),
        sa.Column("access_type", sa.String(length=10), nullable=False, server_default="paid"),
        sa.Column("price", sa.Float(), nullable=False, server_default="0"),
        sa.Column("offer_price", sa.Float(), nullable=True),
        sa.Column("license_type", sa.String(length=20), nullable=False, server_default="regular"),
        sa.Column("regular_license_price", sa.Float(), nullable=False, server_default="0"),
        sa.Column("extended_license_price", sa.Float(), nullable=True),
        sa.Column("rating", sa.Float(), nullable=False, server_default="0"),
        sa.Column("review_count", sa.Integer(), nullable=False, server_default="0"),
        sa.Column("sales_count", sa.Integer(), nullable=False, server_default="0"),
        sa.Column("view_count", sa.Integer(), nullable=False, server_default="0"),
        sa.Column("like_count", sa.Integer(), nullable=False, server_default="0"),
        sa.Column("version", sa.String(length=50), nullable=False, server_default="1.0.0"),
        sa.Column("features", sa.Text(), nullable=False, server_default="[]"),
        sa.Column("files_included", sa.Text(), nullable=False, server_default="[]"),
        sa.Column("compatibility", sa.Text(), nullable=False, server_default="[]"),
        sa.Column("design_tools", sa.Text(), nullable=False, server_default="[]"),
        sa.Column("description", sa.String(length=1000), nullable=False),
        sa.Column("long_description", sa.Text(), nullable=True),
        sa.Column("images", sa.Text(), nullable=False, server_default="[]"),
        sa.Column("preview_url", sa.String(length=500), nullable=True),
        sa.Column("download_file", sa.String(length=1000), nullable=False),
        sa.Column("documentation_url", sa.String(length=500), nullable=True),
        sa.Column("status", sa.String(length=20), nullable=False, server_default="pending"),
        sa.Column("is_deleted", sa.Boolean(), nullable=False, server_default=sa.false()),
        sa.Column("is_featured", sa.Boolean(), nullable=False, server_default=sa.false()),
        sa.Column("publish_date", sa.DateTime(timezone=True), nullable=True),
        sa.Column("last_update", sa.DateTime(timezone=True), nullable=True),
        sa.Column("created_at", sa.DateTime(timezone=True), server_default=sa.func.now()),
        sa.Column("updated_at", sa.DateTime(timezone=True), nullable=True),
        sa.ForeignKeyConstraint(["author_id"], ["accounts.id"]),
        sa.ForeignKeyConstraint(["category_id"], ["categories.id"]),
        sa.CheckConstraint("price >= 0", name="ck_design_templates_price"),
        sa.CheckConstraint("offer_price IS NULL OR offer_price >= 0", name="ck_design_templates_offer_price"),
        sa.CheckConstraint("regular_license_price >= 0", name="ck_design_templates_regular_license_price"),
        sa.CheckConstraint(
            "extended_license_price IS NULL OR extended_license_price >= 0",
            name="ck_design_templates_extended_license_price",
        ),
        sa.CheckConstraint("rating >= 0 AND rating <= 5", name="ck_design_templates_rating"),
    )
    op.create_index("ix_design_templates_slug", "design_templates", ["slug"], unique=True)
    op.create_index("ix_design_templates_author_id", "design_templates", ["author_id"])
    op.create_index("ix_design_templates_category_id", "design_templates", ["category_id"])
    op.create_index("ix_design_templates_platform", "design_templates", ["platform"])
    op.create_index("ix_design_templates_price", "design_templates", ["price"])
    op.create_index("ix_design_templates_sales_count", "design_templates", ["sales_count"])
    op.create_index("ix_design_templates_created_at", "design_templates", ["created_at"])
    op.create_index("ix_design_templates_status_deleted", "design_templates", ["status", "is_deleted"])

    op.create_table(
        "design_template_likes",
        sa.Column("template_id", sa.String(length=36), primary_key=True),
        sa.Column("user_id", sa.String(length=36), primary_key=True),
        sa.Column("created_at", sa.DateTime(timezone=True), server_default=sa.func.now()),
        sa.ForeignKeyConstraint(["template_id"], ["design_templates.id"], ondelete="CASCADE"),
    )
    op.create_index("ix_design_template_likes_user_id", "design_template_likes", ["user_id"])

    op.create_table(
        "wishlist_items",
        sa.Column("id", sa.String(length=36), primary_key=True),
        sa.Column("user_id", sa.String(length=36), nullable=False),
        sa.Column("product_id", sa.String(length=36), nullable=False),
        sa.Column("product_type", sa.String(length=30), nullable=False),
        sa.Column("added_at", sa.DateTime(timezone=True), server_default=sa.func.now()),
        sa.UniqueConstraint("user_id", "product_id", name="uq_wishlist_items_user_product"),
    )
    op.create_index("ix_wishlist_items_user_id", "wishlist_items", ["user_id"])

    op.create_table(
        "notifications",
        sa.Column("id", sa.String(length=36), primary_key=True),
        sa.Column("type", sa.String(length=30), nullable=False),
        sa.Column("title", sa.String(length=200), nullable=False),
        sa.Column("message", sa.Text(), nullable=False),
        sa.Column("data", sa.Text(), nullable=True),
        sa.Column("recipient_id", sa.String(length=36), nullable=True),
        sa.Column("for_admin", sa.Boolean(), nullable=False, server_default=sa.false()),
        sa.Column("is_read", sa.Boolean(), nullable=False, server_default=sa.false()),
        sa.Column("created_at", sa.DateTime(timezone=True), server_default=sa.func.now()),
    )
    op.create_index("ix_notifications_recipient_id", "notifications", ["recipient_id"])


def downgrade() -> None:
    op.drop_index("ix_notifications_recipient_id", table_name="notifications")
    op.drop_table("notifications")
    op.drop_index("ix_wishlist_items_user_id", table_name="wishlist_items")
    op.drop_table("wishlist_items")
    op.drop_index("ix_design_template_likes_user_id", table_name="design_template_likes")
    op.drop_table("design_template_likes")
    op.drop_index("ix_design_templates_status_deleted", table_name="design_templates")
    op.drop_index("ix_design_templates_created_at", table_name="design_templates")
    op.drop_index("ix_design_templates_sales_count", table_name="design_templates")
    op.drop_index("ix_design_templates_price", table_name="design_templates")
    op.drop_index("ix_design_templates_platform", table_name="design_templates")
    op.drop_index("ix_design_templates_category_id", table_name="design_templates")
    op.drop_index("ix_design_templates_author_id", table_name="design_templates")
    op.drop_index("ix_design_templates_slug", table_name="design_templates")
    op.drop_table("design_templates")
    op.drop_index("ix_categories_slug", table_name="categories")
    op.drop_table("categories")
    op.drop_table("accounts")
