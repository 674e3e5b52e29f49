"""SQLAlchemy ORM models."""
import uuid
from datetime import datetime, timezone

from sqlalchemy import (
    Boolean,
    CheckConstraint,
    Column,
    DateTime,
    Float,
    ForeignKey,
    Index,
    Integer,
    String,
    Text,
    UniqueConstraint,
)
from sqlalchemy.orm import relationship

from catalog.infrastructure.database.base import Base


def generate_uuid() -> str:
    return str(uuid.uuid4())


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


class Account(Base):
    __tablename__ = "accounts"

    id = Column(String(36), primary_key=True, default=generate_uuid)
    first_name = Column(String(100), nullable=False, default="")
    last_name = Column(String(100), nullable=False, default="")
    email = Column(String(100), unique=True)
    role = Column(String(20), nullable=False, default="user")
    created_at = Column(DateTime(timezone=True), default=utcnow)


class Category(Base):
    __tablename__ = "categories"

    id = Column(String(36), primary_key=True, default=generate_uuid)
    name = Column(String(100), nullable=False)
    slug = Column(String(120), unique=True, nullable=False, index=True)
    type = Column(String(30), nullable=False, default="design-template")
    product_count = Column(Integer, nullable=False, default=0)
    created_at = Column(DateTime(timezone=True), default=utcnow)
    updated_at = Column(DateTime(timezone=True), onupdate=utcnow)


class DesignTemplate(Base):
    __tablename__ = "design_templates"
    __table_args__ = (
        CheckConstraint("price >= 0", name="ck_design_templates_price"),
        CheckConstraint("offer_price IS NULL OR offer_price >= 0", name="ck_design_templates_offer_price"),
        CheckConstraint("regular_license_price >= 0", name="ck_design_templates_regular_license_price"),
        CheckConstraint(
            "extended_license_price IS NULL OR extended_license_price >= 0",
            name="ck_design_templates_extended_license_price",
        ),
        CheckConstraint("rating >= 0 AND rating <= 5", name="ck_design_templates_rating"),
        Index("ix_design_templates_status_deleted", "status", "is_deleted"),
    )

    id = Column(String(36), primary_key=True, default=generate_uuid)
    title = Column(String(200), nullable=False)
    slug = Column(String(255), unique=True, nullable=False, index=True)
    author_id = Column(String(36), ForeignKey("accounts.id"), nullable=False, index=True)
    category_id = Column(String(36), ForeignKey("categories.id"), nullable=False, index=True)
    platform = Column(String(50), nullable=False, index=True)
    template_type = Column(String(50), nullable=False)
    access_type = Column(String(10), nullable=False, default="paid")

    price = Column(Float, nullable=False, default=0, index=True)
    offer_price = Column(Float)
    license_type = Column(String(20), nullable=False, default="regular")
    regular_license_price = Column(Float, nullable=False, default=0)
    extended_license_price = Column(Float)

    rating = Column(Float, nullable=False, default=0)
    review_count = Column(Integer, nullable=False, default=0)
    sales_count = Column(Integer, nullable=False, default=0, index=True)
    view_count = Column(Integer, nullable=False, default=0)
    like_count = Column(Integer, nullable=False, default=0)

    version = Column(String(50), nullable=False, default="1.0.0")
    features = Column(Text, nullable=False, default="[]")
    files_included = Column(Text, nullable=False, default="[]")
    compatibility = Column(Text, nullable=False, default="[]")
    design_tools = Column(Text, nullable=False, default="[]")
    description = Column(String(1000), nullable=False)
    long_description = Column(Text)

    images = Column(Text, nullable=False, default="[]")
    preview_url = Column(String(500))
    download_file = Column(String(1000), nullable=False)
    documentation_url = Column(String(500))

    status = Column(String(20), nullable=False, default="pending")
    is_deleted = Column(Boolean, nullable=False, default=False)
    is_featured = Column(Boolean, nullable=False, default=False)

    publish_date = Column(DateTime(timezone=True))
    last_update = Column(DateTime(timezone=True), default=utcnow)
    created_at = Column(DateTime(timezone=True), default=utcnow, index=True)
    updated_at = Column(DateTime(timezone=True), onupdate=utcnow)

    category = relationship("Category", lazy="joined")


class DesignTemplateLike(Base):
    """Membership row of a template's ``likedBy`` set."""

    __tablename__ = "design_template_likes"

    template_id = Column(
        String(36), ForeignKey("design_templates.id", ondelete="CASCADE"), primary_key=True
    )
    user_id = Column(String(36), primary_key=True, index=True)
    created_at = Column(DateTime(timezone=True), default=utcnow)


class WishlistItem(Base):
    __tablename__ = "wishlist_items"
    __table_args__ = (UniqueConstraint("user_id", "product_id", name="uq_wishlist_items_user_product"),)

    id = Column(String(36), primary_key=True, default=generate_uuid)
    user_id = Column(String(36), nullable=False, index=True)
    product_id = Column(String(36), nullable=False)
    product_type = Column(String(30), nullable=False)
    added_at = Column(DateTime(timezone=True), default=utcnow)


class Notification(Base):
    __tablename__ = "notifications"

    id = Column(String(36), primary_key=True, default=generate_uuid)
    type = Column(String(30), nullable=False)
    title = Column(String(200), nullable=False)
    message = Column(Text, nullable=False)
    data = Column(Text)
    recipient_id = Column(String(36), index=True)
    for_admin = Column(Boolean, nullable=False, default=False)
    is_read = Column(Boolean, nullable=False, default=False)
    created_at = Column(DateTime(timezone=True), default=utcnow)
