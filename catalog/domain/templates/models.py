"""Domain models for design templates."""

from __future__ import annotations

import math
from dataclasses import dataclass, field, fields
from datetime import datetime
from enum import Enum
from typing import Any, Literal, Optional

PRODUCT_TYPE = "design-template"


class TemplateStatus(str, Enum):
    DRAFT = "draft"
    PENDING = "pending"
    APPROVED = "approved"
    REJECTED = "rejected"


# statuses an author may set; approved/rejected belong to moderation
AUTHORING_STATUSES = frozenset({TemplateStatus.DRAFT, TemplateStatus.PENDING})


class AccessType(str, Enum):
    FREE = "free"
    PAID = "paid"


class LicenseType(str, Enum):
    REGULAR = "regular"
    EXTENDED = "extended"


class DesignPlatform(str, Enum):
    FIGMA = "Figma"
    PHOTOSHOP = "Adobe Photoshop"
    ILLUSTRATOR = "Adobe Illustrator"
    XD = "Adobe XD"
    SKETCH = "Sketch"
    CANVA = "Canva"
    INDESIGN = "Adobe InDesign"
    CORELDRAW = "CorelDRAW"
    AFFINITY_DESIGNER = "Affinity Designer"
    GIMP = "GIMP"
    PROCREATE = "Procreate"
    BLENDER = "Blender"
    CINEMA_4D = "Cinema 4D"
    AFTER_EFFECTS = "After Effects"
    PREMIERE_PRO = "Premiere Pro"
    OTHER = "Other"


class TemplateType(str, Enum):
    UI_KIT = "UI Kit"
    WEBSITE_TEMPLATE = "Website Template"
    LANDING_PAGE = "Landing Page"
    MOBILE_APP_DESIGN = "Mobile App Design"
    SOCIAL_MEDIA_GRAPHIC = "Social Media Graphic"
    PRESENTATION = "Presentation"
    LOGO = "Logo"
    VECTOR_GRAPHIC = "Vector Graphic"
    ILLUSTRATION = "Illustration"
    PRINT_TEMPLATE = "Print Template"
    EMAIL_TEMPLATE = "Email Template"
    ICON_SET = "Icon Set"
    FONT = "Font"
    MOCKUP = "Mockup"
    BUSINESS_CARD = "Business Card"
    FLYER = "Flyer"
    OTHER = "Other"


class CatalogScope(str, Enum):
    """Which records a listing may see."""

    PUBLIC = "public"
    ADMIN = "admin"


@dataclass(slots=True)
class CategoryRef:
    id: str
    name: Optional[str] = None
    slug: Optional[str] = None


@dataclass(slots=True)
class DesignTemplate:
    id: str
    title: str
    slug: str
    author_id: str
    category_id: str
    category: Optional[CategoryRef]
    platform: str
    template_type: str
    access_type: str
    price: float
    offer_price: Optional[float]
    license_type: str
    regular_license_price: float
    extended_license_price: Optional[float]
    rating: float
    review_count: int
    sales_count: int
    view_count: int
    like_count: int
    version: str
    features: list[str]
    files_included: list[str]
    compatibility: list[str]
    design_tools: list[str]
    description: str
    long_description: Optional[str]
    images: list[str]
    preview_url: Optional[str]
    download_file: str
    documentation_url: Optional[str]
    status: str
    is_deleted: bool
    is_featured: bool
    publish_date: Optional[datetime]
    last_update: Optional[datetime]
    created_at: Optional[datetime]
    updated_at: Optional[datetime]
    liked_by: frozenset[str] = frozenset()

    def is_liked_by(self, user_id: Optional[str]) -> bool:
        return bool(user_id) and user_id in self.liked_by

    def is_owned_by(self, user_id: Optional[str]) -> bool:
        return bool(user_id) and self.author_id == user_id


@dataclass(slots=True)
class TemplateCreateInput:
    title: str
    author_id: str
    category_id: str
    platform: str
    template_type: str
    price: float
    regular_license_price: float
    description: str
    download_file: str
    slug: Optional[str] = None
    access_type: str = AccessType.PAID.value
    offer_price: Optional[float] = None
    license_type: str = LicenseType.REGULAR.value
    extended_license_price: Optional[float] = None
    version: str = "1.0.0"
    features: list[str] = field(default_factory=list)
    files_included: list[str] = field(default_factory=list)
    compatibility: list[str] = field(default_factory=list)
    design_tools: list[str] = field(default_factory=list)
    long_description: Optional[str] = None
    images: list[str] = field(default_factory=list)
    preview_url: Optional[str] = None
    documentation_url: Optional[str] = None
    status: str = TemplateStatus.PENDING.value
    is_featured: bool = False


# Sentinel used to differentiate between "not provided" and explicit None.
UNSET = object()


@dataclass(slots=True)
class TemplateUpdateInput:
    title: Optional[str] | object = UNSET
    slug: Optional[str] | object = UNSET
    category_id: Optional[str] | object = UNSET
    platform: Optional[str] | object = UNSET
    template_type: Optional[str] | object = UNSET
    access_type: Optional[str] | object = UNSET
    price: Optional[float] | object = UNSET
    offer_price: Optional[float] | object = UNSET
    license_type: Optional[str] | object = UNSET
    regular_license_price: Optional[float] | object = UNSET
    extended_license_price: Optional[float] | object = UNSET
    version: Optional[str] | object = UNSET
    features: Optional[list[str]] | object = UNSET
    files_included: Optional[list[str]] | object = UNSET
    compatibility: Optional[list[str]] | object = UNSET
    design_tools: Optional[list[str]] | object = UNSET
    description: Optional[str] | object = UNSET
    long_description: Optional[str] | object = UNSET
    images: Optional[list[str]] | object = UNSET
    preview_url: Optional[str] | object = UNSET
    download_file: Optional[str] | object = UNSET
    documentation_url: Optional[str] | object = UNSET
    status: Optional[str] | object = UNSET
    is_featured: Optional[bool] | object = UNSET

    def changes(self) -> dict[str, Any]:
        """Return only the fields the caller actually supplied."""
        return {
            item.name: getattr(self, item.name)
            for item in fields(self)
            if getattr(self, item.name) is not UNSET
        }


@dataclass(slots=True)
class TemplateFilters:
    search_term: Optional[str] = None
    category_id: Optional[str] = None
    platform: Optional[str] = None
    template_type: Optional[str] = None
    access_type: Optional[str] = None
    min_price: Optional[float] = None
    max_price: Optional[float] = None
    min_rating: Optional[float] = None
    status: Optional[str] = None


@dataclass(slots=True)
class ListQuery:
    page: Optional[int] = None
    limit: Optional[int] = None
    sort_by: str = "created_at"
    sort_order: Literal["asc", "desc"] = "desc"


@dataclass(slots=True)
class PageMeta:
    page: int
    limit: int
    total: int
    total_pages: int

    @classmethod
    def build(cls, page: int, limit: int, total: int) -> "PageMeta":
        return cls(page=page, limit=limit, total=total, total_pages=math.ceil(total / limit))


@dataclass(slots=True)
class TemplatePage:
    data: list[DesignTemplate]
    meta: PageMeta
