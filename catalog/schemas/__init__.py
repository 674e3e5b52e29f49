"""Pydantic schemas used across the HTTP layer."""
from datetime import datetime
from typing import Literal, Optional

from pydantic import BaseModel, ConfigDict, Field

from catalog.domain.templates import AccessType, DesignPlatform, LicenseType, TemplateType


class TokenData(BaseModel):
    account_id: str
    role: str


class SuccessResponse(BaseModel):
    success: bool = True
    message: str


class CategoryRefResponse(BaseModel):
    id: str
    name: Optional[str] = None
    slug: Optional[str] = None

    model_config = ConfigDict(from_attributes=True)


class DesignTemplateResponse(BaseModel):
    id: str
    title: str
    slug: str
    author_id: str
    category_id: str
    category: Optional[CategoryRefResponse] = None
    platform: str
    template_type: str
    access_type: str
    price: float
    offer_price: Optional[float] = None
    license_type: str
    regular_license_price: float
    extended_license_price: Optional[float] = None
    rating: float
    review_count: int
    sales_count: int
    view_count: int
    like_count: int
    version: str
    features: list[str] = Field(default_factory=list)
    files_included: list[str] = Field(default_factory=list)
    compatibility: list[str] = Field(default_factory=list)
    design_tools: list[str] = Field(default_factory=list)
    description: str
    long_description: Optional[str] = None
    images: list[str] = Field(default_factory=list)
    preview_url: Optional[str] = None
    documentation_url: Optional[str] = None
    status: str
    is_deleted: bool
    is_featured: bool
    publish_date: Optional[datetime] = None
    last_update: Optional[datetime] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    model_config = ConfigDict(from_attributes=True)


class DesignTemplateDetail(DesignTemplateResponse):
    is_liked: bool = False


class PageMetaResponse(BaseModel):
    page: int
    limit: int
    total: int
    total_pages: int

    model_config = ConfigDict(from_attributes=True)


class DesignTemplateListResponse(BaseModel):
    data: list[DesignTemplateResponse]
    meta: PageMetaResponse


class DesignTemplateCreate(BaseModel):
    title: str = Field(..., min_length=1, max_length=200)
    slug: Optional[str] = None
    platform: DesignPlatform
    category_id: str
    template_type: TemplateType
    access_type: AccessType = AccessType.PAID
    price: float = Field(..., ge=0)
    offer_price: Optional[float] = Field(default=None, ge=0)
    license_type: LicenseType = LicenseType.REGULAR
    regular_license_price: float = Field(..., ge=0)
    extended_license_price: Optional[float] = Field(default=None, ge=0)
    version: str = "1.0.0"
    features: list[str] = Field(default_factory=list)
    files_included: list[str] = Field(default_factory=list)
    compatibility: list[str] = Field(default_factory=list)
    design_tools: list[str] = Field(default_factory=list)
    description: str = Field(..., max_length=1000)
    long_description: Optional[str] = None
    images: list[str] = Field(default_factory=list)
    preview_url: Optional[str] = None
    download_file: str = Field(..., min_length=1)
    documentation_url: Optional[str] = None
    status: Literal["draft", "pending"] = "pending"
    is_featured: bool = False


class DesignTemplateUpdate(BaseModel):
    title: Optional[str] = Field(default=None, min_length=1, max_length=200)
    slug: Optional[str] = None
    platform: Optional[DesignPlatform] = None
    category_id: Optional[str] = None
    template_type: Optional[TemplateType] = None
    access_type: Optional[AccessType] = None
    price: Optional[float] = Field(default=None, ge=0)
    offer_price: Optional[float] = Field(default=None, ge=0)
    license_type: Optional[LicenseType] = None
    regular_license_price: Optional[float] = Field(default=None, ge=0)
    extended_license_price: Optional[float] = Field(default=None, ge=0)
    version: Optional[str] = None
    features: Optional[list[str]] = None
    files_included: Optional[list[str]] = None
    compatibility: Optional[list[str]] = None
    design_tools: Optional[list[str]] = None
    description: Optional[str] = Field(default=None, max_length=1000)
    long_description: Optional[str] = None
    images: Optional[list[str]] = None
    preview_url: Optional[str] = None
    download_file: Optional[str] = None
    documentation_url: Optional[str] = None
    status: Optional[Literal["draft", "pending"]] = None
    is_featured: Optional[bool] = None


class DesignTemplateStatusUpdate(BaseModel):
    status: Literal["approved", "rejected"]


class RatingUpdate(BaseModel):
    rating: float = Field(..., ge=0, le=5)
    review_count: int = Field(..., ge=0)


class SideEffectResponse(BaseModel):
    name: str
    ok: bool
    error: Optional[str] = None

    model_config = ConfigDict(from_attributes=True)


class LikeToggleResponse(BaseModel):
    liked: bool
    like_count: int
    side_effects: list[SideEffectResponse] = Field(default_factory=list)

    model_config = ConfigDict(from_attributes=True)


class DownloadLinkResponse(BaseModel):
    download_url: str
    signed: bool
    expires_at: Optional[datetime] = None
