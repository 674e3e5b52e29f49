"""Public design template endpoints."""

from typing import Literal, Optional

from fastapi import APIRouter, Depends, Query
from sqlalchemy.ext.asyncio import AsyncSession

from catalog.core.security import Actor, get_current_actor, get_optional_actor
from catalog.domain.templates import DesignTemplate, ListQuery, TemplateError, TemplateFilters
from catalog.interfaces.http.deps import get_db_session
from catalog.modules.downloads import DownloadService
from catalog.modules.engagement import EngagementService
from catalog.modules.templates import TemplateCatalogService
from catalog.schemas import (
    DesignTemplateDetail,
    DesignTemplateListResponse,
    DesignTemplateResponse,
    DownloadLinkResponse,
    LikeToggleResponse,
    PageMetaResponse,
)

from .errors import to_http_error

router = APIRouter()


def _to_schema(template: DesignTemplate) -> DesignTemplateResponse:
    return DesignTemplateResponse.model_validate(template)


def _to_detail(template: DesignTemplate, actor: Optional[Actor]) -> DesignTemplateDetail:
    detail = DesignTemplateDetail.model_validate(template)
    detail.is_liked = template.is_liked_by(actor.id if actor else None)
    return detail


@router.get("", response_model=DesignTemplateListResponse, summary="List approved templates")
async def list_design_templates(
    page: Optional[int] = Query(default=None, ge=1),
    limit: Optional[int] = Query(default=None, ge=1),
    search_term: Optional[str] = Query(default=None, alias="searchTerm"),
    category_id: Optional[str] = Query(default=None, alias="categoryId"),
    platform: Optional[str] = None,
    template_type: Optional[str] = Query(default=None, alias="templateType"),
    access_type: Optional[str] = Query(default=None, alias="accessType"),
    min_price: Optional[float] = Query(default=None, alias="minPrice", ge=0),
    max_price: Optional[float] = Query(default=None, alias="maxPrice", ge=0),
    min_rating: Optional[float] = Query(default=None, alias="minRating", ge=0, le=5),
    sort_by: str = Query(default="created_at", alias="sortBy"),
    sort_order: Literal["asc", "desc"] = Query(default="desc", alias="sortOrder"),
    db: AsyncSession = Depends(get_db_session),
):
    service = TemplateCatalogService.with_session(db)
    result = await service.list_public(
        TemplateFilters(
            search_term=search_term,
            category_id=category_id,
            platform=platform,
            template_type=template_type,
            access_type=access_type,
            min_price=min_price,
            max_price=max_price,
            min_rating=min_rating,
        ),
        ListQuery(page=page, limit=limit, sort_by=sort_by, sort_order=sort_order),
    )
    return DesignTemplateListResponse(
        data=[_to_schema(template) for template in result.data],
        meta=PageMetaResponse.model_validate(result.meta),
    )


@router.get("/featured", response_model=list[DesignTemplateResponse], summary="Featured templates")
async def list_featured_design_templates(
    limit: Optional[int] = Query(default=None, ge=1),
    db: AsyncSession = Depends(get_db_session),
):
    service = TemplateCatalogService.with_session(db)
    return [_to_schema(template) for template in await service.list_featured(limit)]


@router.get("/slug/{slug}", response_model=DesignTemplateDetail, summary="Template by slug")
async def get_design_template_by_slug(
    slug: str,
    actor: Optional[Actor] = Depends(get_optional_actor),
    db: AsyncSession = Depends(get_db_session),
):
    service = TemplateCatalogService.with_session(db)
    try:
        template = await service.get_by_slug(slug)
    except TemplateError as exc:
        raise to_http_error(exc) from exc
    return _to_detail(template, actor)


@router.get("/{template_id}", response_model=DesignTemplateDetail, summary="Template by id")
async def get_design_template(
    template_id: str,
    actor: Optional[Actor] = Depends(get_optional_actor),
    db: AsyncSession = Depends(get_db_session),
):
    service = TemplateCatalogService.with_session(db)
    try:
        template = await service.get_by_id(template_id, include_deleted=bool(actor and actor.is_admin))
    except TemplateError as exc:
        raise to_http_error(exc) from exc

    outcome = await service.increment_view_count(template_id)
    await db.commit()
    if outcome.ok:
        template.view_count += 1
    return _to_detail(template, actor)


@router.post("/{template_id}/like", response_model=LikeToggleResponse, summary="Like or unlike a template")
async def toggle_design_template_like(
    template_id: str,
    actor: Actor = Depends(get_current_actor),
    db: AsyncSession = Depends(get_db_session),
):
    service = EngagementService.with_session(db)
    try:
        result = await service.toggle_like(template_id, actor.id)
    except TemplateError as exc:
        raise to_http_error(exc) from exc
    await db.commit()
    return LikeToggleResponse.model_validate(result)


@router.get("/{template_id}/download", response_model=DownloadLinkResponse, summary="Issue a download link")
async def download_design_template(
    template_id: str,
    actor: Actor = Depends(get_current_actor),
    db: AsyncSession = Depends(get_db_session),
):
    service = DownloadService.with_session(db)
    try:
        link = await service.issue_download_link(template_id)
    except TemplateError as exc:
        raise to_http_error(exc) from exc
    await db.commit()
    return DownloadLinkResponse(download_url=link.url, signed=link.signed, expires_at=link.expires_at)
