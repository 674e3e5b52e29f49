"""Design template management and moderation endpoints."""

from typing import Literal, Optional

from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.ext.asyncio import AsyncSession

from catalog.core.security import Actor, get_catalog_manager, get_current_admin
from catalog.domain.templates import ListQuery, TemplateCreateInput, TemplateError, TemplateFilters, TemplateUpdateInput
from catalog.interfaces.http.deps import get_db_session
from catalog.modules.moderation import ModerationService
from catalog.modules.templates import TemplateCatalogService
from catalog.schemas import (
    DesignTemplateCreate,
    DesignTemplateListResponse,
    DesignTemplateResponse,
    DesignTemplateStatusUpdate,
    DesignTemplateUpdate,
    PageMetaResponse,
    RatingUpdate,
    SideEffectResponse,
    SuccessResponse,
)

from .errors import to_http_error

router = APIRouter()


@router.post(
    "",
    response_model=DesignTemplateResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Create a template",
)
async def create_design_template(
    payload: DesignTemplateCreate,
    actor: Actor = Depends(get_catalog_manager),
    db: AsyncSession = Depends(get_db_session),
):
    service = TemplateCatalogService.with_session(db)
    try:
        template = await service.create(TemplateCreateInput(author_id=actor.id, **payload.model_dump()))
    except TemplateError as exc:
        raise to_http_error(exc) from exc
    await db.commit()
    return DesignTemplateResponse.model_validate(template)


@router.get("/all", response_model=DesignTemplateListResponse, summary="List templates in any status")
async def list_all_design_templates(
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
    template_status: Optional[str] = Query(default=None, alias="status"),
    sort_by: str = Query(default="created_at", alias="sortBy"),
    sort_order: Literal["asc", "desc"] = Query(default="desc", alias="sortOrder"),
    actor: Actor = Depends(get_catalog_manager),
    db: AsyncSession = Depends(get_db_session),
):
    service = TemplateCatalogService.with_session(db)
    result = await service.list_admin(
        TemplateFilters(
            search_term=search_term,
            category_id=category_id,
            platform=platform,
            template_type=template_type,
            access_type=access_type,
            min_price=min_price,
            max_price=max_price,
            min_rating=min_rating,
            status=template_status,
        ),
        ListQuery(page=page, limit=limit, sort_by=sort_by, sort_order=sort_order),
    )
    return DesignTemplateListResponse(
        data=[DesignTemplateResponse.model_validate(template) for template in result.data],
        meta=PageMetaResponse.model_validate(result.meta),
    )


@router.patch("/managed/{template_id}", response_model=DesignTemplateResponse, summary="Update a template")
async def update_design_template(
    template_id: str,
    payload: DesignTemplateUpdate,
    actor: Actor = Depends(get_catalog_manager),
    db: AsyncSession = Depends(get_db_session),
):
    service = TemplateCatalogService.with_session(db)
    try:
        template = await service.update(
            template_id,
            TemplateUpdateInput(**payload.model_dump(exclude_unset=True)),
            actor_id=actor.id,
            is_admin=actor.is_admin,
        )
    except TemplateError as exc:
        raise to_http_error(exc) from exc
    await db.commit()
    return DesignTemplateResponse.model_validate(template)


@router.delete("/managed/{template_id}", response_model=SuccessResponse, summary="Soft-delete a template")
async def delete_design_template(
    template_id: str,
    actor: Actor = Depends(get_catalog_manager),
    db: AsyncSession = Depends(get_db_session),
):
    service = TemplateCatalogService.with_session(db)
    try:
        await service.soft_delete(template_id, actor_id=actor.id, is_admin=actor.is_admin)
    except TemplateError as exc:
        raise to_http_error(exc) from exc
    await db.commit()
    return SuccessResponse(message="Design template deleted successfully")


@router.patch("/{template_id}/status", response_model=DesignTemplateResponse, summary="Approve or reject")
async def moderate_design_template(
    template_id: str,
    payload: DesignTemplateStatusUpdate,
    admin: Actor = Depends(get_current_admin),
    db: AsyncSession = Depends(get_db_session),
):
    service = ModerationService.with_session(db)
    try:
        template = await service.set_status(template_id, payload.status)
    except TemplateError as exc:
        raise to_http_error(exc) from exc
    await db.commit()
    return DesignTemplateResponse.model_validate(template)


@router.post("/{template_id}/sales", response_model=SideEffectResponse, summary="Record a sale")
async def record_design_template_sale(
    template_id: str,
    admin: Actor = Depends(get_current_admin),
    db: AsyncSession = Depends(get_db_session),
):
    service = TemplateCatalogService.with_session(db)
    outcome = await service.increment_sales_count(template_id)
    await db.commit()
    return SideEffectResponse.model_validate(outcome)


@router.put("/{template_id}/rating", response_model=SideEffectResponse, summary="Overwrite rating aggregates")
async def set_design_template_rating(
    template_id: str,
    payload: RatingUpdate,
    admin: Actor = Depends(get_current_admin),
    db: AsyncSession = Depends(get_db_session),
):
    service = TemplateCatalogService.with_session(db)
    try:
        outcome = await service.set_rating(template_id, payload.rating, payload.review_count)
    except TemplateError as exc:
        raise to_http_error(exc) from exc
    await db.commit()
    return SideEffectResponse.model_validate(outcome)
