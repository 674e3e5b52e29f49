"""Catalog store use cases for design templates."""

from __future__ import annotations

import logging
import re
import secrets
import time
from dataclasses import asdict, dataclass
from enum import Enum
from typing import Any, Optional

from sqlalchemy.ext.asyncio import AsyncSession

from catalog.core.config import PaginationSettings, get_settings
from catalog.core.side_effects import SideEffectOutcome, run_side_effect
from catalog.db.models import utcnow
from catalog.domain.templates import (
    AUTHORING_STATUSES,
    CatalogScope,
    DesignTemplate,
    ListQuery,
    PageMeta,
    TemplateCreateInput,
    TemplateFilters,
    TemplateNotFoundError,
    TemplatePage,
    TemplatePermissionError,
    TemplateRepository,
    TemplateSlugConflictError,
    TemplateUpdateInput,
    TemplateValidationError,
)
from catalog.infrastructure.database.repositories.template_repository import SqlTemplateRepository
from catalog.modules.categories import CategoryAccountingService

logger = logging.getLogger(__name__)

MONEY_FIELDS = ("price", "offer_price", "regular_license_price", "extended_license_price")
REQUIRED_FIELDS = {
    "title",
    "slug",
    "category_id",
    "platform",
    "template_type",
    "access_type",
    "price",
    "license_type",
    "regular_license_price",
    "version",
    "description",
    "download_file",
    "status",
    "is_featured",
}
MAX_RATING = 5

_NON_ALNUM_RUN = re.compile(r"[^a-z0-9]+")


def slugify(title: str) -> str:
    return _NON_ALNUM_RUN.sub("-", title.lower()).strip("-")


def build_unique_slug(title: str) -> str:
    """Slug from the title plus a creation-time token, unique without a retry loop."""
    token = f"{int(time.time() * 1000)}{secrets.token_hex(2)}"
    base = slugify(title)
    return f"{base}-{token}" if base else token


@dataclass(slots=True)
class TemplateCatalogService:
    repository: TemplateRepository
    categories: CategoryAccountingService
    pagination: PaginationSettings

    @classmethod
    def with_session(
        cls,
        session: AsyncSession,
        pagination: Optional[PaginationSettings] = None,
    ) -> "TemplateCatalogService":
        return cls(
            SqlTemplateRepository(session),
            CategoryAccountingService.with_session(session),
            pagination or get_settings().pagination,
        )

    async def create(self, data: TemplateCreateInput) -> DesignTemplate:
        values = {key: _plain(value) for key, value in asdict(data).items()}
        _check_money(values)
        _check_authoring_status(values["status"])

        explicit_slug = (data.slug or "").strip().lower()
        if explicit_slug:
            if await self.repository.slug_exists(explicit_slug):
                raise TemplateSlugConflictError("Design template with this slug already exists")
            values["slug"] = explicit_slug
        else:
            values["slug"] = build_unique_slug(data.title)

        now = utcnow()
        values["publish_date"] = now
        values["last_update"] = now

        template = await self.repository.create(values)
        logger.info("Design template %s created with slug %s", template.id, template.slug)

        await run_side_effect(
            "category.increment_product_count",
            self.categories.increment_product_count,
            template.category_id,
        )
        return template

    async def get_by_id(self, template_id: str, *, include_deleted: bool = True) -> DesignTemplate:
        template = await self.repository.get_by_id(template_id, include_deleted=include_deleted)
        if template is None:
            raise TemplateNotFoundError("Design template not found")
        return template

    async def get_by_slug(self, slug: str) -> DesignTemplate:
        template = await self.repository.get_public_by_slug(slug)
        if template is None:
            raise TemplateNotFoundError("Design template not found")
        return template

    async def list_public(self, filters: TemplateFilters, query: ListQuery) -> TemplatePage:
        return await self._list(filters, query, CatalogScope.PUBLIC)

    async def list_admin(self, filters: TemplateFilters, query: ListQuery) -> TemplatePage:
        return await self._list(filters, query, CatalogScope.ADMIN)

    async def list_featured(self, limit: Optional[int] = None) -> list[DesignTemplate]:
        limit = _clamp(limit or self.pagination.featured_limit, 1, self.pagination.max_limit)
        return list(await self.repository.list_featured(limit))

    async def update(
        self,
        template_id: str,
        data: TemplateUpdateInput,
        actor_id: str,
        is_admin: bool,
    ) -> DesignTemplate:
        template = await self._get_active(template_id)
        _ensure_can_manage(template, actor_id, is_admin, "update")

        changes = {
            key: _plain(value)
            for key, value in data.changes().items()
            if value is not None or key not in REQUIRED_FIELDS
        }
        _check_money(changes)
        if "status" in changes:
            _check_authoring_status(changes["status"])

        if "slug" in changes:
            slug = str(changes["slug"]).strip().lower()
            if not slug:
                changes.pop("slug")
            elif await self.repository.slug_exists(slug, exclude_id=template_id):
                raise TemplateSlugConflictError("Design template with this slug already exists")
            else:
                changes["slug"] = slug

        changes["last_update"] = utcnow()
        updated = await self.repository.update_fields(template_id, changes)
        if updated is None:
            raise TemplateNotFoundError("Design template not found")
        return updated

    async def soft_delete(self, template_id: str, actor_id: str, is_admin: bool) -> None:
        template = await self._get_active(template_id)
        _ensure_can_manage(template, actor_id, is_admin, "delete")

        await self.repository.mark_deleted(template_id)
        logger.info("Design template %s soft-deleted by %s", template_id, actor_id)

        await run_side_effect(
            "category.decrement_product_count",
            self.categories.decrement_product_count,
            template.category_id,
        )

    async def increment_view_count(self, template_id: str) -> SideEffectOutcome:
        return await run_side_effect(
            "templates.increment_view_count",
            self.repository.increment_counter,
            template_id,
            "view_count",
        )

    async def increment_sales_count(self, template_id: str) -> SideEffectOutcome:
        return await run_side_effect(
            "templates.increment_sales_count",
            self.repository.increment_counter,
            template_id,
            "sales_count",
        )

    async def set_rating(self, template_id: str, rating: float, review_count: int) -> SideEffectOutcome:
        if not 0 <= rating <= MAX_RATING:
            raise TemplateValidationError(f"Rating must be between 0 and {MAX_RATING}")
        if review_count < 0:
            raise TemplateValidationError("Review count cannot be negative")
        return await run_side_effect(
            "templates.set_rating",
            self.repository.set_rating,
            template_id,
            rating,
            review_count,
        )

    async def _list(self, filters: TemplateFilters, query: ListQuery, scope: CatalogScope) -> TemplatePage:
        page = max(1, query.page or self.pagination.default_page)
        limit = _clamp(query.limit or self.pagination.default_limit, 1, self.pagination.max_limit)
        items, total = await self.repository.list_page(
            filters,
            scope=scope,
            sort_by=query.sort_by,
            descending=query.sort_order != "asc",
            offset=(page - 1) * limit,
            limit=limit,
        )
        return TemplatePage(data=list(items), meta=PageMeta.build(page, limit, total))

    async def _get_active(self, template_id: str) -> DesignTemplate:
        template = await self.repository.get_by_id(template_id, include_deleted=False)
        if template is None:
            raise TemplateNotFoundError("Design template not found")
        return template


def _ensure_can_manage(template: DesignTemplate, actor_id: str, is_admin: bool, action: str) -> None:
    if not is_admin and not template.is_owned_by(actor_id):
        raise TemplatePermissionError(f"You can only {action} your own templates")


def _check_money(values: dict[str, Any]) -> None:
    for name in MONEY_FIELDS:
        value = values.get(name)
        if value is not None and value < 0:
            raise TemplateValidationError(f"{name} cannot be negative")


def _check_authoring_status(status: str) -> None:
    allowed = {item.value for item in AUTHORING_STATUSES}
    if status not in allowed:
        raise TemplateValidationError(
            f"Status must be one of {sorted(allowed)}; approval and rejection go through moderation"
        )


def _plain(value: Any) -> Any:
    return value.value if isinstance(value, Enum) else value


def _clamp(value: int, lower: int, upper: int) -> int:
    return max(lower, min(value, upper))
