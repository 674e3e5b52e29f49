"""Repository protocol for design template persistence."""

from __future__ import annotations

from datetime import datetime
from typing import Any, Protocol, Sequence

from .models import CatalogScope, DesignTemplate, TemplateFilters


class TemplateRepository(Protocol):
    async def create(self, values: dict[str, Any]) -> DesignTemplate:
        ...

    async def get_by_id(self, template_id: str, *, include_deleted: bool = True) -> DesignTemplate | None:
        ...

    async def get_public_by_slug(self, slug: str) -> DesignTemplate | None:
        ...

    async def slug_exists(self, slug: str, *, exclude_id: str | None = None) -> bool:
        ...

    async def list_page(
        self,
        filters: TemplateFilters,
        *,
        scope: CatalogScope,
        sort_by: str,
        descending: bool,
        offset: int,
        limit: int,
    ) -> tuple[Sequence[DesignTemplate], int]:
        ...

    async def list_featured(self, limit: int) -> Sequence[DesignTemplate]:
        ...

    async def update_fields(self, template_id: str, values: dict[str, Any]) -> DesignTemplate | None:
        ...

    async def mark_deleted(self, template_id: str) -> None:
        ...

    async def set_status(
        self,
        template_id: str,
        status: str,
        *,
        publish_date: datetime | None,
    ) -> DesignTemplate | None:
        ...

    async def increment_counter(self, template_id: str, counter: str, amount: int = 1) -> None:
        ...

    async def set_rating(self, template_id: str, rating: float, review_count: int) -> None:
        ...

    async def has_like(self, template_id: str, user_id: str) -> bool:
        ...

    async def add_like(self, template_id: str, user_id: str) -> int:
        ...

    async def remove_like(self, template_id: str, user_id: str) -> int:
        ...
