"""Product-count bookkeeping on categories triggered by catalog changes."""

from __future__ import annotations

import logging
from dataclasses import dataclass

from sqlalchemy.ext.asyncio import AsyncSession

from catalog.domain.categories.repository import CategoryRepository
from catalog.infrastructure.database.repositories.category_repository import SqlCategoryRepository

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class CategoryAccountingService:
    repository: CategoryRepository

    @classmethod
    def with_session(cls, session: AsyncSession) -> "CategoryAccountingService":
        return cls(SqlCategoryRepository(session))

    async def increment_product_count(self, category_id: str) -> None:
        await self._adjust(category_id, 1)

    async def decrement_product_count(self, category_id: str) -> None:
        await self._adjust(category_id, -1)

    async def _adjust(self, category_id: str, delta: int) -> None:
        updated = await self.repository.adjust_product_count(category_id, delta)
        if not updated:
            logger.warning("Category %s not found while adjusting product count by %d", category_id, delta)
