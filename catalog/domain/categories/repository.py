"""Repository protocol for category bookkeeping."""

from __future__ import annotations

from typing import Protocol

from .models import CategorySummary


class CategoryRepository(Protocol):
    async def get_by_id(self, category_id: str) -> CategorySummary | None:
        ...

    async def adjust_product_count(self, category_id: str, delta: int) -> bool:
        ...
