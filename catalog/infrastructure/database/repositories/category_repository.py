"""SQLAlchemy implementation for category bookkeeping."""

from __future__ import annotations

from sqlalchemy import select, update
from sqlalchemy.ext.asyncio import AsyncSession

from catalog.db.models import Category
from catalog.domain.categories.models import CategorySummary


class SqlCategoryRepository:
    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    async def create(self, *, name: str, slug: str, type: str = "design-template") -> CategorySummary:
        category = Category(name=name, slug=slug, type=type, product_count=0)
        self.session.add(category)
        await self.session.flush()
        return self._to_domain(category)

    async def get_by_id(self, category_id: str) -> CategorySummary | None:
        stmt = select(Category).where(Category.id == category_id)
        result = await self.session.execute(stmt.execution_options(populate_existing=True))
        category = result.scalars().first()
        return self._to_domain(category) if category else None

    async def adjust_product_count(self, category_id: str, delta: int) -> bool:
        stmt = (
            update(Category)
            .where(Category.id == category_id)
            .values(product_count=Category.product_count + delta)
            .execution_options(synchronize_session=False)
        )
        async with self.session.begin_nested():
            result = await self.session.execute(stmt)
        return result.rowcount > 0

    @staticmethod
    def _to_domain(model: Category) -> CategorySummary:
        return CategorySummary(
            id=model.id,
            name=model.name,
            slug=model.slug,
            type=model.type,
            product_count=model.product_count or 0,
        )
