"""SQLAlchemy implementation for wishlist membership."""

from __future__ import annotations

from sqlalchemy import delete, select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from catalog.db.models import WishlistItem


class SqlWishlistRepository:
    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    async def contains(self, user_id: str, product_id: str) -> bool:
        stmt = select(WishlistItem.id).where(
            WishlistItem.user_id == user_id,
            WishlistItem.product_id == product_id,
        )
        result = await self.session.execute(stmt.limit(1))
        return result.first() is not None

    async def add(self, user_id: str, product_id: str, product_type: str) -> bool:
        if await self.contains(user_id, product_id):
            return False
        try:
            async with self.session.begin_nested():
                self.session.add(
                    WishlistItem(user_id=user_id, product_id=product_id, product_type=product_type)
                )
        except IntegrityError:
            return False
        return True

    async def remove(self, user_id: str, product_id: str) -> bool:
        stmt = delete(WishlistItem).where(
            WishlistItem.user_id == user_id,
            WishlistItem.product_id == product_id,
        )
        async with self.session.begin_nested():
            result = await self.session.execute(stmt)
        return result.rowcount > 0
