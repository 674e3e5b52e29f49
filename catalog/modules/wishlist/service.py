"""Wishlist membership kept in step with template likes."""

from __future__ import annotations

import logging
from dataclasses import dataclass

from sqlalchemy.ext.asyncio import AsyncSession

from catalog.infrastructure.database.repositories.wishlist_repository import SqlWishlistRepository

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class WishlistService:
    repository: SqlWishlistRepository

    @classmethod
    def with_session(cls, session: AsyncSession) -> "WishlistService":
        return cls(SqlWishlistRepository(session))

    async def add(self, user_id: str, product_id: str, product_type: str) -> None:
        added = await self.repository.add(user_id, product_id, product_type)
        if not added:
            logger.debug("Product %s already in wishlist of %s", product_id, user_id)

    async def remove(self, user_id: str, product_id: str) -> None:
        await self.repository.remove(user_id, product_id)

    async def contains(self, user_id: str, product_id: str) -> bool:
        return await self.repository.contains(user_id, product_id)
