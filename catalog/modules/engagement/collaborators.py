"""Interfaces of the collaborators the like protocol keeps in sync."""

from __future__ import annotations

from typing import Protocol

from catalog.domain.accounts import AccountProfile
from catalog.domain.notifications import LikeNotification


class WishlistSync(Protocol):
    async def add(self, user_id: str, product_id: str, product_type: str) -> None:
        ...

    async def remove(self, user_id: str, product_id: str) -> None:
        ...


class UserDirectory(Protocol):
    async def get_by_id(self, account_id: str) -> AccountProfile | None:
        ...


class LikeNotifier(Protocol):
    async def create_like_notification(self, like: LikeNotification) -> None:
        ...
