"""Notification creation for engagement events."""

from __future__ import annotations

from dataclasses import dataclass

from sqlalchemy.ext.asyncio import AsyncSession

from catalog.domain.notifications.models import LikeNotification
from catalog.infrastructure.database.repositories.notification_repository import SqlNotificationRepository

LIKE_NOTIFICATION_LINK = "/dashboard/admin/favorites-ratings"


@dataclass(slots=True)
class NotificationService:
    repository: SqlNotificationRepository

    @classmethod
    def with_session(cls, session: AsyncSession) -> "NotificationService":
        return cls(SqlNotificationRepository(session))

    async def create_like_notification(self, like: LikeNotification) -> None:
        await self.repository.create(
            type="like",
            title="New Like!",
            message=f'{like.user_name} liked "{like.product_name}"',
            data={
                "userId": like.user_id,
                "productId": like.product_id,
                "productType": like.product_type,
                "link": LIKE_NOTIFICATION_LINK,
            },
            recipient_id=like.recipient_id,
            for_admin=True,
        )
