"""SQLAlchemy implementation for notification persistence."""

from __future__ import annotations

import json
from typing import Any

from sqlalchemy.ext.asyncio import AsyncSession

from catalog.db.models import Notification


class SqlNotificationRepository:
    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    async def create(
        self,
        *,
        type: str,
        title: str,
        message: str,
        data: dict[str, Any],
        recipient_id: str | None,
        for_admin: bool,
    ) -> Notification:
        notification = Notification(
            type=type,
            title=title,
            message=message,
            data=json.dumps(data, ensure_ascii=False, sort_keys=True),
            recipient_id=recipient_id,
            for_admin=for_admin,
        )
        async with self.session.begin_nested():
            self.session.add(notification)
        return notification
