"""
Like toggling: membership/count consistency and best-effort collaborators.
"""

import json
from unittest.mock import AsyncMock

import pytest
from sqlalchemy import select

from catalog.db.models import Notification
from catalog.infrastructure.database.repositories import SqlTemplateRepository, SqlWishlistRepository
from catalog.modules.accounts import AccountDirectory
from catalog.modules.engagement import EngagementService
from catalog.modules.notifications import NotificationService
from catalog.modules.templates import TemplateNotFoundError
from catalog.modules.wishlist import WishlistService


@pytest.fixture
def engagement(session) -> EngagementService:
    return EngagementService.with_session(session)


class TestToggleLike:
    @pytest.mark.asyncio
    async def test_like_then_unlike(self, engagement, catalog_service, make_approved_template, fan):
        template = await make_approved_template()

        liked = await engagement.toggle_like(template.id, fan.id)
        after_like = await catalog_service.get_by_id(template.id)
        unliked = await engagement.toggle_like(template.id, fan.id)
        after_unlike = await catalog_service.get_by_id(template.id)

        assert liked.liked is True and liked.like_count == 1
        assert after_like.liked_by == {fan.id}
        assert unliked.liked is False and unliked.like_count == 0
        assert after_unlike.liked_by == frozenset()
        assert after_unlike.like_count == 0

    @pytest.mark.asyncio
    async def test_count_matches_distinct_likers(self, engagement, catalog_service, make_approved_template, fan, author):
        template = await make_approved_template()

        await engagement.toggle_like(template.id, fan.id)
        result = await engagement.toggle_like(template.id, author.id)

        refreshed = await catalog_service.get_by_id(template.id)
        assert result.like_count == 2
        assert refreshed.like_count == len(refreshed.liked_by) == 2

    @pytest.mark.asyncio
    async def test_like_syncs_wishlist(self, session, engagement, make_approved_template, fan):
        template = await make_approved_template()
        wishlist = SqlWishlistRepository(session)

        await engagement.toggle_like(template.id, fan.id)
        assert await wishlist.contains(fan.id, template.id)

        await engagement.toggle_like(template.id, fan.id)
        assert not await wishlist.contains(fan.id, template.id)

    @pytest.mark.asyncio
    async def test_like_notifies_author(self, session, engagement, make_approved_template, fan, author):
        template = await make_approved_template(title="Dashboard Kit")

        result = await engagement.toggle_like(template.id, fan.id)

        notifications = (await session.execute(select(Notification))).scalars().all()
        assert result.degraded is False
        assert len(notifications) == 1
        notification = notifications[0]
        assert notification.type == "like"
        assert notification.recipient_id == author.id
        assert notification.for_admin is True
        assert notification.message == 'Grace Hopper liked "Dashboard Kit"'
        data = json.loads(notification.data)
        assert data["userId"] == fan.id
        assert data["productId"] == template.id
        assert data["productType"] == "design-template"

    @pytest.mark.asyncio
    async def test_unknown_user_skips_notification(self, session, engagement, make_approved_template):
        template = await make_approved_template()

        result = await engagement.toggle_like(template.id, "ghost-user")

        assert result.liked is True
        assert result.degraded is False
        assert (await session.execute(select(Notification))).scalars().all() == []

    @pytest.mark.asyncio
    async def test_collaborator_failures_degrade_but_do_not_fail(self, session, make_approved_template, fan):
        template = await make_approved_template()
        wishlist = AsyncMock(spec=WishlistService)
        wishlist.add.side_effect = RuntimeError("wishlist down")
        notifications = AsyncMock(spec=NotificationService)
        notifications.create_like_notification.side_effect = RuntimeError("notifications down")
        engagement = EngagementService(
            templates=SqlTemplateRepository(session),
            wishlist=wishlist,
            users=AccountDirectory.with_session(session),
            notifications=notifications,
        )

        result = await engagement.toggle_like(template.id, fan.id)

        assert result.liked is True
        assert result.like_count == 1
        assert result.degraded is True
        assert [(outcome.name, outcome.ok) for outcome in result.side_effects] == [
            ("wishlist.add", False),
            ("notification.like", False),
        ]

    @pytest.mark.asyncio
    async def test_unlike_reports_wishlist_outcome(self, session, make_approved_template, fan):
        template = await make_approved_template()
        wishlist = AsyncMock(spec=WishlistService)
        wishlist.remove.side_effect = RuntimeError("wishlist down")
        engagement = EngagementService(
            templates=SqlTemplateRepository(session),
            wishlist=wishlist,
            users=AccountDirectory.with_session(session),
            notifications=AsyncMock(spec=NotificationService),
        )
        await engagement.toggle_like(template.id, fan.id)

        result = await engagement.toggle_like(template.id, fan.id)

        assert result.liked is False
        assert result.like_count == 0
        assert [(outcome.name, outcome.ok) for outcome in result.side_effects] == [("wishlist.remove", False)]

    @pytest.mark.asyncio
    async def test_unknown_or_deleted_template(self, engagement, catalog_service, make_approved_template, author, fan):
        with pytest.raises(TemplateNotFoundError):
            await engagement.toggle_like("missing", fan.id)

        template = await make_approved_template()
        await catalog_service.soft_delete(template.id, author.id, False)
        with pytest.raises(TemplateNotFoundError):
            await engagement.toggle_like(template.id, fan.id)


class TestLikeCountFloor:
    @pytest.mark.asyncio
    async def test_remove_like_never_goes_negative(self, session, make_approved_template, fan):
        template = await make_approved_template()
        repository = SqlTemplateRepository(session)

        assert await repository.remove_like(template.id, fan.id) == 0
