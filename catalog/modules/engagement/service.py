"""Like/unlike protocol for design templates.

``likedBy`` membership and ``like_count`` on the template are authoritative.
Wishlist and notification updates are attempted in the same request but are
best-effort: their outcomes are reported on the result and never undo the
toggle.

The membership check and the follow-up mutation are separate statements, so
two concurrent toggles by the same user can both observe the old state. The
repository keeps membership a set and clamps ``like_count`` at zero on unlike,
but does not close that window.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass

from sqlalchemy.ext.asyncio import AsyncSession

from catalog.core.side_effects import SideEffectOutcome, run_side_effect
from catalog.domain.notifications import LikeNotification
from catalog.domain.templates import (
    PRODUCT_TYPE,
    DesignTemplate,
    TemplateNotFoundError,
    TemplateRepository,
)
from catalog.infrastructure.database.repositories.template_repository import SqlTemplateRepository
from catalog.modules.accounts import AccountDirectory
from catalog.modules.notifications import NotificationService
from catalog.modules.wishlist import WishlistService

from .collaborators import LikeNotifier, UserDirectory, WishlistSync

logger = logging.getLogger(__name__)


@dataclass(slots=True, frozen=True)
class LikeToggleResult:
    liked: bool
    like_count: int
    side_effects: tuple[SideEffectOutcome, ...] = ()

    @property
    def degraded(self) -> bool:
        return any(not outcome.ok for outcome in self.side_effects)


@dataclass(slots=True)
class EngagementService:
    templates: TemplateRepository
    wishlist: WishlistSync
    users: UserDirectory
    notifications: LikeNotifier

    @classmethod
    def with_session(cls, session: AsyncSession) -> "EngagementService":
        return cls(
            templates=SqlTemplateRepository(session),
            wishlist=WishlistService.with_session(session),
            users=AccountDirectory.with_session(session),
            notifications=NotificationService.with_session(session),
        )

    async def toggle_like(self, template_id: str, user_id: str) -> LikeToggleResult:
        template = await self.templates.get_by_id(template_id, include_deleted=False)
        if template is None:
            raise TemplateNotFoundError("Design template not found")

        if template.is_liked_by(user_id):
            like_count = await self.templates.remove_like(template_id, user_id)
            outcome = await run_side_effect("wishlist.remove", self.wishlist.remove, user_id, template_id)
            return LikeToggleResult(liked=False, like_count=like_count, side_effects=(outcome,))

        like_count = await self.templates.add_like(template_id, user_id)
        outcomes = (
            await run_side_effect("wishlist.add", self.wishlist.add, user_id, template_id, PRODUCT_TYPE),
            await run_side_effect("notification.like", self._notify_author, template, user_id),
        )
        return LikeToggleResult(liked=True, like_count=like_count, side_effects=outcomes)

    async def _notify_author(self, template: DesignTemplate, user_id: str) -> None:
        user = await self.users.get_by_id(user_id)
        if user is None:
            logger.info("Skipping like notification for %s: user %s not found", template.id, user_id)
            return
        await self.notifications.create_like_notification(
            LikeNotification(
                user_id=user.id,
                user_name=user.display_name,
                product_id=template.id,
                product_name=template.title,
                product_type=PRODUCT_TYPE,
                recipient_id=template.author_id,
            )
        )
