"""Admin-driven moderation of design templates.

Only ``approved`` and ``rejected`` are reachable through moderation; either can
be revisited by a later transition. Approving stamps ``publish_date``; moving
away from ``approved`` leaves the previous stamp in place. Authority to moderate
is checked by the HTTP layer before a call reaches this service.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass

from sqlalchemy.ext.asyncio import AsyncSession

from catalog.db.models import utcnow
from catalog.domain.templates import (
    DesignTemplate,
    TemplateNotFoundError,
    TemplateRepository,
    TemplateStatus,
    TemplateValidationError,
)
from catalog.infrastructure.database.repositories.template_repository import SqlTemplateRepository

logger = logging.getLogger(__name__)

MODERATION_TARGETS = frozenset({TemplateStatus.APPROVED, TemplateStatus.REJECTED})


@dataclass(slots=True)
class ModerationService:
    repository: TemplateRepository

    @classmethod
    def with_session(cls, session: AsyncSession) -> "ModerationService":
        return cls(SqlTemplateRepository(session))

    async def set_status(self, template_id: str, status: str | TemplateStatus) -> DesignTemplate:
        target = _parse_target(status)
        publish_date = utcnow() if target is TemplateStatus.APPROVED else None

        template = await self.repository.set_status(template_id, target.value, publish_date=publish_date)
        if template is None:
            raise TemplateNotFoundError("Design template not found")

        logger.info("Design template %s moderated to %s", template_id, target.value)
        return template


def _parse_target(status: str | TemplateStatus) -> TemplateStatus:
    try:
        target = TemplateStatus(status)
    except ValueError as exc:
        raise TemplateValidationError(f"Unknown status: {status}") from exc
    if target not in MODERATION_TARGETS:
        raise TemplateValidationError(f"Moderation cannot move a template to {target.value}")
    return target
