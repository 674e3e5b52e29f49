"""Download link issuance for catalog templates."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import timedelta

from sqlalchemy.ext.asyncio import AsyncSession

from catalog.core.config import Settings, get_settings
from catalog.infrastructure.storage.cloudinary_signer import CloudinaryLinkSigner
from catalog.modules.templates import TemplateCatalogService

from .link_signer import DownloadLink, DownloadLinkIssuer


@dataclass(slots=True)
class DownloadService:
    catalog: TemplateCatalogService
    issuer: DownloadLinkIssuer

    @classmethod
    def with_session(cls, session: AsyncSession, settings: Settings | None = None) -> "DownloadService":
        settings = settings or get_settings()
        issuer = DownloadLinkIssuer(
            CloudinaryLinkSigner(settings.cloudinary),
            ttl=timedelta(seconds=settings.downloads.link_ttl_seconds),
        )
        return cls(TemplateCatalogService.with_session(session, settings.pagination), issuer)

    async def issue_download_link(self, template_id: str) -> DownloadLink:
        template = await self.catalog.get_by_id(template_id, include_deleted=False)
        await self.catalog.increment_view_count(template_id)
        return self.issuer.issue(template.download_file, template.title)
