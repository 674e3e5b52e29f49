"""Cloudinary-backed link signing provider."""

from __future__ import annotations

from typing import TYPE_CHECKING

import cloudinary.utils

from catalog.core.config import CloudinarySettings

if TYPE_CHECKING:
    from catalog.modules.downloads.link_signer import SignRequest


class CloudinaryLinkSigner:
    """Issues expiring delivery URLs bound to version and download filename.

    The URL path carries the version and an ``fl_attachment:<name>`` flag; the
    appended auth token covers that path and expires at ``expires_at``.
    """

    def __init__(self, settings: CloudinarySettings) -> None:
        self._settings = settings

    def sign(self, public_id: str, request: SignRequest) -> str:
        settings = self._settings
        if not (settings.cloud_name and settings.api_key and settings.api_secret and settings.auth_token_key):
            raise RuntimeError("Cloudinary credentials are not configured")

        options = {
            "resource_type": request.resource_kind,
            "type": request.delivery_mode,
            "format": request.extension,
            "secure": True,
            "sign_url": True,
            "cloud_name": settings.cloud_name,
            "api_key": settings.api_key,
            "api_secret": settings.api_secret,
            "auth_token": {"key": settings.auth_token_key, "expiration": request.expires_at},
        }
        if request.version:
            options["version"] = request.version
        if request.attachment:
            options["flags"] = f"attachment:{_stem(request.attachment_name)}"

        url, _ = cloudinary.utils.cloudinary_url(public_id, **options)
        return url


def _stem(filename: str) -> str:
    return filename.rsplit(".", 1)[0] if "." in filename else filename
