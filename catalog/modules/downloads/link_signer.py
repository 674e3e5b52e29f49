"""Short-lived signed download links derived from stored delivery URLs.

A stored URL looks like::

    https://res.cloudinary.com/<cloud>/raw/upload/v12345/folder/file.zip

The segment named ``upload`` (or ``authenticated``) anchors the parse: it is
the delivery mode, an optional ``v<digits>`` segment after it is the version,
and the rest is the public id. URLs without an anchor are not storage URLs and
are handed back unchanged.
"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass
from datetime import datetime, timedelta
from typing import Callable, Optional, Protocol

from catalog.db.models import utcnow

logger = logging.getLogger(__name__)

DELIVERY_ANCHORS = ("upload", "authenticated")
IMAGE_KIND = "image"
RAW_KIND = "raw"
DEFAULT_EXTENSIONS = {IMAGE_KIND: "png", RAW_KIND: "zip"}
DEFAULT_LINK_TTL = timedelta(hours=1)

_VERSION_SEGMENT = re.compile(r"v(\d+)")
_EXTENSION = re.compile(r"\.([A-Za-z0-9]+)$")
_NON_FILENAME_RUN = re.compile(r"[^A-Za-z0-9]+")


@dataclass(slots=True, frozen=True)
class DeliveryTarget:
    public_id: str
    resource_kind: str
    delivery_mode: str
    version: Optional[str]
    extension: str


@dataclass(slots=True, frozen=True)
class SignRequest:
    resource_kind: str
    delivery_mode: str
    version: Optional[str]
    extension: str
    attachment: bool
    attachment_name: str
    expires_at: int


@dataclass(slots=True, frozen=True)
class DownloadLink:
    url: str
    signed: bool
    expires_at: Optional[datetime] = None


class LinkSigner(Protocol):
    def sign(self, public_id: str, request: SignRequest) -> str:
        ...


def parse_delivery_url(url: str) -> DeliveryTarget | None:
    """Split a stored delivery URL into its signing parameters."""
    parts = url.split("/")
    anchor = next((parts.index(name) for name in DELIVERY_ANCHORS if name in parts), None)
    if anchor is None:
        return None

    resource_kind = IMAGE_KIND if "/image/" in url else RAW_KIND
    delivery_mode = parts[anchor]

    version = None
    start = anchor + 1
    if start < len(parts):
        match = _VERSION_SEGMENT.fullmatch(parts[start])
        if match:
            version = match.group(1)
            start += 1

    path = "/".join(parts[start:]).split("?", 1)[0]
    match = _EXTENSION.search(path)
    if match:
        public_id, extension = path[: match.start()], match.group(1)
    else:
        public_id, extension = path, DEFAULT_EXTENSIONS[resource_kind]
    if not public_id:
        return None

    return DeliveryTarget(
        public_id=public_id,
        resource_kind=resource_kind,
        delivery_mode=delivery_mode,
        version=version,
        extension=extension,
    )


def attachment_stem(title: str) -> str:
    return _NON_FILENAME_RUN.sub("_", title) or "download"


class DownloadLinkIssuer:
    def __init__(
        self,
        signer: LinkSigner,
        ttl: timedelta = DEFAULT_LINK_TTL,
        clock: Callable[[], datetime] = utcnow,
    ) -> None:
        self._signer = signer
        self._ttl = ttl
        self._clock = clock

    def issue(self, download_file: str, title: str) -> DownloadLink:
        """Return a signed link, or the stored URL when it cannot be signed."""
        target = parse_delivery_url(download_file)
        if target is None:
            logger.info("Download URL is not a recognised storage URL, returning it as-is")
            return DownloadLink(url=download_file, signed=False)

        expires_at = self._clock() + self._ttl
        request = SignRequest(
            resource_kind=target.resource_kind,
            delivery_mode=target.delivery_mode,
            version=target.version,
            extension=target.extension,
            attachment=True,
            attachment_name=f"{attachment_stem(title)}.{target.extension}",
            expires_at=int(expires_at.timestamp()),
        )
        try:
            url = self._signer.sign(target.public_id, request)
        except Exception as exc:  # pylint: disable=broad-except
            logger.warning("Signing download for %s failed, using stored URL: %s", target.public_id, exc)
            return DownloadLink(url=download_file, signed=False)
        return DownloadLink(url=url, signed=True, expires_at=expires_at)
