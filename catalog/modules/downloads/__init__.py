"""Public exports for download link issuance."""

from .link_signer import (
    DeliveryTarget,
    DownloadLink,
    DownloadLinkIssuer,
    LinkSigner,
    SignRequest,
    attachment_stem,
    parse_delivery_url,
)
from .service import DownloadService

__all__ = [
    "DeliveryTarget",
    "DownloadLink",
    "DownloadLinkIssuer",
    "DownloadService",
    "LinkSigner",
    "SignRequest",
    "attachment_stem",
    "parse_delivery_url",
]
