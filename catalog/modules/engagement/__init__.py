"""Public exports for template engagement."""

from .collaborators import LikeNotifier, UserDirectory, WishlistSync
from .service import EngagementService, LikeToggleResult

__all__ = [
    "EngagementService",
    "LikeNotifier",
    "LikeToggleResult",
    "UserDirectory",
    "WishlistSync",
]
