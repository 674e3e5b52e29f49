"""SQLAlchemy repository implementations."""

from .category_repository import SqlCategoryRepository
from .account_repository import SqlAccountRepository
from .notification_repository import SqlNotificationRepository
from .template_repository import SqlTemplateRepository
from .wishlist_repository import SqlWishlistRepository

__all__ = [
    "SqlAccountRepository",
    "SqlCategoryRepository",
    "SqlNotificationRepository",
    "SqlTemplateRepository",
    "SqlWishlistRepository",
]
