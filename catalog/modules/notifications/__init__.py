from catalog.domain.notifications.models import LikeNotification
from .service import NotificationService

__all__ = ["LikeNotification", "NotificationService"]
