from .models import LikeNotification

__all__ = ["LikeNotification"]
