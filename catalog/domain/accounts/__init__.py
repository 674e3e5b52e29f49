from .models import AccountProfile

__all__ = ["AccountProfile"]
