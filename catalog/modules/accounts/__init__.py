"""Public exports for account lookups."""

from catalog.domain.accounts.models import AccountProfile
from .service import AccountDirectory

__all__ = ["AccountDirectory", "AccountProfile"]
