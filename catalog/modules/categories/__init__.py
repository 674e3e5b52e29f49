"""Public exports for category accounting."""

from catalog.domain.categories.models import CategorySummary
from .service import CategoryAccountingService

__all__ = [
    "CategoryAccountingService",
    "CategorySummary",
]
