from .models import CategorySummary
from .repository import CategoryRepository

__all__ = ["CategoryRepository", "CategorySummary"]
