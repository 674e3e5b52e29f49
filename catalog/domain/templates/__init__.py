"""Design template domain models and errors."""

from .exceptions import (
    TemplateError,
    TemplateNotFoundError,
    TemplatePermissionError,
    TemplateSlugConflictError,
    TemplateValidationError,
)
from .models import (
    AUTHORING_STATUSES,
    PRODUCT_TYPE,
    UNSET,
    AccessType,
    CatalogScope,
    CategoryRef,
    DesignPlatform,
    DesignTemplate,
    LicenseType,
    ListQuery,
    PageMeta,
    TemplateCreateInput,
    TemplateFilters,
    TemplatePage,
    TemplateStatus,
    TemplateType,
    TemplateUpdateInput,
)
from .repository import TemplateRepository

__all__ = [
    "AUTHORING_STATUSES",
    "PRODUCT_TYPE",
    "UNSET",
    "AccessType",
    "CatalogScope",
    "CategoryRef",
    "DesignPlatform",
    "DesignTemplate",
    "LicenseType",
    "ListQuery",
    "PageMeta",
    "TemplateCreateInput",
    "TemplateError",
    "TemplateFilters",
    "TemplateNotFoundError",
    "TemplatePage",
    "TemplatePermissionError",
    "TemplateRepository",
    "TemplateSlugConflictError",
    "TemplateStatus",
    "TemplateType",
    "TemplateUpdateInput",
    "TemplateValidationError",
]
