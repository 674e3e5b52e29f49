"""Public exports for the design template catalog."""

from catalog.domain.templates import (
    DesignTemplate,
    ListQuery,
    TemplateCreateInput,
    TemplateError,
    TemplateFilters,
    TemplateNotFoundError,
    TemplatePage,
    TemplatePermissionError,
    TemplateSlugConflictError,
    TemplateUpdateInput,
    TemplateValidationError,
)

from .service import TemplateCatalogService, build_unique_slug, slugify

__all__ = [
    "DesignTemplate",
    "ListQuery",
    "TemplateCatalogService",
    "TemplateCreateInput",
    "TemplateError",
    "TemplateFilters",
    "TemplateNotFoundError",
    "TemplatePage",
    "TemplatePermissionError",
    "TemplateSlugConflictError",
    "TemplateUpdateInput",
    "TemplateValidationError",
    "build_unique_slug",
    "slugify",
]
