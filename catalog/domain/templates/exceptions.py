"""Design template domain specific exceptions."""


class TemplateError(Exception):
    """Base class for design template errors."""


class TemplateNotFoundError(TemplateError):
    """Raised when a template is absent or hidden by visibility rules."""


class TemplatePermissionError(TemplateError):
    """Raised when the actor neither authored the template nor holds admin rights."""


class TemplateSlugConflictError(TemplateError):
    """Raised when an explicit slug is already taken by another template."""


class TemplateValidationError(TemplateError):
    """Raised for field values the catalog refuses to persist."""
