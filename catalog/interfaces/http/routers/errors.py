"""Translate catalog domain errors into HTTP responses."""

from fastapi import HTTPException, status

from catalog.domain.templates import (
    TemplateError,
    TemplateNotFoundError,
    TemplatePermissionError,
    TemplateSlugConflictError,
    TemplateValidationError,
)

_STATUS_BY_ERROR: dict[type[TemplateError], int] = {
    TemplateNotFoundError: status.HTTP_404_NOT_FOUND,
    TemplatePermissionError: status.HTTP_403_FORBIDDEN,
    TemplateSlugConflictError: status.HTTP_409_CONFLICT,
    TemplateValidationError: status.HTTP_422_UNPROCESSABLE_ENTITY,
}


def to_http_error(exc: TemplateError) -> HTTPException:
    for error_type, status_code in _STATUS_BY_ERROR.items():
        if isinstance(exc, error_type):
            return HTTPException(status_code=status_code, detail=str(exc))
    return HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(exc))


__all__ = ["to_http_error"]
