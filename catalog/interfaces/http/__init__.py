from fastapi import APIRouter

from catalog.interfaces.http.routers import admin_templates, design_templates


def create_api_router(prefix: str = "") -> APIRouter:
    router = APIRouter(prefix=prefix)
    # admin routes first so "/admin/..." never falls through to "/{template_id}"
    router.include_router(admin_templates.router, prefix="/design-templates/admin", tags=["design-templates-admin"])
    router.include_router(design_templates.router, prefix="/design-templates", tags=["design-templates"])
    return router


__all__ = [
    "create_api_router",
]
