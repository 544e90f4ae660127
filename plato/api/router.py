from fastapi import APIRouter

from plato.api.routes import courses, debug, departments
from plato.core.config import Settings


def build_api_router(settings: Settings) -> APIRouter:
    api_router = APIRouter()

    api_router.include_router(courses.router, prefix="/courses", tags=["courses"])
    api_router.include_router(departments.router, prefix="/departments", tags=["departments"])

    # Debug routes only available when DEBUG=true
    if settings.debug:
        api_router.include_router(debug.router, prefix="/debug", tags=["debug"])

    return api_router
