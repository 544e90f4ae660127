import logging
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from plato.api.router import build_api_router
from plato.core.config import Settings, get_settings
from plato.core.logger import setup_logging
from plato.services.course_store import CourseStore
from plato.services.sample_catalog import sample_courses

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Log the store size on startup and shutdown."""
    logger.info("%s started with %d courses", app.title, len(app.state.course_store))
    yield
    logger.info("%s stopping with %d courses", app.title, len(app.state.course_store))


def create_app(settings: Optional[Settings] = None, store: Optional[CourseStore] = None) -> FastAPI:
    """
    Build the API application.

    Args:
        settings: Settings to use; defaults to the cached environment settings
        store: Course store to serve; a new one is created when omitted and,
            if settings.seed_sample_courses is set, filled with the demo catalogue
    """
    settings = settings or get_settings()
    setup_logging(settings.log_level)

    if store is None:
        store = CourseStore()
        if settings.seed_sample_courses:
            for course in sample_courses(
                term=settings.default_term,
                start_date=settings.default_semester_start,
                end_date=settings.default_semester_end,
            ):
                store.add_course(course)

    app = FastAPI(
        title=settings.app_name,
        description="Mock LMS with deterministic course content generation",
        version="0.1.0",
        docs_url="/docs",
        redoc_url="/redoc",
        lifespan=lifespan,
    )
    app.state.settings = settings
    app.state.course_store = store

    app.add_middleware(
        CORSMiddleware,
        allow_origins=[
            "http://localhost:3000",  # Local Next.js development
            "https://localhost:3000",
        ],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.get("/health", tags=["health"])
    def health_check():
        """Health check endpoint."""
        return {"status": "ok", "courses": len(app.state.course_store)}

    app.include_router(build_api_router(settings), prefix="/api")
    return app


app = create_app()
