"""FastAPI application factory.

Main entry point for the GradePoint Web API.
"""

from contextlib import asynccontextmanager
from typing import AsyncGenerator

import structlog
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from gradepoint import __version__
from gradepoint.config.app_config import AppConfig, load_app_config
from gradepoint.db.record_store import RecordStore
from gradepoint.web.errors import register_error_handlers
from gradepoint.web.routes import (
    courses_router,
    gpa_router,
    health_router,
    semesters_router,
)

logger = structlog.get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Lifespan context manager for startup/shutdown events."""
    store: RecordStore = app.state.store
    logger.info(
        "api_startup",
        semesters=len(store.get_semesters()),
        courses=len(store.get_courses()),
    )
    yield
    # Data is in-memory only; nothing to flush on shutdown
    logger.info("api_shutdown")


def create_app(
    store: RecordStore | None = None,
    config: AppConfig | None = None,
) -> FastAPI:
    """Create and configure the FastAPI application.

    Args:
        store: Record store to serve; a fresh one is built when omitted
        config: Application config; loaded from disk when omitted

    Returns:
        Configured FastAPI app instance
    """
    if config is None:
        config = load_app_config()

    if store is None:
        store = RecordStore(
            default_semester_name=config.store.default_semester_name,
            owner_id=config.store.owner_id,
        )

    app = FastAPI(
        title="GradePoint API",
        description="Semester and course records with GPA calculation",
        version=__version__,
        docs_url="/docs",
        redoc_url="/redoc",
        lifespan=lifespan,
    )
    app.state.store = store
    app.state.config = config

    app.add_middleware(
        CORSMiddleware,
        allow_origins=config.server.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    register_error_handlers(app)

    # Include routers
    app.include_router(health_router)
    app.include_router(courses_router)
    app.include_router(semesters_router)
    app.include_router(gpa_router)

    return app
