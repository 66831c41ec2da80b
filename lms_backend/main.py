"""
Main application entry point for the LMS assessment backend.

This module builds the FastAPI application: storage wiring, middleware,
error handlers and the assessments router.

Usage:
    - Direct: python -m lms_backend.main
    - ASGI server: uvicorn lms_backend.main:app
"""

import os
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from lms_backend.api import register_exception_handlers
from lms_backend.assessments.router import router as assessments_router
from lms_backend.assessments.service import AssessmentService, create_assessment_service
from lms_backend.common.exceptions import ConfigurationError
from lms_backend.common.logger import app_logger, configure_logger, APP_LOGGER_NAME
from lms_backend.config import Settings, settings as default_settings
from lms_backend.domain.assessments.memory_repository import MemoryAssessmentRepository
from lms_backend.domain.catalog.memory_gateway import MemoryCatalogGateway

logger = app_logger.getChild("main")


async def build_assessment_service(settings: Settings) -> AssessmentService:
    """
    Create the assessment service over the configured storage backend.

    Raises:
        ConfigurationError: If STORAGE_BACKEND is not ``memory`` or ``sql``
    """
    if settings.STORAGE_BACKEND == "memory":
        logger.warning("Using in-memory storage; data is lost on shutdown")
        return create_assessment_service(
            MemoryCatalogGateway(), MemoryAssessmentRepository(), settings
        )

    if settings.STORAGE_BACKEND == "sql":
        from lms_backend.database.init_db import initialize_database, get_session_factory
        from lms_backend.database.repositories import SqlAssessmentRepository, SqlCatalogGateway

        await initialize_database(
            database_url=settings.DATABASE_URL,
            echo=settings.SQL_ECHO,
            pool_size=settings.DB_POOL_SIZE,
            max_overflow=settings.DB_MAX_OVERFLOW,
            pool_timeout=settings.DB_POOL_TIMEOUT
        )
        session_factory = get_session_factory()
        return create_assessment_service(
            SqlCatalogGateway(session_factory), SqlAssessmentRepository(session_factory), settings
        )

    raise ConfigurationError(
        f"unknown storage backend '{settings.STORAGE_BACKEND}'", config_key="STORAGE_BACKEND"
    )


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    """
    Create and configure a FastAPI application instance.

    Args:
        settings: Settings to use; defaults to the environment-derived settings

    Returns:
        Configured FastAPI application
    """
    settings = settings or default_settings

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        logger.info("Application startup sequence initiated.")
        # Tests may install a service before startup
        if getattr(app.state, "assessment_service", None) is None:
            app.state.assessment_service = await build_assessment_service(settings)
        logger.info("Application startup complete")

        yield

        if settings.STORAGE_BACKEND == "sql":
            from lms_backend.database.init_db import close_database
            await close_database()
        logger.info("Application shutdown complete")

    app = FastAPI(
        title=settings.PROJECT_NAME,
        description="Practice assessment composition and scoring for courses",
        version="0.1.0",
        lifespan=lifespan
    )
    app.state.settings = settings

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.CORS_ORIGINS,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    register_exception_handlers(app)
    app.include_router(assessments_router, prefix=settings.API_PREFIX, tags=["assessments"])

    @app.get("/health")
    async def health():
        return {"status": "ok"}

    logger.info(f"Application created with {len(app.routes)} routes")
    return app


configure_logger(
    name=APP_LOGGER_NAME,
    level=default_settings.LOG_LEVEL,
    use_json=default_settings.LOG_JSON,
    log_file=default_settings.LOG_FILE
)

app = create_app()

if __name__ == "__main__":
    import uvicorn

    host = os.environ.get("HOST", "0.0.0.0")
    port = int(os.environ.get("PORT", 8000))
    reload_enabled = os.environ.get("RELOAD", "false").lower() == "true"

    logger.info(f"Starting server on {host}:{port} (reload: {reload_enabled})")

    uvicorn.run(
        "lms_backend.main:app",
        host=host,
        port=port,
        reload=reload_enabled,
        log_level="info"
    )
