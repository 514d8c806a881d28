"""
Main entrypoint for the Student Service.

This module assembles the FastAPI application, sets up logging and
includes versioned routers.  ``create_app`` builds and configures
the app, which is then instantiated at module import time as
``app`` so that it can be served directly, e.g.::

    uvicorn student_service.app.main:app --port 8090
"""

import logging
from typing import Optional

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse

from .api.v1.router import router as v1_router
from .core.config import Settings, settings as default_settings
from .core.db import get_database_path
from .core.exceptions import StorageError
from .core.logging_config import setup_logging
from .repositories.student_store import SqliteStudentStore, StudentStore
from .services.student_service import StudentService


def create_app(
    settings: Optional[Settings] = None,
    store: Optional[StudentStore] = None,
) -> FastAPI:
    """Create and configure the Student Service application.

    Parameters
    ----------
    settings : Optional[Settings]
        Configuration to use; defaults to the environment-derived
        module-level settings.
    store : Optional[StudentStore]
        Student store to use; defaults to a SQLite store at
        ``settings.database_url``.
    """
    settings = settings or default_settings
    setup_logging(settings.log_level, settings.log_file)
    logger = logging.getLogger(__name__)

    if store is None:
        store = SqliteStudentStore(get_database_path(settings.database_url))

    app = FastAPI(title=settings.project_name, version=settings.api_version)
    app.state.settings = settings
    app.state.student_service = StudentService(store)

    app.include_router(v1_router, prefix="/api/v1")

    @app.exception_handler(StorageError)
    async def storage_error_handler(request: Request, exc: StorageError) -> JSONResponse:
        logger.error("Storage failure on %s %s: %s", request.method, request.url.path, exc)
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={"detail": "Storage unavailable"},
        )

    @app.on_event("startup")
    async def startup_event() -> None:
        store.init_schema()
        logger.info("%s %s started", settings.project_name, settings.api_version)

    return app


app = create_app()
