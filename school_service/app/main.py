"""
Main entrypoint for the School Service.

This module assembles the FastAPI application, sets up logging,
includes versioned routers and maps service errors to HTTP
responses.  The module-level ``app`` can be served directly, e.g.::

    uvicorn school_service.app.main:app --port 8070
"""

import logging
from typing import Optional

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse

from .api.v1.router import router as v1_router
from .clients.student_client import HttpStudentClient, StudentClient
from .core.config import Settings, settings as default_settings
from .core.db import get_database_path
from .core.exceptions import RemoteCallError, StorageError
from .core.logging_config import setup_logging
from .repositories.school_store import SchoolStore, SqliteSchoolStore
from .services.school_service import SchoolService


def create_app(
    settings: Optional[Settings] = None,
    store: Optional[SchoolStore] = None,
    client: Optional[StudentClient] = None,
) -> FastAPI:
    """Create and configure the School Service application.

    Parameters
    ----------
    settings : Optional[Settings]
        Configuration to use; defaults to the environment-derived
        module-level settings.
    store : Optional[SchoolStore]
        School store; defaults to a SQLite store at
        ``settings.database_url``.
    client : Optional[StudentClient]
        Student Service client; defaults to an HTTP client against
        ``settings.students_url``.
    """
    settings = settings or default_settings
    setup_logging(settings.log_level, settings.log_file)
    logger = logging.getLogger(__name__)

    if store is None:
        store = SqliteSchoolStore(get_database_path(settings.database_url))
    if client is None:
        client = HttpStudentClient(base_url=settings.students_url, timeout=settings.students_timeout)

    app = FastAPI(title=settings.project_name, version=settings.api_version)
    app.state.settings = settings
    app.state.school_service = SchoolService(store, client)

    app.include_router(v1_router, prefix="/api/v1")

    @app.exception_handler(StorageError)
    async def storage_error_handler(request: Request, exc: StorageError) -> JSONResponse:
        logger.error("Storage failure on %s %s: %s", request.method, request.url.path, exc)
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={"detail": "Storage unavailable"},
        )

    @app.exception_handler(RemoteCallError)
    async def remote_call_error_handler(request: Request, exc: RemoteCallError) -> JSONResponse:
        return JSONResponse(
            status_code=status.HTTP_502_BAD_GATEWAY,
            content={"detail": f"Student service call failed: {exc.message}"},
        )

    @app.on_event("startup")
    async def startup_event() -> None:
        store.init_schema()
        logger.info(
            "%s %s started, students at %s",
            settings.project_name,
            settings.api_version,
            settings.students_url,
        )

    @app.on_event("shutdown")
    async def shutdown_event() -> None:
        client.close()

    return app


app = create_app()
