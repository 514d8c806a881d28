"""Unified entry point for the school and student services.

This script serves both FastAPI applications concurrently from one
process, each on its own port.  It is intended for local development
where running two separate uvicorn commands is inconvenient; in a
deployment each service is started on its own, e.g.::

    uvicorn student_service.app.main:app --port 8090
    uvicorn school_service.app.main:app --port 8070

Hosts and ports come from ``STUDENT_HOST``/``STUDENT_PORT`` and
``SCHOOL_HOST``/``SCHOOL_PORT``.  ``STUDENTS_URL`` must point at the
student service's ``/api/v1/students`` resource.

Usage:
    python run.py
"""
import asyncio
import logging

from uvicorn import Config, Server

from school_service.app.main import app as school_app
from school_service.app.core.config import settings as school_settings
from student_service.app.main import app as student_app
from student_service.app.core.config import settings as student_settings


async def serve(app, host: str, port: int) -> None:
    """Serve one application with Uvicorn until it stops."""
    config = Config(app=app, host=host, port=port, reload=False, log_level="info")
    server = Server(config)
    await server.serve()


async def main() -> None:
    """Run both services concurrently; stop both if either fails."""
    tasks = [
        asyncio.create_task(serve(student_app, student_settings.host, student_settings.port)),
        asyncio.create_task(serve(school_app, school_settings.host, school_settings.port)),
    ]
    done, pending = await asyncio.wait(tasks, return_when=asyncio.FIRST_EXCEPTION)
    for task in done:
        if exception := task.exception():
            logging.exception("Exception in service", exc_info=exception)
    for task in pending:
        task.cancel()
    await asyncio.gather(*pending, return_exceptions=True)


if __name__ == "__main__":
    try:
        asyncio.run(main())
    except (KeyboardInterrupt, SystemExit):
        pass
