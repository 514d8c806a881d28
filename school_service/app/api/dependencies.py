"""
FastAPI dependencies shared by the School Service endpoints.
"""

from fastapi import Request

from ..services.school_service import SchoolService


def get_school_service(request: Request) -> SchoolService:
    """Return the service instance assembled by ``create_app``."""
    return request.app.state.school_service
