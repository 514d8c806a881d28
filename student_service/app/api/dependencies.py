"""
FastAPI dependencies shared by the Student Service endpoints.
"""

from fastapi import Request

from ..services.student_service import StudentService


def get_student_service(request: Request) -> StudentService:
    """Return the service instance assembled by ``create_app``."""
    return request.app.state.student_service
