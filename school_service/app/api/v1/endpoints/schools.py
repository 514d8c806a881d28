"""
School endpoints for API v1.

Besides creating and listing schools, ``GET /with-students/{id}``
returns a school together with the students the Student Service
reports for it.  An unknown school id yields ``"NotFound"`` for the
name and email instead of a 404; a failure to reach the Student
Service is answered with 502 by the application's error handler.
"""

from typing import List

from fastapi import APIRouter, Depends, Response, status

from school_service.app.api.dependencies import get_school_service
from school_service.app.schemas.school import SchoolCreate, SchoolRead, SchoolWithStudents
from school_service.app.services.school_service import SchoolService


router = APIRouter()


@router.post("", status_code=status.HTTP_201_CREATED, response_class=Response)
@router.post("/", status_code=status.HTTP_201_CREATED, response_class=Response, include_in_schema=False)
async def create_school(
    school: SchoolCreate,
    service: SchoolService = Depends(get_school_service),
) -> Response:
    """Create a new school.  The response body is empty."""
    await service.create_school(school)
    return Response(status_code=status.HTTP_201_CREATED)


@router.get("", response_model=List[SchoolRead])
@router.get("/", response_model=List[SchoolRead], include_in_schema=False)
async def list_schools(
    service: SchoolService = Depends(get_school_service),
) -> List[SchoolRead]:
    return await service.list_all_schools()


@router.get("/with-students/{school_id}", response_model=SchoolWithStudents)
async def get_school_with_students(
    school_id: int,
    service: SchoolService = Depends(get_school_service),
) -> SchoolWithStudents:
    """Return the school's name, email and students."""
    return await service.get_school_with_students(school_id)
