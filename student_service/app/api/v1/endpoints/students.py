"""
Student endpoints for API v1.

These routes create and list students.  ``GET /school/{school_id}``
is the lookup used by the School Service to collect the students of
one school; it returns an empty list rather than 404 when nothing
matches.
"""

from typing import List

from fastapi import APIRouter, Depends, Response, status

from student_service.app.api.dependencies import get_student_service
from student_service.app.schemas.student import StudentCreate, StudentRead
from student_service.app.services.student_service import StudentService


router = APIRouter()


@router.post("", status_code=status.HTTP_201_CREATED, response_class=Response)
@router.post("/", status_code=status.HTTP_201_CREATED, response_class=Response, include_in_schema=False)
async def create_student(
    student: StudentCreate,
    service: StudentService = Depends(get_student_service),
) -> Response:
    """Create a new student.  The response body is empty."""
    await service.create_student(student)
    return Response(status_code=status.HTTP_201_CREATED)


@router.get("", response_model=List[StudentRead])
@router.get("/", response_model=List[StudentRead], include_in_schema=False)
async def list_students(
    service: StudentService = Depends(get_student_service),
) -> List[StudentRead]:
    """Return all students in identifier order."""
    return await service.list_all_students()


@router.get("/school/{school_id}", response_model=List[StudentRead])
async def list_students_by_school(
    school_id: int,
    service: StudentService = Depends(get_student_service),
) -> List[StudentRead]:
    """Return the students whose ``schoolId`` equals ``school_id``."""
    return await service.list_students_by_school(school_id)
