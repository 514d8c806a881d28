"""
Business logic for students.

``StudentService`` receives its store at construction time; the
application factory decides whether that is the SQLite store or an
in‑memory one.
"""

import logging
from typing import List

from ..repositories.student_store import StudentStore
from ..schemas.student import StudentCreate, StudentRead


logger = logging.getLogger(__name__)


class StudentService:
    """Service for creating and listing students."""

    def __init__(self, store: StudentStore) -> None:
        self.store = store

    async def create_student(self, data: StudentCreate) -> StudentRead:
        """Persist a new student; the store assigns the identifier."""
        student = self.store.save(data)
        logger.info("Created student %s for school %s", student.id, student.school_id)
        return student

    async def list_all_students(self) -> List[StudentRead]:
        return self.store.find_all()

    async def list_students_by_school(self, school_id: int) -> List[StudentRead]:
        """Return the students attached to ``school_id``.

        An empty list is returned when no student references the
        school; whether the school exists is not checked here.
        """
        students = self.store.find_all_by_school_id(school_id)
        logger.debug("Found %d students for school %s", len(students), school_id)
        return students
