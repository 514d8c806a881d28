"""
Business logic for schools.

``SchoolService`` stores and lists schools, and assembles the view of
one school with its students.  The students are owned by the
Student Service and fetched through a :class:`StudentClient` on every
request.
"""

import logging
from typing import List

from fastapi.concurrency import run_in_threadpool

from ..clients.student_client import StudentClient
from ..repositories.school_store import SchoolStore
from ..schemas.school import SchoolCreate, SchoolRead, SchoolWithStudents


logger = logging.getLogger(__name__)

NOT_FOUND_PLACEHOLDER = "NotFound"


class SchoolService:
    """Service for managing schools and building their student view."""

    def __init__(self, store: SchoolStore, student_client: StudentClient) -> None:
        self.store = store
        self.student_client = student_client

    async def create_school(self, data: SchoolCreate) -> SchoolRead:
        """Persist a new school; the store assigns the identifier."""
        school = self.store.save(data)
        logger.info("Created school %s", school.id)
        return school

    async def list_all_schools(self) -> List[SchoolRead]:
        return self.store.find_all()

    async def get_school_with_students(self, school_id: int) -> SchoolWithStudents:
        """Return the school's name and email together with its students.

        A missing school is not an error: its name and email are
        reported as ``"NotFound"``.  The Student Service is asked for
        the students of ``school_id`` in either case, so an unknown
        school can still come back with students attached.

        Raises:
            RemoteCallError: if the students could not be fetched.  No
                partial view is returned.
        """
        school = self.store.find_by_id(school_id)
        if school is None:
            logger.info("School %s not found, using placeholder", school_id)
            name = email = NOT_FOUND_PLACEHOLDER
        else:
            name, email = school.name, school.email

        # The client blocks on network I/O.
        students = await run_in_threadpool(
            self.student_client.find_all_students_by_school, school_id
        )
        return SchoolWithStudents(name=name, email=email, students=students)
