from typing import Dict, List, Optional

import pytest
from fastapi.testclient import TestClient

from school_service.app.clients.student_client import StudentClient
from school_service.app.core.config import Settings as SchoolSettings
from school_service.app.core.exceptions import RemoteCallError
from school_service.app.main import create_app as create_school_app
from school_service.app.repositories.school_store import InMemorySchoolStore
from school_service.app.schemas.student import Student
from student_service.app.core.config import Settings as StudentSettings
from student_service.app.main import create_app as create_student_app
from student_service.app.repositories.student_store import InMemoryStudentStore


class StubStudentClient(StudentClient):
    """Student client answering from a dict and recording every lookup."""

    def __init__(self) -> None:
        self.students: Dict[int, List[Student]] = {}
        self.calls: List[int] = []
        self.error: Optional[RemoteCallError] = None
        self.closed = False

    def add(self, school_id: int, **fields) -> Student:
        student_id = sum(len(rows) for rows in self.students.values()) + 1
        student = Student(id=student_id, school_id=school_id, **fields)
        self.students.setdefault(school_id, []).append(student)
        return student

    def find_all_students_by_school(self, school_id: int) -> List[Student]:
        self.calls.append(school_id)
        if self.error is not None:
            raise self.error
        return list(self.students.get(school_id, []))

    def close(self) -> None:
        self.closed = True


@pytest.fixture(name="student_store")
def student_store_fixture():
    return InMemoryStudentStore()


@pytest.fixture(name="student_client")
def student_client_fixture(student_store: InMemoryStudentStore):
    """Test client for the Student Service backed by an in-memory store."""
    app = create_student_app(settings=StudentSettings(), store=student_store)
    with TestClient(app) as client:
        yield client


@pytest.fixture(name="school_store")
def school_store_fixture():
    return InMemorySchoolStore()


@pytest.fixture(name="stub_students")
def stub_students_fixture():
    return StubStudentClient()


@pytest.fixture(name="school_client")
def school_client_fixture(school_store: InMemorySchoolStore, stub_students: StubStudentClient):
    """Test client for the School Service with a stubbed Student Service."""
    app = create_school_app(settings=SchoolSettings(), store=school_store, client=stub_students)
    with TestClient(app) as client:
        yield client
