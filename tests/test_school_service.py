import asyncio

import pytest

from school_service.app.core.exceptions import RemoteCallError
from school_service.app.repositories.school_store import InMemorySchoolStore
from school_service.app.schemas.school import SchoolCreate
from school_service.app.services.school_service import NOT_FOUND_PLACEHOLDER, SchoolService


@pytest.fixture(name="service")
def service_fixture(stub_students):
    return SchoolService(InMemorySchoolStore(), stub_students)


def test_create_school_assigns_identifier(service: SchoolService):
    created = asyncio.run(service.create_school(SchoolCreate(id=99, name="Springfield", email="s@x")))

    assert created.id == 1
    assert asyncio.run(service.list_all_schools()) == [created]


def test_view_for_existing_school(service: SchoolService, stub_students):
    asyncio.run(service.create_school(SchoolCreate(name="Springfield", email="s@x")))
    bart = stub_students.add(1, firstname="Bart")

    view = asyncio.run(service.get_school_with_students(1))

    assert view.name == "Springfield"
    assert view.email == "s@x"
    assert view.students == [bart]


def test_view_for_missing_school_uses_placeholder(service: SchoolService, stub_students):
    milhouse = stub_students.add(3, firstname="Milhouse")

    view = asyncio.run(service.get_school_with_students(3))

    assert view.name == NOT_FOUND_PLACEHOLDER
    assert view.email == NOT_FOUND_PLACEHOLDER
    assert view.students == [milhouse]
    assert stub_students.calls == [3]


def test_remote_error_propagates(service: SchoolService, stub_students):
    asyncio.run(service.create_school(SchoolCreate(name="Springfield", email="s@x")))
    stub_students.error = RemoteCallError("boom", status_code=500)

    with pytest.raises(RemoteCallError) as excinfo:
        asyncio.run(service.get_school_with_students(1))

    assert excinfo.value.status_code == 500
