from fastapi.testclient import TestClient

from school_service.app.core.exceptions import RemoteCallError


def _create(client: TestClient, **school) -> None:
    response = client.post("/api/v1/schools/", json=school)
    assert response.status_code == 201
    assert response.content == b""


def test_create_school_then_list_includes_it(school_client: TestClient):
    _create(school_client, name="Springfield High", email="office@springfield.edu")
    _create(school_client, name="Shelbyville High", email="office@shelbyville.edu")

    response = school_client.get("/api/v1/schools/")
    assert response.status_code == 200
    assert response.json() == [
        {"id": 1, "name": "Springfield High", "email": "office@springfield.edu"},
        {"id": 2, "name": "Shelbyville High", "email": "office@shelbyville.edu"},
    ]


def test_client_supplied_school_id_is_ignored(school_client: TestClient):
    _create(school_client, id=10, name="Springfield High", email="a@b.c")

    assert [s["id"] for s in school_client.get("/api/v1/schools/").json()] == [1]


def test_with_students_for_school_without_students(school_client: TestClient, stub_students):
    _create(school_client, name="Springfield High", email="office@springfield.edu")

    response = school_client.get("/api/v1/schools/with-students/1")
    assert response.status_code == 200
    assert response.json() == {
        "name": "Springfield High",
        "email": "office@springfield.edu",
        "students": [],
    }
    assert stub_students.calls == [1]


def test_with_students_includes_remote_students(school_client: TestClient, stub_students):
    _create(school_client, name="Springfield High", email="office@springfield.edu")
    stub_students.add(1, firstname="Bart", lastname="Simpson", email="bart@example.com")
    stub_students.add(1, firstname="Lisa", lastname="Simpson", email="lisa@example.com")

    body = school_client.get("/api/v1/schools/with-students/1").json()
    assert body["name"] == "Springfield High"
    assert body["students"] == [
        {"id": 1, "firstname": "Bart", "lastname": "Simpson", "email": "bart@example.com", "schoolId": 1},
        {"id": 2, "firstname": "Lisa", "lastname": "Simpson", "email": "lisa@example.com", "schoolId": 1},
    ]


def test_unknown_school_uses_placeholder_and_still_fetches_students(
    school_client: TestClient, stub_students
):
    stub_students.add(5, firstname="Milhouse")

    response = school_client.get("/api/v1/schools/with-students/5")
    assert response.status_code == 200
    body = response.json()
    assert body["name"] == "NotFound"
    assert body["email"] == "NotFound"
    assert [s["firstname"] for s in body["students"]] == ["Milhouse"]
    assert stub_students.calls == [5]


def test_unknown_school_without_students(school_client: TestClient):
    response = school_client.get("/api/v1/schools/with-students/404")
    assert response.status_code == 200
    assert response.json() == {"name": "NotFound", "email": "NotFound", "students": []}


def test_remote_failure_fails_the_whole_request(school_client: TestClient, stub_students):
    _create(school_client, name="Springfield High", email="office@springfield.edu")
    stub_students.error = RemoteCallError("connection refused")

    response = school_client.get("/api/v1/schools/with-students/1")
    assert response.status_code == 502
    body = response.json()
    assert "students" not in body
    assert body["detail"] == "Student service call failed: connection refused"


def test_with_students_rejects_non_integer_id(school_client: TestClient, stub_students):
    response = school_client.get("/api/v1/schools/with-students/abc")
    assert response.status_code == 422
    assert stub_students.calls == []


def test_repeated_listing_is_stable(school_client: TestClient):
    _create(school_client, name="Springfield High", email="office@springfield.edu")

    assert school_client.get("/api/v1/schools/").json() == school_client.get("/api/v1/schools/").json()


def test_shutdown_closes_student_client(school_store, stub_students):
    from school_service.app.core.config import Settings
    from school_service.app.main import create_app

    app = create_app(settings=Settings(), store=school_store, client=stub_students)
    with TestClient(app):
        assert stub_students.closed is False
    assert stub_students.closed is True


def test_collection_is_served_without_trailing_slash(school_client: TestClient):
    created = school_client.post(
        "/api/v1/schools", json={"name": "Springfield High", "email": "s@x"}, follow_redirects=False
    )
    assert created.status_code == 201

    listed = school_client.get("/api/v1/schools", follow_redirects=False)
    assert listed.status_code == 200
    assert listed.json() == [{"id": 1, "name": "Springfield High", "email": "s@x"}]
