"""HTTP tests for the faculty-scoped read endpoints."""
from datetime import timedelta

import pytest
from google.api_core.exceptions import ServiceUnavailable

from backend.planner.config import get_settings
from backend.planner.main import app


@pytest.fixture
def catalogue(fake_db):
    fake_db.seed("faculties/F1/courses", "c1", {"name": "Algorithms", "programId": 3, "branchId": 10})
    fake_db.seed("faculties/F1/courses", "c2", {"name": "Databases", "programId": 4, "branchId": 11})
    fake_db.seed("faculties/F1/programs", "3", {"name": "Computer Science"})
    fake_db.seed("faculties/F1/branches", "10", {"name": "Software", "programId": 3})
    fake_db.seed("faculties/F1/branches", "11", {"name": "Data", "programId": 4})
    fake_db.seed("faculties/F1/events", "e1", {"title": "Algorithms lecture", "branchId": 10})
    fake_db.seed("faculties/F1/events", "e2", {"title": "Databases lab", "branchId": 11})
    fake_db.seed("faculties/F2/courses", "x1", {"name": "Anatomy", "programId": 3})
    return fake_db


def ids(resp):
    return sorted(item["id"] for item in resp.json()["result"])


class TestSessionRequired:
    def test_login_then_read(self, logged_in_client, catalogue):
        resp = logged_in_client.get("/courses/getAllForFaculty", params={"facultyId": "F1"})

        assert resp.status_code == 200
        assert ids(resp) == ["c1", "c2"]

    def test_without_cookie_is_unauthorized(self, logged_in_client, catalogue):
        logged_in_client.cookies.clear()

        resp = logged_in_client.get("/courses/getAllForFaculty", params={"facultyId": "F1"})

        assert resp.status_code == 401
        assert resp.json()["detail"] == "Unauthorized"

    def test_bearer_header_is_accepted(self, client, catalogue, token_service):
        token = token_service.issue("s1").token

        resp = client.get(
            "/programs/getAllForFaculty",
            params={"facultyId": "F1"},
            headers={"Authorization": f"Bearer {token}"},
        )

        assert resp.status_code == 200
        assert ids(resp) == ["3"]

    def test_expired_token_has_its_own_message(self, client, catalogue, expired_token):
        resp = client.get(
            "/courses/getAllForFaculty",
            params={"facultyId": "F1"},
            headers={"Authorization": f"Bearer {expired_token}"},
        )

        assert resp.status_code == 401
        assert resp.json()["detail"] == "Token has expired"

    def test_session_cookie_expires_after_one_hour(self, logged_in_client, catalogue, shift_clock):
        shift_clock(timedelta(minutes=59))
        assert logged_in_client.get("/courses/getAllForFaculty", params={"facultyId": "F1"}).status_code == 200

        shift_clock(timedelta(hours=1))
        resp = logged_in_client.get("/courses/getAllForFaculty", params={"facultyId": "F1"})

        assert resp.status_code == 401
        assert resp.json()["detail"] == "Token has expired"

    def test_garbage_token_is_unauthorized(self, client, catalogue):
        resp = client.get(
            "/courses/getAllForFaculty",
            params={"facultyId": "F1"},
            headers={"Authorization": "Bearer not.a.token"},
        )

        assert resp.status_code == 401
        assert resp.json()["detail"] == "Unauthorized"

    def test_auth_checked_before_parameters(self, client):
        assert client.get("/courses/getAllForFaculty").status_code == 401

    def test_header_only_transport_ignores_cookie(self, logged_in_client, catalogue, settings):
        app.dependency_overrides[get_settings] = lambda: settings.model_copy(update={"token_transport": "header"})

        resp = logged_in_client.get("/courses/getAllForFaculty", params={"facultyId": "F1"})

        assert resp.status_code == 401


class TestCourses:
    def test_get_one_by_id(self, logged_in_client, catalogue):
        resp = logged_in_client.get("/courses/getOneById", params={"facultyId": "F1", "courseId": "c2"})

        assert resp.status_code == 200
        assert resp.json()["result"] == {"id": "c2", "name": "Databases", "programId": 4, "branchId": 11}

    def test_get_one_by_id_missing_is_404(self, logged_in_client, catalogue):
        resp = logged_in_client.get("/courses/getOneById", params={"facultyId": "F1", "courseId": "nope"})
        assert resp.status_code == 404

    def test_other_faculty_item_is_not_visible(self, logged_in_client, catalogue):
        resp = logged_in_client.get("/courses/getOneById", params={"facultyId": "F1", "courseId": "x1"})
        assert resp.status_code == 404

    def test_get_all_for_program(self, logged_in_client, catalogue):
        resp = logged_in_client.get("/courses/getAllForProgram", params={"facultyId": "F1", "programId": "3"})

        assert resp.status_code == 200
        assert ids(resp) == ["c1"]

    def test_get_all_for_branch(self, logged_in_client, catalogue):
        resp = logged_in_client.get("/courses/getAllForBranch", params={"facultyId": "F1", "branchId": "11"})
        assert ids(resp) == ["c2"]

    def test_no_match_is_empty_list(self, logged_in_client, catalogue):
        resp = logged_in_client.get("/courses/getAllForProgram", params={"facultyId": "F1", "programId": "99"})

        assert resp.status_code == 200
        assert resp.json() == {"result": []}

    def test_unknown_faculty_is_empty_list(self, logged_in_client, catalogue):
        resp = logged_in_client.get("/courses/getAllForFaculty", params={"facultyId": "F9"})
        assert resp.json() == {"result": []}

    def test_missing_faculty_id(self, logged_in_client):
        resp = logged_in_client.get("/courses/getAllForFaculty")

        assert resp.status_code == 400
        assert resp.json()["detail"] == "No faculty ID sent"

    def test_missing_course_id(self, logged_in_client):
        resp = logged_in_client.get("/courses/getOneById", params={"facultyId": "F1"})

        assert resp.status_code == 400
        assert resp.json()["detail"] == "No course sent"

    def test_non_numeric_program_id(self, logged_in_client, catalogue):
        resp = logged_in_client.get("/courses/getAllForProgram", params={"facultyId": "F1", "programId": "abc"})
        assert resp.status_code == 400

    def test_out_of_range_program_id(self, logged_in_client, catalogue):
        resp = logged_in_client.get(
            "/courses/getAllForProgram", params={"facultyId": "F1", "programId": "99999999999999999999"}
        )
        assert resp.status_code == 400

    def test_store_failure_is_500(self, logged_in_client, catalogue):
        catalogue.fail_with = ServiceUnavailable("down")

        resp = logged_in_client.get("/courses/getAllForFaculty", params={"facultyId": "F1"})

        assert resp.status_code == 500
        assert resp.json()["detail"].startswith("Failed to find courses for faculty")

    def test_reads_never_write(self, logged_in_client, catalogue):
        logged_in_client.get("/courses/getAllForFaculty", params={"facultyId": "F1"})
        logged_in_client.get("/courses/getAllForProgram", params={"facultyId": "F1", "programId": "3"})
        assert catalogue.writes == []


class TestPrograms:
    def test_get_all_for_faculty(self, logged_in_client, catalogue):
        resp = logged_in_client.get("/programs/getAllForFaculty", params={"facultyId": "F1"})
        assert ids(resp) == ["3"]

    def test_get_one_by_id(self, logged_in_client, catalogue):
        resp = logged_in_client.get("/programs/getOneById", params={"facultyId": "F1", "programId": "3"})
        assert resp.json()["result"] == {"id": "3", "name": "Computer Science"}

    def test_missing_program_id(self, logged_in_client):
        resp = logged_in_client.get("/programs/getOneById", params={"facultyId": "F1"})

        assert resp.status_code == 400
        assert resp.json()["detail"] == "No program sent"


class TestBranches:
    def test_get_all_for_faculty(self, logged_in_client, catalogue):
        resp = logged_in_client.get("/branches/getAllForFaculty", params={"facultyId": "F1"})
        assert ids(resp) == ["10", "11"]

    def test_get_one_by_id(self, logged_in_client, catalogue):
        resp = logged_in_client.get("/branches/getOneById", params={"facultyId": "F1", "branchId": "10"})
        assert resp.json()["result"]["name"] == "Software"

    def test_get_all_for_program(self, logged_in_client, catalogue):
        resp = logged_in_client.get("/branches/getAllForProgram", params={"facultyId": "F1", "programId": "4"})
        assert ids(resp) == ["11"]

    def test_missing_branch_id(self, logged_in_client):
        resp = logged_in_client.get("/branches/getOneById", params={"facultyId": "F1"})

        assert resp.status_code == 400
        assert resp.json()["detail"] == "No branch sent"


class TestEvents:
    def test_get_all_for_faculty(self, logged_in_client, catalogue):
        resp = logged_in_client.get("/events/getAllForFaculty", params={"facultyId": "F1"})
        assert ids(resp) == ["e1", "e2"]

    def test_get_all_for_branch(self, logged_in_client, catalogue):
        resp = logged_in_client.get("/events/getAllForBranch", params={"facultyId": "F1", "branchId": "10"})
        assert [e["title"] for e in resp.json()["result"]] == ["Algorithms lecture"]

    def test_missing_branch_id(self, logged_in_client):
        resp = logged_in_client.get("/events/getAllForBranch", params={"facultyId": "F1"})
        assert resp.json()["detail"] == "No branch sent"
