from unittest.mock import MagicMock

from conftest import add_course, sign_up, make_session
from learning_portal.application.backend import BackendError, UNIQUE_VIOLATION
from learning_portal.application.dto import INFO, ERROR, SUCCESS
from learning_portal.application.use_cases.enroll_in_course import (
    EnrollInCourse, CREATED, DUPLICATE, FAILED, ALREADY_ENROLLED,
)
from learning_portal.domain.entities import Course

PYTHON = Course(id="course-1", name="Python", slug="python")


def test_enroll_success(client, db_factory):
    add_course(db_factory, "python", "Python")
    sign_up(client)

    response = client.post("/course/python/enroll")
    assert response.status_code == 201
    assert response.json() == {
        "result": "created",
        "notice": {"level": "success", "message": "Enrolled in Python!"},
    }

    dashboard = client.get("/dashboard").json()
    assert dashboard["heading"] == "Enrolled Courses (1)"
    assert dashboard["enrollments"][0]["course"]["slug"] == "python"


def test_enroll_twice_keeps_single_row(client, db_factory, sql_backend):
    """Повторная запись: info-уведомление, строка в БД одна"""
    add_course(db_factory, "python", "Python")
    sign_up(client)
    assert client.post("/course/python/enroll").status_code == 201

    response = client.post("/course/python/enroll")
    assert response.status_code == 200
    assert response.json() == {
        "result": "duplicate",
        "notice": {"level": "info", "message": "You're already enrolled in this course!"},
    }
    assert client.get("/dashboard").json()["heading"] == "Enrolled Courses (1)"


def test_enroll_other_store_error(mock_client):
    """Любая другая ошибка вставки -> общее сообщение"""
    client, backend = mock_client
    backend.get_course_by_slug.return_value = PYTHON
    backend.insert_enrollment.side_effect = BackendError("permission denied for table enrollments", code="42501")

    response = client.post("/course/python/enroll")
    assert response.status_code == 502
    assert response.json() == {
        "result": "failed",
        "notice": {"level": "error", "message": "Failed to enroll in course"},
    }
    backend.insert_enrollment.assert_called_once_with("user-1", "course-1")


def test_enroll_unknown_course(mock_client):
    client, backend = mock_client
    backend.get_course_by_slug.return_value = None

    response = client.post("/course/cobol/enroll")
    assert response.status_code == 404
    assert response.json()["notice"]["message"] == "Course not found"
    backend.insert_enrollment.assert_not_called()


def test_enroll_use_case_created():
    data = MagicMock()
    outcome = EnrollInCourse(data).execute(make_session(), PYTHON)
    assert outcome.result == CREATED
    assert outcome.notice.level == SUCCESS
    data.insert_enrollment.assert_called_once_with("user-1", "course-1")


def test_enroll_use_case_duplicate_is_not_retried():
    data = MagicMock()
    data.insert_enrollment.side_effect = BackendError("duplicate key", code=UNIQUE_VIOLATION, status=409)

    outcome = EnrollInCourse(data).execute(make_session(), PYTHON)
    assert outcome.result == DUPLICATE
    assert outcome.notice.level == INFO
    assert outcome.notice.message == ALREADY_ENROLLED
    assert data.insert_enrollment.call_count == 1


def test_enroll_use_case_failure():
    data = MagicMock()
    data.insert_enrollment.side_effect = BackendError("down", code="backend_unavailable", status=503)

    outcome = EnrollInCourse(data).execute(make_session(), PYTHON)
    assert outcome.result == FAILED
    assert outcome.notice.level == ERROR
