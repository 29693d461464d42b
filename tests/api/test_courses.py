from unittest.mock import AsyncMock
from uuid import uuid4

import pytest

from backend.api.deps.dependencies import get_course_service
from backend.boundary.db.models.course_model import CourseLevel
from backend.core.exceptions import ForbiddenError, NotFoundError


@pytest.fixture
def mock_course_service(client):
    service = AsyncMock()
    client.app.dependency_overrides[get_course_service] = lambda: service
    return service


def test_list_courses(client, mock_course_service, course_factory):
    mock_course_service.list_published.return_value = (
        [course_factory(title="Course 1"), course_factory(title="Course 2")],
        7,
    )

    response = client.get("/api/v1/courses", params={"level": "beginner", "search": "py", "limit": 2})

    assert response.status_code == 200
    data = response.json()["data"]
    assert data["total"] == 7
    assert [c["title"] for c in data["courses"]] == ["Course 1", "Course 2"]
    mock_course_service.list_published.assert_awaited_once_with(
        category_id=None,
        level=CourseLevel.BEGINNER,
        search="py",
        limit=2,
        offset=0,
    )


def test_list_courses_limit_out_of_range(client, mock_course_service):
    response = client.get("/api/v1/courses", params={"limit": 101})

    assert response.status_code == 400
    assert response.json()["errors"][0]["field"] == "limit"
    mock_course_service.list_published.assert_not_called()


def test_my_courses_requires_instructor(client, login_as, student, mock_course_service):
    login_as(student)

    response = client.get("/api/v1/courses/my")

    assert response.status_code == 403


def test_my_courses(client, login_as, instructor, mock_course_service, course_factory):
    login_as(instructor)
    mock_course_service.list_instructor_courses.return_value = [course_factory(published=False)]

    response = client.get("/api/v1/courses/my")

    assert response.status_code == 200
    assert response.json()["data"]["total"] == 1
    assert response.json()["data"]["courses"][0]["published"] is False


def test_get_course_anonymous(client, mock_course_service, course_factory):
    course = course_factory()
    mock_course_service.get_course.return_value = course

    response = client.get(f"/api/v1/courses/{course.id}")

    assert response.status_code == 200
    assert response.json()["data"]["instructor"]["name"] == "Instructor"
    mock_course_service.get_course.assert_awaited_once_with(course.id, None)


def test_get_draft_course_forbidden(client, mock_course_service):
    mock_course_service.get_course.side_effect = ForbiddenError("Unauthorized access")

    response = client.get(f"/api/v1/courses/{uuid4()}")

    assert response.status_code == 403
    assert response.json() == {"success": False, "message": "Unauthorized access"}


def test_get_course_invalid_id(client, mock_course_service):
    response = client.get("/api/v1/courses/not-a-uuid")

    assert response.status_code == 400
    assert response.json()["message"] == "Validation failed"


def test_create_course(client, login_as, instructor, mock_course_service, course_factory):
    login_as(instructor)
    mock_course_service.create_course.return_value = course_factory(published=False, price=49.0, is_free=False)

    response = client.post(
        "/api/v1/courses",
        json={"title": "Intro to Python", "price": 49, "level": "beginner"},
    )

    assert response.status_code == 201
    body = response.json()
    assert body["message"] == "Course created successfully"
    assert body["data"]["published"] is False
    args = mock_course_service.create_course.await_args
    assert args.args[0] is instructor
    assert args.kwargs["title"] == "Intro to Python"
    assert args.kwargs["is_free"] is None


def test_create_course_forbidden_for_student(client, login_as, student, mock_course_service):
    login_as(student)

    response = client.post("/api/v1/courses", json={"title": "Intro to Python"})

    assert response.status_code == 403
    mock_course_service.create_course.assert_not_called()


def test_create_course_negative_price(client, login_as, instructor, mock_course_service):
    login_as(instructor)

    response = client.post("/api/v1/courses", json={"title": "Intro to Python", "price": -1})

    assert response.status_code == 400
    assert response.json()["errors"][0]["field"] == "price"


def test_update_course_sends_only_provided_fields(client, login_as, instructor, mock_course_service, course_factory):
    login_as(instructor)
    course = course_factory(title="Advanced Python")
    mock_course_service.update_course.return_value = course

    response = client.put(
        f"/api/v1/courses/{course.id}",
        json={"title": "Advanced Python", "category_id": None},
    )

    assert response.status_code == 200
    mock_course_service.update_course.assert_awaited_once_with(
        course.id, instructor, {"title": "Advanced Python", "category_id": None}
    )


def test_update_course_not_owner(client, login_as, instructor, mock_course_service):
    login_as(instructor)
    mock_course_service.update_course.side_effect = ForbiddenError(
        "Only the course instructor can update this course"
    )

    response = client.put(f"/api/v1/courses/{uuid4()}", json={"title": "Hijacked"})

    assert response.status_code == 403


def test_publish_course(client, login_as, instructor, mock_course_service, course_factory):
    login_as(instructor)
    course = course_factory(published=True)
    mock_course_service.set_published.return_value = course

    response = client.patch(f"/api/v1/courses/{course.id}/publish", json={"published": True})

    assert response.status_code == 200
    assert response.json()["message"] == "Course published successfully"
    mock_course_service.set_published.assert_awaited_once_with(course.id, instructor, True)


def test_delete_course_not_found(client, login_as, instructor, mock_course_service):
    login_as(instructor)
    mock_course_service.delete_course.side_effect = NotFoundError("Course not found")

    response = client.delete(f"/api/v1/courses/{uuid4()}")

    assert response.status_code == 404
    assert response.json()["message"] == "Course not found"


def test_unexpected_failure_is_reported_without_internals(client, mock_course_service):
    mock_course_service.list_published.side_effect = RuntimeError("connection pool exhausted")

    response = client.get("/api/v1/courses")

    assert response.status_code == 500
    assert response.json() == {"success": False, "message": "Failed to fetch courses"}
