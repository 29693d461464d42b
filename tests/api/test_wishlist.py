from types import SimpleNamespace
from unittest.mock import AsyncMock
from uuid import uuid4

import pytest

from backend.api.deps.dependencies import get_wishlist_service
from backend.core.exceptions import ConflictError, NotFoundError


@pytest.fixture
def mock_wishlist_service(client):
    service = AsyncMock()
    client.app.dependency_overrides[get_wishlist_service] = lambda: service
    return service


def test_wishlist_requires_authentication(client, mock_wishlist_service):
    response = client.get("/api/v1/wishlist")

    assert response.status_code == 401


def test_empty_wishlist_when_none_exists(client, login_as, student, mock_wishlist_service):
    login_as(student)
    mock_wishlist_service.get_wishlist.return_value = None

    response = client.get("/api/v1/wishlist")

    assert response.status_code == 200
    assert response.json()["data"] == {"user_id": str(student.id), "courses": []}


def test_get_wishlist(client, login_as, student, mock_wishlist_service, course_factory):
    login_as(student)
    mock_wishlist_service.get_wishlist.return_value = SimpleNamespace(
        user_id=student.id, courses=[course_factory(title="Rust Basics")]
    )

    response = client.get("/api/v1/wishlist")

    assert response.status_code == 200
    assert response.json()["data"]["courses"][0]["title"] == "Rust Basics"


def test_add_to_wishlist(client, login_as, student, mock_wishlist_service, course_factory):
    login_as(student)
    course = course_factory()
    mock_wishlist_service.add_course.return_value = SimpleNamespace(user_id=student.id, courses=[course])

    response = client.post("/api/v1/wishlist", json={"course_id": str(course.id)})

    assert response.status_code == 201
    assert response.json()["message"] == "Course added to wishlist"
    mock_wishlist_service.add_course.assert_awaited_once_with(student, course.id)


def test_add_duplicate_to_wishlist(client, login_as, student, mock_wishlist_service):
    login_as(student)
    mock_wishlist_service.add_course.side_effect = ConflictError("Course already in wishlist")

    response = client.post("/api/v1/wishlist", json={"course_id": str(uuid4())})

    assert response.status_code == 409
    assert response.json() == {"success": False, "message": "Course already in wishlist"}


def test_add_invalid_course_id(client, login_as, student, mock_wishlist_service):
    login_as(student)

    response = client.post("/api/v1/wishlist", json={"course_id": "abc"})

    assert response.status_code == 400


def test_remove_missing_course(client, login_as, student, mock_wishlist_service):
    login_as(student)
    mock_wishlist_service.remove_course.side_effect = NotFoundError("Course not in wishlist")

    response = client.delete(f"/api/v1/wishlist/{uuid4()}")

    assert response.status_code == 404
    assert response.json()["message"] == "Course not in wishlist"


def test_check_wishlist(client, login_as, student, mock_wishlist_service):
    login_as(student)
    mock_wishlist_service.is_in_wishlist.return_value = False

    response = client.get(f"/api/v1/wishlist/check/{uuid4()}")

    assert response.json()["data"] == {"is_in_wishlist": False}


@pytest.mark.parametrize(
    "removed, message",
    [
        (None, "Wishlist is already empty"),
        (3, "Wishlist cleared (3 items removed)"),
    ],
)
def test_clear_wishlist(client, login_as, student, mock_wishlist_service, removed, message):
    login_as(student)
    mock_wishlist_service.clear.return_value = removed

    response = client.delete("/api/v1/wishlist")

    assert response.status_code == 200
    assert response.json()["message"] == message
