from datetime import datetime, timezone
from types import SimpleNamespace
from unittest.mock import AsyncMock
from uuid import uuid4

import pytest

from backend.api.deps.dependencies import get_section_service
from backend.core.exceptions import ForbiddenError


def _section(course_id, order: int, title: str | None = None):
    now = datetime.now(timezone.utc)
    return SimpleNamespace(
        id=uuid4(),
        title=title or f"Section {order}",
        order=order,
        course_id=course_id,
        created_at=now,
        updated_at=now,
    )


@pytest.fixture
def mock_section_service(client):
    service = AsyncMock()
    client.app.dependency_overrides[get_section_service] = lambda: service
    return service


def test_list_sections(client, mock_section_service):
    course_id = uuid4()
    mock_section_service.list_sections.return_value = [_section(course_id, 0), _section(course_id, 1)]

    response = client.get(f"/api/v1/courses/{course_id}/sections")

    assert response.status_code == 200
    assert [s["order"] for s in response.json()["data"]] == [0, 1]
    mock_section_service.list_sections.assert_awaited_once_with(course_id, None)


def test_create_section(client, login_as, instructor, mock_section_service):
    login_as(instructor)
    course_id = uuid4()
    mock_section_service.create_section.return_value = _section(course_id, 0, "Getting Started")

    response = client.post(f"/api/v1/courses/{course_id}/sections", json={"title": "Getting Started"})

    assert response.status_code == 201
    assert response.json()["data"]["title"] == "Getting Started"
    mock_section_service.create_section.assert_awaited_once_with(
        course_id, instructor, title="Getting Started", order=None
    )


def test_create_section_title_too_short(client, login_as, instructor, mock_section_service):
    login_as(instructor)

    response = client.post(f"/api/v1/courses/{uuid4()}/sections", json={"title": "Hi"})

    assert response.status_code == 400


def test_reorder_sections(client, login_as, instructor, mock_section_service):
    login_as(instructor)
    course_id = uuid4()
    sections = [_section(course_id, 0), _section(course_id, 1)]
    mock_section_service.reorder_sections.return_value = sections

    response = client.put(
        f"/api/v1/courses/{course_id}/sections/reorder",
        json={"section_ids": [str(s.id) for s in sections]},
    )

    assert response.status_code == 200
    assert response.json()["message"] == "Sections reordered successfully"
    mock_section_service.reorder_sections.assert_awaited_once_with(
        course_id, instructor, [s.id for s in sections]
    )


def test_reorder_sections_requires_ids(client, login_as, instructor, mock_section_service):
    login_as(instructor)

    response = client.put(f"/api/v1/courses/{uuid4()}/sections/reorder", json={"section_ids": []})

    assert response.status_code == 400
    assert response.json()["errors"][0]["field"] == "section_ids"


def test_delete_section_not_owner(client, login_as, student, mock_section_service):
    login_as(student)
    mock_section_service.delete_section.side_effect = ForbiddenError(
        "Only the course instructor can delete sections"
    )

    response = client.delete(f"/api/v1/sections/{uuid4()}")

    assert response.status_code == 403
    assert response.json()["message"] == "Only the course instructor can delete sections"
