"""
API test fixtures.

Builds the app with services mocked through dependency_overrides and
in-memory stand-ins for authenticated users and response objects.

Dependencies: pytest, fastapi
System role: HTTP layer test infrastructure
"""

from datetime import datetime, timezone
from types import SimpleNamespace
from unittest.mock import AsyncMock
from uuid import uuid4

import pytest
from fastapi.testclient import TestClient

from backend.api.deps.dependencies import (
    get_auth_service,
    get_current_user,
    get_optional_user,
)
from backend.api.main import create_app
from backend.boundary.db.models.course_model import CourseLevel
from backend.boundary.db.models.user_model import UserModel, UserRole
from backend.core.exceptions import AuthenticationError


def _user(role: UserRole, name: str) -> UserModel:
    return UserModel(
        id=uuid4(),
        name=name,
        email=f"{name.lower()}@example.com",
        password_hash="not-a-real-hash",
        role=role,
        avatar=None,
        created_at=datetime.now(timezone.utc),
        updated_at=datetime.now(timezone.utc),
    )


@pytest.fixture
def mock_auth_service():
    """AuthService mock rejecting every token unless a test says otherwise."""
    service = AsyncMock()
    service.resolve_token.side_effect = AuthenticationError("Invalid or expired token")
    return service


@pytest.fixture
def client(mock_auth_service):
    app = create_app()
    app.dependency_overrides[get_auth_service] = lambda: mock_auth_service
    return TestClient(app)


@pytest.fixture
def student() -> UserModel:
    return _user(UserRole.STUDENT, "Student")


@pytest.fixture
def instructor() -> UserModel:
    return _user(UserRole.INSTRUCTOR, "Instructor")


@pytest.fixture
def admin() -> UserModel:
    return _user(UserRole.ADMIN, "Admin")


@pytest.fixture
def login_as(client):
    """
    Authenticate subsequent requests as ``user``.

    Usage:
        login_as(instructor)
    """

    def _login_as(user: UserModel) -> UserModel:
        client.app.dependency_overrides[get_current_user] = lambda: user
        client.app.dependency_overrides[get_optional_user] = lambda: user
        return user

    return _login_as


@pytest.fixture
def course_factory(instructor):
    """Build course-shaped objects accepted by the course response schemas."""

    def _course(**fields):
        now = datetime.now(timezone.utc)
        values = {
            "id": uuid4(),
            "title": "Intro to Python",
            "slug": "intro-to-python",
            "description": "Learn Python",
            "thumbnail": None,
            "price": 0.0,
            "is_free": True,
            "level": CourseLevel.BEGINNER,
            "published": True,
            "rating": 0.0,
            "rating_count": 0,
            "instructor_id": instructor.id,
            "instructor": SimpleNamespace(id=instructor.id, name=instructor.name, avatar=None),
            "category": None,
            "created_at": now,
            "updated_at": now,
        }
        values.update(fields)
        return SimpleNamespace(**values)

    return _course
