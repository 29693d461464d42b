from unittest.mock import AsyncMock

import pytest

from backend.api.deps.dependencies import get_auth_service
from backend.boundary.db.models.user_model import UserRole
from backend.core.exceptions import AuthenticationError, ConflictError


@pytest.fixture
def auth_service(client, mock_auth_service):
    client.app.dependency_overrides[get_auth_service] = lambda: mock_auth_service
    return mock_auth_service


def test_register_returns_token(client, auth_service, instructor):
    auth_service.register = AsyncMock(return_value=(instructor, "signed-token"))

    response = client.post(
        "/api/v1/auth/register",
        json={
            "name": "Instructor",
            "email": "instructor@example.com",
            "password": "secret1",
            "role": "instructor",
        },
    )

    assert response.status_code == 201
    body = response.json()
    assert body["success"] is True
    assert body["data"]["access_token"] == "signed-token"
    assert body["data"]["token_type"] == "bearer"
    assert body["data"]["user"]["role"] == "instructor"
    assert "password_hash" not in body["data"]["user"]
    assert auth_service.register.await_args.kwargs["role"] == UserRole.INSTRUCTOR


def test_register_rejects_admin_role(client, auth_service):
    response = client.post(
        "/api/v1/auth/register",
        json={"name": "Mallory", "email": "m@example.com", "password": "secret1", "role": "admin"},
    )

    assert response.status_code == 400
    body = response.json()
    assert body["message"] == "Validation failed"
    assert body["errors"][0]["field"] == "role"


def test_register_duplicate_email(client, auth_service):
    auth_service.register = AsyncMock(side_effect=ConflictError("Email is already registered"))

    response = client.post(
        "/api/v1/auth/register",
        json={"name": "Student", "email": "s@example.com", "password": "secret1"},
    )

    assert response.status_code == 409
    assert response.json() == {"success": False, "message": "Email is already registered"}


def test_login_bad_credentials(client, auth_service):
    auth_service.login = AsyncMock(side_effect=AuthenticationError("Invalid email or password"))

    response = client.post(
        "/api/v1/auth/login", json={"email": "s@example.com", "password": "wrong"}
    )

    assert response.status_code == 401
    assert response.json()["message"] == "Invalid email or password"


def test_me_requires_token(client):
    response = client.get("/api/v1/auth/me")

    assert response.status_code == 401
    assert response.json() == {"success": False, "message": "Authentication required"}


def test_me_resolves_bearer_token(client, auth_service, student):
    auth_service.resolve_token.side_effect = None
    auth_service.resolve_token.return_value = student

    response = client.get("/api/v1/auth/me", headers={"Authorization": "Bearer good-token"})

    assert response.status_code == 200
    assert response.json()["data"]["email"] == student.email
    auth_service.resolve_token.assert_awaited_once_with("good-token")


def test_me_rejects_invalid_token(client):
    response = client.get("/api/v1/auth/me", headers={"Authorization": "Bearer garbage"})

    assert response.status_code == 401
    assert response.json()["message"] == "Invalid or expired token"


@pytest.mark.parametrize("email", ["a@b..c", "a@-x.com", "<a>@x.com", "no-at-sign.com"])
def test_register_rejects_malformed_email(client, auth_service, email):
    auth_service.register = AsyncMock(side_effect=AssertionError("service must not be reached"))

    response = client.post(
        "/api/v1/auth/register",
        json={"name": "Student", "email": email, "password": "secret1"},
    )

    assert response.status_code == 400
    body = response.json()
    assert body["message"] == "Validation failed"
    assert body["errors"][0]["field"] == "email"
    auth_service.register.assert_not_called()


def test_login_rejects_malformed_email(client, auth_service):
    response = client.post("/api/v1/auth/login", json={"email": "a@b..c", "password": "secret1"})

    assert response.status_code == 400
    assert response.json()["errors"][0]["field"] == "email"
    auth_service.login.assert_not_called()
