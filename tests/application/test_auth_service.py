"""
Test suite for AuthService.

Runs registration, login and token resolution against an in-memory database.
"""

import uuid

import pytest

from backend.application.services.auth_service import AuthService
from backend.boundary.db.models.user_model import UserRole
from backend.core.exceptions import AuthenticationError, ConflictError
from backend.core.security import create_access_token


@pytest.fixture
def auth_service(test_async_db) -> AuthService:
    return AuthService(db=test_async_db)


class TestRegister:
    """Account creation."""

    @pytest.mark.asyncio
    async def test_register_hashes_password_and_issues_token(self, auth_service: AuthService) -> None:
        user, token = await auth_service.register("  Ada  ", "Ada@Example.com", "secret1")

        assert user.name == "Ada"
        assert user.email == "ada@example.com"
        assert user.role == UserRole.STUDENT
        assert user.password_hash != "secret1"
        assert (await auth_service.resolve_token(token)).id == user.id

    @pytest.mark.asyncio
    async def test_register_instructor(self, auth_service: AuthService) -> None:
        user, _ = await auth_service.register("Grace", "grace@example.com", "secret1", role=UserRole.INSTRUCTOR)

        assert user.role == UserRole.INSTRUCTOR

    @pytest.mark.asyncio
    async def test_register_duplicate_email_is_case_insensitive(self, auth_service: AuthService) -> None:
        await auth_service.register("Ada", "ada@example.com", "secret1")

        with pytest.raises(ConflictError):
            await auth_service.register("Other Ada", "ADA@example.com", "secret2")


class TestLogin:
    """Credential checks."""

    @pytest.mark.asyncio
    async def test_login_success(self, auth_service: AuthService) -> None:
        registered, _ = await auth_service.register("Ada", "ada@example.com", "secret1")

        user, token = await auth_service.login("ada@example.com", "secret1")

        assert user.id == registered.id
        assert token

    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        "email, password",
        [("ada@example.com", "wrong-password"), ("nobody@example.com", "secret1")],
    )
    async def test_login_failure(self, auth_service: AuthService, email: str, password: str) -> None:
        await auth_service.register("Ada", "ada@example.com", "secret1")

        with pytest.raises(AuthenticationError, match="Invalid email or password"):
            await auth_service.login(email, password)


class TestResolveToken:
    """Bearer token resolution."""

    @pytest.mark.asyncio
    async def test_token_for_deleted_user(self, auth_service: AuthService) -> None:
        token = create_access_token(str(uuid.uuid4()), "student")

        with pytest.raises(AuthenticationError):
            await auth_service.resolve_token(token)

    @pytest.mark.asyncio
    async def test_token_with_malformed_subject(self, auth_service: AuthService) -> None:
        token = create_access_token("not-a-uuid", "student")

        with pytest.raises(AuthenticationError, match="Invalid or expired token"):
            await auth_service.resolve_token(token)

    @pytest.mark.asyncio
    async def test_garbage_token(self, auth_service: AuthService) -> None:
        with pytest.raises(AuthenticationError):
            await auth_service.resolve_token("not.a.jwt")
