"""
Test suite for the create_admin operator script.
"""

from contextlib import asynccontextmanager

import pytest

from backend.boundary.db.CRUD.user_crud import user_crud
from backend.boundary.db.models.user_model import UserRole
from backend.core.security import verify_password
from backend.scripts import create_admin as create_admin_script


@pytest.fixture
def script_session(test_async_db, monkeypatch):
    """Point the script's session factory at the test database."""

    @asynccontextmanager
    async def _session():
        yield test_async_db

    monkeypatch.setattr(create_admin_script, "get_async_session_factory", lambda: _session)
    return test_async_db


class TestCreateAdmin:
    """Admin bootstrap."""

    @pytest.mark.asyncio
    async def test_creates_new_admin(self, script_session) -> None:
        user = await create_admin_script.create_admin("Root@Example.com", "Root", "hunter22")

        stored = await user_crud.get_by_email(script_session, "root@example.com")
        assert stored.id == user.id
        assert stored.role == UserRole.ADMIN
        assert verify_password("hunter22", stored.password_hash)

    @pytest.mark.asyncio
    async def test_promotes_existing_account(self, script_session, make_user) -> None:
        existing = await make_user("instructor", email="teach@example.com")

        user = await create_admin_script.create_admin("teach@example.com", "Head Teacher", "newpass1")

        assert user.id == existing.id
        assert user.role == UserRole.ADMIN
        assert user.name == "Head Teacher"

    @pytest.mark.asyncio
    async def test_rejects_short_password(self, script_session) -> None:
        with pytest.raises(ValueError, match="at least 6 characters"):
            await create_admin_script.create_admin("root@example.com", "Root", "123")
