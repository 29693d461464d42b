"""
Shared test fixtures and configuration for entire test suite.

Provides: In-memory async database, persisted entity factories
Dependencies: pytest, sqlalchemy, aiosqlite
System role: Test infrastructure and fixture management
"""

import uuid

import pytest


@pytest.fixture
async def test_async_db():
    """
    Create in-memory SQLite async database for testing.

    Foreign keys are enforced so ON DELETE rules behave as in PostgreSQL.

    Yields:
        AsyncSession: Test database session with cleanup (lazy imported to avoid settings issues)
    """
    from sqlalchemy.ext.asyncio import AsyncSession, create_async_engine, async_sessionmaker
    from sqlalchemy.pool import StaticPool
    from backend.boundary.db.base import Base
    from backend.boundary.db.connection import enable_sqlite_foreign_keys
    import backend.boundary.db.models  # noqa: F401

    # Use SQLite in-memory database for tests
    engine = create_async_engine(
        "sqlite+aiosqlite:///:memory:",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    enable_sqlite_foreign_keys(engine)

    # Create all tables
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    # Create session factory
    async_session = async_sessionmaker(
        engine,
        class_=AsyncSession,
        autoflush=False,
        expire_on_commit=False,
    )

    # Create session for test
    async with async_session() as session:
        yield session
        await session.rollback()

    # Cleanup
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)

    await engine.dispose()


@pytest.fixture
def make_user(test_async_db):
    """
    Factory persisting users.

    Returns:
        Callable: async (role="student", **fields) -> UserModel
    """
    from backend.boundary.db.CRUD.user_crud import user_crud
    from backend.boundary.db.models.user_model import UserRole

    async def _make_user(role: str = "student", **fields):
        suffix = uuid.uuid4().hex[:8]
        values = {
            "name": f"{role.title()} {suffix}",
            "email": f"{role}-{suffix}@example.com",
            "password_hash": "not-a-real-hash",
            "role": UserRole(role),
        }
        values.update(fields)
        return await user_crud.create(test_async_db, **values)

    return _make_user


@pytest.fixture
def make_course(test_async_db):
    """
    Factory persisting courses.

    Returns:
        Callable: async (instructor, published=True, **fields) -> CourseModel
    """
    from backend.boundary.db.CRUD.course_crud import course_crud

    async def _make_course(instructor, published: bool = True, **fields):
        suffix = uuid.uuid4().hex[:8]
        values = {
            "title": f"Course {suffix}",
            "slug": f"course-{suffix}",
            "price": 0,
            "is_free": True,
            "published": published,
            "instructor_id": instructor.id,
        }
        values.update(fields)
        return await course_crud.create(test_async_db, **values)

    return _make_course


@pytest.fixture
def make_section(test_async_db):
    """
    Factory persisting sections.

    Returns:
        Callable: async (course, order=0, **fields) -> SectionModel
    """
    from backend.boundary.db.CRUD.section_crud import section_crud

    async def _make_section(course, order: int = 0, **fields):
        values = {"title": f"Section {order}", "order": order, "course_id": course.id}
        values.update(fields)
        return await section_crud.create(test_async_db, **values)

    return _make_section


@pytest.fixture
def make_lecture(test_async_db):
    """
    Factory persisting lectures.

    Returns:
        Callable: async (section, order=0, is_preview=False, **fields) -> LectureModel
    """
    from backend.boundary.db.CRUD.lecture_crud import lecture_crud

    async def _make_lecture(section, order: int = 0, is_preview: bool = False, **fields):
        values = {
            "title": f"Lecture {order}",
            "order": order,
            "is_preview": is_preview,
            "section_id": section.id,
        }
        values.update(fields)
        return await lecture_crud.create(test_async_db, **values)

    return _make_lecture
