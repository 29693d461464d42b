"""
Course CRUD operations.

Provides Create, Read, Update, Delete operations for CourseModel
with catalogue search and instructor-scoped queries.

Dependencies: sqlalchemy, backend.boundary.db.models
System role: Course persistence operations
"""

from typing import Sequence
from uuid import UUID

from sqlalchemy import Select, func, select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload

from backend.boundary.db.models.course_model import CourseLevel, CourseModel
from backend.boundary.db.CRUD.base_crud import BaseCRUD

# Relations every course response needs; async sessions cannot lazy-load.
COURSE_RELATIONS = (
    selectinload(CourseModel.instructor),
    selectinload(CourseModel.category),
)


class CourseCRUD(BaseCRUD[CourseModel]):
    """
    CRUD operations for CourseModel.

    Extends BaseCRUD with catalogue filtering and eager loading of
    instructor and category.
    """

    def __init__(self) -> None:
        """Initialize CourseCRUD with CourseModel."""
        super().__init__(CourseModel)

    async def get_with_relations(
        self,
        session: AsyncSession,
        id: UUID,
        populate_existing: bool = False,
    ) -> CourseModel | None:
        """
        Retrieve course with instructor and category loaded.

        Args:
            session: Async database session
            id: Course UUID
            populate_existing: Reload a course already in the session after changes

        Returns:
            CourseModel with relations loaded, None if not found
        """
        return await self.get_by_id(
            session, id, options=COURSE_RELATIONS, populate_existing=populate_existing
        )

    def _published_filter(
        self,
        stmt: Select,
        category_id: UUID | None,
        level: CourseLevel | None,
        search: str | None,
    ) -> Select:
        stmt = stmt.where(CourseModel.published.is_(True))
        if category_id is not None:
            stmt = stmt.where(CourseModel.category_id == category_id)
        if level is not None:
            stmt = stmt.where(CourseModel.level == level)
        if search:
            stmt = stmt.where(func.lower(CourseModel.title).contains(search.lower()))
        return stmt

    async def get_published(
        self,
        session: AsyncSession,
        category_id: UUID | None = None,
        level: CourseLevel | None = None,
        search: str | None = None,
        limit: int | None = None,
        offset: int = 0,
    ) -> Sequence[CourseModel]:
        """
        Retrieve published courses matching the catalogue filters, newest first.

        Args:
            session: Async database session
            category_id: Restrict to one category
            level: Restrict to one difficulty level
            search: Case-insensitive substring of the title
            limit: Maximum number of courses to return
            offset: Number of courses to skip

        Returns:
            Sequence of CourseModels with relations loaded
        """
        stmt = self._published_filter(
            select(CourseModel), category_id, level, search
        ).options(*COURSE_RELATIONS).order_by(CourseModel.created_at.desc()).offset(offset)
        if limit is not None:
            stmt = stmt.limit(limit)
        result = await session.execute(stmt)
        return result.scalars().all()

    async def count_published(
        self,
        session: AsyncSession,
        category_id: UUID | None = None,
        level: CourseLevel | None = None,
        search: str | None = None,
    ) -> int:
        """Count published courses matching the catalogue filters."""
        stmt = self._published_filter(
            select(func.count(CourseModel.id)), category_id, level, search
        )
        result = await session.execute(stmt)
        return result.scalar_one()

    async def get_by_instructor(
        self,
        session: AsyncSession,
        instructor_id: UUID,
    ) -> Sequence[CourseModel]:
        """Retrieve every course taught by an instructor, newest first."""
        stmt = (
            select(CourseModel)
            .where(CourseModel.instructor_id == instructor_id)
            .options(*COURSE_RELATIONS)
            .order_by(CourseModel.created_at.desc())
        )
        result = await session.execute(stmt)
        return result.scalars().all()

    async def get_slugs_like(self, session: AsyncSession, base: str) -> set[str]:
        """
        Collect existing slugs equal to ``base`` or starting with ``base-``.

        Args:
            session: Async database session
            base: Candidate slug

        Returns:
            set[str]: Slugs already taken in that family
        """
        stmt = select(CourseModel.slug).where(
            (CourseModel.slug == base) | CourseModel.slug.startswith(f"{base}-")
        )
        result = await session.execute(stmt)
        return set(result.scalars().all())


course_crud = CourseCRUD()
