"""
Enrollment CRUD operations.

Dependencies: sqlalchemy, backend.boundary.db.models
System role: Course access and progress persistence operations
"""

from typing import Sequence
from uuid import UUID

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload

from backend.boundary.db.models.course_model import CourseModel
from backend.boundary.db.models.enrollment_model import EnrollmentModel
from backend.boundary.db.CRUD.base_crud import BaseCRUD

_WITH_COURSE = (
    selectinload(EnrollmentModel.course).selectinload(CourseModel.instructor),
    selectinload(EnrollmentModel.course).selectinload(CourseModel.category),
)


class EnrollmentCRUD(BaseCRUD[EnrollmentModel]):
    """
    CRUD operations for EnrollmentModel.

    Extends BaseCRUD with lookups by (user, course) and eager loading of
    the enrolled course or the enrolled user.
    """

    def __init__(self) -> None:
        """Initialize EnrollmentCRUD with EnrollmentModel."""
        super().__init__(EnrollmentModel)

    async def get_by_user_and_course(
        self,
        session: AsyncSession,
        user_id: UUID,
        course_id: UUID,
        with_course: bool = False,
        populate_existing: bool = False,
    ) -> EnrollmentModel | None:
        """
        Retrieve a user's enrollment in a course.

        Args:
            session: Async database session
            user_id: Learner UUID
            course_id: Course UUID
            with_course: Eagerly load the course and its relations
            populate_existing: Reload an enrollment already in the session

        Returns:
            EnrollmentModel if enrolled, None otherwise
        """
        stmt = select(EnrollmentModel).where(
            EnrollmentModel.user_id == user_id,
            EnrollmentModel.course_id == course_id,
        )
        if with_course:
            stmt = stmt.options(*_WITH_COURSE)
        if populate_existing:
            stmt = stmt.execution_options(populate_existing=True)
        result = await session.execute(stmt)
        return result.scalar_one_or_none()

    async def get_by_user(self, session: AsyncSession, user_id: UUID) -> Sequence[EnrollmentModel]:
        """Retrieve a user's enrollments with courses loaded, newest first."""
        stmt = (
            select(EnrollmentModel)
            .where(EnrollmentModel.user_id == user_id)
            .options(*_WITH_COURSE)
            .order_by(EnrollmentModel.created_at.desc())
        )
        result = await session.execute(stmt)
        return result.scalars().all()

    async def get_by_course(self, session: AsyncSession, course_id: UUID) -> Sequence[EnrollmentModel]:
        """Retrieve a course's enrollments with students loaded, newest first."""
        stmt = (
            select(EnrollmentModel)
            .where(EnrollmentModel.course_id == course_id)
            .options(selectinload(EnrollmentModel.user))
            .order_by(EnrollmentModel.created_at.desc())
        )
        result = await session.execute(stmt)
        return result.scalars().all()


enrollment_crud = EnrollmentCRUD()
