"""
Section CRUD operations.

Dependencies: sqlalchemy, backend.boundary.db.models
System role: Course curriculum persistence operations
"""

from typing import Sequence
from uuid import UUID

from sqlalchemy import func, select, update
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload

from backend.boundary.db.models.section_model import SectionModel
from backend.boundary.db.CRUD.base_crud import BaseCRUD


class SectionCRUD(BaseCRUD[SectionModel]):
    """CRUD operations for SectionModel."""

    def __init__(self) -> None:
        """Initialize SectionCRUD with SectionModel."""
        super().__init__(SectionModel)

    async def get_with_course(self, session: AsyncSession, id: UUID) -> SectionModel | None:
        """
        Retrieve section with its course loaded for authorization checks.

        Args:
            session: Async database session
            id: Section UUID

        Returns:
            SectionModel with course loaded, None if not found
        """
        return await self.get_by_id(session, id, options=(selectinload(SectionModel.course),))

    async def get_by_course(
        self,
        session: AsyncSession,
        course_id: UUID,
        populate_existing: bool = False,
    ) -> Sequence[SectionModel]:
        """Retrieve a course's sections sorted by order."""
        stmt = (
            select(SectionModel)
            .where(SectionModel.course_id == course_id)
            .order_by(SectionModel.order, SectionModel.created_at)
        )
        if populate_existing:
            stmt = stmt.execution_options(populate_existing=True)
        result = await session.execute(stmt)
        return result.scalars().all()

    async def get_max_order(self, session: AsyncSession, course_id: UUID) -> int | None:
        """Highest order value in a course, None when it has no sections."""
        stmt = select(func.max(SectionModel.order)).where(SectionModel.course_id == course_id)
        result = await session.execute(stmt)
        return result.scalar_one_or_none()

    async def reorder(self, session: AsyncSession, course_id: UUID, section_ids: list[UUID]) -> None:
        """
        Assign ``order = index`` to each listed section of a course.

        Sections of other courses are left untouched. Instances already in
        the session are not synchronized; re-read with populate_existing.
        """
        for index, section_id in enumerate(section_ids):
            await session.execute(
                update(SectionModel)
                .where(SectionModel.id == section_id, SectionModel.course_id == course_id)
                .values(order=index)
                .execution_options(synchronize_session=False)
            )
        await session.flush()


section_crud = SectionCRUD()
