"""
Lecture CRUD operations.

Dependencies: sqlalchemy, backend.boundary.db.models
System role: Lesson persistence operations
"""

from typing import Sequence
from uuid import UUID

from sqlalchemy import func, select, update
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload

from backend.boundary.db.models.lecture_model import LectureModel
from backend.boundary.db.models.section_model import SectionModel
from backend.boundary.db.CRUD.base_crud import BaseCRUD


class LectureCRUD(BaseCRUD[LectureModel]):
    """CRUD operations for LectureModel."""

    def __init__(self) -> None:
        """Initialize LectureCRUD with LectureModel."""
        super().__init__(LectureModel)

    async def get_with_course(self, session: AsyncSession, id: UUID) -> LectureModel | None:
        """
        Retrieve lecture with its section and the section's course loaded.

        Args:
            session: Async database session
            id: Lecture UUID

        Returns:
            LectureModel with section.course loaded, None if not found
        """
        return await self.get_by_id(
            session,
            id,
            options=(selectinload(LectureModel.section).selectinload(SectionModel.course),),
        )

    async def get_by_section(
        self,
        session: AsyncSession,
        section_id: UUID,
        populate_existing: bool = False,
    ) -> Sequence[LectureModel]:
        """Retrieve a section's lectures sorted by order."""
        stmt = (
            select(LectureModel)
            .where(LectureModel.section_id == section_id)
            .order_by(LectureModel.order, LectureModel.created_at)
        )
        if populate_existing:
            stmt = stmt.execution_options(populate_existing=True)
        result = await session.execute(stmt)
        return result.scalars().all()

    async def get_max_order(self, session: AsyncSession, section_id: UUID) -> int | None:
        """Highest order value in a section, None when it has no lectures."""
        stmt = select(func.max(LectureModel.order)).where(LectureModel.section_id == section_id)
        result = await session.execute(stmt)
        return result.scalar_one_or_none()

    async def reorder(self, session: AsyncSession, section_id: UUID, lecture_ids: list[UUID]) -> None:
        """
        Assign ``order = index`` to each listed lecture of a section.

        Lectures of other sections are left untouched. Instances already in
        the session are not synchronized; re-read with populate_existing.
        """
        for index, lecture_id in enumerate(lecture_ids):
            await session.execute(
                update(LectureModel)
                .where(LectureModel.id == lecture_id, LectureModel.section_id == section_id)
                .values(order=index)
                .execution_options(synchronize_session=False)
            )
        await session.flush()


lecture_crud = LectureCRUD()
