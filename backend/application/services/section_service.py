"""
Section service orchestrator.

Coordinates the ordered chapters of a course.

Dependencies: backend.boundary.db.CRUD
System role: Curriculum structure use case orchestration
"""

import logging
from typing import Sequence
from uuid import UUID

from sqlalchemy.ext.asyncio import AsyncSession

from backend.application.services.access import ensure_can_manage_course, ensure_course_visible
from backend.boundary.db.CRUD.course_crud import course_crud
from backend.boundary.db.CRUD.section_crud import section_crud
from backend.boundary.db.models.course_model import CourseModel
from backend.boundary.db.models.section_model import SectionModel
from backend.boundary.db.models.user_model import UserModel
from backend.core.exceptions import NotFoundError

logger = logging.getLogger(__name__)


class SectionService:
    """Section service orchestrator."""

    def __init__(self, db: AsyncSession) -> None:
        """
        Initialize section service with async database session.

        Args:
            db: Async SQLAlchemy session
        """
        self.db = db

    async def _get_course(self, course_id: UUID) -> CourseModel:
        course = await course_crud.get_by_id(self.db, course_id)
        if not course:
            raise NotFoundError("Course not found", resource_id=course_id)
        return course

    async def _get_section(self, section_id: UUID) -> SectionModel:
        section = await section_crud.get_with_course(self.db, section_id)
        if not section:
            raise NotFoundError("Section not found", resource_id=section_id)
        return section

    async def list_sections(self, course_id: UUID, user: UserModel | None = None) -> Sequence[SectionModel]:
        """
        Get a course's sections in order.

        Raises:
            NotFoundError: If course not found
            ForbiddenError: Draft course and caller is not its instructor or an admin
        """
        course = await self._get_course(course_id)
        ensure_course_visible(course, user)
        return await section_crud.get_by_course(self.db, course_id)

    async def create_section(
        self,
        course_id: UUID,
        user: UserModel,
        title: str,
        order: int | None = None,
    ) -> SectionModel:
        """
        Append a section to a course.

        Args:
            course_id: Course UUID
            user: Caller
            title: Section title
            order: Explicit position; defaults to one past the current last section

        Raises:
            NotFoundError: If course not found
            ForbiddenError: Caller is not the instructor or an admin
        """
        course = await self._get_course(course_id)
        ensure_can_manage_course(course, user, "Only the course instructor can create sections")

        if order is None:
            last_order = await section_crud.get_max_order(self.db, course_id)
            order = 0 if last_order is None else last_order + 1

        section = await section_crud.create(self.db, title=title.strip(), order=order, course_id=course_id)
        logger.info("Section created", extra={"section_id": str(section.id), "course_id": str(course_id)})
        return section

    async def update_section(
        self,
        section_id: UUID,
        user: UserModel,
        title: str | None = None,
        order: int | None = None,
    ) -> SectionModel:
        """
        Rename or move a section.

        Raises:
            NotFoundError: If section not found
            ForbiddenError: Caller is not the instructor or an admin
        """
        section = await self._get_section(section_id)
        ensure_can_manage_course(section.course, user, "Only the course instructor can update sections")

        if title is not None:
            section.title = title.strip()
        if order is not None:
            section.order = order

        await section_crud.save(self.db, section)
        logger.info("Section updated", extra={"section_id": str(section_id)})
        return section

    async def delete_section(self, section_id: UUID, user: UserModel) -> None:
        """
        Delete a section and its lectures.

        Raises:
            NotFoundError: If section not found
            ForbiddenError: Caller is not the instructor or an admin
        """
        section = await self._get_section(section_id)
        ensure_can_manage_course(section.course, user, "Only the course instructor can delete sections")

        await section_crud.delete(self.db, section)
        logger.info("Section deleted", extra={"section_id": str(section_id)})

    async def reorder_sections(
        self,
        course_id: UUID,
        user: UserModel,
        section_ids: list[UUID],
    ) -> Sequence[SectionModel]:
        """
        Reorder a course's sections; list position becomes the order value.

        IDs of sections outside the course are ignored.

        Raises:
            NotFoundError: If course not found
            ForbiddenError: Caller is not the instructor or an admin
        """
        course = await self._get_course(course_id)
        ensure_can_manage_course(course, user, "Only the course instructor can reorder sections")

        await section_crud.reorder(self.db, course_id, section_ids)
        logger.info("Sections reordered", extra={"course_id": str(course_id), "count": len(section_ids)})
        return await section_crud.get_by_course(self.db, course_id, populate_existing=True)
