"""
Lecture service orchestrator.

Coordinates lecture access and authoring. Lecture visibility depends on
the course's publish state, the lecture's preview flag, ownership and
enrollment.

Dependencies: backend.boundary.db.CRUD
System role: Lesson use case orchestration
"""

import logging
from typing import Any, Sequence
from uuid import UUID

from sqlalchemy.ext.asyncio import AsyncSession

from backend.application.services.access import (
    can_manage_course,
    ensure_can_manage_course,
    ensure_course_visible,
)
from backend.boundary.db.CRUD.enrollment_crud import enrollment_crud
from backend.boundary.db.CRUD.lecture_crud import lecture_crud
from backend.boundary.db.CRUD.section_crud import section_crud
from backend.boundary.db.models.lecture_model import LectureModel
from backend.boundary.db.models.section_model import SectionModel
from backend.boundary.db.models.user_model import UserModel
from backend.core.exceptions import ForbiddenError, NotFoundError

logger = logging.getLogger(__name__)


class LectureService:
    """Lecture service orchestrator."""

    def __init__(self, db: AsyncSession) -> None:
        """
        Initialize lecture service with async database session.

        Args:
            db: Async SQLAlchemy session
        """
        self.db = db

    async def _get_section(self, section_id: UUID) -> SectionModel:
        section = await section_crud.get_with_course(self.db, section_id)
        if not section:
            raise NotFoundError("Section not found", resource_id=section_id)
        return section

    async def _get_lecture(self, lecture_id: UUID) -> LectureModel:
        lecture = await lecture_crud.get_with_course(self.db, lecture_id)
        if not lecture:
            raise NotFoundError("Lecture not found", resource_id=lecture_id)
        return lecture

    async def list_section_lectures(
        self,
        section_id: UUID,
        user: UserModel | None = None,
    ) -> Sequence[LectureModel]:
        """
        Get a section's lectures in order.

        Args:
            section_id: Section UUID
            user: Caller, None when anonymous

        Raises:
            NotFoundError: If section not found
            ForbiddenError: Draft course and caller is not its instructor or an admin
        """
        section = await self._get_section(section_id)
        ensure_course_visible(section.course, user)
        return await lecture_crud.get_by_section(self.db, section_id)

    async def get_lecture(self, lecture_id: UUID, user: UserModel | None = None) -> LectureModel:
        """
        Get a single lecture.

        Preview lectures of published courses are public. Anything else
        needs the course instructor, an admin, or an enrolled learner.

        Raises:
            NotFoundError: If lecture not found
            ForbiddenError: Caller may not watch this lecture
        """
        lecture = await self._get_lecture(lecture_id)
        course = lecture.section.course

        if course.published and lecture.is_preview:
            return lecture
        if can_manage_course(course, user):
            return lecture

        enrollment = None
        if user is not None:
            enrollment = await enrollment_crud.get_by_user_and_course(self.db, user.id, course.id)
        if not enrollment:
            raise ForbiddenError(
                "You must be enrolled to access this lecture",
                details={"lecture_id": str(lecture_id)},
            )
        return lecture

    async def create_lecture(
        self,
        section_id: UUID,
        user: UserModel,
        title: str,
        video_url: str | None = None,
        duration: float | None = None,
        is_preview: bool | None = None,
        order: int | None = None,
    ) -> LectureModel:
        """
        Add a lecture to a section.

        Args:
            section_id: Section UUID
            user: Caller
            title: Lecture title
            video_url: Optional video URL
            duration: Optional duration in seconds
            is_preview: Free preview flag (defaults to False)
            order: Explicit position; defaults to one past the current last lecture

        Raises:
            NotFoundError: If section not found
            ForbiddenError: Caller is not the instructor or an admin
        """
        section = await self._get_section(section_id)
        ensure_can_manage_course(section.course, user, "Only the course instructor can create lectures")

        if order is None:
            last_order = await lecture_crud.get_max_order(self.db, section_id)
            order = 0 if last_order is None else last_order + 1

        lecture = await lecture_crud.create(
            self.db,
            title=title,
            section_id=section_id,
            video_url=video_url,
            duration=duration,
            is_preview=bool(is_preview),
            order=order,
        )
        logger.info("Lecture created", extra={"lecture_id": str(lecture.id), "section_id": str(section_id)})
        return lecture

    async def update_lecture(self, lecture_id: UUID, user: UserModel, updates: dict[str, Any]) -> LectureModel:
        """
        Apply a partial update; only fields present with a value change.

        Raises:
            NotFoundError: If lecture not found
            ForbiddenError: Caller is not the instructor or an admin
        """
        lecture = await self._get_lecture(lecture_id)
        ensure_can_manage_course(
            lecture.section.course, user, "Only the course instructor can update lectures"
        )

        changed = [field for field, value in updates.items() if value is not None]
        for field in changed:
            setattr(lecture, field, updates[field])

        await lecture_crud.save(self.db, lecture)
        logger.info("Lecture updated", extra={"lecture_id": str(lecture_id), "updates": changed})
        return lecture

    async def delete_lecture(self, lecture_id: UUID, user: UserModel) -> None:
        """
        Delete a lecture.

        Raises:
            NotFoundError: If lecture not found
            ForbiddenError: Caller is not the instructor or an admin
        """
        lecture = await self._get_lecture(lecture_id)
        ensure_can_manage_course(
            lecture.section.course, user, "Only the course instructor can delete lectures"
        )

        await lecture_crud.delete(self.db, lecture)
        logger.info("Lecture deleted", extra={"lecture_id": str(lecture_id)})

    async def reorder_lectures(
        self,
        section_id: UUID,
        user: UserModel,
        lecture_ids: list[UUID],
    ) -> Sequence[LectureModel]:
        """
        Reorder a section's lectures; list position becomes the order value.

        IDs of lectures outside the section are ignored.

        Raises:
            NotFoundError: If section not found
            ForbiddenError: Caller is not the instructor or an admin
        """
        section = await self._get_section(section_id)
        ensure_can_manage_course(section.course, user, "Only the course instructor can reorder lectures")

        await lecture_crud.reorder(self.db, section_id, lecture_ids)
        logger.info("Lectures reordered", extra={"section_id": str(section_id), "count": len(lecture_ids)})
        return await lecture_crud.get_by_section(self.db, section_id, populate_existing=True)
