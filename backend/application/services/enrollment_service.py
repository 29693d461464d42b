"""
Enrollment service orchestrator.

Coordinates learners joining, leaving and completing courses, and the
instructor's view of a course roster.

Dependencies: backend.boundary.db.CRUD
System role: Enrollment use case orchestration
"""

import logging
from typing import Sequence
from uuid import UUID

from sqlalchemy.ext.asyncio import AsyncSession

from backend.application.services.access import ensure_can_manage_course
from backend.boundary.db.base import utcnow
from backend.boundary.db.CRUD.course_crud import course_crud
from backend.boundary.db.CRUD.enrollment_crud import enrollment_crud
from backend.boundary.db.models.enrollment_model import EnrollmentModel
from backend.boundary.db.models.user_model import UserModel
from backend.core.exceptions import ConflictError, NotFoundError, ValidationError

logger = logging.getLogger(__name__)


class EnrollmentService:
    """Enrollment service orchestrator."""

    def __init__(self, db: AsyncSession) -> None:
        """
        Initialize enrollment service with async database session.

        Args:
            db: Async SQLAlchemy session
        """
        self.db = db

    async def _get_enrollment(self, user: UserModel, course_id: UUID) -> EnrollmentModel:
        enrollment = await enrollment_crud.get_by_user_and_course(
            self.db, user.id, course_id, with_course=True
        )
        if not enrollment:
            raise NotFoundError("Enrollment not found", resource_id=course_id)
        return enrollment

    async def enroll(self, user: UserModel, course_id: UUID) -> EnrollmentModel:
        """
        Enroll ``user`` in a published course.

        Returns:
            EnrollmentModel: New enrollment with the course loaded

        Raises:
            NotFoundError: If course not found
            ValidationError: Course unpublished, or caller is its instructor
            ConflictError: Already enrolled
        """
        course = await course_crud.get_by_id(self.db, course_id)
        if not course:
            raise NotFoundError("Course not found", resource_id=course_id)
        if not course.published:
            raise ValidationError(
                "Course is not available for enrollment", details={"course_id": str(course_id)}
            )
        if course.instructor_id == user.id:
            raise ValidationError(
                "You cannot enroll in your own course", details={"course_id": str(course_id)}
            )
        if await enrollment_crud.get_by_user_and_course(self.db, user.id, course_id):
            raise ConflictError("Already enrolled in this course", details={"course_id": str(course_id)})

        await enrollment_crud.create(self.db, user_id=user.id, course_id=course_id)
        logger.info("User enrolled", extra={"user_id": str(user.id), "course_id": str(course_id)})
        return await enrollment_crud.get_by_user_and_course(
            self.db, user.id, course_id, with_course=True, populate_existing=True
        )

    async def list_my_enrollments(self, user: UserModel) -> Sequence[EnrollmentModel]:
        """Get the caller's enrollments, newest first."""
        return await enrollment_crud.get_by_user(self.db, user.id)

    async def is_enrolled(self, user: UserModel, course_id: UUID) -> bool:
        """Check whether the caller is enrolled in a course."""
        enrollment = await enrollment_crud.get_by_user_and_course(self.db, user.id, course_id)
        return enrollment is not None

    async def get_enrollment(self, user: UserModel, course_id: UUID) -> EnrollmentModel:
        """
        Get the caller's enrollment in a course.

        Raises:
            NotFoundError: Not enrolled
        """
        return await self._get_enrollment(user, course_id)

    async def unenroll(self, user: UserModel, course_id: UUID) -> None:
        """
        Leave a course.

        Raises:
            NotFoundError: Not enrolled
        """
        enrollment = await enrollment_crud.get_by_user_and_course(self.db, user.id, course_id)
        if not enrollment:
            raise NotFoundError("Enrollment not found", resource_id=course_id)

        await enrollment_crud.delete(self.db, enrollment)
        logger.info("User unenrolled", extra={"user_id": str(user.id), "course_id": str(course_id)})

    async def mark_completed(self, user: UserModel, course_id: UUID) -> EnrollmentModel:
        """
        Mark the caller's enrollment complete with full progress.

        Raises:
            NotFoundError: Not enrolled
        """
        enrollment = await self._get_enrollment(user, course_id)
        enrollment.completed = True
        enrollment.completed_at = utcnow()
        enrollment.progress = 100.0

        await enrollment_crud.save(self.db, enrollment)
        logger.info("Course completed", extra={"user_id": str(user.id), "course_id": str(course_id)})
        return enrollment

    async def list_course_enrollments(
        self,
        course_id: UUID,
        user: UserModel,
    ) -> Sequence[EnrollmentModel]:
        """
        Get a course's roster.

        Args:
            course_id: Course UUID
            user: Instructor of the course, or an admin

        Raises:
            NotFoundError: If course not found
            ForbiddenError: Caller does not own the course and is not an admin
        """
        course = await course_crud.get_by_id(self.db, course_id)
        if not course:
            raise NotFoundError("Course not found", resource_id=course_id)
        ensure_can_manage_course(course, user, "You can only view enrollments for your own courses")

        return await enrollment_crud.get_by_course(self.db, course_id)
