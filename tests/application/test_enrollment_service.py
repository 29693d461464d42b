"""
Test suite for EnrollmentService.
"""

import uuid

import pytest

from backend.application.services.enrollment_service import EnrollmentService
from backend.core.exceptions import ConflictError, ForbiddenError, NotFoundError, ValidationError


@pytest.fixture
def enrollment_service(test_async_db) -> EnrollmentService:
    return EnrollmentService(db=test_async_db)


class TestEnroll:
    """Joining a course."""

    @pytest.mark.asyncio
    async def test_enroll_in_published_course(
        self, enrollment_service: EnrollmentService, make_user, make_course
    ) -> None:
        course = await make_course(await make_user("instructor"))
        student = await make_user()

        enrollment = await enrollment_service.enroll(student, course.id)

        assert enrollment.course.id == course.id
        assert enrollment.progress == 0
        assert await enrollment_service.is_enrolled(student, course.id) is True

    @pytest.mark.asyncio
    async def test_enroll_twice(self, enrollment_service: EnrollmentService, make_user, make_course) -> None:
        course = await make_course(await make_user("instructor"))
        student = await make_user()
        await enrollment_service.enroll(student, course.id)

        with pytest.raises(ConflictError, match="Already enrolled in this course"):
            await enrollment_service.enroll(student, course.id)

    @pytest.mark.asyncio
    async def test_enroll_in_draft(self, enrollment_service: EnrollmentService, make_user, make_course) -> None:
        course = await make_course(await make_user("instructor"), published=False)

        with pytest.raises(ValidationError, match="Course is not available for enrollment"):
            await enrollment_service.enroll(await make_user(), course.id)

    @pytest.mark.asyncio
    async def test_instructor_cannot_enroll_in_own_course(
        self, enrollment_service: EnrollmentService, make_user, make_course
    ) -> None:
        instructor = await make_user("instructor")
        course = await make_course(instructor)

        with pytest.raises(ValidationError, match="You cannot enroll in your own course"):
            await enrollment_service.enroll(instructor, course.id)

    @pytest.mark.asyncio
    async def test_enroll_in_missing_course(self, enrollment_service: EnrollmentService, make_user) -> None:
        with pytest.raises(NotFoundError, match="Course not found"):
            await enrollment_service.enroll(await make_user(), uuid.uuid4())


class TestEnrollmentLifecycle:
    """Completing and leaving courses."""

    @pytest.mark.asyncio
    async def test_mark_completed(self, enrollment_service: EnrollmentService, make_user, make_course) -> None:
        course = await make_course(await make_user("instructor"))
        student = await make_user()
        await enrollment_service.enroll(student, course.id)

        enrollment = await enrollment_service.mark_completed(student, course.id)

        assert enrollment.completed is True
        assert enrollment.completed_at is not None
        assert enrollment.progress == 100.0

    @pytest.mark.asyncio
    async def test_unenroll(self, enrollment_service: EnrollmentService, make_user, make_course) -> None:
        course = await make_course(await make_user("instructor"))
        student = await make_user()
        await enrollment_service.enroll(student, course.id)

        await enrollment_service.unenroll(student, course.id)

        assert await enrollment_service.is_enrolled(student, course.id) is False
        with pytest.raises(NotFoundError, match="Enrollment not found"):
            await enrollment_service.unenroll(student, course.id)

    @pytest.mark.asyncio
    async def test_not_enrolled(self, enrollment_service: EnrollmentService, make_user, make_course) -> None:
        course = await make_course(await make_user("instructor"))
        student = await make_user()

        with pytest.raises(NotFoundError):
            await enrollment_service.get_enrollment(student, course.id)
        with pytest.raises(NotFoundError):
            await enrollment_service.mark_completed(student, course.id)

    @pytest.mark.asyncio
    async def test_list_my_enrollments(
        self, enrollment_service: EnrollmentService, make_user, make_course
    ) -> None:
        instructor = await make_user("instructor")
        student = await make_user()
        for _ in range(2):
            await enrollment_service.enroll(student, (await make_course(instructor)).id)

        enrollments = await enrollment_service.list_my_enrollments(student)

        assert len(enrollments) == 2
        assert all(e.course.instructor.id == instructor.id for e in enrollments)


class TestCourseRoster:
    """Instructor view of enrolled learners."""

    @pytest.mark.asyncio
    async def test_owner_sees_roster(self, enrollment_service: EnrollmentService, make_user, make_course) -> None:
        instructor = await make_user("instructor")
        course = await make_course(instructor)
        student = await make_user()
        await enrollment_service.enroll(student, course.id)

        roster = await enrollment_service.list_course_enrollments(course.id, instructor)

        assert [e.user.email for e in roster] == [student.email]

    @pytest.mark.asyncio
    async def test_other_instructor_is_forbidden(
        self, enrollment_service: EnrollmentService, make_user, make_course
    ) -> None:
        course = await make_course(await make_user("instructor"))

        with pytest.raises(ForbiddenError, match="You can only view enrollments for your own courses"):
            await enrollment_service.list_course_enrollments(course.id, await make_user("instructor"))

    @pytest.mark.asyncio
    async def test_admin_sees_any_roster(self, enrollment_service: EnrollmentService, make_user, make_course) -> None:
        course = await make_course(await make_user("instructor"))

        assert await enrollment_service.list_course_enrollments(course.id, await make_user("admin")) == []
