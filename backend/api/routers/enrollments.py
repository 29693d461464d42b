"""
Enrollment API endpoints.

All routes require authentication.

Routes:
- POST /enrollments - Enroll in a course
- GET /enrollments/my - Caller's enrollments
- GET /enrollments/check/{course_id} - Enrollment status
- GET /enrollments/course/{course_id} - Course roster (instructor/admin)
- GET /enrollments/{course_id} - Caller's enrollment in a course
- DELETE /enrollments/{course_id} - Leave a course
- PATCH /enrollments/{course_id}/complete - Mark course completed

Dependencies: backend.application.services, backend.models
System role: Enrollment HTTP API
"""

import logging
from uuid import UUID

from fastapi import APIRouter, Depends

from backend.application.services.enrollment_service import EnrollmentService
from backend.api.deps.dependencies import get_current_user, get_enrollment_service, require_roles
from backend.api.routers.router_utils import handle_api_errors
from backend.boundary.db.models.user_model import UserModel, UserRole
from backend.models.common import ApiResponse
from backend.models.enrollment import (
    CourseEnrollmentResponse,
    CourseEnrollmentsResponse,
    EnrollRequest,
    EnrollmentResponse,
    EnrollmentStatusResponse,
)

logger = logging.getLogger(__name__)

router = APIRouter(
    prefix="/enrollments",
    tags=["enrollments"],
    dependencies=[Depends(get_current_user)],
)


@router.post("", response_model=ApiResponse[EnrollmentResponse], status_code=201)
@handle_api_errors("Failed to enroll in course")
async def enroll_course(
    request: EnrollRequest,
    user: UserModel = Depends(get_current_user),
    enrollment_service: EnrollmentService = Depends(get_enrollment_service),
) -> ApiResponse[EnrollmentResponse]:
    """
    Enroll the caller in a published course.

    Raises:
        NotFoundError(404): Course not found
        ValidationError(400): Course unpublished, or caller is its instructor
        ConflictError(409): Already enrolled
    """
    enrollment = await enrollment_service.enroll(user, request.course_id)
    return ApiResponse(
        message="Enrolled successfully",
        data=EnrollmentResponse.model_validate(enrollment),
    )


@router.get("/my", response_model=ApiResponse[list[EnrollmentResponse]])
@handle_api_errors("Failed to fetch enrollments")
async def get_my_enrollments(
    user: UserModel = Depends(get_current_user),
    enrollment_service: EnrollmentService = Depends(get_enrollment_service),
) -> ApiResponse[list[EnrollmentResponse]]:
    """List the caller's enrollments, newest first."""
    enrollments = await enrollment_service.list_my_enrollments(user)
    return ApiResponse(
        message="Enrollments fetched successfully",
        data=[EnrollmentResponse.model_validate(e) for e in enrollments],
    )


@router.get("/check/{course_id}", response_model=ApiResponse[EnrollmentStatusResponse])
@handle_api_errors("Failed to check enrollment")
async def check_enrollment(
    course_id: UUID,
    user: UserModel = Depends(get_current_user),
    enrollment_service: EnrollmentService = Depends(get_enrollment_service),
) -> ApiResponse[EnrollmentStatusResponse]:
    """Check whether the caller is enrolled in a course."""
    is_enrolled = await enrollment_service.is_enrolled(user, course_id)
    return ApiResponse(
        message="Enrollment status checked",
        data=EnrollmentStatusResponse(is_enrolled=is_enrolled),
    )


@router.get("/course/{course_id}", response_model=ApiResponse[CourseEnrollmentsResponse])
@handle_api_errors("Failed to fetch course enrollments")
async def get_course_enrollments(
    course_id: UUID,
    user: UserModel = Depends(require_roles(UserRole.INSTRUCTOR, UserRole.ADMIN)),
    enrollment_service: EnrollmentService = Depends(get_enrollment_service),
) -> ApiResponse[CourseEnrollmentsResponse]:
    """
    List a course's enrolled learners.

    Raises:
        NotFoundError(404): Course not found
        ForbiddenError(403): Caller does not teach the course and is not an admin
    """
    enrollments = await enrollment_service.list_course_enrollments(course_id, user)
    return ApiResponse(
        message="Course enrollments fetched successfully",
        data=CourseEnrollmentsResponse(
            enrollments=[CourseEnrollmentResponse.model_validate(e) for e in enrollments],
            total=len(enrollments),
        ),
    )


@router.get("/{course_id}", response_model=ApiResponse[EnrollmentResponse])
@handle_api_errors("Failed to fetch enrollment")
async def get_enrollment(
    course_id: UUID,
    user: UserModel = Depends(get_current_user),
    enrollment_service: EnrollmentService = Depends(get_enrollment_service),
) -> ApiResponse[EnrollmentResponse]:
    """Get the caller's enrollment in a course."""
    enrollment = await enrollment_service.get_enrollment(user, course_id)
    return ApiResponse(
        message="Enrollment fetched successfully",
        data=EnrollmentResponse.model_validate(enrollment),
    )


@router.delete("/{course_id}", response_model=ApiResponse[None])
@handle_api_errors("Failed to unenroll from course")
async def unenroll_course(
    course_id: UUID,
    user: UserModel = Depends(get_current_user),
    enrollment_service: EnrollmentService = Depends(get_enrollment_service),
) -> ApiResponse[None]:
    """Leave a course."""
    await enrollment_service.unenroll(user, course_id)
    return ApiResponse(message="Unenrolled successfully")


@router.patch("/{course_id}/complete", response_model=ApiResponse[EnrollmentResponse])
@handle_api_errors("Failed to mark course as completed")
async def mark_course_completed(
    course_id: UUID,
    user: UserModel = Depends(get_current_user),
    enrollment_service: EnrollmentService = Depends(get_enrollment_service),
) -> ApiResponse[EnrollmentResponse]:
    """Mark the caller's enrollment complete."""
    enrollment = await enrollment_service.mark_completed(user, course_id)
    return ApiResponse(
        message="Course marked as completed",
        data=EnrollmentResponse.model_validate(enrollment),
    )
