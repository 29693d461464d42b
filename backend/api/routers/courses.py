"""
Course API endpoints.

Routes:
- GET /courses - Browse published courses
- GET /courses/my - Caller's own courses (instructor/admin)
- GET /courses/{id} - Get single course
- POST /courses - Create course (instructor/admin)
- PUT /courses/{id} - Update course
- PATCH /courses/{id}/publish - Publish or unpublish course
- DELETE /courses/{id} - Delete course

Dependencies: backend.application.services, backend.models
System role: Course management HTTP API
"""

import logging
from uuid import UUID

from fastapi import APIRouter, Depends, Query

from backend.application.services.course_service import CourseService
from backend.api.deps.dependencies import (
    get_course_service,
    get_current_user,
    get_optional_user,
    require_roles,
)
from backend.api.routers.router_utils import handle_api_errors
from backend.boundary.db.models.course_model import CourseLevel
from backend.boundary.db.models.user_model import UserModel, UserRole
from backend.models.common import ApiResponse
from backend.models.course import (
    CourseListResponse,
    CourseResponse,
    CreateCourseRequest,
    PublishCourseRequest,
    UpdateCourseRequest,
)

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/courses", tags=["courses"])

require_author = require_roles(UserRole.INSTRUCTOR, UserRole.ADMIN)


@router.get("", response_model=ApiResponse[CourseListResponse])
@handle_api_errors("Failed to fetch courses")
async def list_courses(
    category_id: UUID | None = None,
    level: CourseLevel | None = None,
    search: str | None = Query(None, max_length=255),
    limit: int = Query(20, ge=1, le=100),
    offset: int = Query(0, ge=0),
    course_service: CourseService = Depends(get_course_service),
) -> ApiResponse[CourseListResponse]:
    """
    Browse the published catalogue with optional filters.

    Args:
        category_id: Restrict to one category
        level: Restrict to one difficulty level
        search: Case-insensitive title match
        limit: Page size (1-100, default 20)
        offset: Number of courses to skip
    """
    logger.info(
        "Listing courses",
        extra={"limit": limit, "offset": offset, "has_search": bool(search)},
    )

    courses, total = await course_service.list_published(
        category_id=category_id,
        level=level,
        search=search,
        limit=limit,
        offset=offset,
    )
    return ApiResponse(
        message="Courses fetched successfully",
        data=CourseListResponse(
            courses=[CourseResponse.model_validate(c) for c in courses],
            total=total,
        ),
    )


@router.get("/my", response_model=ApiResponse[CourseListResponse])
@handle_api_errors("Failed to fetch your courses")
async def list_my_courses(
    user: UserModel = Depends(require_author),
    course_service: CourseService = Depends(get_course_service),
) -> ApiResponse[CourseListResponse]:
    """List every course the caller teaches, drafts included."""
    courses = await course_service.list_instructor_courses(user)
    return ApiResponse(
        message="Courses fetched successfully",
        data=CourseListResponse(
            courses=[CourseResponse.model_validate(c) for c in courses],
            total=len(courses),
        ),
    )


@router.get("/{course_id}", response_model=ApiResponse[CourseResponse])
@handle_api_errors("Failed to fetch course")
async def get_course(
    course_id: UUID,
    user: UserModel | None = Depends(get_optional_user),
    course_service: CourseService = Depends(get_course_service),
) -> ApiResponse[CourseResponse]:
    """
    Get single course by ID.

    Raises:
        NotFoundError(404): Course not found
        ForbiddenError(403): Draft course viewed by someone other than its author
    """
    course = await course_service.get_course(course_id, user)
    return ApiResponse(
        message="Course fetched successfully",
        data=CourseResponse.model_validate(course),
    )


@router.post("", response_model=ApiResponse[CourseResponse], status_code=201)
@handle_api_errors("Failed to create course")
async def create_course(
    request: CreateCourseRequest,
    user: UserModel = Depends(require_author),
    course_service: CourseService = Depends(get_course_service),
) -> ApiResponse[CourseResponse]:
    """
    Create a draft course taught by the caller.

    Raises:
        NotFoundError(404): Unknown category
    """
    logger.info(
        "Creating new course",
        extra={"course_title": request.title, "instructor_id": str(user.id)},
    )

    course = await course_service.create_course(
        user,
        title=request.title,
        description=request.description,
        thumbnail=request.thumbnail,
        price=request.price,
        is_free=request.is_free,
        level=request.level,
        category_id=request.category_id,
    )
    return ApiResponse(
        message="Course created successfully",
        data=CourseResponse.model_validate(course),
    )


@router.put("/{course_id}", response_model=ApiResponse[CourseResponse])
@handle_api_errors("Failed to update course")
async def update_course(
    course_id: UUID,
    request: UpdateCourseRequest,
    user: UserModel = Depends(get_current_user),
    course_service: CourseService = Depends(get_course_service),
) -> ApiResponse[CourseResponse]:
    """
    Update course by ID. Only fields present in the body change.

    Raises:
        NotFoundError(404): Course or category not found
        ForbiddenError(403): Caller is not the instructor or an admin
    """
    course = await course_service.update_course(
        course_id, user, request.model_dump(exclude_unset=True)
    )
    return ApiResponse(
        message="Course updated successfully",
        data=CourseResponse.model_validate(course),
    )


@router.patch("/{course_id}/publish", response_model=ApiResponse[CourseResponse])
@handle_api_errors("Failed to update publish state")
async def publish_course(
    course_id: UUID,
    request: PublishCourseRequest,
    user: UserModel = Depends(get_current_user),
    course_service: CourseService = Depends(get_course_service),
) -> ApiResponse[CourseResponse]:
    """Publish or unpublish a course."""
    course = await course_service.set_published(course_id, user, request.published)
    message = "Course published successfully" if request.published else "Course unpublished successfully"
    return ApiResponse(message=message, data=CourseResponse.model_validate(course))


@router.delete("/{course_id}", response_model=ApiResponse[None])
@handle_api_errors("Failed to delete course")
async def delete_course(
    course_id: UUID,
    user: UserModel = Depends(get_current_user),
    course_service: CourseService = Depends(get_course_service),
) -> ApiResponse[None]:
    """Delete course with its sections, lectures and enrollments."""
    await course_service.delete_course(course_id, user)
    return ApiResponse(message="Course deleted successfully")
