"""
Lecture API endpoints.

Routes:
- GET /sections/{section_id}/lectures - List a section's lectures
- POST /sections/{section_id}/lectures - Create lecture
- PUT /sections/{section_id}/lectures/reorder - Reorder lectures
- GET /lectures/{id} - Get single lecture
- PUT /lectures/{id} - Update lecture
- DELETE /lectures/{id} - Delete lecture

Dependencies: backend.application.services, backend.models
System role: Lesson HTTP API
"""

import logging
from uuid import UUID

from fastapi import APIRouter, Depends

from backend.application.services.lecture_service import LectureService
from backend.api.deps.dependencies import get_current_user, get_lecture_service, get_optional_user
from backend.api.routers.router_utils import handle_api_errors
from backend.boundary.db.models.user_model import UserModel
from backend.models.common import ApiResponse
from backend.models.lecture import (
    CreateLectureRequest,
    LectureResponse,
    ReorderLecturesRequest,
    UpdateLectureRequest,
)

logger = logging.getLogger(__name__)

router = APIRouter(tags=["lectures"])


@router.get("/sections/{section_id}/lectures", response_model=ApiResponse[list[LectureResponse]])
@handle_api_errors("Failed to fetch lectures")
async def list_section_lectures(
    section_id: UUID,
    user: UserModel | None = Depends(get_optional_user),
    lecture_service: LectureService = Depends(get_lecture_service),
) -> ApiResponse[list[LectureResponse]]:
    """
    List a section's lectures in order.

    Raises:
        NotFoundError(404): Section not found
        ForbiddenError(403): Draft course viewed by someone other than its author
    """
    lectures = await lecture_service.list_section_lectures(section_id, user)
    return ApiResponse(
        message="Lectures fetched successfully",
        data=[LectureResponse.model_validate(lecture) for lecture in lectures],
    )


@router.post(
    "/sections/{section_id}/lectures",
    response_model=ApiResponse[LectureResponse],
    status_code=201,
)
@handle_api_errors("Failed to create lecture")
async def create_lecture(
    section_id: UUID,
    request: CreateLectureRequest,
    user: UserModel = Depends(get_current_user),
    lecture_service: LectureService = Depends(get_lecture_service),
) -> ApiResponse[LectureResponse]:
    """
    Add a lecture to a section.

    Raises:
        NotFoundError(404): Section not found
        ForbiddenError(403): Caller is not the instructor or an admin
    """
    logger.info(
        "Creating lecture",
        extra={"section_id": str(section_id), "is_preview": bool(request.is_preview)},
    )

    lecture = await lecture_service.create_lecture(
        section_id,
        user,
        title=request.title,
        video_url=str(request.video_url) if request.video_url else None,
        duration=request.duration,
        is_preview=request.is_preview,
        order=request.order,
    )
    return ApiResponse(
        message="Lecture created successfully",
        data=LectureResponse.model_validate(lecture),
    )


@router.put(
    "/sections/{section_id}/lectures/reorder",
    response_model=ApiResponse[list[LectureResponse]],
)
@handle_api_errors("Failed to reorder lectures")
async def reorder_lectures(
    section_id: UUID,
    request: ReorderLecturesRequest,
    user: UserModel = Depends(get_current_user),
    lecture_service: LectureService = Depends(get_lecture_service),
) -> ApiResponse[list[LectureResponse]]:
    """Reorder a section's lectures; list position becomes the order value."""
    lectures = await lecture_service.reorder_lectures(section_id, user, request.lecture_ids)
    return ApiResponse(
        message="Lectures reordered successfully",
        data=[LectureResponse.model_validate(lecture) for lecture in lectures],
    )


@router.get("/lectures/{lecture_id}", response_model=ApiResponse[LectureResponse])
@handle_api_errors("Failed to fetch lecture")
async def get_lecture(
    lecture_id: UUID,
    user: UserModel | None = Depends(get_optional_user),
    lecture_service: LectureService = Depends(get_lecture_service),
) -> ApiResponse[LectureResponse]:
    """
    Get single lecture.

    Raises:
        NotFoundError(404): Lecture not found
        ForbiddenError(403): Caller must be enrolled to watch this lecture
    """
    lecture = await lecture_service.get_lecture(lecture_id, user)
    return ApiResponse(
        message="Lecture fetched successfully",
        data=LectureResponse.model_validate(lecture),
    )


@router.put("/lectures/{lecture_id}", response_model=ApiResponse[LectureResponse])
@handle_api_errors("Failed to update lecture")
async def update_lecture(
    lecture_id: UUID,
    request: UpdateLectureRequest,
    user: UserModel = Depends(get_current_user),
    lecture_service: LectureService = Depends(get_lecture_service),
) -> ApiResponse[LectureResponse]:
    """Update lecture; only provided fields change."""
    lecture = await lecture_service.update_lecture(
        lecture_id, user, request.model_dump(exclude_none=True, mode="json")
    )
    return ApiResponse(
        message="Lecture updated successfully",
        data=LectureResponse.model_validate(lecture),
    )


@router.delete("/lectures/{lecture_id}", response_model=ApiResponse[None])
@handle_api_errors("Failed to delete lecture")
async def delete_lecture(
    lecture_id: UUID,
    user: UserModel = Depends(get_current_user),
    lecture_service: LectureService = Depends(get_lecture_service),
) -> ApiResponse[None]:
    """Delete a lecture."""
    await lecture_service.delete_lecture(lecture_id, user)
    return ApiResponse(message="Lecture deleted successfully")
