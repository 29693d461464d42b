"""
Section API endpoints.

Routes:
- GET /courses/{course_id}/sections - List a course's sections
- POST /courses/{course_id}/sections - Create section
- PUT /courses/{course_id}/sections/reorder - Reorder sections
- PUT /sections/{id} - Update section
- DELETE /sections/{id} - Delete section

Dependencies: backend.application.services, backend.models
System role: Course curriculum HTTP API
"""

import logging
from uuid import UUID

from fastapi import APIRouter, Depends

from backend.application.services.section_service import SectionService
from backend.api.deps.dependencies import get_current_user, get_optional_user, get_section_service
from backend.api.routers.router_utils import handle_api_errors
from backend.boundary.db.models.user_model import UserModel
from backend.models.common import ApiResponse
from backend.models.section import (
    CreateSectionRequest,
    ReorderSectionsRequest,
    SectionResponse,
    UpdateSectionRequest,
)

logger = logging.getLogger(__name__)

router = APIRouter(tags=["sections"])


@router.get("/courses/{course_id}/sections", response_model=ApiResponse[list[SectionResponse]])
@handle_api_errors("Failed to fetch sections")
async def list_sections(
    course_id: UUID,
    user: UserModel | None = Depends(get_optional_user),
    section_service: SectionService = Depends(get_section_service),
) -> ApiResponse[list[SectionResponse]]:
    """List a course's sections in order."""
    sections = await section_service.list_sections(course_id, user)
    return ApiResponse(
        message="Sections fetched successfully",
        data=[SectionResponse.model_validate(s) for s in sections],
    )


@router.post(
    "/courses/{course_id}/sections",
    response_model=ApiResponse[SectionResponse],
    status_code=201,
)
@handle_api_errors("Failed to create section")
async def create_section(
    course_id: UUID,
    request: CreateSectionRequest,
    user: UserModel = Depends(get_current_user),
    section_service: SectionService = Depends(get_section_service),
) -> ApiResponse[SectionResponse]:
    """Append a section to a course."""
    section = await section_service.create_section(
        course_id, user, title=request.title, order=request.order
    )
    return ApiResponse(
        message="Section created successfully",
        data=SectionResponse.model_validate(section),
    )


@router.put(
    "/courses/{course_id}/sections/reorder",
    response_model=ApiResponse[list[SectionResponse]],
)
@handle_api_errors("Failed to reorder sections")
async def reorder_sections(
    course_id: UUID,
    request: ReorderSectionsRequest,
    user: UserModel = Depends(get_current_user),
    section_service: SectionService = Depends(get_section_service),
) -> ApiResponse[list[SectionResponse]]:
    """Reorder sections; list position becomes the order value."""
    sections = await section_service.reorder_sections(course_id, user, request.section_ids)
    return ApiResponse(
        message="Sections reordered successfully",
        data=[SectionResponse.model_validate(s) for s in sections],
    )


@router.put("/sections/{section_id}", response_model=ApiResponse[SectionResponse])
@handle_api_errors("Failed to update section")
async def update_section(
    section_id: UUID,
    request: UpdateSectionRequest,
    user: UserModel = Depends(get_current_user),
    section_service: SectionService = Depends(get_section_service),
) -> ApiResponse[SectionResponse]:
    """Rename or move a section."""
    section = await section_service.update_section(
        section_id, user, title=request.title, order=request.order
    )
    return ApiResponse(
        message="Section updated successfully",
        data=SectionResponse.model_validate(section),
    )


@router.delete("/sections/{section_id}", response_model=ApiResponse[None])
@handle_api_errors("Failed to delete section")
async def delete_section(
    section_id: UUID,
    user: UserModel = Depends(get_current_user),
    section_service: SectionService = Depends(get_section_service),
) -> ApiResponse[None]:
    """Delete a section and its lectures."""
    await section_service.delete_section(section_id, user)
    return ApiResponse(message="Section deleted successfully")
