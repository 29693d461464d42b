"""
Wishlist API endpoints.

All routes require authentication.

Routes:
- GET /wishlist - Caller's wishlist
- POST /wishlist - Add course
- DELETE /wishlist - Clear wishlist
- GET /wishlist/check/{course_id} - Membership status
- DELETE /wishlist/{course_id} - Remove course

Dependencies: backend.application.services, backend.models
System role: Wishlist HTTP API
"""

import logging
from uuid import UUID

from fastapi import APIRouter, Depends

from backend.application.services.wishlist_service import WishlistService
from backend.api.deps.dependencies import get_current_user, get_wishlist_service
from backend.api.routers.router_utils import handle_api_errors
from backend.boundary.db.models.user_model import UserModel
from backend.models.common import ApiResponse
from backend.models.wishlist import (
    AddToWishlistRequest,
    WishlistResponse,
    WishlistStatusResponse,
)

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/wishlist", tags=["wishlist"])


@router.get("", response_model=ApiResponse[WishlistResponse])
@handle_api_errors("Failed to fetch wishlist")
async def get_my_wishlist(
    user: UserModel = Depends(get_current_user),
    wishlist_service: WishlistService = Depends(get_wishlist_service),
) -> ApiResponse[WishlistResponse]:
    """Get the caller's wishlist; empty if they never saved a course."""
    wishlist = await wishlist_service.get_wishlist(user)
    data = (
        WishlistResponse.model_validate(wishlist)
        if wishlist is not None
        else WishlistResponse(user_id=user.id, courses=[])
    )
    return ApiResponse(message="Wishlist fetched successfully", data=data)


@router.post("", response_model=ApiResponse[WishlistResponse], status_code=201)
@handle_api_errors("Failed to add to wishlist")
async def add_to_wishlist(
    request: AddToWishlistRequest,
    user: UserModel = Depends(get_current_user),
    wishlist_service: WishlistService = Depends(get_wishlist_service),
) -> ApiResponse[WishlistResponse]:
    """
    Save a course to the caller's wishlist.

    Raises:
        NotFoundError(404): Course not found
        ConflictError(409): Course already in wishlist
    """
    wishlist = await wishlist_service.add_course(user, request.course_id)
    return ApiResponse(
        message="Course added to wishlist",
        data=WishlistResponse.model_validate(wishlist),
    )


@router.delete("", response_model=ApiResponse[None])
@handle_api_errors("Failed to clear wishlist")
async def clear_wishlist(
    user: UserModel = Depends(get_current_user),
    wishlist_service: WishlistService = Depends(get_wishlist_service),
) -> ApiResponse[None]:
    """Remove every course from the caller's wishlist."""
    removed = await wishlist_service.clear(user)
    if removed is None:
        return ApiResponse(message="Wishlist is already empty")
    return ApiResponse(message=f"Wishlist cleared ({removed} items removed)")


@router.get("/check/{course_id}", response_model=ApiResponse[WishlistStatusResponse])
@handle_api_errors("Failed to check wishlist status")
async def check_wishlist(
    course_id: UUID,
    user: UserModel = Depends(get_current_user),
    wishlist_service: WishlistService = Depends(get_wishlist_service),
) -> ApiResponse[WishlistStatusResponse]:
    """Check whether a course is in the caller's wishlist."""
    is_in_wishlist = await wishlist_service.is_in_wishlist(user, course_id)
    return ApiResponse(
        message="Wishlist status checked",
        data=WishlistStatusResponse(is_in_wishlist=is_in_wishlist),
    )


@router.delete("/{course_id}", response_model=ApiResponse[None])
@handle_api_errors("Failed to remove from wishlist")
async def remove_from_wishlist(
    course_id: UUID,
    user: UserModel = Depends(get_current_user),
    wishlist_service: WishlistService = Depends(get_wishlist_service),
) -> ApiResponse[None]:
    """
    Remove a course from the caller's wishlist.

    Raises:
        NotFoundError(404): Course not in wishlist
    """
    await wishlist_service.remove_course(user, course_id)
    return ApiResponse(message="Course removed from wishlist")
