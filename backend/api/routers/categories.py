"""
Category API endpoints.

Routes:
- GET /categories - List categories
- GET /categories/{id} - Get single category
- POST /categories - Create category (admin)
- PUT /categories/{id} - Update category (admin)
- DELETE /categories/{id} - Delete category (admin)

Dependencies: backend.application.services, backend.models
System role: Category management HTTP API
"""

import logging
from uuid import UUID

from fastapi import APIRouter, Depends

from backend.application.services.category_service import CategoryService
from backend.api.deps.dependencies import get_category_service, require_roles
from backend.api.routers.router_utils import handle_api_errors
from backend.boundary.db.models.user_model import UserModel, UserRole
from backend.models.category import (
    CategoryListResponse,
    CategoryResponse,
    CreateCategoryRequest,
    UpdateCategoryRequest,
)
from backend.models.common import ApiResponse

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/categories", tags=["categories"])

require_admin = require_roles(UserRole.ADMIN)


@router.get("", response_model=ApiResponse[CategoryListResponse])
@handle_api_errors("Failed to fetch categories")
async def list_categories(
    category_service: CategoryService = Depends(get_category_service),
) -> ApiResponse[CategoryListResponse]:
    """List all categories sorted by name."""
    categories = await category_service.list_categories()
    return ApiResponse(
        message="Categories fetched successfully",
        data=CategoryListResponse(
            categories=[CategoryResponse.model_validate(c) for c in categories]
        ),
    )


@router.get("/{category_id}", response_model=ApiResponse[CategoryResponse])
@handle_api_errors("Failed to fetch category")
async def get_category(
    category_id: UUID,
    category_service: CategoryService = Depends(get_category_service),
) -> ApiResponse[CategoryResponse]:
    """Get single category by ID."""
    category = await category_service.get_category(category_id)
    return ApiResponse(
        message="Category fetched successfully",
        data=CategoryResponse.model_validate(category),
    )


@router.post("", response_model=ApiResponse[CategoryResponse], status_code=201)
@handle_api_errors("Failed to create category")
async def create_category(
    request: CreateCategoryRequest,
    _admin: UserModel = Depends(require_admin),
    category_service: CategoryService = Depends(get_category_service),
) -> ApiResponse[CategoryResponse]:
    """
    Create category.

    Raises:
        ConflictError(409): Name already used
    """
    category = await category_service.create_category(
        name=request.name, description=request.description
    )
    return ApiResponse(
        message="Category created successfully",
        data=CategoryResponse.model_validate(category),
    )


@router.put("/{category_id}", response_model=ApiResponse[CategoryResponse])
@handle_api_errors("Failed to update category")
async def update_category(
    category_id: UUID,
    request: UpdateCategoryRequest,
    _admin: UserModel = Depends(require_admin),
    category_service: CategoryService = Depends(get_category_service),
) -> ApiResponse[CategoryResponse]:
    """Update category name and/or description."""
    category = await category_service.update_category(
        category_id, name=request.name, description=request.description
    )
    return ApiResponse(
        message="Category updated successfully",
        data=CategoryResponse.model_validate(category),
    )


@router.delete("/{category_id}", response_model=ApiResponse[None])
@handle_api_errors("Failed to delete category")
async def delete_category(
    category_id: UUID,
    _admin: UserModel = Depends(require_admin),
    category_service: CategoryService = Depends(get_category_service),
) -> ApiResponse[None]:
    """Delete category; its courses become uncategorised."""
    await category_service.delete_category(category_id)
    return ApiResponse(message="Category deleted successfully")
