"""
Authentication API endpoints.

Routes:
- POST /auth/register - Create account and receive a token
- POST /auth/login - Exchange credentials for a token
- GET /auth/me - Current user

Dependencies: backend.application.services, backend.models
System role: Identity HTTP API
"""

import logging

from fastapi import APIRouter, Depends

from backend.application.services.auth_service import AuthService
from backend.api.deps.dependencies import get_auth_service, get_current_user
from backend.api.routers.router_utils import handle_api_errors
from backend.boundary.db.models.user_model import UserModel, UserRole
from backend.models.auth import LoginRequest, RegisterRequest, TokenResponse
from backend.models.common import ApiResponse
from backend.models.user import UserResponse

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/auth", tags=["auth"])


@router.post("/register", response_model=ApiResponse[TokenResponse], status_code=201)
@handle_api_errors("Failed to register")
async def register(
    request: RegisterRequest,
    auth_service: AuthService = Depends(get_auth_service),
) -> ApiResponse[TokenResponse]:
    """
    Create a student or instructor account.

    Raises:
        ConflictError(409): Email already registered
    """
    user, token = await auth_service.register(
        name=request.name,
        email=request.email,
        password=request.password,
        role=UserRole(request.role),
    )
    return ApiResponse(
        message="Registration successful",
        data=TokenResponse(user=UserResponse.model_validate(user), access_token=token),
    )


@router.post("/login", response_model=ApiResponse[TokenResponse])
@handle_api_errors("Failed to log in")
async def login(
    request: LoginRequest,
    auth_service: AuthService = Depends(get_auth_service),
) -> ApiResponse[TokenResponse]:
    """
    Log in with email and password.

    Raises:
        AuthenticationError(401): Bad credentials
    """
    user, token = await auth_service.login(email=request.email, password=request.password)
    return ApiResponse(
        message="Login successful",
        data=TokenResponse(user=UserResponse.model_validate(user), access_token=token),
    )


@router.get("/me", response_model=ApiResponse[UserResponse])
async def me(user: UserModel = Depends(get_current_user)) -> ApiResponse[UserResponse]:
    """Get the authenticated user."""
    return ApiResponse(message="User fetched successfully", data=UserResponse.model_validate(user))
