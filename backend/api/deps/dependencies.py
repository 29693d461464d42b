"""
Dependency injection container.

Factory functions for FastAPI dependencies: request-scoped services and
bearer token authentication.

Dependencies: backend.configs, backend.application, backend.boundary
System role: DI container for service injection
"""

import logging
from typing import Callable

from fastapi import Depends
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from sqlalchemy.ext.asyncio import AsyncSession

from backend.boundary.db import get_async_db
from backend.boundary.db.models.user_model import UserModel, UserRole
from backend.application.services import (
    AuthService,
    CategoryService,
    CourseService,
    EnrollmentService,
    LectureService,
    SectionService,
    WishlistService,
)
from backend.core.exceptions import AuthenticationError, ForbiddenError

logger = logging.getLogger(__name__)

bearer_scheme = HTTPBearer(auto_error=False)


def get_auth_service(db: AsyncSession = Depends(get_async_db)) -> AuthService:
    """
    Get auth service instance.

    Args:
        db: Async database session (injected via Depends)

    Returns:
        AuthService: Auth service instance
    """
    return AuthService(db=db)


def get_category_service(db: AsyncSession = Depends(get_async_db)) -> CategoryService:
    """Get category service instance."""
    return CategoryService(db=db)


def get_course_service(db: AsyncSession = Depends(get_async_db)) -> CourseService:
    """
    Get course service instance.

    Args:
        db: Async database session (injected via Depends)

    Returns:
        CourseService: Course service instance
    """
    return CourseService(db=db)


def get_section_service(db: AsyncSession = Depends(get_async_db)) -> SectionService:
    """Get section service instance."""
    return SectionService(db=db)


def get_lecture_service(db: AsyncSession = Depends(get_async_db)) -> LectureService:
    """Get lecture service instance."""
    return LectureService(db=db)


def get_enrollment_service(db: AsyncSession = Depends(get_async_db)) -> EnrollmentService:
    """Get enrollment service instance."""
    return EnrollmentService(db=db)


def get_wishlist_service(db: AsyncSession = Depends(get_async_db)) -> WishlistService:
    """Get wishlist service instance."""
    return WishlistService(db=db)


async def get_current_user(
    credentials: HTTPAuthorizationCredentials | None = Depends(bearer_scheme),
    auth_service: AuthService = Depends(get_auth_service),
) -> UserModel:
    """
    Resolve the caller from the ``Authorization: Bearer <token>`` header.

    Raises:
        AuthenticationError: Header missing, token invalid or expired, or user gone
    """
    if credentials is None or not credentials.credentials:
        raise AuthenticationError("Authentication required")
    return await auth_service.resolve_token(credentials.credentials)


async def get_optional_user(
    credentials: HTTPAuthorizationCredentials | None = Depends(bearer_scheme),
    auth_service: AuthService = Depends(get_auth_service),
) -> UserModel | None:
    """
    Resolve the caller if a bearer token was sent.

    A missing header means an anonymous caller; a bad token is still rejected.
    """
    if credentials is None or not credentials.credentials:
        return None
    return await auth_service.resolve_token(credentials.credentials)


def require_roles(*roles: UserRole) -> Callable:
    """
    Build a dependency admitting only users holding one of ``roles``.

    Usage:
        user: UserModel = Depends(require_roles(UserRole.ADMIN))
    """

    async def _require_roles(user: UserModel = Depends(get_current_user)) -> UserModel:
        if user.role not in roles:
            logger.warning(
                "Role check failed",
                extra={"user_id": str(user.id), "role": user.role.value},
            )
            raise ForbiddenError(
                "You do not have permission to perform this action",
                details={"required_roles": [role.value for role in roles]},
            )
        return user

    return _require_roles
