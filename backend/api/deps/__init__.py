"""API-specific dependencies."""

# Re-export common dependencies
from .dependencies import (
    get_auth_service,
    get_category_service,
    get_course_service,
    get_current_user,
    get_enrollment_service,
    get_lecture_service,
    get_optional_user,
    get_section_service,
    get_wishlist_service,
    require_roles,
)

__all__ = [
    "get_auth_service",
    "get_category_service",
    "get_course_service",
    "get_current_user",
    "get_enrollment_service",
    "get_lecture_service",
    "get_optional_user",
    "get_section_service",
    "get_wishlist_service",
    "require_roles",
]
