"""Service orchestrators."""

from .auth_service import AuthService
from .category_service import CategoryService
from .course_service import CourseService
from .enrollment_service import EnrollmentService
from .lecture_service import LectureService
from .section_service import SectionService
from .wishlist_service import WishlistService

__all__ = [
    "AuthService",
    "CategoryService",
    "CourseService",
    "EnrollmentService",
    "LectureService",
    "SectionService",
    "WishlistService",
]
