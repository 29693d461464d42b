"""
CRUD operations for database models.

Exports base CRUD class and model-specific CRUD implementations
with pre-instantiated singletons for direct use.

Usage:
    from backend.boundary.db.CRUD import course_crud, lecture_crud

    # Use singleton instances
    course = await course_crud.get_with_relations(db, course_id)

    # Or instantiate classes directly for custom behavior
    from backend.boundary.db.CRUD import CourseCRUD
    custom_crud = CourseCRUD()
"""

from backend.boundary.db.CRUD.base_crud import BaseCRUD
from backend.boundary.db.CRUD.user_crud import UserCRUD, user_crud
from backend.boundary.db.CRUD.category_crud import CategoryCRUD, category_crud
from backend.boundary.db.CRUD.course_crud import CourseCRUD, course_crud
from backend.boundary.db.CRUD.section_crud import SectionCRUD, section_crud
from backend.boundary.db.CRUD.lecture_crud import LectureCRUD, lecture_crud
from backend.boundary.db.CRUD.enrollment_crud import EnrollmentCRUD, enrollment_crud
from backend.boundary.db.CRUD.wishlist_crud import WishlistCRUD, wishlist_crud

__all__ = [
    "BaseCRUD",
    "UserCRUD",
    "user_crud",
    "CategoryCRUD",
    "category_crud",
    "CourseCRUD",
    "course_crud",
    "SectionCRUD",
    "section_crud",
    "LectureCRUD",
    "lecture_crud",
    "EnrollmentCRUD",
    "enrollment_crud",
    "WishlistCRUD",
    "wishlist_crud",
]
