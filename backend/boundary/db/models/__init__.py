"""
Database models package.

Exports:
  - UserModel, UserRole: Accounts and their roles
  - CategoryModel: Catalogue categories
  - CourseModel, CourseLevel: Courses and difficulty enum
  - SectionModel, LectureModel: Course curriculum
  - EnrollmentModel: Learner-course links
  - WishlistModel, wishlist_courses: Saved courses per user

Dependencies: sqlalchemy, backend.boundary.db.base
System role: Database model definitions for domain entities
"""

from backend.boundary.db.models.user_model import UserModel, UserRole
from backend.boundary.db.models.category_model import CategoryModel
from backend.boundary.db.models.course_model import CourseModel, CourseLevel
from backend.boundary.db.models.section_model import SectionModel
from backend.boundary.db.models.lecture_model import LectureModel
from backend.boundary.db.models.enrollment_model import EnrollmentModel
from backend.boundary.db.models.wishlist_model import WishlistModel, wishlist_courses

__all__ = [
    "UserModel",
    "UserRole",
    "CategoryModel",
    "CourseModel",
    "CourseLevel",
    "SectionModel",
    "LectureModel",
    "EnrollmentModel",
    "WishlistModel",
    "wishlist_courses",
]
