"""
Database boundary layer: ORM models, CRUD operations, and connection management.

Exports:
  - Base, UUIDMixin, TimestampMixin: Model building blocks
  - get_async_engine(), get_async_session_factory(), get_async_db(): Async connection management
  - UserModel, CategoryModel, CourseModel, SectionModel, LectureModel,
    EnrollmentModel, WishlistModel: Domain entities
  - UserRole, CourseLevel: Enum types
  - *_crud: CRUD operation singletons

Dependencies: sqlalchemy, backend.configs
System role: Database adapter providing persistent storage for the course
catalogue, curriculum, enrollments and wishlists.
"""

from backend.boundary.db.base import Base, TimestampMixin, UUIDMixin
from backend.boundary.db.connection import (
    dispose_engine,
    get_async_db,
    get_async_engine,
    get_async_session_factory,
)
from backend.boundary.db.models import (
    CategoryModel,
    CourseLevel,
    CourseModel,
    EnrollmentModel,
    LectureModel,
    SectionModel,
    UserModel,
    UserRole,
    WishlistModel,
)
from backend.boundary.db.CRUD import (
    BaseCRUD,
    category_crud,
    course_crud,
    enrollment_crud,
    lecture_crud,
    section_crud,
    user_crud,
    wishlist_crud,
)

__all__ = [
    # Base classes
    "Base",
    "TimestampMixin",
    "UUIDMixin",
    # Connection
    "dispose_engine",
    "get_async_db",
    "get_async_engine",
    "get_async_session_factory",
    # Models
    "UserModel",
    "UserRole",
    "CategoryModel",
    "CourseModel",
    "CourseLevel",
    "SectionModel",
    "LectureModel",
    "EnrollmentModel",
    "WishlistModel",
    # CRUD
    "BaseCRUD",
    "user_crud",
    "category_crud",
    "course_crud",
    "section_crud",
    "lecture_crud",
    "enrollment_crud",
    "wishlist_crud",
]
