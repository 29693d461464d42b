"""
User ORM model.

Represents an account that can learn, teach or administer the catalogue.

Dependencies: sqlalchemy, backend.boundary.db.base
System role: Identity and role persistence for authorization checks
"""

import enum

from sqlalchemy import String, Enum
from sqlalchemy.orm import Mapped, mapped_column, relationship

from backend.boundary.db.base import Base, UUIDMixin, TimestampMixin


class UserRole(str, enum.Enum):
    """
    Account roles.

    STUDENT: Browses, enrolls and wishlists courses
    INSTRUCTOR: Additionally authors courses, sections and lectures
    ADMIN: Full access, including category management
    """

    STUDENT = "student"
    INSTRUCTOR = "instructor"
    ADMIN = "admin"


class UserModel(Base, UUIDMixin, TimestampMixin):
    """
    User ORM model.

    Attributes:
        id: UUID primary key (auto-generated)
        name: Display name
        email: Login email (unique)
        password_hash: Salted scrypt digest, never exposed by the API
        role: UserRole enum
        avatar: Optional avatar URL

    Relationships:
        courses: Courses this user teaches (cascade delete)
        enrollments: Courses this user is enrolled in (cascade delete)
    """

    __tablename__ = "users"

    name: Mapped[str] = mapped_column(String(255), nullable=False)
    email: Mapped[str] = mapped_column(String(320), nullable=False, unique=True, index=True)
    password_hash: Mapped[str] = mapped_column(String(255), nullable=False)
    role: Mapped[UserRole] = mapped_column(
        Enum(UserRole, native_enum=False, values_callable=lambda e: [m.value for m in e]),
        nullable=False,
        default=UserRole.STUDENT,
    )
    avatar: Mapped[str | None] = mapped_column(String(2048), nullable=True, default=None)

    courses = relationship(
        "CourseModel",
        back_populates="instructor",
        cascade="all, delete-orphan",
    )
    enrollments = relationship(
        "EnrollmentModel",
        back_populates="user",
        cascade="all, delete-orphan",
    )
