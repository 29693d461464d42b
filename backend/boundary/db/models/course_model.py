"""
Course ORM model.

Represents a course authored by an instructor and organised into
ordered sections of lectures.

Dependencies: sqlalchemy, backend.boundary.db.base
System role: Course persistence for catalogue, authoring and enrollment
"""

import enum
from uuid import UUID

from sqlalchemy import Boolean, Enum, Float, ForeignKey, Integer, Numeric, String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from backend.boundary.db.base import Base, UUIDMixin, TimestampMixin


class CourseLevel(str, enum.Enum):
    """Course difficulty."""

    BEGINNER = "beginner"
    INTERMEDIATE = "intermediate"
    ADVANCED = "advanced"


class CourseModel(Base, UUIDMixin, TimestampMixin):
    """
    Course ORM model.

    Unpublished courses are drafts: only their instructor and admins can
    see them or their lectures.

    Attributes:
        id: UUID primary key (auto-generated)
        title: Course title
        slug: Unique URL slug derived from title
        description: Optional long description
        thumbnail: Optional image URL
        price: Price in the catalogue currency
        is_free: True when the course costs nothing
        level: CourseLevel enum
        published: Visible to the public catalogue
        rating: Average rating (0-5)
        rating_count: Number of ratings received
        instructor_id: Owning instructor
        category_id: Optional category (SET NULL on category deletion)

    Relationships:
        sections: One-to-many with SectionModel (cascade delete)
        enrollments: One-to-many with EnrollmentModel (cascade delete)
    """

    __tablename__ = "courses"

    title: Mapped[str] = mapped_column(String(255), nullable=False)
    slug: Mapped[str] = mapped_column(String(300), nullable=False, unique=True, index=True)
    description: Mapped[str | None] = mapped_column(String(10000), nullable=True, default=None)
    thumbnail: Mapped[str | None] = mapped_column(String(2048), nullable=True, default=None)
    price: Mapped[float] = mapped_column(Numeric(10, 2, asdecimal=False), nullable=False, default=0)
    is_free: Mapped[bool] = mapped_column(Boolean, nullable=False, default=True)
    level: Mapped[CourseLevel] = mapped_column(
        Enum(CourseLevel, native_enum=False, values_callable=lambda e: [m.value for m in e]),
        nullable=False,
        default=CourseLevel.BEGINNER,
    )
    published: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)
    rating: Mapped[float] = mapped_column(Float, nullable=False, default=0.0)
    rating_count: Mapped[int] = mapped_column(Integer, nullable=False, default=0)

    instructor_id: Mapped[UUID] = mapped_column(
        ForeignKey("users.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    category_id: Mapped[UUID | None] = mapped_column(
        ForeignKey("categories.id", ondelete="SET NULL"),
        nullable=True,
        default=None,
        index=True,
    )

    # Relationships
    instructor = relationship("UserModel", back_populates="courses")
    category = relationship("CategoryModel", back_populates="courses")
    sections = relationship(
        "SectionModel",
        back_populates="course",
        cascade="all, delete-orphan",
        order_by="SectionModel.order",
    )
    enrollments = relationship(
        "EnrollmentModel",
        back_populates="course",
        cascade="all, delete-orphan",
    )
