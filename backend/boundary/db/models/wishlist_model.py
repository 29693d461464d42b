"""
Wishlist ORM model.

One wishlist per user, holding a set of courses.

Dependencies: sqlalchemy, backend.boundary.db.base
System role: Saved-for-later course persistence
"""

from uuid import UUID

from sqlalchemy import Column, DateTime, ForeignKey, Table
from sqlalchemy.orm import Mapped, mapped_column, relationship

from backend.boundary.db.base import Base, UUIDMixin, TimestampMixin, utcnow

# Composite primary key keeps course ids unique within a wishlist.
wishlist_courses = Table(
    "wishlist_courses",
    Base.metadata,
    Column("wishlist_id", ForeignKey("wishlists.id", ondelete="CASCADE"), primary_key=True),
    Column("course_id", ForeignKey("courses.id", ondelete="CASCADE"), primary_key=True),
    Column("added_at", DateTime(timezone=True), nullable=False, default=utcnow),
)


class WishlistModel(Base, UUIDMixin, TimestampMixin):
    """
    Wishlist ORM model.

    Attributes:
        user_id: Owner (unique, cascade delete)

    Relationships:
        courses: Many-to-many with CourseModel through wishlist_courses
    """

    __tablename__ = "wishlists"

    user_id: Mapped[UUID] = mapped_column(
        ForeignKey("users.id", ondelete="CASCADE"),
        nullable=False,
        unique=True,
    )

    courses = relationship(
        "CourseModel",
        secondary=wishlist_courses,
        order_by=wishlist_courses.c.added_at,
    )
