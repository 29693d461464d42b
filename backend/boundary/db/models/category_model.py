"""
Category ORM model.

Groups courses in the catalogue. Managed by administrators.

Dependencies: sqlalchemy, backend.boundary.db.base
System role: Catalogue taxonomy persistence
"""

from sqlalchemy import String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from backend.boundary.db.base import Base, UUIDMixin, TimestampMixin


class CategoryModel(Base, UUIDMixin, TimestampMixin):
    """
    Category ORM model.

    Deleting a category leaves its courses uncategorised
    (courses.category_id ON DELETE SET NULL).

    Attributes:
        name: Unique display name
        slug: Unique URL slug derived from name
        description: Optional description
    """

    __tablename__ = "categories"

    name: Mapped[str] = mapped_column(String(255), nullable=False, unique=True)
    slug: Mapped[str] = mapped_column(String(255), nullable=False, unique=True, index=True)
    description: Mapped[str | None] = mapped_column(String(4096), nullable=True, default=None)

    courses = relationship(
        "CourseModel",
        back_populates="category",
    )
