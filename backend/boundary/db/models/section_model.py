"""
Section ORM model.

An ordered chapter of a course containing lectures.

Dependencies: sqlalchemy, backend.boundary.db.base
System role: Course curriculum structure persistence
"""

from uuid import UUID

from sqlalchemy import ForeignKey, Integer, String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from backend.boundary.db.base import Base, UUIDMixin, TimestampMixin


class SectionModel(Base, UUIDMixin, TimestampMixin):
    """
    Section ORM model.

    Attributes:
        title: Section title
        order: Position within the course (0-based, ascending)
        course_id: Parent course (cascade delete)

    Relationships:
        lectures: One-to-many with LectureModel (cascade delete)
    """

    __tablename__ = "sections"

    title: Mapped[str] = mapped_column(String(255), nullable=False)
    order: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    course_id: Mapped[UUID] = mapped_column(
        ForeignKey("courses.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )

    course = relationship("CourseModel", back_populates="sections")
    lectures = relationship(
        "LectureModel",
        back_populates="section",
        cascade="all, delete-orphan",
        order_by="LectureModel.order",
    )
