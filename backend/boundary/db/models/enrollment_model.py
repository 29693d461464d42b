"""
Enrollment ORM model.

Links a learner to a course and tracks completion.

Dependencies: sqlalchemy, backend.boundary.db.base
System role: Course access and progress persistence
"""

from datetime import datetime
from uuid import UUID

from sqlalchemy import Boolean, DateTime, Float, ForeignKey, UniqueConstraint
from sqlalchemy.orm import Mapped, mapped_column, relationship

from backend.boundary.db.base import Base, UUIDMixin, TimestampMixin


class EnrollmentModel(Base, UUIDMixin, TimestampMixin):
    """
    Enrollment ORM model.

    A user is enrolled in a course at most once (unique user_id, course_id).
    created_at doubles as the enrollment date.

    Attributes:
        user_id: Enrolled learner
        course_id: Course enrolled in
        progress: Percentage complete (0-100)
        completed: Whether the learner finished the course
        completed_at: When the course was marked complete
    """

    __tablename__ = "enrollments"
    __table_args__ = (
        UniqueConstraint("user_id", "course_id", name="uq_enrollments_user_course"),
    )

    user_id: Mapped[UUID] = mapped_column(
        ForeignKey("users.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    course_id: Mapped[UUID] = mapped_column(
        ForeignKey("courses.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    progress: Mapped[float] = mapped_column(Float, nullable=False, default=0.0)
    completed: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)
    completed_at: Mapped[datetime | None] = mapped_column(
        DateTime(timezone=True), nullable=True, default=None
    )

    user = relationship("UserModel", back_populates="enrollments")
    course = relationship("CourseModel", back_populates="enrollments")
