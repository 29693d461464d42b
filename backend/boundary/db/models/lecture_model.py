"""
Lecture ORM model.

A single video lesson inside a section.

Dependencies: sqlalchemy, backend.boundary.db.base
System role: Lesson content persistence
"""

from uuid import UUID

from sqlalchemy import Boolean, Float, ForeignKey, Integer, String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from backend.boundary.db.base import Base, UUIDMixin, TimestampMixin


class LectureModel(Base, UUIDMixin, TimestampMixin):
    """
    Lecture ORM model.

    Preview lectures of a published course are open to everyone; all
    other lectures require enrollment, ownership or the admin role.

    Attributes:
        title: Lecture title
        video_url: Optional video location
        duration: Optional length in seconds
        is_preview: Free preview flag
        order: Position within the section (0-based, ascending)
        section_id: Parent section (cascade delete)
    """

    __tablename__ = "lectures"

    title: Mapped[str] = mapped_column(String(255), nullable=False)
    video_url: Mapped[str | None] = mapped_column(String(2048), nullable=True, default=None)
    duration: Mapped[float | None] = mapped_column(Float, nullable=True, default=None)
    is_preview: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)
    order: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    section_id: Mapped[UUID] = mapped_column(
        ForeignKey("sections.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )

    section = relationship("SectionModel", back_populates="lectures")
