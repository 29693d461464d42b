"""
Lecture schemas.

Dependencies: pydantic
System role: Lesson API contracts
"""

import uuid
from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field, HttpUrl


class CreateLectureRequest(BaseModel):
    """Request schema for creating a lecture; order defaults to the end of the section."""

    title: str = Field(..., min_length=3, max_length=255, description="Title must be at least 3 characters")
    video_url: HttpUrl | None = Field(None, description="Video URL")
    duration: float | None = Field(None, ge=0, description="Duration in seconds")
    is_preview: bool | None = Field(None, description="Free preview flag")
    order: int | None = Field(None, ge=0)


class UpdateLectureRequest(BaseModel):
    """Request schema for updating a lecture. Only provided fields change."""

    title: str | None = Field(None, min_length=3, max_length=255)
    video_url: HttpUrl | None = None
    duration: float | None = Field(None, ge=0)
    is_preview: bool | None = None
    order: int | None = Field(None, ge=0)


class ReorderLecturesRequest(BaseModel):
    """New lecture order; list position becomes the order value."""

    lecture_ids: list[uuid.UUID] = Field(..., min_length=1, description="Lecture IDs array required")


class LectureResponse(BaseModel):
    """Response schema for lecture operations."""

    model_config = ConfigDict(from_attributes=True)

    id: uuid.UUID
    title: str
    section_id: uuid.UUID
    video_url: str | None
    duration: float | None
    is_preview: bool
    order: int
    created_at: datetime
    updated_at: datetime
