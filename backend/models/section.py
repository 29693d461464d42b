"""
Section schemas.

Dependencies: pydantic
System role: Course curriculum API contracts
"""

import uuid
from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field


class CreateSectionRequest(BaseModel):
    """Request schema for creating a section; order defaults to the end of the course."""

    title: str = Field(..., min_length=3, max_length=255)
    order: int | None = Field(None, ge=0)


class UpdateSectionRequest(BaseModel):
    """Request schema for updating a section."""

    title: str | None = Field(None, min_length=3, max_length=255)
    order: int | None = Field(None, ge=0)


class ReorderSectionsRequest(BaseModel):
    """New section order; list position becomes the order value."""

    section_ids: list[uuid.UUID] = Field(..., min_length=1, description="Section IDs array required")


class SectionResponse(BaseModel):
    """Response schema for section operations."""

    model_config = ConfigDict(from_attributes=True)

    id: uuid.UUID
    title: str
    order: int
    course_id: uuid.UUID
    created_at: datetime
    updated_at: datetime
