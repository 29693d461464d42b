"""
Course domain models and schemas.

Request/response schemas for course operations.

Dependencies: pydantic
System role: Course API contracts
"""

import uuid
from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field

from backend.boundary.db.models.course_model import CourseLevel
from backend.models.category import CategorySummary
from backend.models.user import UserSummary


class CreateCourseRequest(BaseModel):
    """Request schema for creating a new course."""

    title: str = Field(..., min_length=3, max_length=255, description="Course title")
    description: str | None = Field(None, max_length=10000, description="Course description")
    thumbnail: str | None = Field(None, max_length=2048, description="Thumbnail image URL")
    price: float = Field(0, ge=0, description="Course price")
    is_free: bool | None = Field(None, description="Defaults to price == 0")
    level: CourseLevel = Field(CourseLevel.BEGINNER, description="Difficulty level")
    category_id: uuid.UUID | None = Field(None, description="Category the course belongs to")


class UpdateCourseRequest(BaseModel):
    """Request schema for updating a course. Only provided fields change."""

    title: str | None = Field(None, min_length=3, max_length=255)
    description: str | None = Field(None, max_length=10000)
    thumbnail: str | None = Field(None, max_length=2048)
    price: float | None = Field(None, ge=0)
    is_free: bool | None = None
    level: CourseLevel | None = None
    category_id: uuid.UUID | None = None


class PublishCourseRequest(BaseModel):
    """Request schema for publishing or unpublishing a course."""

    published: bool


class CourseSummary(BaseModel):
    """Course card embedded in wishlists and enrollments."""

    model_config = ConfigDict(from_attributes=True)

    id: uuid.UUID
    title: str
    slug: str
    thumbnail: str | None
    price: float
    is_free: bool
    level: CourseLevel
    rating: float
    rating_count: int
    instructor: UserSummary
    category: CategorySummary | None = None


class CourseResponse(CourseSummary):
    """Response schema for course operations."""

    description: str | None
    published: bool
    created_at: datetime
    updated_at: datetime


class CourseListResponse(BaseModel):
    """Catalogue page payload."""

    courses: list[CourseResponse]
    total: int
