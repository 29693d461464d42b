"""
Enrollment schemas.

Dependencies: pydantic
System role: Enrollment API contracts
"""

import uuid
from datetime import datetime, timezone

from pydantic import AliasChoices, BaseModel, ConfigDict, Field, field_validator

from backend.models.course import CourseSummary


class EnrollRequest(BaseModel):
    """Request schema for enrolling in a course."""

    course_id: uuid.UUID = Field(..., description="Course ID is required")


class EnrollmentTimestamps(BaseModel):
    """
    Enrollment and completion times, always serialized as UTC.

    SQLite hands back naive datetimes; they were stored as UTC and get the
    offset reattached.
    """

    model_config = ConfigDict(from_attributes=True)

    completed_at: datetime | None
    enrolled_at: datetime = Field(validation_alias=AliasChoices("created_at", "enrolled_at"))

    @field_validator("enrolled_at", "completed_at")
    @classmethod
    def assume_utc(cls, value: datetime | None) -> datetime | None:
        if value is not None and value.tzinfo is None:
            return value.replace(tzinfo=timezone.utc)
        return value


class EnrollmentResponse(EnrollmentTimestamps):
    """Enrollment with the enrolled course."""

    id: uuid.UUID
    user_id: uuid.UUID
    course_id: uuid.UUID
    progress: float
    completed: bool
    course: CourseSummary | None = None


class StudentSummary(BaseModel):
    """Enrolled learner as seen by the course instructor."""

    model_config = ConfigDict(from_attributes=True)

    id: uuid.UUID
    name: str
    email: str
    avatar: str | None = None


class CourseEnrollmentResponse(EnrollmentTimestamps):
    """Enrollment row in an instructor's roster."""

    id: uuid.UUID
    progress: float
    completed: bool
    user: StudentSummary


class CourseEnrollmentsResponse(BaseModel):
    """Roster payload."""

    enrollments: list[CourseEnrollmentResponse]
    total: int


class EnrollmentStatusResponse(BaseModel):
    """Result of an enrollment check."""

    is_enrolled: bool
