"""
Wishlist schemas.

Dependencies: pydantic
System role: Wishlist API contracts
"""

import uuid

from pydantic import BaseModel, ConfigDict, Field

from backend.models.course import CourseSummary


class AddToWishlistRequest(BaseModel):
    """Request schema for adding a course to the wishlist."""

    course_id: uuid.UUID = Field(..., description="Course ID is required")


class WishlistResponse(BaseModel):
    """A user's wishlist; empty when the user never saved a course."""

    model_config = ConfigDict(from_attributes=True)

    user_id: uuid.UUID
    courses: list[CourseSummary] = Field(default_factory=list)


class WishlistStatusResponse(BaseModel):
    """Result of a wishlist membership check."""

    is_in_wishlist: bool
