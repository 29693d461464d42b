"""
User schemas.

Dependencies: pydantic
System role: Account API contracts
"""

import uuid
from datetime import datetime

from pydantic import BaseModel, ConfigDict

from backend.boundary.db.models.user_model import UserRole


class UserResponse(BaseModel):
    """Public view of an account; never includes the password hash."""

    model_config = ConfigDict(from_attributes=True)

    id: uuid.UUID
    name: str
    email: str
    role: UserRole
    avatar: str | None = None
    created_at: datetime


class UserSummary(BaseModel):
    """Minimal user reference embedded in other resources."""

    model_config = ConfigDict(from_attributes=True)

    id: uuid.UUID
    name: str
    avatar: str | None = None
