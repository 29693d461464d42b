"""
Authentication schemas.

Request/response schemas for registration and login.

Dependencies: pydantic (email extra)
System role: Auth API contracts
"""

from typing import Literal

from pydantic import BaseModel, EmailStr, Field

from backend.models.user import UserResponse


class RegisterRequest(BaseModel):
    """Request schema for self-registration. Admin accounts cannot be self-registered."""

    name: str = Field(..., min_length=2, max_length=255, description="Display name")
    email: EmailStr = Field(..., description="Login email")
    password: str = Field(..., min_length=6, max_length=128, description="Plaintext password")
    role: Literal["student", "instructor"] = Field("student", description="Requested role")


class LoginRequest(BaseModel):
    """Request schema for login."""

    email: EmailStr
    password: str = Field(..., min_length=1)


class TokenResponse(BaseModel):
    """Issued access token together with the account it belongs to."""

    user: UserResponse
    access_token: str
    token_type: str = "bearer"
