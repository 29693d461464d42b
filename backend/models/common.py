"""
Common response models and utilities.

Uniform envelope wrapping every API response, success or failure.

Dependencies: pydantic
System role: Common API response structures
"""

from typing import Generic, TypeVar

from pydantic import BaseModel, Field

T = TypeVar("T")


class ApiResponse(BaseModel, Generic[T]):
    """Success envelope: ``{"success": true, "message": ..., "data": ...}``."""

    success: bool = True
    message: str
    data: T | None = None


class ErrorDetail(BaseModel):
    """One field-level validation problem."""

    field: str
    message: str
    type: str


class ErrorResponse(BaseModel):
    """Failure envelope: ``{"success": false, "message": ..., "errors": [...]}``."""

    success: bool = False
    message: str = Field(description="Error message")
    errors: list[ErrorDetail] | None = Field(default=None, description="Validation problems")
