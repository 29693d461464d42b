"""
Category schemas.

Dependencies: pydantic
System role: Category API contracts
"""

import uuid
from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field


class CreateCategoryRequest(BaseModel):
    """Request schema for creating a category."""

    name: str = Field(..., min_length=2, max_length=255, description="Category name")
    description: str | None = Field(None, max_length=4096, description="Category description")


class UpdateCategoryRequest(BaseModel):
    """Request schema for updating a category."""

    name: str | None = Field(None, min_length=2, max_length=255, description="Category name")
    description: str | None = Field(None, max_length=4096, description="Category description")


class CategoryResponse(BaseModel):
    """Response schema for category operations."""

    model_config = ConfigDict(from_attributes=True)

    id: uuid.UUID
    name: str
    slug: str
    description: str | None
    created_at: datetime
    updated_at: datetime


class CategorySummary(BaseModel):
    """Minimal category reference embedded in courses."""

    model_config = ConfigDict(from_attributes=True)

    id: uuid.UUID
    name: str
    slug: str


class CategoryListResponse(BaseModel):
    """List payload shaped as ``{"categories": [...]}``."""

    categories: list[CategoryResponse]
