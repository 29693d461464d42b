"""
Health check API endpoints.

Routes: GET /health, GET /health/db

Dependencies: backend.boundary
System role: Health check HTTP API
"""

import logging

from fastapi import APIRouter, Depends, status
from fastapi.responses import JSONResponse
from pydantic import BaseModel
from sqlalchemy import text
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from backend.boundary.db import get_async_db
from backend.models.common import ApiResponse, ErrorResponse

logger = logging.getLogger(__name__)


class HealthResponse(BaseModel):
    """Health check response model."""

    status: str


router = APIRouter(prefix="/health", tags=["health"])


@router.get("", response_model=ApiResponse[HealthResponse])
async def health_check() -> ApiResponse[HealthResponse]:
    """Basic health check."""
    return ApiResponse(message="Server healthy", data=HealthResponse(status="healthy"))


@router.get(
    "/db",
    response_model=ApiResponse[HealthResponse],
    responses={503: {"model": ErrorResponse}},
)
async def health_check_db(db: AsyncSession = Depends(get_async_db)):
    """Database health check."""
    try:
        await db.execute(text("SELECT 1"))
    except (SQLAlchemyError, OSError) as e:
        await db.rollback()
        logger.error("Database health check failed", extra={"error": str(e)})
        return JSONResponse(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            content=ErrorResponse(message="Database unavailable").model_dump(exclude_none=True),
        )
    return ApiResponse(message="Database connection OK", data=HealthResponse(status="healthy"))
