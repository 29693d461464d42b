"""
API routes module.

FastAPI routers for all HTTP endpoints.
"""

from fastapi import APIRouter

from .routers import (
    auth_router,
    categories_router,
    courses_router,
    enrollments_router,
    health_router,
    lectures_router,
    sections_router,
    wishlist_router,
)

api_router = APIRouter()

# Include all routers
api_router.include_router(health_router)
api_router.include_router(auth_router)
api_router.include_router(categories_router)
api_router.include_router(courses_router)
api_router.include_router(sections_router)
api_router.include_router(lectures_router)
api_router.include_router(enrollments_router)
api_router.include_router(wishlist_router)

__all__ = ["api_router"]
